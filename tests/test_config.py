"""
test_config.py — Tests for config loading and validation.

We write a temporary TOML file in each test so we don't depend on
a real config.toml existing in the project.
"""

import pytest
from weather_dashboard.config import DEFAULT_CONFIG, default_config, load_config


VALID_TOML = """
[provider]
archive_url = "https://archive-api.open-meteo.com/v1/archive"
timeout_seconds = 15

[table]
page_size = 20

[location]
latitude = 51.5074
longitude = -0.1278

[log]
path = "logs/weather_dashboard.log"
"""


def test_load_valid_config(tmp_path):
    """A valid config file should load without error."""
    config_file = tmp_path / "config.toml"
    config_file.write_text(VALID_TOML)

    config = load_config(config_file)

    assert config["provider"]["timeout_seconds"] == 15
    assert config["table"]["page_size"] == 20
    assert config["location"]["latitude"] == 51.5074


def test_location_section_is_optional(tmp_path):
    """[location] only pre-fills the form, so it may be left out."""
    config_file = tmp_path / "config.toml"
    config_file.write_text(VALID_TOML.split("[location]")[0] + '[log]\npath = "x.log"\n')

    config = load_config(config_file)

    assert config["location"] == {}


def test_missing_file_raises(tmp_path):
    """A missing config file should raise FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nonexistent.toml")


def test_missing_section_raises(tmp_path):
    """A config without a required section should raise ValueError."""
    bad_toml = "[table]\npage_size = 10\n"
    config_file = tmp_path / "config.toml"
    config_file.write_text(bad_toml)

    with pytest.raises(ValueError, match="Missing required config section"):
        load_config(config_file)


def test_missing_key_raises(tmp_path):
    """A config missing a required key inside a section should raise ValueError."""
    # Missing 'timeout_seconds' in [provider]
    bad_toml = """
[provider]
archive_url = "https://archive-api.open-meteo.com/v1/archive"

[table]
page_size = 10

[log]
path = "logs/weather_dashboard.log"
"""
    config_file = tmp_path / "config.toml"
    config_file.write_text(bad_toml)

    with pytest.raises(ValueError, match="timeout_seconds"):
        load_config(config_file)


def test_unsupported_page_size_raises(tmp_path):
    config_file = tmp_path / "config.toml"
    config_file.write_text(VALID_TOML.replace("page_size = 20", "page_size = 25"))

    with pytest.raises(ValueError, match="page_size"):
        load_config(config_file)


def test_non_positive_timeout_raises(tmp_path):
    config_file = tmp_path / "config.toml"
    config_file.write_text(VALID_TOML.replace("timeout_seconds = 15", "timeout_seconds = 0"))

    with pytest.raises(ValueError, match="timeout_seconds"):
        load_config(config_file)


def test_default_config_is_a_fresh_copy():
    """Mutating the returned defaults must not leak into DEFAULT_CONFIG."""
    config = default_config()
    config["table"]["page_size"] = 50
    assert DEFAULT_CONFIG["table"]["page_size"] == 10
    assert default_config()["provider"]["timeout_seconds"] == 30
