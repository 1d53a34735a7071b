"""
Unit tests for the settings file loader.
"""

import pytest

from uptime_reporter.config.constants import DEFAULT_INTERVAL_SECONDS
from uptime_reporter.config.settings import load_settings, parse_settings
from uptime_reporter.errors import SettingsError

VALID_SETTINGS = """\
settings:
  app:
    interval_seconds: 1
  websites:
    urls:
      - http://ok.example
      - http://down.example
"""


def test_load_settings_should_parse_interval_and_ordered_urls(tmp_path) -> None:
    # Arrange
    path = tmp_path / "Config.yaml"
    path.write_text(VALID_SETTINGS)

    # Act
    settings = load_settings(str(path))

    # Assert
    assert settings.app.interval_seconds == 1
    assert settings.websites.urls == ("http://ok.example", "http://down.example")


def test_load_settings_should_return_defaults_when_file_is_missing(tmp_path) -> None:
    # Act
    settings = load_settings(str(tmp_path / "absent.yaml"))

    # Assert
    assert settings.app.interval_seconds == DEFAULT_INTERVAL_SECONDS
    assert settings.websites.urls == ()


def test_load_settings_should_raise_on_invalid_yaml(tmp_path) -> None:
    # Arrange
    path = tmp_path / "Config.yaml"
    path.write_text("settings: [unclosed")

    # Act / Assert
    with pytest.raises(SettingsError, match="Invalid YAML"):
        load_settings(str(path))


def test_load_settings_should_raise_without_settings_mapping(tmp_path) -> None:
    # Arrange
    path = tmp_path / "Config.yaml"
    path.write_text("other: 1\n")

    # Act / Assert
    with pytest.raises(SettingsError, match="top-level 'settings'"):
        load_settings(str(path))


@pytest.mark.parametrize(
    "raw",
    [
        {"app": {"interval_seconds": 0}, "websites": {"urls": []}},
        {"app": {"interval_seconds": "10"}, "websites": {"urls": []}},
        {"app": {"interval_seconds": True}, "websites": {"urls": []}},
        {"app": {"interval_seconds": 10}, "websites": {"urls": "http://a.example"}},
        {"app": {"interval_seconds": 10}, "websites": {"urls": [""]}},
        {"app": {"interval_seconds": 10}},
        {"websites": {"urls": []}},
    ],
)
def test_parse_settings_should_reject_malformed_shapes(raw) -> None:
    with pytest.raises(SettingsError):
        parse_settings(raw)


def test_describe_should_number_the_urls() -> None:
    # Arrange
    settings = parse_settings(
        {"app": {"interval_seconds": 60}, "websites": {"urls": ["http://a.example", "http://b.example"]}}
    )

    # Act
    text = settings.describe()

    # Assert
    assert "Interval Seconds: 60" in text
    assert "1. http://a.example" in text
    assert "2. http://b.example" in text
