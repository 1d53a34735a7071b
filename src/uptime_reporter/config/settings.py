"""
Settings file loader for the uptime reporter.

The settings file holds what the reporter checks and how often. It is a YAML
document with a top-level 'settings' mapping:

    settings:
      app:
        interval_seconds: 300
      websites:
        urls:
          - https://example.com

A missing file is not an error and yields the defaults. A file that exists but
cannot be turned into Settings raises SettingsError.
"""

import logging
import os
from typing import Any, Dict, NamedTuple, Tuple

import yaml

from uptime_reporter.config.constants import DEFAULT_INTERVAL_SECONDS
from uptime_reporter.errors import SettingsError

# Module logger
logger = logging.getLogger(__name__)


class AppSpecificConfig(NamedTuple):
    """How often a monitoring cycle runs, in seconds."""

    interval_seconds: int


class WebsiteConfig(NamedTuple):
    """The ordered, immutable list of URLs probed on every cycle."""

    urls: Tuple[str, ...]


class Settings(NamedTuple):
    app: AppSpecificConfig
    websites: WebsiteConfig

    def describe(self) -> str:
        """Returns a multi-line, human readable rendering of the settings."""
        lines = [
            "AppSpecificConfig:",
            f"  Interval Seconds: {self.app.interval_seconds}",
            "WebsiteConfig:",
            "  URLs:",
        ]
        lines.extend(f"    {index}. {url}" for index, url in enumerate(self.websites.urls, start=1))
        return "\n".join(lines)


def default_settings() -> Settings:
    return Settings(
        app=AppSpecificConfig(interval_seconds=DEFAULT_INTERVAL_SECONDS),
        websites=WebsiteConfig(urls=()),
    )


def load_settings(path: str) -> Settings:
    """
    Load the settings from a YAML file.

    Args:
        path: Path to the settings file.

    Returns:
        Settings: The parsed settings, or the defaults when the file does not exist.

    Raises:
        SettingsError: If the file cannot be read, is not valid YAML, or does not
            have the expected shape.
    """
    if not os.path.exists(path):
        logger.info(f"Settings file {path} not found, using defaults")
        return default_settings()

    try:
        with open(path) as f:
            document: Any = yaml.safe_load(f)
    except yaml.YAMLError as err:
        raise SettingsError(f"Invalid YAML in settings file {path}: {err}") from err
    except OSError as err:
        raise SettingsError(f"Could not read settings file {path}: {err}") from err

    if not isinstance(document, dict) or "settings" not in document:
        raise SettingsError(f"Settings file {path} must contain a top-level 'settings' mapping")

    return parse_settings(document["settings"])


def parse_settings(raw: Any) -> Settings:
    """
    Build Settings from the decoded 'settings' mapping.

    Raises:
        SettingsError: If a required key is missing or has the wrong type.
    """
    if not isinstance(raw, dict):
        raise SettingsError("'settings' must be a mapping")

    app: Dict[str, Any] = _section(raw, "app")
    websites: Dict[str, Any] = _section(raw, "websites")

    interval = app.get("interval_seconds")
    # bool is a subclass of int and must not be accepted as an interval
    if not isinstance(interval, int) or isinstance(interval, bool) or interval <= 0:
        raise SettingsError(f"'app.interval_seconds' must be a positive integer (got {interval!r})")

    urls = websites.get("urls")
    if not isinstance(urls, list):
        raise SettingsError(f"'websites.urls' must be a list (got {type(urls).__name__})")
    for url in urls:
        if not isinstance(url, str) or not url.strip():
            raise SettingsError(f"'websites.urls' entries must be non-empty strings (got {url!r})")

    return Settings(
        app=AppSpecificConfig(interval_seconds=interval),
        websites=WebsiteConfig(urls=tuple(url.strip() for url in urls)),
    )


def _section(raw: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = raw.get(name)
    if not isinstance(section, dict):
        raise SettingsError(f"'settings.{name}' must be a mapping")
    return section
