"""
Logging configuration module for the uptime reporter.

This module provides functionality to configure logging for the application
based on the provided configuration. It supports the built-in configuration
shipped with the package and custom configurations loaded from a file. The
root level is set once from the debug flag.
"""

import json
import logging.config
import os
from typing import Any, Dict

from uptime_reporter.config import AppConfig


def configure_logging(config: AppConfig) -> logging.Logger:
    """
    Configure logging for the application based on the provided configuration.

    This function sets up logging based on the logging type specified in the
    configuration:
    - default: The built-in configuration shipped with the package
    - custom: Custom logging configuration from a specified file

    The root level is DEBUG when debug mode is enabled and INFO otherwise. It
    also adds an app name filter to all log records.

    Args:
        config: Application configuration containing logging settings.

    Returns:
        logging.Logger: The application logger handed to the orchestrator.

    Raises:
        ValueError: If the logging type is invalid or if a custom logging
            configuration file is not provided when using the 'custom' type.
    """
    logging_type: str = config.logging_type.lower()
    if not logging_type:
        raise ValueError("Logging type must be provided.")
    elif logging_type == "default":
        _load_logging_config(_get_local_package_file_path("logging-config.json"))
    elif logging_type == "custom":
        if not config.logging_config_file:
            raise ValueError("Custom logging configuration file must be provided.")
        _load_logging_config(config.logging_config_file)
    else:
        raise ValueError(
            f"Invalid logging type: {config.logging_type}. Allowed values are: default, custom"
        )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level(config))
    app_filter = _AppNameFilter(app_name=config.app_name)
    root_logger.addFilter(app_filter)
    for handler in root_logger.handlers:
        # Handler filters also see records propagated from child loggers.
        handler.addFilter(app_filter)

    logger = logging.getLogger("uptime_reporter")
    logger.info(f"Log level: {logging.getLevelName(root_logger.level)}")
    return logger


def log_level(config: AppConfig) -> int:
    return logging.DEBUG if config.debug_mode else logging.INFO


def _load_logging_config(config_file: str) -> None:
    """
    Load logging configuration from a JSON file.

    This function reads a JSON file containing logging configuration and
    applies it to the Python logging system using dictConfig.

    Args:
        config_file: Path to the JSON file containing logging configuration.

    Raises:
        RuntimeError: If the file is not found, contains invalid JSON, or
            if there is any other error loading the configuration.
    """
    try:
        with open(config_file) as f:
            config: Dict[str, Any] = json.load(f)
            logging.config.dictConfig(config)
    except FileNotFoundError as err:
        raise RuntimeError(f"Logging config file not found: {config_file}") from err
    except json.JSONDecodeError as err:
        raise RuntimeError(f"Invalid JSON format in logging config file: {config_file}") from err
    except Exception as err:
        raise RuntimeError(f"Error loading logging config: {str(err)}") from err


def _get_local_package_file_path(config_file: str) -> str:
    """
    Get the absolute path to a file in the same directory as this module.

    Args:
        config_file: Name of the file to locate.

    Returns:
        str: Absolute path to the specified file.
    """
    return os.path.join(os.path.dirname(__file__), config_file)


class _AppNameFilter(logging.Filter):
    """
    A logging filter that injects the application name into every log record.
    """

    def __init__(self, app_name: str) -> None:
        super().__init__()
        self._app_name: str = app_name

    def filter(self, record: logging.LogRecord) -> bool:
        record.app_name = self._app_name
        return True
