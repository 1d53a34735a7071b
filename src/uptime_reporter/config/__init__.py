"""
Configuration module for the uptime reporter.

This module provides functionality to parse command-line arguments and environment
variables to create the application configuration. It defines default values and
help text for all configurable parameters.
"""

import argparse
import os
from typing import Any, Optional, Sequence

from uptime_reporter import __version__
from uptime_reporter.config.app_config import AppConfig
from uptime_reporter.config.constants import (
    DEFAULT_APP_NAME,
    DEFAULT_DEBUG,
    DEFAULT_LOGGING_CONFIG_FILE,
    DEFAULT_LOGGING_TYPE,
    DEFAULT_MAIL_FROM,
    DEFAULT_MAIL_TO,
    DEFAULT_SETTINGS_FILE,
    DEFAULT_SMTP_HOST,
    DEFAULT_SMTP_PORT,
    DEFAULT_SMTP_SECURITY,
    DEFAULT_STATE_DIR,
    ENV_PREFIX,
    SMTP_SECURITY_MODES,
)


def _env(name: str, default: Any) -> Any:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def _parse_addresses(value: str) -> tuple:
    return tuple(address.strip() for address in value.split(",") if address.strip())


def get_context(argv: Optional[Sequence[str]] = None) -> AppConfig:
    """
    Parse command-line arguments and environment variables to create the application configuration.

    For each option, it first checks for a command-line argument, then falls back to an
    environment variable, and finally uses a default value.

    Args:
        argv: Arguments to parse. Defaults to sys.argv[1:].

    Returns:
        AppConfig: The parsed application configuration.

    Raises:
        SystemExit: If an argument has an invalid value.
    """
    parser = argparse.ArgumentParser(
        description="Periodically checks a list of websites and emails a health report."
    )

    parser.add_argument(
        "-n",
        "--app-name",
        type=str,
        default=_env("APP_NAME", DEFAULT_APP_NAME),
        help="Name of the application, used to name the state file.\n"
        f"Falls back to {ENV_PREFIX}APP_NAME, then to {DEFAULT_APP_NAME}.",
    )

    parser.add_argument(
        "-s",
        "--settings-file",
        type=str,
        default=_env("SETTINGS_FILE", DEFAULT_SETTINGS_FILE),
        help="Path to the YAML settings file holding the interval and the URLs.\n"
        f"Falls back to {ENV_PREFIX}SETTINGS_FILE, then to {DEFAULT_SETTINGS_FILE}.\n"
        "A missing file is not an error: defaults apply.",
    )

    parser.add_argument(
        "-sd",
        "--state-dir",
        type=str,
        default=_env("STATE_DIR", DEFAULT_STATE_DIR),
        help="Directory where the operational state file is written.\n"
        f"Falls back to {ENV_PREFIX}STATE_DIR, then to {DEFAULT_STATE_DIR}.",
    )

    parser.add_argument(
        "-d",
        "--debug",
        type=str,
        default=_env("DEBUG", DEFAULT_DEBUG),
        help="Enables DEBUG logging when set to true.\n"
        f"Falls back to {ENV_PREFIX}DEBUG, then to {DEFAULT_DEBUG}.",
    )

    parser.add_argument(
        "-lt",
        "--logging-type",
        type=str,
        choices=("default", "custom"),
        default=_env("LOGGING_TYPE", DEFAULT_LOGGING_TYPE),
        help="Specifies the logging configuration type to use.\n"
        "For 'default', the built-in configuration is used.\n"
        "For 'custom', the --logging-config-file argument is required.",
    )

    parser.add_argument(
        "-lcf",
        "--logging-config-file",
        type=str,
        default=_env("LOGGING_CONFIG_FILE", DEFAULT_LOGGING_CONFIG_FILE),
        help="Path to custom logging configuration file.\n"
        "Required when --logging-type is set to 'custom'.",
    )

    parser.add_argument(
        "--smtp-host",
        type=str,
        default=_env("SMTP_HOST", DEFAULT_SMTP_HOST),
        help=f"SMTP relay used to deliver reports. Falls back to {ENV_PREFIX}SMTP_HOST.",
    )

    parser.add_argument(
        "--smtp-port",
        type=int,
        default=_env("SMTP_PORT", DEFAULT_SMTP_PORT),
        help=f"SMTP relay port. Falls back to {ENV_PREFIX}SMTP_PORT, then to {DEFAULT_SMTP_PORT}.",
    )

    parser.add_argument(
        "--smtp-security",
        type=str,
        choices=SMTP_SECURITY_MODES,
        default=_env("SMTP_SECURITY", DEFAULT_SMTP_SECURITY),
        help="Transport encryption: 'starttls' upgrades a plain connection, 'ssl' uses implicit TLS.",
    )

    parser.add_argument(
        "--smtp-username",
        type=str,
        default=_env("SMTP_USERNAME", None),
        help=f"SMTP login. Falls back to {ENV_PREFIX}SMTP_USERNAME.",
    )

    parser.add_argument(
        "--smtp-password",
        type=str,
        default=_env("SMTP_PASSWORD", None),
        help=f"SMTP password. Prefer the {ENV_PREFIX}SMTP_PASSWORD environment variable.",
    )

    parser.add_argument(
        "--smtp-ca-file",
        type=str,
        default=_env("SMTP_CA_FILE", None),
        help="CA bundle used to verify the SMTP relay certificate.\n"
        "The system trust store is used when absent.",
    )

    parser.add_argument(
        "--mail-from",
        type=str,
        default=_env("MAIL_FROM", DEFAULT_MAIL_FROM),
        help=f"Sender address of the report. Falls back to {ENV_PREFIX}MAIL_FROM.",
    )

    parser.add_argument(
        "--mail-to",
        type=str,
        default=_env("MAIL_TO", DEFAULT_MAIL_TO),
        help=f"Comma separated recipient addresses. Falls back to {ENV_PREFIX}MAIL_TO.",
    )

    # Parse the command-line arguments
    args: Any = parser.parse_args(argv)

    # Create and return an AppConfig with the parsed settings
    return AppConfig(
        app_name=args.app_name,
        version=__version__,
        debug_mode=_parse_bool(args.debug),
        settings_file=args.settings_file,
        state_dir=os.path.expanduser(args.state_dir),
        logging_type=args.logging_type,
        logging_config_file=args.logging_config_file,
        smtp_host=args.smtp_host,
        smtp_port=args.smtp_port,
        smtp_security=args.smtp_security,
        smtp_username=args.smtp_username,
        smtp_password=args.smtp_password,
        smtp_ca_file=args.smtp_ca_file,
        mail_from=args.mail_from,
        mail_to=_parse_addresses(args.mail_to),
    )
