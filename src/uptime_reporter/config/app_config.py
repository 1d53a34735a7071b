"""
Application configuration for the uptime reporter.

This module defines a data structure that holds all process-level
configuration. It serves as a central point for passing configuration
throughout the application and is embedded, without secrets, in the
persisted operational state.
"""

from typing import Any, Dict, NamedTuple, Optional, Tuple


class AppConfig(NamedTuple):
    """
    A data structure containing all process-level configuration parameters.

    This class is immutable and is created by parsing command-line arguments
    and environment variables.

    Attributes:
        app_name: Name of the application, also used to name the state file.
        version: Installed version of the application.
        debug_mode: Whether logging runs at DEBUG instead of INFO level.
        settings_file: Path to the optional YAML settings file.
        state_dir: Directory where the operational state file is kept.
        logging_type: Type of logging configuration to use (default or custom).
        logging_config_file: Path to custom logging configuration file (if logging_type is 'custom').
        smtp_host: SMTP relay used to deliver reports.
        smtp_port: SMTP relay port.
        smtp_security: Either 'starttls' or 'ssl'.
        smtp_username: Optional SMTP login.
        smtp_password: Optional SMTP password, never persisted.
        smtp_ca_file: Optional CA bundle used to verify the relay certificate.
        mail_from: Sender address of the report.
        mail_to: Recipient addresses of the report.
    """

    app_name: str
    version: str
    debug_mode: bool
    settings_file: str
    state_dir: str
    logging_type: str
    logging_config_file: str
    smtp_host: str
    smtp_port: int
    smtp_security: str
    smtp_username: Optional[str]
    smtp_password: Optional[str]
    smtp_ca_file: Optional[str]
    mail_from: str
    mail_to: Tuple[str, ...]

    def snapshot(self) -> Dict[str, Any]:
        """
        Returns a JSON friendly copy of the configuration without credentials.
        """
        data: Dict[str, Any] = self._asdict()
        data.pop("smtp_password")
        data["mail_to"] = list(self.mail_to)
        return data
