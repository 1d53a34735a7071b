"""
Constants for the uptime reporter.

This module defines default values for all configurable parameters of the
reporter. These constants are used as fallback values when neither
command-line arguments nor environment variables are provided.
"""

ENV_PREFIX = "UPTIME_REPORTER_"

# Application defaults
DEFAULT_APP_NAME = "uptime_reporter"
DEFAULT_SETTINGS_FILE = "Config.yaml"
DEFAULT_STATE_DIR = "~/.local/state/uptime-reporter"
DEFAULT_DEBUG = "false"

# Settings file defaults, used when the file is absent
DEFAULT_INTERVAL_SECONDS = 300

# Probe defaults
DEFAULT_PROBE_TIMEOUT = 30
DEFAULT_USER_AGENT = "HealthChecker/1.0"
DEFAULT_INTER_PROBE_DELAY = 500e-9

# Notification defaults
DEFAULT_SMTP_HOST = ""
DEFAULT_SMTP_PORT = 587
DEFAULT_SMTP_SECURITY = "starttls"
SMTP_SECURITY_MODES = ("starttls", "ssl")
DEFAULT_SMTP_TIMEOUT = 30
DEFAULT_MAIL_FROM = "uptime-reporter@localhost"
DEFAULT_MAIL_TO = ""
REPORT_SUBJECT = "Website Monitor Report"

# Logging configuration defaults
DEFAULT_LOGGING_TYPE = "default"
DEFAULT_LOGGING_CONFIG_FILE = ""
