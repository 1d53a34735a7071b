"""
Exception hierarchy for the uptime reporter.

Probe failures are never raised: they are converted into DOWN results. The
exceptions below cover the collaborators whose failures the monitoring cycle
has to react to.
"""


class UptimeReporterError(Exception):
    """Base class for all errors raised by the uptime reporter."""


class SettingsError(UptimeReporterError):
    """Raised when the settings file exists but cannot be turned into Settings."""


class StatePersistenceError(UptimeReporterError):
    """Raised when the operational state cannot be read from or written to disk."""


class NotificationPreparationError(UptimeReporterError):
    """Raised when a notification cannot be secured and prepared for sending."""


class NotificationDeliveryError(UptimeReporterError):
    """Raised when a prepared notification could not be delivered."""
