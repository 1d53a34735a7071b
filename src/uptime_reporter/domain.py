"""
Domain models for the uptime reporter.

This module defines the core data structures used throughout the application,
including probe outcomes, rendered reports, outgoing emails, and the entries
recorded in the operational error log. These models serve as the foundation
for the monitoring cycle's data flow.
"""

import time
from enum import Enum
from typing import Dict, NamedTuple, Optional


class ProbeStatus(str, Enum):
    """
    Outcome classification of a single probe.

    Inheriting from 'str' allows enum members to behave like strings,
    which keeps them readable in reports and JSON.
    """

    UP = "UP"
    DOWN = "DOWN"


class ProbeResult(NamedTuple):
    """
    The outcome of a single timed HTTP GET against one target URL.

    Timings are expressed in seconds, measured on a monotonic clock.

    Attributes:
        status: UP when the request and the body read both succeeded, DOWN otherwise.
        connect_time: Time from request issue until the connection was established.
        total_response_time: Time from request issue until status and headers arrived.
        body_read_time: Time from headers received until the body was fully read.
        error_message: Description of the failure, set only for DOWN results.
    """

    status: ProbeStatus
    connect_time: Optional[float] = None
    total_response_time: Optional[float] = None
    body_read_time: Optional[float] = None
    error_message: Optional[str] = None

    @property
    def is_up(self) -> bool:
        return self.status is ProbeStatus.UP


# One entry per configured URL, rebuilt on every cycle.
HealthCycleResults = Dict[str, ProbeResult]


class Report(NamedTuple):
    """
    A rendered health report together with its aggregate counts.

    Attributes:
        body: The plain-text report.
        total_up: Number of targets classified as UP.
        total_down: Number of targets classified as DOWN.
    """

    body: str
    total_up: int
    total_down: int

    @property
    def total_checked(self) -> int:
        return self.total_up + self.total_down


class Email(NamedTuple):
    """An outgoing notification before it is secured for delivery."""

    subject: str
    body: str


class ErrorKind(str, Enum):
    """Categories of failures recorded in the operational error log."""

    INVALID_FILE = "InvalidFile"
    CONFIGURATION = "Configuration"
    NOTIFICATION_PREPARATION = "NotificationPreparation"
    NOTIFICATION_DELIVERY = "NotificationDelivery"
    PERSISTENCE = "Persistence"
    GENERAL = "General"


class ErrorEntry(NamedTuple):
    """
    A single entry of the operational error log.

    Attributes:
        kind: The failure category.
        message: Human readable description of the failure.
        timestamp: When the failure was recorded, in seconds since the epoch.
    """

    kind: ErrorKind
    message: str
    timestamp: int

    @classmethod
    def now(cls, kind: ErrorKind, message: str) -> "ErrorEntry":
        return cls(kind=kind, message=message, timestamp=int(time.time()))
