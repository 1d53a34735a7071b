"""
Core interfaces for the uptime reporter.

This module defines the abstract base classes that separate the monitoring
cycle from the network and notification back-ends it relies on. These
interfaces establish a clear contract for implementations and keep the
orchestrator testable with simple mocks.
"""

import abc

from .domain import Email, ProbeResult


class TargetProber(abc.ABC):
    """
    Abstract interface for a component that probes a single target URL.

    Its responsibility is to encapsulate the network I/O for one URL and
    return a structured, timed result.
    """

    @abc.abstractmethod
    async def probe(self, url: str) -> ProbeResult:
        """
        Performs one timed HTTP GET against the given URL.

        Args:
            url: The URL to probe.

        Returns:
            ProbeResult: The UP/DOWN classification with staged timings or an
                error message.

        Raises:
            Exception: Implementations must not raise for network failures;
                they are reported as DOWN results instead.
        """
        pass


class Notification(abc.ABC):
    """
    A notification that has been secured and is ready to be delivered.
    """

    @abc.abstractmethod
    async def send(self) -> None:
        """
        Delivers the notification.

        Raises:
            NotificationDeliveryError: If the notification could not be delivered.
        """
        pass


class NotificationFactory(abc.ABC):
    """
    Abstract interface for a component that prepares notifications.

    Preparation is where encryption and addressing happen, so it can fail
    independently of delivery.
    """

    @abc.abstractmethod
    def create(self, email: Email) -> Notification:
        """
        Secures an email and returns a notification ready to be sent.

        Args:
            email: The subject and body to deliver.

        Returns:
            Notification: The prepared notification.

        Raises:
            NotificationPreparationError: If the email cannot be prepared.
        """
        pass
