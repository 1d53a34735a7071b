"""
Monitoring cycle orchestration for the uptime reporter.

This module provides the CycleOrchestrator class, which drives the endless
monitoring loop: run the health checks, render the report, send it, count the
cycle and sleep. The only ways out of the loop are external termination and
a notification that cannot be prepared, which is returned to the caller as a
Shutdown value.
"""

import asyncio
import logging
from typing import Awaitable, Callable, NamedTuple, Optional

from .config.constants import REPORT_SUBJECT
from .config.settings import Settings
from .contracts import Notification, NotificationFactory
from .domain import Email, ErrorKind, Report
from .errors import NotificationDeliveryError, NotificationPreparationError
from .report import generate_report
from .runner import HealthCheckRunner
from .state.manager import StateManager

INITIALIZED_MESSAGE = "Website Monitor Initialized"


class Shutdown(NamedTuple):
    """
    A terminal outcome handed back to the entry point.

    Attributes:
        kind: The category of the failure that ended the run.
        message: Description of the cause.
        exit_code: Process exit code the entry point should use.
    """

    kind: ErrorKind
    message: str
    exit_code: int = 0


class CycleOrchestrator:
    """
    Runs monitoring cycles one after the other, forever.

    Every iteration runs to completion before the next one starts, so the
    state it owns is never mutated concurrently.
    """

    def __init__(
        self,
        settings: Settings,
        state: StateManager,
        runner: HealthCheckRunner,
        notifications: NotificationFactory,
        logger: logging.Logger,
        sleep: Optional[Callable[[float], Awaitable[None]]] = None,
    ) -> None:
        """
        Initializes a new CycleOrchestrator instance.

        Args:
            settings: Interval and targets loaded at startup.
            state: Manager owning the operational state.
            runner: Component that probes all targets.
            notifications: Component that prepares the report emails.
            logger: Logger configured once at startup.
            sleep: Coroutine used to wait between cycles, asyncio.sleep by default.
        """
        self._settings: Settings = settings
        self._state: StateManager = state
        self._runner: HealthCheckRunner = runner
        self._notifications: NotificationFactory = notifications
        self._logger: logging.Logger = logger
        self._sleep: Callable[[float], Awaitable[None]] = sleep or asyncio.sleep

    def start(self) -> None:
        """
        Marks the reporter as active, completing the startup phase.
        """
        self._state.mark_active(INITIALIZED_MESSAGE)
        self._logger.info(
            f"Website monitor running: {len(self._settings.websites.urls)} targets "
            f"every {self._settings.app.interval_seconds}s"
        )

    async def run_cycle(self) -> Optional[Shutdown]:
        """
        Runs one complete cycle.

        Returns:
            Optional[Shutdown]: A Shutdown when the report could not be prepared
                for sending, None otherwise.
        """
        results = await self._runner.run(self._settings.websites.urls)
        report: Report = generate_report(results)
        self._logger.info(
            f"Cycle checked {report.total_checked} websites: "
            f"{report.total_up} UP, {report.total_down} DOWN"
        )

        email = Email(subject=REPORT_SUBJECT, body=report.body)
        try:
            notification: Notification = self._notifications.create(email)
            self._logger.debug("Prepared report notification")
        except NotificationPreparationError as e:
            self._logger.error(f"Error occurred while preparing to send email: {e}")
            self._state.record_error(ErrorKind.NOTIFICATION_PREPARATION, str(e))
            return Shutdown(kind=ErrorKind.NOTIFICATION_PREPARATION, message=str(e))

        try:
            await notification.send()
        except NotificationDeliveryError as e:
            self._logger.error(f"Error occurred while sending email: {e}")
            self._state.record_error(ErrorKind.NOTIFICATION_DELIVERY, str(e))

        self._state.increment_event_counter()
        return None

    async def run(self) -> Shutdown:
        """
        Runs cycles until one of them ends the process.

        Returns:
            Shutdown: The cause of the shutdown.
        """
        while True:
            shutdown = await self.run_cycle()
            if shutdown is not None:
                return shutdown
            await self._sleep(self._settings.app.interval_seconds)
