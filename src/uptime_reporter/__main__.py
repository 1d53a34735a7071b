"""
Main entry point for the uptime reporter.

This module performs the one-time startup (configuration, logging, state and
settings), then runs the monitoring loop until it returns a Shutdown. Fatal
shutdowns are recorded in the state's error log and end the process with the
exit code carried by the Shutdown (0, they are a documented outcome and not a
crash).
"""

import asyncio
import logging
import sys
from typing import Optional, Sequence

import aiohttp

from uptime_reporter.config import AppConfig, get_context
from uptime_reporter.config.http_config import get_http_session
from uptime_reporter.config.logging_config import configure_logging
from uptime_reporter.config.settings import Settings, load_settings
from uptime_reporter.domain import ErrorKind
from uptime_reporter.errors import SettingsError
from uptime_reporter.fetcher.aiohttp_prober import AiohttpProber
from uptime_reporter.notification.email_notifier import SmtpNotificationFactory
from uptime_reporter.orchestrator import CycleOrchestrator, Shutdown
from uptime_reporter.runner import HealthCheckRunner
from uptime_reporter.state.manager import StateManager
from uptime_reporter.state.persistence import StatePersistence


async def main(config: AppConfig, logger: logging.Logger) -> Shutdown:
    """
    Set up and run the uptime reporter.

    This function initializes all components of the reporter:
    1. Loads or creates the operational state
    2. Loads the settings file (failure is fatal and recorded)
    3. Records the logging mode in the state
    4. Creates the HTTP session, prober, runner and notification factory
    5. Marks the reporter active and runs the monitoring loop
    6. Closes the HTTP session however the loop ends

    Args:
        config: Application configuration.
        logger: Logger configured from the debug flag.

    Returns:
        Shutdown: The cause of the shutdown.
    """
    state_path = StatePersistence.get_state_path(config)
    state: StateManager = StateManager.load(state_path, config.snapshot())

    try:
        settings: Settings = load_settings(config.settings_file)
        logger.debug(f"settings data loaded:\n{settings.describe()}")
    except SettingsError as e:
        logger.error(f"Error occurred while loading settings: {e}")
        state.record_error(ErrorKind.INVALID_FILE, str(e))
        return Shutdown(kind=ErrorKind.INVALID_FILE, message=str(e))

    state.set_debug_mode(config.debug_mode)
    if config.debug_mode:
        logger.debug(f"state loaded from {state_path}: {state.state}")

    # Initialize HTTP session for making requests
    http_session: aiohttp.ClientSession = get_http_session()
    logger.debug("configured: http_session")

    try:
        orchestrator = CycleOrchestrator(
            settings=settings,
            state=state,
            runner=HealthCheckRunner(AiohttpProber(http_session)),
            notifications=SmtpNotificationFactory.from_config(config),
            logger=logger,
        )
        orchestrator.start()
        return await orchestrator.run()
    finally:
        logger.info("Shutting down resources...")
        await http_session.close()


def run(argv: Optional[Sequence[str]] = None) -> int:
    """
    Console script entry point.

    Args:
        argv: Command-line arguments, defaults to sys.argv[1:].

    Returns:
        int: The process exit code.
    """
    # Parse command-line arguments and environment variables
    config: AppConfig = get_context(argv)

    # Configure logging based on the debug flag
    try:
        logger: logging.Logger = configure_logging(config)
    except (ValueError, RuntimeError) as e:
        print(f"Could not configure logging: {e}", file=sys.stderr)
        return 1

    try:
        shutdown: Shutdown = asyncio.run(main(config, logger))
    except KeyboardInterrupt:
        logger.info("Shutdown initiated by user (Ctrl+C).")
        return 0

    logger.error(f"Website monitor stopped ({shutdown.kind.value}): {shutdown.message}")
    return shutdown.exit_code


if __name__ == "__main__":
    sys.exit(run())
