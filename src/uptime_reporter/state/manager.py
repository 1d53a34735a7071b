"""
Ownership and bookkeeping of the operational state.

The StateManager is the only writer of the OperationalState. Every mutation
refreshes last_updated and is persisted in the same step. When persisting
fails, the failure is appended to the error log and the state is marked
inactive; the process keeps running but flags itself as unreliable.
"""

import logging
import time
from pathlib import Path
from typing import Any, Dict, Optional

from uptime_reporter.domain import ErrorEntry, ErrorKind
from uptime_reporter.errors import StatePersistenceError
from uptime_reporter.state.persistence import OperationalState, StatePersistence


class StateManager:
    """
    Holds the OperationalState together with the path it is persisted to.
    """

    def __init__(
        self,
        state: OperationalState,
        path: Path,
        persistence: Optional[StatePersistence] = None,
    ) -> None:
        """
        Args:
            state: The state to own.
            path: Location of the state file.
            persistence: Storage back-end, defaults to the JSON file persistence.
        """
        self._state: OperationalState = state
        self._path: Path = path
        self._persistence: StatePersistence = persistence or StatePersistence()
        self._logger: logging.Logger = logging.getLogger(__name__)

    @classmethod
    def load(
        cls,
        path: Path,
        config_snapshot: Dict[str, Any],
        persistence: Optional[StatePersistence] = None,
    ) -> "StateManager":
        """
        Load the persisted state, or create and persist a fresh one.

        Args:
            path: Location of the state file.
            config_snapshot: Configuration embedded in a freshly created state.
            persistence: Storage back-end, defaults to the JSON file persistence.

        Returns:
            StateManager: A manager owning the loaded or fresh state.
        """
        persistence = persistence or StatePersistence()
        logger = logging.getLogger(__name__)
        try:
            state = persistence.load_state(path)
            logger.info("Previous state data loaded")
            return cls(state, path, persistence)
        except StatePersistenceError as err:
            logger.warning(f"No usable previous state ({err}), creating a new one")

        manager = cls(OperationalState(config=dict(config_snapshot)), path, persistence)
        manager.save()
        return manager

    @property
    def state(self) -> OperationalState:
        return self._state

    @property
    def path(self) -> Path:
        return self._path

    def save(self) -> bool:
        """
        Persist the current state.

        Returns:
            bool: True when the state was written. On failure the error is
                recorded and the state is marked inactive.
        """
        try:
            self._persistence.save_state(self._state, self._path)
            return True
        except StatePersistenceError as err:
            self._logger.error(f"Failed to save state: {err}")
            self._state.is_active = False
            self._state.error_log.append(ErrorEntry.now(ErrorKind.PERSISTENCE, str(err)))
            return False

    def _commit(self) -> bool:
        self._state.last_updated = int(time.time())
        return self.save()

    def mark_active(self, data: Optional[str] = None) -> bool:
        self._state.is_active = True
        if data is not None:
            self._state.data = data
        return self._commit()

    def mark_inactive(self, data: Optional[str] = None) -> bool:
        self._state.is_active = False
        if data is not None:
            self._state.data = data
        return self._commit()

    def set_debug_mode(self, debug_mode: bool) -> bool:
        self._state.config["debug_mode"] = debug_mode
        return self._commit()

    def record_error(self, kind: ErrorKind, message: str) -> bool:
        self._state.error_log.append(ErrorEntry.now(kind, message))
        return self._commit()

    def increment_event_counter(self) -> bool:
        self._state.event_counter += 1
        return self._commit()
