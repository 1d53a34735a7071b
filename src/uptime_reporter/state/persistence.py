"""
File persistence for the operational state.

The state is stored as a JSON document. Writes go to a temporary file in the
same directory which then replaces the target with os.replace, so a reader
sees either the previous or the new document and never a partial one.
"""

import json
import logging
import os
import tempfile
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

from uptime_reporter.config import AppConfig
from uptime_reporter.domain import ErrorEntry, ErrorKind
from uptime_reporter.errors import StatePersistenceError

# Module logger
logger = logging.getLogger(__name__)


@dataclass
class OperationalState:
    """
    The durable record of the reporter's run-time status.

    Attributes:
        is_active: Whether the reporter is running and its state is reliable.
        last_updated: Last mutation time, in seconds since the epoch.
        event_counter: Number of completed cycles.
        data: Free-form status line.
        error_log: Failures recorded so far, oldest first.
        config: Snapshot of the application configuration.
    """

    is_active: bool = False
    last_updated: int = field(default_factory=lambda: int(time.time()))
    event_counter: int = 0
    data: str = ""
    error_log: List[ErrorEntry] = field(default_factory=list)
    config: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "is_active": self.is_active,
            "last_updated": self.last_updated,
            "event_counter": self.event_counter,
            "data": self.data,
            "error_log": [
                {"kind": entry.kind.value, "message": entry.message, "timestamp": entry.timestamp}
                for entry in self.error_log
            ],
            "config": self.config,
        }

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "OperationalState":
        """
        Rebuild a state from its JSON representation.

        Raises:
            KeyError, TypeError, ValueError: If the document does not describe a state.
        """
        return cls(
            is_active=bool(raw["is_active"]),
            last_updated=int(raw["last_updated"]),
            event_counter=int(raw["event_counter"]),
            data=str(raw.get("data", "")),
            error_log=[
                ErrorEntry(
                    kind=ErrorKind(entry["kind"]),
                    message=str(entry["message"]),
                    timestamp=int(entry["timestamp"]),
                )
                for entry in raw.get("error_log", [])
            ],
            config=dict(raw.get("config", {})),
        )


class StatePersistence:
    """Reads and writes OperationalState documents."""

    @staticmethod
    def get_state_path(config: AppConfig) -> Path:
        return Path(config.state_dir) / f"{config.app_name}.state.json"

    @staticmethod
    def load_state(path: Path) -> OperationalState:
        """
        Load a state from disk.

        Args:
            path: Location of the state file.

        Returns:
            OperationalState: The deserialized state.

        Raises:
            StatePersistenceError: If the file is missing, unreadable or malformed.
        """
        try:
            with open(path) as f:
                raw: Any = json.load(f)
            return OperationalState.from_dict(raw)
        except FileNotFoundError as err:
            raise StatePersistenceError(f"State file not found: {path}") from err
        except json.JSONDecodeError as err:
            raise StatePersistenceError(f"Invalid JSON in state file {path}: {err}") from err
        except (KeyError, TypeError, ValueError) as err:
            raise StatePersistenceError(f"Malformed state file {path}: {err!r}") from err
        except OSError as err:
            raise StatePersistenceError(f"Could not read state file {path}: {err}") from err

    @staticmethod
    def save_state(state: OperationalState, path: Path) -> None:
        """
        Atomically write a state to disk.

        Args:
            state: The state to persist.
            path: Location of the state file.

        Raises:
            StatePersistenceError: If the state could not be written.
        """
        path = Path(path)
        tmp_name = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w") as f:
                json.dump(state.to_dict(), f, indent=2)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, path)
            tmp_name = None
        except (OSError, TypeError, ValueError) as err:
            raise StatePersistenceError(f"Could not write state file {path}: {err}") from err
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
        logger.debug(f"State saved to {path}")
