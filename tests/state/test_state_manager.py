"""
Unit tests for the StateManager class.

The persistence back-end is mocked where failures have to be simulated and a
real temporary directory is used otherwise.
"""

from unittest.mock import MagicMock

import pytest

from uptime_reporter.domain import ErrorKind
from uptime_reporter.errors import StatePersistenceError
from uptime_reporter.state.manager import StateManager
from uptime_reporter.state.persistence import OperationalState, StatePersistence


@pytest.fixture
def state_path(tmp_path):
    return tmp_path / "reporter.state.json"


@pytest.fixture
def failing_persistence() -> MagicMock:
    persistence = MagicMock(spec=StatePersistence)
    persistence.save_state.side_effect = StatePersistenceError("read-only file system")
    return persistence


def test_load_should_create_and_persist_fresh_state_when_file_is_missing(state_path) -> None:
    # Act
    manager = StateManager.load(state_path, {"app_name": "test_reporter"})

    # Assert
    state = manager.state
    assert state.is_active is False
    assert state.event_counter == 0
    assert state.error_log == []
    assert state.config == {"app_name": "test_reporter"}
    assert state_path.exists()


def test_load_should_create_fresh_state_when_file_is_unreadable(state_path) -> None:
    # Arrange
    state_path.write_text("garbage")

    # Act
    manager = StateManager.load(state_path, {})

    # Assert
    assert manager.state.event_counter == 0
    assert StatePersistence.load_state(state_path) == manager.state


def test_load_should_return_persisted_state_unchanged(state_path) -> None:
    # Arrange
    previous = OperationalState(is_active=True, last_updated=42, event_counter=12, data="running")
    StatePersistence.save_state(previous, state_path)

    # Act
    manager = StateManager.load(state_path, {"app_name": "ignored"})

    # Assert
    assert manager.state == previous


def test_mutations_should_refresh_last_updated_and_persist(state_path) -> None:
    # Arrange
    manager = StateManager(OperationalState(last_updated=0), state_path)

    # Act
    manager.mark_active("Website Monitor Initialized")

    # Assert
    assert manager.state.last_updated > 0
    on_disk = StatePersistence.load_state(state_path)
    assert on_disk.is_active is True
    assert on_disk.data == "Website Monitor Initialized"


def test_increment_event_counter_should_add_exactly_one(state_path) -> None:
    # Arrange
    manager = StateManager(OperationalState(event_counter=5), state_path)

    # Act
    manager.increment_event_counter()
    manager.increment_event_counter()

    # Assert
    assert manager.state.event_counter == 7
    assert StatePersistence.load_state(state_path).event_counter == 7


def test_record_error_should_append_and_persist(state_path) -> None:
    # Arrange
    manager = StateManager(OperationalState(), state_path)

    # Act
    manager.record_error(ErrorKind.NOTIFICATION_DELIVERY, "relay refused")

    # Assert
    on_disk = StatePersistence.load_state(state_path)
    assert [(e.kind, e.message) for e in on_disk.error_log] == [
        (ErrorKind.NOTIFICATION_DELIVERY, "relay refused")
    ]


def test_set_debug_mode_should_update_config_snapshot(state_path) -> None:
    manager = StateManager(OperationalState(config={"debug_mode": False}), state_path)

    manager.set_debug_mode(True)

    assert StatePersistence.load_state(state_path).config["debug_mode"] is True


def test_failed_save_should_deactivate_and_log_exactly_one_error(state_path, failing_persistence) -> None:
    # Arrange
    manager = StateManager(OperationalState(is_active=True), state_path, failing_persistence)

    # Act
    saved = manager.increment_event_counter()

    # Assert
    assert saved is False
    assert manager.state.is_active is False
    assert manager.state.event_counter == 1
    assert len(manager.state.error_log) == 1
    assert manager.state.error_log[0].kind is ErrorKind.PERSISTENCE
    assert "read-only file system" in manager.state.error_log[0].message


def test_load_should_keep_running_when_fresh_state_cannot_be_saved(state_path, failing_persistence) -> None:
    # Arrange
    failing_persistence.load_state.side_effect = StatePersistenceError("not found")

    # Act
    manager = StateManager.load(state_path, {}, failing_persistence)

    # Assert
    assert manager.state.is_active is False
    assert len(manager.state.error_log) == 1
