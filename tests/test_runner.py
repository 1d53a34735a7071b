"""
Unit tests for the HealthCheckRunner class.

The prober is mocked so that the tests only observe ordering, completeness
and the inter-probe delay.
"""

from unittest.mock import AsyncMock, call, patch

import pytest

from uptime_reporter.contracts import TargetProber
from uptime_reporter.domain import ProbeResult, ProbeStatus
from uptime_reporter.runner import HealthCheckRunner

UP = ProbeResult(status=ProbeStatus.UP, connect_time=0.01, total_response_time=0.02, body_read_time=0.001)
DOWN = ProbeResult(status=ProbeStatus.DOWN, error_message="Connection refused")


@pytest.fixture
def mock_prober() -> AsyncMock:
    return AsyncMock(spec=TargetProber)


@pytest.mark.asyncio
async def test_run_should_probe_each_target_once_in_order(mock_prober: AsyncMock) -> None:
    # Arrange
    targets = ("http://a.example", "http://b.example", "http://c.example")
    mock_prober.probe.side_effect = [UP, DOWN, UP]
    runner = HealthCheckRunner(mock_prober)

    # Act
    results = await runner.run(targets)

    # Assert
    assert mock_prober.probe.await_args_list == [call(url) for url in targets]
    assert results == {"http://a.example": UP, "http://b.example": DOWN, "http://c.example": UP}
    assert len(results) == len(targets)


@pytest.mark.asyncio
async def test_run_should_wait_the_delay_after_every_probe(mock_prober: AsyncMock) -> None:
    # Arrange
    mock_prober.probe.return_value = UP
    runner = HealthCheckRunner(mock_prober, inter_probe_delay=0.25)

    # Act
    with patch("uptime_reporter.runner.asyncio.sleep", new_callable=AsyncMock) as mock_sleep:
        await runner.run(["http://a.example", "http://b.example"])

    # Assert
    assert mock_sleep.await_args_list == [call(0.25), call(0.25)]


@pytest.mark.asyncio
async def test_run_should_default_to_a_sub_millisecond_delay(mock_prober: AsyncMock) -> None:
    mock_prober.probe.return_value = UP
    runner = HealthCheckRunner(mock_prober)

    with patch("uptime_reporter.runner.asyncio.sleep", new_callable=AsyncMock) as mock_sleep:
        await runner.run(["http://a.example"])

    assert mock_sleep.await_args.args[0] < 0.001


@pytest.mark.asyncio
async def test_run_should_return_empty_results_without_targets(mock_prober: AsyncMock) -> None:
    results = await HealthCheckRunner(mock_prober).run([])

    assert results == {}
    mock_prober.probe.assert_not_awaited()
