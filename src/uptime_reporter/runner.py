"""
Sequential health check runner.

This module provides the HealthCheckRunner class, which probes every
configured URL one after the other and collects the results keyed by URL.
"""

import asyncio
import logging
from typing import Sequence

from .config.constants import DEFAULT_INTER_PROBE_DELAY
from .contracts import TargetProber
from .domain import HealthCycleResults, ProbeResult


class HealthCheckRunner:
    """
    Probes a list of targets strictly sequentially.

    There is no fan-out: the wall-clock cost of a run is the sum of the
    individual probe latencies. Between two probes the runner sleeps for a
    tiny fixed delay, which only acts as a yield point for the event loop.
    """

    def __init__(
        self,
        prober: TargetProber,
        inter_probe_delay: float = DEFAULT_INTER_PROBE_DELAY,
    ) -> None:
        """
        Initializes a new HealthCheckRunner instance.

        Args:
            prober: Component that performs the timed request for one URL.
            inter_probe_delay: Seconds to wait after each probe.
        """
        self._prober: TargetProber = prober
        self._inter_probe_delay: float = inter_probe_delay
        self._logger: logging.Logger = logging.getLogger(__name__)

    async def run(self, targets: Sequence[str]) -> HealthCycleResults:
        """
        Probes every target exactly once, in the configured order.

        Args:
            targets: The URLs to probe.

        Returns:
            HealthCycleResults: One ProbeResult per URL.
        """
        self._logger.debug(f"Running health checks for {len(targets)} targets.")
        results: HealthCycleResults = {}

        for url in targets:
            result: ProbeResult = await self._prober.probe(url)
            results[url] = result
            await asyncio.sleep(self._inter_probe_delay)

        self._logger.debug(f"Health checks finished for {len(results)} targets.")
        return results
