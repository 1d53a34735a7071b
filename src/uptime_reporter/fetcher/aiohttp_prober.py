"""
HTTP prober implementation using the aiohttp library.

This module provides an implementation of the TargetProber interface that
performs one timed GET per URL. It measures three stages of the request and
classifies the outcome as UP or DOWN.

Classification is on transport success, not on the HTTP status code: a 404 or
a 500 whose body can be read is UP. The reporter monitors reachability, not
application correctness.
"""

import logging
import time
from typing import Optional

import aiohttp

from uptime_reporter.config.constants import DEFAULT_PROBE_TIMEOUT, DEFAULT_USER_AGENT
from uptime_reporter.config.http_config import ConnectionTrace
from uptime_reporter.contracts import TargetProber
from uptime_reporter.domain import ProbeResult, ProbeStatus

# Module logger
logger = logging.getLogger(__name__)


def describe_error(error: BaseException) -> str:
    """
    Returns a non-empty description of a low-level failure.

    Some aiohttp and asyncio exceptions (timeouts in particular) carry no
    message, in which case the exception class name is used.
    """
    return str(error) or type(error).__name__


class AiohttpProber(TargetProber):
    """
    A concrete implementation of TargetProber using the aiohttp library.

    Staged timing is best-effort:
    - connect time spans from request issue to the connection being ready, as
      reported by the session's trace hooks; without a trace event it falls
      back to the moment the headers arrived.
    - total response time spans from request issue to status and headers.
    - body read time spans from headers received to the end of the body.
    """

    def __init__(
        self,
        session: aiohttp.ClientSession,
        timeout: float = DEFAULT_PROBE_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        """
        Initializes the prober with a shared aiohttp ClientSession.

        Args:
            session: An active aiohttp.ClientSession to be used for requests.
            timeout: Total timeout of a single probe, in seconds.
            user_agent: Value of the User-Agent header sent with every probe.
        """
        self._session: aiohttp.ClientSession = session
        self._timeout: aiohttp.ClientTimeout = aiohttp.ClientTimeout(total=timeout)
        self._headers = {aiohttp.hdrs.USER_AGENT: user_agent}

    async def probe(self, url: str) -> ProbeResult:
        """
        Performs a GET request to the URL and measures its stages.

        Args:
            url: The URL to probe.

        Returns:
            ProbeResult: UP with all three timings, DOWN without timings when
                the request failed, or DOWN with connect and response timings
                when only the body read failed.
        """
        logger.debug(f"Starting probe for {url}")
        trace = ConnectionTrace()
        start_time: float = time.perf_counter()

        try:
            async with self._session.get(
                url,
                timeout=self._timeout,
                headers=self._headers,
                trace_request_ctx=trace,
            ) as response:
                headers_at: float = time.perf_counter()
                connect_time: float = _elapsed(start_time, trace.connected_at or headers_at)
                total_response_time: float = _elapsed(start_time, headers_at)

                try:
                    await response.read()
                except Exception as e:
                    logger.warning(f"Error reading body of {url}: {describe_error(e)}")
                    return ProbeResult(
                        status=ProbeStatus.DOWN,
                        connect_time=connect_time,
                        total_response_time=total_response_time,
                        error_message=describe_error(e),
                    )

                body_read_time: float = _elapsed(headers_at, time.perf_counter())
                logger.debug(
                    f"Probed {url}: status {response.status}, "
                    f"headers after {total_response_time:.3f}s, body in {body_read_time:.3f}s"
                )
                return ProbeResult(
                    status=ProbeStatus.UP,
                    connect_time=connect_time,
                    total_response_time=total_response_time,
                    body_read_time=body_read_time,
                )

        except Exception as e:
            logger.info(f"Probe of {url} failed: {describe_error(e)}")
            return ProbeResult(status=ProbeStatus.DOWN, error_message=describe_error(e))


def _elapsed(start: float, end: Optional[float]) -> float:
    return max(0.0, (end or start) - start)
