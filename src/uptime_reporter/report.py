"""
Plain-text rendering of a health check cycle.

The report lists every probed URL with its status and either its timings or
its error, followed by a summary of the aggregate counts. Rendering is a pure
function of its input.
"""

from typing import List, Optional

from .domain import HealthCycleResults, ProbeResult, Report

REPORT_TITLE = "Website Health Check Report:"
UNKNOWN_ERROR = "Unknown error"


def format_millis(seconds: Optional[float]) -> str:
    """
    Formats a timing as whole milliseconds.

    An absent timing is displayed as 0. The report cannot tell it apart from
    a measured value below one millisecond.
    """
    if seconds is None:
        return "0"
    return str(int(seconds * 1000))


def _render_entry(url: str, result: ProbeResult) -> List[str]:
    lines = [f"URL: {url}", f"  Status: {result.status.value}"]
    if result.is_up:
        lines.append(f"  DNS & Request Time: {format_millis(result.connect_time)} ms")
        lines.append(f"  Total Response Time: {format_millis(result.total_response_time)} ms")
        lines.append(f"  Body Read Time: {format_millis(result.body_read_time)} ms")
    else:
        lines.append(f"  Error: {result.error_message or UNKNOWN_ERROR}")
    return lines


def generate_report(results: HealthCycleResults) -> Report:
    """
    Renders the results of one cycle.

    Args:
        results: The probe results keyed by URL.

    Returns:
        Report: The report text and its UP and DOWN counts.
    """
    lines: List[str] = [REPORT_TITLE, ""]
    total_up = 0
    total_down = 0

    for url, result in results.items():
        lines.extend(_render_entry(url, result))
        lines.append("")
        if result.is_up:
            total_up += 1
        else:
            total_down += 1

    lines.extend(
        [
            "",
            "Summary:",
            f"  Total Websites Checked: {len(results)}",
            f"  Total UP: {total_up}",
            f"  Total DOWN: {total_down}",
            "",
        ]
    )

    return Report(body="\n".join(lines) + "\n", total_up=total_up, total_down=total_down)
