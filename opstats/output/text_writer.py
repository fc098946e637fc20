"""Plain-text report rendering."""

from __future__ import annotations

from typing import List

from ..models import Extremum, LatencyReport


def render(report: LatencyReport, analysis: str) -> str:
    """Render *report* for stdout using the wording of each analysis."""
    if analysis == "all":
        return _render_all(report)

    lines: List[str] = []
    if analysis == "fastest" and report.fastest:
        lines.append(f"The fastest operation: {_extremum(report.fastest)}")
    elif analysis == "slowest" and report.slowest:
        lines.append(f"The slowest operation: {_extremum(report.slowest)}")
    elif analysis == "percentile":
        if len(report.percentiles) == 1:
            p = report.percentiles[0]
            lines.append(f"{p.percent}th percentile: {p.value} seconds")
        else:
            lines.append("Percentiles")
            for p in report.percentiles:
                lines.append(f"  - {p.percent}th: {p.value} seconds")

    return "\n".join(lines) + "\n"


def _render_all(report: LatencyReport) -> str:
    lines = ["Operations results"]
    if report.fastest:
        lines.append(f"Fastest: {_extremum(report.fastest)}")
    if report.slowest:
        lines.append(f"Slowest: {_extremum(report.slowest)}")
    lines.append("Percentiles:")
    for p in report.percentiles:
        lines.append(f"  - {p.percent}th: {p.value} seconds")
    return "\n".join(lines) + "\n"


def _extremum(e: Extremum) -> str:
    return f"{e.elapsed_seconds} seconds (trace ID: {e.trace_id})"
