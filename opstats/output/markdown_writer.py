"""Markdown report writer."""

from __future__ import annotations

import os
from datetime import datetime, timezone

from ..errors import FileAccessError
from ..models import LatencyReport


def write_report_md(report: LatencyReport, output_dir: str) -> str:
    """Write *report* as ``<csv stem>_latency.md`` under *output_dir*."""
    stem = os.path.splitext(os.path.basename(report.source))[0] or "report"
    path = os.path.join(output_dir, f"{stem}_latency.md")
    lines: list = []

    lines.append(f"# Latency Report: {stem}\n")
    lines.append(f"_Generated: {datetime.now(timezone.utc).strftime('%Y-%m-%d %H:%M UTC')}_\n")

    lines.append("## Overview\n")
    lines.append("| Parameter | Value |")
    lines.append("|---|---|")
    lines.append(f"| Source | `{report.source}` |")
    lines.append(f"| Executions | {report.rows:,} |")
    lines.append("")

    if report.fastest or report.slowest:
        lines.append("## Extremes\n")
        lines.append("| Execution | Elapsed (s) | Trace ID |")
        lines.append("|---|---|---|")
        if report.fastest:
            lines.append(f"| Fastest | {report.fastest.elapsed_seconds} | `{report.fastest.trace_id}` |")
        if report.slowest:
            lines.append(f"| Slowest | {report.slowest.elapsed_seconds} | `{report.slowest.trace_id}` |")
        lines.append("")

    if report.percentiles:
        lines.append("## Percentiles\n")
        lines.append("| Percentile | Elapsed (s) |")
        lines.append("|---|---|")
        for p in report.percentiles:
            lines.append(f"| P{p.percent} | {p.value} |")
        lines.append("")

    try:
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, "w", encoding="utf-8") as fh:
            fh.write("\n".join(lines))
    except OSError as e:
        raise FileAccessError(path, e.strerror or str(e), action="write") from e

    return path
