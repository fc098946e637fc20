"""Report builder: runs the requested analysis and dispatches output writers."""

from __future__ import annotations

import os
import sys
from typing import List, Optional, Sequence, TextIO

from .config import AnalyzerConfig
from .engine import StatisticsEngine
from .errors import InvalidPercentileError
from .models import Dataset, LatencyReport, PercentileValue
from .output import markdown_writer, text_writer

ANALYSES = ("all", "fastest", "slowest", "percentile")


def percent_to_fraction(percent) -> float:
    """Convert a whole-number percentile (1..100) to a fraction in (0, 1]."""
    if isinstance(percent, bool) or not isinstance(percent, int) or not 0 < percent <= 100:
        raise InvalidPercentileError(percent, allowed="1..100")
    return percent / 100.0


def build_report(
    dataset: Dataset,
    analysis: str,
    percents: Optional[Sequence[int]] = None,
    config: Optional[AnalyzerConfig] = None,
) -> LatencyReport:
    """Compute the statistics that *analysis* asks for."""
    if analysis not in ANALYSES:
        raise ValueError(f"unknown analysis {analysis!r}, expected one of {ANALYSES}")
    if config is None:
        config = AnalyzerConfig()

    engine = StatisticsEngine(dataset)
    report = LatencyReport(source=dataset.path, rows=len(dataset))

    if analysis in ("all", "fastest"):
        report.fastest = engine.fastest()
    if analysis in ("all", "slowest"):
        report.slowest = engine.slowest()

    if analysis == "all":
        percents = config.report.default_percentiles
    elif analysis == "percentile" and not percents:
        raise ValueError("at least one percentile is required")

    if analysis in ("all", "percentile") and percents:
        percents = list(percents)
        fractions = [percent_to_fraction(p) for p in percents]
        values = engine.percentiles(fractions)
        report.percentiles = [
            PercentileValue(percent=p, value=v) for p, v in zip(percents, values)
        ]

    return report


def write_output(
    report: LatencyReport,
    analysis: str,
    config: AnalyzerConfig,
    stream: Optional[TextIO] = None,
    verbose: bool = False,
) -> List[str]:
    """Print the text report and write any file formats; return written paths."""
    if stream is None:
        stream = sys.stdout

    formats = config.output.formats
    written_files: List[str] = []

    if "text" in formats:
        stream.write(text_writer.render(report, analysis))

    if "markdown" in formats:
        path = markdown_writer.write_report_md(report, config.output.directory)
        written_files.append(path)
        if verbose:
            print(f"[opstats] Wrote {os.path.relpath(path)}", file=sys.stderr)

    return written_files
