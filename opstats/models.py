"""Data models for latency analysis."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple


# ---------------------------------------------------------------------------
# Loaded data
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Row:
    """One execution record from the CSV file."""
    timestamp: str  # opaque, never parsed
    elapsed_seconds: float
    trace_id: str
    trace_url: str = ""
    line: int = 0  # 1-based physical line in the source file


@dataclass(frozen=True)
class Dataset:
    """All validated rows of one CSV file, in file order."""
    path: str
    columns: Tuple[str, ...] = ()
    rows: Tuple[Row, ...] = ()

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(self.rows)

    @property
    def is_empty(self) -> bool:
        return not self.rows

    def elapsed_values(self) -> Tuple[float, ...]:
        return tuple(r.elapsed_seconds for r in self.rows)


# ---------------------------------------------------------------------------
# Query results
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Extremum:
    """Elapsed time of an extremal row paired with that row's trace id."""
    elapsed_seconds: float
    trace_id: str

    def __iter__(self):
        # allows ``secs, trace_id = engine.fastest()``
        yield self.elapsed_seconds
        yield self.trace_id


@dataclass(frozen=True)
class PercentileValue:
    percent: int  # whole-number percentile as requested, e.g. 99
    value: float


@dataclass
class LatencyReport:
    """Everything one CLI invocation computed for a dataset."""
    source: str
    rows: int = 0
    fastest: Optional[Extremum] = None
    slowest: Optional[Extremum] = None
    percentiles: List[PercentileValue] = field(default_factory=list)
