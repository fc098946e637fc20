"""Statistics engine: order statistics over a loaded Dataset."""

from __future__ import annotations

import math
from typing import Iterable, List, Tuple

from .aggregation.stats import argmax, argmin, higher_quantiles
from .errors import EmptyDatasetError, InternalInconsistencyError, InvalidPercentileError
from .models import Dataset, Extremum


class StatisticsEngine:
    """Read-only queries over one Dataset.

    Nothing is cached: every call rescans the rows, which never change,
    so repeated calls return identical results.
    """

    def __init__(self, dataset: Dataset):
        self.dataset = dataset

    def fastest(self) -> Extremum:
        """Row with the smallest elapsed time (first one on ties)."""
        values = self._values()
        return self._extremum(argmin(values), values)

    def slowest(self) -> Extremum:
        """Row with the largest elapsed time (first one on ties)."""
        values = self._values()
        return self._extremum(argmax(values), values)

    def percentile(self, fraction: float) -> float:
        """Quantile under the "higher" rule; *fraction* in (0, 1]."""
        return self.percentiles([fraction])[0]

    def percentiles(self, fractions: Iterable[float]) -> List[float]:
        """Several quantiles from a single sort, in the order requested."""
        fractions = list(fractions)
        values = self._values()
        for f in fractions:
            _check_fraction(f)
        return higher_quantiles(sorted(values), fractions)

    # ------------------------------------------------------------------

    def _values(self) -> Tuple[float, ...]:
        if self.dataset.is_empty:
            raise EmptyDatasetError(self.dataset.path)

        values = self.dataset.elapsed_values()
        for row, v in zip(self.dataset.rows, values):
            if not isinstance(v, float) or not math.isfinite(v):
                raise InternalInconsistencyError(
                    f"elapsed time on line {row.line} should be a finite float, got {v!r}"
                )
        return values

    def _extremum(self, idx: int, values: Tuple[float, ...]) -> Extremum:
        row = self.dataset.rows[idx]
        if not isinstance(row.trace_id, str):
            raise InternalInconsistencyError(
                f"trace id on line {row.line} should be a string, got {row.trace_id!r}"
            )
        return Extremum(elapsed_seconds=values[idx], trace_id=row.trace_id)


def _check_fraction(fraction) -> None:
    if isinstance(fraction, bool) or not isinstance(fraction, (int, float)):
        raise InvalidPercentileError(fraction)
    if math.isnan(fraction) or not 0.0 < fraction <= 1.0:
        raise InvalidPercentileError(fraction)
