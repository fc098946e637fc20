"""Exceptions raised while loading and querying latency data."""

from __future__ import annotations

from typing import Optional


class AnalysisError(Exception):
    """Base class for every error the CLI reports to the user."""


# ---------------------------------------------------------------------------
# Load time
# ---------------------------------------------------------------------------

class FileAccessError(AnalysisError):
    """A file could not be read (missing, unreadable, not UTF-8) or written."""

    def __init__(self, path: str, reason: str, action: str = "read"):
        self.path = path
        self.reason = reason
        self.action = action
        super().__init__(f"cannot {action} {path}: {reason}")


class MalformedFileError(AnalysisError):
    """The CSV file does not match the fixed four-column schema."""

    def __init__(
        self,
        path: str,
        reason: str,
        line: Optional[int] = None,
        column: Optional[str] = None,
    ):
        self.path = path
        self.reason = reason
        self.line = line
        self.column = column

        where = path
        if line is not None:
            where += f", line {line}"
        if column is not None:
            where += f", column '{column}'"
        super().__init__(f"malformed CSV file ({where}): {reason}")


# ---------------------------------------------------------------------------
# Query time
# ---------------------------------------------------------------------------

class EmptyDatasetError(AnalysisError):
    """A statistic was requested over a dataset with no rows."""

    def __init__(self, path: str = ""):
        self.path = path
        msg = "CSV file is empty"
        if path:
            msg += f": {path}"
        super().__init__(msg)


class InvalidPercentileError(AnalysisError, ValueError):
    """A percentile fraction outside (0, 1]."""

    def __init__(self, value, allowed: str = "(0, 1]"):
        self.value = value
        super().__init__(f"percentile must be in {allowed}, got {value!r}")


class InternalInconsistencyError(AnalysisError):
    """A loaded dataset holds a value the schema should have rejected."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"BUG: {reason}")
