"""CSV loader: reads an execution log into an immutable Dataset.

The file has a header row followed by rows of exactly four columns:

    timestamp,elapsedtime_seconds,trace_id,jaeger_url

Only ``elapsedtime_seconds`` is typed (a finite float); the other
columns are carried as opaque text. Any violation fails the whole load.
"""

from __future__ import annotations

import csv
import math
import sys
from typing import List, Optional, Sequence

from .config import SchemaConfig
from .errors import FileAccessError, MalformedFileError
from .models import Dataset, Row

# Column positions
COL_TIMESTAMP = 0
COL_ELAPSED = 1
COL_TRACE_ID = 2
COL_TRACE_URL = 3
COLUMN_COUNT = 4


def load_dataset(
    path: str,
    schema: Optional[SchemaConfig] = None,
    verbose: bool = False,
) -> Dataset:
    """Load and validate *path*; raise instead of returning partial data."""
    if schema is None:
        schema = SchemaConfig()

    numbered = []
    try:
        with open(path, "r", encoding="utf-8-sig", newline="") as fh:
            reader = csv.reader(fh, delimiter=schema.delimiter, strict=True)
            for rec in reader:
                # csv.reader yields [] for blank lines
                if rec:
                    numbered.append((reader.line_num, rec))
    except csv.Error as e:
        raise MalformedFileError(path, f"CSV syntax error: {e}") from e
    except UnicodeDecodeError as e:
        raise FileAccessError(path, f"not valid UTF-8 ({e.reason})") from e
    except OSError as e:
        raise FileAccessError(path, e.strerror or str(e)) from e

    if not numbered:
        raise MalformedFileError(path, "missing header row")

    header_line, header = numbered[0]
    columns = _check_header(path, header_line, header, schema)

    rows: List[Row] = []
    for line, rec in numbered[1:]:
        rows.append(_parse_row(path, line, rec, columns))

    if verbose:
        print(f"[opstats] Loaded {len(rows)} rows from {path}", file=sys.stderr)

    return Dataset(path=path, columns=columns, rows=tuple(rows))


def _check_header(path: str, line: int, header: Sequence[str], schema: SchemaConfig) -> tuple:
    columns = tuple(h.strip() for h in header)
    if len(columns) != COLUMN_COUNT:
        raise MalformedFileError(
            path,
            f"expected {COLUMN_COUNT} columns in header, found {len(columns)}",
            line=line,
        )

    if schema.verify_header:
        expected = [str(c).strip().lower() for c in schema.columns]
        actual = [c.lower() for c in columns]
        if actual != expected:
            raise MalformedFileError(
                path,
                f"header {list(columns)} does not match expected {list(schema.columns)}",
                line=line,
            )

    return columns


def _parse_row(path: str, line: int, rec: Sequence[str], columns: Sequence[str]) -> Row:
    if len(rec) != COLUMN_COUNT:
        raise MalformedFileError(
            path,
            f"expected {COLUMN_COUNT} cells, found {len(rec)}",
            line=line,
        )

    elapsed_col = columns[COL_ELAPSED]
    raw = rec[COL_ELAPSED].strip()
    if not raw:
        raise MalformedFileError(path, "missing value", line=line, column=elapsed_col)
    try:
        # float() also takes digit separators such as "1_000"
        if "_" in raw:
            raise ValueError(raw)
        elapsed = float(raw)
    except ValueError:
        raise MalformedFileError(
            path, f"not a number: {raw!r}", line=line, column=elapsed_col,
        ) from None
    if not math.isfinite(elapsed):
        raise MalformedFileError(
            path, f"not a finite number: {raw!r}", line=line, column=elapsed_col,
        )

    return Row(
        timestamp=rec[COL_TIMESTAMP],
        elapsed_seconds=elapsed,
        trace_id=rec[COL_TRACE_ID],
        trace_url=rec[COL_TRACE_URL],
        line=line,
    )
