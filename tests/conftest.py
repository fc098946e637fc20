"""Shared fixtures for opstats tests."""

import pytest

HEADER = "timestamp,elapsedtime_seconds,trace_id,jaeger_url\n"


@pytest.fixture
def write_csv(tmp_path):
    """Write CSV text under tmp_path and return its path as a string."""

    def _write(body: str, name: str = "ops.csv", header: str = HEADER) -> str:
        path = tmp_path / name
        path.write_text(header + body, encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def sample_csv(write_csv):
    """Five executions: elapsed 5,1,3,2,4 with trace ids t5,t1,t3,t2,t4."""
    rows = [
        ("2024-01-01T00:00:00Z", "5.0", "t5"),
        ("2024-01-01T00:00:01Z", "1.0", "t1"),
        ("2024-01-01T00:00:02Z", "3.0", "t3"),
        ("2024-01-01T00:00:03Z", "2.0", "t2"),
        ("2024-01-01T00:00:04Z", "4.0", "t4"),
    ]
    body = "".join(
        f"{ts},{secs},{tid},https://trace.example/{tid}\n" for ts, secs, tid in rows
    )
    return write_csv(body)
