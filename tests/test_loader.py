"""Tests for the CSV loader."""

import pytest

from opstats.config import SchemaConfig
from opstats.errors import AnalysisError, FileAccessError, MalformedFileError
from opstats.loader import load_dataset
from opstats.models import Row


class TestLoadDataset:
    """Successful loads."""

    def test_loads_rows_in_file_order(self, sample_csv):
        ds = load_dataset(sample_csv)
        assert len(ds) == 5
        assert ds.elapsed_values() == (5.0, 1.0, 3.0, 2.0, 4.0)
        assert [r.trace_id for r in ds] == ["t5", "t1", "t3", "t2", "t4"]

    def test_row_fields(self, sample_csv):
        row = load_dataset(sample_csv).rows[1]
        assert row == Row(
            timestamp="2024-01-01T00:00:01Z",
            elapsed_seconds=1.0,
            trace_id="t1",
            trace_url="https://trace.example/t1",
            line=3,
        )

    def test_header_only_is_empty_dataset(self, write_csv):
        ds = load_dataset(write_csv(""))
        assert len(ds) == 0
        assert ds.is_empty
        assert ds.columns == ("timestamp", "elapsedtime_seconds", "trace_id", "jaeger_url")

    def test_empty_trace_url_allowed(self, write_csv):
        ds = load_dataset(write_csv("ts,0.5,abc,\n"))
        assert ds.rows[0].trace_url == ""

    def test_blank_lines_skipped(self, write_csv):
        ds = load_dataset(write_csv("ts,0.5,a,u\n\nts,0.7,b,u\n\n"))
        assert ds.elapsed_values() == (0.5, 0.7)
        assert ds.rows[1].line == 4

    def test_quoted_cells(self, write_csv):
        ds = load_dataset(write_csv('"2024-01-01, noon","1.5","id,1",""\n'))
        assert ds.rows[0].timestamp == "2024-01-01, noon"
        assert ds.rows[0].trace_id == "id,1"

    def test_numeric_forms(self, write_csv):
        ds = load_dataset(write_csv("ts,1e-3,a,u\nts, 2 ,b,u\nts,7,c,u\n"))
        assert ds.elapsed_values() == (0.001, 2.0, 7.0)

    def test_utf8_bom_tolerated(self, tmp_path):
        path = tmp_path / "bom.csv"
        path.write_bytes(
            "\ufefftimestamp,elapsedtime_seconds,trace_id,jaeger_url\nts,1.0,a,u\n".encode("utf-8")
        )
        ds = load_dataset(str(path), SchemaConfig(verify_header=True))
        assert ds.columns[0] == "timestamp"

    def test_header_names_ignored_by_default(self, write_csv):
        ds = load_dataset(write_csv("ts,1.0,a,u\n", header="when,secs,id,url\n"))
        assert len(ds) == 1


class TestLoadErrors:
    """Every schema violation fails the whole load."""

    def test_non_numeric_elapsed(self, write_csv):
        path = write_csv("ts,1.0,a,u\nts,fast,b,u\n")
        with pytest.raises(MalformedFileError) as exc:
            load_dataset(path)
        assert exc.value.path == path
        assert exc.value.line == 3
        assert exc.value.column == "elapsedtime_seconds"
        assert "fast" in str(exc.value)

    @pytest.mark.parametrize("value", ["1_000", "0.5_5"])
    def test_digit_separators_rejected(self, write_csv, value):
        with pytest.raises(MalformedFileError, match="not a number"):
            load_dataset(write_csv(f"ts,{value},a,u\n"))

    def test_missing_elapsed(self, write_csv):
        with pytest.raises(MalformedFileError, match="missing value"):
            load_dataset(write_csv("ts,,a,u\n"))

    @pytest.mark.parametrize("value", ["nan", "NaN", "inf", "-inf"])
    def test_non_finite_elapsed(self, write_csv, value):
        with pytest.raises(MalformedFileError, match="finite"):
            load_dataset(write_csv(f"ts,{value},a,u\n"))

    def test_short_row(self, write_csv):
        with pytest.raises(MalformedFileError) as exc:
            load_dataset(write_csv("ts,1.0,a\n"))
        assert exc.value.line == 2

    def test_long_row(self, write_csv):
        with pytest.raises(MalformedFileError, match="expected 4 cells, found 5"):
            load_dataset(write_csv("ts,1.0,a,u,extra\n"))

    def test_wrong_header_width(self, write_csv):
        with pytest.raises(MalformedFileError, match="header"):
            load_dataset(write_csv("ts,1.0,a\n", header="timestamp,elapsed,trace\n"))

    def test_empty_file_has_no_header(self, write_csv):
        with pytest.raises(MalformedFileError, match="missing header"):
            load_dataset(write_csv("", header=""))

    def test_header_mismatch_when_verifying(self, write_csv):
        path = write_csv("ts,1.0,a,u\n", header="when,secs,id,url\n")
        with pytest.raises(MalformedFileError, match="does not match"):
            load_dataset(path, SchemaConfig(verify_header=True))

    def test_header_verification_case_insensitive(self, write_csv):
        path = write_csv("ts,1.0,a,u\n", header="Timestamp, ElapsedTime_Seconds,TRACE_ID,jaeger_url\n")
        ds = load_dataset(path, SchemaConfig(verify_header=True))
        assert len(ds) == 1

    def test_missing_file(self, tmp_path):
        path = str(tmp_path / "nope.csv")
        with pytest.raises(FileAccessError) as exc:
            load_dataset(path)
        assert exc.value.path == path
        assert not isinstance(exc.value, MalformedFileError)

    def test_directory_is_access_error(self, tmp_path):
        with pytest.raises(FileAccessError):
            load_dataset(str(tmp_path))

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "latin1.csv"
        path.write_bytes(b"timestamp,elapsedtime_seconds,trace_id,jaeger_url\nts,1.0,\xe9t\xe9,u\n")
        with pytest.raises(FileAccessError, match="UTF-8"):
            load_dataset(str(path))

    def test_errors_share_base_class(self, write_csv):
        with pytest.raises(AnalysisError):
            load_dataset(write_csv("ts,x,a,u\n"))
