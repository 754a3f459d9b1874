import json

import numpy as np
import pandas as pd
import pytest

from fakeframe.python_libs.common.constants import FileFormat
from fakeframe.python_libs.common.exceptions import (
    SchemaMismatchError,
    TableReadError,
    UnsupportedFormatError,
)
from fakeframe.python_libs.python.table_store import PandasTableStore, resolve_format

ROUND_TRIP_SCHEMA = {
    "columns": [
        {"name": "id", "type": "i64", "args": {"range": {"start": -1000000, "end": 1000000}}},
        {"name": "count", "type": "u32", "args": {"range": {"start": 0, "end": 1000}}},
        {"name": "score", "type": "f64", "args": {"range": {"start": -10, "end": 10}}},
        {"name": "active", "type": "Boolean", "args": {"ratio": 128}},
        {"name": "first_name", "type": "FirstName"},
        {"name": "joined", "type": "DateTimeBetween", "args": {"start": "2020-01-01T00:00:00Z", "end": "2024-01-01T00:00:00Z"}},
    ]
}


@pytest.fixture
def store():
    return PandasTableStore()


@pytest.fixture
def generated_table(make_orchestrator):
    return make_orchestrator(seed=11).generate_from_document(ROUND_TRIP_SCHEMA, row_count=25)


class TestRoundTrip:
    """Tests for writing and reading back generated tables."""

    def test_parquet_round_trip(self, store, generated_table, tmp_path):
        """Parquet preserves values and dtypes."""
        path = tmp_path / "table.parquet"
        store.write_table(generated_table, path, FileFormat.PARQUET)
        table = store.read_table(path)
        pd.testing.assert_frame_equal(table, generated_table, check_dtype=False)
        for column in ("id", "count", "score", "active"):
            assert table[column].dtype == generated_table[column].dtype

    def test_json_round_trip(self, store, generated_table, tmp_path):
        """JSON is an array of records and keeps numbers and strings."""
        path = tmp_path / "table.json"
        store.write_table(generated_table, path, "json")
        records = json.loads(path.read_text())
        assert isinstance(records, list)
        assert set(records[0]) == set(generated_table.columns)

        table = store.read_table(path)
        assert table.shape == generated_table.shape
        assert list(table["id"]) == list(generated_table["id"])
        assert list(table["count"]) == list(generated_table["count"])
        assert list(table["score"]) == list(generated_table["score"])
        assert list(table["active"]) == list(generated_table["active"])
        assert list(table["joined"]) == list(generated_table["joined"])

    def test_csv_round_trip(self, store, generated_table, tmp_path):
        """CSV has a header and no index column."""
        path = tmp_path / "table.csv"
        store.write_table(generated_table, path, "CSV")
        assert path.read_text().splitlines()[0] == ",".join(generated_table.columns)

        table = store.read_table(path)
        assert table.shape == generated_table.shape
        assert list(table["id"]) == list(generated_table["id"])
        assert np.allclose(table["score"], generated_table["score"])
        assert table["active"].dtype == bool

    def test_json_keeps_full_float_precision(self, store, make_orchestrator, tmp_path):
        """Every f64 value reads back bit-for-bit from JSON."""
        table = make_orchestrator(seed=5).generate_from_document(
            {"columns": [{"name": "x", "type": "f64"}]}, row_count=200
        )
        path = tmp_path / "floats.json"
        store.write_table(table, path, FileFormat.JSON)
        assert store.read_table(path)["x"].tolist() == table["x"].tolist()

    def test_json_write_options_go_to_json_dump(self, tmp_path):
        """JSON write options are passed to the json writer."""
        store = PandasTableStore({FileFormat.JSON: {"indent": 2}})
        path = tmp_path / "table.json"
        store.write_table(pd.DataFrame({"n": [1]}), path, "json")
        assert path.read_text() == '[\n  {\n    "n": 1\n  }\n]'

    def test_csv_infers_types_on_read(self, store, tmp_path):
        """CSV columns of digit strings come back as integers by default."""
        path = tmp_path / "zips.csv"
        store.write_table(pd.DataFrame({"zip": ["01234", "90210"]}), path, "csv")
        assert list(store.read_table(path)["zip"]) == [1234, 90210]

    def test_csv_dtype_option_keeps_strings(self, tmp_path):
        """A CSV dtype option preserves string columns as written."""
        store = PandasTableStore({FileFormat.CSV: {"dtype": {"zip": str}}})
        path = tmp_path / "zips.csv"
        PandasTableStore().write_table(pd.DataFrame({"zip": ["01234", "90210"]}), path, "csv")
        assert list(store.read_table(path)["zip"]) == ["01234", "90210"]

    def test_write_creates_parent_directories(self, store, generated_table, tmp_path):
        """Missing output directories are created."""
        path = tmp_path / "nested" / "out" / "table.parquet"
        store.write_table(generated_table, path, "parquet")
        assert path.is_file()


class TestPartitions:
    """Tests for reading a directory of parquet partitions."""

    def test_partitions_concatenated_in_name_order(self, store, tmp_path):
        """Partitions are read sorted by file name."""
        directory = tmp_path / "parts"
        directory.mkdir()
        pd.DataFrame({"n": [3, 4]}).to_parquet(directory / "part-1.parquet", index=False)
        pd.DataFrame({"n": [1, 2]}).to_parquet(directory / "part-0.parquet", index=False)
        (directory / "_SUCCESS").write_text("")

        table = store.read_table(directory)
        assert list(table["n"]) == [1, 2, 3, 4]
        assert list(table.index) == [0, 1, 2, 3]

    def test_column_mismatch(self, store, tmp_path):
        """Partitions with different columns raise SchemaMismatchError."""
        directory = tmp_path / "parts"
        directory.mkdir()
        pd.DataFrame({"n": [1]}).to_parquet(directory / "a.parquet", index=False)
        pd.DataFrame({"m": [2]}).to_parquet(directory / "b.parquet", index=False)
        with pytest.raises(SchemaMismatchError):
            store.read_table(directory)

    def test_dtype_mismatch(self, store, tmp_path):
        """Partitions with different column types raise SchemaMismatchError."""
        directory = tmp_path / "parts"
        directory.mkdir()
        pd.DataFrame({"n": [1]}).to_parquet(directory / "a.parquet", index=False)
        pd.DataFrame({"n": ["x"]}).to_parquet(directory / "b.parquet", index=False)
        with pytest.raises(SchemaMismatchError):
            store.read_table(directory)

    def test_empty_directory(self, store, tmp_path):
        """A directory without partitions is a read error."""
        with pytest.raises(TableReadError):
            store.read_table(tmp_path)


class TestFormats:
    """Tests for format resolution and read errors."""

    def test_unknown_write_format(self, store, generated_table, tmp_path):
        """Unknown formats raise UnsupportedFormatError."""
        with pytest.raises(UnsupportedFormatError) as exc_info:
            store.write_table(generated_table, tmp_path / "t.xlsx", "xlsx")
        assert exc_info.value.file_format == "xlsx"

    def test_unknown_read_extension(self, store, tmp_path):
        """Files with unsupported extensions cannot be read."""
        path = tmp_path / "table.txt"
        path.write_text("a,b")
        with pytest.raises(UnsupportedFormatError):
            store.read_table(path)

    def test_missing_file(self, store, tmp_path):
        """Missing files raise TableReadError."""
        with pytest.raises(TableReadError):
            store.read_table(tmp_path / "missing.parquet")

    def test_corrupt_parquet(self, store, tmp_path):
        """Unreadable files raise TableReadError."""
        path = tmp_path / "broken.parquet"
        path.write_text("not parquet")
        with pytest.raises(TableReadError):
            store.read_table(path)

    @pytest.mark.parametrize("name", ["parquet", "JSON", "Csv"])
    def test_resolve_format_is_case_insensitive(self, name):
        """Format names ignore case."""
        assert resolve_format(name) == FileFormat(name.lower())
