"""pandas-backed table store for parquet, json and csv files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

import numpy as np
import pandas as pd

from fakeframe.python_libs.common.constants import FileFormat
from fakeframe.python_libs.common.exceptions import (
    ErrorContext,
    SchemaMismatchError,
    TableReadError,
    TableWriteError,
    UnsupportedFormatError,
)
from fakeframe.python_libs.interfaces.table_store_interface import TableStoreInterface

logger = logging.getLogger(__name__)

PARQUET_PARTITION_GLOB = "*.parquet"


def _json_value(value: Any) -> Any:
    if isinstance(value, np.generic):
        return value.item()
    if isinstance(value, pd.Timestamp):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def resolve_format(file_format: Any, file_path: Any = None) -> FileFormat:
    """Return ``file_format`` as a ``FileFormat`` or raise ``UnsupportedFormatError``."""
    if isinstance(file_format, str):
        file_format = file_format.lower()
    try:
        return FileFormat(file_format)
    except ValueError:
        raise UnsupportedFormatError(
            str(file_format), ErrorContext(file_path=str(file_path) if file_path else None)
        ) from None


class PandasTableStore(TableStoreInterface):
    """
    Reads and writes tables on the local file system with pandas.

    ``options`` maps a format to keyword arguments passed to both its pandas
    reader and writer, except that JSON writes pass them to ``json.dump``.
    CSV carries no types, so columns are re-inferred on read. A reading store
    built with CSV ``{"dtype": ...}`` keeps columns such as zip codes as strings.
    """

    def __init__(self, options: Dict[FileFormat, Dict[str, Any]] | None = None):
        self.options = options or {}

    def read_table(self, path: str | Path) -> pd.DataFrame:
        table_path = Path(path)
        if table_path.is_dir():
            return self._read_partitions(table_path)
        if not table_path.is_file():
            raise TableReadError(
                f"File not found: {table_path}",
                ErrorContext(file_path=str(table_path), operation="read"),
            )

        file_format = resolve_format(table_path.suffix.lstrip("."), table_path)
        logger.info(f"Reading {file_format} table from {table_path}")
        try:
            return self._read_file(table_path, file_format)
        except (OSError, ValueError) as e:
            raise TableReadError(
                f"Could not read {file_format} file {table_path}: {e}",
                ErrorContext(file_path=str(table_path), operation="read"),
            ) from e

    def _read_file(self, file_path: Path, file_format: FileFormat) -> pd.DataFrame:
        options = dict(self.options.get(file_format, {}))
        if file_format == FileFormat.PARQUET:
            return pd.read_parquet(file_path, **options)
        elif file_format == FileFormat.JSON:
            options.setdefault("orient", "records")
            # Keep generated strings as written
            options.setdefault("convert_dates", False)
            options.setdefault("dtype", False)
            options.setdefault("precise_float", True)
            return pd.read_json(file_path, **options)
        else:
            return pd.read_csv(file_path, **options)

    def _read_partitions(self, directory: Path) -> pd.DataFrame:
        partition_files: List[Path] = sorted(directory.glob(PARQUET_PARTITION_GLOB))
        if not partition_files:
            raise TableReadError(
                f"No parquet partitions found in {directory}",
                ErrorContext(file_path=str(directory), operation="read"),
            )

        logger.info(f"Reading {len(partition_files)} parquet partitions from {directory}")
        frames = []
        for partition_file in partition_files:
            try:
                frame = self._read_file(partition_file, FileFormat.PARQUET)
            except (OSError, ValueError) as e:
                raise TableReadError(
                    f"Could not read parquet partition {partition_file}: {e}",
                    ErrorContext(file_path=str(partition_file), operation="read"),
                ) from e
            if frames:
                self._check_partition(frames[0], frame, partition_file)
            frames.append(frame)
        return pd.concat(frames, ignore_index=True)

    @staticmethod
    def _check_partition(first: pd.DataFrame, frame: pd.DataFrame, partition_file: Path) -> None:
        if list(frame.columns) != list(first.columns):
            raise SchemaMismatchError(
                f"Partition {partition_file.name} has columns {list(frame.columns)}, "
                f"expected {list(first.columns)}",
                ErrorContext(file_path=str(partition_file), operation="read"),
            )
        mismatched = [
            column for column in first.columns if frame[column].dtype != first[column].dtype
        ]
        if mismatched:
            raise SchemaMismatchError(
                f"Partition {partition_file.name} has different types for columns {mismatched}",
                ErrorContext(file_path=str(partition_file), operation="read"),
            )

    def write_table(self, table: pd.DataFrame, path: str | Path, file_format: FileFormat | str) -> None:
        file_format = resolve_format(file_format, path)
        table_path = Path(path)
        options = dict(self.options.get(file_format, {}))
        logger.info(f"Writing {len(table):,} rows as {file_format} to {table_path}")
        try:
            if table_path.parent and not table_path.parent.exists():
                table_path.parent.mkdir(parents=True, exist_ok=True)
            if file_format == FileFormat.PARQUET:
                options.setdefault("index", False)
                table.to_parquet(table_path, **options)
            elif file_format == FileFormat.JSON:
                # pandas caps JSON floats at 15 digits; json writes the shortest exact repr
                with open(table_path, "w", encoding="utf-8") as f:
                    json.dump(table.to_dict(orient="records"), f, default=_json_value, **options)
            else:
                options.setdefault("index", False)
                table.to_csv(table_path, **options)
        except (OSError, TypeError, ValueError) as e:
            raise TableWriteError(
                f"Could not write {file_format} file {table_path}: {e}",
                ErrorContext(file_path=str(table_path), operation="write"),
            ) from e
