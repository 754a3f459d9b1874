"""
Standard interface for table stores.

A table store reads and writes generated tables as files, choosing the file
format from the path or an explicit argument.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from fakeframe.python_libs.common.constants import FileFormat


class TableStoreInterface(ABC):
    """Abstract interface for table file storage."""

    @abstractmethod
    def read_table(self, path: str | Path) -> Any:
        """
        Read a table from a file or a directory of parquet partitions.

        Args:
            path: File path whose extension selects the format, or a directory

        Returns:
            The table as a DataFrame
        """
        pass

    @abstractmethod
    def write_table(self, table: Any, path: str | Path, file_format: FileFormat | str) -> None:
        """
        Write a table to a file.

        Args:
            table: DataFrame to write
            path: Target file path
            file_format: One of the supported ``FileFormat`` values
        """
        pass
