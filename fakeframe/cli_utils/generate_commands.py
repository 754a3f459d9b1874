"""
Generation CLI Commands

Command implementations behind ``fakeframe generate``, ``fakeframe read`` and
``fakeframe types``, kept apart from the option declarations in cli.py.
"""

import json
import time
from pathlib import Path
from typing import Any, Dict, Optional

import pandas as pd
import typer
from rich.console import Console
from rich.style import Style
from rich.table import Table
from rich.text import Text

from fakeframe.python_libs.common.exceptions import FakeFrameError

console = Console()

PREVIEW_ROWS = 10

SUCCESS = Style(color="green", bold=True)
WARNING = Style(color="yellow", bold=True)
ERROR = Style(color="red", bold=True)
INFO = Style(color="cyan", italic=True)


def print_success(message: str) -> None:
    console.print(Text(message, style=SUCCESS))


def print_warning(message: str) -> None:
    console.print(Text(message, style=WARNING))


def print_error(message: str) -> None:
    console.print(Text(message, style=ERROR))


def print_info(message: str) -> None:
    console.print(Text(message, style=INFO))


def _fail(error: FakeFrameError) -> None:
    print_error(f"Error: {error}")
    raise typer.Exit(code=1)


def _print_preview(table: pd.DataFrame, title: str) -> None:
    preview = Table(title=f"{title} ({len(table):,} rows x {len(table.columns)} columns)")
    for column in table.columns:
        preview.add_column(f"{column}\n[dim]{table[column].dtype}[/dim]")
    for row in table.head(PREVIEW_ROWS).itertuples(index=False):
        preview.add_row(*(str(value) for value in row))
    console.print(preview)


def generate(
    schema_path: Path,
    overrides: Dict[str, Any],
    output_path: Optional[Path] = None,
    output_format: str = "parquet",
) -> None:
    """Generate a table from a schema file, preview it and optionally write it."""
    from fakeframe.python_libs.common.generation_config import GenerationConfig
    from fakeframe.python_libs.python.table_orchestrator import TableOrchestrator
    from fakeframe.python_libs.python.table_store import PandasTableStore, resolve_format
    from fakeframe.python_libs.python.worker_pool import WorkerPool

    try:
        file_format = resolve_format(output_format)
        config = GenerationConfig.resolve(overrides)
        with WorkerPool(config.num_threads) as pool:
            orchestrator = TableOrchestrator(config=config, pool=pool)
            start_time = time.perf_counter()
            table = orchestrator.generate_from_file(schema_path)
            elapsed = time.perf_counter() - start_time
    except FakeFrameError as e:
        _fail(e)

    _print_preview(table, "Generated table")
    print_info(
        f"Generated {config.row_count:,} rows in {elapsed:.3f}s using {config.num_threads} threads"
    )

    if output_path is not None:
        try:
            start_time = time.perf_counter()
            PandasTableStore().write_table(table, output_path, file_format)
        except FakeFrameError as e:
            _fail(e)
        print_success(
            f"Wrote {file_format} to {output_path} in {time.perf_counter() - start_time:.3f}s"
        )


def read(
    input_path: Path,
    output_path: Optional[Path] = None,
    output_format: Optional[str] = None,
) -> None:
    """Read a table, preview it and optionally convert it to another format."""
    from fakeframe.python_libs.python.table_store import PandasTableStore, resolve_format

    store = PandasTableStore()
    try:
        start_time = time.perf_counter()
        table = store.read_table(input_path)
        elapsed = time.perf_counter() - start_time
    except FakeFrameError as e:
        _fail(e)

    _print_preview(table, str(input_path))
    print_info(f"Read {len(table):,} rows in {elapsed:.3f}s")

    if output_path is not None:
        try:
            file_format = resolve_format(output_format or output_path.suffix.lstrip("."), output_path)
            store.write_table(table, output_path, file_format)
        except FakeFrameError as e:
            _fail(e)
        print_success(f"Wrote {file_format} to {output_path}")


def list_types(output_format: str = "table", disabled_families: Optional[str] = None) -> None:
    """Print supported type names grouped by family."""
    from fakeframe.python_libs.common.generation_config import GenerationConfig
    from fakeframe.python_libs.python.column_strategies import TypeRegistry

    try:
        config = GenerationConfig.resolve({"disabled_families": disabled_families})
    except FakeFrameError as e:
        _fail(e)

    grouped = TypeRegistry(config.enabled_families).supported_types()

    if output_format == "json":
        console.print_json(json.dumps({family.value: names for family, names in grouped.items()}))
        return
    if output_format != "table":
        print_error(f"Error: Invalid output format '{output_format}'. Must be one of: table, json")
        raise typer.Exit(code=1)

    types_table = Table(title="Supported column types")
    types_table.add_column("Family", style="cyan")
    types_table.add_column("Types")
    for family, names in grouped.items():
        types_table.add_row(family.value, ", ".join(names))
    console.print(types_table)
