from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from typing_extensions import Annotated

from fakeframe.cli_utils import generate_commands
from fakeframe.python_libs.common.generation_config import (
    ENV_NUM_ROWS,
    ENV_NUM_THREADS,
    ENV_RAYON_NUM_THREADS,
    ENV_SEED,
)

ENV_SCHEMA_FILE = "FAKER_SCHEMA_FILE"
ENV_OUTPUT_PATH = "FAKER_OUTPUT_PATH"
ENV_INPUT_PATH = "FAKER_INPUT_PATH"
DEFAULT_SCHEMA_FILE = "schema.json"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

app = typer.Typer(no_args_is_help=True, pretty_exceptions_show_locals=False)


def _env_fallback(value, env_var: str, default=None):
    """Return ``value``, else the environment variable (with a warning), else ``default``."""
    if value is not None:
        return value
    env_val = os.environ.get(env_var)
    if env_val:
        generate_commands.print_warning(f"Falling back to {env_var} environment variable.")
        return env_val
    return default


def _env_noted(value, *env_vars: str):
    """Leave environment resolution to the config layer, noting when it applies."""
    if value is None:
        env_var = next((name for name in env_vars if os.environ.get(name)), None)
        if env_var is not None:
            generate_commands.print_warning(f"Falling back to {env_var} environment variable.")
    return value


@app.callback()
def main(
    log_level: Annotated[
        str,
        typer.Option("--log-level", "-l", help="Logging level (DEBUG, INFO, WARNING, ERROR)"),
    ] = "WARNING",
):
    """Generate fake tabular data from a column schema."""
    level = log_level.upper()
    if level not in LOG_LEVELS:
        generate_commands.print_error(
            f"Error: Invalid log level '{log_level}'. Must be one of: {', '.join(LOG_LEVELS)}"
        )
        raise typer.Exit(code=1)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True))],
        force=True,
    )


@app.command()
def generate(
    schema: Annotated[
        Optional[Path],
        typer.Option("--schema", "-s", help=f"Schema file (env {ENV_SCHEMA_FILE}, default {DEFAULT_SCHEMA_FILE})"),
    ] = None,
    rows: Annotated[
        Optional[int],
        typer.Option("--rows", "-r", help=f"Number of rows to generate (env {ENV_NUM_ROWS})"),
    ] = None,
    threads: Annotated[
        Optional[int],
        typer.Option("--threads", "-t", help=f"Worker threads (env {ENV_NUM_THREADS})"),
    ] = None,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help=f"Output file path (env {ENV_OUTPUT_PATH})"),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: parquet, json or csv"),
    ] = "parquet",
    seed: Annotated[
        Optional[int],
        typer.Option("--seed", help=f"Seed for reproducible output (env {ENV_SEED})"),
    ] = None,
):
    """Generate a table from a schema file."""
    schema_path = Path(_env_fallback(schema, ENV_SCHEMA_FILE, DEFAULT_SCHEMA_FILE))
    output_path = _env_fallback(output, ENV_OUTPUT_PATH)
    overrides = {
        "row_count": _env_noted(rows, ENV_NUM_ROWS),
        "num_threads": _env_noted(threads, ENV_NUM_THREADS, ENV_RAYON_NUM_THREADS),
        "seed": _env_noted(seed, ENV_SEED),
    }
    generate_commands.generate(
        schema_path=schema_path,
        overrides=overrides,
        output_path=Path(output_path) if output_path is not None else None,
        output_format=output_format,
    )


@app.command()
def read(
    path: Annotated[
        Optional[Path],
        typer.Argument(help=f"Table file or parquet partition directory (env {ENV_INPUT_PATH})"),
    ] = None,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write the table to this path"),
    ] = None,
    output_format: Annotated[
        Optional[str],
        typer.Option("--format", "-f", help="Output format, defaults to the output file extension"),
    ] = None,
):
    """Read a parquet, json or csv table and optionally convert it."""
    input_path = _env_fallback(path, ENV_INPUT_PATH)
    if input_path is None:
        generate_commands.print_error(
            f"Error: No input path. Pass PATH or set the {ENV_INPUT_PATH} environment variable."
        )
        raise typer.Exit(code=1)
    generate_commands.read(Path(input_path), output_path=output, output_format=output_format)


@app.command("types")
def types_(
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: table or json"),
    ] = "table",
    disable: Annotated[
        Optional[str],
        typer.Option("--disable", help="Comma-separated type families to hide"),
    ] = None,
):
    """List supported column types grouped by family."""
    generate_commands.list_types(output_format=output_format, disabled_families=disable)


if __name__ == "__main__":
    app()
