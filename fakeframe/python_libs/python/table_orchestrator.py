"""
Table Orchestrator

Turns a schema and a row count into a ``pandas.DataFrame``. Columns are
generated concurrently on the worker pool; the first failing column (lowest
schema position among the failures) aborts the run and nothing partial is
returned.
"""

from __future__ import annotations

import logging
import time
from concurrent.futures import FIRST_EXCEPTION, Future, wait
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional, Union

import numpy as np
import pandas as pd

from fakeframe.python_libs.common.exceptions import ConfigurationError, ErrorContext
from fakeframe.python_libs.common.generation_config import GenerationConfig
from fakeframe.python_libs.common.generation_logger import (
    ColumnGenerationMetrics,
    GenerationLogger,
    GenerationSummary,
)
from fakeframe.python_libs.common.schema import ColumnSpec, Schema, load_schema, parse_schema
from fakeframe.python_libs.python.column_generator import ColumnGenerator
from fakeframe.python_libs.python.column_strategies import TypeRegistry
from fakeframe.python_libs.python.worker_pool import WorkerPool, get_worker_pool

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationRequest:
    """A parsed schema plus the number of rows to generate."""

    schema: Schema
    row_count: int

    def __post_init__(self):
        if isinstance(self.row_count, bool) or not isinstance(self.row_count, int) or self.row_count < 0:
            raise ConfigurationError(
                f"Row count must be a non-negative integer, got {self.row_count!r}",
                ErrorContext(additional_info={"row_count": self.row_count}),
            )


class TableOrchestrator:
    """Generates whole tables from schemas."""

    def __init__(
        self,
        config: Optional[GenerationConfig] = None,
        pool: Optional[WorkerPool] = None,
        registry: Optional[TypeRegistry] = None,
    ):
        self.config = config or GenerationConfig()
        self.pool = pool or get_worker_pool()
        self.registry = registry or TypeRegistry(self.config.enabled_families)
        self.column_generator = ColumnGenerator(pool=self.pool, chunk_size=self.config.chunk_size)
        self.generation_logger = GenerationLogger(__name__)
        self.last_summary: Optional[GenerationSummary] = None

    def parse(self, document: Any) -> Schema:
        return parse_schema(document, self.registry)

    def generate_from_document(self, document: Any, row_count: Optional[int] = None) -> pd.DataFrame:
        """Parse a decoded schema document and generate its table."""
        return self.generate(self._request(self.parse(document), row_count))

    def generate_from_file(self, path: Union[str, Path], row_count: Optional[int] = None) -> pd.DataFrame:
        """Load a schema file and generate its table."""
        return self.generate(self._request(load_schema(path, self.registry), row_count))

    def _request(self, schema: Schema, row_count: Optional[int]) -> GenerationRequest:
        return GenerationRequest(
            schema=schema, row_count=self.config.row_count if row_count is None else row_count
        )

    def generate(self, request: GenerationRequest) -> pd.DataFrame:
        """
        Generate the table described by ``request``.

        Returns:
            DataFrame with one column per schema entry, in schema order, each
            holding exactly ``request.row_count`` values

        Raises:
            UnsupportedTypeError: a column's type is unknown or disabled
            ArgumentError: a column's arguments are invalid
        """
        schema, row_count = request.schema, request.row_count
        self.generation_logger.log_generation_start(len(schema), row_count, self.pool.num_threads)
        start_time = time.perf_counter()

        root_seed = np.random.SeedSequence(self.config.seed)
        column_seeds = root_seed.spawn(len(schema))

        futures: List[Future] = [
            self.pool.column_executor.submit(self._generate_column, column, row_count, seed)
            for column, seed in zip(schema, column_seeds)
        ]
        _, not_done = wait(futures, return_when=FIRST_EXCEPTION)
        if not_done:
            for future in not_done:
                future.cancel()
            wait(not_done)

        for column, future in zip(schema, futures):
            if not future.cancelled() and future.exception() is not None:
                self.generation_logger.log_generation_failed(column.name, future.exception())
                raise future.exception()

        results = [future.result() for future in futures]
        columns = {}
        metrics = []
        for column, (series, column_metrics) in zip(schema, results):
            if len(series) != row_count:
                raise AssertionError(
                    f"Column '{column.name}' has {len(series)} values, expected {row_count}"
                )
            columns[column.name] = series
            metrics.append(column_metrics)

        table = pd.DataFrame(columns, columns=schema.column_names)

        self.last_summary = GenerationSummary(
            generation_timestamp=GenerationLogger.timestamp(),
            row_count=row_count,
            num_threads=self.pool.num_threads,
            total_duration_seconds=time.perf_counter() - start_time,
            seed=self.config.seed,
            column_metrics=metrics,
        )
        self.generation_logger.log_generation_summary(self.last_summary)
        return table

    def _generate_column(self, column: ColumnSpec, row_count: int, seed_sequence: np.random.SeedSequence):
        start_time = time.perf_counter()
        # Schemas parsed by another registry may name kinds disabled here
        kind = self.registry.resolve_kind(column.type_name, column_name=column.name)
        strategy = self.registry.strategy_for(kind)
        series = self.column_generator.generate(
            column.name, strategy, row_count, column.args, seed_sequence
        )
        metrics = ColumnGenerationMetrics(
            column_name=column.name,
            type_name=column.type_name,
            dtype=str(series.dtype),
            rows_generated=len(series),
            generation_duration_seconds=time.perf_counter() - start_time,
        )
        self.generation_logger.log_column_generated(metrics)
        return series, metrics
