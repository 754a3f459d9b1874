"""
Generation Metrics and Logging

Collects per-column metrics for a table generation run and writes a summary
through the standard logging module.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional


@dataclass
class ColumnGenerationMetrics:
    """Metrics for one generated column."""

    column_name: str
    type_name: str
    dtype: str
    rows_generated: int
    generation_duration_seconds: float

    @property
    def generation_rate_rows_per_second(self) -> float:
        """Calculate generation rate in rows per second."""
        if self.generation_duration_seconds <= 0:
            return 0.0
        return self.rows_generated / self.generation_duration_seconds


@dataclass
class GenerationSummary:
    """Summary of a whole table generation run."""

    generation_timestamp: str
    row_count: int
    num_threads: int
    total_duration_seconds: float
    seed: Optional[int] = None
    column_metrics: List[ColumnGenerationMetrics] = field(default_factory=list)

    @property
    def total_columns(self) -> int:
        return len(self.column_metrics)

    @property
    def total_values(self) -> int:
        return sum(metrics.rows_generated for metrics in self.column_metrics)

    @property
    def overall_generation_rate(self) -> float:
        """Calculate overall generation rate in rows per second."""
        if self.total_duration_seconds <= 0:
            return 0.0
        return self.row_count / self.total_duration_seconds

    def get_column(self, column_name: str) -> Optional[ColumnGenerationMetrics]:
        """Get metrics for a specific column."""
        return next(
            (metrics for metrics in self.column_metrics if metrics.column_name == column_name),
            None,
        )

    def to_dict(self) -> Dict[str, Any]:
        result = asdict(self)
        result["total_columns"] = self.total_columns
        result["overall_generation_rate"] = self.overall_generation_rate
        return result


class GenerationLogger:
    """Logger for table generation runs."""

    def __init__(self, logger_name: str = __name__):
        self.logger = logging.getLogger(logger_name)

    @staticmethod
    def timestamp() -> str:
        return datetime.now().isoformat(timespec="seconds")

    def log_generation_start(self, column_count: int, row_count: int, num_threads: int) -> None:
        self.logger.info(
            f"Generating {row_count:,} rows for {column_count} columns using {num_threads} threads"
        )

    def log_column_generated(self, metrics: ColumnGenerationMetrics) -> None:
        self.logger.debug(
            f"Column '{metrics.column_name}' ({metrics.type_name} -> {metrics.dtype}): "
            f"{metrics.rows_generated:,} rows in {metrics.generation_duration_seconds:.3f}s"
        )

    def log_generation_failed(self, column_name: str, error: Exception) -> None:
        self.logger.error(f"Generation failed at column '{column_name}': {error}")

    def log_generation_summary(self, summary: GenerationSummary) -> None:
        self.logger.info(
            f"Generated {summary.row_count:,} rows x {summary.total_columns} columns "
            f"in {summary.total_duration_seconds:.3f}s "
            f"({summary.overall_generation_rate:,.0f} rows/s)"
        )
