"""
Column Generator

Produces one column of values for a resolved strategy. Rows are split into
fixed-size chunks that run on the worker pool's row executor; every chunk
draws from its own random sources, derived from the column's seed sequence,
so the output depends only on the seed and the chunk size.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, List, Mapping, Optional

import numpy as np
import pandas as pd

from fakeframe.python_libs.common.argument_resolver import ArgumentResolver
from fakeframe.python_libs.common.constants import DEFAULT_CHUNK_SIZE
from fakeframe.python_libs.common.exceptions import ConfigurationError, ErrorContext
from fakeframe.python_libs.python.random_sources import ChunkRandomSources
from fakeframe.python_libs.python.worker_pool import WorkerPool, get_worker_pool

if TYPE_CHECKING:
    from fakeframe.python_libs.python.column_strategies import ColumnStrategy

logger = logging.getLogger(__name__)


def chunk_sizes(row_count: int, chunk_size: int) -> List[int]:
    """Sizes of the chunks covering ``row_count`` rows, in row order."""
    full, remainder = divmod(row_count, chunk_size)
    sizes = [chunk_size] * full
    if remainder:
        sizes.append(remainder)
    return sizes


class ColumnGenerator:
    """Generates columns on a worker pool."""

    def __init__(self, pool: Optional[WorkerPool] = None, chunk_size: int = DEFAULT_CHUNK_SIZE):
        if isinstance(chunk_size, bool) or not isinstance(chunk_size, int) or chunk_size < 1:
            raise ConfigurationError(
                f"Chunk size must be a positive integer, got {chunk_size!r}",
                ErrorContext(additional_info={"chunk_size": chunk_size}),
            )
        self.pool = pool or get_worker_pool()
        self.chunk_size = chunk_size

    def generate(
        self,
        column_name: str,
        strategy: "ColumnStrategy",
        row_count: int,
        args: Optional[Mapping[str, Any]] = None,
        seed_sequence: Optional[np.random.SeedSequence] = None,
    ) -> pd.Series:
        """
        Generate ``row_count`` values for one column.

        Parameters are resolved before any chunk is scheduled, so an invalid
        argument fails the column without sampling anything.

        Raises:
            ArgumentError: the column's arguments are missing or invalid
        """
        params = strategy.resolve(ArgumentResolver(column_name, args))
        if seed_sequence is None:
            seed_sequence = np.random.SeedSequence()

        sizes = chunk_sizes(row_count, self.chunk_size)
        chunk_seeds = seed_sequence.spawn(len(sizes))
        futures = [
            self.pool.row_executor.submit(_sample_chunk, strategy, params, size, chunk_seed)
            for size, chunk_seed in zip(sizes, chunk_seeds)
        ]
        try:
            chunks = [future.result() for future in futures]
        except BaseException:
            for future in futures:
                future.cancel()
            raise

        logger.debug(f"Generated {row_count} rows for column '{column_name}' in {len(sizes)} chunks")

        if strategy.dtype is not None:
            if chunks:
                values = np.concatenate(chunks).astype(strategy.dtype, copy=False)
            else:
                values = np.empty(0, dtype=strategy.dtype)
            return pd.Series(values, name=column_name)

        values = [value for chunk in chunks for value in chunk]
        return pd.Series(values, name=column_name, dtype=object)


def _sample_chunk(
    strategy: "ColumnStrategy", params: Any, size: int, seed_sequence: np.random.SeedSequence
):
    return strategy.sample(ChunkRandomSources(seed_sequence), params, size)
