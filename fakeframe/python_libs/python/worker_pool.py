"""Thread pools shared by column and row-chunk generation."""

from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from fakeframe.python_libs.common.constants import DEFAULT_NUM_THREADS
from fakeframe.python_libs.common.exceptions import ConfigurationError, ErrorContext

logger = logging.getLogger(__name__)


class WorkerPool:
    """
    Pair of equally sized executors.

    Column tasks run on ``column_executor`` and block on their row chunks,
    which run on ``row_executor``. Keeping the two apart means a full set of
    waiting column tasks can never starve the chunks they wait on.
    """

    def __init__(self, num_threads: int = DEFAULT_NUM_THREADS):
        if isinstance(num_threads, bool) or not isinstance(num_threads, int) or num_threads < 1:
            raise ConfigurationError(
                f"Thread count must be a positive integer, got {num_threads!r}",
                ErrorContext(additional_info={"num_threads": num_threads}),
            )
        self.num_threads = num_threads
        self.column_executor = ThreadPoolExecutor(
            max_workers=num_threads, thread_name_prefix="fakeframe-column"
        )
        self.row_executor = ThreadPoolExecutor(
            max_workers=num_threads, thread_name_prefix="fakeframe-rows"
        )

    def shutdown(self, wait: bool = True) -> None:
        self.column_executor.shutdown(wait=wait)
        self.row_executor.shutdown(wait=wait)

    def __enter__(self) -> "WorkerPool":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.shutdown()


_pool_lock = threading.Lock()
_global_pool: Optional[WorkerPool] = None


def configure_worker_pool(num_threads: int = DEFAULT_NUM_THREADS) -> WorkerPool:
    """Replace the process-wide pool with one of ``num_threads`` workers."""
    global _global_pool
    pool = WorkerPool(num_threads)
    with _pool_lock:
        previous, _global_pool = _global_pool, pool
    if previous is not None:
        previous.shutdown(wait=False)
    logger.debug(f"Configured worker pool with {num_threads} threads")
    return pool


def get_worker_pool() -> WorkerPool:
    """Return the process-wide pool, creating a single-threaded one on first use."""
    global _global_pool
    with _pool_lock:
        if _global_pool is None:
            _global_pool = WorkerPool(DEFAULT_NUM_THREADS)
        return _global_pool
