import pytest

from fakeframe.python_libs.common.exceptions import ConfigurationError
from fakeframe.python_libs.python import worker_pool
from fakeframe.python_libs.python.worker_pool import WorkerPool, configure_worker_pool, get_worker_pool


@pytest.fixture
def restore_global_pool(monkeypatch):
    monkeypatch.setattr(worker_pool, "_global_pool", None)
    yield
    if worker_pool._global_pool is not None:
        worker_pool._global_pool.shutdown()


class TestWorkerPool:
    """Tests for the worker pool."""

    @pytest.mark.parametrize("num_threads", [0, -2, 1.5, True])
    def test_invalid_thread_count(self, num_threads):
        """Thread counts must be positive integers."""
        with pytest.raises(ConfigurationError):
            WorkerPool(num_threads)

    def test_invalid_thread_count_in_message(self):
        """The rejected count appears in the error's context."""
        with pytest.raises(ConfigurationError) as exc_info:
            WorkerPool(0)
        assert exc_info.value.context.additional_info == {"num_threads": 0}
        assert "[num_threads=0]" in str(exc_info.value)

    def test_executors_are_separate(self):
        """Column and row work run on different executors of the same size."""
        with WorkerPool(3) as pool:
            assert pool.column_executor is not pool.row_executor
            assert pool.num_threads == 3

    def test_nested_submission_does_not_deadlock(self):
        """A single-threaded pool can run a column task that waits on a chunk."""
        with WorkerPool(1) as pool:

            def column_task():
                return pool.row_executor.submit(lambda: 42).result(timeout=5)

            assert pool.column_executor.submit(column_task).result(timeout=5) == 42

    def test_default_global_pool(self, restore_global_pool):
        """The process-wide pool defaults to one thread and is reused."""
        pool = get_worker_pool()
        assert pool.num_threads == 1
        assert get_worker_pool() is pool

    def test_configure_global_pool(self, restore_global_pool):
        """configure_worker_pool replaces the process-wide pool."""
        pool = configure_worker_pool(4)
        assert get_worker_pool() is pool
        assert pool.num_threads == 4
