import json

import pytest

from fakeframe.python_libs.common.generation_config import GenerationConfig
from fakeframe.python_libs.python.column_strategies import TypeRegistry
from fakeframe.python_libs.python.table_orchestrator import TableOrchestrator
from fakeframe.python_libs.python.worker_pool import WorkerPool

FAKER_ENV_VARS = (
    "FAKER_SCHEMA_FILE",
    "FAKER_NUM_ROWS",
    "FAKER_NUM_THREADS",
    "RAYON_NUM_THREADS",
    "FAKER_CHUNK_SIZE",
    "FAKER_SEED",
    "FAKER_DISABLED_FAMILIES",
    "FAKER_OUTPUT_PATH",
    "FAKER_INPUT_PATH",
    "FAKEFRAME_CONFIG",
)


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Run every test away from the caller's environment and project config."""
    for env_var in FAKER_ENV_VARS:
        monkeypatch.delenv(env_var, raising=False)
    workdir = tmp_path / "workdir"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    return workdir


@pytest.fixture
def registry():
    return TypeRegistry()


@pytest.fixture
def pool():
    with WorkerPool(2) as worker_pool:
        yield worker_pool


@pytest.fixture
def make_orchestrator(pool):
    """Build an orchestrator on the shared test pool."""

    def _make(**config_values):
        return TableOrchestrator(config=GenerationConfig(**config_values), pool=pool)

    return _make


@pytest.fixture
def people_schema():
    return {
        "columns": [
            {"name": "id", "type": "u64", "args": {"range": {"start": 1, "end": 1000000}}},
            {"name": "age", "type": "u32", "args": {"range": {"start": 18, "end": 65}}},
            {"name": "score", "type": "f64", "args": {"range": {"start": -5, "end": 5}}},
            {"name": "active", "type": "Boolean", "args": {"ratio": 128}},
            {"name": "first_name", "type": "FirstName"},
            {"name": "email", "type": "SafeEmail"},
        ]
    }


@pytest.fixture
def schema_file(tmp_path, people_schema):
    path = tmp_path / "schema.json"
    path.write_text(json.dumps(people_schema))
    return path
