from fakeframe.project_config import load_project_config
from fakeframe.python_libs.common.generation_config import GenerationConfig
from fakeframe.python_libs.common.schema import Schema, load_schema, parse_schema
from fakeframe.python_libs.python.column_strategies import ColumnKind, TypeRegistry
from fakeframe.python_libs.python.table_orchestrator import GenerationRequest, TableOrchestrator
from fakeframe.python_libs.python.table_store import PandasTableStore

__all__ = [
    "ColumnKind",
    "GenerationConfig",
    "GenerationRequest",
    "PandasTableStore",
    "Schema",
    "TableOrchestrator",
    "TypeRegistry",
    "load_project_config",
    "load_schema",
    "parse_schema",
]
