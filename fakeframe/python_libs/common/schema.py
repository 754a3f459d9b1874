"""
Schema documents describing the table to generate.

A schema document is a JSON (or YAML) object with a top-level ``columns``
array; each element has a ``name``, a ``type`` and optional ``args``::

    {
        "columns": [
            {"name": "age", "type": "u32", "args": {"range": {"start": 18, "end": 65}}},
            {"name": "active", "type": "Boolean", "args": {"ratio": 128}}
        ]
    }

Type names are resolved to a ``ColumnKind`` while parsing, so everything
downstream works with the closed catalogue instead of raw strings.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Iterator, Mapping, Tuple, Union

import yaml

from fakeframe.python_libs.common.exceptions import ErrorContext, SchemaError

if TYPE_CHECKING:
    from fakeframe.python_libs.python.column_strategies import ColumnKind, TypeRegistry

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yml", ".yaml"}


@dataclass(frozen=True)
class ColumnSpec:
    """One schema entry."""

    name: str
    type_name: str
    kind: "ColumnKind"
    args: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))


@dataclass(frozen=True)
class Schema:
    """Ordered, non-empty sequence of column specifications."""

    columns: Tuple[ColumnSpec, ...]

    def __len__(self) -> int:
        return len(self.columns)

    def __iter__(self) -> Iterator[ColumnSpec]:
        return iter(self.columns)

    def __getitem__(self, index: int) -> ColumnSpec:
        return self.columns[index]

    @property
    def column_names(self) -> list[str]:
        return [column.name for column in self.columns]


def parse_schema(document: Any, registry: "TypeRegistry") -> Schema:
    """
    Parse a schema document into a ``Schema``.

    Args:
        document: decoded JSON/YAML document
        registry: type registry used to resolve each column's type name

    Raises:
        SchemaError: the ``columns`` list is missing, empty or malformed
        UnsupportedTypeError: a column names an unknown or disabled type
    """
    if not isinstance(document, Mapping):
        raise SchemaError("Schema document must be an object with a 'columns' array")

    raw_columns = document.get("columns")
    if not isinstance(raw_columns, list):
        raise SchemaError("Missing or invalid 'columns' array in schema")
    if not raw_columns:
        raise SchemaError("Schema 'columns' array must not be empty")

    columns = []
    seen_names = set()
    for position, raw_column in enumerate(raw_columns):
        context = ErrorContext(additional_info={"position": position})
        if not isinstance(raw_column, Mapping):
            raise SchemaError(f"Column definition at position {position} must be an object", context)

        name = raw_column.get("name")
        if not isinstance(name, str) or not name:
            raise SchemaError(f"Column at position {position} has no 'name'", context)
        context.column_name = name

        type_name = raw_column.get("type")
        if not isinstance(type_name, str) or not type_name:
            raise SchemaError(f"Column '{name}' has no 'type'", context)

        args = raw_column.get("args")
        if args is None:
            args = {}
        elif not isinstance(args, Mapping):
            raise SchemaError(f"Column '{name}' has non-object 'args'", context)

        if name in seen_names:
            raise SchemaError(f"Duplicate column name '{name}'", context)
        seen_names.add(name)

        kind = registry.resolve_kind(type_name, column_name=name)
        columns.append(
            ColumnSpec(name=name, type_name=type_name, kind=kind, args=MappingProxyType(dict(args)))
        )

    logger.debug(f"Parsed schema with {len(columns)} columns")
    return Schema(columns=tuple(columns))


def read_schema_document(path: Union[str, Path]) -> Any:
    """Load a schema document from a JSON or YAML file."""
    schema_path = Path(path)
    try:
        with schema_path.open("r", encoding="utf-8") as f:
            if schema_path.suffix.lower() in YAML_SUFFIXES:
                return yaml.safe_load(f)
            return json.load(f)
    except FileNotFoundError:
        raise SchemaError(
            f"Schema file not found: {schema_path}", ErrorContext(file_path=str(schema_path))
        ) from None
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise SchemaError(
            f"Could not parse schema file: {e}", ErrorContext(file_path=str(schema_path))
        ) from e


def load_schema(path: Union[str, Path], registry: "TypeRegistry") -> Schema:
    """Read and parse a schema file."""
    return parse_schema(read_schema_document(path), registry)
