import json
from types import MappingProxyType

import pytest

from fakeframe.python_libs.common.constants import TypeFamily
from fakeframe.python_libs.common.exceptions import SchemaError, UnsupportedTypeError
from fakeframe.python_libs.common.schema import ColumnSpec, load_schema, parse_schema
from fakeframe.python_libs.python.column_strategies import ColumnKind, TypeRegistry


class TestParseSchema:
    """Tests for schema document parsing."""

    def test_parses_columns_in_order(self, registry, people_schema):
        """Column order and resolved kinds are preserved."""
        schema = parse_schema(people_schema, registry)
        assert schema.column_names == ["id", "age", "score", "active", "first_name", "email"]
        assert schema[1].kind == ColumnKind.U32
        assert schema[1].args["range"] == {"start": 18, "end": 65}
        assert len(schema) == 6

    def test_absent_args_become_empty_mapping(self, registry):
        """Columns without args get an empty mapping."""
        schema = parse_schema({"columns": [{"name": "w", "type": "Word", "args": None}]}, registry)
        assert dict(schema[0].args) == {}

    def test_column_spec_default_args(self):
        """ColumnSpec built without args gets its own empty read-only mapping."""
        first = ColumnSpec(name="a", type_name="Word", kind=ColumnKind.WORD)
        second = ColumnSpec(name="b", type_name="Word", kind=ColumnKind.WORD)
        assert dict(first.args) == {}
        assert isinstance(first.args, MappingProxyType)
        assert first.args is not second.args

    @pytest.mark.parametrize(
        "document",
        [
            [],
            {},
            {"columns": "Word"},
            {"columns": []},
            {"columns": ["Word"]},
            {"columns": [{"type": "Word"}]},
            {"columns": [{"name": "", "type": "Word"}]},
            {"columns": [{"name": "w"}]},
            {"columns": [{"name": "w", "type": "Word", "args": [1]}]},
        ],
    )
    def test_malformed_documents(self, registry, document):
        """Structural problems raise SchemaError."""
        with pytest.raises(SchemaError):
            parse_schema(document, registry)

    def test_duplicate_column_names_rejected(self, registry):
        """Column names must be unique."""
        document = {"columns": [{"name": "a", "type": "Word"}, {"name": "a", "type": "u32"}]}
        with pytest.raises(SchemaError, match="Duplicate column name 'a'"):
            parse_schema(document, registry)

    def test_unknown_type_named_in_error(self, registry):
        """Unknown types raise UnsupportedTypeError naming the type."""
        document = {
            "columns": [
                {"name": "ok", "type": "u32", "args": {"range": {"start": 10, "end": 5}}},
                {"name": "bad", "type": "NotARealType"},
            ]
        }
        with pytest.raises(UnsupportedTypeError) as exc_info:
            parse_schema(document, registry)
        assert exc_info.value.type_name == "NotARealType"
        assert "NotARealType" in str(exc_info.value)
        assert exc_info.value.context.column_name == "bad"

    def test_type_names_are_case_sensitive(self, registry):
        """Type names match exactly."""
        with pytest.raises(UnsupportedTypeError):
            parse_schema({"columns": [{"name": "w", "type": "word"}]}, registry)

    def test_disabled_family_reported_as_unsupported(self):
        """A disabled family is indistinguishable from an unknown type."""
        registry = TypeRegistry(set(TypeFamily) - {TypeFamily.UUID})
        with pytest.raises(UnsupportedTypeError) as exc_info:
            parse_schema({"columns": [{"name": "id", "type": "UUIDv4"}]}, registry)
        assert str(exc_info.value).startswith("Unsupported type: UUIDv4")


class TestLoadSchema:
    """Tests for reading schema files."""

    def test_load_json(self, registry, schema_file):
        """JSON schema files are loaded."""
        assert len(load_schema(schema_file, registry)) == 6

    def test_load_yaml(self, registry, tmp_path):
        """YAML schema files are loaded by extension."""
        path = tmp_path / "schema.yml"
        path.write_text(
            "columns:\n"
            "  - name: age\n"
            "    type: u32\n"
            "    args:\n"
            "      range: {start: 1, end: 9}\n"
            "  - name: city\n"
            "    type: CityName\n"
        )
        schema = load_schema(path, registry)
        assert schema.column_names == ["age", "city"]

    def test_missing_file(self, registry, tmp_path):
        """A missing file raises SchemaError with the path in context."""
        path = tmp_path / "missing.json"
        with pytest.raises(SchemaError) as exc_info:
            load_schema(path, registry)
        assert exc_info.value.context.file_path == str(path)

    def test_invalid_json(self, registry, tmp_path):
        """Unparsable JSON raises SchemaError."""
        path = tmp_path / "schema.json"
        path.write_text("{not json")
        with pytest.raises(SchemaError):
            load_schema(path, registry)

    def test_missing_columns_key(self, registry, tmp_path):
        """A document without columns raises SchemaError."""
        path = tmp_path / "schema.json"
        path.write_text(json.dumps({"fields": []}))
        with pytest.raises(SchemaError, match="columns"):
            load_schema(path, registry)
