"""Unit tests for the JSON schema parser."""

import json

import pytest

from schema2script.ir.models import RelationType
from schema2script.parsers import JsonParser
from schema2script.utils.error_handling import SchemaParseError


def _parse(document):
    return JsonParser().parse(json.dumps(document).encode("utf-8"))


class TestParse:

    def test_tables_in_document_order(self, university_bytes):
        schema = JsonParser().parse(university_bytes)

        assert schema.table_names() == ["student", "course", "enrollment"]
        assert schema.column_names("enrollment") == ["student_id", "course_id"]

    def test_column_fields(self, university_bytes):
        columns = JsonParser().parse(university_bytes).get_table("course").columns

        assert [(c.name, c.type, c.primary_key) for c in columns] == [
            ("course_id", "INT", True),
            ("title", "VARCHAR(200)", False),
        ]

    def test_relationship_fields(self, university_bytes):
        schema = JsonParser().parse(university_bytes)
        to_student, to_course = schema.get_table("enrollment").relationships
        many_to_many = schema.get_table("student").relationships[0]

        assert to_student.relationship_type == RelationType.MANY_TO_ONE
        assert to_student.related_foreign_key is None
        assert to_course.related_foreign_key == "course_id"
        assert many_to_many.through_table == "enrollment"

    def test_missing_relationships_key(self, university_bytes):
        assert JsonParser().parse(university_bytes).get_table("course").relationships == []

    def test_non_array_relationships_are_ignored(self):
        schema = _parse([
            {"tableName": "t", "columns": [{"name": "id", "type": "INT"}], "relationships": {"bad": 1}}
        ])

        assert schema.get_table("t").relationships == []

    def test_primary_key_defaults_to_false(self):
        schema = _parse([{"tableName": "t", "columns": [{"name": "id", "type": "INT"}]}])

        assert schema.get_table("t").columns[0].primary_key is False

    def test_null_optional_fields_read_as_absent(self):
        schema = _parse([
            {
                "tableName": "t",
                "columns": [{"name": "id", "type": "INT"}],
                "relationships": [
                    {
                        "relationshipType": "many-to-one",
                        "relatedTable": "u",
                        "foreignKey": "u_id",
                        "relatedForeignKey": None,
                        "throughTable": None,
                    }
                ],
            }
        ])

        rel = schema.get_table("t").relationships[0]
        assert rel.related_foreign_key is None
        assert rel.through_table is None

    def test_empty_array_is_empty_schema(self):
        assert JsonParser().parse(b"[]").tables == []

    def test_file_is_unset_for_raw_input(self, university_bytes):
        assert JsonParser().parse(university_bytes).file is None


class TestJoinTables:

    def test_through_table_marked(self, university_bytes):
        schema = JsonParser().parse(university_bytes)

        assert schema.get_table("enrollment").is_join_table is True
        assert schema.get_table("student").is_join_table is False
        assert schema.get_table("course").is_join_table is False

    def test_missing_through_table_is_ignored(self):
        schema = _parse([
            {
                "tableName": "a",
                "columns": [{"name": "id", "type": "INT"}],
                "relationships": [
                    {"relationshipType": "many-to-many", "relatedTable": "b", "foreignKey": "id", "throughTable": "ab"}
                ],
            }
        ])

        assert schema.get_table("a").is_join_table is False

    def test_only_first_duplicate_marked(self):
        schema = _parse([
            {"tableName": "link", "columns": [{"name": "id", "type": "INT"}]},
            {"tableName": "link", "columns": [{"name": "id", "type": "INT"}]},
            {
                "tableName": "a",
                "columns": [{"name": "id", "type": "INT"}],
                "relationships": [
                    {"relationshipType": "many-to-many", "relatedTable": "b", "foreignKey": "id", "throughTable": "link"}
                ],
            },
        ])

        assert [t.is_join_table for t in schema.tables] == [True, False, False]

    def test_join_flag_not_serialized(self, university_bytes):
        document = JsonParser().parse(university_bytes).to_document()

        assert all("isJoinTable" not in table for table in document)


class TestRoundTrip:

    def test_document_survives_parse_and_serialize(self, university_bytes):
        first = JsonParser().parse(university_bytes)
        second = JsonParser().parse(json.dumps(first.to_document()).encode("utf-8"))

        assert second.tables == first.tables


class TestParseFile:

    def test_records_source_file(self, university_file):
        schema = JsonParser().parse_file(university_file)

        assert schema.file == university_file
        assert len(schema.tables) == 3

    def test_missing_file(self, tmp_path):
        with pytest.raises(SchemaParseError, match="does not exist"):
            JsonParser().parse_file(tmp_path / "absent.json")


class TestMalformedInput:

    @pytest.mark.parametrize("raw", [
        b"",
        b"{not json",
        b"\x80[]",
        b"[" * 200000 + b"]" * 200000,
    ])
    def test_unreadable_document(self, raw):
        with pytest.raises(SchemaParseError, match="Error reading the JSON schema document"):
            JsonParser().parse(raw)

    def test_none_input_rejected(self):
        with pytest.raises(SchemaParseError, match="does not exist"):
            JsonParser().parse(None)

    def test_root_must_be_array(self):
        with pytest.raises(SchemaParseError, match="Root node must be an array"):
            _parse({"tableName": "t", "columns": []})

    def test_missing_table_name(self):
        with pytest.raises(SchemaParseError, match="Missing 'tableName' field"):
            _parse([{"columns": [{"name": "id", "type": "INT"}]}])

    @pytest.mark.parametrize("columns", [None, {"name": "id"}, "id INT"])
    def test_missing_or_malformed_columns(self, columns):
        table = {"tableName": "t"}
        if columns is not None:
            table["columns"] = columns

        with pytest.raises(SchemaParseError, match="'columns' array in table: t"):
            _parse([table])

    @pytest.mark.parametrize("column", [{"name": "id"}, {"type": "INT"}])
    def test_column_missing_name_or_type(self, column):
        with pytest.raises(SchemaParseError, match="Missing 'name' or 'type' in columns of table: t"):
            _parse([{"tableName": "t", "columns": [column]}])

    @pytest.mark.parametrize("missing", ["relationshipType", "relatedTable", "foreignKey"])
    def test_relationship_missing_required_field(self, missing):
        rel = {"relationshipType": "many-to-one", "relatedTable": "u", "foreignKey": "u_id"}
        del rel[missing]

        with pytest.raises(SchemaParseError, match="Missing required fields in relationships of table: t"):
            _parse([{"tableName": "t", "columns": [{"name": "id", "type": "INT"}], "relationships": [rel]}])

    def test_unknown_relationship_type(self):
        rel = {"relationshipType": "sideways", "relatedTable": "u", "foreignKey": "u_id"}

        with pytest.raises(SchemaParseError, match="Unknown relationshipType 'sideways'"):
            _parse([{"tableName": "t", "columns": [{"name": "id", "type": "INT"}], "relationships": [rel]}])

    def test_error_context_names_table(self):
        with pytest.raises(SchemaParseError) as exc_info:
            _parse([{"tableName": "orders", "columns": [{"name": "id"}]}])

        assert exc_info.value.context.table_name == "orders"
        assert str(exc_info.value).startswith("[parse_json] ")
