"""Tests for the file-backed schema store and script sink."""

import json

from schema2script.ir.models import RelationType
from schema2script.model import FileScriptSink, JsonFileSchemaStore, SchemaModel
from schema2script.tests.helpers import relationship


class TestJsonFileSchemaStore:

    def test_save_writes_pretty_document(self, tmp_path, schema):
        path = tmp_path / "nested" / "schema.json"

        JsonFileSchemaStore(path).save(schema)

        text = path.read_text(encoding="utf-8")
        assert text.endswith("\n")
        assert '\n  {\n    "tableName": "employee"' in text
        assert json.loads(text) == schema.to_document()

    def test_save_then_load(self, tmp_path, schema, employee_table):
        employee_table.add_relationship(relationship("many-to-many", "project", "id", "project_id", "assignment"))
        store = JsonFileSchemaStore(tmp_path / "schema.json")

        store.save(schema)
        tables = store.load()

        assert tables == schema.tables
        assert tables[0].relationships[0].relationship_type == RelationType.MANY_TO_MANY

    def test_load_missing_file_is_empty(self, tmp_path):
        assert JsonFileSchemaStore(tmp_path / "absent.json").load() == []

    def test_load_malformed_file_is_empty(self, tmp_path):
        path = tmp_path / "schema.json"
        path.write_text('[{"columns": []}]', encoding="utf-8")

        assert JsonFileSchemaStore(path).load() == []

    def test_save_failure_is_swallowed(self, tmp_path, schema):
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")

        JsonFileSchemaStore(blocker / "schema.json").save(schema)

        assert blocker.is_file()

    def test_container_writes_through(self, tmp_path, employee_table):
        path = tmp_path / "schema.json"
        model = SchemaModel(store=JsonFileSchemaStore(path))

        model.add_table(employee_table)
        model.delete_column("employee", "name")

        saved = json.loads(path.read_text(encoding="utf-8"))
        assert saved[0]["columns"] == [{"name": "id", "type": "INT", "primaryKey": True}]


class TestFileScriptSink:

    def test_write_creates_directory(self, tmp_path):
        path = tmp_path / "script" / "schema.sql"

        FileScriptSink(path).write("CREATE TABLE t (\n    id INT);\n\n")

        assert path.read_text(encoding="utf-8") == "CREATE TABLE t (\n    id INT);\n\n"

    def test_write_overwrites(self, tmp_path):
        path = tmp_path / "schema.sql"
        sink = FileScriptSink(path)

        sink.write("first")
        sink.write("second")

        assert path.read_text(encoding="utf-8") == "second"
