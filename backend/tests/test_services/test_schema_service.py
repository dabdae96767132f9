"""Tests for the schema session service."""

import json
import threading

import pytest

from backend.services.schema_service import RecordingView, SchemaSessionService, SessionNotLoadedError
from schema2script.utils.error_handling import SchemaParseError


@pytest.fixture
def loaded_service(schema_service, sample_document):
    schema_service.upload("library.json", json.dumps(sample_document))
    return schema_service


def test_recording_view_drain():
    view = RecordingView()
    view.add_message("one")
    view.add_message("two")

    assert view.drain() == ["one", "two"]
    assert view.drain() == []


def test_upload_returns_snapshot(schema_service, sample_document):
    snapshot = schema_service.upload("library.json", json.dumps(sample_document))

    assert [t["tableName"] for t in snapshot["tables"]] == ["author", "book"]
    assert snapshot["tables"][1]["relationships"] == sample_document[1]["relationships"]
    assert snapshot["join_tables"] == []


def test_upload_failure_keeps_session(loaded_service):
    with pytest.raises(SchemaParseError):
        loaded_service.upload("broken.json", "[{}]")

    assert [t["tableName"] for t in loaded_service.snapshot()["tables"]] == ["author", "book"]


def test_upload_without_location(sample_document):
    with pytest.raises(SchemaParseError, match="No usable upload location"):
        SchemaSessionService().upload("library.json", json.dumps(sample_document))


def test_messages_are_drained_into_snapshot(schema_service):
    schema_service.add_relationship(["a", "id", "b", None, "many-to-one"])

    assert schema_service.snapshot()["messages"] == ["No tables available to create a relationship."]
    assert schema_service.snapshot()["messages"] == []


def test_generate_script_requires_upload(schema_service):
    with pytest.raises(SessionNotLoadedError):
        schema_service.generate_script("mysql")


def test_generate_script(loaded_service):
    script, error = loaded_service.generate_script("mysql")

    assert error is None
    assert script.startswith("CREATE TABLE author (\n")


def test_generate_script_failure_returns_cached(loaded_service):
    first, _ = loaded_service.generate_script("oracle")

    script, error = loaded_service.generate_script("sqlite")

    assert script == first
    assert error.message == "Unsupported format: sqlite"


def test_name_queries(loaded_service):
    assert loaded_service.has_table("book")
    assert not loaded_service.has_table("ghost")
    assert loaded_service.column_names("author") == ["id", "name"]
    assert loaded_service.related_table_names("book") == ["author"]


def test_mutations_return_snapshots(loaded_service):
    loaded_service.add_table("genre")
    loaded_service.add_column(["genre", "id", "INT", "true"])
    snapshot = loaded_service.delete_table("author")

    assert [t["tableName"] for t in snapshot["tables"]] == ["book", "genre"]


def test_add_column_to_missing_table(loaded_service):
    assert loaded_service.add_column(["ghost", "id", "INT", "false"]) is None


def test_reset(loaded_service):
    loaded_service.reset()

    assert loaded_service.snapshot()["tables"] == []
    with pytest.raises(SessionNotLoadedError):
        loaded_service.generate_script("mysql")


def test_concurrent_additions_are_all_kept(schema_service):
    schema_service.add_table("t")

    def add(i):
        schema_service.add_column(["t", f"c{i}", "INT", "false"])

    threads = [threading.Thread(target=add, args=(i,)) for i in range(20)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert sorted(schema_service.column_names("t")) == sorted(f"c{i}" for i in range(20))


def test_failed_upload_leaves_no_pending_messages(loaded_service):
    with pytest.raises(SchemaParseError):
        loaded_service.upload("broken.json", "{")

    assert loaded_service.snapshot()["messages"] == []
