"""Pytest fixtures and configuration."""

import json

import pytest
from fastapi.testclient import TestClient

from backend.dependencies import get_schema_service
from backend.main import app
from backend.services.schema_service import SchemaSessionService
from schema2script.model import FileScriptSink, JsonFileSchemaStore


@pytest.fixture
def schema_service(tmp_path):
    """Fresh session service writing under tmp_path."""
    return SchemaSessionService(
        store=JsonFileSchemaStore(tmp_path / "schema" / "schema.json"),
        script_sink=FileScriptSink(tmp_path / "script" / "schema.sql"),
        upload_path=str(tmp_path / "uploads"),
    )


@pytest.fixture
def client(schema_service):
    """Test client for FastAPI app, bound to the fixture session."""
    app.dependency_overrides[get_schema_service] = lambda: schema_service
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def sample_document():
    """Library schema: a book belongs to an author."""
    return [
        {
            "tableName": "author",
            "columns": [
                {"name": "id", "type": "INT", "primaryKey": True},
                {"name": "name", "type": "VARCHAR(100)"},
            ],
        },
        {
            "tableName": "book",
            "columns": [
                {"name": "id", "type": "INT", "primaryKey": True},
                {"name": "author_id", "type": "INT"},
            ],
            "relationships": [
                {"relationshipType": "many-to-one", "relatedTable": "author", "foreignKey": "author_id",
                 "relatedForeignKey": "id"},
            ],
        },
    ]


@pytest.fixture
def sample_upload(sample_document):
    return {"filename": "library.json", "content": json.dumps(sample_document)}


@pytest.fixture
def loaded_client(client, sample_upload):
    response = client.post("/api/schema/upload", json=sample_upload)
    assert response.status_code == 200
    return client
