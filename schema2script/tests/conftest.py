"""Pytest fixtures shared by the schema2script test suite."""

import json

import pytest

from schema2script.ir.models import Column, Table
from schema2script.model import SchemaModel
from schema2script.tests.helpers import RecordingSink, RecordingStore


@pytest.fixture
def store():
    return RecordingStore()


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def employee_table():
    table = Table(table_name="employee")
    table.add_column(Column(name="id", type="INT", primary_key=True))
    table.add_column(Column(name="name", type="VARCHAR(100)"))
    return table


@pytest.fixture
def schema(store, sink, employee_table):
    """Container holding the employee table, collaborators attached."""
    model = SchemaModel(store=store, script_sink=sink)
    model.tables.append(employee_table)
    return model


@pytest.fixture
def university_document():
    """Structured document with a join table and every relationship kind."""
    return [
        {
            "tableName": "student",
            "columns": [
                {"name": "student_id", "type": "INT", "primaryKey": True},
                {"name": "name", "type": "VARCHAR(100)"},
            ],
            "relationships": [
                {
                    "relationshipType": "many-to-many",
                    "relatedTable": "course",
                    "foreignKey": "student_id",
                    "relatedForeignKey": "course_id",
                    "throughTable": "enrollment",
                }
            ],
        },
        {
            "tableName": "course",
            "columns": [
                {"name": "course_id", "type": "INT", "primaryKey": True},
                {"name": "title", "type": "VARCHAR(200)"},
            ],
        },
        {
            "tableName": "enrollment",
            "columns": [
                {"name": "student_id", "type": "INT", "primaryKey": True},
                {"name": "course_id", "type": "INT", "primaryKey": True},
            ],
            "relationships": [
                {"relationshipType": "many-to-one", "relatedTable": "student", "foreignKey": "student_id"},
                {
                    "relationshipType": "many-to-one",
                    "relatedTable": "course",
                    "foreignKey": "course_id",
                    "relatedForeignKey": "course_id",
                },
            ],
        },
    ]


@pytest.fixture
def university_bytes(university_document):
    return json.dumps(university_document).encode("utf-8")


@pytest.fixture
def university_file(tmp_path, university_document):
    path = tmp_path / "university.json"
    path.write_text(json.dumps(university_document, indent=2), encoding="utf-8")
    return path
