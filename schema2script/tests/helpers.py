"""Test doubles and builders shared across test modules."""

from typing import List, Optional

from schema2script.ir.models import Relationship, Table
from schema2script.model import SchemaStore, ScriptSink


class RecordingStore(SchemaStore):
    """In-memory store that remembers every saved document."""

    def __init__(self, tables: Optional[List[Table]] = None):
        self.saved: List[list] = []
        self.tables = tables or []

    def save(self, schema) -> None:
        self.saved.append(schema.to_document())

    def load(self) -> List[Table]:
        return [table.model_copy(deep=True) for table in self.tables]


class RecordingSink(ScriptSink):
    def __init__(self):
        self.scripts: List[str] = []

    def write(self, script: str) -> None:
        self.scripts.append(script)


def relationship(
    relationship_type: str,
    related_table: str,
    foreign_key: str,
    related_foreign_key: Optional[str] = None,
    through_table: Optional[str] = None,
) -> Relationship:
    return Relationship(
        relationship_type=relationship_type,
        related_table=related_table,
        foreign_key=foreign_key,
        related_foreign_key=related_foreign_key,
        through_table=through_table,
    )
