"""Pydantic models for tables, columns and relationships.

Attributes are snake_case; the serialized document uses camelCase
(``tableName``, ``primaryKey``, ``relatedForeignKey`` ...). Either spelling is
accepted on construction. No validation happens at this layer beyond field
types: an empty table name or a table without columns is only rejected when
SQL is generated.
"""

from __future__ import annotations

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .relation_type import RelationType


class Column(BaseModel):
    name: str
    type: str
    primary_key: bool = False

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Relationship(BaseModel):
    """Directed edge from the owning table to ``related_table``.

    ``related_table`` is a name reference only; it may point at a table that
    does not exist in the schema.
    """
    relationship_type: RelationType
    related_table: str
    foreign_key: str
    related_foreign_key: Optional[str] = None
    through_table: Optional[str] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Table(BaseModel):
    table_name: str
    columns: List[Column] = Field(default_factory=list)
    relationships: List[Relationship] = Field(default_factory=list)
    # Derived from throughTable references when a document is parsed
    is_join_table: bool = Field(default=False, exclude=True)

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def add_column(self, column: Column) -> None:
        self.columns.append(column)

    def add_relationship(self, relationship: Relationship) -> None:
        self.relationships.append(relationship)
