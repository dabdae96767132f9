"""IR models."""

from .relation_type import RelationType
from .schema import Column, Relationship, Table

__all__ = [
    "RelationType",
    "Column",
    "Relationship",
    "Table",
]
