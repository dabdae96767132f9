"""Relationship type definitions.

The set is closed; the generic generator only renders MANY_TO_ONE edges.
"""

from __future__ import annotations

from enum import Enum


class RelationType(str, Enum):
    ONE_TO_ONE = "one-to-one"
    ONE_TO_MANY = "one-to-many"
    MANY_TO_ONE = "many-to-one"
    MANY_TO_MANY = "many-to-many"
