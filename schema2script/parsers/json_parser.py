"""Structured-document (JSON) schema parser.

Expected document: a top-level array of table objects::

    [
      {
        "tableName": "employee",
        "columns": [{"name": "id", "type": "INT", "primaryKey": true}],
        "relationships": [
          {"relationshipType": "many-to-one", "relatedTable": "department",
           "foreignKey": "department_id"}
        ]
      }
    ]

``columns`` is mandatory and must be an array; ``relationships`` is optional
and silently ignored when it is not an array. After all tables are read, every
table named as some relationship's ``throughTable`` is marked as a join table.
"""

import json
from typing import Any, Dict, List

from pydantic import ValidationError

from schema2script.ir.models import Column, Relationship, Table
from schema2script.model.schema_model import SchemaModel
from schema2script.utils.error_handling import ErrorContext, SchemaParseError
from schema2script.utils.logging import get_logger
from .base import SchemaParser

logger = get_logger(__name__)

COLUMNS = "columns"
RELATIONSHIPS = "relationships"
REQUIRED_RELATIONSHIP_FIELDS = ("relationshipType", "relatedTable", "foreignKey")


def _as_text(value: Any) -> str:
    """Read a scalar node as text; containers read as an empty string."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, (dict, list)):
        return ""
    return str(value)


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return False


def _optional_text(node: Dict[str, Any], key: str):
    value = node.get(key)
    return None if value is None else _as_text(value)


class JsonParser(SchemaParser):

    def parse(self, raw: bytes) -> SchemaModel:
        logger.info("Starting JSON schema parsing")
        if raw is None:
            raise SchemaParseError(
                "Schema input does not exist.", context=ErrorContext(operation="parse_json")
            )
        try:
            root = json.loads(raw)
        except (UnicodeDecodeError, ValueError, RecursionError) as e:
            logger.error("Error reading the JSON schema document", exc_info=True)
            raise SchemaParseError(
                "Error reading the JSON schema document",
                context=ErrorContext(operation="parse_json"),
                cause=e,
            ) from e

        self._validate_root(root)
        logger.debug("Root node is valid. Beginning to parse tables.")

        schema = SchemaModel()
        through_table_references: List[str] = []
        for table_node in root:
            schema.add_table(self._parse_table(table_node, through_table_references))

        self._mark_join_tables(schema, through_table_references)
        logger.info(f"JSON schema parsing completed successfully: {len(schema.tables)} tables")
        return schema

    def _validate_root(self, root: Any) -> None:
        if not isinstance(root, list):
            logger.error("Invalid JSON format: Root node is not an array.")
            raise SchemaParseError(
                "Invalid JSON format: Root node must be an array of tables.",
                context=ErrorContext(operation="parse_json"),
            )

    def _parse_table(self, table_node: Any, through_table_references: List[str]) -> Table:
        if not isinstance(table_node, dict) or "tableName" not in table_node:
            logger.error("Invalid JSON format: Missing 'tableName' field.")
            raise SchemaParseError(
                "Invalid JSON format: Missing 'tableName' field.",
                context=ErrorContext(operation="parse_json"),
            )
        table = Table(table_name=_as_text(table_node["tableName"]))
        self.parse_columns(table_node, table)
        self.parse_relationships(table_node, table, through_table_references)
        return table

    def parse_columns(self, table_node: Dict[str, Any], table: Table) -> None:
        columns_node = table_node.get(COLUMNS)
        if not isinstance(columns_node, list):
            logger.error(
                f"Invalid JSON format: Missing or malformed 'columns' array in table: {table.table_name}"
            )
            raise SchemaParseError(
                f"Invalid JSON format: Missing or malformed 'columns' array in table: {table.table_name}",
                context=ErrorContext(operation="parse_json", table_name=table.table_name),
            )

        logger.debug(f"Table {table.table_name} has {len(columns_node)} columns.")
        for column_node in columns_node:
            table.add_column(self._parse_column(column_node, table.table_name))

    def _parse_column(self, column_node: Any, table_name: str) -> Column:
        if not isinstance(column_node, dict) or "name" not in column_node or "type" not in column_node:
            logger.error(f"Invalid JSON format: Missing 'name' or 'type' in columns of table: {table_name}")
            raise SchemaParseError(
                f"Invalid JSON format: Missing 'name' or 'type' in columns of table: {table_name}",
                context=ErrorContext(operation="parse_json", table_name=table_name),
            )

        column = Column(
            name=_as_text(column_node["name"]),
            type=_as_text(column_node["type"]),
            primary_key=_as_bool(column_node.get("primaryKey", False)),
        )
        logger.debug(f"Added column: {column.name} of type: {column.type} to table: {table_name}")
        return column

    def parse_relationships(
        self,
        table_node: Dict[str, Any],
        table: Table,
        through_table_references: List[str],
    ) -> None:
        relationships_node = table_node.get(RELATIONSHIPS)
        if not isinstance(relationships_node, list):
            return

        logger.debug(f"Table {table.table_name} has {len(relationships_node)} relationships.")
        for relationship_node in relationships_node:
            relationship = self._parse_relationship(relationship_node, table.table_name)
            if relationship.through_table is not None:
                through_table_references.append(relationship.through_table)
            table.add_relationship(relationship)

    def _parse_relationship(self, relationship_node: Any, table_name: str) -> Relationship:
        context = ErrorContext(operation="parse_json", table_name=table_name)
        if not isinstance(relationship_node, dict) or any(
            field not in relationship_node for field in REQUIRED_RELATIONSHIP_FIELDS
        ):
            logger.error(f"Invalid JSON format: Missing required fields in relationships of table: {table_name}")
            raise SchemaParseError(
                f"Invalid JSON format: Missing required fields in relationships of table: {table_name}",
                context=context,
            )

        try:
            relationship = Relationship(
                relationship_type=_as_text(relationship_node["relationshipType"]),
                related_table=_as_text(relationship_node["relatedTable"]),
                foreign_key=_as_text(relationship_node["foreignKey"]),
                related_foreign_key=_optional_text(relationship_node, "relatedForeignKey"),
                through_table=_optional_text(relationship_node, "throughTable"),
            )
        except ValidationError as e:
            logger.error(f"Invalid relationship type in table {table_name}: {relationship_node['relationshipType']}")
            raise SchemaParseError(
                f"Invalid JSON format: Unknown relationshipType "
                f"'{relationship_node['relationshipType']}' in table: {table_name}",
                context=context,
                cause=e,
            ) from e

        logger.debug(
            f"Added relationship: {relationship.relationship_type.value} with table: "
            f"{relationship.related_table} and foreignKey: {relationship.foreign_key} to table: {table_name}"
        )
        return relationship

    def _mark_join_tables(self, schema: SchemaModel, through_table_references: List[str]) -> None:
        for through_table in through_table_references:
            join_table = schema.get_table(through_table)
            if join_table is not None:
                join_table.is_join_table = True
                logger.debug(f"Marked table {through_table} as a join table.")
