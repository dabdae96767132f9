"""Generic (MySQL-flavoured) CREATE TABLE generation.

Each table becomes one CREATE TABLE statement with, in order: its columns,
a FOREIGN KEY clause for every many-to-one relationship, and a composite
PRIMARY KEY over the primary-key columns in declaration order. Other
relationship types are expressed from their "many" side only and emit nothing
here.
"""

from typing import TYPE_CHECKING

from schema2script.ir.models import RelationType, Table
from schema2script.utils.error_handling import ErrorContext, SchemaParseError
from schema2script.utils.logging import get_logger
from .base import SchemaGenerator

if TYPE_CHECKING:
    from schema2script.model.schema_model import SchemaModel

logger = get_logger(__name__)

INDENT = "    "


class SqlGenerator(SchemaGenerator):

    def generate(self, schema: "SchemaModel") -> str:
        statements = [self.generate_create_table_sql(table) for table in schema.tables]
        logger.debug(f"Generated {len(statements)} CREATE TABLE statements")
        return "".join(statements)

    def generate_create_table_sql(self, table: Table) -> str:
        """Render one table; validation happens before anything is emitted."""
        context = ErrorContext(operation="generate_create_table_sql", table_name=table.table_name)
        if table.table_name is None or not table.table_name.strip():
            raise SchemaParseError("Table name cannot be empty or null.", context=context)
        if not table.columns:
            raise SchemaParseError("Table must have at least one column.", context=context)

        sql = (
            f"CREATE TABLE {table.table_name} (\n"
            + self._columns_sql(table)
            + self._relationships_sql(table)
            + self._primary_keys_sql(table)
        )
        # Only the last entry can leave a dangling comma
        if sql.endswith(",\n"):
            sql = sql[:-2]
        return sql + ");\n\n"

    def _columns_sql(self, table: Table) -> str:
        return "".join(f"{INDENT}{column.name} {column.type},\n" for column in table.columns)

    def _relationships_sql(self, table: Table) -> str:
        parts = []
        for relationship in table.relationships:
            if relationship.relationship_type != RelationType.MANY_TO_ONE:
                continue
            # Defaulted value is written back onto the relationship
            if relationship.related_foreign_key is None:
                relationship.related_foreign_key = relationship.foreign_key
            parts.append(
                f"{INDENT}FOREIGN KEY ({relationship.foreign_key}) "
                f"REFERENCES {relationship.related_table}({relationship.related_foreign_key}),\n"
            )
        return "".join(parts)

    def _primary_keys_sql(self, table: Table) -> str:
        primary_keys = [column.name for column in table.columns if column.primary_key]
        if not primary_keys:
            return ""
        return f"{INDENT}PRIMARY KEY ({', '.join(primary_keys)})\n"
