"""Schema container: the ordered table list being edited.

Every structural mutation is followed by a write-through save to the attached
``SchemaStore``. Tables, columns and relationships are matched by name, and
only the first matching table is touched; duplicate table names are allowed.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from schema2script.factory.generator_factory import get_generator
from schema2script.ir.models import Column, Relationship, Table
from schema2script.utils.error_handling import (
    ErrorContext,
    InvalidArgumentError,
    SchemaParseError,
    log_error_with_context,
)
from schema2script.utils.logging import get_logger
from .persistence import SchemaStore, ScriptSink

logger = get_logger(__name__)


class SchemaModel:
    """In-memory schema plus its provenance file and last generated script."""

    def __init__(
        self,
        store: Optional[SchemaStore] = None,
        script_sink: Optional[ScriptSink] = None,
    ):
        self.tables: List[Table] = []
        self.store = store
        self.script_sink = script_sink
        self.last_error: Optional[SchemaParseError] = None
        self._file: Optional[Path] = None
        self._sql_script: Optional[str] = None
        logger.info("SchemaModel initialized with an empty table list.")

    # ------------------------------------------------------------------
    # Provenance and cached script
    # ------------------------------------------------------------------

    @property
    def file(self) -> Optional[Path]:
        if self._file is None:
            logger.warning("File is currently not set.")
        return self._file

    @file.setter
    def file(self, value: Optional[Union[str, Path]]) -> None:
        if not value:
            logger.error("Attempted to set a null file.")
            return
        self._file = Path(value)
        logger.info(f"File set to: {self._file.resolve()}")

    @property
    def sql_script(self) -> Optional[str]:
        if not self._sql_script:
            logger.warning("SQL script is currently empty.")
        return self._sql_script

    @sql_script.setter
    def sql_script(self, value: Optional[str]) -> None:
        if not value:
            logger.error("Attempted to set an invalid SQL script (null or empty).")
            return
        self._sql_script = value
        logger.info("SQL script set.")

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def attach(
        self,
        store: Optional[SchemaStore],
        script_sink: Optional[ScriptSink] = None,
    ) -> None:
        """Bind collaborators to an already-built container and persist it once."""
        self.store = store
        self.script_sink = script_sink
        self.update_schema_file()

    def to_document(self) -> List[Dict[str, Any]]:
        """Serialize the tables to the structured document shape."""
        return [
            table.model_dump(mode="json", by_alias=True, exclude_none=True)
            for table in self.tables
        ]

    def update_schema_file(self) -> None:
        """Write the current tables through to the attached store."""
        if self.store is None:
            logger.debug("No schema store attached; skipping save.")
            return
        self.store.save(self)

    def load_table_names(self) -> List[str]:
        """Replace the tables with the store's copy and return their names."""
        if self.store is None:
            logger.error("Failed to load schema: no schema store attached.")
            return []
        tables = self.store.load()
        if not tables:
            return []
        self.tables = tables
        logger.info(f"Schema loaded with {len(tables)} tables.")
        return self.table_names()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_tables(self) -> List[Table]:
        if not self.tables:
            logger.warning("No tables available in the list.")
        return self.tables

    def get_table(self, table_name: str) -> Optional[Table]:
        """First table named ``table_name``, or None."""
        for table in self.tables:
            if table.table_name == table_name:
                return table
        return None

    def table_names(self) -> List[str]:
        return [table.table_name for table in self.tables]

    def column_names(self, table_name: str) -> List[str]:
        return [
            column.name
            for table in self.tables if table.table_name == table_name
            for column in table.columns
        ]

    def related_table_names(self, table_name: str) -> List[str]:
        return [
            relationship.related_table
            for table in self.tables if table.table_name == table_name
            for relationship in table.relationships
        ]

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add_table(self, table: Optional[Table]) -> None:
        if table is None:
            logger.error("Attempted to add a null table.")
            raise InvalidArgumentError("Table cannot be null")
        self.tables.append(table)
        self.update_schema_file()
        logger.info(f"Table added: {table.table_name}")

    def store_data(self, data: Union[Table, Column, Relationship], table_name: Optional[str] = None) -> bool:
        """Add a table to the schema, or a column/relationship to ``table_name``.

        Returns False when the entity kind is unsupported or the target table
        does not exist.
        """
        if isinstance(data, Table):
            self.tables.append(data)
            self.update_schema_file()
            logger.info("Table added to SchemaModel")
            return True

        if isinstance(data, (Column, Relationship)):
            table = self.get_table(table_name)
            if table is None:
                logger.warning(f"Table {table_name} not found. {type(data).__name__} not added.")
                return False
            if isinstance(data, Column):
                table.add_column(data)
                logger.info(f"Column added to Table {table.table_name}: {data.name}")
            else:
                table.add_relationship(data)
                logger.info(
                    f"Relationship added to Table {table.table_name}: {data.relationship_type.value}"
                )
            self.update_schema_file()
            return True

        logger.error(f"Unsupported data type provided to store_data: {type(data).__name__}")
        return False

    def delete_table(self, table_name: str) -> None:
        self.tables[:] = [table for table in self.tables if table.table_name != table_name]
        self.update_schema_file()
        logger.info(f"Table removed: {table_name}")

    def delete_column(self, table_name: str, column_name: str) -> None:
        table = self.get_table(table_name)
        if table is None:
            logger.warning(f"Table {table_name} not found. Column {column_name} not removed.")
            return
        table.columns[:] = [column for column in table.columns if column.name != column_name]
        self.update_schema_file()
        logger.info(f"Column {column_name} removed from table {table_name}")

    def delete_relationship(self, table_name: str, related_table: str) -> None:
        table = self.get_table(table_name)
        if table is None:
            logger.warning(f"Table {table_name} not found. Relationship to {related_table} not removed.")
            return
        table.relationships[:] = [
            relationship for relationship in table.relationships
            if relationship.related_table != related_table
        ]
        self.update_schema_file()
        logger.info(f"Relationship to {related_table} removed from table {table_name}")

    def edit_table_name(self, old_table_name: str, new_table_name: str) -> None:
        table = self.get_table(old_table_name)
        if table is None:
            logger.warning(f"Table with name {old_table_name} not found. Edit aborted.")
            return
        table.table_name = new_table_name
        self.update_schema_file()
        logger.info(f"Table name changed from {old_table_name} to {new_table_name}")

    def edit_column(self, table_name: str, old_column_name: str, updated_column: Column) -> None:
        table = self.get_table(table_name)
        if table is not None:
            for i, column in enumerate(table.columns):
                if column.name == old_column_name:
                    table.columns[i] = updated_column
                    self.update_schema_file()
                    logger.info(f"Column {old_column_name} in table {table_name} updated to {updated_column}")
                    return
        logger.warning(f"Column {old_column_name} not found in table {table_name}")

    def edit_relationship(self, table_name: str, related_table: str, updated_relationship: Relationship) -> None:
        table = self.get_table(table_name)
        if table is not None:
            for i, relationship in enumerate(table.relationships):
                if relationship.related_table == related_table:
                    table.relationships[i] = updated_relationship
                    self.update_schema_file()
                    logger.info(
                        f"Relationship with {related_table} in table {table_name} updated to {updated_relationship}"
                    )
                    return
        logger.warning(f"Relationship with {related_table} not found in table {table_name}")

    # ------------------------------------------------------------------
    # Script generation
    # ------------------------------------------------------------------

    def render_script(self, dialect: Optional[str]) -> Optional[str]:
        """Generate SQL for ``dialect``, cache it and hand it to the script sink.

        On failure the error is logged and kept in ``last_error``, and the
        previously cached script (possibly None) is returned.
        """
        try:
            generator = get_generator(dialect)
            script = generator.generate(self)
        except SchemaParseError as e:
            self.last_error = e
            log_error_with_context(e, ErrorContext(operation="render_script", format_name=dialect))
            return self._sql_script

        self.last_error = None
        self._sql_script = script
        logger.info("SQL script generated")
        if self.script_sink is not None:
            self.script_sink.write(script)
        return self._sql_script
