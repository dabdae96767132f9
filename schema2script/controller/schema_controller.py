"""Editing session controller.

Turns the plain answers returned by editing dialogs (ordered string lists)
into schema container calls, and keeps a view collaborator informed through
``add_message`` and ``show_tables``. Nothing here raises on bad user input:
problems are reported to the view.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

from pydantic import ValidationError

from schema2script.factory.parser_factory import format_from_path, get_parser
from schema2script.ir.models import Column, Relationship, Table
from schema2script.model import SchemaModel, SchemaStore, ScriptSink
from schema2script.utils.error_handling import ErrorContext, SchemaParseError, log_error_with_context
from schema2script.utils.logging import get_logger

logger = get_logger(__name__)

PARSE_FAILED_MESSAGE = "Error: Failed to parse the schema file."
NO_FILE_MESSAGE = "Please upload a schema file first."
NO_SCRIPT_MESSAGE = "Populate all tables"

# (name, details) rows shown for one table
TableSummary = Tuple[str, List[Tuple[str, str]]]


class SchemaView(ABC):
    """Display collaborator driven by the controller."""

    @abstractmethod
    def add_message(self, message: str) -> None:
        pass

    @abstractmethod
    def show_tables(self, summaries: List[TableSummary]) -> None:
        pass


class ConsoleView(SchemaView):
    """Prints messages and table summaries to stdout."""

    def add_message(self, message: str) -> None:
        print(message)

    def show_tables(self, summaries: List[TableSummary]) -> None:
        for table_name, rows in summaries:
            print(f"Table: {table_name}")
            for name, details in rows:
                print(f"  {name:<30} {details}")


def _parse_bool(text: str) -> bool:
    return str(text).strip().lower() == "true"


def _optional(text: Optional[str]) -> Optional[str]:
    return text if text else None


def summarize_table(table: Table) -> TableSummary:
    rows = [
        (column.name, column.type + (" (Primary Key)" if column.primary_key else ""))
        for column in table.columns
    ]
    rows.extend(
        (
            f"Relationship to {relationship.related_table}",
            f"{relationship.relationship_type.value} - FK: {relationship.foreign_key}",
        )
        for relationship in table.relationships
    )
    return table.table_name, rows


class SchemaController:
    """Owns the current ``SchemaModel`` for one editing session."""

    def __init__(
        self,
        view: SchemaView,
        store: Optional[SchemaStore] = None,
        script_sink: Optional[ScriptSink] = None,
    ):
        self.view = view
        self.store = store
        self.script_sink = script_sink
        self.schema_model = SchemaModel(store=store, script_sink=script_sink)
        self.last_error: Optional[SchemaParseError] = None

    # ------------------------------------------------------------------
    # Queries used to populate dialogs
    # ------------------------------------------------------------------

    def table_names(self) -> List[str]:
        return self.schema_model.table_names()

    def column_names(self, table_name: str) -> List[str]:
        return self.schema_model.column_names(table_name)

    def related_table_names(self, table_name: str) -> List[str]:
        return self.schema_model.related_table_names(table_name)

    def table_summaries(self) -> List[TableSummary]:
        return [summarize_table(table) for table in self.schema_model.tables]

    def refresh(self) -> None:
        self.view.show_tables(self.table_summaries())

    # ------------------------------------------------------------------
    # Loading and generation
    # ------------------------------------------------------------------

    def upload(self, path: Union[str, Path]) -> bool:
        """Parse ``path`` (format chosen by extension) and make it the current schema."""
        schema_file = Path(path)
        try:
            parser = get_parser(format_from_path(schema_file))
            schema = parser.parse_file(schema_file)
        except SchemaParseError as e:
            self.last_error = e
            log_error_with_context(
                e, ErrorContext(operation="upload", additional_context={"path": str(schema_file)})
            )
            self.view.add_message(PARSE_FAILED_MESSAGE)
            return False

        self.last_error = None
        schema.attach(self.store, self.script_sink)
        self.schema_model = schema
        logger.info(f"Schema file uploaded and processed: {schema_file.resolve()}")
        self.refresh()
        return True

    def generate_script(self, dialect: str) -> str:
        """Render the schema and report the script (or why there is none) to the view."""
        if self.schema_model.file is None:
            self.view.add_message(NO_FILE_MESSAGE)
            return NO_FILE_MESSAGE
        script = self.schema_model.render_script(dialect)
        message = script if script is not None else NO_SCRIPT_MESSAGE
        self.view.add_message(message)
        return message

    # ------------------------------------------------------------------
    # Add
    # ------------------------------------------------------------------

    def add_table(self, table_name: Optional[str]) -> bool:
        if not table_name:
            logger.warning("Table name is empty. Cannot add table.")
            return False
        self.schema_model.add_table(Table(table_name=table_name))
        logger.info(f"New table added: {table_name}")
        self.refresh()
        return True

    def add_column(self, column_data: Optional[Sequence[str]]) -> bool:
        """``column_data``: [table, name, type, primary_key ("true"/"false")]."""
        if not column_data:
            return False
        if len(column_data) < 4:
            self.view.add_message("Column details are incomplete.")
            return False
        table_name, column_name, column_type, primary_key = column_data[:4]
        column = self._build_column(column_name, column_type, primary_key)
        if column is None:
            return False
        added = self.schema_model.store_data(column, table_name)
        if added:
            logger.info(f"New column added to table {table_name}: {column_name}")
        self.refresh()
        return added

    def add_relationship(self, relationship_data: Optional[Sequence[Optional[str]]]) -> bool:
        """``relationship_data``: [base table, base FK, related table, related FK, type, through table]."""
        if not self.table_names():
            self.view.add_message("No tables available to create a relationship.")
            return False
        if not relationship_data:
            return False
        if len(relationship_data) < 5:
            self.view.add_message("Relationship details are incomplete.")
            return False

        base_table, foreign_key, related_table, related_foreign_key, relationship_type = relationship_data[:5]
        through_table = relationship_data[5] if len(relationship_data) > 5 else None
        relationship = self._build_relationship(
            relationship_type, related_table, foreign_key, related_foreign_key, through_table
        )
        if relationship is None:
            return False

        added = self.schema_model.store_data(relationship, base_table)
        if added:
            logger.info(
                f"New relationship added between {base_table} and {related_table}: {relationship_type}"
            )
        self.refresh()
        return added

    # ------------------------------------------------------------------
    # Edit
    # ------------------------------------------------------------------

    def edit_table(self, old_table_name: Optional[str], new_table_name: Optional[str]) -> bool:
        if old_table_name is None:
            return False
        if not new_table_name:
            logger.warning("New table name is empty. Edit aborted.")
            return False
        self.schema_model.edit_table_name(old_table_name, new_table_name)
        logger.info(f"Table name updated from {old_table_name} to {new_table_name}")
        self.refresh()
        return True

    def edit_column(
        self,
        table_name: Optional[str],
        old_column_name: Optional[str],
        column_data: Optional[Sequence[str]],
    ) -> bool:
        """``column_data``: [new name, type, primary_key ("true"/"false")]."""
        if table_name is None or old_column_name is None or not column_data:
            return False
        if len(column_data) < 3:
            self.view.add_message("Column details are incomplete.")
            return False
        column_name, column_type, primary_key = column_data[:3]
        updated = self._build_column(column_name, column_type, primary_key)
        if updated is None:
            return False
        self.schema_model.edit_column(table_name, old_column_name, updated)
        self.refresh()
        return True

    def edit_relationship(
        self,
        table_name: Optional[str],
        related_table: Optional[str],
        relationship_data: Optional[Sequence[Optional[str]]],
    ) -> bool:
        """``relationship_data``: [type, FK, related FK]. The through table is kept."""
        if table_name is None or related_table is None or not relationship_data:
            return False
        if len(relationship_data) < 3:
            self.view.add_message("Relationship details are incomplete.")
            return False

        relationship_type, foreign_key, related_foreign_key = relationship_data[:3]
        through_table = None
        table = self.schema_model.get_table(table_name)
        if table is not None:
            for existing in table.relationships:
                if existing.related_table == related_table:
                    through_table = existing.through_table
                    break

        updated = self._build_relationship(
            relationship_type, related_table, foreign_key, related_foreign_key, through_table
        )
        if updated is None:
            return False
        self.schema_model.edit_relationship(table_name, related_table, updated)
        self.refresh()
        return True

    # ------------------------------------------------------------------
    # Delete
    # ------------------------------------------------------------------

    def delete_table(self, table_name: Optional[str]) -> None:
        if table_name is None:
            return
        self.schema_model.delete_table(table_name)
        self.refresh()

    def delete_column(self, column_details: Optional[Sequence[str]]) -> None:
        """``column_details``: [table, column]."""
        if not column_details or len(column_details) < 2:
            return
        table_name, column_name = column_details[:2]
        self.schema_model.delete_column(table_name, column_name)
        logger.info(f"Column deleted: {column_name} from table {table_name}")
        self.refresh()

    def delete_relationship(self, table_name: Optional[str], related_table: Optional[str]) -> None:
        if table_name is None or related_table is None:
            return
        self.schema_model.delete_relationship(table_name, related_table)
        logger.info(f"Relationship deleted between {table_name} and {related_table}")
        self.refresh()

    # ------------------------------------------------------------------

    def _build_column(
        self,
        column_name: Optional[str],
        column_type: Optional[str],
        primary_key: Optional[str],
    ) -> Optional[Column]:
        try:
            return Column(name=column_name, type=column_type, primary_key=_parse_bool(primary_key))
        except ValidationError:
            logger.warning(f"Rejected column {column_name!r}: invalid details", exc_info=True)
            self.view.add_message(f"Invalid column details: {column_name}")
            return None

    def _build_relationship(
        self,
        relationship_type: Optional[str],
        related_table: Optional[str],
        foreign_key: Optional[str],
        related_foreign_key: Optional[str],
        through_table: Optional[str],
    ) -> Optional[Relationship]:
        try:
            return Relationship(
                relationship_type=relationship_type,
                related_table=related_table,
                foreign_key=foreign_key,
                related_foreign_key=_optional(related_foreign_key),
                through_table=_optional(through_table),
            )
        except ValidationError:
            logger.warning(f"Rejected relationship to {related_table}: invalid details", exc_info=True)
            self.view.add_message(f"Invalid relationship details (type: {relationship_type})")
            return None
