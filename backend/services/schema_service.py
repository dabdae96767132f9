"""Schema session service - one shared editing session behind a coarse lock.

The schema container's mutators are not safe for interleaved calls (list
edits are index based), so every operation, reads included, runs while
holding ``self._lock``.
"""

import logging
import threading
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from schema2script.controller import SchemaController, SchemaView, NO_FILE_MESSAGE
from schema2script.controller.schema_controller import TableSummary
from schema2script.model import SchemaStore, ScriptSink
from schema2script.utils.error_handling import ErrorContext, SchemaParseError

logger = logging.getLogger(__name__)


class RecordingView(SchemaView):
    """Collects controller messages until the next response drains them."""

    def __init__(self):
        self.messages: List[str] = []
        self.summaries: List[TableSummary] = []

    def add_message(self, message: str) -> None:
        self.messages.append(message)

    def show_tables(self, summaries: List[TableSummary]) -> None:
        self.summaries = summaries

    def drain(self) -> List[str]:
        messages, self.messages = self.messages, []
        return messages


class SessionNotLoadedError(Exception):
    """Script requested before any schema file was uploaded."""


class SchemaSessionService:
    """Serializes access to a single ``SchemaController``."""

    def __init__(
        self,
        store: Optional[SchemaStore] = None,
        script_sink: Optional[ScriptSink] = None,
        upload_path: Optional[str] = None,
    ):
        self._lock = threading.Lock()
        self._store = store
        self._script_sink = script_sink
        self.upload_path = Path(upload_path) if upload_path else None
        self.view = RecordingView()
        self.controller = SchemaController(self.view, store=store, script_sink=script_sink)

    def reset(self) -> None:
        """Drop the current session and start an empty one."""
        with self._lock:
            self.view = RecordingView()
            self.controller = SchemaController(self.view, store=self._store, script_sink=self._script_sink)
            logger.info("Schema session reset")

    # ------------------------------------------------------------------
    # Snapshot
    # ------------------------------------------------------------------

    def _snapshot(self) -> Dict[str, Any]:
        schema = self.controller.schema_model
        return {
            "tables": schema.to_document(),
            "join_tables": [table.table_name for table in schema.tables if table.is_join_table],
            "messages": self.view.drain(),
        }

    def snapshot(self) -> Dict[str, Any]:
        with self._lock:
            return self._snapshot()

    def column_names(self, table_name: str) -> List[str]:
        with self._lock:
            return self.controller.column_names(table_name)

    def related_table_names(self, table_name: str) -> List[str]:
        with self._lock:
            return self.controller.related_table_names(table_name)

    def has_table(self, table_name: str) -> bool:
        with self._lock:
            return table_name in self.controller.table_names()

    # ------------------------------------------------------------------
    # Upload and script
    # ------------------------------------------------------------------

    def upload(self, filename: str, content: str) -> Dict[str, Any]:
        """
        Store an uploaded document and make it the current schema.

        Raises:
            SchemaParseError: If the document cannot be stored or parsed
        """
        name = Path(filename).name
        context = ErrorContext(operation="upload", additional_context={"filename": filename})
        if not name or self.upload_path is None:
            raise SchemaParseError("No usable upload location for the schema file.", context=context)

        with self._lock:
            target = self.upload_path / name
            try:
                target.parent.mkdir(parents=True, exist_ok=True)
                target.write_text(content, encoding="utf-8")
            except OSError as e:
                raise SchemaParseError(f"Could not store uploaded file: {name}", context=context, cause=e) from e

            if not self.controller.upload(target):
                # The failure is reported through the raised error
                self.view.drain()
                raise self.controller.last_error or SchemaParseError(
                    "Failed to parse the schema file.", context=context
                )
            return self._snapshot()

    def generate_script(self, dialect: str) -> Tuple[Optional[str], Optional[SchemaParseError]]:
        """
        Render the current schema.

        Returns:
            (script, error): the script is the cached one when generation failed

        Raises:
            SessionNotLoadedError: If no schema file was uploaded yet
        """
        with self._lock:
            schema = self.controller.schema_model
            if schema.file is None:
                raise SessionNotLoadedError(NO_FILE_MESSAGE)
            self.controller.generate_script(dialect)
            self.view.drain()
            return schema.sql_script, schema.last_error

    # ------------------------------------------------------------------
    # Mutations (answer lists in the order the controller expects)
    # ------------------------------------------------------------------

    def add_table(self, table_name: str) -> Dict[str, Any]:
        with self._lock:
            self.controller.add_table(table_name)
            return self._snapshot()

    def add_column(self, answers: List[str]) -> Optional[Dict[str, Any]]:
        with self._lock:
            if not self.controller.add_column(answers):
                return None
            return self._snapshot()

    def add_relationship(self, answers: List[Optional[str]]) -> Optional[Dict[str, Any]]:
        with self._lock:
            if not self.controller.add_relationship(answers):
                return None
            return self._snapshot()

    def edit_table(self, old_table_name: str, new_table_name: str) -> Dict[str, Any]:
        with self._lock:
            self.controller.edit_table(old_table_name, new_table_name)
            return self._snapshot()

    def edit_column(self, table_name: str, column_name: str, answers: List[str]) -> Dict[str, Any]:
        with self._lock:
            self.controller.edit_column(table_name, column_name, answers)
            return self._snapshot()

    def edit_relationship(
        self, table_name: str, related_table: str, answers: List[Optional[str]]
    ) -> Dict[str, Any]:
        with self._lock:
            self.controller.edit_relationship(table_name, related_table, answers)
            return self._snapshot()

    def delete_table(self, table_name: str) -> Dict[str, Any]:
        with self._lock:
            self.controller.delete_table(table_name)
            return self._snapshot()

    def delete_column(self, table_name: str, column_name: str) -> Dict[str, Any]:
        with self._lock:
            self.controller.delete_column([table_name, column_name])
            return self._snapshot()

    def delete_relationship(self, table_name: str, related_table: str) -> Dict[str, Any]:
        with self._lock:
            self.controller.delete_relationship(table_name, related_table)
            return self._snapshot()
