"""Persistence collaborators of the schema container.

The container calls ``SchemaStore.save`` after every mutation and
``ScriptSink.write`` after every successful script generation. File-backed
implementations log and swallow I/O failures: the in-memory change that
triggered the write still stands.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, List, Union

from pydantic import TypeAdapter

from schema2script.ir.models import Table
from schema2script.utils.logging import get_logger

if TYPE_CHECKING:
    from .schema_model import SchemaModel

logger = get_logger(__name__)

_TABLE_LIST = TypeAdapter(List[Table])


class SchemaStore(ABC):
    """Write-through store for the schema being edited."""

    @abstractmethod
    def save(self, schema: "SchemaModel") -> None:
        """Persist the full table list of ``schema``."""
        pass

    @abstractmethod
    def load(self) -> List[Table]:
        """Return the tables last persisted, or an empty list."""
        pass


class ScriptSink(ABC):
    """Destination of generated SQL scripts."""

    @abstractmethod
    def write(self, script: str) -> None:
        pass


class JsonFileSchemaStore(SchemaStore):
    """Stores the schema as a pretty-printed JSON document."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def save(self, schema: "SchemaModel") -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(schema.to_document(), f, indent=2)
                f.write("\n")
            logger.info(f"Schema data saved to {self.path}")
        except OSError:
            logger.error(f"Failed to save schema data to file: {self.path}", exc_info=True)

    def load(self) -> List[Table]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            tables = _TABLE_LIST.validate_python(data)
        except (OSError, ValueError):
            logger.error(f"Failed to load schema from {self.path}", exc_info=True)
            return []
        logger.info(f"Schema loaded with {len(tables)} tables.")
        return tables


class FileScriptSink(ScriptSink):
    """Writes each generated script over the previous one."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def write(self, script: str) -> None:
        try:
            if not self.path.parent.exists():
                self.path.parent.mkdir(parents=True, exist_ok=True)
                logger.info(f"Directory created: {self.path.parent.resolve()}")
            self.path.write_text(script, encoding="utf-8")
            logger.info(f"SQL script written to file: {self.path}")
        except OSError:
            logger.error("Failed to write SQL script to file.", exc_info=True)
