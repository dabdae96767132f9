"""Schema container and its persistence collaborators."""

from .persistence import SchemaStore, ScriptSink, JsonFileSchemaStore, FileScriptSink
from .schema_model import SchemaModel

__all__ = [
    "SchemaStore",
    "ScriptSink",
    "JsonFileSchemaStore",
    "FileScriptSink",
    "SchemaModel",
]
