"""FastAPI dependencies - process-wide singletons."""

from functools import lru_cache

from backend.config import settings
from backend.services.schema_service import SchemaSessionService
from schema2script.model import FileScriptSink, JsonFileSchemaStore


# Single process, one shared editing session
@lru_cache(maxsize=1)
def get_schema_service() -> SchemaSessionService:
    """Singleton SchemaSessionService backed by the configured file locations."""
    return SchemaSessionService(
        store=JsonFileSchemaStore(settings.schema_store_path),
        script_sink=FileScriptSink(settings.script_output_path),
        upload_path=settings.upload_path,
    )
