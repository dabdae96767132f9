"""Parser capability: turn a serialized schema description into a container."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union

from schema2script.model.schema_model import SchemaModel
from schema2script.utils.error_handling import ErrorContext, SchemaParseError
from schema2script.utils.logging import get_logger

logger = get_logger(__name__)


class SchemaParser(ABC):
    """Builds a ``SchemaModel`` from raw input bytes."""

    @abstractmethod
    def parse(self, raw: bytes) -> SchemaModel:
        """
        Parse a serialized schema.

        Raises:
            SchemaParseError: On malformed input; no partial container is returned
        """
        pass

    def parse_file(self, path: Union[str, Path]) -> SchemaModel:
        """Read ``path``, parse it and record it as the container's source file."""
        schema_file = Path(path)
        logger.info(f"Parsing schema file: {schema_file.resolve()}")
        context = ErrorContext(operation="parse_file", additional_context={"path": str(schema_file)})
        if not schema_file.exists():
            raise SchemaParseError(
                f"Schema file does not exist: {schema_file.resolve()}", context=context
            )
        try:
            raw = schema_file.read_bytes()
        except OSError as e:
            raise SchemaParseError(
                f"Error reading the schema file: {schema_file.name}", context=context, cause=e
            ) from e

        schema = self.parse(raw)
        schema.file = schema_file
        return schema
