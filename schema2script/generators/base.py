"""Generator capability: render a schema container into a SQL script."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from schema2script.model.schema_model import SchemaModel


class SchemaGenerator(ABC):
    """Renders a ``SchemaModel`` for one SQL dialect."""

    @abstractmethod
    def generate(self, schema: "SchemaModel") -> str:
        """
        Render the schema.

        Raises:
            SchemaParseError: If a table cannot be rendered
        """
        pass
