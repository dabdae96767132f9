"""Request models for API endpoints."""

from pydantic import BaseModel, Field
from typing import Optional

from schema2script.ir.models import RelationType


class UploadSchemaRequest(BaseModel):
    """Schema document to load into the session."""
    filename: str = Field(..., min_length=1, description="File name; its extension selects the parser")
    content: str = Field(..., description="Document text")


class AddTableRequest(BaseModel):
    table_name: str = Field(..., min_length=1)


class AddColumnRequest(BaseModel):
    table_name: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    type: str = Field(..., min_length=1)
    primary_key: bool = False


class AddRelationshipRequest(BaseModel):
    table_name: str = Field(..., min_length=1, description="Owning table")
    foreign_key: str = Field(..., min_length=1)
    related_table: str = Field(..., min_length=1)
    related_foreign_key: Optional[str] = None
    relationship_type: RelationType
    through_table: Optional[str] = None


class EditTableRequest(BaseModel):
    new_table_name: str = Field(..., min_length=1)


class EditColumnRequest(BaseModel):
    name: str = Field(..., min_length=1)
    type: str = Field(..., min_length=1)
    primary_key: bool = False


class EditRelationshipRequest(BaseModel):
    relationship_type: RelationType
    foreign_key: str = Field(..., min_length=1)
    related_foreign_key: Optional[str] = None


class GenerateScriptRequest(BaseModel):
    """Dialect selector, e.g. "mysql" or "oracle" (case-insensitive)."""
    dialect: str
