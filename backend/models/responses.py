"""Response models for API endpoints."""

from pydantic import BaseModel
from typing import List, Optional, Dict, Any


class SchemaResponse(BaseModel):
    """Current tables in document shape plus pending session messages."""
    tables: List[Dict[str, Any]]
    join_tables: List[str] = []
    messages: List[str] = []


class NameListResponse(BaseModel):
    table_name: str
    names: List[str]


class ScriptResponse(BaseModel):
    dialect: str
    script: Optional[str] = None
