"""Configuration settings for the backend API."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional
from pathlib import Path
import tempfile

from schema2script.utils.storage_config import get_storage_config

_storage = get_storage_config()


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="SCHEMA2SCRIPT_API_",
        extra="ignore"
    )

    # API
    api_title: str = "Schema2Script Backend API"
    api_version: str = "1.0.0"
    # Default to common local dev origins (Vite=5173, CRA=3000).
    cors_origins: List[str] = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    # Overrides the logging level from config.yaml
    log_level: Optional[str] = None

    # Uploaded schema documents are written here before parsing
    upload_path: str = str(Path(tempfile.gettempdir()) / "schema2script_uploads")

    # Write-through schema copy and generated script
    schema_store_path: str = _storage.schema_store_path
    script_output_path: str = _storage.script_output_path


settings = Settings()
