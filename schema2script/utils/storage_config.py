"""Env-backed locations of the schema store and the generated script.

Environment variables win over config.yaml; config.yaml wins over the
built-in defaults.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from schema2script.config import get_config

DEFAULT_SCHEMA_STORE_PATH = "schema/schema.json"
DEFAULT_SCRIPT_OUTPUT_PATH = "script/schema.sql"


def _get_str(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    s = str(raw).strip()
    return s if s else default


def _storage_section() -> dict:
    try:
        section = get_config("storage")
    except FileNotFoundError:
        return {}
    return section if isinstance(section, dict) else {}


def _default_store_path() -> str:
    configured = _storage_section().get("schema_store_path") or DEFAULT_SCHEMA_STORE_PATH
    return _get_str("SCHEMA2SCRIPT_SCHEMA_STORE_PATH", configured)


def _default_script_path() -> str:
    configured = _storage_section().get("script_output_path") or DEFAULT_SCRIPT_OUTPUT_PATH
    return _get_str("SCHEMA2SCRIPT_SCRIPT_OUTPUT_PATH", configured)


@dataclass(frozen=True)
class StorageConfig:
    """Where the write-through schema copy and the generated script go."""

    schema_store_path: str = field(default_factory=_default_store_path)
    script_output_path: str = field(default_factory=_default_script_path)


def get_storage_config() -> StorageConfig:
    return StorageConfig()
