"""Load configuration from YAML file.

The packaged ``config.yaml`` is used unless a path is passed explicitly or
``SCHEMA2SCRIPT_CONFIG`` points at another file.
"""

import os
import yaml
from pathlib import Path
from typing import Any, Dict, Optional, Union

CONFIG_ENV_VAR = "SCHEMA2SCRIPT_CONFIG"


def find_config_file(path: Optional[Union[str, Path]] = None) -> Path:
    """Resolve the config file: explicit path, then $SCHEMA2SCRIPT_CONFIG, then the packaged file."""
    override = path or os.getenv(CONFIG_ENV_VAR)
    config_file = Path(override) if override else Path(__file__).parent / "config.yaml"

    if not config_file.exists():
        raise FileNotFoundError(f"config.yaml not found at {config_file}.")

    return config_file


def load_config(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Load the whole configuration.

    Raises:
        FileNotFoundError: If no config file can be found
        yaml.YAMLError: If YAML parsing fails
    """
    with open(find_config_file(path), "r", encoding="utf-8") as f:
        config = yaml.safe_load(f)

    # An empty file loads as None
    return config or {}


def get_config(section: Optional[str] = None, path: Optional[Union[str, Path]] = None) -> Any:
    """
    Get configuration value(s).

    Args:
        section: Section name ("storage", "logging", "formats"); None for everything
        path: Optional config file overriding the default lookup

    Returns:
        The section (empty dict when absent) or the whole configuration
    """
    config = load_config(path)
    if section is None:
        return config
    return config.get(section, {})
