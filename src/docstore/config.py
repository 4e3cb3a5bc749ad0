"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "DOCSTORE_"


class Settings(BaseModel):
    app_name:  str = "docstore"
    data_file: Optional[str] = Field(default=None, description="YAML file of documents used to seed the store")
    log_level: str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
                           description="Root logging level for CLI runs")


def _file_values(path: Path) -> dict[str, Any]:
    """Return the mapping in path, or {} when the file is absent or empty."""
    if not path.exists():
        return {}
    try:
        return yaml.safe_load(path.read_text()) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {path.name}: {e}") from e


def _env_values() -> dict[str, str]:
    """Return non-empty ENV_PREFIX<FIELD> variables keyed by Settings field name."""
    found = {name: os.getenv(f"{ENV_PREFIX}{name.upper()}") for name in Settings.model_fields}
    return {name: val for name, val in found.items() if val}


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Merge config.yaml, then DOCSTORE_* env vars, then non-None CLI overrides into Settings."""
    data = _file_values(Path(CONFIG_FILE))
    data.update(_env_values())
    data.update({k: v for k, v in (overrides or {}).items() if v is not None})
    return Settings(**data)
