"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    app_name:         str = "mdpost"
    parser_config:    str = Field(default="gfm-like", pattern="^(commonmark|gfm-like|default|zero)$",
                                  description="MarkdownIt parser preset name")
    output_dir:       str = Field(default="dist", description="Directory for rendered HTML + JSON files")
    include_drafts:   bool = Field(default=False, description="Also write draft posts (never listed in index.json)")
    heading_anchors:  bool = Field(default=True, description="Add slug ids to rendered headings")
    words_per_minute: int = Field(default=200, ge=1, description="Reading speed for timeToRead estimates")
    log_level:        str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then MDPOST_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"MDPOST_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    if isinstance(data.get("log_level"), str):
        data["log_level"] = data["log_level"].upper()
    try:
        return Settings(**data)
    except ValidationError as e:
        raise ValueError(f"Invalid settings: {e}") from e
