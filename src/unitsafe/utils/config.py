"""Configuration loading and validation."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

# Default config directory relative to package root
_PACKAGE_ROOT = Path(__file__).resolve().parent.parent.parent.parent
_CONFIGS_DIR = _PACKAGE_ROOT / "configs"

CONFIG_ENV_VAR = "UNITSAFE_CONFIG"


class UnitsafeConfig(BaseModel):
    """Top-level configuration for loading definitions and the CLI."""

    definitions_path: str | None = None
    log_level: str = "INFO"
    strict_field_order: bool = True
    display_precision: int = Field(default=6, ge=0)


def load_config(path: str | Path | None = None) -> UnitsafeConfig:
    """Load config from a YAML file.

    Falls back to $UNITSAFE_CONFIG, then configs/default.yaml, then defaults.
    """
    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR) or _CONFIGS_DIR / "default.yaml"
    path = Path(path)

    if not path.exists():
        return UnitsafeConfig()

    with open(path) as f:
        raw: dict[str, Any] = yaml.safe_load(f) or {}

    return UnitsafeConfig(**raw)
