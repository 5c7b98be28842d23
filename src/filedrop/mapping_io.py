from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from .app_constants import CONFIG_EXT_TO_FORMAT
from .errors import ConfigurationError


def load_mapping_file(path: Path) -> dict[str, Any]:
    ext = path.suffix.lower()
    if ext not in CONFIG_EXT_TO_FORMAT:
        raise ConfigurationError(f"Unsupported settings extension: {ext}")
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Cannot read settings file {path}: {exc}") from exc
    if CONFIG_EXT_TO_FORMAT[ext] == "json":
        try:
            out = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ConfigurationError(f"Invalid JSON in {path}: {exc}") from exc
    else:
        try:
            out = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Invalid YAML in {path}: {exc}") from exc
    if out is None:
        return {}
    if not isinstance(out, dict):
        raise ConfigurationError(f"Settings file {path} must contain an object/map")
    return out
