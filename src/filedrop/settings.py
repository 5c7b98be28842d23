from __future__ import annotations

from dataclasses import dataclass
from datetime import tzinfo
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .errors import ConfigurationError
from .mapping_io import load_mapping_file

SETTINGS_FIELDS = {"root", "timezone", "max_retries"}


@dataclass(frozen=True)
class Settings:
    root: str = ""
    timezone: str | None = None
    max_retries: int | None = None

    def zone(self) -> tzinfo | None:
        """Configured zone, or None for the system local zone."""
        if not self.timezone:
            return None
        try:
            return ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ConfigurationError(f"Unknown timezone `{self.timezone}`") from exc


def settings_from_mapping(raw: dict[str, Any]) -> Settings:
    unknown = sorted(set(raw) - SETTINGS_FIELDS)
    if unknown:
        raise ConfigurationError(f"Unknown settings: {', '.join(unknown)}")
    root = raw.get("root") or ""
    if not isinstance(root, str):
        raise ConfigurationError("Setting `root` must be a string")
    timezone = raw.get("timezone") or None
    if timezone is not None and not isinstance(timezone, str):
        raise ConfigurationError("Setting `timezone` must be a string")
    max_retries = raw.get("max_retries")
    if max_retries is not None and (
        isinstance(max_retries, bool) or not isinstance(max_retries, int) or max_retries < 0
    ):
        raise ConfigurationError("Setting `max_retries` must be a non-negative integer")
    settings = Settings(root=root, timezone=timezone, max_retries=max_retries)
    settings.zone()
    return settings


def load_settings(path: str | Path) -> Settings:
    return settings_from_mapping(load_mapping_file(Path(path).expanduser()))
