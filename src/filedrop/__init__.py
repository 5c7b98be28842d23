from __future__ import annotations

from loguru import logger

from .errors import (
    ChannelError,
    ConfigurationError,
    DirectoryError,
    FiledropError,
    FileImportError,
    ParseError,
)
from .parsing import parse_as
from .session import Session
from .settings import Settings, load_settings

logger.disable("filedrop")

__all__ = [
    "ChannelError",
    "ConfigurationError",
    "DirectoryError",
    "FileImportError",
    "FiledropError",
    "ParseError",
    "Session",
    "Settings",
    "load_settings",
    "parse_as",
]
