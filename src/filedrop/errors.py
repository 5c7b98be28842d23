"""Exception types raised by filedrop."""

from __future__ import annotations

from typing import Any


class FiledropError(Exception):
    """Base exception for filedrop."""


class ChannelError(FiledropError):
    """Raised when the operator channel cannot produce a line."""


class ParseError(FiledropError):
    """Raised when an answer does not match the requested kind."""

    def __init__(self, kind: Any, raw: str, reason: str | None = None) -> None:
        self.kind = kind
        self.raw = raw
        self.reason = reason
        name = getattr(kind, "__name__", str(kind))
        message = f"cannot parse `{raw}` as {name}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class FileImportError(FiledropError):
    """Raised when a file cannot be brought into the managed root."""


class DirectoryError(FiledropError):
    """Raised when a directory cannot be materialized."""


class ConfigurationError(FiledropError):
    """Raised for invalid settings or settings files."""
