"""Conversion of raw operator answers into typed values."""

from __future__ import annotations

import dataclasses
import types
from collections import abc
from datetime import datetime, tzinfo
from typing import Any, Literal, Union, get_args, get_origin, get_type_hints
from urllib.parse import SplitResult, urlsplit

import yaml

from .app_constants import BAD_TIME_FORMAT, TIME_LAYOUTS
from .errors import ParseError

UNION_TYPES = tuple(t for t in (Union, getattr(types, "UnionType", None)) if t is not None)


class ShapeMismatch(Exception):
    """Decoded data does not fit the requested kind."""


def parse_time(raw: str, tz: tzinfo | None = None) -> datetime:
    """Parse `raw` with the first matching layout.

    Naive results are placed in `tz`, or in the system local zone (DST-aware)
    when `tz` is None.
    """
    for layout in TIME_LAYOUTS:
        try:
            parsed = datetime.strptime(raw, layout)
        except ValueError:
            continue
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=tz) if tz is not None else parsed.astimezone()
        return parsed
    raise ParseError(datetime, raw, BAD_TIME_FORMAT)


def parse_number(raw: str, kind: type) -> Any:
    # int()/float() also take digit separators and padding; answers must be bare literals.
    if "_" in raw or raw != raw.strip():
        raise ParseError(kind, raw, "not a plain numeric literal")
    try:
        return kind(raw)
    except ValueError as exc:
        raise ParseError(kind, raw, str(exc)) from exc


def parse_url(raw: str) -> SplitResult:
    try:
        url = urlsplit(raw)
        _ = url.port
    except ValueError as exc:
        raise ParseError(SplitResult, raw, str(exc)) from exc
    return url


def kind_name(kind: Any) -> str:
    return getattr(kind, "__name__", None) or str(kind)


def decode_dataclass(data: Any, kind: type, where: str) -> Any:
    if not isinstance(data, dict):
        raise ShapeMismatch(f"{where}: expected a mapping for {kind_name(kind)}")
    try:
        hints = get_type_hints(kind)
    except NameError as exc:
        raise ShapeMismatch(f"{where}: cannot resolve fields of {kind_name(kind)}: {exc}") from exc
    fields = {field.name: field for field in dataclasses.fields(kind) if field.init}
    unknown = sorted(str(key) for key in data if key not in fields)
    if unknown:
        raise ShapeMismatch(f"{where}: unknown fields {', '.join(unknown)}")
    values = {key: decode_value(value, hints[key], f"{where}.{key}") for key, value in data.items()}
    try:
        return kind(**values)
    except TypeError as exc:
        raise ShapeMismatch(f"{where}: {exc}") from exc


def decode_value(data: Any, kind: Any, where: str = "$") -> Any:
    """Check `data` against `kind`, building dataclasses along the way."""
    if kind is Any or kind is object:
        return data
    if kind is None or kind is type(None):
        if data is None:
            return None
        raise ShapeMismatch(f"{where}: expected null")
    origin = get_origin(kind)
    args = get_args(kind)
    if origin in UNION_TYPES:
        for option in args:
            try:
                return decode_value(data, option, where)
            except ShapeMismatch:
                continue
        raise ShapeMismatch(f"{where}: {type(data).__name__} matches no option of {kind}")
    if origin is Literal:
        if data in args:
            return data
        raise ShapeMismatch(f"{where}: {data!r} is not one of {args}")
    if origin is tuple:
        if not isinstance(data, (list, tuple)):
            raise ShapeMismatch(f"{where}: expected a sequence")
        if len(args) == 2 and args[1] is Ellipsis:
            return tuple(decode_value(item, args[0], f"{where}[{i}]") for i, item in enumerate(data))
        if args and len(args) != len(data):
            raise ShapeMismatch(f"{where}: expected {len(args)} items, got {len(data)}")
        if not args:
            return tuple(data)
        return tuple(decode_value(item, arg, f"{where}[{i}]") for i, (item, arg) in enumerate(zip(data, args)))
    if origin is not None and isinstance(origin, type) and issubclass(origin, abc.Mapping):
        if not isinstance(data, dict):
            raise ShapeMismatch(f"{where}: expected a mapping")
        key_kind, value_kind = args if len(args) == 2 else (Any, Any)
        return {
            decode_value(key, key_kind, f"{where}<key>"): decode_value(value, value_kind, f"{where}.{key}")
            for key, value in data.items()
        }
    if origin is not None and isinstance(origin, type) and issubclass(origin, abc.Iterable):
        if not isinstance(data, (list, tuple, set)):
            raise ShapeMismatch(f"{where}: expected a sequence")
        item_kind = args[0] if args else Any
        items = [decode_value(item, item_kind, f"{where}[{i}]") for i, item in enumerate(data)]
        if origin is frozenset:
            return frozenset(items)
        if issubclass(origin, abc.Set):
            return set(items)
        return items
    if origin is not None:
        raise ShapeMismatch(f"{where}: unsupported kind {kind}")
    if dataclasses.is_dataclass(kind) and isinstance(kind, type):
        return decode_dataclass(data, kind, where)
    if not isinstance(kind, type):
        raise ShapeMismatch(f"{where}: unsupported kind {kind}")
    if kind in (int, float) and isinstance(data, bool):
        raise ShapeMismatch(f"{where}: expected {kind.__name__}, decoded a bool")
    if kind is float and isinstance(data, int):
        return float(data)
    if not isinstance(data, kind):
        raise ShapeMismatch(f"{where}: expected {kind.__name__}, decoded a {type(data).__name__}")
    return data


def parse_structured(raw: str, kind: Any) -> Any:
    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ParseError(kind, raw, "not a structured document") from exc
    try:
        return decode_value(data, kind)
    except ShapeMismatch as exc:
        raise ParseError(kind, raw, str(exc)) from exc


def parse_as(raw: str, kind: Any, tz: tzinfo | None = None) -> Any:
    """Convert `raw` into a value of `kind`.

    `str`, `int`, `float`, `datetime` and `SplitResult` (URLs) have dedicated
    rules. Any other kind is decoded as a YAML/JSON document and checked
    against the kind's type hints, nested containers and dataclass fields
    included. Raises `ParseError` on failure.
    """
    if kind is str:
        return raw
    if kind is int or kind is float:
        return parse_number(raw, kind)
    if kind is datetime:
        return parse_time(raw, tz)
    if kind is SplitResult:
        return parse_url(raw)
    return parse_structured(raw, kind)
