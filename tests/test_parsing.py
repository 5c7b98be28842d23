from __future__ import annotations

import os
import time
import unittest
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Optional
from urllib.parse import SplitResult

import support  # noqa: F401

from filedrop import ParseError, parse_as
from filedrop.app_constants import BAD_TIME_FORMAT


@dataclass
class Point:
    x: int
    y: int


@dataclass
class Window:
    name: str
    size: tuple[int, int]
    tags: list[str] = field(default_factory=list)
    origin: Optional[Point] = None


class ParseAsTests(unittest.TestCase):
    def test_text_is_returned_unchanged(self) -> None:
        self.assertEqual(parse_as("  spaced ", str), "  spaced ")

    def test_numbers(self) -> None:
        self.assertEqual(parse_as("42", int), 42)
        self.assertEqual(parse_as("-1.5", float), -1.5)
        with self.assertRaises(ParseError) as ctx:
            parse_as("12a", int)
        self.assertIs(ctx.exception.kind, int)
        self.assertEqual(ctx.exception.raw, "12a")
        with self.assertRaises(ParseError):
            parse_as("one", float)

    def test_numbers_must_be_bare_literals(self) -> None:
        for raw in ("1_000", " 12", "12 ", "\t7"):
            with self.assertRaises(ParseError):
                parse_as(raw, int)
        with self.assertRaises(ParseError):
            parse_as("1_0.5", float)
        self.assertEqual(parse_as("+5", int), 5)

    def test_url(self) -> None:
        url = parse_as("https://example.com:8443/a?b=c", SplitResult)
        self.assertEqual(url.hostname, "example.com")
        self.assertEqual(url.port, 8443)
        with self.assertRaises(ParseError):
            parse_as("http://[::1", SplitResult)
        with self.assertRaises(ParseError):
            parse_as("http://example.com:port/", SplitResult)

    def test_same_day_in_different_layouts(self) -> None:
        iso = parse_as("2021-01-02", datetime, timezone.utc)
        textual = parse_as("Jan 2, 2021", datetime, timezone.utc)
        numeric = parse_as("01/02/2021", datetime, timezone.utc)
        self.assertEqual(iso, textual)
        self.assertEqual(iso, numeric)
        self.assertEqual(iso, datetime(2021, 1, 2, tzinfo=timezone.utc))

    def test_naive_times_use_the_given_zone(self) -> None:
        zone = timezone(timedelta(hours=-5))
        parsed = parse_as("2021-01-02 10:30:00", datetime, zone)
        self.assertEqual(parsed.tzinfo, zone)
        self.assertEqual(parsed.hour, 10)

    @unittest.skipUnless(hasattr(time, "tzset"), "needs time.tzset")
    def test_local_zone_follows_daylight_saving(self) -> None:
        previous = os.environ.get("TZ")
        os.environ["TZ"] = "EST5EDT,M3.2.0,M11.1.0"
        time.tzset()
        try:
            winter = parse_as("2021-01-02", datetime)
            summer = parse_as("2021-07-02", datetime)
        finally:
            if previous is None:
                os.environ.pop("TZ", None)
            else:
                os.environ["TZ"] = previous
            time.tzset()
        self.assertEqual(winter.utcoffset(), timedelta(hours=-5))
        self.assertEqual(summer.utcoffset(), timedelta(hours=-4))
        self.assertEqual((winter.hour, summer.hour), (0, 0))

    def test_explicit_offset_is_kept(self) -> None:
        parsed = parse_as("2021-01-02T03:04:05+02:00", datetime, timezone.utc)
        self.assertEqual(parsed.utcoffset(), timedelta(hours=2))

    def test_unrecognized_time_is_one_generic_error(self) -> None:
        with self.assertRaises(ParseError) as ctx:
            parse_as("not-a-date", datetime)
        self.assertEqual(ctx.exception.reason, BAD_TIME_FORMAT)
        self.assertIsNone(ctx.exception.__cause__)
        self.assertIn(BAD_TIME_FORMAT, str(ctx.exception))

    def test_structured_values(self) -> None:
        self.assertEqual(parse_as('{"a": 1, "b": [2, 3]}', dict), {"a": 1, "b": [2, 3]})
        self.assertEqual(parse_as("[1, 2, 3]", list), [1, 2, 3])
        self.assertIs(parse_as("true", bool), True)
        self.assertEqual(parse_as("{x: 1, y: 2}", Point), Point(1, 2))

    def test_structured_shape_mismatch(self) -> None:
        with self.assertRaises(ParseError):
            parse_as("[1, 2]", dict)
        with self.assertRaises(ParseError):
            parse_as("{x: 1, z: 2}", Point)
        with self.assertRaises(ParseError):
            parse_as("{a: [", dict)

    def test_dataclass_fields_are_type_checked(self) -> None:
        with self.assertRaises(ParseError):
            parse_as("{x: abc, y: [1]}", Point)
        with self.assertRaises(ParseError):
            parse_as("{x: true, y: 1}", Point)
        window = parse_as("{name: main, size: [3, 4], origin: {x: 1, y: 2}}", Window)
        self.assertEqual(window, Window("main", (3, 4), [], Point(1, 2)))
        with self.assertRaises(ParseError):
            parse_as("{name: main, size: [3]}", Window)
        with self.assertRaises(ParseError):
            parse_as("{name: main, size: [3, 4], origin: {x: 1}}", Window)

    def test_parameterized_containers(self) -> None:
        self.assertEqual(parse_as("[1, 2]", list[int]), [1, 2])
        self.assertEqual(parse_as("{a: 1.5, b: 2}", dict[str, float]), {"a": 1.5, "b": 2.0})
        self.assertIsNone(parse_as("null", Optional[int]))
        self.assertEqual(parse_as("3", Optional[int]), 3)
        with self.assertRaises(ParseError):
            parse_as("5", list[int])
        with self.assertRaises(ParseError):
            parse_as("[1, two]", list[int])
        with self.assertRaises(ParseError):
            parse_as("{a: x}", dict[str, int])


if __name__ == "__main__":
    unittest.main()
