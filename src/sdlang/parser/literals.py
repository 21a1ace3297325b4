# Copyright 2026 SDLang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Recognizer for SDLang scalar literals.

Several literal grammars share a prefix (a date is the start of a datetime,
digits start a duration, a decimal, or a number), so the alternatives are
tried in a fixed order and each one either matches or leaves the cursor
where it found it.
"""

from __future__ import annotations

import base64
import binascii
import math
import re
from collections.abc import Callable

from pydantic import ValidationError

from sdlang.model.values import (
    BinaryValue,
    BooleanValue,
    Date,
    DateTimeValue,
    DateValue,
    DecimalSuffix,
    DecimalValue,
    DurationValue,
    NullValue,
    NumberSuffix,
    NumberValue,
    StringValue,
    Time,
    Value,
)
from sdlang.parser.errors import (
    InvalidLiteralError,
    InvalidLiteralSuffixError,
    UnterminatedBase64Error,
    UnterminatedStringError,
)
from sdlang.parser.scanner import INLINE_WHITESPACE, Scanner

# ###############
# Public Interface
# ###############


def scan_value(scanner: Scanner) -> Value | None:
    """Match one literal at the cursor.

    Returns the value and leaves the cursor after it, or returns None with the
    cursor unchanged when no literal starts here.

    Raises:
        ParseError: When a literal has clearly started but is malformed, e.g.
            an unterminated string or a number running into letters.
    """
    for alternative in _ALTERNATIVES:
        value = alternative(scanner)
        if value is not None:
            return value
    return None


# ################
# Implementation
# ################

_DATE_RE = re.compile(r"(\d{4})/(\d{2})/(\d{2})", re.ASCII)
_TIME_RE = re.compile(r"(\d{2}):(\d{2}):(\d{2})(?:\.(\d{3}))?", re.ASCII)
_DAYS_RE = re.compile(r"(\d+)d:", re.ASCII)
_DECIMAL_RE = re.compile(r"(-?\d+\.\d+)(f)?", re.ASCII)
_NUMBER_RE = re.compile(r"(-?\d+)(L|BD)?", re.ASCII)
_KEYWORD_RE = re.compile(r"(true|on|false|off|null)(?![\w.$-])", re.ASCII)
# Letters or underscore directly after a numeric literal.
_SUFFIX_RE = re.compile(r"[A-Za-z_]")

_BASE64_ALPHABET = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/=")
_UTC_SUFFIX = "-UTC"


def _scan_string(scanner: Scanner) -> Value | None:
    """Scan a double-quoted or backtick-quoted string.

    Double-quoted text keeps backslash sequences exactly as written; a
    backslash only prevents the following character from closing the string.
    """
    quote = scanner.current()
    if quote not in ('"', "`"):
        return None
    start = scanner.pos
    scanner.advance()
    text_start = scanner.pos
    if quote == "`":
        end = scanner.source.find("`", text_start)
        if end == -1:
            raise scanner.error(UnterminatedStringError, offset=start)
        scanner.pos = end + 1
        return StringValue(text=scanner.source[text_start:end])

    while True:
        if scanner.at_end():
            raise scanner.error(UnterminatedStringError, offset=start)
        ch = scanner.current()
        if ch == '"':
            break
        if ch == "\\":
            scanner.advance()
            if scanner.at_end():
                raise scanner.error(UnterminatedStringError, offset=start)
        scanner.advance()
    text = scanner.source[text_start : scanner.pos]
    scanner.advance()  # closing "
    return StringValue(text=text)


def _scan_base64(scanner: Scanner) -> Value | None:
    """Scan ``[...]`` holding base64 text interleaved with whitespace and comments."""
    if scanner.current() != "[":
        return None
    start = scanner.pos
    scanner.advance()
    chunks: list[str] = []
    while True:
        if scanner.at_end():
            raise scanner.error(UnterminatedBase64Error, offset=start)
        ch = scanner.current()
        if ch == "]":
            scanner.advance()
            break
        if ch in INLINE_WHITESPACE or ch == "\n":
            scanner.advance()
        elif scanner.startswith("/*"):
            scanner.skip_block_comment()
        # '/' belongs to the base64 alphabet, so '//' is payload here.
        elif ch == "#" or scanner.startswith("--"):
            scanner.skip_line_comment()
        elif ch in _BASE64_ALPHABET:
            chunks.append(ch)
            scanner.advance()
        else:
            raise scanner.unexpected("base64 literal")

    try:
        data = base64.b64decode("".join(chunks), validate=True)
    except binascii.Error as exc:
        raise scanner.error(InvalidLiteralError, "base64", str(exc), offset=start) from None
    return BinaryValue(data=data)


def _scan_datetime(scanner: Scanner) -> Value | None:
    """Scan a date, a separating whitespace run, a time, and an optional ``-UTC``."""
    start = scanner.pos
    date_match = _DATE_RE.match(scanner.source, start)
    if date_match is None:
        return None
    scanner.pos = date_match.end()
    if not scanner.skip_inline():
        scanner.pos = start
        return None
    time_match = _TIME_RE.match(scanner.source, scanner.pos)
    if time_match is None:
        scanner.pos = start
        return None
    scanner.pos = time_match.end()
    utc = scanner.startswith(_UTC_SUFFIX)
    if utc:
        scanner.advance(len(_UTC_SUFFIX))
    return _build(
        scanner,
        "datetime",
        start,
        lambda: DateTimeValue(date=_date(date_match), time=_time(time_match), utc=utc),
    )


def _scan_date(scanner: Scanner) -> Value | None:
    start = scanner.pos
    match = _DATE_RE.match(scanner.source, start)
    if match is None:
        return None
    scanner.pos = match.end()
    return _build(scanner, "date", start, lambda: DateValue(date=_date(match)))


def _scan_duration(scanner: Scanner) -> Value | None:
    """Scan ``[<days>d:]HH:MM:SS[.mmm]``."""
    start = scanner.pos
    days_match = _DAYS_RE.match(scanner.source, start)
    time_start = days_match.end() if days_match is not None else start
    time_match = _TIME_RE.match(scanner.source, time_start)
    if time_match is None:
        return None
    scanner.pos = time_match.end()
    days = int(days_match.group(1)) if days_match is not None else None
    return _build(scanner, "duration", start, lambda: DurationValue(days=days, time=_time(time_match)))


def _scan_decimal(scanner: Scanner) -> Value | None:
    start = scanner.pos
    match = _DECIMAL_RE.match(scanner.source, start)
    if match is None:
        return None
    scanner.pos = match.end()
    _reject_suffix(scanner, "decimal")
    value = float(match.group(1))
    if not math.isfinite(value):
        raise scanner.error(InvalidLiteralError, "decimal", "value out of range", offset=start)
    suffix = DecimalSuffix.FLOAT if match.group(2) else DecimalSuffix.NONE
    return DecimalValue(value=value, suffix=suffix)


def _scan_number(scanner: Scanner) -> Value | None:
    start = scanner.pos
    match = _NUMBER_RE.match(scanner.source, start)
    if match is None:
        return None
    scanner.pos = match.end()
    _reject_suffix(scanner, "number")
    suffix = NumberSuffix(match.group(2) or "")
    return _build(scanner, "number", start, lambda: NumberValue(value=int(match.group(1)), suffix=suffix))


def _scan_keyword(scanner: Scanner) -> Value | None:
    """Scan ``true``/``on``/``false``/``off``/``null`` not followed by identifier characters."""
    match = _KEYWORD_RE.match(scanner.source, scanner.pos)
    if match is None:
        return None
    scanner.pos = match.end()
    word = match.group(1)
    if word == "null":
        return NullValue()
    return BooleanValue(value=word in ("true", "on"))


_ALTERNATIVES: tuple[Callable[[Scanner], Value | None], ...] = (
    _scan_string,
    _scan_base64,
    _scan_datetime,
    _scan_date,
    _scan_duration,
    _scan_decimal,
    _scan_number,
    _scan_keyword,
)


# ------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------


def _date(match: re.Match[str]) -> Date:
    year, month, day = match.group(1, 2, 3)
    return Date(year=int(year), month=int(month), day=int(day))


def _time(match: re.Match[str]) -> Time:
    hour, minute, second, millis = match.group(1, 2, 3, 4)
    return Time(
        hour=int(hour),
        minute=int(minute),
        second=int(second),
        millisecond=int(millis) if millis is not None else None,
    )


def _reject_suffix(scanner: Scanner, literal_kind: str) -> None:
    """Fail when a numeric literal is immediately followed by a letter or underscore."""
    if _SUFFIX_RE.match(scanner.current()):
        raise scanner.error(InvalidLiteralSuffixError, literal_kind)


def _build(scanner: Scanner, literal_kind: str, start: int, factory: Callable[[], Value]) -> Value:
    """Construct a value, reporting model validation failures as InvalidLiteralError."""
    try:
        return factory()
    except ValidationError as exc:
        detail = exc.errors()[0]["msg"]
        raise scanner.error(InvalidLiteralError, literal_kind, detail, offset=start) from None
