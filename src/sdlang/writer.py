# Copyright 2026 SDLang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Rendering of SDLang documents back to text.

The output is canonical rather than a copy of the original formatting:
one tag per line, children indented inside ``{`` and ``}``, comments
dropped. Parsing the output yields a document equal to the one rendered.
"""

from __future__ import annotations

import base64
import decimal
import math
from pathlib import Path

from sdlang.config import WriterOptions
from sdlang.model.tree import Attribute, Document, Tag
from sdlang.model.values import (
    BinaryValue,
    BooleanValue,
    Date,
    DateTimeValue,
    DateValue,
    DecimalValue,
    DurationValue,
    NullValue,
    NumberValue,
    StringValue,
    Time,
    Value,
)

# ###############
# Public Interface
# ###############


def stringify(document: Document, options: WriterOptions | None = None) -> str:
    """Render a Document as SDLang text, one top-level tag per line.

    Raises:
        ValueError: If a value has no SDLang spelling (a non-finite decimal, or
            a string that fits neither quoting style).
    """
    options = options or WriterOptions()
    lines: list[str] = []
    for tag in document.tags:
        lines.extend(_tag_lines(tag, 0, options.indent))
    return "".join(f"{line}\n" for line in lines)


def format_tag(tag: Tag, options: WriterOptions | None = None) -> str:
    """Render a single tag, including its children, without a trailing newline."""
    options = options or WriterOptions()
    return "\n".join(_tag_lines(tag, 0, options.indent))


def format_value(value: Value) -> str:
    """Render a single value as its SDLang literal."""
    if isinstance(value, StringValue):
        return _format_string(value.text)
    if isinstance(value, BinaryValue):
        return f"[{base64.b64encode(value.data).decode('ascii')}]"
    if isinstance(value, DateValue):
        return _format_date(value.date)
    if isinstance(value, DateTimeValue):
        suffix = "-UTC" if value.utc else ""
        return f"{_format_date(value.date)} {_format_time(value.time)}{suffix}"
    if isinstance(value, DurationValue):
        days = f"{value.days}d:" if value.days is not None else ""
        return f"{days}{_format_time(value.time)}"
    if isinstance(value, NumberValue):
        return f"{value.value}{value.suffix.value}"
    if isinstance(value, DecimalValue):
        return f"{_format_decimal(value.value)}{value.suffix.value}"
    if isinstance(value, BooleanValue):
        return "true" if value.value else "false"
    if isinstance(value, NullValue):
        return "null"
    raise TypeError(f"Not an SDLang value: {value!r}")


def write_file(document: Document, path: Path, options: WriterOptions | None = None) -> None:
    """Write a rendered document to *path*, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(stringify(document, options), encoding="utf-8")


# ################
# Implementation
# ################


def _tag_lines(tag: Tag, level: int, indent: str) -> list[str]:
    prefix = indent * level
    parts: list[str] = []
    if tag.qualified_name is not None:
        parts.append(tag.qualified_name)
    parts.extend(format_value(v) for v in tag.values)
    parts.extend(_format_attribute(a) for a in tag.attributes)
    head = prefix + " ".join(parts)
    if tag.children is None:
        return [head]

    lines = [f"{head} {{"]
    for child in tag.children:
        lines.extend(_tag_lines(child, level + 1, indent))
    lines.append(f"{prefix}}}")
    return lines


def _format_attribute(attribute: Attribute) -> str:
    return f"{attribute.key}={format_value(attribute.value)}"


def _format_date(date: Date) -> str:
    return f"{date.year:04d}/{date.month:02d}/{date.day:02d}"


def _format_time(time: Time) -> str:
    text = f"{time.hour:02d}:{time.minute:02d}:{time.second:02d}"
    if time.millisecond is not None:
        text += f".{time.millisecond:03d}"
    return text


def _format_string(text: str) -> str:
    """Quote *text* with double quotes when it reads back unchanged, else with backticks."""
    if _fits_double_quotes(text):
        return f'"{text}"'
    if "`" not in text:
        return f"`{text}`"
    raise ValueError(f"String cannot be written as an SDLang literal: {text!r}")


def _fits_double_quotes(text: str) -> bool:
    """Return True if every '"' in *text* is escaped and no backslash is left dangling."""
    i = 0
    while i < len(text):
        ch = text[i]
        if ch == "\\":
            if i + 1 == len(text):
                return False
            i += 2
        elif ch == '"':
            return False
        else:
            i += 1
    return True


def _format_decimal(value: float) -> str:
    """Render a float in positional notation with at least one fractional digit."""
    if not math.isfinite(value):
        raise ValueError(f"Decimal cannot be written as an SDLang literal: {value!r}")
    text = repr(value)
    if "e" in text or "E" in text:
        text = format(decimal.Decimal(text), "f")
    if "." not in text:
        text += ".0"
    return text
