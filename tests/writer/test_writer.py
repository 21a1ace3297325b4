# Copyright 2026 SDLang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for rendering SDLang documents back to text."""

from pathlib import Path

import pytest

from sdlang.config import MAX_DEPTH_LIMIT, ParserOptions, WriterOptions
from sdlang.model import (
    Attribute,
    BinaryValue,
    BooleanValue,
    Date,
    DateTimeValue,
    DateValue,
    DecimalSuffix,
    DecimalValue,
    Document,
    DurationValue,
    NullValue,
    NumberSuffix,
    NumberValue,
    StringValue,
    Tag,
    Time,
    Value,
)
from sdlang.parser import parse
from sdlang.writer import format_tag, format_value, stringify, write_file

# ###############
# Helpers
# ###############


def _roundtrip(source: str) -> Document:
    """Parse, render, and parse again."""
    return parse(stringify(parse(source)))


# ###############
# Values
# ###############


class TestFormatValue:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (StringValue(text="plain"), '"plain"'),
            (StringValue(text=r"a\"b"), r'"a\"b"'),
            (StringValue(text='say "hi"'), '`say "hi"`'),
            (StringValue(text="C:\\"), "`C:\\`"),
            (BinaryValue(data=b"hello"), "[aGVsbG8=]"),
            (DateValue(date=Date(year=812, month=3, day=9)), "0812/03/09"),
            (
                DateTimeValue(date=Date(year=2021, month=1, day=5), time=Time(hour=9, minute=5, second=0)),
                "2021/01/05 09:05:00",
            ),
            (
                DateTimeValue(
                    date=Date(year=2021, month=1, day=5),
                    time=Time(hour=9, minute=5, second=0, millisecond=7),
                    utc=True,
                ),
                "2021/01/05 09:05:00.007-UTC",
            ),
            (DurationValue(days=5, time=Time(hour=1, minute=0, second=0)), "5d:01:00:00"),
            (DurationValue(time=Time(hour=0, minute=30, second=0)), "00:30:00"),
            (NumberValue(value=-42), "-42"),
            (NumberValue(value=42, suffix=NumberSuffix.LONG), "42L"),
            (NumberValue(value=2**80, suffix=NumberSuffix.BIG_DECIMAL), f"{2**80}BD"),
            (DecimalValue(value=1.5), "1.5"),
            (DecimalValue(value=3.0, suffix=DecimalSuffix.FLOAT), "3.0f"),
            (DecimalValue(value=1e20), "100000000000000000000.0"),
            (DecimalValue(value=1e-7), "0.0000001"),
            (BooleanValue(value=True), "true"),
            (BooleanValue(value=False), "false"),
            (NullValue(), "null"),
        ],
    )
    def test_literal(self, value: Value, expected: str) -> None:
        assert format_value(value) == expected

    def test_string_fitting_neither_quote_style(self) -> None:
        with pytest.raises(ValueError):
            format_value(StringValue(text='a"b`c'))

    @pytest.mark.parametrize("number", [float("inf"), float("-inf"), float("nan")])
    def test_non_finite_decimal(self, number: float) -> None:
        with pytest.raises(ValueError):
            format_value(DecimalValue(value=number))


# ###############
# Tags and Documents
# ###############


class TestFormatTag:
    def test_name_and_value(self) -> None:
        assert format_tag(Tag(name="hello_world", values=(StringValue(text="text"),))) == 'hello_world "text"'

    def test_namespace_values_attributes(self) -> None:
        tag = Tag(
            namespace="ns",
            name="t",
            values=(NumberValue(value=1), NullValue()),
            attributes=(Attribute(key="k", value=BooleanValue(value=False)),),
        )
        assert format_tag(tag) == "ns:t 1 null k=false"

    def test_anonymous(self) -> None:
        assert format_tag(Tag(values=(NumberValue(value=1), NumberValue(value=2)))) == "1 2"

    def test_empty_children(self) -> None:
        assert format_tag(Tag(name="a", children=())) == "a {\n}"


class TestStringify:
    def test_empty_document(self) -> None:
        assert stringify(Document()) == ""

    def test_nested_indentation(self) -> None:
        text = stringify(parse("a {\nb {\nc 1\n}\n}\nd"))
        assert text == "a {\n    b {\n        c 1\n    }\n}\nd\n"

    def test_custom_indent(self) -> None:
        text = stringify(parse("a { b }"), WriterOptions(indent="  "))
        assert text == "a {\n  b\n}\n"

    def test_write_file(self, tmp_path: Path) -> None:
        path = tmp_path / "out" / "doc.sdl"
        write_file(parse('title "Hello"'), path)
        assert path.read_text(encoding="utf-8") == 'title "Hello"\n'


# ###############
# Round Trip
# ###############

_SAMPLE = """\
// comments are dropped but structure survives
title "Hello, World"
bookmarks 12 15 188 1234
author "Peter Parker" email="peter@example.org" active=true
contents {
    section "First Section" {
        paragraph "This is the first paragraph"
    }
}
"anonymous value"
matrix { 1 0 0; 0 1 0; 0 0 1 }
ns:values `raw\\path` `say "hi"` "esc\\"aped" [aGVsbG8=] 2021/01/05 2021/01/05 10:00:00.123-UTC
more 5d:01:02:03 12:00:00 1.5f -2.25 42L 7BD off null k=on k=off
empty {}
"""


class TestRoundTrip:
    def test_sample_document(self) -> None:
        original = parse(_SAMPLE)
        assert parse(stringify(original)) == original

    @pytest.mark.parametrize(
        "source",
        [
            "a",
            "a 1 /* inline */ 2",
            "1 2 3",
            "a {\n}",
            "x:y z=[]",
            'deep { a { b { c "d" } } }',
            "t 0.1 -0.5 100.25f",
        ],
    )
    def test_structural_equality(self, source: str) -> None:
        assert _roundtrip(source) == parse(source)

    def test_rendering_is_stable(self) -> None:
        once = stringify(parse(_SAMPLE))
        assert stringify(parse(once)) == once

    def test_deepest_accepted_tree(self) -> None:
        """A tree at the maximum allowed nesting renders, dumps, and compares equal."""
        options = ParserOptions(max_depth=MAX_DEPTH_LIMIT)
        document = parse("a {\n" * MAX_DEPTH_LIMIT + "}\n" * MAX_DEPTH_LIMIT, options)
        assert document.model_dump_json()
        assert parse(stringify(document), options) == document
