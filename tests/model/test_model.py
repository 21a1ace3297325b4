# Copyright 2026 SDLang Contributors
# SPDX-License-Identifier: Apache-2.0

"""High-level tests demonstrating how to construct and query the SDLang document model."""

import datetime
import json

import pytest
from pydantic import ValidationError

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
)


def test_named_tag() -> None:
    """A tag can be built from a name, values, attributes, and children."""
    tag = Tag(
        name="author",
        values=(StringValue(text="Peter Parker"),),
        attributes=(Attribute(key="active", value=BooleanValue(value=True)),),
        children=(Tag(name="book"),),
    )
    assert tag.qualified_name == "author"
    assert not tag.is_anonymous
    assert tag.attribute("active") == BooleanValue(value=True)
    assert tag.child("book") == Tag(name="book")


def test_anonymous_tag() -> None:
    """A tag without a name is identified by its first value."""
    tag = Tag(values=(NumberValue(value=1),))
    assert tag.is_anonymous
    assert tag.qualified_name is None


def test_tag_needs_name_or_value() -> None:
    """A tag with neither a name nor a value is rejected."""
    with pytest.raises(ValidationError):
        Tag()
    with pytest.raises(ValidationError):
        Tag(attributes=(Attribute(key="k", value=NullValue()),))


def test_namespace_requires_name() -> None:
    with pytest.raises(ValidationError):
        Tag(namespace="ns", values=(NullValue(),))


def test_qualified_name_with_namespace() -> None:
    assert Tag(namespace="ns", name="tag").qualified_name == "ns:tag"


def test_models_are_immutable() -> None:
    """Tags and values cannot be modified after construction."""
    tag = Tag(name="a")
    with pytest.raises(ValidationError):
        tag.name = "b"  # type: ignore[misc]
    with pytest.raises(ValidationError):
        NumberValue(value=1).value = 2  # type: ignore[misc]


def test_attribute_lookups() -> None:
    """Repeated keys are all kept; single lookups return the first."""
    tag = Tag(
        name="a",
        attributes=(
            Attribute(key="k", value=NumberValue(value=1)),
            Attribute(key="other", value=NullValue()),
            Attribute(key="k", value=NumberValue(value=2)),
        ),
    )
    assert tag.attribute("k") == NumberValue(value=1)
    assert tag.attributes_named("k") == [NumberValue(value=1), NumberValue(value=2)]
    assert tag.attribute("missing") is None


def test_child_lookups() -> None:
    tag = Tag(name="root", children=(Tag(name="x"), Tag(values=(NullValue(),)), Tag(name="x", values=(NullValue(),))))
    assert tag.child("x") == Tag(name="x")
    assert len(tag.children_named("x")) == 2
    assert tag.child("missing") is None
    assert Tag(name="leaf").children_named("x") == []


def test_document_lookups() -> None:
    document = Document(tags=(Tag(name="a"), Tag(name="b"), Tag(name="a", values=(NullValue(),))))
    assert document.tag("b") == Tag(name="b")
    assert len(document.tags_named("a")) == 2
    assert document.tag("c") is None


def test_boolean_equality() -> None:
    assert BooleanValue(value=True) == BooleanValue(value=True)
    assert BooleanValue(value=True) != BooleanValue(value=False)


def test_suffix_distinguishes_numbers() -> None:
    assert NumberValue(value=1) != NumberValue(value=1, suffix=NumberSuffix.LONG)
    assert DecimalValue(value=1.0) != DecimalValue(value=1.0, suffix=DecimalSuffix.FLOAT)


def test_number_range() -> None:
    """Only big-decimal numbers may exceed the signed 64-bit range."""
    with pytest.raises(ValidationError):
        NumberValue(value=2**63)
    with pytest.raises(ValidationError):
        NumberValue(value=-(2**63) - 1, suffix=NumberSuffix.LONG)
    assert NumberValue(value=2**100, suffix=NumberSuffix.BIG_DECIMAL).value == 2**100


def test_date_and_time_validation() -> None:
    with pytest.raises(ValidationError):
        Date(year=2021, month=2, day=29)
    with pytest.raises(ValidationError):
        Time(hour=24, minute=0, second=0)
    with pytest.raises(ValidationError):
        Time(hour=0, minute=0, second=0, millisecond=1000)
    assert Date(year=2020, month=2, day=29).to_date() == datetime.date(2020, 2, 29)


def test_datetime_conversion() -> None:
    """UTC datetimes convert to aware datetimes; others stay naive."""
    date = Date(year=2021, month=1, day=5)
    time = Time(hour=10, minute=20, second=30, millisecond=250)
    utc = DateTimeValue(date=date, time=time, utc=True).to_datetime()
    assert utc == datetime.datetime(2021, 1, 5, 10, 20, 30, 250000, tzinfo=datetime.timezone.utc)
    naive = DateTimeValue(date=date, time=time).to_datetime()
    assert naive.tzinfo is None


def test_duration_conversion() -> None:
    duration = DurationValue(days=5, time=Time(hour=1, minute=2, second=3, millisecond=4))
    assert duration.to_timedelta() == datetime.timedelta(days=5, hours=1, minutes=2, seconds=3, milliseconds=4)
    assert DurationValue(time=Time(hour=0, minute=0, second=1)).to_timedelta() == datetime.timedelta(seconds=1)


def test_json_export() -> None:
    """Documents export to JSON with a kind tag per value and base64 binaries."""
    document = Document(
        tags=(
            Tag(
                name="t",
                values=(BinaryValue(data=b"hello"), DateValue(date=Date(year=2021, month=1, day=5))),
                attributes=(Attribute(key="n", value=NumberValue(value=7, suffix=NumberSuffix.LONG)),),
            ),
        )
    )
    exported = json.loads(document.model_dump_json())
    tag = exported["tags"][0]
    assert tag["values"][0] == {"kind": "binary", "data": "aGVsbG8="}
    assert tag["values"][1]["kind"] == "date"
    assert tag["attributes"][0] == {"key": "n", "value": {"kind": "number", "value": 7, "suffix": "L"}}
    assert tag["children"] is None


def test_value_union_from_dict() -> None:
    """The kind discriminator selects the value type when validating plain data."""
    tag = Tag.model_validate({"name": "t", "values": [{"kind": "string", "text": "x"}, {"kind": "null"}]})
    assert tag.values == (StringValue(text="x"), NullValue())
