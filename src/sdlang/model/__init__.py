# Copyright 2026 SDLang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Document model for SDLang (documents, tags, attributes, and values)."""

from sdlang.model.tree import Attribute, Document, Tag
from sdlang.model.values import (
    INT64_MAX,
    INT64_MIN,
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

__all__ = [
    # Values
    "INT64_MAX",
    "INT64_MIN",
    "NumberSuffix",
    "DecimalSuffix",
    "Date",
    "Time",
    "StringValue",
    "BinaryValue",
    "DateValue",
    "DateTimeValue",
    "DurationValue",
    "NumberValue",
    "DecimalValue",
    "BooleanValue",
    "NullValue",
    "Value",
    # Tree
    "Attribute",
    "Tag",
    "Document",
]
