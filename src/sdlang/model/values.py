# Copyright 2026 SDLang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Scalar value types for the SDLang document model."""

from __future__ import annotations

import datetime
from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class NumberSuffix(Enum):
    """Literal suffix attached to an integer value."""

    NONE = ""
    LONG = "L"
    BIG_DECIMAL = "BD"


class DecimalSuffix(Enum):
    """Literal suffix attached to a floating-point value."""

    NONE = ""
    FLOAT = "f"


class Date(BaseModel):
    """A calendar date without time zone."""

    model_config = ConfigDict(frozen=True)

    year: int
    month: int
    day: int

    @model_validator(mode="after")
    def _check_calendar(self) -> Date:
        self.to_date()
        return self

    def to_date(self) -> datetime.date:
        """Return the equivalent :class:`datetime.date`."""
        return datetime.date(self.year, self.month, self.day)


class Time(BaseModel):
    """A wall-clock time with optional millisecond precision."""

    model_config = ConfigDict(frozen=True)

    hour: int = _Field(ge=0, le=23)
    minute: int = _Field(ge=0, le=59)
    second: int = _Field(ge=0, le=59)
    millisecond: int | None = _Field(default=None, ge=0, le=999)

    def to_time(self) -> datetime.time:
        """Return the equivalent :class:`datetime.time`."""
        return datetime.time(self.hour, self.minute, self.second, (self.millisecond or 0) * 1000)


class StringValue(BaseModel):
    """Text from a double-quoted or backtick-quoted literal.

    Backslash sequences of double-quoted literals are kept verbatim.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["string"] = "string"
    text: str


class BinaryValue(BaseModel):
    """Decoded payload of a bracketed base64 literal."""

    model_config = ConfigDict(frozen=True, ser_json_bytes="base64")

    kind: Literal["binary"] = "binary"
    data: bytes


class DateValue(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["date"] = "date"
    date: Date


class DateTimeValue(BaseModel):
    """A date and a time of day, optionally marked as UTC."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["datetime"] = "datetime"
    date: Date
    time: Time
    utc: bool = False

    def to_datetime(self) -> datetime.datetime:
        """Return a :class:`datetime.datetime`; aware (UTC) only when ``utc`` is set."""
        tzinfo = datetime.timezone.utc if self.utc else None
        return datetime.datetime.combine(self.date.to_date(), self.time.to_time(), tzinfo=tzinfo)


class DurationValue(BaseModel):
    """A span of time: an optional day count plus hours, minutes and seconds."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["duration"] = "duration"
    days: int | None = _Field(default=None, ge=0)
    time: Time

    def to_timedelta(self) -> datetime.timedelta:
        """Return the equivalent :class:`datetime.timedelta`."""
        return datetime.timedelta(
            days=self.days or 0,
            hours=self.time.hour,
            minutes=self.time.minute,
            seconds=self.time.second,
            milliseconds=self.time.millisecond or 0,
        )


class NumberValue(BaseModel):
    """An integer literal and its suffix.

    Plain and ``L`` numbers are limited to the signed 64-bit range;
    ``BD`` numbers are unbounded.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["number"] = "number"
    value: int
    suffix: NumberSuffix = NumberSuffix.NONE

    @model_validator(mode="after")
    def _check_range(self) -> NumberValue:
        if self.suffix != NumberSuffix.BIG_DECIMAL and not INT64_MIN <= self.value <= INT64_MAX:
            raise ValueError(f"{self.value} does not fit in a signed 64-bit integer")
        return self


class DecimalValue(BaseModel):
    """A floating-point literal and its suffix."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["decimal"] = "decimal"
    value: float
    suffix: DecimalSuffix = DecimalSuffix.NONE


class BooleanValue(BaseModel):
    """A boolean; ``on`` and ``off`` normalize to ``true`` and ``false``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["boolean"] = "boolean"
    value: bool


class NullValue(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["null"] = "null"


# Any SDLang scalar. The `kind` discriminator keeps deserialization unambiguous.
Value = Annotated[
    StringValue
    | BinaryValue
    | DateValue
    | DateTimeValue
    | DurationValue
    | NumberValue
    | DecimalValue
    | BooleanValue
    | NullValue,
    _Field(discriminator="kind"),
]
