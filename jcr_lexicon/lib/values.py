"""
In-memory property values.

Each value carries a PropertyType tag and can be rendered as a string and as
a byte stream. Values are immutable and compare equal when they have the same
class and payload.
"""

import io
from dataclasses import dataclass
from enum import IntEnum

from jcr_lexicon.errors import ValueFormatError
from jcr_lexicon.validation.lexical_validators import (
    is_valid_date_string,
    is_valid_name,
    is_valid_path,
)


class PropertyType(IntEnum):
    UNDEFINED = 0
    STRING = 1
    BINARY = 2
    LONG = 3
    DOUBLE = 4
    DATE = 5
    BOOLEAN = 6
    NAME = 7
    PATH = 8
    REFERENCE = 9

    @classmethod
    def from_name(cls, name: str) -> "PropertyType":
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"Unknown property type: {name}") from None


class BaseValue:
    """Common accessors; subclasses set ``type`` and ``value``."""

    type = PropertyType.UNDEFINED

    def get_type(self) -> PropertyType:
        return self.type

    def get_string(self) -> str:
        return str(self.value)

    def get_stream(self):
        return io.BytesIO(self.get_string().encode("utf-8"))

    def get_boolean(self) -> bool:
        raise ValueFormatError(f"{type(self).__name__} cannot be converted to a boolean.")

    def get_long(self) -> int:
        try:
            return int(self.get_string())
        except ValueError as e:
            raise ValueFormatError(str(e)) from e

    def get_double(self) -> float:
        try:
            return float(self.get_string())
        except ValueError as e:
            raise ValueFormatError(str(e)) from e


@dataclass(frozen=True)
class StringValue(BaseValue):
    value: str
    type = PropertyType.STRING

    def get_boolean(self) -> bool:
        return BooleanValue.to_boolean(self.value)


@dataclass(frozen=True)
class BooleanValue(BaseValue):
    """
    A boolean. Built from a bool or from a string, where only a
    case-insensitive ``"true"`` is true.
    """

    value: bool
    type = PropertyType.BOOLEAN

    def __post_init__(self):
        if isinstance(self.value, str):
            object.__setattr__(self, "value", self.to_boolean(self.value))
        else:
            object.__setattr__(self, "value", bool(self.value))

    @staticmethod
    def to_boolean(text: str) -> bool:
        return text is not None and text.lower() == "true"

    def get_string(self) -> str:
        return "true" if self.value else "false"

    def get_boolean(self) -> bool:
        return self.value

    def get_long(self) -> int:
        raise ValueFormatError("BooleanValue cannot be converted to a long.")

    def get_double(self) -> float:
        raise ValueFormatError("BooleanValue cannot be converted to a double.")


@dataclass(frozen=True)
class LongValue(BaseValue):
    value: int
    type = PropertyType.LONG

    def get_long(self) -> int:
        return self.value


@dataclass(frozen=True)
class DoubleValue(BaseValue):
    value: float
    type = PropertyType.DOUBLE

    def get_double(self) -> float:
        return self.value


@dataclass(frozen=True)
class DateValue(BaseValue):
    """Date kept in its ISO 8601 string form; must match the DateTime production."""

    value: str
    type = PropertyType.DATE

    def __post_init__(self):
        if not is_valid_date_string(self.value):
            raise ValueFormatError(f"Not a valid date string: {self.value!r}")


@dataclass(frozen=True)
class NameValue(BaseValue):
    value: str
    type = PropertyType.NAME

    def __post_init__(self):
        if not is_valid_name(self.value):
            raise ValueFormatError(f"Not a valid name: {self.value!r}")


@dataclass(frozen=True)
class PathValue(BaseValue):
    value: str
    type = PropertyType.PATH

    def __post_init__(self):
        if not is_valid_path(self.value):
            raise ValueFormatError(f"Not a valid path: {self.value!r}")


@dataclass(frozen=True)
class BinaryValue(BaseValue):
    value: bytes
    type = PropertyType.BINARY

    def get_stream(self):
        return io.BytesIO(self.value)

    def get_string(self) -> str:
        try:
            return self.value.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ValueFormatError(f"Binary value is not UTF-8 text: {e}") from e
