"""
Unit tests for the in-memory value model.
"""

import pytest

from jcr_lexicon.errors import ValueFormatError
from jcr_lexicon.lib.values import (
    BinaryValue,
    BooleanValue,
    DateValue,
    DoubleValue,
    LongValue,
    NameValue,
    PathValue,
    PropertyType,
    StringValue,
)


class TestPropertyType:

    def test_codes(self):
        assert PropertyType.UNDEFINED == 0
        assert PropertyType.STRING == 1
        assert PropertyType.REFERENCE == 9

    def test_from_name(self):
        assert PropertyType.from_name("long") is PropertyType.LONG
        assert PropertyType.from_name("Date") is PropertyType.DATE

    def test_from_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown property type"):
            PropertyType.from_name("weak")


class TestBoolean:

    @pytest.mark.parametrize("text,expected", [
        ("true", True),
        ("TRUE", True),
        ("True", True),
        ("false", False),
        ("yes", False),
        ("1", False),
        ("", False),
    ])
    def test_from_string(self, text, expected):
        assert BooleanValue(text).get_boolean() is expected

    def test_from_bool(self):
        assert BooleanValue(True).get_string() == "true"
        assert BooleanValue(False).get_string() == "false"

    def test_string_value_as_boolean(self):
        assert StringValue("TrUe").get_boolean() is True
        assert StringValue("on").get_boolean() is False

    def test_numeric_conversion_fails(self):
        with pytest.raises(ValueFormatError):
            BooleanValue(True).get_long()
        with pytest.raises(ValueFormatError):
            BooleanValue(True).get_double()

    def test_equality_after_normalisation(self):
        assert BooleanValue("TRUE") == BooleanValue(True)


class TestNumbers:

    def test_long(self):
        value = LongValue(42)
        assert value.get_type() is PropertyType.LONG
        assert value.get_string() == "42"
        assert value.get_long() == 42
        assert value.get_double() == 42.0

    def test_double(self):
        value = DoubleValue(1.5)
        assert value.get_double() == 1.5
        with pytest.raises(ValueFormatError):
            value.get_long()

    def test_string_to_number(self):
        assert StringValue("7").get_long() == 7
        with pytest.raises(ValueFormatError):
            StringValue("seven").get_long()
        with pytest.raises(ValueFormatError):
            StringValue("seven").get_double()

    def test_boolean_from_long_fails(self):
        with pytest.raises(ValueFormatError):
            LongValue(1).get_boolean()


class TestValidatedValues:

    def test_date(self):
        value = DateValue("2024-03-15T10:30:00.000Z")
        assert value.get_type() is PropertyType.DATE
        assert value.get_string() == "2024-03-15T10:30:00.000Z"

    def test_bad_date(self):
        with pytest.raises(ValueFormatError):
            DateValue("2024-03-15")

    def test_name(self):
        assert NameValue("jcr:content").get_type() is PropertyType.NAME
        with pytest.raises(ValueFormatError):
            NameValue("a/b")

    def test_path(self):
        assert PathValue("/a/b[2]").get_type() is PropertyType.PATH
        with pytest.raises(ValueFormatError):
            PathValue("/a//b")


class TestStreams:

    def test_string_stream_is_utf8(self):
        assert StringValue("\u00e9").get_stream().read() == b"\xc3\xa9"

    def test_binary_stream_is_raw(self):
        value = BinaryValue(b"\x00\xff")
        assert value.get_type() is PropertyType.BINARY
        assert value.get_stream().read() == b"\x00\xff"

    def test_binary_text(self):
        assert BinaryValue(b"abc").get_string() == "abc"
        with pytest.raises(ValueFormatError):
            BinaryValue(b"\xff").get_string()


class TestEquality:

    def test_same_class_and_payload(self):
        assert StringValue("a") == StringValue("a")
        assert StringValue("a") != StringValue("b")

    def test_different_classes_are_unequal(self):
        assert StringValue("3") != LongValue(3)
        assert NameValue("a") != StringValue("a")

    def test_values_are_immutable(self):
        value = StringValue("a")
        with pytest.raises(AttributeError):
            value.value = "b"
