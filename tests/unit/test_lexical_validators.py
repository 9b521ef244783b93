"""
Unit tests for the pure grammar checks.
"""

import pytest

from jcr_lexicon.lib.charclasses import LETTER
from jcr_lexicon.validation.lexical_validators import (
    is_valid_date_string,
    is_valid_name,
    is_valid_ncname,
    is_valid_path,
    is_valid_path_element,
)

ALL_VALIDATORS = [
    is_valid_ncname,
    is_valid_name,
    is_valid_path_element,
    is_valid_path,
    is_valid_date_string,
]


class TestNCName:

    @pytest.mark.parametrize("candidate", [
        "a", "_", "jcr", "nt_base", "my-prefix", "v1.0", "\u00e9t\u00e9",
        "\u4e00\u4e8c", "\u00e0", "a\u00b7b", "x\u0669",
    ])
    def test_valid(self, candidate):
        assert is_valid_ncname(candidate)

    @pytest.mark.parametrize("candidate", [
        "", "1abc", "-a", ".a", "a:b", "a b", "a/b", "\u0300a", "a|b", "|a",
    ])
    def test_invalid(self, candidate):
        assert not is_valid_ncname(candidate)

    def test_matches_start_with_letter_or_underscore(self):
        samples = [
            "abc", "_x", "1x", "a:b", "a/b", " a", "x y", "\u3007z", "-", "a\t",
            "\u00b7a", "a\u00b7", "Z9.-_",
        ]
        for s in filter(is_valid_ncname, samples):
            assert s
            assert s[0] in LETTER or s[0] == "_"
            assert "/" not in s and ":" not in s
            assert not any(c.isspace() for c in s)


class TestName:

    @pytest.mark.parametrize("candidate", [
        "a",
        "jcr:primaryType",
        "my name",
        "a b  c",
        "bad name!",
        ".",
        "..",
        "x:.",
        "report (final).pdf",
    ])
    def test_valid(self, candidate):
        assert is_valid_name(candidate)

    @pytest.mark.parametrize("candidate", [
        "",
        " a",
        "a ",
        "a\tb",
        "a/b",
        "a[1]",
        "a*",
        "it's",
        'say "hi"',
        ":a",
        "a:",
        "a:b:c",
        "1x:a",
        "jcr: a",
    ])
    def test_invalid(self, candidate):
        assert not is_valid_name(candidate)


class TestPathElement:

    @pytest.mark.parametrize("candidate", [
        "a", "a[1]", "a[10]", "jcr:content[2]", "my node[3]",
    ])
    def test_valid(self, candidate):
        assert is_valid_path_element(candidate)

    @pytest.mark.parametrize("candidate", [
        "", "a[0]", "a[01]", "a[]", "a[-1]", "a[1", "a[1][2]", "[1]", "a/b",
    ])
    def test_invalid(self, candidate):
        assert not is_valid_path_element(candidate)


class TestPath:

    @pytest.mark.parametrize("candidate", [
        "/",
        "a",
        "/a",
        "/a/b[2]/c",
        "./a",
        "../a/b",
        "a/b/",
        "/jcr:root/nt:file[1]/jcr:content",
        "/with space/x",
    ])
    def test_valid(self, candidate):
        assert is_valid_path(candidate)

    @pytest.mark.parametrize("candidate", [
        "",
        "//a",
        "/a//b",
        "a/b//",
        "/a[0]",
        "/a/ b",
        "/a/*",
    ])
    def test_invalid(self, candidate):
        assert not is_valid_path(candidate)


class TestDateString:

    @pytest.mark.parametrize("candidate", [
        "2024-03-15T10:30:00.000Z",
        "1999-12-31T23:59:59.999Z",
        "2024-03-15T10:30:00.000+01:00",
        "2024-03-15T10:30:00.000-05:30",
        "0000-01-01T00:00:00.000Z",
    ])
    def test_valid(self, candidate):
        assert is_valid_date_string(candidate)

    @pytest.mark.parametrize("candidate", [
        "",
        "2024-13-01T00:00:00.000Z",
        "2024-00-10T00:00:00.000Z",
        "2024-03-00T00:00:00.000Z",
        "2024-03-32T00:00:00.000Z",
        "2024-03-15T24:00:00.000Z",
        "2024-03-15T10:60:00.000Z",
        "2024-03-15T10:30:60.000Z",
        "2024-03-15T10:30:00Z",
        "2024-03-15T10:30:00.000",
        "2024-03-15T10:30:00,000Z",
        "2024-03-15 10:30:00.000Z",
        "2024-03-15T10:30:00.000+24:00",
        "2024-03-15T10:30:00.000+01:60",
        "24-03-15T10:30:00.000Z",
    ])
    def test_invalid(self, candidate):
        assert not is_valid_date_string(candidate)

    @pytest.mark.parametrize("candidate", [
        "2024-02-30T00:00:00.000Z",
        "2023-02-29T00:00:00.000Z",
        "2024-04-31T00:00:00.000Z",
    ])
    def test_day_is_not_checked_against_month_length(self, candidate):
        # Only 01-31 is enforced; calendar validity is not.
        assert is_valid_date_string(candidate)


class TestTotality:

    @pytest.mark.parametrize("validator", ALL_VALIDATORS)
    @pytest.mark.parametrize("candidate", [None, 42, b"abc", ["a"]])
    def test_non_strings_are_invalid(self, validator, candidate):
        assert validator(candidate) is False

    @pytest.mark.parametrize("validator", ALL_VALIDATORS)
    def test_empty_string_is_invalid(self, validator):
        assert validator("") is False

    def test_root_path(self):
        assert is_valid_path("/") is True

    @pytest.mark.parametrize("validator,candidate", [
        (is_valid_ncname, "jcr"),
        (is_valid_name, "jcr:content"),
        (is_valid_path_element, "a[2]"),
        (is_valid_path, "/a/b"),
        (is_valid_date_string, "2024-03-15T10:30:00.000Z"),
        (is_valid_name, "a/b"),
    ])
    def test_idempotent(self, validator, candidate):
        first = validator(candidate)
        assert all(validator(candidate) == first for _ in range(5))
