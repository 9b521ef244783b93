"""
The repository name, path and date grammar.

    [4]  NCName      ::= (Letter | '_') (NCNameChar)*
    [5]  NCNameChar  ::= Letter | Digit | '.' | '-' | '_' | CombiningChar | Extender
         Name        ::= (NCName ':')? SimpleChar ((SimpleChar | ' ')* SimpleChar)?
         PathElement ::= Name ('[' [1-9] [0-9]* ']')?
         Path        ::= ('./' | '../' | '/')? (PathElement '/')* PathElement '/'?
         DateTime    ::= YYYY-MM-DDThh:mm:ss.sss (Z | [+-]hh:mm)

SimpleChar is any character except the structural delimiters ``/ : [ ] *``,
quotes and ASCII whitespace.

All productions are compiled at import time; the resulting matchers are
module constants shared by every caller.
"""

from jcr_lexicon.lib.charclasses import (
    CharacterClass,
    COMBINING_CHAR,
    DIGIT,
    EXTENDER,
    LETTER,
)
from jcr_lexicon.lib.compiler.productions import (
    CharSet,
    Choice,
    Literal,
    NotCharSet,
    Optional,
    Repeat,
    Rule,
    Sequence,
    ZeroOrMore,
)

ASCII_WHITESPACE = " \t\n\x0b\x0c\r"
SIMPLE_NAME_EXCLUDED = "/:[]*'\"" + ASCII_WHITESPACE

ASCII_DIGIT = CharacterClass("AsciiDigit", ((0x30, 0x39),))


def _digits(first: str, last: str) -> CharSet:
    return CharSet(CharacterClass(f"{first}-{last}", ((ord(first), ord(last)),)))


def _two_digit(choices) -> Choice:
    """Two-digit field from (tens-char, units-first, units-last) triples."""
    return Choice(*(Sequence(Literal(tens), _digits(lo, hi)) for tens, lo, hi in choices))


# ------------------------------------------------------------------------------
# Names

NCNAME = Rule("NCName", Sequence(
    CharSet(LETTER, chars="_"),
    ZeroOrMore(CharSet(LETTER, DIGIT, COMBINING_CHAR, EXTENDER, chars=".-_")),
))

SIMPLE_NAME_CHAR = NotCharSet(SIMPLE_NAME_EXCLUDED)

SIMPLE_NAME = Rule("SimpleName", Sequence(
    SIMPLE_NAME_CHAR,
    Optional(Sequence(
        ZeroOrMore(Choice(SIMPLE_NAME_CHAR, Literal(" "))),
        SIMPLE_NAME_CHAR,
    )),
))

NAME = Rule("Name", Sequence(
    Optional(Sequence(NCNAME, Literal(":"))),
    SIMPLE_NAME,
))

SAME_NAME_SIBLING_INDEX = Rule("Index", Sequence(
    Literal("["),
    _digits("1", "9"),
    ZeroOrMore(CharSet(ASCII_DIGIT)),
    Literal("]"),
))

PATH_ELEMENT = Rule("PathElement", Sequence(NAME, Optional(SAME_NAME_SIBLING_INDEX)))

PATH = Rule("Path", Sequence(
    Optional(Choice(Literal("./"), Literal("../"), Literal("/"))),
    ZeroOrMore(Sequence(PATH_ELEMENT, Literal("/"))),
    PATH_ELEMENT,
    Optional(Literal("/")),
))

# ------------------------------------------------------------------------------
# Dates
#
# Day 01-31 is accepted for every month; 2024-02-30 is a valid DateTime.

YEAR = Repeat(CharSet(ASCII_DIGIT), 4, 4)
MONTH = _two_digit([("0", "1", "9"), ("1", "0", "2")])
DAY = _two_digit([("0", "1", "9"), ("1", "0", "9"), ("2", "0", "9"), ("3", "0", "1")])
HOUR = Choice(Sequence(_digits("0", "1"), CharSet(ASCII_DIGIT)), Sequence(Literal("2"), _digits("0", "3")))
MINUTE = Sequence(_digits("0", "5"), CharSet(ASCII_DIGIT))
MILLIS = Repeat(CharSet(ASCII_DIGIT), 3, 3)

TIME_ZONE = Choice(
    Literal("Z"),
    Sequence(CharSet(chars="+-"), HOUR, Literal(":"), MINUTE),
)

DATE_TIME = Rule("DateTime", Sequence(
    YEAR, Literal("-"), MONTH, Literal("-"), DAY,
    Literal("T"),
    HOUR, Literal(":"), MINUTE, Literal(":"), MINUTE, Literal("."), MILLIS,
    TIME_ZONE,
))

# ------------------------------------------------------------------------------
# Compiled matchers

NCNAME_MATCHER = NCNAME.compile()
NAME_MATCHER = NAME.compile()
PATH_ELEMENT_MATCHER = PATH_ELEMENT.compile()
PATH_MATCHER = PATH.compile()
DATE_TIME_MATCHER = DATE_TIME.compile()

MATCHERS = {
    m.name: m
    for m in (NCNAME_MATCHER, NAME_MATCHER, PATH_ELEMENT_MATCHER, PATH_MATCHER, DATE_TIME_MATCHER)
}
