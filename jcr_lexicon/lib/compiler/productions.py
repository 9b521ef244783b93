"""
Lexical production combinators.

A grammar is assembled from a handful of primitive productions (character
sets, literals, sequences, choices, repetitions and named references) and
compiled once into a CompiledMatcher backed by a ``re`` pattern.

    digit = CharSet(ASCII_DIGIT)
    year = Repeat(digit, 4, 4)
    matcher = Rule("Year", year).compile()
    matcher.matches("2024")   # True
"""

import re
from dataclasses import dataclass
from typing import Optional as Opt, Tuple

from jcr_lexicon.errors import GrammarCompileError
from jcr_lexicon.lib.charclasses import CharacterClass
from jcr_lexicon.lex_logging import get_logger

logger = get_logger(__name__)

# Characters that must be escaped inside a regex character set.
_SET_SPECIALS = {"\\", "]", "[", "^", "-"}


def _set_char(code: int) -> str:
    if code < 0x80:
        char = chr(code)
        if char in _SET_SPECIALS:
            return "\\" + char
        if char.isprintable():
            return char
        return f"\\x{code:02x}"
    if code <= 0xFFFF:
        return f"\\u{code:04x}"
    return f"\\U{code:08x}"


def _set_body(classes, chars: str) -> str:
    parts = []
    for cls in classes:
        for first, last in cls.ranges:
            if first == last:
                parts.append(_set_char(first))
            else:
                parts.append(f"{_set_char(first)}-{_set_char(last)}")
    parts.extend(_set_char(ord(c)) for c in chars)
    return "".join(parts)


class Production:
    """Base class of every production. Subclasses render a regex fragment."""

    def pattern(self) -> str:
        raise NotImplementedError

    def compile(self, name: str = None) -> "CompiledMatcher":
        return Rule(name or type(self).__name__, self).compile()

    # Operator sugar for composing productions

    def __add__(self, other: "Production") -> "Sequence":
        return Sequence(self, other)

    def __or__(self, other: "Production") -> "Choice":
        return Choice(self, other)


class CharSet(Production):
    """Exactly one character drawn from the union of classes and literal chars."""

    def __init__(self, *classes: CharacterClass, chars: str = ""):
        if not classes and not chars:
            raise GrammarCompileError("CharSet needs at least one class or character.")
        self.classes: Tuple[CharacterClass, ...] = classes
        self.chars = chars

    def pattern(self) -> str:
        return f"[{_set_body(self.classes, self.chars)}]"


class NotCharSet(Production):
    """Exactly one character that is NOT one of ``chars``."""

    def __init__(self, chars: str):
        if not chars:
            raise GrammarCompileError("NotCharSet needs at least one excluded character.")
        self.chars = chars

    def pattern(self) -> str:
        return f"[^{_set_body((), self.chars)}]"


class Literal(Production):
    def __init__(self, text: str):
        if not text:
            raise GrammarCompileError("Literal text must not be empty.")
        self.text = text

    def pattern(self) -> str:
        return re.escape(self.text)


class Sequence(Production):
    def __init__(self, *items: Production):
        self.items = _flatten(Sequence, items)

    def pattern(self) -> str:
        return "".join(_grouped(item) for item in self.items)


class Choice(Production):
    """Ordered alternation; the regex engine backtracks across alternatives."""

    def __init__(self, *alternatives: Production):
        self.alternatives = _flatten(Choice, alternatives)

    def pattern(self) -> str:
        return "(?:" + "|".join(a.pattern() for a in self.alternatives) + ")"


class Repeat(Production):
    """``item`` repeated between ``minimum`` and ``maximum`` times (None = unbounded)."""

    def __init__(self, item: Production, minimum: int = 0, maximum: Opt[int] = None):
        if minimum < 0 or (maximum is not None and maximum < minimum):
            raise GrammarCompileError(
                f"Invalid repetition bounds {{{minimum},{maximum}}}."
            )
        self.item = item
        self.minimum = minimum
        self.maximum = maximum

    def pattern(self) -> str:
        body = _grouped(self.item, atomic=True)
        lo, hi = self.minimum, self.maximum
        if (lo, hi) == (0, None):
            return body + "*"
        if (lo, hi) == (1, None):
            return body + "+"
        if (lo, hi) == (0, 1):
            return body + "?"
        if hi is None:
            return body + f"{{{lo},}}"
        if lo == hi:
            return body + f"{{{lo}}}"
        return body + f"{{{lo},{hi}}}"


def ZeroOrMore(item: Production) -> Repeat:
    return Repeat(item, 0, None)


def OneOrMore(item: Production) -> Repeat:
    return Repeat(item, 1, None)


def Optional(item: Production) -> Repeat:
    return Repeat(item, 0, 1)


class Rule(Production):
    """A named production. The name is used in diagnostics and logs."""

    def __init__(self, name: str, body: Production):
        self.name = name
        self.body = body

    def pattern(self) -> str:
        return self.body.pattern()

    def compile(self, name: str = None) -> "CompiledMatcher":
        source = self.pattern()
        try:
            regex = re.compile(source)
        except re.error as e:
            raise GrammarCompileError(
                f"Production '{self.name}' does not compile: {e}"
            ) from e
        logger.debug(f"[GRAMMAR] compiled {self.name} ({len(source)} chars)")
        return CompiledMatcher(name or self.name, regex)


@dataclass(frozen=True)
class CompiledMatcher:
    """Full-string matcher for one production. Stateless and thread-safe."""

    name: str
    regex: "re.Pattern"

    def matches(self, candidate) -> bool:
        if not isinstance(candidate, str):
            return False
        return self.regex.fullmatch(candidate) is not None

    __call__ = matches

    @property
    def pattern(self) -> str:
        return self.regex.pattern


# ------------------------------------------------------------------------------
# Helpers

def _flatten(kind, items):
    flat = []
    for item in items:
        if not isinstance(item, Production):
            raise GrammarCompileError(f"Not a production: {item!r}")
        if type(item) is kind:
            flat.extend(item.items if kind is Sequence else item.alternatives)
        else:
            flat.append(item)
    if not flat:
        raise GrammarCompileError(f"{kind.__name__} needs at least one production.")
    return tuple(flat)


def _grouped(item: Production, atomic: bool = False) -> str:
    """Wrap a fragment so it binds as one unit inside a sequence or repetition."""
    source = item.pattern()
    if isinstance(item, (CharSet, NotCharSet, Choice)):
        return source
    if isinstance(item, Rule):
        return _grouped(item.body, atomic)
    if isinstance(item, Literal) and len(item.text) == 1:
        return source
    if isinstance(item, (Sequence, Repeat)) and not atomic:
        return source
    return f"(?:{source})"
