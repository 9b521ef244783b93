"""
Grammar compiler: production combinators and the compiled repository grammar.
"""

from jcr_lexicon.lib.compiler.productions import (
    CharSet,
    Choice,
    CompiledMatcher,
    Literal,
    NotCharSet,
    OneOrMore,
    Optional,
    Production,
    Repeat,
    Rule,
    Sequence,
    ZeroOrMore,
)

from jcr_lexicon.lib.compiler.grammar import (
    DATE_TIME_MATCHER,
    MATCHERS,
    NAME_MATCHER,
    NCNAME_MATCHER,
    PATH_ELEMENT_MATCHER,
    PATH_MATCHER,
)

__all__ = [
    # Combinators
    "CharSet",
    "Choice",
    "CompiledMatcher",
    "Literal",
    "NotCharSet",
    "OneOrMore",
    "Optional",
    "Production",
    "Repeat",
    "Rule",
    "Sequence",
    "ZeroOrMore",
    # Compiled grammar
    "DATE_TIME_MATCHER",
    "MATCHERS",
    "NAME_MATCHER",
    "NCNAME_MATCHER",
    "PATH_ELEMENT_MATCHER",
    "PATH_MATCHER",
]
