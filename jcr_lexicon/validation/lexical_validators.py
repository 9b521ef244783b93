"""
Pure syntax checks against the compiled grammar.

No namespace knowledge, no state: each function only applies a shared,
immutable matcher. Anything that is not a non-empty string is invalid.
"""

from jcr_lexicon.lib.compiler.grammar import (
    DATE_TIME_MATCHER,
    NAME_MATCHER,
    NCNAME_MATCHER,
    PATH_ELEMENT_MATCHER,
    PATH_MATCHER,
)


def is_valid_ncname(candidate) -> bool:
    """XML NCName: a name without a namespace separator."""
    return NCNAME_MATCHER.matches(candidate)


def is_valid_name(candidate) -> bool:
    """Item name with an optional ``prefix:`` part."""
    return NAME_MATCHER.matches(candidate)


def is_valid_path_element(candidate) -> bool:
    """Name with an optional same-name-sibling index, e.g. ``jcr:content[2]``."""
    return PATH_ELEMENT_MATCHER.matches(candidate)


def is_valid_path(candidate) -> bool:
    """
    Whole relative or absolute path.

    The root path "/" is always valid; the empty string never is.
    """
    if candidate == "/":
        return True
    return PATH_MATCHER.matches(candidate)


def is_valid_date_string(candidate) -> bool:
    """
    ``YYYY-MM-DDThh:mm:ss.sss`` followed by ``Z`` or ``+hh:mm``/``-hh:mm``.

    Day-of-month is range checked (01-31) but not against the month length.
    """
    return DATE_TIME_MATCHER.matches(candidate)
