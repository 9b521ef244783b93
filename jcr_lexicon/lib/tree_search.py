"""
Search helpers over a repository tree.

Traversal is depth-first pre-order: a node's own properties (in declaration
order) are visited before any of its children, and children are visited in
order. Searches stop at the first match. Errors raised by the tree
propagate unchanged.
"""

from typing import Callable, Iterator, Optional

from jcr_lexicon.errors import ValueFormatError
from jcr_lexicon.lex_logging import get_logger
from jcr_lexicon.lib.values import PropertyType

logger = get_logger(__name__)


def iter_properties(root) -> Iterator:
    """Yield every property below ``root`` in pre-order, properties before children."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield from node.get_properties()
        stack.extend(reversed(list(node.get_nodes())))


def _find(root, predicate: Callable) -> Optional[object]:
    for prop in iter_properties(root):
        if predicate(prop):
            return prop
    return None


def find_property_of_type(root, prop_type):
    """First property whose value type is ``prop_type``, or None."""
    return _find(root, lambda p: p.get_type() == prop_type)


def find_multi_valued_property(root, prop_type=None):
    """First multi-valued property (optionally of ``prop_type``), or None."""
    if prop_type is None:
        return _find(root, lambda p: p.is_multiple())
    return _find(root, lambda p: p.is_multiple() and p.get_type() == prop_type)


def any_null_valued_property(root) -> bool:
    """True if any single-valued property anywhere below ``root`` has no value."""
    return _find(root, lambda p: not p.is_multiple() and p.get_value() is None) is not None


def find_single_valued_property(node):
    """First single-valued property of ``node`` itself (children are not searched)."""
    for prop in node.get_properties():
        if not prop.is_multiple():
            return prop
    return None


def get_value(prop):
    """Value of ``prop``; the first value if multi-valued, None if it has none."""
    if prop.is_multiple():
        values = prop.get_values()
        return values[0] if values else None
    return prop.get_value()


def check_get_type(prop, prop_type) -> bool:
    """
    Whether the type of the property's value is ``prop_type``.

    When the property declares a required type other than UNDEFINED, the
    value type is compared against that instead.
    """
    value = get_value(prop)
    required = getattr(prop, "required_type", PropertyType.UNDEFINED)
    if required != PropertyType.UNDEFINED:
        return value.get_type() == required
    return value.get_type() == prop_type


def values_equal(a, b) -> bool:
    """
    Whether ``a == b`` agrees with "same type and same string form".

    This does not return equality itself: two values that are unequal by both
    measures yield True, and a disagreement between the measures yields False.
    A value that cannot be stringified yields False.
    """
    is_equal = a == b
    try:
        conditions = a.get_type() == b.get_type() and a.get_string() == b.get_string()
    except ValueFormatError:
        return False
    return is_equal == conditions


def count_bytes(value) -> int:
    """Number of bytes in the value's stream, or -1 if it cannot be read."""
    try:
        stream = value.get_stream()
    except Exception as e:
        logger.debug(f"[STREAM] cannot open stream: {e}")
        return -1
    if stream is None:
        return -1
    try:
        return len(stream.read())
    except Exception as e:
        logger.debug(f"[STREAM] cannot read stream: {e}")
        return -1
    finally:
        close = getattr(stream, "close", None)
        if close is not None:
            close()
