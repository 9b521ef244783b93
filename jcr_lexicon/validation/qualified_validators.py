"""
Name and path validation including namespace prefix resolution.

Validation is two-phase per unit: syntax first, then the namespace prefix of
that same unit. Paths are checked segment by segment, left to right, and stop
at the first failure, so a segment with bad syntax is never resolved and
segments after a failure are never looked at.
"""

from dataclasses import dataclass
from typing import Optional

from jcr_lexicon.errors import LexiconError, PrefixNotRegistered, SyntaxViolation
from jcr_lexicon.lex_logging import get_logger
from jcr_lexicon.lib.compiler.grammar import NAME_MATCHER, PATH_ELEMENT_MATCHER
from jcr_lexicon.lib.namespaces import NamespaceResolver

logger = get_logger(__name__)


@dataclass(frozen=True)
class Diagnosis:
    """
    Outcome of a qualified check.

    Attributes:
        valid: The boolean verdict; identical to what ``is_valid_*`` returns.
        segment_index: For paths, index of the failing segment in ``path.split("/")``.
        segment: Text of the failing segment (or the whole name).
        error: SyntaxViolation or PrefixNotRegistered when invalid.
    """

    valid: bool
    segment_index: Optional[int] = None
    segment: Optional[str] = None
    error: Optional[LexiconError] = None

    def __bool__(self) -> bool:
        return self.valid


VALID = Diagnosis(True)


def _split_prefix(unit: str) -> Optional[str]:
    prefix, sep, _ = unit.partition(":")
    return prefix if sep else None


class QualifiedValidator:
    """
    Validates names and paths against the grammar and a namespace registry.

    ``registry`` may be a NamespaceRegistry, any object with ``get_uri``, a
    plain mapping, or a NamespaceResolver.
    """

    def __init__(self, registry):
        self.resolver = NamespaceResolver(registry)

    # --------------------------------------------------------------------------
    # Names

    def diagnose_name(self, name) -> Diagnosis:
        if not isinstance(name, str) or not name:
            return Diagnosis(False, segment=name, error=SyntaxViolation("Name", name))

        if not NAME_MATCHER.matches(name):
            logger.debug(f"[NAME] '{name}' fails Name syntax")
            return Diagnosis(False, segment=name, error=SyntaxViolation("Name", name))

        prefix = _split_prefix(name)
        if prefix is not None and self.resolver.resolve(prefix) is None:
            logger.debug(f"[NAME] '{name}' has unregistered prefix '{prefix}'")
            return Diagnosis(False, segment=name, error=PrefixNotRegistered(prefix))

        return VALID

    def is_valid_name(self, name) -> bool:
        return self.diagnose_name(name).valid

    def verify_name(self, name) -> None:
        """Raise SyntaxViolation or PrefixNotRegistered if ``name`` is invalid."""
        diagnosis = self.diagnose_name(name)
        if not diagnosis.valid:
            raise diagnosis.error

    # --------------------------------------------------------------------------
    # Paths

    def diagnose_path(self, path) -> Diagnosis:
        if not isinstance(path, str) or not path:
            return Diagnosis(False, segment=path, error=SyntaxViolation("Path", path))

        if path == "/":
            return VALID

        segments = path.split("/")
        start = 1 if path.startswith("/") else 0
        for index in range(start, len(segments)):
            segment = segments[index]

            if not PATH_ELEMENT_MATCHER.matches(segment):
                logger.debug(f"[PATH] '{path}': segment {index} '{segment}' fails PathElement syntax")
                return Diagnosis(
                    False, index, segment, SyntaxViolation("PathElement", segment, index)
                )

            prefix = _split_prefix(segment)
            if prefix is not None and self.resolver.resolve(prefix) is None:
                logger.debug(f"[PATH] '{path}': segment {index} has unregistered prefix '{prefix}'")
                return Diagnosis(
                    False, index, segment, PrefixNotRegistered(prefix, index)
                )

        return VALID

    def is_valid_path(self, path) -> bool:
        return self.diagnose_path(path).valid

    def verify_path(self, path) -> None:
        """Raise SyntaxViolation or PrefixNotRegistered for the first bad segment."""
        diagnosis = self.diagnose_path(path)
        if not diagnosis.valid:
            raise diagnosis.error


# ------------------------------------------------------------------------------
# One-off helpers

def check_name_format(name, registry) -> bool:
    """True if ``name`` follows the Name syntax and its prefix, if any, is registered."""
    return QualifiedValidator(registry).is_valid_name(name)


def check_path_format(path, registry) -> bool:
    """True if every segment of ``path`` is a valid PathElement with registered prefixes."""
    return QualifiedValidator(registry).is_valid_path(path)
