"""
Exception hierarchy for jcr-lexicon.

Validation errors (SyntaxViolation, PrefixNotRegistered) collapse to a plain
``False`` at the ``is_valid_*`` boundary; they are only raised by the
``verify_*`` functions or carried inside a Diagnosis.
"""

from typing import Optional


class LexiconError(Exception):
    """Base class for every error raised by this package."""


class GrammarCompileError(LexiconError):
    """A character class or production could not be built. Fatal at import."""


class SyntaxViolation(LexiconError):
    """A candidate string does not match the relevant production."""

    def __init__(self, production: str, candidate, segment_index: Optional[int] = None):
        self.production = production
        self.candidate = candidate
        self.segment_index = segment_index
        where = f" (segment {segment_index})" if segment_index is not None else ""
        super().__init__(f"'{candidate}' does not match {production}{where}.")


class PrefixNotRegistered(LexiconError):
    """A well-formed namespace prefix has no entry in the namespace registry."""

    def __init__(self, prefix: str, segment_index: Optional[int] = None):
        self.prefix = prefix
        self.segment_index = segment_index
        super().__init__(f"Namespace prefix '{prefix}' is not registered.")


class ValueFormatError(LexiconError):
    """A value cannot be converted to the requested representation."""


class NamespaceFileError(LexiconError):
    """A namespace declaration file cannot be read."""
