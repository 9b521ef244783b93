"""
Validation module for jcr-lexicon.

- lexical_validators: pure grammar checks (no namespace knowledge)
- qualified_validators: grammar checks plus namespace prefix resolution
"""

from jcr_lexicon.validation.lexical_validators import (
    is_valid_ncname,
    is_valid_name,
    is_valid_path_element,
    is_valid_path,
    is_valid_date_string,
)

from jcr_lexicon.validation.qualified_validators import (
    Diagnosis,
    QualifiedValidator,
    check_name_format,
    check_path_format,
)

__all__ = [
    # Lexical validators
    "is_valid_ncname",
    "is_valid_name",
    "is_valid_path_element",
    "is_valid_path",
    "is_valid_date_string",
    # Qualified validators
    "Diagnosis",
    "QualifiedValidator",
    "check_name_format",
    "check_path_format",
]
