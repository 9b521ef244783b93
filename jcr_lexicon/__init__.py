"""
jcr-lexicon
===========

Lexical validation of repository item names, paths and dates, with namespace
prefix resolution.

    from jcr_lexicon import QualifiedValidator, NamespaceRegistry

    validator = QualifiedValidator(NamespaceRegistry.builtin())
    validator.is_valid_name("jcr:primaryType")      # True
    validator.is_valid_path("/a/b[2]/nt:unknown")   # True
    validator.is_valid_path("/a/x:y")               # False, 'x' not registered

Layout
------

    jcr_lexicon/
    ├── lib/charclasses.py   - XML 1.0 Unicode character classes
    ├── lib/compiler/        - production combinators and the compiled grammar
    ├── lib/namespaces.py    - namespace registry, resolver and file loaders
    ├── lib/values.py        - typed property values
    ├── lib/tree.py          - in-memory node/property tree
    ├── lib/tree_search.py   - tree search helpers
    ├── validation/          - lexical and qualified validators
    ├── grammar/             - textX grammar for namespace declaration files
    └── cli/                 - ``jcrlex`` command line
"""

__version__ = "1.0.0"

from jcr_lexicon.errors import (
    LexiconError,
    GrammarCompileError,
    SyntaxViolation,
    PrefixNotRegistered,
    ValueFormatError,
    NamespaceFileError,
)

from jcr_lexicon.lib.namespaces import (
    BUILTIN_NAMESPACES,
    NamespaceRegistry,
    NamespaceResolver,
    load_registry,
)

from jcr_lexicon.validation import (
    is_valid_ncname,
    is_valid_name,
    is_valid_path_element,
    is_valid_path,
    is_valid_date_string,
    Diagnosis,
    QualifiedValidator,
    check_name_format,
    check_path_format,
)

__all__ = [
    # Version
    "__version__",
    # Errors
    "LexiconError",
    "GrammarCompileError",
    "SyntaxViolation",
    "PrefixNotRegistered",
    "ValueFormatError",
    "NamespaceFileError",
    # Namespaces
    "BUILTIN_NAMESPACES",
    "NamespaceRegistry",
    "NamespaceResolver",
    "load_registry",
    # Validation
    "is_valid_ncname",
    "is_valid_name",
    "is_valid_path_element",
    "is_valid_path",
    "is_valid_date_string",
    "Diagnosis",
    "QualifiedValidator",
    "check_name_format",
    "check_path_format",
]
