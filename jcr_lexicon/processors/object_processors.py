"""
TextX object processors for namespace declaration files.

Object processors run during model construction and validate each
declaration on its own; cross-declaration checks live in language.py.
"""

from textx import get_location, TextXSemanticError

from jcr_lexicon.validation.lexical_validators import is_valid_ncname


def namespace_decl_obj_processor(decl):
    """
    Validate one ``<prefix = 'uri'>`` declaration.

    Rules:
    1) The prefix must be an XML NCName
    2) The URI must not be empty
    """
    if not is_valid_ncname(decl.prefix):
        raise TextXSemanticError(
            f"Namespace prefix '{decl.prefix}' is not a valid NCName.",
            **get_location(decl),
        )

    if not decl.uri or not decl.uri.strip():
        raise TextXSemanticError(
            f"Namespace prefix '{decl.prefix}' is mapped to an empty URI.",
            **get_location(decl),
        )


def get_obj_processors():
    """Return object processor configuration for the metamodel."""
    return {
        "NamespaceDecl": namespace_decl_obj_processor,
    }
