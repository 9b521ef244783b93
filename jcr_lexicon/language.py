"""
Metamodel and model builders for namespace declaration files.

A namespace file is a sequence of CND namespace headers
(``<prefix = 'uri'>``). Per-declaration checks are object processors in the
processors/ package; this module adds the file-wide checks.
"""

from os.path import join, dirname, abspath
from textx import (
    metamodel_from_file,
    get_children_of_type,
    get_location,
    TextXSemanticError,
)

from jcr_lexicon.lib.namespaces import BUILTIN_NAMESPACES
from jcr_lexicon.processors import get_obj_processors


# ------------------------------------------------------------------------------
# Constants
THIS_DIR = dirname(abspath(__file__))
GRAMMAR_DIR = join(THIS_DIR, "grammar")


# ------------------------------------------------------------------------------
# Public model builders

def build_model(model_path: str):
    """Parse & validate a namespace file from a file path."""
    return NamespacesMetaModel.model_from_file(model_path)


def build_model_str(model_str: str):
    """Parse & validate namespace declarations from a string."""
    return NamespacesMetaModel.model_from_str(model_str)


# ------------------------------------------------------------------------------
# Model element getters

def get_model_declarations(model):
    return get_children_of_type("NamespaceDecl", model)


def get_model_mapping(model):
    return {d.prefix: d.uri for d in get_model_declarations(model)}


# ------------------------------------------------------------------------------
# Model-wide validation (runs after all objects are constructed)

def verify_unique_declarations(model):
    """A prefix may be declared once, and a URI may be bound to one prefix only."""
    seen_prefixes = {}
    seen_uris = {}
    for decl in get_model_declarations(model):
        if decl.prefix in seen_prefixes:
            raise TextXSemanticError(
                f"Namespace prefix '{decl.prefix}' is already declared.",
                **get_location(decl),
            )
        if decl.uri in seen_uris:
            raise TextXSemanticError(
                f"URI '{decl.uri}' is already bound to prefix '{seen_uris[decl.uri]}'.",
                **get_location(decl),
            )
        seen_prefixes[decl.prefix] = decl
        seen_uris[decl.uri] = decl.prefix


def verify_reserved_prefixes(model):
    """
    Prefixes starting with "xml" (any case) are reserved. Only the builtin
    ``xml`` binding may appear, and builtin prefixes keep their builtin URIs.
    """
    for decl in get_model_declarations(model):
        builtin_uri = BUILTIN_NAMESPACES.get(decl.prefix)
        if builtin_uri is not None:
            if decl.uri != builtin_uri:
                raise TextXSemanticError(
                    f"Builtin prefix '{decl.prefix}' cannot be remapped to '{decl.uri}'.",
                    **get_location(decl),
                )
            continue
        if decl.prefix.lower().startswith("xml"):
            raise TextXSemanticError(
                f"Namespace prefix '{decl.prefix}' is reserved.",
                **get_location(decl),
            )


def model_processor(model, metamodel=None):
    """
    Main model processor - runs after parsing to perform cross-declaration validation.
    Order matters: uniqueness -> reserved prefixes
    """
    verify_unique_declarations(model)
    verify_reserved_prefixes(model)


# ------------------------------------------------------------------------------
# Metamodel creation

def get_metamodel(debug: bool = False):
    """
    Load the textX metamodel from grammar/namespaces.tx.
    Registers object processors and the model processor.
    """
    mm = metamodel_from_file(
        join(GRAMMAR_DIR, "namespaces.tx"),
        auto_init_attributes=True,
        debug=debug,
    )

    # Object processors run during model construction
    mm.register_obj_processors(get_obj_processors())

    # Model processors run after the whole model is built
    mm.register_model_processor(model_processor)

    return mm


# Create the global metamodel instance
NamespacesMetaModel = get_metamodel(debug=False)
