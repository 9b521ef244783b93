"""
Processors module for jcr-lexicon.

TextX object processors that run during construction of namespace
declaration models.
"""

from jcr_lexicon.processors.object_processors import (
    get_obj_processors,
    namespace_decl_obj_processor,
)

__all__ = [
    "get_obj_processors",
    "namespace_decl_obj_processor",
]
