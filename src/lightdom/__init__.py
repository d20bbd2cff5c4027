"""lightdom.

A small XML document object model: parse bytes into an element tree, query
it with chainable lookups that never raise, and serialize it back to XML.

Level 1: Simple functions - parse(), parse_string()
Level 2: Document and Element objects for building and reparsing trees
"""

__version__ = "0.1.0"
__author__ = "lightdom Team"

from .api import parse, parse_string
from .shared import (
    DeclarationConfig,
    LightDOMError,
    ParserConfig,
    TokenizerConfig,
    XMLParseError,
)
from .tree import (
    DOCUMENT_ROOT_NAME,
    ERROR_ELEMENT_NAME,
    Document,
    Element,
    TreeBuilder,
)

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: Simple parsing functions
    "parse",
    "parse_string",

    # Level 2: Tree objects
    "Document",
    "Element",
    "TreeBuilder",
    "DOCUMENT_ROOT_NAME",
    "ERROR_ELEMENT_NAME",

    # Configuration and errors
    "DeclarationConfig",
    "ParserConfig",
    "TokenizerConfig",
    "LightDOMError",
    "XMLParseError",
]
