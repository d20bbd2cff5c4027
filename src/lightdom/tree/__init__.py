"""Document tree for lightdom.

Key Components:
    Element: Tree node with name lookups, sibling queries and serialization
    Document: Root container with XML declaration metadata
    TreeBuilder: Event sink that builds a tree from tokenizer events
"""

from .builder import TreeBuilder
from .document import DOCUMENT_ROOT_NAME, Document
from .element import ERROR_ELEMENT_NAME, Element, error_element

__all__ = [
    "DOCUMENT_ROOT_NAME",
    "ERROR_ELEMENT_NAME",
    "Document",
    "Element",
    "TreeBuilder",
    "error_element",
]
