"""Document container: XML declaration metadata plus a single root element."""

from typing import Optional, Union

from lightdom.shared import (
    DeclarationConfig,
    ParseStatistics,
    TokenizerConfig,
    XMLParseError,
)

from .builder import TreeBuilder
from .element import Element, error_element

DOCUMENT_ROOT_NAME = "LightDOMDocumentRoot"
MISSING_ROOT_MESSAGE = "XML Document must have root element."


class Document(Element):
    """Top-level element holding the declaration and the root element.

    A document is reusable: every call to :meth:`read_xml_data` discards the
    previous tree. It is not re-entrant.

    Args:
        version: Declared XML version
        encoding: Declared encoding
        standalone: ``"yes"`` or ``"no"``
        root: Optional element adopted as the root
        process_namespaces: Resolve namespace URIs when parsing
        correlation_id: Optional correlation ID for request tracking
    """

    def __init__(
        self,
        version: float = 1.0,
        encoding: str = "utf-8",
        standalone: str = "no",
        root: Optional[Element] = None,
        process_namespaces: bool = False,
        correlation_id: Optional[str] = None,
    ) -> None:
        super().__init__(DOCUMENT_ROOT_NAME)
        declaration = DeclarationConfig(
            version=version, encoding=encoding, standalone=standalone
        )
        self.version = float(declaration.version)
        self.encoding = declaration.encoding
        self.standalone = declaration.standalone
        self.process_namespaces = process_namespaces
        self.correlation_id = correlation_id
        self.last_parse_statistics: Optional[ParseStatistics] = None

        if root is not None:
            self.add_child(root)

    @classmethod
    def from_declaration(
        cls,
        declaration: DeclarationConfig,
        root: Optional[Element] = None,
        process_namespaces: bool = False,
        correlation_id: Optional[str] = None,
    ) -> "Document":
        """Create a document from a :class:`DeclarationConfig`."""
        return cls(
            version=declaration.version,
            encoding=declaration.encoding,
            standalone=declaration.standalone,
            root=root,
            process_namespaces=process_namespaces,
            correlation_id=correlation_id,
        )

    @property
    def root(self) -> Element:
        """The single root element, or an error element if there is not exactly one."""
        if len(self.children) == 1:
            return self.children[0]
        return error_element(MISSING_ROOT_MESSAGE)

    def read_xml_data(
        self,
        data: Union[bytes, str],
        config: Optional[TokenizerConfig] = None,
    ) -> Optional[XMLParseError]:
        """Replace the tree with one parsed from ``data``.

        Declaration metadata is left untouched. After a failure the tree holds
        whatever was built before the error and should not be relied upon.

        Returns:
            The tokenizer's error, or None on success
        """
        for child in self.children:
            child._set_parent(None)
        self.children.clear()

        builder = TreeBuilder(
            self,
            data,
            process_namespaces=self.process_namespaces,
            config=config,
            correlation_id=self.correlation_id,
        )
        error = builder.try_parsing()
        self.last_parse_statistics = builder.statistics
        return error

    @property
    def declaration(self) -> str:
        return (
            f'<?xml version="{self.version}" encoding="{self.encoding}" '
            f'standalone="{self.standalone}"?>'
        )

    @property
    def xml_string(self) -> str:
        """Declaration line followed by the serialized top-level elements."""
        return self.declaration + "\n" + "".join(
            child.xml_string for child in self.children
        )
