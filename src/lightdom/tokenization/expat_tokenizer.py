"""Adapter that drives ``xml.parsers.expat`` and forwards its callbacks.

Expat does the actual tokenizing. This module only translates its handler
callbacks into :class:`~lightdom.tokenization.events.EventSink` calls and its
exceptions into :class:`~lightdom.shared.XMLParseError` values.
"""

from typing import Dict, Optional, Tuple, Union
from xml.parsers import expat

from lightdom.shared import TokenizerConfig, XMLParseError

from .events import EventSink

ENTITY_DECLARATION_MESSAGE = "entity declarations are forbidden"


class _EntityDeclarationForbidden(Exception):
    """Raised from the expat entity handler to abort the parse."""


class ExpatTokenizer:
    """Feeds a complete buffer to expat and reports events to a sink.

    Args:
        data: XML document as bytes, or str which is parsed as UTF-8
        process_namespaces: Resolve prefixes into namespace URIs
        config: Tokenizer options
    """

    def __init__(
        self,
        data: Union[bytes, str],
        process_namespaces: bool = False,
        config: Optional[TokenizerConfig] = None,
    ) -> None:
        self.config = config or TokenizerConfig()
        self.process_namespaces = process_namespaces
        if isinstance(data, str):
            self.data = data.encode("utf-8")
            self.encoding: Optional[str] = "utf-8"
        else:
            self.data = bytes(data)
            self.encoding = None

    def run(self, sink: EventSink) -> bool:
        """Parse the whole buffer synchronously.

        Returns:
            True when expat reached the end of the document without error
        """
        parser = self._create_parser(sink)
        try:
            parser.Parse(self.data, True)
        except expat.ExpatError as e:
            sink.parse_error(XMLParseError(
                expat.ErrorString(e.code),
                code=e.code,
                line=e.lineno,
                column=e.offset,
            ))
            return False
        except _EntityDeclarationForbidden:
            sink.parse_error(XMLParseError(
                ENTITY_DECLARATION_MESSAGE,
                line=parser.CurrentLineNumber,
                column=parser.CurrentColumnNumber,
            ))
            return False
        return True

    def _create_parser(self, sink: EventSink) -> "expat.XMLParserType":
        separator = self.config.namespace_separator if self.process_namespaces else None
        parser = expat.ParserCreate(self.encoding, separator)
        if self.process_namespaces:
            parser.namespace_prefixes = True
        parser.buffer_text = self.config.buffer_text

        def start_element(name: str, attributes: Dict[str, str]) -> None:
            local_name, namespace_uri, _prefix = self._split_name(name)
            sink.start_element(
                local_name, self._qualify_attributes(attributes), namespace_uri
            )

        def end_element(name: str) -> None:
            sink.end_element(self._split_name(name)[0])

        parser.StartElementHandler = start_element
        parser.EndElementHandler = end_element
        parser.CharacterDataHandler = sink.characters

        if self.config.forbid_entities:
            def forbid_entities(*_args: object) -> None:
                raise _EntityDeclarationForbidden()

            parser.EntityDeclHandler = forbid_entities

        return parser

    def _split_name(self, name: str) -> Tuple[str, Optional[str], Optional[str]]:
        """Split an expat name into (local name, namespace URI, prefix)."""
        if not self.process_namespaces:
            return name, None, None

        parts = name.split(self.config.namespace_separator)
        if len(parts) == 1:
            return name, None, None
        if len(parts) == 2:
            return parts[1], parts[0], None
        return parts[1], parts[0], parts[2]

    def _qualify_attributes(self, attributes: Dict[str, str]) -> Dict[str, str]:
        if not self.process_namespaces:
            return dict(attributes)

        qualified = {}
        for key, value in attributes.items():
            local_name, _namespace_uri, prefix = self._split_name(key)
            qualified[f"{prefix}:{local_name}" if prefix else local_name] = value
        return qualified
