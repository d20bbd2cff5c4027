"""Tree construction from tokenizer events.

:class:`TreeBuilder` is the event sink handed to the tokenizer for one parse.
It keeps only the current parent (moving up through ``parent`` links on each
closing tag), the element most recently opened, and the character data seen
since that element was opened.
"""

import time
from typing import TYPE_CHECKING, Dict, Optional, Union

from lightdom.shared import (
    ParseStatistics,
    TokenizerConfig,
    XMLParseError,
    get_logger,
)
from lightdom.tokenization import EventSink, ExpatTokenizer

from .element import Element

if TYPE_CHECKING:
    from .document import Document

MS_PER_SECOND = 1000


class TreeBuilder(EventSink):
    """Builds an element tree under a document from a single parse.

    Args:
        document: Document receiving the top-level elements
        data: XML bytes (or str, parsed as UTF-8)
        process_namespaces: Resolve namespace URIs while tokenizing
        config: Tokenizer options
        correlation_id: Optional correlation ID for request tracking
    """

    def __init__(
        self,
        document: "Document",
        data: Union[bytes, str],
        process_namespaces: bool = False,
        config: Optional[TokenizerConfig] = None,
        correlation_id: Optional[str] = None,
    ) -> None:
        self.document = document
        self.data = data
        self.process_namespaces = process_namespaces
        self.config = config
        self.logger = get_logger(__name__, correlation_id, "tree_builder")

        self.current_parent: Optional[Element] = document
        self.current_element: Optional[Element] = None
        self.current_value = ""
        self.error: Optional[XMLParseError] = None

        self.statistics = ParseStatistics(
            bytes_processed=len(data.encode("utf-8") if isinstance(data, str) else data)
        )
        self._depth = 0
        self._used = False

    def try_parsing(self) -> Optional[XMLParseError]:
        """Run the tokenizer to completion.

        Returns:
            The recorded parse error, or None when the tokenizer succeeded
        """
        if self._used:
            raise RuntimeError("TreeBuilder instances cannot be reused")
        self._used = True

        start_time = time.time()
        self.logger.debug(
            "Starting tree building",
            extra={
                "bytes_processed": self.statistics.bytes_processed,
                "process_namespaces": self.process_namespaces,
            }
        )

        tokenizer = ExpatTokenizer(self.data, self.process_namespaces, self.config)
        success = tokenizer.run(self)

        self.statistics.processing_time_ms = (time.time() - start_time) * MS_PER_SECOND
        self.statistics.success = success

        if success:
            self.logger.info("Tree building completed", extra=self.statistics.to_dict())
            return None

        error_extra = None
        if self.error is not None:
            error_extra = {
                "error_message": self.error.message,
                "error_code": self.error.code,
                "line": self.error.line,
                "column": self.error.column,
            }
        self.logger.warning("Tree building aborted by parse error", extra=error_extra)
        return self.error

    def start_element(
        self,
        name: str,
        attributes: Dict[str, str],
        namespace_uri: Optional[str] = None,
    ) -> None:
        self.current_value = ""
        if self.current_parent is None:
            self.current_element = None
            return

        self.current_element = self.current_parent.add_child(name, attributes=attributes)
        self.current_element.namespace_uri = namespace_uri
        self.current_parent = self.current_element

        self._depth += 1
        self.statistics.elements_created += 1
        self.statistics.max_depth = max(self.statistics.max_depth, self._depth)

    def characters(self, fragment: str) -> None:
        # The whole buffer is re-stripped, not just the new fragment.
        self.current_value += fragment
        self.statistics.character_events += 1
        if self.current_element is not None:
            stripped = self.current_value.strip()
            self.current_element.value = stripped if stripped else None

    def end_element(self, name: str) -> None:
        if self.current_parent is not None:
            self.current_parent = self.current_parent.parent
        self._depth -= 1

    def parse_error(self, error: XMLParseError) -> None:
        self.error = error
