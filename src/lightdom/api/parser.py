"""Module-level parsing entry points.

These wrap :meth:`Document.read_xml_data` for callers who prefer an exception
to an error value.
"""

import logging
from typing import Optional, Union

from lightdom.shared import ParserConfig, get_logger
from lightdom.tree import Document

# Max length for content preview in logs
PREVIEW_LENGTH = 100


def parse(data: Union[bytes, str], config: Optional[ParserConfig] = None) -> Document:
    """Parse an XML document into a new :class:`Document`.

    Args:
        data: XML content as bytes, or str which is parsed as UTF-8
        config: Parser configuration; defaults apply when omitted

    Returns:
        Document holding the parsed tree

    Raises:
        XMLParseError: If the tokenizer rejects the input

    Examples:
        >>> document = parse(b'<root><item id="1">A</item></root>')
        >>> document.root.child("item").string_value
        'A'
    """
    config = config or ParserConfig()
    logger = get_logger(__name__, config.correlation_id, "parse")
    logger.info(
        "Starting parse operation",
        extra={
            "input_type": type(data).__name__,
            "content_length": len(data),
            "process_namespaces": config.process_namespaces,
        }
    )

    document = Document.from_declaration(
        config.declaration,
        process_namespaces=config.process_namespaces,
        correlation_id=config.correlation_id,
    )
    error = document.read_xml_data(data, config.tokenizer)
    if error is not None:
        raise error
    return document


def parse_string(xml_string: str, config: Optional[ParserConfig] = None) -> Document:
    """Parse XML held in a string.

    Raises:
        TypeError: If ``xml_string`` is not a str
        XMLParseError: If the tokenizer rejects the input
    """
    if not isinstance(xml_string, str):
        raise TypeError("xml_string must be a str")

    logger = get_logger(__name__, config.correlation_id if config else None, "parse_string")
    if logger.is_enabled_for(logging.DEBUG):
        logger.debug(
            "Parsing string content",
            extra={
                "preview": (
                    xml_string[:PREVIEW_LENGTH] + "..."
                    if len(xml_string) > PREVIEW_LENGTH else xml_string
                )
            }
        )
    return parse(xml_string, config)
