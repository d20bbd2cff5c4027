"""Result objects and error types for lightdom parsing.

A parse either succeeds or produces a single :class:`XMLParseError` value;
alongside it the tree builder records :class:`ParseStatistics`.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


class LightDOMError(Exception):
    """Base exception for lightdom."""


class XMLParseError(LightDOMError):
    """Terminal error reported by the tokenizer for one parse attempt.

    Returned as a value by ``Document.read_xml_data`` and raised by
    ``lightdom.parse``.
    """

    def __init__(
        self,
        message: str,
        code: Optional[int] = None,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.line = line
        self.column = column

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f"{self.message}: line {self.line}, column {self.column}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        return {
            "message": self.message,
            "code": self.code,
            "line": self.line,
            "column": self.column,
        }


@dataclass
class ParseStatistics:
    """Counters collected while building a tree from tokenizer events."""

    elements_created: int = 0
    character_events: int = 0
    max_depth: int = 0
    bytes_processed: int = 0
    processing_time_ms: float = 0.0
    success: bool = False

    @property
    def elements_per_second(self) -> float:
        """Calculate elements built per second."""
        if self.processing_time_ms <= 0:
            return 0.0
        return (self.elements_created * 1000.0) / self.processing_time_ms

    def to_dict(self) -> Dict[str, Any]:
        """Convert statistics to dictionary representation."""
        return {
            "elements_created": self.elements_created,
            "character_events": self.character_events,
            "max_depth": self.max_depth,
            "bytes_processed": self.bytes_processed,
            "processing_time_ms": self.processing_time_ms,
            "success": self.success,
        }
