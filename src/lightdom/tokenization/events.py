"""Event sink interface between the tokenizer and the tree layer."""

from abc import ABC, abstractmethod
from typing import Dict, Optional

from lightdom.shared import XMLParseError


class EventSink(ABC):
    """Receiver of structural parse events.

    A tokenizer delivers, for a well-formed document, a balanced sequence of
    ``start_element`` / ``characters`` / ``end_element`` calls, and at most one
    ``parse_error`` after which no further events arrive.
    """

    @abstractmethod
    def start_element(
        self,
        name: str,
        attributes: Dict[str, str],
        namespace_uri: Optional[str] = None,
    ) -> None:
        """Handle an opening tag."""

    @abstractmethod
    def characters(self, fragment: str) -> None:
        """Handle a run of character data, possibly one of several."""

    @abstractmethod
    def end_element(self, name: str) -> None:
        """Handle a closing tag."""

    @abstractmethod
    def parse_error(self, error: XMLParseError) -> None:
        """Handle the terminal parse error."""
