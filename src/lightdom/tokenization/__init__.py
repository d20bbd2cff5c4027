"""Tokenizer seam for lightdom.

Key Components:
    EventSink: Abstract receiver of start/characters/end/error events
    ExpatTokenizer: Adapter that runs expat and reports to an EventSink
"""

from .events import EventSink
from .expat_tokenizer import ExpatTokenizer

__all__ = [
    "EventSink",
    "ExpatTokenizer",
]
