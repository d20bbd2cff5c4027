"""Shared utilities for lightdom.

This module provides configuration objects, result and error types, and
logging utilities used across the tokenizer adapter, the tree layer and the
api layer.
"""

from .config import (
    ConfigError,
    ConfigValidationError,
    DeclarationConfig,
    ParserConfig,
    TokenizerConfig,
)
from .logging import (
    CorrelationLogger,
    get_logger,
)
from .result import (
    LightDOMError,
    ParseStatistics,
    XMLParseError,
)

__all__ = [
    "ConfigError",
    "ConfigValidationError",
    "DeclarationConfig",
    "ParserConfig",
    "TokenizerConfig",
    "CorrelationLogger",
    "get_logger",
    "LightDOMError",
    "ParseStatistics",
    "XMLParseError",
]
