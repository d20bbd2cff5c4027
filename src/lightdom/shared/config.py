"""Configuration classes for lightdom parsing.

This module provides the configuration objects consumed by the document,
the tree builder and the expat tokenizer adapter.
"""

import json
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional

VALID_STANDALONE_VALUES = ("yes", "no")


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


@dataclass(frozen=True)
class DeclarationConfig:
    """Values written into the ``<?xml ...?>`` declaration of a document."""

    version: float = 1.0
    encoding: str = "utf-8"
    standalone: str = "no"

    def __post_init__(self) -> None:
        """Validate declaration values."""
        if self.version <= 0:
            raise ValueError("version must be > 0")
        if not self.encoding:
            raise ValueError("encoding cannot be empty")
        if self.standalone not in VALID_STANDALONE_VALUES:
            raise ValueError(
                f"standalone must be one of {list(VALID_STANDALONE_VALUES)}"
            )


@dataclass(frozen=True)
class TokenizerConfig:
    """Configuration for the expat tokenizer adapter."""

    buffer_text: bool = False
    forbid_entities: bool = True
    namespace_separator: str = "\x1f"

    def __post_init__(self) -> None:
        """Validate tokenizer configuration."""
        if len(self.namespace_separator) != 1:
            raise ValueError("namespace_separator must be a single character")


@dataclass(frozen=True)
class ParserConfig:
    """Complete configuration for a parse operation.

    Immutable, so a single instance can be shared between documents.
    """

    declaration: DeclarationConfig = field(default_factory=DeclarationConfig)
    tokenizer: TokenizerConfig = field(default_factory=TokenizerConfig)
    process_namespaces: bool = False
    correlation_id: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate the complete parser configuration."""
        try:
            self.declaration.__post_init__()
            self.tokenizer.__post_init__()
        except ValueError as e:
            raise ConfigValidationError(str(e)) from e

    def override(self, **kwargs: Any) -> "ParserConfig":
        """Create a new configuration with specific overrides.

        Nested fields use double-underscore notation.

        Example:
            >>> config = ParserConfig()
            >>> new_config = config.override(
            ...     declaration__encoding="iso-8859-1",
            ...     process_namespaces=True
            ... )
        """
        nested_overrides: Dict[str, Dict[str, Any]] = {}
        top_level: Dict[str, Any] = {}
        for key, value in kwargs.items():
            if "__" in key:
                component, field_name = key.split("__", 1)
                nested_overrides.setdefault(component, {})[field_name] = value
            else:
                top_level[key] = value

        new_fields: Dict[str, Any] = dict(top_level)
        for component, overrides in nested_overrides.items():
            if component not in ("declaration", "tokenizer"):
                raise ConfigValidationError(
                    f"Unknown configuration component: {component}",
                    field_name=component,
                    suggestions=["declaration", "tokenizer"],
                )
            try:
                new_fields[component] = replace(getattr(self, component), **overrides)
            except ValueError as e:
                raise ConfigValidationError(str(e), field_name=component) from e

        return replace(self, **new_fields)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        return {
            "declaration": {
                "version": self.declaration.version,
                "encoding": self.declaration.encoding,
                "standalone": self.declaration.standalone,
            },
            "tokenizer": {
                "buffer_text": self.tokenizer.buffer_text,
                "forbid_entities": self.tokenizer.forbid_entities,
                "namespace_separator": self.tokenizer.namespace_separator,
            },
            "process_namespaces": self.process_namespaces,
            "correlation_id": self.correlation_id,
        }

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ParserConfig":
        """Create configuration from dictionary.

        Missing keys fall back to their defaults.
        """
        try:
            return cls(
                declaration=DeclarationConfig(**data.get("declaration", {})),
                tokenizer=TokenizerConfig(**data.get("tokenizer", {})),
                process_namespaces=data.get("process_namespaces", False),
                correlation_id=data.get("correlation_id"),
            )
        except (TypeError, ValueError) as e:
            raise ConfigValidationError(f"Invalid configuration data: {e}") from e

    @classmethod
    def from_json(cls, json_str: str) -> "ParserConfig":
        """Create configuration from JSON string."""
        return cls.from_dict(json.loads(json_str))

    @classmethod
    def namespace_aware(cls) -> "ParserConfig":
        """Preset that resolves namespace URIs during parsing."""
        return cls(process_namespaces=True)
