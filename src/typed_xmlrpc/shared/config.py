"""Configuration classes for XML-RPC conversion.

This module provides configuration objects for the tree building and
conversion layers, enabling control over parser limits and text handling.
"""

import json
from dataclasses import asdict, dataclass, field, replace
from typing import Any, Dict, Optional

_LOGGING_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
_COMPONENTS = ["tree", "conversion"]


@dataclass
class TreeConfig:
    """Configuration for building the generic XML tree with lxml."""

    # Parser limits
    huge_tree: bool = False
    max_input_size_bytes: Optional[int] = None

    # Security settings
    resolve_entities: bool = False
    no_network: bool = True

    # Encoding override for byte input (auto-detected if not provided)
    encoding: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate tree configuration."""
        if self.max_input_size_bytes is not None and self.max_input_size_bytes <= 0:
            raise ValueError("max_input_size_bytes must be > 0 or None")
        if self.encoding is not None and not self.encoding.strip():
            raise ValueError("encoding cannot be blank")


@dataclass
class ConversionConfig:
    """Configuration for text handling during typed conversion."""

    strip_numeric_whitespace: bool = True
    strip_method_name: bool = True


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None):
        super().__init__(message)
        self.field_name = field_name


@dataclass(frozen=True)
class ParserConfig:
    """Complete configuration for the XML-RPC parser.

    Immutable, so a single instance can be shared by concurrent conversions.
    """

    tree: TreeConfig = field(default_factory=TreeConfig)
    conversion: ConversionConfig = field(default_factory=ConversionConfig)

    logging_level: Optional[str] = None
    name: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate the complete parser configuration."""
        if self.logging_level is not None and self.logging_level not in _LOGGING_LEVELS:
            raise ConfigValidationError(
                f"logging_level must be one of {_LOGGING_LEVELS}",
                field_name="logging_level",
            )

    def override(self, **kwargs: Any) -> "ParserConfig":
        """Create a new configuration with specific overrides.

        Args:
            **kwargs: Configuration fields to override; nested component
                fields use ``component__field`` notation

        Returns:
            New ParserConfig instance with overrides applied

        Example:
            >>> config = ParserConfig()
            >>> new_config = config.override(
            ...     tree__huge_tree=True,
            ...     logging_level="DEBUG"
            ... )
        """
        nested_overrides: Dict[str, Dict[str, Any]] = {}
        new_fields: Dict[str, Any] = {}
        for key, value in kwargs.items():
            if "__" in key:
                component, field_name = key.split("__", 1)
                if component not in _COMPONENTS:
                    raise ConfigValidationError(
                        f"Unknown configuration component: {component}",
                        field_name=key,
                    )
                nested_overrides.setdefault(component, {})[field_name] = value
            else:
                new_fields[key] = value

        try:
            for component, overrides in nested_overrides.items():
                new_fields[component] = replace(getattr(self, component), **overrides)
        except (TypeError, ValueError) as e:
            raise ConfigValidationError(str(e)) from e

        return replace(self, **new_fields)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        return asdict(self)

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ParserConfig":
        """Create configuration from dictionary.

        Args:
            data: Dictionary containing configuration data

        Returns:
            ParserConfig instance created from dictionary
        """
        values = dict(data)
        try:
            if "tree" in values:
                values["tree"] = TreeConfig(**values["tree"])
            if "conversion" in values:
                values["conversion"] = ConversionConfig(**values["conversion"])
            return cls(**values)
        except (TypeError, ValueError) as e:
            raise ConfigValidationError(f"Invalid configuration data: {e}") from e

    @classmethod
    def from_json(cls, json_str: str) -> "ParserConfig":
        """Create configuration from JSON string."""
        return cls.from_dict(json.loads(json_str))

    # Preset factory methods

    @classmethod
    def default(cls) -> "ParserConfig":
        """Create the default configuration."""
        return cls()

    @classmethod
    def deep_nesting(cls) -> "ParserConfig":
        """Create configuration that lifts lxml limits for deeply nested payloads."""
        return cls(tree=TreeConfig(huge_tree=True))
