"""Shared utilities for XML-RPC conversion.

This module provides the exception hierarchy, configuration objects, and
logging helpers used across the tree, conversion, and API layers.
"""

from .config import (
    ConfigError,
    ConfigValidationError,
    ConversionConfig,
    ParserConfig,
    TreeConfig,
)
from .errors import (
    FaultProblem,
    FaultStructureError,
    ScalarParseError,
    StructureError,
    TreeBuildError,
    XmlRpcError,
    XmlRpcParseError,
)
from .logging import (
    CorrelationLogger,
    get_logger,
)

__all__ = [
    "ConfigError",
    "ConfigValidationError",
    "ConversionConfig",
    "ParserConfig",
    "TreeConfig",
    "FaultProblem",
    "FaultStructureError",
    "ScalarParseError",
    "StructureError",
    "TreeBuildError",
    "XmlRpcError",
    "XmlRpcParseError",
    "CorrelationLogger",
    "get_logger",
]
