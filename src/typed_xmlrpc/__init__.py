"""Typed XML-RPC.

Converts XML-RPC documents into a strongly-typed data model: scalar and
composite values, method calls, and method responses including faults.

Progressive API Disclosure:
- Level 1: Simple functions - parse_value(), parse_call(), parse_response(), parse()
- Level 2: Configured parser - XmlRpcParser class with ParserConfig
"""

__version__ = "0.1.0"

# Level 1: Simple functions
# Level 2: Configured parser
from .api import XmlRpcParser, parse, parse_call, parse_response, parse_value

# Typed data model
from .model import (
    Array,
    Base64,
    Bool,
    Call,
    DateTime,
    Double,
    Fault,
    Int,
    Response,
    String,
    Struct,
    Success,
    Value,
)

# Configuration and errors
from .shared import (
    FaultProblem,
    FaultStructureError,
    ParserConfig,
    ScalarParseError,
    StructureError,
    TreeBuildError,
    XmlRpcError,
    XmlRpcParseError,
)

__all__ = [
    "__version__",

    # Level 1: Simple parsing functions
    "parse",
    "parse_call",
    "parse_response",
    "parse_value",

    # Level 2: Configured parser
    "XmlRpcParser",
    "ParserConfig",

    # Data model
    "Array",
    "Base64",
    "Bool",
    "Call",
    "DateTime",
    "Double",
    "Fault",
    "Int",
    "Response",
    "String",
    "Struct",
    "Success",
    "Value",

    # Errors
    "FaultProblem",
    "FaultStructureError",
    "ScalarParseError",
    "StructureError",
    "TreeBuildError",
    "XmlRpcError",
    "XmlRpcParseError",
]
