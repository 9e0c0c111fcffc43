"""Typed XML-RPC data model.

Key Components:
    Value: Closed union of the scalar and composite value variants
    Call: Method invocation request
    Response: Union of Success and Fault method responses
"""

from .envelopes import Call, Fault, Response, Success
from .values import (
    INT32_MAX,
    INT32_MIN,
    SCALAR_TYPES,
    VALUE_TYPES,
    Array,
    Base64,
    Bool,
    DateTime,
    Double,
    Int,
    String,
    Struct,
    Value,
)

__all__ = [
    "Call",
    "Fault",
    "Response",
    "Success",
    "INT32_MAX",
    "INT32_MIN",
    "SCALAR_TYPES",
    "VALUE_TYPES",
    "Array",
    "Base64",
    "Bool",
    "DateTime",
    "Double",
    "Int",
    "String",
    "Struct",
    "Value",
]
