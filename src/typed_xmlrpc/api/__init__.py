"""Public parsing API for XML-RPC documents."""

from .parser import (
    XmlRpcParser,
    parse,
    parse_call,
    parse_response,
    parse_value,
)

__all__ = [
    "XmlRpcParser",
    "parse",
    "parse_call",
    "parse_response",
    "parse_value",
]
