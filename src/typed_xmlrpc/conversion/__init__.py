"""XML-RPC typed conversion layer.

Key Components:
    ValueConverter: Converts value nodes into typed values, walking arrays
        and structs with an explicit stack
    EnvelopeConverter: Converts methodCall and methodResponse root nodes
    FaultValidator: Checks fault payloads and builds Fault responses
"""

from .envelopes import EnvelopeConverter
from .fault import FAULT_CODE, FAULT_STRING, FaultValidator
from .values import ValueConverter, expect_tag, leaf_text, single_child

__all__ = [
    "EnvelopeConverter",
    "FAULT_CODE",
    "FAULT_STRING",
    "FaultValidator",
    "ValueConverter",
    "expect_tag",
    "leaf_text",
    "single_child",
]
