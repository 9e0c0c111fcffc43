"""Generic XML tree model.

Key Components:
    XMLTreeBuilder: Parses XML input with lxml into a generic element tree
    XMLElement: Individual element with tag, attributes, text, and children
"""

from .builder import (
    InputType,
    XMLElement,
    XMLTreeBuilder,
)

__all__ = [
    "InputType",
    "XMLElement",
    "XMLTreeBuilder",
]
