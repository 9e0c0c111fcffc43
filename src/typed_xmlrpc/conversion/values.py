"""Conversion of generic ``<value>`` nodes into typed values.

Each wire tag has its own conversion rule. Scalars read the text of a leaf
element; ``array`` and ``struct`` are walked with an explicit stack, so the
nesting depth is bounded by the tree builder rather than by Python's
recursion limit. The first failing node aborts the whole conversion and its
error propagates unchanged.
"""

import re
from typing import Callable, Dict, Iterator, List, Optional, Union

from typed_xmlrpc.model import (
    INT32_MAX,
    INT32_MIN,
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
from typed_xmlrpc.shared import ConversionConfig, ScalarParseError, StructureError
from typed_xmlrpc.tree import XMLElement

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_DOUBLE_PATTERN = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)",
    re.IGNORECASE,
)


def single_child(node: XMLElement, tag: Optional[str] = None) -> XMLElement:
    """Return the only element child of ``node``.

    Args:
        node: Parent element
        tag: Required tag of the child, if any

    Raises:
        StructureError: If ``node`` does not have exactly one (matching) child
    """
    children = node.children if tag is None else node.find_children(tag)
    expected = f"<{tag}>" if tag else "child"
    if not children:
        raise StructureError(
            f"Expected a {expected} element in <{node.tag}>",
            tag=node.tag,
            path=node.get_path(),
        )
    if len(children) > 1:
        raise StructureError(
            f"Expected exactly one {expected} element in <{node.tag}>, "
            f"found {len(children)}",
            tag=node.tag,
            path=node.get_path(),
        )
    return children[0]


def expect_tag(node: XMLElement, tag: str) -> None:
    """Raise StructureError unless ``node`` is a ``<tag>`` element."""
    if node.tag != tag:
        raise StructureError(
            f"Expected <{tag}> element, found <{node.tag}>",
            tag=node.tag,
            path=node.get_path(),
        )


def leaf_text(node: XMLElement) -> str:
    """Return the text of an element that may not contain child elements.

    Raises:
        StructureError: If ``node`` has an element child
    """
    if node.children:
        child = node.children[0]
        raise StructureError(
            f"Unexpected <{child.tag}> element inside <{node.tag}>",
            tag=node.tag,
            path=child.get_path(),
        )
    return node.text_content


class _ArrayFrame:
    """An ``<array>`` whose items are still being converted."""

    def __init__(self, node: XMLElement) -> None:
        self.pending: Iterator[XMLElement] = iter(single_child(node, "data").children)
        self.items: List[Value] = []

    def next_value(self) -> Optional[XMLElement]:
        return next(self.pending, None)

    def add(self, value: Value) -> None:
        self.items.append(value)

    def finish(self) -> Value:
        return Array(tuple(self.items))


class _StructFrame:
    """A ``<struct>`` whose members are still being converted."""

    def __init__(self, node: XMLElement) -> None:
        self.pending: Iterator[XMLElement] = iter(node.children)
        self.members: Dict[str, Value] = {}
        self.name = ""

    def next_value(self) -> Optional[XMLElement]:
        member = next(self.pending, None)
        if member is None:
            return None
        expect_tag(member, "member")
        self.name = leaf_text(single_child(member, "name"))
        return single_child(member, "value")

    def add(self, value: Value) -> None:
        # Later duplicates overwrite earlier members
        self.members[self.name] = value

    def finish(self) -> Value:
        return Struct(self.members)


_Frame = Union[_ArrayFrame, _StructFrame]


class ValueConverter:
    """Converts ``<value>`` nodes and their typed children into values."""

    def __init__(self, config: Optional[ConversionConfig] = None) -> None:
        self.config = config or ConversionConfig()
        self._handlers: Dict[str, Callable[[XMLElement], Value]] = {
            "i4": self._convert_int,
            "int": self._convert_int,
            "boolean": self._convert_bool,
            "string": self._convert_string,
            "double": self._convert_double,
            "dateTime.iso8601": self._convert_datetime,
            "base64": self._convert_base64,
        }
        self._frames: Dict[str, Callable[[XMLElement], _Frame]] = {
            "array": _ArrayFrame,
            "struct": _StructFrame,
        }

    @property
    def supported_tags(self) -> List[str]:
        return list(self._handlers) + list(self._frames)

    def convert_value(self, node: XMLElement) -> Value:
        """Convert a ``<value>`` wrapper holding exactly one typed child."""
        expect_tag(node, "value")
        return self.convert_typed(single_child(node))

    def convert_typed(self, node: XMLElement) -> Value:
        """Convert a typed node such as ``<int>`` or ``<struct>``.

        Composites are converted depth-first with an explicit stack of
        open arrays and structs; items keep their wire order.
        """
        stack: List[_Frame] = []
        value = self._open(node, stack)
        while stack:
            frame = stack[-1]
            if value is not None:
                frame.add(value)
            child = frame.next_value()
            if child is None:
                stack.pop()
                value = frame.finish()
            else:
                expect_tag(child, "value")
                value = self._open(single_child(child), stack)
        return value

    def _open(self, node: XMLElement, stack: List[_Frame]) -> Optional[Value]:
        """Convert a scalar node, or push a frame for a composite one."""
        frame_type = self._frames.get(node.tag)
        if frame_type is not None:
            stack.append(frame_type(node))
            return None
        handler = self._handlers.get(node.tag)
        if handler is None:
            raise StructureError(
                f"Unknown value type '{node.tag}'",
                tag=node.tag,
                path=node.get_path(),
            )
        return handler(node)

    def _numeric_text(self, node: XMLElement) -> str:
        text = leaf_text(node)
        if self.config.strip_numeric_whitespace:
            text = text.strip()
        return text

    def _parse_int32(self, node: XMLElement) -> int:
        text = self._numeric_text(node)
        if not _INTEGER_PATTERN.fullmatch(text):
            raise StructureError(
                f"Invalid integer {text!r} in <{node.tag}>",
                tag=node.tag,
                path=node.get_path(),
            )
        number = int(text)
        if not (INT32_MIN <= number <= INT32_MAX):
            raise StructureError(
                f"Integer {text} in <{node.tag}> is outside the 32-bit signed range",
                tag=node.tag,
                path=node.get_path(),
            )
        return number

    def _convert_int(self, node: XMLElement) -> Value:
        return Int(self._parse_int32(node))

    def _convert_bool(self, node: XMLElement) -> Value:
        return Bool(self._parse_int32(node) != 0)

    def _convert_string(self, node: XMLElement) -> Value:
        return String(leaf_text(node))

    def _convert_double(self, node: XMLElement) -> Value:
        text = self._numeric_text(node)
        try:
            number = float(text)
        except ValueError as e:
            raise ScalarParseError("Failed to parse double", text=text) from e
        # float() also takes digit separators and surrounding whitespace
        if not _DOUBLE_PATTERN.fullmatch(text):
            raise ScalarParseError("Failed to parse double", text=text)
        return Double(number)

    def _convert_datetime(self, node: XMLElement) -> Value:
        return DateTime(leaf_text(node))

    def _convert_base64(self, node: XMLElement) -> Value:
        return Base64(leaf_text(node))
