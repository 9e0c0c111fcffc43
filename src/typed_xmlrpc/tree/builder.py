"""Generic XML tree building on top of lxml.

This module implements the labelled tree consumed by the conversion layer. The
character-level parsing is delegated to ``lxml.etree``; the resulting element
tree is copied into lightweight :class:`XMLElement` nodes that carry only what
the conversion layer reads: tag, attributes, leading text, children, and
source line numbers for diagnostics.
"""

import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, BinaryIO, Dict, List, Optional, TextIO, Union

from lxml import etree

from typed_xmlrpc.shared import (
    TreeBuildError,
    TreeConfig,
    get_logger,
)

# Type definitions for input data
InputType = Union[str, bytes, BinaryIO, TextIO, Path]

MS_PER_SECOND = 1000


@dataclass(eq=False)
class XMLElement:
    """Represents a single XML element in the generic tree.

    Only element children are kept; comments, processing instructions and
    unresolved entity references are dropped while building.
    """

    tag: str
    attributes: Dict[str, str] = field(default_factory=dict)
    text: Optional[str] = None
    children: List["XMLElement"] = field(default_factory=list)
    parent: Optional["XMLElement"] = None
    line: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate element values and establish parent-child relationships."""
        if not self.tag:
            raise ValueError("Element tag cannot be empty")

        for child in self.children:
            child.parent = self

    def add_child(self, child: "XMLElement") -> None:
        """Add a child element and establish parent relationship."""
        child.parent = self
        self.children.append(child)

    def find_children(self, tag: str) -> List["XMLElement"]:
        """Find all direct children with matching tag name."""
        return [child for child in self.children if child.tag == tag]

    @property
    def text_content(self) -> str:
        """Leading text of the element, empty string when absent."""
        return self.text or ""

    def get_path(self) -> str:
        """Get XPath-like path to this element."""
        steps = []
        node = self
        while node.parent is not None:
            siblings = node.parent.find_children(node.tag)
            if len(siblings) > 1:
                position = next(
                    index for index, sibling in enumerate(siblings, 1) if sibling is node
                )
                steps.append(f"{node.tag}[{position}]")
            else:
                steps.append(node.tag)
            node = node.parent
        steps.append(node.tag)
        return "/" + "/".join(reversed(steps))


class XMLTreeBuilder:
    """Builds :class:`XMLElement` trees from XML text using lxml.

    A fresh ``lxml.etree.XMLParser`` is created for each build, so a builder
    instance can be shared between threads.
    """

    def __init__(
        self,
        config: Optional[TreeConfig] = None,
        correlation_id: Optional[str] = None,
        logging_level: Optional[str] = None
    ) -> None:
        """Initialize tree builder.

        Args:
            config: Tree building configuration
            correlation_id: Optional correlation ID for request tracking
            logging_level: Minimum level for this builder's records
        """
        self.config = config or TreeConfig()
        self.correlation_id = correlation_id
        self.logger = get_logger(__name__, correlation_id, "tree_builder", logging_level)

    def build(self, source: InputType) -> XMLElement:
        """Parse ``source`` and return the root element of the generic tree.

        Args:
            source: XML content as string, bytes, file-like object, or Path

        Returns:
            Root XMLElement

        Raises:
            TreeBuildError: If the input is not well-formed XML or exceeds the
                configured size limit
        """
        start_time = time.time()
        data = self._read_source(source)

        if (
            self.config.max_input_size_bytes is not None
            and len(data) > self.config.max_input_size_bytes
        ):
            raise TreeBuildError(
                f"Input size {len(data)} exceeds limit of "
                f"{self.config.max_input_size_bytes} bytes"
            )

        encoding = self.config.encoding
        if isinstance(data, str):
            # lxml rejects str input carrying an encoding declaration
            data = data.encode("utf-8")
            encoding = "utf-8"

        parser = etree.XMLParser(
            encoding=encoding,
            huge_tree=self.config.huge_tree,
            resolve_entities=self.config.resolve_entities,
            no_network=self.config.no_network,
            remove_comments=True,
            remove_pis=True,
        )

        try:
            lxml_root = etree.fromstring(data, parser)
        except etree.XMLSyntaxError as e:
            line, column = e.position if e.position else (None, None)
            raise TreeBuildError(
                f"Malformed XML: {e.msg}", line=line, column=column
            ) from e
        except (etree.LxmlError, ValueError) as e:
            raise TreeBuildError(f"Unable to parse XML: {e}") from e

        root = self._convert_tree(lxml_root)

        self.logger.debug(
            "Generic tree built",
            extra={
                "root_tag": root.tag,
                "input_length": len(data),
                "processing_time_ms": (time.time() - start_time) * MS_PER_SECOND,
            }
        )
        return root

    def _read_source(self, source: InputType) -> Union[str, bytes]:
        if isinstance(source, (str, bytes)):
            return source
        if isinstance(source, Path):
            try:
                return source.read_bytes()
            except OSError as e:
                raise TreeBuildError(f"Unable to read {source}: {e}") from e
        if hasattr(source, "read"):
            data = source.read()
            if not isinstance(data, (str, bytes)):
                raise TreeBuildError(
                    f"Stream returned unsupported data type {type(data).__name__}"
                )
            return data
        raise TreeBuildError(f"Unsupported input type {type(source).__name__}")

    def _convert_tree(self, lxml_root: Any) -> XMLElement:
        """Copy an lxml element tree into XMLElement nodes without recursion."""
        root = self._convert_element(lxml_root)
        pending = [(lxml_root, root)]
        while pending:
            lxml_element, element = pending.pop()
            for lxml_child in lxml_element:
                # Skips comments, processing instructions and entity nodes
                if not isinstance(lxml_child.tag, str):
                    continue
                child = self._convert_element(lxml_child)
                element.add_child(child)
                pending.append((lxml_child, child))
        return root

    @staticmethod
    def _convert_element(lxml_element: Any) -> XMLElement:
        return XMLElement(
            tag=lxml_element.tag,
            attributes=dict(lxml_element.attrib),
            text=lxml_element.text,
            line=lxml_element.sourceline,
        )
