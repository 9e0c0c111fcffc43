"""Top-level XML-RPC parsing API.

This module provides module-level functions for the common case and the
configurable :class:`XmlRpcParser` class. Every entry point builds the generic
tree with lxml and then hands it to the matching converter.

Structural failures, including malformed XML, are raised as
:class:`XmlRpcParseError` chained to the underlying cause. Double parsing
failures and fault payload violations propagate unchanged.
"""

import time
from typing import Callable, Optional, TypeVar, Union

from typed_xmlrpc.conversion import EnvelopeConverter, ValueConverter
from typed_xmlrpc.model import Call, Response, Value
from typed_xmlrpc.shared import (
    ParserConfig,
    StructureError,
    XmlRpcError,
    XmlRpcParseError,
    get_logger,
)
from typed_xmlrpc.tree import InputType, XMLElement, XMLTreeBuilder

T = TypeVar("T")

MS_PER_SECOND = 1000

# Error context names per target type
KIND_DATA = "data"
KIND_CALL = "call"
KIND_RESPONSE = "response"


class XmlRpcParser:
    """Configurable XML-RPC parser.

    Holds only immutable configuration, so one instance may serve concurrent
    callers.

    Examples:
        >>> parser = XmlRpcParser(ParserConfig.deep_nesting())
        >>> parser.parse_value('<value><int>41</int></value>')
        Int(value=41)
    """

    def __init__(
        self,
        config: Optional[ParserConfig] = None,
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize the parser.

        Args:
            config: Parser configuration (defaults to ParserConfig())
            correlation_id: Optional correlation ID for request tracking
        """
        self.config = config or ParserConfig()
        self.correlation_id = correlation_id
        self.logger = get_logger(
            __name__, correlation_id, "xmlrpc_parser", self.config.logging_level
        )

        self._builder = XMLTreeBuilder(
            self.config.tree, correlation_id, self.config.logging_level
        )
        self._values = ValueConverter(self.config.conversion)
        self._envelopes = EnvelopeConverter(
            self.config.conversion, value_converter=self._values
        )

    def parse_value(self, source: InputType) -> Value:
        """Parse a single value.

        The root may be a ``<value>`` wrapper or a bare typed element such as
        ``<int>`` or ``<struct>``.

        Raises:
            XmlRpcParseError: If the input is malformed or mis-shaped
            ScalarParseError: If a double's text is not a float literal
        """
        return self._run(KIND_DATA, source, self._convert_value_root)

    def parse_call(self, source: InputType) -> Call:
        """Parse a ``<methodCall>`` document.

        Raises:
            XmlRpcParseError: If the input is malformed or mis-shaped
            ScalarParseError: If a double's text is not a float literal
        """
        return self._run(KIND_CALL, source, self._envelopes.convert_call)

    def parse_response(self, source: InputType) -> Response:
        """Parse a ``<methodResponse>`` document into Success or Fault.

        Raises:
            XmlRpcParseError: If the input is malformed or mis-shaped
            ScalarParseError: If a double's text is not a float literal
            FaultStructureError: If a fault payload is not a valid fault struct
        """
        return self._run(KIND_RESPONSE, source, self._envelopes.convert_response)

    def parse(self, source: InputType) -> Union[Value, Call, Response]:
        """Parse any XML-RPC document, dispatching on its root tag.

        ``<methodCall>`` yields a Call, ``<methodResponse>`` a Response, and
        anything else is parsed as a value.
        """
        start_time = time.time()
        try:
            root = self._builder.build(source)
        except StructureError as e:
            self._log_start(KIND_DATA, source)
            self._log_failure(KIND_DATA, e, start_time)
            raise XmlRpcParseError(KIND_DATA) from e

        converter: Callable[[XMLElement], Union[Value, Call, Response]]
        if root.tag == "methodCall":
            kind, converter = KIND_CALL, self._envelopes.convert_call
        elif root.tag == "methodResponse":
            kind, converter = KIND_RESPONSE, self._envelopes.convert_response
        else:
            kind, converter = KIND_DATA, self._convert_value_root
        self._log_start(kind, source)
        return self._convert(kind, root, converter, start_time)

    def _convert_value_root(self, root: XMLElement) -> Value:
        if root.tag == "value":
            return self._values.convert_value(root)
        return self._values.convert_typed(root)

    def _run(
        self,
        kind: str,
        source: InputType,
        converter: Callable[[XMLElement], T]
    ) -> T:
        start_time = time.time()
        self._log_start(kind, source)
        try:
            root = self._builder.build(source)
        except StructureError as e:
            self._log_failure(kind, e, start_time)
            raise XmlRpcParseError(kind) from e
        return self._convert(kind, root, converter, start_time)

    def _convert(
        self,
        kind: str,
        root: XMLElement,
        converter: Callable[[XMLElement], T],
        start_time: float
    ) -> T:
        try:
            result = converter(root)
        except StructureError as e:
            self._log_failure(kind, e, start_time)
            raise XmlRpcParseError(kind) from e
        except XmlRpcError as e:
            self._log_failure(kind, e, start_time)
            raise

        self.logger.debug(
            f"XML-RPC {kind} conversion completed",
            extra={
                "result_type": type(result).__name__,
                "processing_time_ms": (time.time() - start_time) * MS_PER_SECOND,
            }
        )
        return result

    def _log_start(self, kind: str, source: InputType) -> None:
        self.logger.debug(
            f"Starting XML-RPC {kind} conversion",
            extra={"input_type": type(source).__name__}
        )

    def _log_failure(self, kind: str, error: XmlRpcError, start_time: float) -> None:
        self.logger.debug(
            f"XML-RPC {kind} conversion failed: {error}",
            extra={
                "error_type": type(error).__name__,
                "processing_time_ms": (time.time() - start_time) * MS_PER_SECOND,
            }
        )


_default_parser: Optional[XmlRpcParser] = None


def _get_default_parser() -> XmlRpcParser:
    global _default_parser
    if _default_parser is None:
        _default_parser = XmlRpcParser()
    return _default_parser


def _parser_for(correlation_id: Optional[str]) -> XmlRpcParser:
    if correlation_id is None:
        return _get_default_parser()
    return XmlRpcParser(correlation_id=correlation_id)


def parse_value(source: InputType, correlation_id: Optional[str] = None) -> Value:
    """Parse XML-RPC data into a typed Value.

    Args:
        source: XML content as string, bytes, file-like object, or Path
        correlation_id: Optional correlation ID for request tracking

    Examples:
        >>> parse_value('<value><boolean>1</boolean></value>')
        Bool(value=True)
    """
    return _parser_for(correlation_id).parse_value(source)


def parse_call(source: InputType, correlation_id: Optional[str] = None) -> Call:
    """Parse an XML-RPC method call.

    Args:
        source: XML content as string, bytes, file-like object, or Path
        correlation_id: Optional correlation ID for request tracking

    Examples:
        >>> call = parse_call(
        ...     '<methodCall><methodName>examples.getStateName</methodName>'
        ...     '<params><param><value><int>41</int></value></param></params>'
        ...     '</methodCall>'
        ... )
        >>> call.name, call.params
        ('examples.getStateName', (Int(value=41),))
    """
    return _parser_for(correlation_id).parse_call(source)


def parse_response(source: InputType, correlation_id: Optional[str] = None) -> Response:
    """Parse an XML-RPC method response into Success or Fault.

    Args:
        source: XML content as string, bytes, file-like object, or Path
        correlation_id: Optional correlation ID for request tracking
    """
    return _parser_for(correlation_id).parse_response(source)


def parse(
    source: InputType, correlation_id: Optional[str] = None
) -> Union[Value, Call, Response]:
    """Parse any XML-RPC document, dispatching on its root tag."""
    return _parser_for(correlation_id).parse(source)
