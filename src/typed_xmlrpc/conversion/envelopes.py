"""Conversion of ``methodCall`` and ``methodResponse`` envelopes."""

from typing import Optional, Tuple

from typed_xmlrpc.model import Call, Response, Success, Value
from typed_xmlrpc.shared import ConversionConfig, StructureError
from typed_xmlrpc.tree import XMLElement

from .fault import FaultValidator
from .values import ValueConverter, expect_tag, leaf_text, single_child


class EnvelopeConverter:
    """Converts call and response root nodes using a shared ValueConverter."""

    def __init__(
        self,
        config: Optional[ConversionConfig] = None,
        value_converter: Optional[ValueConverter] = None,
        fault_validator: Optional[FaultValidator] = None
    ) -> None:
        self.config = config or ConversionConfig()
        self.values = value_converter or ValueConverter(self.config)
        self.faults = fault_validator or FaultValidator()

    def convert_params(self, node: XMLElement) -> Tuple[Value, ...]:
        """Convert a ``<params>`` container, keeping wire order."""
        expect_tag(node, "params")
        params = []
        for param in node.children:
            expect_tag(param, "param")
            params.append(self.values.convert_value(single_child(param, "value")))
        return tuple(params)

    def convert_call(self, node: XMLElement) -> Call:
        """Convert a ``<methodCall>`` root node.

        Both ``<methodName>`` and ``<params>`` are required; a call without
        ``<params>`` is a structural error rather than an empty call.
        """
        expect_tag(node, "methodCall")
        name = leaf_text(single_child(node, "methodName"))
        if self.config.strip_method_name:
            name = name.strip()
        if not name:
            raise StructureError(
                "Empty <methodName> in <methodCall>",
                tag="methodName",
                path=node.get_path(),
            )
        params = self.convert_params(single_child(node, "params"))
        return Call(name=name, params=params)

    def convert_response(self, node: XMLElement) -> Response:
        """Convert a ``<methodResponse>`` root node into Success or Fault."""
        expect_tag(node, "methodResponse")
        body = single_child(node)
        if body.tag == "params":
            return Success(params=self.convert_params(body))
        if body.tag == "fault":
            value = self.values.convert_value(single_child(body, "value"))
            return self.faults.validate(value)
        raise StructureError(
            f"Expected <params> or <fault> in <methodResponse>, found <{body.tag}>",
            tag=body.tag,
            path=body.get_path(),
        )
