"""Validation of fault payloads.

A fault's ``<value>`` must be a struct holding an integer ``faultCode`` and
a string ``faultString``. Fields are checked one after the other and each
failure names the field and whether it was missing or of the wrong type.
"""

from typing import Type

from typed_xmlrpc.model import Fault, Int, String, Struct, Value
from typed_xmlrpc.shared import FaultProblem, FaultStructureError

FAULT_CODE = "faultCode"
FAULT_STRING = "faultString"


class FaultValidator:
    """Turns a converted fault value into a :class:`Fault`."""

    def validate(self, value: Value) -> Fault:
        """Build a Fault from ``value``; other struct members are discarded.

        Raises:
            FaultStructureError: If ``value`` is not a struct or a required
                member is missing or mistyped
        """
        if not isinstance(value, Struct):
            raise FaultStructureError(
                "Illegal response structure for fault case.",
                problem=FaultProblem.NOT_A_STRUCT,
            )

        code = self._require(value, FAULT_CODE, Int, "an integer")
        message = self._require(value, FAULT_STRING, String, "a string")
        return Fault(code=code.value, message=message.value)

    @staticmethod
    def _require(fault: Struct, name: str, kind: Type, description: str):
        member = fault.get(name)
        if member is None:
            raise FaultStructureError(
                f'Field "{name}" is missing in fault response',
                problem=FaultProblem.MISSING,
                field=name,
            )
        if not isinstance(member, kind):
            raise FaultStructureError(
                f'Field "{name}" needs to be {description}',
                problem=FaultProblem.WRONG_TYPE,
                field=name,
            )
        return member
