"""Method call and method response envelopes."""

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple, Union

from .values import Value


@dataclass(frozen=True)
class Call:
    """One XML-RPC method invocation request."""

    name: str
    params: Tuple[Value, ...] = ()

    def to_python(self) -> Tuple[str, List[Any]]:
        return self.name, [param.to_python() for param in self.params]


@dataclass(frozen=True)
class Success:
    """Successful method response carrying return parameters."""

    params: Tuple[Value, ...] = ()

    @property
    def is_fault(self) -> bool:
        return False

    def to_python(self) -> List[Any]:
        return [param.to_python() for param in self.params]


@dataclass(frozen=True)
class Fault:
    """Fault method response.

    Only constructed after the fault payload has been validated to carry an
    integer ``faultCode`` and a string ``faultString``.
    """

    code: int
    message: str

    @property
    def is_fault(self) -> bool:
        return True

    def to_python(self) -> Dict[str, Any]:
        return {"faultCode": self.code, "faultString": self.message}


Response = Union[Success, Fault]
