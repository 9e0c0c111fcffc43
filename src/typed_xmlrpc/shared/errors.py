"""Exception hierarchy for XML-RPC conversion.

Every failure raised by the tree and conversion layers derives from
:class:`XmlRpcError`. Top-level entry points wrap structural failures in
:class:`XmlRpcParseError` using exception chaining, so the full context is
available through :meth:`XmlRpcError.chain`.
"""

from enum import Enum, auto
from typing import List, Optional


class FaultProblem(Enum):
    """Kinds of fault payload violations."""

    NOT_A_STRUCT = auto()   # Fault value is not a struct
    MISSING = auto()        # Required member absent
    WRONG_TYPE = auto()     # Required member has the wrong value kind


class XmlRpcError(Exception):
    """Base exception for all XML-RPC conversion errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def chain(self) -> List[str]:
        """Return this error's message followed by every chained cause."""
        messages: List[str] = []
        current: Optional[BaseException] = self
        while current is not None:
            messages.append(str(current))
            current = current.__cause__
        return messages

    def describe(self) -> str:
        """Human-readable context chain, outermost first."""
        return ": ".join(self.chain())


class StructureError(XmlRpcError):
    """The tree does not match the expected XML-RPC tag shape."""

    def __init__(
        self,
        message: str,
        tag: Optional[str] = None,
        path: Optional[str] = None
    ) -> None:
        super().__init__(message)
        self.tag = tag
        self.path = path

    def __str__(self) -> str:
        if self.path:
            return f"{self.message} (at {self.path})"
        return self.message


class TreeBuildError(StructureError):
    """The input stream could not be turned into a generic XML tree."""

    def __init__(
        self,
        message: str,
        line: Optional[int] = None,
        column: Optional[int] = None
    ) -> None:
        super().__init__(message)
        self.line = line
        self.column = column

    def __str__(self) -> str:
        if self.line is not None:
            return f"{self.message} (line {self.line}, column {self.column})"
        return self.message


class ScalarParseError(XmlRpcError):
    """A scalar's text could not be parsed into its typed representation."""

    def __init__(self, message: str, text: Optional[str] = None) -> None:
        super().__init__(message)
        self.text = text


class FaultStructureError(XmlRpcError):
    """A fault payload violates the faultCode/faultString contract."""

    def __init__(
        self,
        message: str,
        problem: FaultProblem,
        field: Optional[str] = None
    ) -> None:
        super().__init__(message)
        self.problem = problem
        self.field = field


class XmlRpcParseError(XmlRpcError):
    """Top-level failure to parse XML-RPC data, a call, or a response."""

    def __init__(self, kind: str) -> None:
        super().__init__(f"Failed to parse XML-RPC {kind}.")
        self.kind = kind
