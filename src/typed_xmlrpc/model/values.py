"""Typed XML-RPC values.

``Value`` is a closed union of one frozen dataclass per wire kind. Consumers
dispatch on the concrete variant with ``isinstance``; ``VALUE_TYPES`` lists
every variant so that exhaustive handling can be checked.
"""

import base64
import binascii
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Iterator, Optional, Tuple, Union

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1

# Accepted dateTime.iso8601 layouts for to_datetime()
_DATETIME_FORMATS = (
    "%Y%m%dT%H:%M:%S",
    "%Y%m%dT%H%M%S",
    "%Y-%m-%dT%H:%M:%S",
)


@dataclass(frozen=True)
class Int:
    """32-bit signed integer, from ``<i4>`` or ``<int>``."""

    value: int

    def __post_init__(self) -> None:
        if not (INT32_MIN <= self.value <= INT32_MAX):
            raise ValueError(f"Integer {self.value} is outside the 32-bit signed range")

    def to_python(self) -> int:
        return self.value


@dataclass(frozen=True)
class Bool:
    """Boolean, from ``<boolean>``."""

    value: bool

    def to_python(self) -> bool:
        return self.value


@dataclass(frozen=True)
class String:
    """Text, from ``<string>``."""

    value: str

    def to_python(self) -> str:
        return self.value


@dataclass(frozen=True)
class Double:
    """64-bit float, from ``<double>``."""

    value: float

    def to_python(self) -> float:
        return self.value


@dataclass(frozen=True)
class DateTime:
    """Raw ``<dateTime.iso8601>`` text.

    The text is kept exactly as received; :meth:`to_datetime` is an optional
    helper for consumers that want a calendar value.
    """

    value: str

    def to_python(self) -> str:
        return self.value

    def to_datetime(self) -> datetime:
        """Parse the raw text into a naive ``datetime``.

        Raises:
            ValueError: If the text matches none of the supported layouts
        """
        text = self.value.strip()
        for layout in _DATETIME_FORMATS:
            try:
                return datetime.strptime(text, layout)
            except ValueError:
                continue
        raise ValueError(f"Unsupported dateTime.iso8601 value: {self.value!r}")


@dataclass(frozen=True)
class Base64:
    """Raw ``<base64>`` text, not decoded."""

    value: str

    def to_python(self) -> str:
        return self.value

    def decode(self) -> bytes:
        """Decode the payload.

        Raises:
            ValueError: If the text is not valid base64
        """
        try:
            return base64.b64decode("".join(self.value.split()), validate=True)
        except binascii.Error as e:
            raise ValueError(f"Invalid base64 payload: {e}") from e


@dataclass(frozen=True)
class Array:
    """Ordered sequence of values, from ``<array><data>``."""

    items: Tuple["Value", ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator["Value"]:
        return iter(self.items)

    def __getitem__(self, index: int) -> "Value":
        return self.items[index]

    def to_python(self) -> list:
        return [item.to_python() for item in self.items]


@dataclass(frozen=True)
class Struct:
    """Mapping of member names to values, from ``<struct>``.

    Member order carries no meaning; equality ignores it.
    """

    members: Dict[str, "Value"] = field(default_factory=dict, hash=False)

    def __len__(self) -> int:
        return len(self.members)

    def __contains__(self, name: object) -> bool:
        return name in self.members

    def __getitem__(self, name: str) -> "Value":
        return self.members[name]

    def get(self, name: str, default: Optional["Value"] = None) -> Optional["Value"]:
        return self.members.get(name, default)

    def to_python(self) -> Dict[str, Any]:
        return {name: value.to_python() for name, value in self.members.items()}


Value = Union[Int, Bool, String, Double, DateTime, Base64, Array, Struct]

VALUE_TYPES = (Int, Bool, String, Double, DateTime, Base64, Array, Struct)

SCALAR_TYPES = (Int, Bool, String, Double, DateTime, Base64)
