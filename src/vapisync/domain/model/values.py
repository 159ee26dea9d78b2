"""Tri-state scalars and ordered collections of the typed resource tree.

A scalar field is ``unset`` (never assigned), ``null`` (explicitly absent) or
``present``. The distinction matters on the wire: ``unset``/``null`` omit the field,
while ``present(0)`` emits a literal zero.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterable, MutableMapping, Sequence


class Presence(StrEnum):
    UNSET = "unset"
    NULL = "null"
    PRESENT = "present"


@dataclass(frozen=True, slots=True)
class Scalar[T]:
    """One scalar leaf with its presence state."""

    presence: Presence = Presence.UNSET
    value: T | None = None

    def __post_init__(self) -> None:
        if (self.presence is Presence.PRESENT) != (self.value is not None):
            raise ValueError(f"Inconsistent scalar: presence={self.presence}, value={self.value!r}")

    @property
    def is_present(self) -> bool:
        return self.presence is Presence.PRESENT

    @property
    def is_unset(self) -> bool:
        return self.presence is Presence.UNSET

    @property
    def is_null(self) -> bool:
        return self.presence is Presence.NULL

    def get(self, default: T | None = None) -> T | None:
        return self.value if self.value is not None else default

    def require(self, name: str = "value") -> T:
        if self.value is None:
            raise ValueError(f"{name} is {self.presence}")
        return self.value

    def __repr__(self) -> str:
        if self.is_present:
            return f"present({self.value!r})"
        return str(self.presence)


UNSET: Scalar[Any] = Scalar()
NULL: Scalar[Any] = Scalar(Presence.NULL)


def present[T](value: T) -> Scalar[T]:
    return Scalar(Presence.PRESENT, value)


def from_wire[T](value: T | None) -> Scalar[T]:
    """Decode a response value: a missing or ``null`` key becomes ``null``, never a zero value."""

    if value is None:
        return NULL
    return present(value)


def emit(body: MutableMapping[str, object], key: str, scalar: Scalar[Any]) -> None:
    """Write ``scalar`` into a request body only when it is present."""

    if scalar.is_present:
        body[key] = scalar.value


def strings_from_wire(values: Iterable[str] | None) -> list[str]:
    """Total, order-preserving conversion; ``None`` and ``[]`` both give an empty list."""

    if not values:
        return []
    return list(values)


def strings_to_wire(values: Sequence[str]) -> list[str]:
    return list(values)
