"""Port for the remote API the engine reconciles against."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

NOT_FOUND = 404


@dataclass(frozen=True, slots=True)
class RemoteResponse:
    """Status code plus the raw response payload of one remote operation."""

    status_code: int
    body: bytes = b""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def not_found(self) -> bool:
        return self.status_code == NOT_FOUND


@runtime_checkable
class RemoteClient(Protocol):
    """Sends one logical operation and reports what came back.

    Non-2xx statuses are returned, never raised. A call that did not complete raises
    ``TransportError``.
    """

    def send(self, method: str, path: str, body: object | None = None) -> RemoteResponse: ...

    def upload(self, field_name: str, filename: str, content: bytes) -> RemoteResponse: ...


__all__ = ["NOT_FOUND", "RemoteClient", "RemoteResponse"]
