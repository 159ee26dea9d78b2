"""Shared reconciliation contract components.

This module holds the lifecycle enums, the result and binding dataclasses, and the
mapper protocols each resource kind implements.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from pathlib import Path

    from vapisync.domain.model import RemoteResource


type RequestBody = dict[str, object]


class LifecycleState(StrEnum):
    PLANNED = "planned"
    BOUND = "bound"
    ORPHANED = "orphaned"
    TERMINATED = "terminated"


class Mutability(StrEnum):
    """How a resource kind absorbs a change. Fixed per kind."""

    IN_PLACE = "in_place"
    REPLACE_ONLY = "replace_only"
    CONTENT_CHECKSUM = "content_checksum"


class PlanAction(StrEnum):
    CREATE = "create"
    NOOP = "noop"
    UPDATE = "update"
    REPLACE = "replace"


@dataclass(frozen=True, slots=True, kw_only=True)
class PlannedChange:
    action: PlanAction
    reason: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ReadResult[M: RemoteResource]:
    observed: M | None = None
    not_found: bool = False


@dataclass(frozen=True, slots=True, kw_only=True)
class UpdateResult[M: RemoteResource]:
    """Outcome of an update. ``identifier`` differs from the input after a replace."""

    observed: M
    identifier: str


@dataclass(frozen=True, slots=True, kw_only=True)
class Binding[M: RemoteResource]:
    """Lifecycle state plus the last-known model of one resource instance."""

    state: LifecycleState = LifecycleState.PLANNED
    model: M | None = None

    @property
    def identifier(self) -> str:
        return self.model.id if self.model is not None else ""


class ResourceMapper[M: RemoteResource](Protocol):
    """Request Mapper plus Response Mapper for one resource kind."""

    @property
    def kind(self) -> str: ...

    @property
    def path(self) -> str: ...

    @property
    def mutability(self) -> Mutability: ...

    def to_request(self, model: M) -> RequestBody: ...

    def to_update_request(self, model: M) -> RequestBody: ...

    def from_response(self, body: bytes, local: M | None) -> M:
        """Build a new model from ``body``.

        ``local`` supplies fields the remote side never echoes. It is never mutated.
        Raises ``ValueError`` (including pydantic's ``ValidationError``) on a
        malformed payload.
        """
        ...


class ContentMapper[M: RemoteResource](ResourceMapper[M], Protocol):
    """Mapper for kinds whose remote content is an uploaded local artifact."""

    @property
    def field_name(self) -> str: ...

    def artifact_path(self, model: M) -> Path: ...

    def recorded_checksum(self, model: M) -> str | None: ...

    def with_checksum(self, observed: M, desired: M, checksum: str) -> M:
        """Copy ``observed`` carrying the local fields of ``desired`` and ``checksum``."""
        ...


__all__ = [
    "Binding",
    "ContentMapper",
    "LifecycleState",
    "Mutability",
    "PlanAction",
    "PlannedChange",
    "ReadResult",
    "RequestBody",
    "ResourceMapper",
    "UpdateResult",
]
