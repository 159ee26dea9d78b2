"""Building blocks shared by several resource trees."""

from __future__ import annotations

from dataclasses import dataclass, field

from .values import UNSET, Scalar


@dataclass(slots=True, kw_only=True)
class RemoteResource:
    """Fields every remote resource carries.

    ``id`` is assigned by the remote side on creation and is the only key used for
    read/update/delete. An empty ``id`` means the resource was never created.
    """

    id: str = ""
    org_id: Scalar[str] = UNSET
    created_at: Scalar[str] = UNSET
    updated_at: Scalar[str] = UNSET

    @property
    def is_created(self) -> bool:
        return bool(self.id)


@dataclass(slots=True, kw_only=True)
class Property:
    """One entry of a JSON-schema-like property bag.

    Keys the wire schema does not model (``enum``, ``items``, ...) are kept in
    ``extra`` and written back unchanged.
    """

    type: Scalar[str] = UNSET
    description: Scalar[str] = UNSET
    extra: dict[str, object] = field(default_factory=dict)


@dataclass(slots=True, kw_only=True)
class Server:
    url: Scalar[str] = UNSET
    # write-only: the remote side never echoes it
    secret: Scalar[str] = UNSET
    timeout_seconds: Scalar[int] = UNSET
