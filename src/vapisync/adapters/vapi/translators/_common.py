"""Translation helpers shared by several resource kinds."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from vapisync.domain.model import NULL, Property, Server, emit, from_wire, present

if TYPE_CHECKING:
    from collections.abc import Mapping

    from vapisync.domain.model import Scalar
    from vapisync.domain.reconciliation import RequestBody

    from ..schema import PropertyPayload, ResourcePayload, ServerPayload


def resource_fields(payload: ResourcePayload) -> dict[str, Any]:
    """Computed fields every response carries, as model keyword arguments."""

    return {
        "id": payload.id,
        "org_id": from_wire(payload.org_id),
        "created_at": from_wire(payload.created_at),
        "updated_at": from_wire(payload.updated_at),
    }


def write_only[T](value: T | None, local: Scalar[T] | None) -> Scalar[T]:
    """Decode a field the remote side never echoes back.

    A missing value keeps whatever the local model holds, so the secret survives a
    read and does not show up as drift.
    """

    if value is not None:
        return present(value)
    if local is not None and local.is_present:
        return local
    return NULL


def property_to_wire(prop: Property) -> RequestBody:
    body: RequestBody = dict(prop.extra)
    emit(body, "type", prop.type)
    emit(body, "description", prop.description)
    return body


def property_from_wire(payload: PropertyPayload) -> Property:
    return Property(
        type=from_wire(payload.type),
        description=from_wire(payload.description),
        extra=payload.extra,
    )


def properties_to_wire(properties: Mapping[str, Property]) -> RequestBody:
    return {name: property_to_wire(prop) for name, prop in properties.items()}


def properties_from_wire(payloads: Mapping[str, PropertyPayload] | None) -> dict[str, Property]:
    if not payloads:
        return {}
    return {name: property_from_wire(prop) for name, prop in payloads.items()}


def server_to_wire(server: Server) -> RequestBody:
    body: RequestBody = {}
    emit(body, "url", server.url)
    emit(body, "secret", server.secret)
    emit(body, "timeoutSeconds", server.timeout_seconds)
    return body


def server_from_wire(payload: ServerPayload | None, local: Server | None) -> Server | None:
    if payload is None:
        return None
    return Server(
        url=from_wire(payload.url),
        secret=write_only(payload.secret, local.secret if local else None),
        timeout_seconds=from_wire(payload.timeout_seconds),
    )
