"""Generic lifecycle controller shared by every resource kind.

One controller instance drives one resource kind. It sequences Create/Read/Update/
Delete through the kind's mapper and the remote client, and picks between an in-place
update, a delete-then-recreate cycle, or nothing, based on the kind's mutability.
Operations on one resource are strictly sequential; the controller holds no state
between calls.
"""

from __future__ import annotations

import dataclasses
from logging import getLogger
from typing import TYPE_CHECKING, cast

from vapisync.domain.checksum import digest, read_artifact
from vapisync.domain.errors import (
    DecodeError,
    LocalPreconditionError,
    ReconciliationError,
    RemoteRejectionError,
    ReplacementError,
    ResourceNotFoundError,
)

from .contracts import (
    Binding,
    ContentMapper,
    LifecycleState,
    Mutability,
    PlanAction,
    PlannedChange,
    ReadResult,
    UpdateResult,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from vapisync.domain.model import RemoteResource
    from vapisync.domain.ports import RemoteClient, RemoteResponse

    from .contracts import RequestBody, ResourceMapper

log = getLogger(__name__)


class LifecycleController[M: RemoteResource]:
    def __init__(self, mapper: ResourceMapper[M], client: RemoteClient) -> None:
        self.mapper = mapper
        self.client = client

    @property
    def kind(self) -> str:
        return self.mapper.kind

    # ------------------------------------------------------------------ operations

    def create(self, desired: M) -> M:
        """Create the remote counterpart of ``desired`` and return the observed model.

        On failure nothing is recorded: the caller still holds a ``planned`` resource.
        """

        if self.mapper.mutability is Mutability.CONTENT_CHECKSUM:
            content_mapper = self._content_mapper()
            content = read_artifact(content_mapper.artifact_path(desired))
            return self._upload(content_mapper, desired, content)

        response = self._send("POST", self.mapper.path, self.mapper.to_request(desired))
        if not response.ok:
            raise RemoteRejectionError(
                f"create {self.kind}", status_code=response.status_code, body=response.body
            )
        observed = self._decode(response, desired)
        log.info(f"Created {self.kind} {observed.id}")
        return observed

    def read(self, identifier: str, *, prior: M | None = None) -> ReadResult[M]:
        """Fetch the current remote state.

        A 404 is expected drift and comes back as ``not_found``; the identifier must
        not be reused afterwards.
        """

        if not identifier:
            return ReadResult(not_found=True)

        response = self._send("GET", self._item_path(identifier))
        if response.not_found:
            log.info(f"{self.kind} {identifier} no longer exists remotely")
            return ReadResult(not_found=True)
        if not response.ok:
            raise RemoteRejectionError(
                f"read {self.kind} {identifier}",
                status_code=response.status_code,
                body=response.body,
            )
        return ReadResult(observed=self._decode(response, prior))

    def update(self, identifier: str, previous: M, desired: M) -> UpdateResult[M]:
        if not identifier:
            observed = self.create(desired)
            return UpdateResult(observed=observed, identifier=observed.id)

        match self.mapper.mutability:
            case Mutability.CONTENT_CHECKSUM:
                return self._update_content(identifier, previous, desired)
            case Mutability.REPLACE_ONLY:
                return self._replace(identifier, lambda: self.create(desired))
            case Mutability.IN_PLACE:
                return self._update_in_place(identifier, previous, desired)

    def delete(self, identifier: str) -> None:
        """Remove the remote counterpart. A resource that is already gone is not an error."""

        if not identifier:
            log.debug(f"Nothing to delete for {self.kind}: no identifier")
            return

        response = self._send("DELETE", self._item_path(identifier))
        if response.not_found:
            log.info(f"{self.kind} {identifier} was already deleted")
            return
        if not response.ok:
            raise RemoteRejectionError(
                f"delete {self.kind} {identifier}",
                status_code=response.status_code,
                body=response.body,
            )
        log.info(f"Deleted {self.kind} {identifier}")

    # ------------------------------------------------------------------ planning

    def plan(self, observed: M | None, desired: M) -> PlannedChange:
        if observed is None or not observed.id:
            return PlannedChange(action=PlanAction.CREATE, reason="no remote identifier")

        if self.mapper.mutability is Mutability.CONTENT_CHECKSUM:
            content_mapper = self._content_mapper()
            fresh = digest(read_artifact(content_mapper.artifact_path(desired)))
            if content_mapper.recorded_checksum(observed) == fresh:
                return PlannedChange(action=PlanAction.NOOP, reason="artifact checksum unchanged")
            return PlannedChange(action=PlanAction.REPLACE, reason="artifact checksum changed")

        if _covers(self.mapper.to_request(desired), self.mapper.to_request(observed)):
            return PlannedChange(action=PlanAction.NOOP, reason="remote state matches")
        if self.mapper.mutability is Mutability.IN_PLACE:
            return PlannedChange(action=PlanAction.UPDATE, reason="remote state drifted")
        return PlannedChange(
            action=PlanAction.REPLACE, reason=f"{self.kind} cannot be updated in place"
        )

    def reconcile(self, binding: Binding[M], desired: M) -> Binding[M]:
        """Drive one binding one step towards ``desired``."""

        match binding.state:
            case LifecycleState.PLANNED:
                return Binding(state=LifecycleState.BOUND, model=self.create(desired))
            case LifecycleState.ORPHANED | LifecycleState.TERMINATED:
                raise LocalPreconditionError(
                    f"Cannot reconcile {binding.state} {self.kind} {binding.identifier}"
                )
            case LifecycleState.BOUND:
                pass

        result = self.read(binding.identifier, prior=binding.model)
        if result.not_found or result.observed is None:
            return Binding(state=LifecycleState.ORPHANED, model=binding.model)
        observed = result.observed

        change = self.plan(observed, desired)
        log.debug(f"Planned {change.action} for {self.kind} {observed.id}: {change.reason}")
        if change.action is PlanAction.NOOP:
            return Binding(state=LifecycleState.BOUND, model=observed)
        updated = self.update(observed.id, observed, desired)
        return Binding(state=LifecycleState.BOUND, model=updated.observed)

    def destroy(self, binding: Binding[M]) -> Binding[M]:
        if binding.state is LifecycleState.BOUND:
            self.delete(binding.identifier)
        model = binding.model
        if model is not None:
            model = dataclasses.replace(model, id="")
        return Binding(state=LifecycleState.TERMINATED, model=model)

    # ------------------------------------------------------------------ helpers

    def _update_in_place(self, identifier: str, previous: M, desired: M) -> UpdateResult[M]:
        body = _with_cleared(
            self.mapper.to_update_request(desired), self.mapper.to_update_request(previous)
        )
        response = self._send("PATCH", self._item_path(identifier), body)
        if response.not_found:
            raise ResourceNotFoundError(
                f"update {self.kind}", identifier=identifier, body=response.body
            )
        if not response.ok:
            raise RemoteRejectionError(
                f"update {self.kind} {identifier}",
                status_code=response.status_code,
                body=response.body,
            )
        observed = self._decode(response, desired)
        log.info(f"Updated {self.kind} {identifier}")
        return UpdateResult(observed=observed, identifier=observed.id or identifier)

    def _update_content(self, identifier: str, previous: M, desired: M) -> UpdateResult[M]:
        content_mapper = self._content_mapper()
        content = read_artifact(content_mapper.artifact_path(desired))
        fresh = digest(content)
        if content_mapper.recorded_checksum(previous) == fresh:
            log.info(f"{self.kind} {identifier} unchanged, checksum {fresh[:12]}")
            observed = content_mapper.with_checksum(previous, desired, fresh)
            return UpdateResult(observed=observed, identifier=identifier)
        return self._replace(identifier, lambda: self._upload(content_mapper, desired, content))

    def _replace(self, identifier: str, recreate: Callable[[], M]) -> UpdateResult[M]:
        self.delete(identifier)
        try:
            observed = recreate()
        except ReconciliationError as exc:
            log.error(f"Replacing {self.kind} {identifier} failed after delete: {exc}")
            raise ReplacementError(self.kind, deleted_identifier=identifier, cause=exc) from exc
        log.info(f"Replaced {self.kind} {identifier} with {observed.id}")
        return UpdateResult(observed=observed, identifier=observed.id)

    def _upload(self, content_mapper: ContentMapper[M], desired: M, content: bytes) -> M:
        path = content_mapper.artifact_path(desired)
        response = self.client.upload(content_mapper.field_name, path.name, content)
        log.debug(f"UPLOAD {self.mapper.path} {path.name} -> {response.status_code}")
        if not response.ok:
            raise RemoteRejectionError(
                f"upload {self.kind} {path.name}",
                status_code=response.status_code,
                body=response.body,
            )
        observed = self._decode(response, desired)
        log.info(f"Uploaded {self.kind} {observed.id} from {path}")
        return content_mapper.with_checksum(observed, desired, digest(content))

    def _decode(self, response: RemoteResponse, local: M | None) -> M:
        try:
            observed = self.mapper.from_response(response.body, local)
        except ValueError as exc:
            raise DecodeError(self.kind, exc) from exc
        if not observed.id:
            raise DecodeError(self.kind, ValueError("response carries no identifier"))
        return observed

    def _send(self, method: str, path: str, body: RequestBody | None = None) -> RemoteResponse:
        response = self.client.send(method, path, body)
        log.debug(f"{method} {path} -> {response.status_code}")
        return response

    def _item_path(self, identifier: str) -> str:
        return f"{self.mapper.path}/{identifier}"

    def _content_mapper(self) -> ContentMapper[M]:
        return cast("ContentMapper[M]", self.mapper)


def _covers(desired: object, observed: object) -> bool:
    """Whether ``observed`` already carries everything ``desired`` manages.

    Scalar keys missing from ``desired`` are unmanaged. A sub-tree or non-empty
    collection that ``observed`` holds and ``desired`` leaves out is drift. Lists
    compare element by element, since their order is part of the wire contract.
    """

    if isinstance(desired, dict):
        if not isinstance(observed, dict):
            return False
        if _dropped_keys(desired, observed):
            return False
        return all(
            key in observed and _covers(value, observed[key]) for key, value in desired.items()
        )
    if isinstance(desired, list):
        if not isinstance(observed, list) or len(desired) != len(observed):
            return False
        return all(_covers(d, o) for d, o in zip(desired, observed, strict=True))
    return desired == observed


def _dropped_keys(desired: Mapping[str, object], observed: Mapping[str, object]) -> list[str]:
    return [
        key
        for key, value in observed.items()
        if key not in desired and (isinstance(value, dict) or (isinstance(value, list) and value))
    ]


def _with_cleared(desired: RequestBody, previous: RequestBody) -> RequestBody:
    """Patch body that also removes what ``previous`` holds and ``desired`` dropped.

    A dropped sub-tree is sent as ``null`` and a dropped collection as ``[]``.
    """

    body = dict(desired)
    for key in _dropped_keys(desired, previous):
        body[key] = None if isinstance(previous[key], dict) else []
    for key, value in desired.items():
        before = previous.get(key)
        if isinstance(value, dict) and isinstance(before, dict):
            body[key] = _with_cleared(cast("RequestBody", value), cast("RequestBody", before))
    return body


__all__ = ["LifecycleController"]
