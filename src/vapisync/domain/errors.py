"""Error taxonomy for the reconciliation engine.

Every failure path in the engine raises one of these types; no lifecycle operation
returns an empty result to mask a failure.
"""

from __future__ import annotations

from pathlib import Path


class ReconciliationError(RuntimeError):
    """Base class for all engine errors."""


class LocalPreconditionError(ReconciliationError):
    """Local state is unusable (unreadable artifact, malformed local model)."""


class ArtifactUnreadableError(LocalPreconditionError):
    """A content artifact could not be read from the local filesystem."""

    def __init__(self, path: Path | str, cause: OSError) -> None:
        super().__init__(f"Unable to read artifact {path}: {cause}")
        self.path = Path(path)
        self.cause = cause


class TransportError(ReconciliationError):
    """The remote call did not complete (connection failure, timeout)."""


class RemoteRejectionError(ReconciliationError):
    """The remote side answered with a non-2xx status."""

    def __init__(self, operation: str, *, status_code: int, body: bytes) -> None:
        text = body.decode("utf-8", errors="replace")
        super().__init__(f"{operation} rejected [{status_code}]: {text}")
        self.operation = operation
        self.status_code = status_code
        self.body = body


class ResourceNotFoundError(RemoteRejectionError):
    """The remote side reports that the identifier does not exist."""

    def __init__(self, operation: str, *, identifier: str, body: bytes = b"") -> None:
        super().__init__(operation, status_code=404, body=body)
        self.identifier = identifier


class DecodeError(ReconciliationError):
    """A response body does not match the expected shape."""

    def __init__(self, kind: str, cause: Exception) -> None:
        super().__init__(f"Unable to decode {kind} response: {cause}")
        self.kind = kind
        self.cause = cause


class ReplacementError(ReconciliationError):
    """Delete succeeded during a replace, but the follow-up create failed.

    The deleted identifier no longer exists remotely and must not be reused; the
    resource is left without a remote counterpart.
    """

    def __init__(self, kind: str, *, deleted_identifier: str, cause: ReconciliationError) -> None:
        super().__init__(
            f"Replacing {kind} {deleted_identifier} failed after delete: {cause}"
        )
        self.kind = kind
        self.deleted_identifier = deleted_identifier
        self.cause = cause
