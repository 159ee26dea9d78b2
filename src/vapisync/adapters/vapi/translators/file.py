"""Translate uploaded files between the typed tree and the Vapi wire format."""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING

from vapisync.domain.errors import LocalPreconditionError
from vapisync.domain.model import NULL, File, from_wire, present
from vapisync.domain.reconciliation import Mutability

from ..schema import FilePayload
from ._common import resource_fields

if TYPE_CHECKING:
    from pathlib import Path

    from vapisync.domain.reconciliation import RequestBody


class FileTranslator:
    """Files carry no request body: their content is the uploaded artifact."""

    kind = "file"
    path = "file"
    mutability = Mutability.CONTENT_CHECKSUM
    field_name = "file"

    def to_request(self, model: File) -> RequestBody:
        return {}

    def to_update_request(self, model: File) -> RequestBody:
        return {}

    def from_response(self, body: bytes, local: File | None) -> File:
        return parse_file(FilePayload.model_validate_json(body), local)

    def artifact_path(self, model: File) -> Path:
        if model.file_path is None:
            raise LocalPreconditionError(f"{self.kind} {model.id or '<new>'} has no file_path")
        return model.file_path

    def recorded_checksum(self, model: File) -> str | None:
        return model.checksum.get()

    def with_checksum(self, observed: File, desired: File, checksum: str) -> File:
        return dataclasses.replace(
            observed, file_path=desired.file_path, checksum=present(checksum)
        )


def parse_file(payload: FilePayload, local: File | None = None) -> File:
    """Decode a file response. The artifact path and checksum only exist locally."""

    return File(
        **resource_fields(payload),
        file_path=local.file_path if local else None,
        checksum=local.checksum if local else NULL,
        name=from_wire(payload.name),
        original_name=from_wire(payload.original_name),
        bytes=from_wire(payload.bytes_),
        mimetype=from_wire(payload.mimetype),
        path=from_wire(payload.path),
        url=from_wire(payload.url),
        status=from_wire(payload.status),
        purpose=from_wire(payload.purpose),
        bucket=from_wire(payload.bucket),
        metadata=dict(payload.metadata or {}),
    )
