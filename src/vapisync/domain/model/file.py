"""Typed tree for an uploaded file."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .common import RemoteResource
from .values import UNSET, Scalar

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(slots=True, kw_only=True)
class File(RemoteResource):
    """A local artifact mirrored as a remote file.

    ``file_path`` is the desired state; ``checksum`` is the digest recorded when the
    artifact was last uploaded. Everything else is computed by the remote side.
    """

    file_path: Path | None = None
    checksum: Scalar[str] = UNSET

    name: Scalar[str] = UNSET
    original_name: Scalar[str] = UNSET
    bytes: Scalar[int] = UNSET
    mimetype: Scalar[str] = UNSET
    path: Scalar[str] = UNSET
    url: Scalar[str] = UNSET
    status: Scalar[str] = UNSET
    purpose: Scalar[str] = UNSET
    bucket: Scalar[str] = UNSET
    metadata: dict[str, object] = field(default_factory=dict)
