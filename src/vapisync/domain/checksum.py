"""Content digests used as change markers for uploaded artifacts."""

from __future__ import annotations

import hashlib
from pathlib import Path

from .errors import ArtifactUnreadableError


def digest(content: bytes) -> str:
    """Return the SHA-256 hex digest of ``content``."""

    return hashlib.sha256(content).hexdigest()


def read_artifact(path: Path | str) -> bytes:
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        raise ArtifactUnreadableError(path, exc) from exc


def digest_file(path: Path | str) -> str:
    return digest(read_artifact(path))
