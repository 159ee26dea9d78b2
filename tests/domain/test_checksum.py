from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from vapisync.domain.checksum import digest, digest_file
from vapisync.domain.errors import ArtifactUnreadableError, LocalPreconditionError

if TYPE_CHECKING:
    from pathlib import Path


def test_digest_is_fixed_length_hex() -> None:
    value = digest(b"content-1")

    assert len(value) == 64
    assert int(value, 16) >= 0


def test_digest_discriminates_content() -> None:
    assert digest(b"content-1") == digest(b"content-1")
    assert digest(b"content-1") != digest(b"content-2")


def test_digest_file_matches_digest(tmp_path: Path) -> None:
    path = tmp_path / "artifact.bin"
    path.write_bytes(b"content-1")

    assert digest_file(path) == digest(b"content-1")


def test_digest_file_reports_unreadable_artifact(tmp_path: Path) -> None:
    missing = tmp_path / "gone.txt"

    with pytest.raises(ArtifactUnreadableError) as exc:
        digest_file(missing)

    assert isinstance(exc.value, LocalPreconditionError)
    assert exc.value.path == missing
    assert isinstance(exc.value.cause, FileNotFoundError)
