from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tests.helpers.remote import FakeRemoteClient, load_payload
from vapisync.adapters.vapi.schema import PropertyPayload

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


@pytest.fixture
def remote() -> FakeRemoteClient:
    return FakeRemoteClient()


@pytest.fixture
def assistant_payload() -> dict[str, object]:
    return load_payload("assistant")


@pytest.fixture
def file_payload() -> dict[str, object]:
    return load_payload("file")


@pytest.fixture
def artifact(tmp_path: Path) -> Path:
    path = tmp_path / "faq.txt"
    path.write_bytes(b"content-1")
    return path


@pytest.fixture
def vapi_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VAPI_TOKEN", "test-token")
    monkeypatch.delenv("VAPI_URL", raising=False)
    monkeypatch.delenv("VAPI_TIMEOUT_SECONDS", raising=False)


@pytest.fixture(autouse=True)
def reset_unmodeled_key_log() -> Iterator[None]:
    PropertyPayload._logged_extra_keys.clear()  # noqa: SLF001  # type: ignore[reportPrivateUsage]
    yield
    PropertyPayload._logged_extra_keys.clear()  # noqa: SLF001  # type: ignore[reportPrivateUsage]
