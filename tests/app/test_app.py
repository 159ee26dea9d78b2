from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from tests.helpers.remote import FakeRemoteClient
from vapisync.adapters.vapi import resource_kinds
from vapisync.app import build_controller, delete_resource, read_resource, upload_file
from vapisync.domain.checksum import digest
from vapisync.domain.model import present
from vapisync.domain.reconciliation import Mutability

if TYPE_CHECKING:
    from pathlib import Path


def test_every_kind_has_a_controller(remote: FakeRemoteClient) -> None:
    kinds = resource_kinds()

    assert kinds == [
        "assistant",
        "file",
        "sip_trunk",
        "sip_trunk_phone_number",
        "tool_function",
        "tool_query",
        "twilio_phone_number",
    ]
    assert {build_controller(kind, client=remote).kind for kind in kinds} == set(kinds)


@pytest.mark.parametrize(
    ("kind", "mutability"),
    [
        ("assistant", Mutability.REPLACE_ONLY),
        ("file", Mutability.CONTENT_CHECKSUM),
        ("sip_trunk", Mutability.IN_PLACE),
        ("twilio_phone_number", Mutability.REPLACE_ONLY),
        ("sip_trunk_phone_number", Mutability.REPLACE_ONLY),
        ("tool_function", Mutability.REPLACE_ONLY),
        ("tool_query", Mutability.IN_PLACE),
    ],
)
def test_mutability_is_fixed_per_kind(
    remote: FakeRemoteClient, kind: str, mutability: Mutability
) -> None:
    assert build_controller(kind, client=remote).mapper.mutability is mutability


def test_unknown_kind_lists_known_kinds(remote: FakeRemoteClient) -> None:
    with pytest.raises(KeyError, match="assistant"):
        build_controller("squad", client=remote)


def test_read_resource_logs_missing_resource(
    remote: FakeRemoteClient, caplog: pytest.LogCaptureFixture
) -> None:
    remote.queue(404)

    with caplog.at_level(logging.WARNING, logger="vapisync.app"):
        result = read_resource("tool_query", "tool-2", client=remote)

    assert result.not_found
    assert "tool_query tool-2 not found" in caplog.text


def test_delete_resource_uses_kind_path(remote: FakeRemoteClient) -> None:
    remote.queue(200)

    delete_resource("sip_trunk", "cred-1", client=remote)

    assert [(call.method, call.path) for call in remote.calls] == [("DELETE", "credential/cred-1")]


def test_upload_file_records_checksum(
    remote: FakeRemoteClient, artifact: Path, file_payload: dict[str, object]
) -> None:
    remote.queue(201, file_payload)

    uploaded = upload_file(artifact, client=remote)

    assert uploaded.id == "file-1"
    assert uploaded.checksum == present(digest(b"content-1"))
