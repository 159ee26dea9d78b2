"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING, Any

from vapisync.adapters.vapi import VapiClient, get_translator
from vapisync.domain.model import File
from vapisync.domain.reconciliation import LifecycleController

if TYPE_CHECKING:
    from vapisync.domain.ports import RemoteClient
    from vapisync.domain.reconciliation import ReadResult

log = getLogger(__name__)


def build_controller(
    kind: str, *, client: RemoteClient | None = None
) -> LifecycleController[Any]:
    """Wire the translator for ``kind`` to a remote client."""

    return LifecycleController(get_translator(kind), client or VapiClient())


def read_resource(
    kind: str, identifier: str, *, client: RemoteClient | None = None
) -> ReadResult[Any]:
    result = build_controller(kind, client=client).read(identifier)
    if result.not_found:
        log.warning(f"{kind} {identifier} not found")
    return result


def delete_resource(kind: str, identifier: str, *, client: RemoteClient | None = None) -> None:
    build_controller(kind, client=client).delete(identifier)


def upload_file(path: Path | str, *, client: RemoteClient | None = None) -> File:
    controller: LifecycleController[File] = build_controller("file", client=client)
    return controller.create(File(file_path=Path(path)))
