from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from vapisync.adapters.vapi import resource_kinds
from vapisync.app import delete_resource, read_resource, upload_file
from vapisync.config import ConfigurationError, configure_logging
from vapisync.domain.model import Scalar

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)

EXIT_NOT_FOUND = 3


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Reconcile Vapi resources")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    get = subparsers.add_parser("get", help="Read a resource and print it as JSON")
    get.add_argument("kind", choices=resource_kinds(), help="Resource kind")
    get.add_argument("identifier", help="Remote resource id")

    delete = subparsers.add_parser("delete", help="Delete a resource")
    delete.add_argument("kind", choices=resource_kinds(), help="Resource kind")
    delete.add_argument("identifier", help="Remote resource id")

    upload = subparsers.add_parser("upload", help="Upload a local file")
    upload.add_argument("path", type=Path, help="Path of the artifact to upload")

    return parser.parse_args(list(argv))


def to_jsonable(value: object) -> object:
    """Plain JSON view of a resource model. Unset and null scalars become ``None``."""

    if isinstance(value, Scalar):
        return value.value
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            item.name: to_jsonable(getattr(value, item.name))
            for item in dataclasses.fields(value)
        }
    if isinstance(value, dict):
        return {str(key): to_jsonable(item) for key, item in value.items()}
    if isinstance(value, list | tuple):
        return [to_jsonable(item) for item in value]
    if isinstance(value, Path):
        return str(value)
    return value


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    try:
        if parsed_args.command == "get":
            result = read_resource(parsed_args.kind, parsed_args.identifier)
            if result.not_found:
                sys.exit(EXIT_NOT_FOUND)
            print(json.dumps(to_jsonable(result.observed), indent=2))  # noqa: T201
        elif parsed_args.command == "delete":
            delete_resource(parsed_args.kind, parsed_args.identifier)
        elif parsed_args.command == "upload":
            uploaded = upload_file(parsed_args.path)
            print(f"{uploaded.id} {uploaded.checksum.get('')}")  # noqa: T201
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301
    except ConfigurationError:
        log.exception("Configuration error")
        sys.exit(2)
    except Exception:
        log.exception(f"Fatal error during {parsed_args.command}")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
