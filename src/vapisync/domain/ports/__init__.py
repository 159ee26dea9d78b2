"""Domain port definitions for adapters."""

from __future__ import annotations

from .remote import RemoteClient, RemoteResponse

__all__ = ["RemoteClient", "RemoteResponse"]
