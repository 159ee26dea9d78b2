"""Resource reconciliation engine."""

from __future__ import annotations

from .contracts import (
    Binding,
    ContentMapper,
    LifecycleState,
    Mutability,
    PlanAction,
    PlannedChange,
    ReadResult,
    RequestBody,
    ResourceMapper,
    UpdateResult,
)
from .controller import LifecycleController

__all__ = [
    "Binding",
    "ContentMapper",
    "LifecycleController",
    "LifecycleState",
    "Mutability",
    "PlanAction",
    "PlannedChange",
    "ReadResult",
    "RequestBody",
    "ResourceMapper",
    "UpdateResult",
]
