"""Typed trees for callable tools."""

from __future__ import annotations

from dataclasses import dataclass, field

from .common import Property, RemoteResource, Server
from .values import UNSET, Scalar, present

FUNCTION_TOOL_TYPE = "function"
DTMF_TOOL_TYPE = "dtmf"
QUERY_TOOL_TYPE = "query"


@dataclass(slots=True, kw_only=True)
class FunctionParameters:
    type: Scalar[str] = UNSET
    properties: dict[str, Property] = field(default_factory=dict)
    required: list[str] = field(default_factory=list)


@dataclass(slots=True, kw_only=True)
class FunctionDefinition:
    name: Scalar[str] = UNSET
    description: Scalar[str] = UNSET
    async_: Scalar[bool] = UNSET
    parameters: FunctionParameters | None = None


@dataclass(slots=True, kw_only=True)
class FunctionTool(RemoteResource):
    type: Scalar[str] = field(default_factory=lambda: present(FUNCTION_TOOL_TYPE))
    async_: Scalar[bool] = UNSET
    function: FunctionDefinition | None = None
    server: Server | None = None


@dataclass(slots=True, kw_only=True)
class QueryKnowledgeBase:
    provider: Scalar[str] = UNSET
    name: Scalar[str] = UNSET
    model: Scalar[str] = UNSET
    description: Scalar[str] = UNSET
    file_ids: list[str] = field(default_factory=list)


@dataclass(slots=True, kw_only=True)
class QueryFunction:
    name: Scalar[str] = UNSET
    description: Scalar[str] = UNSET


@dataclass(slots=True, kw_only=True)
class QueryTool(RemoteResource):
    function: QueryFunction | None = None
    knowledge_bases: list[QueryKnowledgeBase] = field(default_factory=list)
