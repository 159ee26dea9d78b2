"""Translate tools between the typed tree and the Vapi wire format."""

from __future__ import annotations

from typing import TYPE_CHECKING

from vapisync.domain.model import (
    DTMF_TOOL_TYPE,
    FUNCTION_TOOL_TYPE,
    QUERY_TOOL_TYPE,
    FunctionDefinition,
    FunctionParameters,
    FunctionTool,
    QueryFunction,
    QueryKnowledgeBase,
    QueryTool,
    emit,
    from_wire,
    strings_from_wire,
    strings_to_wire,
)
from vapisync.domain.reconciliation import Mutability

from ..schema import FunctionToolPayload, QueryToolPayload
from ._common import (
    properties_from_wire,
    properties_to_wire,
    resource_fields,
    server_from_wire,
    server_to_wire,
)

if TYPE_CHECKING:
    from vapisync.domain.reconciliation import RequestBody

    from ..schema import FunctionPayload, QueryKnowledgeBasePayload


class FunctionToolTranslator:
    """Function and DTMF tools. The remote side rejects patches to them."""

    kind = "tool_function"
    path = "tool"
    mutability = Mutability.REPLACE_ONLY

    def to_request(self, model: FunctionTool) -> RequestBody:
        return function_tool_to_request(model)

    def to_update_request(self, model: FunctionTool) -> RequestBody:
        return function_tool_to_request(model)

    def from_response(self, body: bytes, local: FunctionTool | None) -> FunctionTool:
        payload = FunctionToolPayload.model_validate_json(body)
        if payload.type not in (None, FUNCTION_TOOL_TYPE, DTMF_TOOL_TYPE):
            raise ValueError(f"unexpected tool type {payload.type!r} for a function tool")
        return parse_function_tool(payload, local)


class QueryToolTranslator:
    kind = "tool_query"
    path = "tool"
    mutability = Mutability.IN_PLACE

    def to_request(self, model: QueryTool) -> RequestBody:
        return {"type": QUERY_TOOL_TYPE, **query_tool_to_request(model)}

    def to_update_request(self, model: QueryTool) -> RequestBody:
        # the type of an existing tool cannot be patched
        return query_tool_to_request(model)

    def from_response(self, body: bytes, local: QueryTool | None) -> QueryTool:
        payload = QueryToolPayload.model_validate_json(body)
        if payload.type not in (None, QUERY_TOOL_TYPE):
            raise ValueError(f"unexpected tool type {payload.type!r} for a query tool")
        return parse_query_tool(payload)


# --------------------------------------------------------------------------- function


def function_tool_to_request(tool: FunctionTool) -> RequestBody:
    body: RequestBody = {}
    emit(body, "type", tool.type)
    emit(body, "async", tool.async_)
    if tool.function is not None:
        body["function"] = _function_to_wire(tool.function)
    if tool.server is not None and tool.type.get() != DTMF_TOOL_TYPE:
        body["server"] = server_to_wire(tool.server)
    return body


def _function_to_wire(function: FunctionDefinition) -> RequestBody:
    body: RequestBody = {}
    emit(body, "name", function.name)
    emit(body, "description", function.description)
    emit(body, "async", function.async_)
    parameters = function.parameters
    if parameters is not None:
        nested: RequestBody = {}
        emit(nested, "type", parameters.type)
        if parameters.properties:
            nested["properties"] = properties_to_wire(parameters.properties)
        if parameters.required:
            nested["required"] = strings_to_wire(parameters.required)
        body["parameters"] = nested
    return body


def parse_function_tool(
    payload: FunctionToolPayload, local: FunctionTool | None = None
) -> FunctionTool:
    return FunctionTool(
        **resource_fields(payload),
        type=from_wire(payload.type),
        async_=from_wire(payload.async_),
        function=_parse_function(payload.function),
        server=server_from_wire(payload.server, local.server if local else None),
    )


def _parse_function(payload: FunctionPayload | None) -> FunctionDefinition | None:
    if payload is None:
        return None
    parameters = payload.parameters
    return FunctionDefinition(
        name=from_wire(payload.name),
        description=from_wire(payload.description),
        async_=from_wire(payload.async_),
        parameters=(
            FunctionParameters(
                type=from_wire(parameters.type),
                properties=properties_from_wire(parameters.properties),
                required=strings_from_wire(parameters.required),
            )
            if parameters is not None
            else None
        ),
    )


# --------------------------------------------------------------------------- query


def query_tool_to_request(tool: QueryTool) -> RequestBody:
    body: RequestBody = {}
    if tool.function is not None:
        function: RequestBody = {}
        emit(function, "name", tool.function.name)
        emit(function, "description", tool.function.description)
        body["function"] = function
    if tool.knowledge_bases:
        body["knowledgeBases"] = [_knowledge_base_to_wire(kb) for kb in tool.knowledge_bases]
    return body


def _knowledge_base_to_wire(knowledge_base: QueryKnowledgeBase) -> RequestBody:
    body: RequestBody = {}
    emit(body, "provider", knowledge_base.provider)
    emit(body, "name", knowledge_base.name)
    emit(body, "model", knowledge_base.model)
    emit(body, "description", knowledge_base.description)
    if knowledge_base.file_ids:
        body["fileIds"] = strings_to_wire(knowledge_base.file_ids)
    return body


def parse_query_tool(payload: QueryToolPayload) -> QueryTool:
    function = payload.function
    return QueryTool(
        **resource_fields(payload),
        function=(
            QueryFunction(
                name=from_wire(function.name), description=from_wire(function.description)
            )
            if function is not None
            else None
        ),
        knowledge_bases=[_parse_knowledge_base(kb) for kb in payload.knowledge_bases or []],
    )


def _parse_knowledge_base(payload: QueryKnowledgeBasePayload) -> QueryKnowledgeBase:
    return QueryKnowledgeBase(
        provider=from_wire(payload.provider),
        name=from_wire(payload.name),
        model=from_wire(payload.model),
        description=from_wire(payload.description),
        file_ids=strings_from_wire(payload.file_ids),
    )
