from __future__ import annotations

import json

import pytest

from tests.helpers.remote import load_payload
from vapisync.adapters.vapi.translators import FunctionToolTranslator, QueryToolTranslator
from vapisync.domain.model import (
    FunctionDefinition,
    FunctionParameters,
    FunctionTool,
    Property,
    QueryFunction,
    QueryKnowledgeBase,
    QueryTool,
    Server,
    present,
)
from vapisync.domain.reconciliation import Mutability

function_tools = FunctionToolTranslator()
query_tools = QueryToolTranslator()


def _function_tool(tool_type: str = "function") -> FunctionTool:
    return FunctionTool(
        type=present(tool_type),
        function=FunctionDefinition(
            name=present("book_appointment"),
            async_=present(False),
            parameters=FunctionParameters(
                type=present("object"),
                properties={
                    "slot": Property(type=present("string"), extra={"enum": ["am", "pm"]}),
                    "date": Property(type=present("string"), description=present("ISO date")),
                },
                required=["slot", "date"],
            ),
        ),
        server=Server(url=present("https://hooks.example.com/tools"), secret=present("s3cret")),
    )


def test_function_tool_request() -> None:
    body = function_tools.to_request(_function_tool())

    assert body == {
        "type": "function",
        "function": {
            "name": "book_appointment",
            "async": False,
            "parameters": {
                "type": "object",
                "properties": {
                    "slot": {"type": "string", "enum": ["am", "pm"]},
                    "date": {"type": "string", "description": "ISO date"},
                },
                "required": ["slot", "date"],
            },
        },
        "server": {"url": "https://hooks.example.com/tools", "secret": "s3cret"},
    }


def test_dtmf_tool_omits_server() -> None:
    body = function_tools.to_request(_function_tool("dtmf"))

    assert body["type"] == "dtmf"
    assert "server" not in body


def test_default_function_tool_type() -> None:
    assert function_tools.to_request(FunctionTool()) == {"type": "function"}


def test_function_tool_round_trip_keeps_secret() -> None:
    desired = _function_tool()
    body = function_tools.to_request(desired)
    echoed = {**body, "id": "tool-9", "server": {"url": "https://hooks.example.com/tools"}}

    observed = function_tools.from_response(json.dumps(echoed).encode(), desired)

    assert observed.id == "tool-9"
    assert function_tools.to_request(observed) == body


def test_function_tool_response_fixture() -> None:
    observed = function_tools.from_response(
        json.dumps(load_payload("tool_function")).encode(), None
    )

    assert observed.function is not None
    assert observed.function.parameters is not None
    assert observed.function.parameters.required == ["date", "slot"]
    assert observed.function.parameters.properties["slot"].extra == {
        "enum": ["morning", "afternoon"]
    }
    assert observed.server is not None
    assert observed.server.secret.is_null


def test_function_translator_rejects_query_tools() -> None:
    with pytest.raises(ValueError, match="query"):
        function_tools.from_response(json.dumps(load_payload("tool_query")).encode(), None)


def test_query_tool_type_only_sent_on_create() -> None:
    tool = QueryTool(
        function=QueryFunction(name=present("faq_lookup")),
        knowledge_bases=[QueryKnowledgeBase(provider=present("google"), file_ids=["f-2", "f-1"])],
    )

    create = query_tools.to_request(tool)
    update = query_tools.to_update_request(tool)

    assert create["type"] == "query"
    assert "type" not in update
    assert create == {"type": "query", **update}
    assert update["knowledgeBases"] == [{"provider": "google", "fileIds": ["f-2", "f-1"]}]
    assert query_tools.mutability is Mutability.IN_PLACE


def test_query_tool_response_fixture() -> None:
    observed = query_tools.from_response(json.dumps(load_payload("tool_query")).encode(), None)

    assert observed.function is not None
    assert observed.function.name == present("faq_lookup")
    assert len(observed.knowledge_bases) == 1
    assert observed.knowledge_bases[0].file_ids == ["file-1", "file-2"]


def test_query_tool_missing_function_is_cleared() -> None:
    local = QueryTool(function=QueryFunction(name=present("stale")))

    observed = query_tools.from_response(b'{"id": "tool-2", "type": "query"}', local)

    assert observed.function is None
    assert observed.knowledge_bases == []
