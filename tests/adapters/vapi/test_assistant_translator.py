from __future__ import annotations

import json
import logging

import pytest

from vapisync.adapters.vapi.translators import AssistantTranslator, assistant_to_request
from vapisync.domain.model import (
    NULL,
    AnalysisPlan,
    ArtifactPlan,
    Assistant,
    KnowledgeBase,
    LanguageModel,
    Message,
    Property,
    Server,
    StartSpeakingPlan,
    StructuredDataSchema,
    TranscriptionEndpointingPlan,
    Voice,
    present,
)
from vapisync.domain.reconciliation import Mutability

translator = AssistantTranslator()


def _decode(payload: dict[str, object], local: Assistant | None = None) -> Assistant:
    return translator.from_response(json.dumps(payload).encode(), local)


def _full_assistant() -> Assistant:
    return Assistant(
        name=present("demo"),
        first_message=present("Hello"),
        language=present("en"),
        interruptions_enabled=present(True),
        fillers_enabled=present(False),
        live_transcripts_enabled=present(True),
        keywords=["booking:2", "reschedule"],
        hipaa_enabled=present(False),
        silence_timeout_seconds=present(0.0),
        num_words_to_interrupt_assistant=present(0),
        client_messages=["transcript", "hang"],
        end_call_phrases=["bye"],
        model=LanguageModel(
            provider=present("openai"),
            model=present("gpt-4o"),
            temperature=present(0.0),
            tool_ids=["tool-b", "tool-a"],
            messages=[Message(role=present("system"), content=present("Be brief."))],
            knowledge_base=KnowledgeBase(provider=present("canonical"), file_ids=["file-1"]),
        ),
        voice=Voice(provider=present("11labs"), voice_id=present("burt")),
        start_speaking_plan=StartSpeakingPlan(
            wait_seconds=present(0.4),
            transcription_endpointing_plan=TranscriptionEndpointingPlan(
                on_number_seconds=present(0.5)
            ),
        ),
        analysis_plan=AnalysisPlan(
            structured_data_schema=StructuredDataSchema(
                type=present("object"),
                properties={
                    "intent": Property(
                        type=present("string"), extra={"enum": ["booking", "support"]}
                    ),
                },
            ),
        ),
        server=Server(url=present("https://hooks.example.com"), secret=present("s3cret")),
        artifact_plan=ArtifactPlan(recording_format=present("wav;l16")),
        phone_number_id=present("pn-1"),
    )


def test_unset_silence_timeout_is_omitted() -> None:
    body = assistant_to_request(Assistant(name=present("demo")))

    assert body == {"name": "demo", "artifactPlan": {"recordingFormat": "mp3"}}


def test_explicit_zero_silence_timeout_is_emitted() -> None:
    body = assistant_to_request(Assistant(name=present("demo"), silence_timeout_seconds=present(0)))

    assert "silenceTimeoutSeconds" in body
    assert body["silenceTimeoutSeconds"] == 0


def test_null_scalar_is_omitted() -> None:
    body = assistant_to_request(Assistant(name=present("demo"), silence_timeout_seconds=NULL))

    assert "silenceTimeoutSeconds" not in body


def test_recording_format_default_applies_to_empty_artifact_plan() -> None:
    body = assistant_to_request(Assistant(artifact_plan=ArtifactPlan()))

    assert body["artifactPlan"] == {"recordingFormat": "mp3"}


def test_present_empty_sub_tree_is_sent_as_empty_object() -> None:
    body = assistant_to_request(Assistant(voice=Voice()))

    assert body["voice"] == {}


def test_request_round_trips_through_response() -> None:
    desired = _full_assistant()
    body = assistant_to_request(desired)

    observed = _decode({**body, "id": "asst-9"}, desired)

    assert observed.id == "asst-9"
    assert assistant_to_request(observed) == body
    assert observed.model is not None
    assert observed.model.tool_ids == ["tool-b", "tool-a"]
    assert observed.silence_timeout_seconds == present(0.0)
    assert observed.fillers_enabled == present(False)
    assert observed.keywords == ["booking:2", "reschedule"]
    assert observed.artifact_plan == ArtifactPlan(recording_format=present("wav;l16"))
    assert observed.phone_number_id == present("pn-1")


def test_response_populates_tree(assistant_payload: dict[str, object]) -> None:
    observed = _decode(assistant_payload)

    assert observed.id == "asst-1"
    assert observed.org_id == present("org-1")
    assert observed.name == present("demo")
    assert observed.voicemail_message == NULL
    assert observed.num_words_to_interrupt_assistant == present(0)
    assert observed.client_messages == ["transcript", "hang", "function-call"]
    assert observed.transcriber is not None
    assert observed.transcriber.model == present("nova-2")
    assert observed.model is not None
    assert observed.model.knowledge_base is not None
    assert observed.model.knowledge_base.top_k == present(3)
    assert observed.start_speaking_plan is not None
    endpointing = observed.start_speaking_plan.transcription_endpointing_plan
    assert endpointing is not None
    assert endpointing.on_no_punctuation_seconds == present(1.5)
    assert observed.message_plan is not None
    assert observed.message_plan.idle_messages == ["Are you still there?"]


def test_missing_sub_trees_clear_previous_values(assistant_payload: dict[str, object]) -> None:
    previous = _decode(assistant_payload)
    assert previous.voice is not None
    trimmed = {
        key: value
        for key, value in assistant_payload.items()
        if key not in {"voice", "model", "analysisPlan"}
    }

    observed = _decode(trimmed, previous)

    assert observed.voice is None
    assert observed.model is None
    assert observed.analysis_plan is None
    assert previous.voice is not None


def test_empty_sub_tree_in_response_is_present() -> None:
    observed = _decode({"id": "asst-1", "voice": {}})

    assert observed.voice == Voice(
        provider=NULL, voice_id=NULL, model=NULL, stability=NULL, similarity_boost=NULL
    )


@pytest.mark.parametrize("wire", [None, []])
def test_absent_or_empty_collections_become_empty(wire: list[str] | None) -> None:
    payload: dict[str, object] = {"id": "asst-1"}
    if wire is not None:
        payload["clientMessages"] = wire

    observed = _decode(payload, Assistant(client_messages=["stale"]))

    assert observed.client_messages == []


def test_write_only_server_secret_is_kept(assistant_payload: dict[str, object]) -> None:
    local = Assistant(
        server=Server(url=present("https://hooks.example.com/vapi"), secret=present("s3cret"))
    )

    observed = _decode(assistant_payload, local)

    assert observed.server is not None
    assert observed.server.secret == present("s3cret")
    assert observed.server.timeout_seconds == present(20)


def test_property_extras_are_kept_and_re_emitted(assistant_payload: dict[str, object]) -> None:
    observed = _decode(assistant_payload)

    assert observed.analysis_plan is not None
    schema = observed.analysis_plan.structured_data_schema
    assert schema is not None
    assert list(schema.properties) == ["callerName", "intent"]
    assert schema.properties["intent"].extra == {"enum": ["booking", "support"]}
    assert schema.properties["callerName"].description == present("Name of the caller")

    body = assistant_to_request(observed)
    analysis_plan = body["analysisPlan"]
    assert isinstance(analysis_plan, dict)
    assert analysis_plan["structuredDataSchema"]["properties"]["intent"] == {
        "type": "string",
        "enum": ["booking", "support"],
    }


def test_unmodeled_property_keys_are_logged_once(
    assistant_payload: dict[str, object], caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.WARNING, logger="vapisync.adapters.vapi.schema"):
        _decode(assistant_payload)
        _decode(assistant_payload)

    warnings = [record for record in caplog.records if "unmodeled keys" in record.getMessage()]
    assert len(warnings) == 1
    assert "enum" in warnings[0].getMessage()


def test_update_request_matches_create_request() -> None:
    desired = _full_assistant()

    assert translator.to_update_request(desired) == translator.to_request(desired)


def test_new_fields_are_emitted_in_wire_form() -> None:
    body = assistant_to_request(_full_assistant())

    assert body["language"] == "en"
    assert body["interruptionsEnabled"] is True
    assert body["fillersEnabled"] is False
    assert body["liveTranscriptsEnabled"] is True
    assert body["keywords"] == ["booking:2", "reschedule"]
    assert "phoneNumberId" not in body
    assert "parentId" not in body


def test_response_fills_remote_assigned_and_local_only_fields(
    assistant_payload: dict[str, object],
) -> None:
    local = Assistant(phone_number_id=present("pn-1"))

    observed = _decode(assistant_payload, local)

    assert observed.parent_id == present("asst-0")
    assert observed.language == present("en")
    assert observed.interruptions_enabled == present(True)
    assert observed.live_transcripts_enabled == present(True)
    assert observed.keywords == ["booking:2", "reschedule"]
    assert observed.phone_number_id == present("pn-1")
    assert _decode(assistant_payload).phone_number_id == NULL


def test_assistants_are_replaced_on_change() -> None:
    assert translator.mutability is Mutability.REPLACE_ONLY
