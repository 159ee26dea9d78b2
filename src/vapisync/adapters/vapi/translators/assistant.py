"""Translate assistants between the typed tree and the Vapi wire format."""

from __future__ import annotations

from typing import TYPE_CHECKING

from vapisync.domain.model import (
    DEFAULT_RECORDING_FORMAT,
    NULL,
    AnalysisPlan,
    ArtifactPlan,
    Assistant,
    KnowledgeBase,
    LanguageModel,
    Message,
    MessagePlan,
    StartSpeakingPlan,
    StopSpeakingPlan,
    StructuredDataSchema,
    Transcriber,
    TranscriptionEndpointingPlan,
    Voice,
    emit,
    from_wire,
    strings_from_wire,
    strings_to_wire,
)
from vapisync.domain.reconciliation import Mutability

from ..schema import AssistantPayload
from ._common import (
    properties_from_wire,
    properties_to_wire,
    resource_fields,
    server_from_wire,
    server_to_wire,
)

if TYPE_CHECKING:
    from vapisync.domain.reconciliation import RequestBody

    from ..schema import (
        AnalysisPlanPayload,
        ArtifactPlanPayload,
        KnowledgeBasePayload,
        MessagePlanPayload,
        ModelPayload,
        StartSpeakingPlanPayload,
        StopSpeakingPlanPayload,
        StructuredDataSchemaPayload,
        TranscriberPayload,
        TranscriptionEndpointingPlanPayload,
        VoicePayload,
    )


class AssistantTranslator:
    """Every change to an assistant deletes and recreates it."""

    kind = "assistant"
    path = "assistant"
    mutability = Mutability.REPLACE_ONLY

    def to_request(self, model: Assistant) -> RequestBody:
        return assistant_to_request(model)

    def to_update_request(self, model: Assistant) -> RequestBody:
        return assistant_to_request(model)

    def from_response(self, body: bytes, local: Assistant | None) -> Assistant:
        return parse_assistant(AssistantPayload.model_validate_json(body), local)


# --------------------------------------------------------------------------- request


def assistant_to_request(assistant: Assistant) -> RequestBody:
    body: RequestBody = {}
    emit(body, "name", assistant.name)
    emit(body, "firstMessage", assistant.first_message)
    emit(body, "firstMessageMode", assistant.first_message_mode)
    emit(body, "voicemailMessage", assistant.voicemail_message)
    emit(body, "endCallMessage", assistant.end_call_message)
    emit(body, "backgroundSound", assistant.background_sound)
    emit(body, "forwardingPhoneNumber", assistant.forwarding_phone_number)
    emit(body, "language", assistant.language)

    emit(body, "hipaaEnabled", assistant.hipaa_enabled)
    emit(body, "recordingEnabled", assistant.recording_enabled)
    emit(body, "backgroundDenoisingEnabled", assistant.background_denoising_enabled)
    emit(body, "modelOutputInMessagesEnabled", assistant.model_output_in_messages_enabled)
    emit(body, "endCallFunctionEnabled", assistant.end_call_function_enabled)
    emit(body, "dialKeypadFunctionEnabled", assistant.dial_keypad_function_enabled)
    emit(body, "interruptionsEnabled", assistant.interruptions_enabled)
    emit(body, "fillersEnabled", assistant.fillers_enabled)
    emit(body, "liveTranscriptsEnabled", assistant.live_transcripts_enabled)

    emit(body, "silenceTimeoutSeconds", assistant.silence_timeout_seconds)
    emit(body, "responseDelaySeconds", assistant.response_delay_seconds)
    emit(body, "numWordsToInterruptAssistant", assistant.num_words_to_interrupt_assistant)
    emit(body, "maxDurationSeconds", assistant.max_duration_seconds)

    if assistant.client_messages:
        body["clientMessages"] = strings_to_wire(assistant.client_messages)
    if assistant.server_messages:
        body["serverMessages"] = strings_to_wire(assistant.server_messages)
    if assistant.end_call_phrases:
        body["endCallPhrases"] = strings_to_wire(assistant.end_call_phrases)
    if assistant.keywords:
        body["keywords"] = strings_to_wire(assistant.keywords)

    if assistant.transcriber is not None:
        body["transcriber"] = _transcriber_to_wire(assistant.transcriber)
    if assistant.model is not None:
        body["model"] = _model_to_wire(assistant.model)
    if assistant.voice is not None:
        body["voice"] = _voice_to_wire(assistant.voice)
    if assistant.start_speaking_plan is not None:
        body["startSpeakingPlan"] = _start_speaking_plan_to_wire(assistant.start_speaking_plan)
    if assistant.stop_speaking_plan is not None:
        body["stopSpeakingPlan"] = _stop_speaking_plan_to_wire(assistant.stop_speaking_plan)
    if assistant.analysis_plan is not None:
        body["analysisPlan"] = _analysis_plan_to_wire(assistant.analysis_plan)
    if assistant.message_plan is not None:
        body["messagePlan"] = _message_plan_to_wire(assistant.message_plan)
    if assistant.server is not None:
        body["server"] = server_to_wire(assistant.server)
    body["artifactPlan"] = _artifact_plan_to_wire(assistant.artifact_plan)
    return body


def _transcriber_to_wire(transcriber: Transcriber) -> RequestBody:
    body: RequestBody = {}
    emit(body, "provider", transcriber.provider)
    emit(body, "model", transcriber.model)
    emit(body, "language", transcriber.language)
    return body


def _model_to_wire(model: LanguageModel) -> RequestBody:
    body: RequestBody = {}
    emit(body, "provider", model.provider)
    emit(body, "model", model.model)
    emit(body, "systemPrompt", model.system_prompt)
    emit(body, "temperature", model.temperature)
    emit(body, "maxTokens", model.max_tokens)
    if model.tool_ids:
        body["toolIds"] = strings_to_wire(model.tool_ids)
    if model.messages:
        messages: list[RequestBody] = []
        for message in model.messages:
            entry: RequestBody = {}
            emit(entry, "role", message.role)
            emit(entry, "content", message.content)
            messages.append(entry)
        body["messages"] = messages
    if model.knowledge_base is not None:
        knowledge_base: RequestBody = {}
        emit(knowledge_base, "provider", model.knowledge_base.provider)
        emit(knowledge_base, "topK", model.knowledge_base.top_k)
        if model.knowledge_base.file_ids:
            knowledge_base["fileIds"] = strings_to_wire(model.knowledge_base.file_ids)
        body["knowledgeBase"] = knowledge_base
    return body


def _voice_to_wire(voice: Voice) -> RequestBody:
    body: RequestBody = {}
    emit(body, "provider", voice.provider)
    emit(body, "voiceId", voice.voice_id)
    emit(body, "model", voice.model)
    emit(body, "stability", voice.stability)
    emit(body, "similarityBoost", voice.similarity_boost)
    return body


def _start_speaking_plan_to_wire(plan: StartSpeakingPlan) -> RequestBody:
    body: RequestBody = {}
    emit(body, "waitSeconds", plan.wait_seconds)
    emit(body, "smartEndpointingEnabled", plan.smart_endpointing_enabled)
    endpointing = plan.transcription_endpointing_plan
    if endpointing is not None:
        nested: RequestBody = {}
        emit(nested, "onPunctuationSeconds", endpointing.on_punctuation_seconds)
        emit(nested, "onNoPunctuationSeconds", endpointing.on_no_punctuation_seconds)
        emit(nested, "onNumberSeconds", endpointing.on_number_seconds)
        body["transcriptionEndpointingPlan"] = nested
    return body


def _stop_speaking_plan_to_wire(plan: StopSpeakingPlan) -> RequestBody:
    body: RequestBody = {}
    emit(body, "numWords", plan.num_words)
    emit(body, "voiceSeconds", plan.voice_seconds)
    emit(body, "backoffSeconds", plan.backoff_seconds)
    return body


def _analysis_plan_to_wire(plan: AnalysisPlan) -> RequestBody:
    body: RequestBody = {}
    emit(body, "summaryPrompt", plan.summary_prompt)
    emit(body, "structuredDataPrompt", plan.structured_data_prompt)
    if plan.structured_data_schema is not None:
        schema: RequestBody = {}
        emit(schema, "type", plan.structured_data_schema.type)
        if plan.structured_data_schema.properties:
            schema["properties"] = properties_to_wire(plan.structured_data_schema.properties)
        body["structuredDataSchema"] = schema
    emit(body, "successEvaluationPrompt", plan.success_evaluation_prompt)
    emit(body, "successEvaluationRubric", plan.success_evaluation_rubric)
    return body


def _message_plan_to_wire(plan: MessagePlan) -> RequestBody:
    body: RequestBody = {}
    if plan.idle_messages:
        body["idleMessages"] = strings_to_wire(plan.idle_messages)
    return body


def _artifact_plan_to_wire(plan: ArtifactPlan | None) -> RequestBody:
    # the recording format is always sent so local and remote agree after the first read
    recording_format = DEFAULT_RECORDING_FORMAT
    if plan is not None and plan.recording_format.is_present:
        recording_format = plan.recording_format.require("recording_format")
    return {"recordingFormat": recording_format}


# --------------------------------------------------------------------------- response


def parse_assistant(payload: AssistantPayload, local: Assistant | None = None) -> Assistant:
    return Assistant(
        **resource_fields(payload),
        name=from_wire(payload.name),
        first_message=from_wire(payload.first_message),
        first_message_mode=from_wire(payload.first_message_mode),
        voicemail_message=from_wire(payload.voicemail_message),
        end_call_message=from_wire(payload.end_call_message),
        background_sound=from_wire(payload.background_sound),
        forwarding_phone_number=from_wire(payload.forwarding_phone_number),
        language=from_wire(payload.language),
        hipaa_enabled=from_wire(payload.hipaa_enabled),
        recording_enabled=from_wire(payload.recording_enabled),
        background_denoising_enabled=from_wire(payload.background_denoising_enabled),
        model_output_in_messages_enabled=from_wire(payload.model_output_in_messages_enabled),
        end_call_function_enabled=from_wire(payload.end_call_function_enabled),
        dial_keypad_function_enabled=from_wire(payload.dial_keypad_function_enabled),
        interruptions_enabled=from_wire(payload.interruptions_enabled),
        fillers_enabled=from_wire(payload.fillers_enabled),
        live_transcripts_enabled=from_wire(payload.live_transcripts_enabled),
        silence_timeout_seconds=from_wire(payload.silence_timeout_seconds),
        response_delay_seconds=from_wire(payload.response_delay_seconds),
        num_words_to_interrupt_assistant=from_wire(payload.num_words_to_interrupt_assistant),
        max_duration_seconds=from_wire(payload.max_duration_seconds),
        client_messages=strings_from_wire(payload.client_messages),
        server_messages=strings_from_wire(payload.server_messages),
        end_call_phrases=strings_from_wire(payload.end_call_phrases),
        keywords=strings_from_wire(payload.keywords),
        transcriber=_parse_transcriber(payload.transcriber),
        model=_parse_model(payload.model),
        voice=_parse_voice(payload.voice),
        start_speaking_plan=_parse_start_speaking_plan(payload.start_speaking_plan),
        stop_speaking_plan=_parse_stop_speaking_plan(payload.stop_speaking_plan),
        analysis_plan=_parse_analysis_plan(payload.analysis_plan),
        message_plan=_parse_message_plan(payload.message_plan),
        server=server_from_wire(payload.server, local.server if local else None),
        artifact_plan=_parse_artifact_plan(payload.artifact_plan),
        parent_id=from_wire(payload.parent_id),
        phone_number_id=local.phone_number_id if local else NULL,
    )


def _parse_transcriber(payload: TranscriberPayload | None) -> Transcriber | None:
    if payload is None:
        return None
    return Transcriber(
        provider=from_wire(payload.provider),
        model=from_wire(payload.model),
        language=from_wire(payload.language),
    )


def _parse_knowledge_base(payload: KnowledgeBasePayload | None) -> KnowledgeBase | None:
    if payload is None:
        return None
    return KnowledgeBase(
        provider=from_wire(payload.provider),
        top_k=from_wire(payload.top_k),
        file_ids=strings_from_wire(payload.file_ids),
    )


def _parse_model(payload: ModelPayload | None) -> LanguageModel | None:
    if payload is None:
        return None
    return LanguageModel(
        provider=from_wire(payload.provider),
        model=from_wire(payload.model),
        system_prompt=from_wire(payload.system_prompt),
        temperature=from_wire(payload.temperature),
        max_tokens=from_wire(payload.max_tokens),
        tool_ids=strings_from_wire(payload.tool_ids),
        messages=[
            Message(role=from_wire(message.role), content=from_wire(message.content))
            for message in payload.messages or []
        ],
        knowledge_base=_parse_knowledge_base(payload.knowledge_base),
    )


def _parse_voice(payload: VoicePayload | None) -> Voice | None:
    if payload is None:
        return None
    return Voice(
        provider=from_wire(payload.provider),
        voice_id=from_wire(payload.voice_id),
        model=from_wire(payload.model),
        stability=from_wire(payload.stability),
        similarity_boost=from_wire(payload.similarity_boost),
    )


def _parse_endpointing_plan(
    payload: TranscriptionEndpointingPlanPayload | None,
) -> TranscriptionEndpointingPlan | None:
    if payload is None:
        return None
    return TranscriptionEndpointingPlan(
        on_punctuation_seconds=from_wire(payload.on_punctuation_seconds),
        on_no_punctuation_seconds=from_wire(payload.on_no_punctuation_seconds),
        on_number_seconds=from_wire(payload.on_number_seconds),
    )


def _parse_start_speaking_plan(
    payload: StartSpeakingPlanPayload | None,
) -> StartSpeakingPlan | None:
    if payload is None:
        return None
    return StartSpeakingPlan(
        wait_seconds=from_wire(payload.wait_seconds),
        smart_endpointing_enabled=from_wire(payload.smart_endpointing_enabled),
        transcription_endpointing_plan=_parse_endpointing_plan(
            payload.transcription_endpointing_plan
        ),
    )


def _parse_stop_speaking_plan(payload: StopSpeakingPlanPayload | None) -> StopSpeakingPlan | None:
    if payload is None:
        return None
    return StopSpeakingPlan(
        num_words=from_wire(payload.num_words),
        voice_seconds=from_wire(payload.voice_seconds),
        backoff_seconds=from_wire(payload.backoff_seconds),
    )


def _parse_structured_data_schema(
    payload: StructuredDataSchemaPayload | None,
) -> StructuredDataSchema | None:
    if payload is None:
        return None
    return StructuredDataSchema(
        type=from_wire(payload.type),
        properties=properties_from_wire(payload.properties),
    )


def _parse_analysis_plan(payload: AnalysisPlanPayload | None) -> AnalysisPlan | None:
    if payload is None:
        return None
    return AnalysisPlan(
        summary_prompt=from_wire(payload.summary_prompt),
        structured_data_prompt=from_wire(payload.structured_data_prompt),
        structured_data_schema=_parse_structured_data_schema(payload.structured_data_schema),
        success_evaluation_prompt=from_wire(payload.success_evaluation_prompt),
        success_evaluation_rubric=from_wire(payload.success_evaluation_rubric),
    )


def _parse_message_plan(payload: MessagePlanPayload | None) -> MessagePlan | None:
    if payload is None:
        return None
    return MessagePlan(idle_messages=strings_from_wire(payload.idle_messages))


def _parse_artifact_plan(payload: ArtifactPlanPayload | None) -> ArtifactPlan | None:
    if payload is None:
        return None
    return ArtifactPlan(recording_format=from_wire(payload.recording_format))
