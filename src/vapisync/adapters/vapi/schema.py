"""Pydantic models describing the Vapi API response payloads.

Every field is optional: a key the response omits decodes to ``None`` and the
translators turn that into an absent scalar or sub-tree, never a zero value.
"""

from __future__ import annotations

import logging
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

log = logging.getLogger(__name__)


class VapiBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, protected_namespaces=())


class ResourcePayload(VapiBaseModel):
    id: str
    org_id: str | None = Field(default=None, alias="orgId")
    created_at: str | None = Field(default=None, alias="createdAt")
    updated_at: str | None = Field(default=None, alias="updatedAt")


class PropertyPayload(BaseModel):
    """One entry of a JSON-schema property bag. Unmodeled keys are kept as extras."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)
    _logged_extra_keys: ClassVar[set[str]] = set()

    type: str | None = None
    description: str | None = None

    def model_post_init(self, _context: object, /) -> None:
        extras = self.__pydantic_extra__
        if not extras:
            return
        new_keys = set(extras).difference(self._logged_extra_keys)
        if not new_keys:
            return
        self._logged_extra_keys.update(new_keys)
        log.warning(
            "Vapi %s: unmodeled keys: %s",
            type(self).__name__,
            ", ".join(sorted(new_keys)),
        )

    @property
    def extra(self) -> dict[str, object]:
        return dict(self.__pydantic_extra__ or {})


class ServerPayload(VapiBaseModel):
    url: str | None = None
    secret: str | None = None
    timeout_seconds: int | None = Field(default=None, alias="timeoutSeconds")


# --------------------------------------------------------------------------- assistant


class TranscriberPayload(VapiBaseModel):
    provider: str | None = None
    model: str | None = None
    language: str | None = None


class MessagePayload(VapiBaseModel):
    role: str | None = None
    content: str | None = None


class KnowledgeBasePayload(VapiBaseModel):
    provider: str | None = None
    top_k: int | None = Field(default=None, alias="topK")
    file_ids: list[str] | None = Field(default=None, alias="fileIds")


class ModelPayload(VapiBaseModel):
    provider: str | None = None
    model: str | None = None
    system_prompt: str | None = Field(default=None, alias="systemPrompt")
    temperature: float | None = None
    max_tokens: int | None = Field(default=None, alias="maxTokens")
    tool_ids: list[str] | None = Field(default=None, alias="toolIds")
    messages: list[MessagePayload] | None = None
    knowledge_base: KnowledgeBasePayload | None = Field(default=None, alias="knowledgeBase")


class VoicePayload(VapiBaseModel):
    provider: str | None = None
    voice_id: str | None = Field(default=None, alias="voiceId")
    model: str | None = None
    stability: float | None = None
    similarity_boost: float | None = Field(default=None, alias="similarityBoost")


class TranscriptionEndpointingPlanPayload(VapiBaseModel):
    on_punctuation_seconds: float | None = Field(default=None, alias="onPunctuationSeconds")
    on_no_punctuation_seconds: float | None = Field(default=None, alias="onNoPunctuationSeconds")
    on_number_seconds: float | None = Field(default=None, alias="onNumberSeconds")


class StartSpeakingPlanPayload(VapiBaseModel):
    wait_seconds: float | None = Field(default=None, alias="waitSeconds")
    smart_endpointing_enabled: bool | None = Field(default=None, alias="smartEndpointingEnabled")
    transcription_endpointing_plan: TranscriptionEndpointingPlanPayload | None = Field(
        default=None, alias="transcriptionEndpointingPlan"
    )


class StopSpeakingPlanPayload(VapiBaseModel):
    num_words: int | None = Field(default=None, alias="numWords")
    voice_seconds: float | None = Field(default=None, alias="voiceSeconds")
    backoff_seconds: float | None = Field(default=None, alias="backoffSeconds")


class StructuredDataSchemaPayload(VapiBaseModel):
    type: str | None = None
    properties: dict[str, PropertyPayload] | None = None


class AnalysisPlanPayload(VapiBaseModel):
    summary_prompt: str | None = Field(default=None, alias="summaryPrompt")
    structured_data_prompt: str | None = Field(default=None, alias="structuredDataPrompt")
    structured_data_schema: StructuredDataSchemaPayload | None = Field(
        default=None, alias="structuredDataSchema"
    )
    success_evaluation_prompt: str | None = Field(default=None, alias="successEvaluationPrompt")
    success_evaluation_rubric: str | None = Field(default=None, alias="successEvaluationRubric")


class MessagePlanPayload(VapiBaseModel):
    idle_messages: list[str] | None = Field(default=None, alias="idleMessages")


class ArtifactPlanPayload(VapiBaseModel):
    recording_format: str | None = Field(default=None, alias="recordingFormat")


class AssistantPayload(ResourcePayload):
    name: str | None = None
    first_message: str | None = Field(default=None, alias="firstMessage")
    first_message_mode: str | None = Field(default=None, alias="firstMessageMode")
    voicemail_message: str | None = Field(default=None, alias="voicemailMessage")
    end_call_message: str | None = Field(default=None, alias="endCallMessage")
    background_sound: str | None = Field(default=None, alias="backgroundSound")
    forwarding_phone_number: str | None = Field(default=None, alias="forwardingPhoneNumber")
    language: str | None = None
    parent_id: str | None = Field(default=None, alias="parentId")

    hipaa_enabled: bool | None = Field(default=None, alias="hipaaEnabled")
    recording_enabled: bool | None = Field(default=None, alias="recordingEnabled")
    background_denoising_enabled: bool | None = Field(
        default=None, alias="backgroundDenoisingEnabled"
    )
    model_output_in_messages_enabled: bool | None = Field(
        default=None, alias="modelOutputInMessagesEnabled"
    )
    end_call_function_enabled: bool | None = Field(default=None, alias="endCallFunctionEnabled")
    dial_keypad_function_enabled: bool | None = Field(
        default=None, alias="dialKeypadFunctionEnabled"
    )
    interruptions_enabled: bool | None = Field(default=None, alias="interruptionsEnabled")
    fillers_enabled: bool | None = Field(default=None, alias="fillersEnabled")
    live_transcripts_enabled: bool | None = Field(default=None, alias="liveTranscriptsEnabled")

    silence_timeout_seconds: float | None = Field(default=None, alias="silenceTimeoutSeconds")
    response_delay_seconds: float | None = Field(default=None, alias="responseDelaySeconds")
    num_words_to_interrupt_assistant: int | None = Field(
        default=None, alias="numWordsToInterruptAssistant"
    )
    max_duration_seconds: int | None = Field(default=None, alias="maxDurationSeconds")

    client_messages: list[str] | None = Field(default=None, alias="clientMessages")
    server_messages: list[str] | None = Field(default=None, alias="serverMessages")
    end_call_phrases: list[str] | None = Field(default=None, alias="endCallPhrases")
    keywords: list[str] | None = None

    transcriber: TranscriberPayload | None = None
    model: ModelPayload | None = None
    voice: VoicePayload | None = None
    start_speaking_plan: StartSpeakingPlanPayload | None = Field(
        default=None, alias="startSpeakingPlan"
    )
    stop_speaking_plan: StopSpeakingPlanPayload | None = Field(
        default=None, alias="stopSpeakingPlan"
    )
    analysis_plan: AnalysisPlanPayload | None = Field(default=None, alias="analysisPlan")
    message_plan: MessagePlanPayload | None = Field(default=None, alias="messagePlan")
    server: ServerPayload | None = None
    artifact_plan: ArtifactPlanPayload | None = Field(default=None, alias="artifactPlan")


# --------------------------------------------------------------------------- file


class FilePayload(ResourcePayload):
    name: str | None = None
    original_name: str | None = Field(default=None, alias="originalName")
    bytes_: int | None = Field(default=None, alias="bytes")
    mimetype: str | None = None
    path: str | None = None
    url: str | None = None
    status: str | None = None
    purpose: str | None = None
    bucket: str | None = None
    metadata: dict[str, object] | None = None

    @field_validator("bytes_", mode="before")
    @classmethod
    def _parse_byte_size(cls, value: object) -> int | None:
        # number first, then numeric string; anything else is malformed
        if value is None:
            return None
        if isinstance(value, bool):
            raise ValueError(f"byte size must be a number, got {value!r}")
        if isinstance(value, int):
            return value
        if isinstance(value, float):
            if not value.is_integer():
                raise ValueError(f"byte size must be integral, got {value!r}")
            return int(value)
        if isinstance(value, str):
            text = value.strip()
            if not (text.isascii() and text.isdigit()):
                raise ValueError(f"byte size must be a plain decimal string, got {value!r}")
            return int(text)
        raise ValueError(f"unsupported byte size representation: {value!r}")


# --------------------------------------------------------------------------- sip trunk


class SipGatewayPayload(VapiBaseModel):
    ip: str | None = None
    port: int | None = None
    inbound_enabled: bool | None = Field(default=None, alias="inboundEnabled")
    outbound_enabled: bool | None = Field(default=None, alias="outboundEnabled")


class SipRegisterPlanPayload(VapiBaseModel):
    domain: str | None = None
    username: str | None = None
    realm: str | None = None


class OutboundAuthenticationPlanPayload(VapiBaseModel):
    auth_username: str | None = Field(default=None, alias="authUsername")
    auth_password: str | None = Field(default=None, alias="authPassword")
    sip_register_plan: SipRegisterPlanPayload | None = Field(
        default=None, alias="sipRegisterPlan"
    )


class SipTrunkPayload(ResourcePayload):
    provider: str | None = None
    name: str | None = None
    gateways: list[SipGatewayPayload] | None = None
    outbound_authentication_plan: OutboundAuthenticationPlanPayload | None = Field(
        default=None, alias="outboundAuthenticationPlan"
    )
    outbound_leading_plus_enabled: bool | None = Field(
        default=None, alias="outboundLeadingPlusEnabled"
    )
    tech_prefix: str | None = Field(default=None, alias="techPrefix")
    sip_diversion_header: str | None = Field(default=None, alias="sipDiversionHeader")


# --------------------------------------------------------------------------- phone numbers


class FallbackDestinationPayload(VapiBaseModel):
    type: str | None = None
    number: str | None = None
    extension: str | None = None
    message: str | None = None
    description: str | None = None
    number_e164_check_enabled: bool | None = Field(default=None, alias="numberE164CheckEnabled")


class TwilioPhoneNumberPayload(ResourcePayload):
    provider: str | None = None
    name: str | None = None
    number: str | None = None
    twilio_account_sid: str | None = Field(default=None, alias="twilioAccountSid")
    twilio_auth_token: str | None = Field(default=None, alias="twilioAuthToken")
    assistant_id: str | None = Field(default=None, alias="assistantId")
    fallback_destination: FallbackDestinationPayload | None = Field(
        default=None, alias="fallbackDestination"
    )


class SipTrunkPhoneNumberPayload(ResourcePayload):
    provider: str | None = None
    name: str | None = None
    number: str | None = None
    credential_id: str | None = Field(default=None, alias="credentialId")
    number_e164_check_enabled: bool | None = Field(default=None, alias="numberE164CheckEnabled")
    assistant_id: str | None = Field(default=None, alias="assistantId")


# --------------------------------------------------------------------------- tools


class FunctionParametersPayload(VapiBaseModel):
    type: str | None = None
    properties: dict[str, PropertyPayload] | None = None
    required: list[str] | None = None


class FunctionPayload(VapiBaseModel):
    name: str | None = None
    description: str | None = None
    async_: bool | None = Field(default=None, alias="async")
    parameters: FunctionParametersPayload | None = None


class FunctionToolPayload(ResourcePayload):
    type: str | None = None
    async_: bool | None = Field(default=None, alias="async")
    function: FunctionPayload | None = None
    server: ServerPayload | None = None


class QueryKnowledgeBasePayload(VapiBaseModel):
    provider: str | None = None
    name: str | None = None
    model: str | None = None
    description: str | None = None
    file_ids: list[str] | None = Field(default=None, alias="fileIds")


class QueryFunctionPayload(VapiBaseModel):
    name: str | None = None
    description: str | None = None


class QueryToolPayload(ResourcePayload):
    type: str | None = None
    function: QueryFunctionPayload | None = None
    knowledge_bases: list[QueryKnowledgeBasePayload] | None = Field(
        default=None, alias="knowledgeBases"
    )
