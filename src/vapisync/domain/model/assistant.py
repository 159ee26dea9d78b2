"""Typed tree for an assistant configuration."""

from __future__ import annotations

from dataclasses import dataclass, field

from .common import Property, RemoteResource, Server
from .values import UNSET, Scalar

DEFAULT_RECORDING_FORMAT = "mp3"


@dataclass(slots=True, kw_only=True)
class Transcriber:
    provider: Scalar[str] = UNSET
    model: Scalar[str] = UNSET
    language: Scalar[str] = UNSET


@dataclass(slots=True, kw_only=True)
class Message:
    role: Scalar[str] = UNSET
    content: Scalar[str] = UNSET


@dataclass(slots=True, kw_only=True)
class KnowledgeBase:
    provider: Scalar[str] = UNSET
    top_k: Scalar[int] = UNSET
    file_ids: list[str] = field(default_factory=list)


@dataclass(slots=True, kw_only=True)
class LanguageModel:
    provider: Scalar[str] = UNSET
    model: Scalar[str] = UNSET
    system_prompt: Scalar[str] = UNSET
    temperature: Scalar[float] = UNSET
    max_tokens: Scalar[int] = UNSET
    tool_ids: list[str] = field(default_factory=list)
    messages: list[Message] = field(default_factory=list)
    knowledge_base: KnowledgeBase | None = None


@dataclass(slots=True, kw_only=True)
class Voice:
    provider: Scalar[str] = UNSET
    voice_id: Scalar[str] = UNSET
    model: Scalar[str] = UNSET
    stability: Scalar[float] = UNSET
    similarity_boost: Scalar[float] = UNSET


@dataclass(slots=True, kw_only=True)
class TranscriptionEndpointingPlan:
    on_punctuation_seconds: Scalar[float] = UNSET
    on_no_punctuation_seconds: Scalar[float] = UNSET
    on_number_seconds: Scalar[float] = UNSET


@dataclass(slots=True, kw_only=True)
class StartSpeakingPlan:
    wait_seconds: Scalar[float] = UNSET
    smart_endpointing_enabled: Scalar[bool] = UNSET
    transcription_endpointing_plan: TranscriptionEndpointingPlan | None = None


@dataclass(slots=True, kw_only=True)
class StopSpeakingPlan:
    num_words: Scalar[int] = UNSET
    voice_seconds: Scalar[float] = UNSET
    backoff_seconds: Scalar[float] = UNSET


@dataclass(slots=True, kw_only=True)
class StructuredDataSchema:
    type: Scalar[str] = UNSET
    properties: dict[str, Property] = field(default_factory=dict)


@dataclass(slots=True, kw_only=True)
class AnalysisPlan:
    summary_prompt: Scalar[str] = UNSET
    structured_data_prompt: Scalar[str] = UNSET
    structured_data_schema: StructuredDataSchema | None = None
    success_evaluation_prompt: Scalar[str] = UNSET
    success_evaluation_rubric: Scalar[str] = UNSET


@dataclass(slots=True, kw_only=True)
class MessagePlan:
    idle_messages: list[str] = field(default_factory=list)


@dataclass(slots=True, kw_only=True)
class ArtifactPlan:
    recording_format: Scalar[str] = UNSET


@dataclass(slots=True, kw_only=True)
class Assistant(RemoteResource):
    name: Scalar[str] = UNSET
    first_message: Scalar[str] = UNSET
    first_message_mode: Scalar[str] = UNSET
    voicemail_message: Scalar[str] = UNSET
    end_call_message: Scalar[str] = UNSET
    background_sound: Scalar[str] = UNSET
    forwarding_phone_number: Scalar[str] = UNSET
    language: Scalar[str] = UNSET

    hipaa_enabled: Scalar[bool] = UNSET
    recording_enabled: Scalar[bool] = UNSET
    background_denoising_enabled: Scalar[bool] = UNSET
    model_output_in_messages_enabled: Scalar[bool] = UNSET
    end_call_function_enabled: Scalar[bool] = UNSET
    dial_keypad_function_enabled: Scalar[bool] = UNSET
    interruptions_enabled: Scalar[bool] = UNSET
    fillers_enabled: Scalar[bool] = UNSET
    live_transcripts_enabled: Scalar[bool] = UNSET

    silence_timeout_seconds: Scalar[float] = UNSET
    response_delay_seconds: Scalar[float] = UNSET
    num_words_to_interrupt_assistant: Scalar[int] = UNSET
    max_duration_seconds: Scalar[int] = UNSET

    client_messages: list[str] = field(default_factory=list)
    server_messages: list[str] = field(default_factory=list)
    end_call_phrases: list[str] = field(default_factory=list)
    keywords: list[str] = field(default_factory=list)

    transcriber: Transcriber | None = None
    model: LanguageModel | None = None
    voice: Voice | None = None
    start_speaking_plan: StartSpeakingPlan | None = None
    stop_speaking_plan: StopSpeakingPlan | None = None
    analysis_plan: AnalysisPlan | None = None
    message_plan: MessagePlan | None = None
    server: Server | None = None
    artifact_plan: ArtifactPlan | None = None

    # assigned by the remote side
    parent_id: Scalar[str] = UNSET
    # local bookkeeping only, never sent
    phone_number_id: Scalar[str] = UNSET
