"""Public resource model surface."""

from __future__ import annotations

from vapisync.domain.model.assistant import (
    DEFAULT_RECORDING_FORMAT,
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
)
from vapisync.domain.model.common import Property, RemoteResource, Server
from vapisync.domain.model.file import File
from vapisync.domain.model.phone_number import (
    SIP_TRUNK_NUMBER_PROVIDER,
    TWILIO_PROVIDER,
    FallbackDestination,
    SipTrunkPhoneNumber,
    TwilioPhoneNumber,
)
from vapisync.domain.model.sip_trunk import (
    SIP_TRUNK_PROVIDER,
    OutboundAuthenticationPlan,
    SipGateway,
    SipRegisterPlan,
    SipTrunk,
)
from vapisync.domain.model.tool import (
    DTMF_TOOL_TYPE,
    FUNCTION_TOOL_TYPE,
    QUERY_TOOL_TYPE,
    FunctionDefinition,
    FunctionParameters,
    FunctionTool,
    QueryFunction,
    QueryKnowledgeBase,
    QueryTool,
)
from vapisync.domain.model.values import (
    NULL,
    UNSET,
    Presence,
    Scalar,
    emit,
    from_wire,
    present,
    strings_from_wire,
    strings_to_wire,
)

__all__ = [  # noqa: RUF022
    # values
    "NULL",
    "UNSET",
    "Presence",
    "Scalar",
    "emit",
    "from_wire",
    "present",
    "strings_from_wire",
    "strings_to_wire",
    # shared
    "Property",
    "RemoteResource",
    "Server",
    # assistant
    "DEFAULT_RECORDING_FORMAT",
    "AnalysisPlan",
    "ArtifactPlan",
    "Assistant",
    "KnowledgeBase",
    "LanguageModel",
    "Message",
    "MessagePlan",
    "StartSpeakingPlan",
    "StopSpeakingPlan",
    "StructuredDataSchema",
    "Transcriber",
    "TranscriptionEndpointingPlan",
    "Voice",
    # file
    "File",
    # phone numbers
    "SIP_TRUNK_NUMBER_PROVIDER",
    "TWILIO_PROVIDER",
    "FallbackDestination",
    "SipTrunkPhoneNumber",
    "TwilioPhoneNumber",
    # sip trunk
    "SIP_TRUNK_PROVIDER",
    "OutboundAuthenticationPlan",
    "SipGateway",
    "SipRegisterPlan",
    "SipTrunk",
    # tools
    "DTMF_TOOL_TYPE",
    "FUNCTION_TOOL_TYPE",
    "QUERY_TOOL_TYPE",
    "FunctionDefinition",
    "FunctionParameters",
    "FunctionTool",
    "QueryFunction",
    "QueryKnowledgeBase",
    "QueryTool",
]
