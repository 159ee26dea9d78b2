"""Request and response mappers, one per Vapi resource kind."""

from __future__ import annotations

from .assistant import AssistantTranslator, assistant_to_request, parse_assistant
from .file import FileTranslator, parse_file
from .phone_number import (
    SipTrunkPhoneNumberTranslator,
    TwilioPhoneNumberTranslator,
    parse_sip_trunk_phone_number,
    parse_twilio_phone_number,
    sip_trunk_phone_number_to_request,
    twilio_phone_number_to_request,
)
from .sip_trunk import SipTrunkTranslator, parse_sip_trunk, sip_trunk_to_request
from .tool import (
    FunctionToolTranslator,
    QueryToolTranslator,
    function_tool_to_request,
    parse_function_tool,
    parse_query_tool,
    query_tool_to_request,
)

__all__ = [
    "AssistantTranslator",
    "FileTranslator",
    "FunctionToolTranslator",
    "QueryToolTranslator",
    "SipTrunkPhoneNumberTranslator",
    "SipTrunkTranslator",
    "TwilioPhoneNumberTranslator",
    "assistant_to_request",
    "function_tool_to_request",
    "parse_assistant",
    "parse_file",
    "parse_function_tool",
    "parse_query_tool",
    "parse_sip_trunk",
    "parse_sip_trunk_phone_number",
    "parse_twilio_phone_number",
    "query_tool_to_request",
    "sip_trunk_phone_number_to_request",
    "sip_trunk_to_request",
    "twilio_phone_number_to_request",
]
