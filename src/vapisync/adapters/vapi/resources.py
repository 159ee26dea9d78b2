"""Registry of the resource kinds the Vapi adapter can reconcile."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .translators import (
    AssistantTranslator,
    FileTranslator,
    FunctionToolTranslator,
    QueryToolTranslator,
    SipTrunkPhoneNumberTranslator,
    SipTrunkTranslator,
    TwilioPhoneNumberTranslator,
)

if TYPE_CHECKING:
    from vapisync.domain.reconciliation import ResourceMapper

TRANSLATORS: dict[str, ResourceMapper[Any]] = {
    translator.kind: translator
    for translator in (
        AssistantTranslator(),
        FileTranslator(),
        SipTrunkTranslator(),
        TwilioPhoneNumberTranslator(),
        SipTrunkPhoneNumberTranslator(),
        FunctionToolTranslator(),
        QueryToolTranslator(),
    )
}


def get_translator(kind: str) -> ResourceMapper[Any]:
    try:
        return TRANSLATORS[kind]
    except KeyError:
        known = ", ".join(sorted(TRANSLATORS))
        raise KeyError(f"Unknown resource kind {kind!r}; expected one of: {known}") from None


def resource_kinds() -> list[str]:
    return sorted(TRANSLATORS)
