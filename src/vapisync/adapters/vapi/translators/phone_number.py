"""Translate imported phone numbers between the typed tree and the Vapi wire format.

Both providers share the ``phone-number`` endpoint and are told apart by the fixed
``provider`` value. Neither can be patched, so every change is a replace.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from vapisync.domain.model import (
    SIP_TRUNK_NUMBER_PROVIDER,
    TWILIO_PROVIDER,
    FallbackDestination,
    SipTrunkPhoneNumber,
    TwilioPhoneNumber,
    emit,
    from_wire,
)
from vapisync.domain.reconciliation import Mutability

from ..schema import SipTrunkPhoneNumberPayload, TwilioPhoneNumberPayload
from ._common import resource_fields, write_only

if TYPE_CHECKING:
    from vapisync.domain.reconciliation import RequestBody

    from ..schema import FallbackDestinationPayload


class TwilioPhoneNumberTranslator:
    kind = "twilio_phone_number"
    path = "phone-number"
    mutability = Mutability.REPLACE_ONLY

    def to_request(self, model: TwilioPhoneNumber) -> RequestBody:
        return twilio_phone_number_to_request(model)

    def to_update_request(self, model: TwilioPhoneNumber) -> RequestBody:
        return twilio_phone_number_to_request(model)

    def from_response(self, body: bytes, local: TwilioPhoneNumber | None) -> TwilioPhoneNumber:
        payload = TwilioPhoneNumberPayload.model_validate_json(body)
        _check_provider(payload.provider, TWILIO_PROVIDER)
        return parse_twilio_phone_number(payload, local)


class SipTrunkPhoneNumberTranslator:
    kind = "sip_trunk_phone_number"
    path = "phone-number"
    mutability = Mutability.REPLACE_ONLY

    def to_request(self, model: SipTrunkPhoneNumber) -> RequestBody:
        return sip_trunk_phone_number_to_request(model)

    def to_update_request(self, model: SipTrunkPhoneNumber) -> RequestBody:
        return sip_trunk_phone_number_to_request(model)

    def from_response(self, body: bytes, local: SipTrunkPhoneNumber | None) -> SipTrunkPhoneNumber:
        payload = SipTrunkPhoneNumberPayload.model_validate_json(body)
        _check_provider(payload.provider, SIP_TRUNK_NUMBER_PROVIDER)
        return parse_sip_trunk_phone_number(payload)


def _check_provider(provider: str | None, expected: str) -> None:
    if provider is not None and provider != expected:
        raise ValueError(f"expected a {expected} phone number, got provider {provider!r}")


# --------------------------------------------------------------------------- twilio


def twilio_phone_number_to_request(number: TwilioPhoneNumber) -> RequestBody:
    body: RequestBody = {"provider": TWILIO_PROVIDER}
    emit(body, "name", number.name)
    emit(body, "number", number.number)
    emit(body, "twilioAccountSid", number.twilio_account_sid)
    emit(body, "twilioAuthToken", number.twilio_auth_token)
    emit(body, "assistantId", number.assistant_id)
    destination = number.fallback_destination
    if destination is not None:
        fallback: RequestBody = {}
        emit(fallback, "type", destination.type)
        emit(fallback, "number", destination.number)
        emit(fallback, "extension", destination.extension)
        emit(fallback, "message", destination.message)
        emit(fallback, "description", destination.description)
        emit(fallback, "numberE164CheckEnabled", destination.number_e164_check_enabled)
        body["fallbackDestination"] = fallback
    return body


def parse_twilio_phone_number(
    payload: TwilioPhoneNumberPayload, local: TwilioPhoneNumber | None = None
) -> TwilioPhoneNumber:
    return TwilioPhoneNumber(
        **resource_fields(payload),
        name=from_wire(payload.name),
        number=from_wire(payload.number),
        twilio_account_sid=from_wire(payload.twilio_account_sid),
        twilio_auth_token=write_only(
            payload.twilio_auth_token, local.twilio_auth_token if local else None
        ),
        assistant_id=from_wire(payload.assistant_id),
        fallback_destination=_parse_fallback_destination(payload.fallback_destination),
    )


def _parse_fallback_destination(
    payload: FallbackDestinationPayload | None,
) -> FallbackDestination | None:
    if payload is None:
        return None
    return FallbackDestination(
        type=from_wire(payload.type),
        number=from_wire(payload.number),
        extension=from_wire(payload.extension),
        message=from_wire(payload.message),
        description=from_wire(payload.description),
        number_e164_check_enabled=from_wire(payload.number_e164_check_enabled),
    )


# --------------------------------------------------------------------------- sip trunk


def sip_trunk_phone_number_to_request(number: SipTrunkPhoneNumber) -> RequestBody:
    body: RequestBody = {"provider": SIP_TRUNK_NUMBER_PROVIDER}
    emit(body, "name", number.name)
    emit(body, "number", number.number)
    emit(body, "credentialId", number.credential_id)
    emit(body, "numberE164CheckEnabled", number.number_e164_check_enabled)
    emit(body, "assistantId", number.assistant_id)
    return body


def parse_sip_trunk_phone_number(payload: SipTrunkPhoneNumberPayload) -> SipTrunkPhoneNumber:
    return SipTrunkPhoneNumber(
        **resource_fields(payload),
        name=from_wire(payload.name),
        number=from_wire(payload.number),
        credential_id=from_wire(payload.credential_id),
        number_e164_check_enabled=from_wire(payload.number_e164_check_enabled),
        assistant_id=from_wire(payload.assistant_id),
    )
