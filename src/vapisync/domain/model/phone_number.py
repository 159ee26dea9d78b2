"""Typed trees for imported phone numbers."""

from __future__ import annotations

from dataclasses import dataclass

from .common import RemoteResource
from .values import UNSET, Scalar

TWILIO_PROVIDER = "twilio"
SIP_TRUNK_NUMBER_PROVIDER = "byo-phone-number"


@dataclass(slots=True, kw_only=True)
class FallbackDestination:
    type: Scalar[str] = UNSET
    number: Scalar[str] = UNSET
    extension: Scalar[str] = UNSET
    message: Scalar[str] = UNSET
    description: Scalar[str] = UNSET
    number_e164_check_enabled: Scalar[bool] = UNSET


@dataclass(slots=True, kw_only=True)
class TwilioPhoneNumber(RemoteResource):
    name: Scalar[str] = UNSET
    number: Scalar[str] = UNSET
    twilio_account_sid: Scalar[str] = UNSET
    # write-only: the remote side never echoes it
    twilio_auth_token: Scalar[str] = UNSET
    assistant_id: Scalar[str] = UNSET
    fallback_destination: FallbackDestination | None = None


@dataclass(slots=True, kw_only=True)
class SipTrunkPhoneNumber(RemoteResource):
    name: Scalar[str] = UNSET
    number: Scalar[str] = UNSET
    credential_id: Scalar[str] = UNSET
    number_e164_check_enabled: Scalar[bool] = UNSET
    assistant_id: Scalar[str] = UNSET
