"""Typed tree for a bring-your-own SIP trunk credential."""

from __future__ import annotations

from dataclasses import dataclass, field

from .common import RemoteResource
from .values import UNSET, Scalar, present

SIP_TRUNK_PROVIDER = "byo-sip-trunk"


@dataclass(slots=True, kw_only=True)
class SipGateway:
    ip: Scalar[str] = UNSET
    port: Scalar[int] = UNSET
    inbound_enabled: Scalar[bool] = UNSET
    outbound_enabled: Scalar[bool] = UNSET


@dataclass(slots=True, kw_only=True)
class SipRegisterPlan:
    domain: Scalar[str] = UNSET
    username: Scalar[str] = UNSET
    realm: Scalar[str] = UNSET


@dataclass(slots=True, kw_only=True)
class OutboundAuthenticationPlan:
    auth_username: Scalar[str] = UNSET
    # write-only: the remote side never echoes it
    auth_password: Scalar[str] = UNSET
    sip_register_plan: SipRegisterPlan | None = None


@dataclass(slots=True, kw_only=True)
class SipTrunk(RemoteResource):
    provider: Scalar[str] = field(default_factory=lambda: present(SIP_TRUNK_PROVIDER))
    name: Scalar[str] = UNSET
    gateways: list[SipGateway] = field(default_factory=list)
    outbound_authentication_plan: OutboundAuthenticationPlan | None = None
    outbound_leading_plus_enabled: Scalar[bool] = UNSET
    tech_prefix: Scalar[str] = UNSET
    sip_diversion_header: Scalar[str] = UNSET
