"""Translate SIP trunk credentials between the typed tree and the Vapi wire format."""

from __future__ import annotations

from typing import TYPE_CHECKING

from vapisync.domain.model import (
    OutboundAuthenticationPlan,
    SipGateway,
    SipRegisterPlan,
    SipTrunk,
    emit,
    from_wire,
)
from vapisync.domain.reconciliation import Mutability

from ..schema import SipTrunkPayload
from ._common import resource_fields, write_only

if TYPE_CHECKING:
    from vapisync.domain.reconciliation import RequestBody

    from ..schema import OutboundAuthenticationPlanPayload, SipGatewayPayload


class SipTrunkTranslator:
    kind = "sip_trunk"
    path = "credential"
    mutability = Mutability.IN_PLACE

    def to_request(self, model: SipTrunk) -> RequestBody:
        return sip_trunk_to_request(model)

    def to_update_request(self, model: SipTrunk) -> RequestBody:
        return sip_trunk_to_request(model)

    def from_response(self, body: bytes, local: SipTrunk | None) -> SipTrunk:
        return parse_sip_trunk(SipTrunkPayload.model_validate_json(body), local)


def sip_trunk_to_request(trunk: SipTrunk) -> RequestBody:
    body: RequestBody = {}
    emit(body, "provider", trunk.provider)
    emit(body, "name", trunk.name)
    if trunk.gateways:
        body["gateways"] = [_gateway_to_wire(gateway) for gateway in trunk.gateways]
    plan = trunk.outbound_authentication_plan
    if plan is not None:
        auth: RequestBody = {}
        emit(auth, "authUsername", plan.auth_username)
        emit(auth, "authPassword", plan.auth_password)
        if plan.sip_register_plan is not None:
            register: RequestBody = {}
            emit(register, "domain", plan.sip_register_plan.domain)
            emit(register, "username", plan.sip_register_plan.username)
            emit(register, "realm", plan.sip_register_plan.realm)
            auth["sipRegisterPlan"] = register
        body["outboundAuthenticationPlan"] = auth
    emit(body, "outboundLeadingPlusEnabled", trunk.outbound_leading_plus_enabled)
    emit(body, "techPrefix", trunk.tech_prefix)
    emit(body, "sipDiversionHeader", trunk.sip_diversion_header)
    return body


def _gateway_to_wire(gateway: SipGateway) -> RequestBody:
    body: RequestBody = {}
    emit(body, "ip", gateway.ip)
    emit(body, "port", gateway.port)
    emit(body, "inboundEnabled", gateway.inbound_enabled)
    emit(body, "outboundEnabled", gateway.outbound_enabled)
    return body


def parse_sip_trunk(payload: SipTrunkPayload, local: SipTrunk | None = None) -> SipTrunk:
    return SipTrunk(
        **resource_fields(payload),
        provider=from_wire(payload.provider),
        name=from_wire(payload.name),
        gateways=[_parse_gateway(gateway) for gateway in payload.gateways or []],
        outbound_authentication_plan=_parse_authentication_plan(
            payload.outbound_authentication_plan,
            local.outbound_authentication_plan if local else None,
        ),
        outbound_leading_plus_enabled=from_wire(payload.outbound_leading_plus_enabled),
        tech_prefix=from_wire(payload.tech_prefix),
        sip_diversion_header=from_wire(payload.sip_diversion_header),
    )


def _parse_gateway(payload: SipGatewayPayload) -> SipGateway:
    return SipGateway(
        ip=from_wire(payload.ip),
        port=from_wire(payload.port),
        inbound_enabled=from_wire(payload.inbound_enabled),
        outbound_enabled=from_wire(payload.outbound_enabled),
    )


def _parse_authentication_plan(
    payload: OutboundAuthenticationPlanPayload | None,
    local: OutboundAuthenticationPlan | None,
) -> OutboundAuthenticationPlan | None:
    if payload is None:
        return None
    register = payload.sip_register_plan
    return OutboundAuthenticationPlan(
        auth_username=from_wire(payload.auth_username),
        auth_password=write_only(payload.auth_password, local.auth_password if local else None),
        sip_register_plan=(
            SipRegisterPlan(
                domain=from_wire(register.domain),
                username=from_wire(register.username),
                realm=from_wire(register.realm),
            )
            if register is not None
            else None
        ),
    )
