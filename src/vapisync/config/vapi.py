"""Vapi API configuration values."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .env import optional_env_float, require_env_vars
from .http_resilience import RateLimit, ResilienceConfig

VAPI_BASE_URL = "https://api.vapi.ai"
VAPI_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True)
class VapiConfig:
    """Holds Vapi API configuration values."""

    base_url: str
    token: str
    resilience: ResilienceConfig

    def __repr__(self) -> str:
        return f"VapiConfig(base_url={self.base_url!r}, token='***')"


def build_resilience_config(
    *,
    base_url: str,
    token: str,
    timeout_seconds: float = VAPI_TIMEOUT_SECONDS,
) -> ResilienceConfig:
    return ResilienceConfig(
        name="vapi",
        base_url=base_url.rstrip("/") + "/",
        timeout_seconds=timeout_seconds,
        ratelimit=RateLimit(max_calls=10, per_seconds=1.0),
        default_headers={
            "Authorization": f"Bearer {token}",
            "Accept": "application/json",
        },
    )


def get_vapi_config(*, resilience: ResilienceConfig | None = None) -> VapiConfig:
    values = require_env_vars(("VAPI_TOKEN",))
    base_url = os.getenv("VAPI_URL", "").strip() or VAPI_BASE_URL
    timeout = optional_env_float("VAPI_TIMEOUT_SECONDS", default=VAPI_TIMEOUT_SECONDS)
    token = values["VAPI_TOKEN"]
    return VapiConfig(
        base_url=base_url,
        token=token,
        resilience=resilience
        or build_resilience_config(base_url=base_url, token=token, timeout_seconds=timeout),
    )
