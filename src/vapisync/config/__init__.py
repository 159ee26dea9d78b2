"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_float, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy
from .logging import configure_logging
from .vapi import VAPI_BASE_URL, VapiConfig, build_resilience_config, get_vapi_config

__all__ = [
    "VAPI_BASE_URL",
    "ConfigurationError",
    "MissingConfigurationError",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "VapiConfig",
    "build_resilience_config",
    "configure_logging",
    "get_vapi_config",
    "optional_env_float",
    "require_env_vars",
]
