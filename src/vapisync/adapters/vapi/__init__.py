"""Public interface for the Vapi adapter."""

from __future__ import annotations

from .client import VapiClient
from .resources import TRANSLATORS, get_translator, resource_kinds

__all__ = ["TRANSLATORS", "VapiClient", "get_translator", "resource_kinds"]
