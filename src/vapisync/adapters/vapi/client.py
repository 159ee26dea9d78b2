"""HTTP client for the Vapi API."""

from __future__ import annotations

import asyncio
import mimetypes
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from aiolimiter import AsyncLimiter

from vapisync.adapters.http_resilience import ResilienceConfig, ResilientClient
from vapisync.config import VapiConfig, get_vapi_config
from vapisync.domain.errors import TransportError
from vapisync.domain.ports import RemoteResponse

if TYPE_CHECKING:
    from collections.abc import Callable

log = getLogger(__name__)

UPLOAD_PATH = "file"
_DEFAULT_MIMETYPE = "application/octet-stream"

type ClientFactory = Callable[[ResilienceConfig, AsyncLimiter | None], ResilientClient]


def _default_client_factory(
    config: ResilienceConfig, limiter: AsyncLimiter | None
) -> ResilientClient:
    return ResilientClient(config, limiter=limiter)


@dataclass(slots=True)
class VapiClient:
    """Blocking facade over the async resilient client.

    Each call opens a client, awaits one request and closes it again. The rate
    limiter outlives those clients, so the configured budget spans every call made
    through this instance. Non-2xx statuses are handed back to the caller; only
    transport failures raise.
    """

    config: VapiConfig = field(default_factory=get_vapi_config)
    client_factory: ClientFactory = field(default=_default_client_factory)
    limiter: AsyncLimiter | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        ratelimit = self.config.resilience.ratelimit
        if self.limiter is None and ratelimit is not None:
            self.limiter = AsyncLimiter(ratelimit.max_calls, ratelimit.per_seconds)

    def send(self, method: str, path: str, body: object | None = None) -> RemoteResponse:
        return asyncio.run(self._send_async(method, path, body))

    def upload(self, field_name: str, filename: str, content: bytes) -> RemoteResponse:
        return asyncio.run(self._upload_async(field_name, filename, content))

    async def _send_async(self, method: str, path: str, body: object | None) -> RemoteResponse:
        async with self.client_factory(self.config.resilience, self.limiter) as client:
            try:
                if body is None:
                    response = await client.request(method, path)
                else:
                    response = await client.request(method, path, json=body)
            except httpx.HTTPError as exc:
                log.error(f"Vapi {method} {path} failed: {exc}")
                raise TransportError(f"{method} {path} failed: {exc}") from exc
        return _to_remote_response(response)

    async def _upload_async(self, field_name: str, filename: str, content: bytes) -> RemoteResponse:
        mimetype, _ = mimetypes.guess_type(filename)
        files = {field_name: (filename, content, mimetype or _DEFAULT_MIMETYPE)}
        async with self.client_factory(self.config.resilience, self.limiter) as client:
            try:
                response = await client.post(UPLOAD_PATH, files=files)
            except httpx.HTTPError as exc:
                log.error(f"Vapi upload of {filename} failed: {exc}")
                raise TransportError(f"upload {filename} failed: {exc}") from exc
        return _to_remote_response(response)


def _to_remote_response(response: httpx.Response) -> RemoteResponse:
    if response.is_error:
        request = response.request
        log.debug(f"Vapi {request.method} {request.url} -> {response.status_code}")
    return RemoteResponse(status_code=response.status_code, body=response.content)
