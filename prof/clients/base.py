"""Defines a base client for the prof service."""

import logging
from types import TracebackType
from typing import Any, Self, Type

import httpx

from prof.auth import Signer, make_auth_params, to_query_string
from prof.conf import Settings
from prof.errors import AuthError, HttpError
from prof.utils import get_api_root, normalize_base_url

logger = logging.getLogger(__name__)


class BaseClient:
    def __init__(
        self,
        base_url: str | None = None,
        signer: Signer | None = None,
        *,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = normalize_base_url(get_api_root() if base_url is None else base_url)
        self.timeout = Settings.load().timeout if timeout is None else timeout
        self.signer = signer
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    def with_identity(self, signer: Signer) -> Self:
        self.signer = signer
        return self

    def set_identity(self, signer: Signer) -> None:
        self.signer = signer

    def get_auth_params(self) -> dict[str, str]:
        if self.signer is None:
            raise AuthError("Signer not configured")
        return make_auth_params(self.signer)

    def _url(self, path: str, query: dict[str, str] | None = None) -> str:
        url = f"{self.base_url}{path}"
        if query:
            url = f"{url}?{to_query_string(query)}"
        return url

    async def get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                transport=self._transport,
            )
        return self._client

    async def _send(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        client = await self.get_client()
        logger.debug("%s %s", method, url)
        try:
            response = await client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            raise HttpError(str(e)) from e
        if response.is_error:
            logger.debug("Got error %d from the prof service", response.status_code)
        return response

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: Type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.close()
