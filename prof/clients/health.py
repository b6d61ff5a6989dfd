"""Defines the client for the unauthenticated health endpoint."""

import pydantic

from prof.clients.base import BaseClient
from prof.errors import SerializationError
from prof.models import HealthResponse


class HealthClient(BaseClient):
    async def health_check(self) -> HealthResponse:
        response = await self._send("GET", self._url("/health"))
        try:
            return HealthResponse.model_validate_json(response.text)
        except pydantic.ValidationError as e:
            raise SerializationError(str(e)) from e
