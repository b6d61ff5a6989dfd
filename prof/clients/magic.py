"""Defines the client for invoking MAGIC spells."""

import json
from typing import Any

import pydantic

from prof.clients.base import BaseClient
from prof.errors import SerializationError, ServiceError
from prof.models import MagicResponse


class MagicClient(BaseClient):
    async def execute_spell(self, spell_name: str, spell_data: dict[str, Any]) -> MagicResponse:
        auth = self.get_auth_params()
        try:
            content = json.dumps({**spell_data, **auth})
        except (TypeError, ValueError) as e:
            raise SerializationError(str(e)) from e
        response = await self._send(
            "POST",
            self._url(f"/magic/spell/{spell_name}"),
            content=content,
            headers={"Content-Type": "application/json"},
        )
        try:
            magic = MagicResponse.model_validate_json(response.text)
        except pydantic.ValidationError as e:
            raise SerializationError(str(e)) from e
        if not magic.success:
            raise ServiceError(magic.error or "Spell execution failed")
        return magic
