"""Defines a builder for profile request payloads."""

import json
from typing import Any, Self

from prof.errors import SerializationError


class ProfileBuilder:
    """Incrementally builds the `profileData` payload.

    Later writes to the same key replace earlier ones.
    """

    def __init__(self) -> None:
        self._data: dict[str, Any] = {}

    def name(self, name: str) -> Self:
        return self.field("name", name)

    def email(self, email: str) -> Self:
        return self.field("email", email)

    def field(self, key: str, value: Any) -> Self:
        try:
            json.dumps(value)
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Field {key!r} is not JSON serializable: {e}") from e
        self._data[key] = value
        return self

    def fields(self, **values: Any) -> Self:
        for key, value in values.items():
            self.field(key, value)
        return self

    def build(self) -> dict[str, Any]:
        return dict(self._data)
