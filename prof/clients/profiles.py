"""Defines the client for interacting with the profile endpoints."""

import json
from pathlib import Path
from typing import Any

import pydantic

from prof.clients.base import BaseClient
from prof.envelope import interpret_profile_response
from prof.errors import NotFoundError, SerializationError, ServiceError
from prof.models import Profile, ProfileResponse
from prof.utils import guess_mime_type

ImageInput = tuple[bytes, str] | str | Path


def _read_image(image: ImageInput) -> tuple[bytes, str]:
    if isinstance(image, tuple):
        return image
    path = Path(image)
    with open(path, "rb") as f:
        return f.read(), path.name


class ProfilesClient(BaseClient):
    def _profile_form(
        self,
        profile_data: dict[str, Any],
        auth: dict[str, str],
        image: ImageInput | None,
    ) -> dict[str, Any]:
        try:
            encoded = json.dumps(profile_data)
        except (TypeError, ValueError) as e:
            raise SerializationError(str(e)) from e

        # Text parts have no filename, so every request is sent as multipart.
        files: dict[str, Any] = {"profileData": (None, encoded)}
        for key, value in auth.items():
            files[key] = (None, value)
        if image is not None:
            image_bytes, filename = _read_image(image)
            files["image"] = (filename, image_bytes, guess_mime_type(filename))
        return files

    async def _write_profile(
        self,
        method: str,
        profile_data: dict[str, Any],
        image: ImageInput | None,
        not_found_default: str,
    ) -> Profile:
        auth = self.get_auth_params()
        files = self._profile_form(profile_data, auth, image)
        response = await self._send(method, self._url(f"/user/{auth['uuid']}/profile"), files=files)
        return interpret_profile_response(response.text, response.status_code, not_found_default)

    async def create_profile(self, profile_data: dict[str, Any], image: ImageInput | None = None) -> Profile:
        return await self._write_profile("POST", profile_data, image, "Not found")

    async def update_profile(self, profile_data: dict[str, Any], image: ImageInput | None = None) -> Profile:
        return await self._write_profile("PUT", profile_data, image, "Profile not found")

    async def get_profile(self, target_uuid: str | None = None) -> Profile:
        auth = self.get_auth_params()
        uuid = target_uuid or auth["uuid"]
        response = await self._send("GET", self._url(f"/user/{uuid}/profile", auth))
        return interpret_profile_response(response.text, response.status_code, "Profile not found")

    async def delete_profile(self) -> None:
        auth = self.get_auth_params()
        response = await self._send("DELETE", self._url(f"/user/{auth['uuid']}/profile"), json=auth)
        if response.is_success:
            return
        try:
            envelope = ProfileResponse.model_validate_json(response.text)
        except pydantic.ValidationError as e:
            raise SerializationError(str(e)) from e
        raise ServiceError(envelope.error or "Delete failed")

    async def get_profile_image(self, target_uuid: str | None = None) -> bytes:
        auth = self.get_auth_params()
        uuid = target_uuid or auth["uuid"]
        response = await self._send("GET", self._url(f"/user/{uuid}/profile/image", auth))
        if not response.is_success:
            raise NotFoundError("Image not found")
        return response.content

    def get_profile_image_url(self, target_uuid: str | None = None) -> str:
        """Returns a signed image URL, e.g. for an `<img>` tag.

        No request is made; the auth parameters are embedded in the query.
        """
        auth = self.get_auth_params()
        uuid = target_uuid or auth["uuid"]
        return self._url(f"/user/{uuid}/profile/image", auth)
