"""Utility functions for talking to the prof service."""

import functools

from prof.conf import Settings

DEFAULT_MIME_TYPE = "application/octet-stream"

MIME_TYPES = {
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "png": "image/png",
    "webp": "image/webp",
}


@functools.lru_cache
def get_api_root() -> str:
    """Returns the default root URL for the prof service."""
    return Settings.load().api_root


def normalize_base_url(base_url: str) -> str:
    """Strips a single trailing slash from the base URL."""
    return base_url[:-1] if base_url.endswith("/") else base_url


def guess_mime_type(filename: str) -> str:
    """Guesses an image MIME type from the file extension alone.

    Args:
        filename: The name of the uploaded file.

    Returns:
        The MIME type, or `application/octet-stream` for unknown extensions.
    """
    extension = filename.rsplit(".", 1)[-1].lower() if "." in filename else ""
    return MIME_TYPES.get(extension, DEFAULT_MIME_TYPE)
