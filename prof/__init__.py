"""Defines the common interface for the prof Python client."""

__version__ = "0.1.0"

from pathlib import Path

from prof.auth import Signature, Signer
from prof.builder import ProfileBuilder
from prof.clients.client import ProfileClient
from prof.errors import (
    AuthError,
    HttpError,
    NotFoundError,
    ProfError,
    SerializationError,
    ServiceError,
    ValidationError,
)
from prof.models import HealthResponse, MagicResponse, Profile

ROOT_DIR = Path(__file__).parent
