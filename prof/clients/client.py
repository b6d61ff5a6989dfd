"""Defines a unified client for the prof service."""

from prof.clients.base import BaseClient
from prof.clients.health import HealthClient
from prof.clients.magic import MagicClient
from prof.clients.profiles import ProfilesClient


class ProfileClient(
    ProfilesClient,
    MagicClient,
    HealthClient,
    BaseClient,
):
    pass
