"""Defines the signing identity and the per-request auth parameters.

Every authenticated request carries four parameters:

- `uuid`: the hex-encoded public key of the signer.
- `timestamp`: milliseconds since the epoch, as a decimal string.
- `hash`: a fresh random nonce, never reused between requests.
- `signature`: the hex-encoded signature over the timestamp string.
"""

import time
import uuid
from typing import Mapping, Protocol, runtime_checkable

AUTH_KEYS = ("uuid", "timestamp", "hash", "signature")


@runtime_checkable
class Signature(Protocol):
    def to_hex(self) -> str: ...


@runtime_checkable
class Signer(Protocol):
    """An opaque signing identity which owns the private key material."""

    def public_key_hex(self) -> str: ...

    def sign(self, message: str) -> Signature: ...


def current_timestamp() -> str:
    return str(time.time_ns() // 1_000_000)


def make_auth_params(signer: Signer) -> dict[str, str]:
    """Builds a fresh set of auth parameters for a single request.

    Args:
        signer: The identity used to sign the request.

    Returns:
        The `uuid`, `timestamp`, `hash` and `signature` parameters.
    """
    timestamp = current_timestamp()
    return {
        "uuid": signer.public_key_hex(),
        "timestamp": timestamp,
        "hash": str(uuid.uuid4()),
        "signature": signer.sign(timestamp).to_hex(),
    }


def to_query_string(params: Mapping[str, str]) -> str:
    # Values are not percent-encoded; the service expects them verbatim.
    return "&".join(f"{key}={value}" for key, value in params.items())
