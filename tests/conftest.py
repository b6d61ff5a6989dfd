from typing import Callable

import httpx
import pytest

from prof import ProfileClient

PUBLIC_KEY = "02abcdef0123456789"


class FakeSignature:
    def __init__(self, message: str) -> None:
        self.message = message

    def to_hex(self) -> str:
        return self.message.encode().hex()


class FakeSigner:
    """Deterministic signer: the signature is the hex of the message."""

    def __init__(self, public_key: str = PUBLIC_KEY) -> None:
        self.public_key = public_key
        self.signed: list[str] = []

    def public_key_hex(self) -> str:
        return self.public_key

    def sign(self, message: str) -> FakeSignature:
        self.signed.append(message)
        return FakeSignature(message)


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def signer() -> FakeSigner:
    return FakeSigner()


@pytest.fixture
def requests() -> list[httpx.Request]:
    return []


@pytest.fixture
def make_client(
    signer: FakeSigner, requests: list[httpx.Request]
) -> Callable[..., ProfileClient]:
    """Builds a client whose requests are answered by `handler`."""

    def _make(handler: Callable[[httpx.Request], httpx.Response], *, with_signer: bool = True) -> ProfileClient:
        def _record(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return handler(request)

        return ProfileClient(
            "http://prof.test/",
            signer=signer if with_signer else None,
            transport=httpx.MockTransport(_record),
        )

    return _make
