"""Test fixtures for the payment intent gateway."""

import os
from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("STRIPE_SECRET_KEY", "sk_test_dummy")

from paygate.common.config import GatewaySettings
from paygate.services.gateway.main import create_app
from paygate.services.gateway.stripe_client import PaymentIntentRef


class FakeProcessor:
    """In-memory stand-in for Stripe that records every creation call."""

    def __init__(self, client_secret: str = "pi_test_123_secret_abc", error: Exception | None = None) -> None:
        self.client_secret = client_secret
        self.error = error
        self.calls: list[dict] = []
        self.closed = False

    async def create_payment_intent(self, *, amount_minor, currency, automatic_payment_methods=True):
        self.calls.append(
            {
                "amount_minor": amount_minor,
                "currency": currency,
                "automatic_payment_methods": automatic_payment_methods,
            }
        )
        if self.error is not None:
            raise self.error
        return PaymentIntentRef(id="pi_test_123", client_secret=self.client_secret)

    async def close(self) -> None:
        self.closed = True


@pytest.fixture()
def settings() -> GatewaySettings:
    return GatewaySettings(stripe_secret_key="sk_test_dummy", _env_file=None)


@pytest.fixture()
def processor() -> FakeProcessor:
    return FakeProcessor()


@pytest_asyncio.fixture()
async def client(settings: GatewaySettings, processor: FakeProcessor) -> AsyncIterator[AsyncClient]:
    """Yield an async client bound to a fresh app using the fake processor."""
    app = create_app(settings, processor=processor)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http_client:
        yield http_client
