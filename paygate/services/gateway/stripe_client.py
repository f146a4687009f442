"""Thin async wrapper around the Stripe SDK for payment intent creation."""

from dataclasses import dataclass
from typing import Any

import stripe


@dataclass(slots=True)
class PaymentIntentRef:
    """Processor-issued intent identifier and client secret."""

    id: str
    client_secret: str


class PaymentProcessorError(RuntimeError):
    """Raised when the payment processor rejects or fails a request."""


class StripePaymentProcessor:
    """Creates payment intents through Stripe without network retries."""

    def __init__(self, secret_key: str, *, client: Any | None = None) -> None:
        self._http_client: stripe.HTTPXClient | None = None
        if client is None:
            self._http_client = stripe.HTTPXClient()
            client = stripe.StripeClient(
                secret_key,
                http_client=self._http_client,
                max_network_retries=0,
            )
        self._client = client

    async def create_payment_intent(
        self,
        *,
        amount_minor: int,
        currency: str,
        automatic_payment_methods: bool = True,
    ) -> PaymentIntentRef:
        params: dict[str, Any] = {
            "amount": amount_minor,
            "currency": currency,
            "automatic_payment_methods": {"enabled": automatic_payment_methods},
        }
        try:
            intent = await self._client.v1.payment_intents.create_async(params)
        except stripe.StripeError as exc:
            raise PaymentProcessorError(exc.user_message or str(exc)) from exc
        if not intent.client_secret:
            raise PaymentProcessorError("Stripe did not return a client secret")
        return PaymentIntentRef(id=intent.id, client_secret=intent.client_secret)

    async def close(self) -> None:
        """Release the underlying HTTP connection pool, if this wrapper owns one."""

        if self._http_client is not None:
            await self._http_client.close_async()
