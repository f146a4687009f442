"""Payment intent creation: amount validation, unit conversion, processor call."""

import math
from typing import Protocol

from paygate.common.config import GatewaySettings
from paygate.common.logging import logger
from paygate.common.metrics import (
    payment_intent_created_total,
    payment_intent_failures_total,
    payment_intent_latency_seconds,
)
from paygate.services.gateway.stripe_client import PaymentIntentRef, PaymentProcessorError


class InvalidAmountError(ValueError):
    """Raised for a missing, non-numeric, non-finite or non-positive amount."""


class PaymentProcessor(Protocol):
    async def create_payment_intent(
        self,
        *,
        amount_minor: int,
        currency: str,
        automatic_payment_methods: bool = True,
    ) -> PaymentIntentRef: ...

    async def close(self) -> None: ...


def to_minor_units(amount: float) -> int:
    """Convert major units to the processor's integer minor units, halves rounding up."""

    return math.floor(amount * 100 + 0.5)


def validate_amount(amount) -> float:
    if isinstance(amount, bool) or not isinstance(amount, (int, float)):
        raise InvalidAmountError("Invalid amount")
    if not math.isfinite(amount) or amount <= 0 or not math.isfinite(amount * 100):
        raise InvalidAmountError("Invalid amount")
    return float(amount)


class PaymentIntentService:
    """Forwards validated amounts to the payment processor."""

    def __init__(self, processor: PaymentProcessor, settings: GatewaySettings) -> None:
        self.processor = processor
        self.settings = settings

    async def create_payment_intent(self, amount: float) -> PaymentIntentRef:
        """Create one intent at the processor and return its reference.

        Processor failures are logged and re-raised unchanged; nothing is retried.
        """

        service_name = self.settings.service_name
        try:
            amount = validate_amount(amount)
        except InvalidAmountError:
            payment_intent_failures_total.labels(service=service_name, reason="invalid_amount").inc()
            raise

        amount_minor = to_minor_units(amount)
        try:
            with payment_intent_latency_seconds.labels(service=service_name).time():
                intent = await self.processor.create_payment_intent(
                    amount_minor=amount_minor,
                    currency=self.settings.currency,
                    automatic_payment_methods=self.settings.automatic_payment_methods,
                )
        except PaymentProcessorError as exc:
            payment_intent_failures_total.labels(service=service_name, reason="processor_error").inc()
            logger.error("payment processor error: %s", exc)
            raise

        payment_intent_created_total.labels(service=service_name, currency=self.settings.currency).inc()
        logger.info(
            "payment intent created payment_intent_id=%s amount_minor=%s", intent.id, amount_minor
        )
        return intent
