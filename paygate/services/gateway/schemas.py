"""Request/response schemas for the payment intent endpoints."""

import math

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PaymentIntentCreate(BaseModel):
    """Payload accepted by `POST /create-payment-intent`.

    `amount` is in major currency units. Numeric strings are coerced; booleans
    are refused even though they would coerce to a number.
    """

    model_config = ConfigDict(extra="ignore")

    amount: float = Field(gt=0, allow_inf_nan=False)

    @field_validator("amount", mode="before")
    @classmethod
    def reject_booleans(cls, value):
        if isinstance(value, bool):
            raise ValueError("amount must be a number")
        return value

    @field_validator("amount")
    @classmethod
    def reject_unrepresentable_minor_units(cls, value: float) -> float:
        if not math.isfinite(value * 100):
            raise ValueError("amount is too large")
        return value


class PaymentIntentResponse(BaseModel):
    """Client credential returned to the caller."""

    model_config = ConfigDict(populate_by_name=True)

    client_secret: str = Field(alias="clientSecret")


class ErrorResponse(BaseModel):
    error: str


class HealthStatus(BaseModel):
    status: str
