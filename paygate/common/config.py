"""Environment-driven settings for the gateway process.

Loaded once at process start and handed to `create_app`. Behavior is
controlled by environment variables (see `.env.example`).
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class GatewaySettings(BaseSettings):
    """Typed view of runtime configuration from environment variables."""

    service_name: str = "payment-intent-gateway"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 3000
    stripe_secret_key: str
    currency: str = "inr"
    automatic_payment_methods: bool = True
    cors_allow_origins: list[str] = ["*"]
    otel_exporter_otlp_endpoint: str | None = None
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")
