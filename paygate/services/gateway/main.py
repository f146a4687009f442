"""Public entrypoint for payment intent creation.

Validates the requested amount, forwards creation to Stripe and hands the
client secret back so the caller can complete payment client-side.
"""

from contextlib import asynccontextmanager
from time import perf_counter
from uuid import uuid4

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from paygate.common.config import GatewaySettings
from paygate.common.logging import configure_logging, logger, trace_id_ctx
from paygate.common.metrics import (
    http_request_duration_seconds,
    http_requests_total,
    metrics_response,
    payment_intent_failures_total,
    payment_intent_requests_total,
)
from paygate.common.startup import log_startup_config
from paygate.common.tracing import instrument_app, setup_tracing
from paygate.services.gateway.schemas import (
    ErrorResponse,
    HealthStatus,
    PaymentIntentCreate,
    PaymentIntentResponse,
)
from paygate.services.gateway.service import (
    InvalidAmountError,
    PaymentIntentService,
    PaymentProcessor,
)
from paygate.services.gateway.stripe_client import PaymentProcessorError, StripePaymentProcessor

HEALTH_STATUS = "Backend running successfully"
INVALID_AMOUNT = "Invalid amount"


def get_payment_intent_service(request: Request) -> PaymentIntentService:
    return request.app.state.payment_intents


def create_app(settings: GatewaySettings, processor: PaymentProcessor | None = None) -> FastAPI:
    """Build the gateway app around one settings object and one processor client."""

    if processor is None:
        processor = StripePaymentProcessor(settings.stripe_secret_key)

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        """Close the processor's HTTP client with app lifecycle."""

        yield
        await processor.close()

    app = FastAPI(title="Payment Intent Gateway", lifespan=lifespan)
    app.state.settings = settings
    app.state.payment_intents = PaymentIntentService(processor, settings)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    instrument_app(app)

    @app.middleware("http")
    async def correlation_middleware(request: Request, call_next):
        """Bind a trace id for log records and echo it back to the caller."""

        trace_id = request.headers.get("x-correlation-id") or str(uuid4())
        trace_id_ctx.set(trace_id)
        response = await call_next(request)
        response.headers["x-correlation-id"] = trace_id
        return response

    @app.middleware("http")
    async def metrics_middleware(request: Request, call_next):
        """Record request count and latency for every HTTP call."""

        start = perf_counter()
        route = request.url.path
        method = request.method
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            route_obj = request.scope.get("route")
            if route_obj is not None and getattr(route_obj, "path", None):
                route = route_obj.path
            return response
        finally:
            elapsed = max(0.0, perf_counter() - start)
            http_request_duration_seconds.labels(
                service=settings.service_name,
                route=route,
                method=method,
            ).observe(elapsed)
            http_requests_total.labels(
                service=settings.service_name,
                route=route,
                method=method,
                status_code=str(status_code),
            ).inc()

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        if any(error.get("type") == "json_invalid" for error in exc.errors()):
            return JSONResponse(status_code=400, content={"error": "Invalid JSON body"})
        if request.url.path == "/create-payment-intent":
            payment_intent_failures_total.labels(
                service=settings.service_name, reason="invalid_amount"
            ).inc()
        logger.info("rejected request path=%s errors=%s", request.url.path, exc.errors())
        return JSONResponse(status_code=400, content={"error": INVALID_AMOUNT})

    @app.exception_handler(InvalidAmountError)
    async def handle_invalid_amount(_: Request, exc: InvalidAmountError):
        return JSONResponse(status_code=400, content={"error": str(exc)})

    @app.exception_handler(PaymentProcessorError)
    async def handle_processor_error(_: Request, exc: PaymentProcessorError):
        return JSONResponse(status_code=500, content={"error": str(exc)})

    @app.get("/", response_model=HealthStatus)
    def health_status():
        """Static liveness payload for the mobile client."""

        return HealthStatus(status=HEALTH_STATUS)

    @app.post(
        "/create-payment-intent",
        response_model=PaymentIntentResponse,
        response_model_by_alias=True,
        responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    )
    async def create_payment_intent(
        req: PaymentIntentCreate,
        service: PaymentIntentService = Depends(get_payment_intent_service),
    ):
        """Create a Stripe payment intent and return its client secret."""

        payment_intent_requests_total.labels(service=settings.service_name).inc()
        logger.info("payment intent requested amount=%s", req.amount)
        intent = await service.create_payment_intent(req.amount)
        return PaymentIntentResponse(client_secret=intent.client_secret)

    @app.get("/metrics")
    def metrics():
        """Prometheus scrape endpoint."""

        return metrics_response()

    @app.get("/health")
    def health():
        """Container health probe endpoint."""

        return {"ok": True}

    return app


settings = GatewaySettings()
configure_logging(settings)
setup_tracing(settings.service_name, settings.otel_exporter_otlp_endpoint)
log_startup_config(
    settings,
    [
        "host",
        "port",
        "currency",
        "automatic_payment_methods",
        "stripe_secret_key",
        "otel_exporter_otlp_endpoint",
    ],
)
app = create_app(settings)
