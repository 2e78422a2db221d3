"""App startup point"""

import logging
from contextlib import asynccontextmanager

from asgi_correlation_id import CorrelationIdMiddleware
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse

from adaptive_images import media
from adaptive_images.config_logging import configure_logging
from adaptive_images.config_sentry import configure_sentry
from adaptive_images.metrics import configure_metrics, get_metrics_client
from adaptive_images.middleware import logging as mw_logging
from adaptive_images.middleware import metrics, user_agent
from adaptive_images.web import api_v1, dockerflow

tags_metadata = [
    {
        "name": "media",
        "description": "Build media URLs sized for the client's screen resolution.",
    },
]

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Set up various configurations at startup and handle shutdown clean up.
    See lifespan events in fastAPI docs https://fastapi.tiangolo.com/advanced/events/
    """
    configure_logging()
    configure_sentry()
    await configure_metrics()
    # An invalid resolver configuration raises here and aborts the startup.
    media.init_provider()
    yield
    await get_metrics_client().close()


app = FastAPI(openapi_tags=tags_metadata, lifespan=lifespan, default_response_class=ORJSONResponse)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> ORJSONResponse:
    """Use HTTP status code: 400 for all invalid requests."""
    logger.warning(f"HTTP 400: request validation error for path: {request.url.path}")
    return ORJSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=jsonable_encoder({"detail": exc.errors()}),
    )


# Note: the order of the following middleware registration matters.
# `MetricsMiddleware` reads the user agent parsed by `UserAgentMiddleware`, and
# `LoggingMiddleware` should be added after `CorrelationIdMiddleware`.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["GET", "OPTIONS", "HEAD"],
)
app.add_middleware(metrics.MetricsMiddleware)
app.add_middleware(CorrelationIdMiddleware)
app.add_middleware(user_agent.UserAgentMiddleware)
app.add_middleware(mw_logging.LoggingMiddleware)

app.include_router(dockerflow.router)
app.include_router(api_v1.router, prefix="/api/v1")


if __name__ == "__main__":  # pragma: no cover
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000, proxy_headers=True)
