"""Middleware for request metrics using FastAPI's middleware system."""

import logging
from functools import cache
from http import HTTPStatus
from time import monotonic

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from adaptive_images.metrics import get_metrics_client
from adaptive_images.middleware import ScopeKey
from adaptive_images.middleware.user_agent import UserAgent

logger = logging.getLogger(__name__)


class MetricsMiddleware(BaseHTTPMiddleware):
    """Middleware for instrumenting request level metrics. Timing and status codes
    are collected for all known paths, status codes alone for unknown ones.
    """

    @cache
    def _build_metric_name(self, method: str, path: str) -> str:
        return "{}.{}".format(method, path.lower().lstrip("/").replace("/", ".")).lower()

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        """Capture request metrics including timing and status codes."""
        metrics_client = get_metrics_client()
        user_agent: UserAgent | None = request.scope.get(ScopeKey.USER_AGENT)
        tags = user_agent.model_dump() if user_agent else {}

        started_at = monotonic()
        try:
            response = await call_next(request)
        except Exception:
            duration = (monotonic() - started_at) * 1000
            metric_name = self._build_metric_name(request.method, request.url.path)
            status_code = HTTPStatus.INTERNAL_SERVER_ERROR.value

            metrics_client.timing(f"{metric_name}.timing", value=duration, tags=tags)
            metrics_client.increment(f"{metric_name}.status_codes.{status_code}", tags=tags)
            metrics_client.increment(f"response.status_codes.{status_code}", tags=tags)
            raise

        duration = (monotonic() - started_at) * 1000
        status_code = response.status_code

        # NOT_FOUND statuses are only tracked by the general `response.status_codes` metric.
        if status_code != HTTPStatus.NOT_FOUND:
            metric_name = self._build_metric_name(request.method, request.url.path)
            metrics_client.timing(f"{metric_name}.timing", value=duration, tags=tags)
            metrics_client.increment(f"{metric_name}.status_codes.{status_code}", tags=tags)

        metrics_client.increment(f"response.status_codes.{status_code}", tags=tags)
        return response
