"""The middleware that records access logs."""

import logging
import time
from datetime import datetime

from starlette.requests import Request
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from adaptive_images.utils.log_data_creators import (
    RequestSummaryLogDataModel,
    create_request_summary_log_data,
)

logger = logging.getLogger("request.summary")


class LoggingMiddleware:
    """An ASGI middleware for logging."""

    def __init__(self, app: ASGIApp) -> None:
        """Initialize the middleware and store the ASGI app instance."""
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send):
        """Log requests."""
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        async def send_wrapper(message: Message) -> None:
            if message["type"] == "http.response.start":
                request = Request(scope=scope)
                dt: datetime = datetime.fromtimestamp(time.time())
                log_data: RequestSummaryLogDataModel = create_request_summary_log_data(
                    request, message, dt
                )
                logger.info("", extra=log_data.model_dump())

            await send(message)

        await self.app(scope, receive, send_wrapper)
