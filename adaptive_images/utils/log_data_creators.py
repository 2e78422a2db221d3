"""A utility module for log data creation"""
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel
from starlette.datastructures import Headers
from starlette.requests import Request
from starlette.types import Message

from adaptive_images.middleware import ScopeKey
from adaptive_images.middleware.user_agent import UserAgent


class RequestSummaryLogDataModel(BaseModel):
    """Log metadata for the request summary."""

    errno: int
    time: datetime
    path: str
    method: str
    code: int
    rid: Optional[str] = None  # Provided by the asgi-correlation-id middleware.
    agent: Optional[str] = None
    querystring: dict[str, Any]
    browser: Optional[str] = None
    os_family: Optional[str] = None
    form_factor: Optional[str] = None

    def model_dump(self, **kwargs) -> dict[str, Any]:
        """Convert the datetime type to an iso-formatted string."""
        d: dict[str, Any] = super().model_dump(**kwargs)
        if d.get("time"):
            d["time"] = d["time"].isoformat()
        return d


def create_request_summary_log_data(
    request: Request, message: Message, dt: datetime
) -> RequestSummaryLogDataModel:
    """Create log data for a request."""
    user_agent: UserAgent | None = request.scope.get(ScopeKey.USER_AGENT)

    return RequestSummaryLogDataModel(
        errno=0,
        time=dt,
        path=request.url.path,
        method=request.method,
        code=message["status"],
        rid=Headers(scope=message).get("X-Request-ID"),
        agent=request.headers.get("User-Agent"),
        querystring=dict(request.query_params),
        browser=user_agent.browser if user_agent else None,
        os_family=user_agent.os_family if user_agent else None,
        form_factor=user_agent.form_factor if user_agent else None,
    )
