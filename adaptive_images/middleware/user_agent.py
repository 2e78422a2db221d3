"""The middleware that parses the "User-Agent" from the HTTP request header.

The parsed result only feeds request logs and metrics. Width selection uses its
own substring check on the raw header.
"""
from pydantic import BaseModel
from starlette.datastructures import Headers
from starlette.types import ASGIApp, Receive, Scope, Send

from adaptive_images.middleware import ScopeKey
from adaptive_images.utils.user_agent_parsing import parse


class UserAgent(BaseModel):
    """Data model for user agent information.

    `browser`: The browser family, e.g. 'Firefox'. 'Other' if it cannot be parsed.
    `os_family`: One of "windows", "macos", "linux", "ios", "android",
                 "chromeos", or "other".
    `form_factor`: One of "desktop", "phone", "tablet", or "other".
    """

    browser: str
    os_family: str
    form_factor: str


class UserAgentMiddleware:
    """An ASGI middleware to parse and populate user agent information from
    `User-Agent` header.

    The result `UserAgent` is stored in `scope[ScopeKey.USER_AGENT]`.
    """

    def __init__(self, app: ASGIApp) -> None:
        """Initialize."""
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """Parse user agent information and store the result to `scope`."""
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        ua = parse(Headers(scope=scope).get("User-Agent", ""))
        scope[ScopeKey.USER_AGENT] = UserAgent(**ua)

        await self.app(scope, receive, send)
