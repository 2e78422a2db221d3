"""Sentry Configuration"""

import logging

import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.starlette import StarletteIntegration
from sentry_sdk.types import Event, Hint

from adaptive_images.config import settings
from adaptive_images.utils.version import fetch_app_version_from_file

logger = logging.getLogger(__name__)

REDACTED_TEXT = "[REDACTED]"

# Frame variables that hold a raw cookie value, or an object carrying one.
COOKIE_FRAME_VARS = frozenset({"context", "cookie", "cookies", "request", "tokens", "value"})


def configure_sentry() -> None:  # pragma: no cover
    """Configure and initialize Sentry integration."""
    if settings.sentry.mode == "disabled":
        return
    # This is the SHA-1 hash of the HEAD of the current branch stored in version.json file.
    version_sha = fetch_app_version_from_file().commit
    sentry_sdk.init(
        dsn=settings.sentry.dsn,
        integrations=[
            StarletteIntegration(),
            FastApiIntegration(),
        ],
        release=version_sha,
        debug="debug" == settings.sentry.mode,
        before_send=strip_sensitive_data,
        environment=settings.sentry.env,
        traces_sample_rate=settings.sentry.traces_sample_rate,
    )


def strip_sensitive_data(event: Event, hint: Hint) -> Event | None:
    """Filter client cookies out of Sentry events.

    The resolution cookie travels with every other cookie of the site, so the
    whole `Cookie` header and any frame variable holding a cookie are redacted.
    """
    #  See: https://docs.sentry.io/platforms/python/configuration/filtering/
    request = event.get("request", {})
    if request.get("cookies"):
        request["cookies"] = REDACTED_TEXT

    headers = request.get("headers", {})
    for name in list(headers):
        if name.lower() == "cookie":
            headers[name] = REDACTED_TEXT

    for exception in event.get("exception", {}).get("values", []):
        for frame in exception.get("stacktrace", {}).get("frames", []):
            frame_vars = frame.get("vars", {})
            for name in COOKIE_FRAME_VARS.intersection(frame_vars):
                frame_vars[name] = REDACTED_TEXT

    return event
