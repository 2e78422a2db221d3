"""Build the typed resolver configuration from the string-keyed settings."""

import logging
from typing import Any, Mapping

from pydantic import ValidationError

from adaptive_images.exceptions import ConfigurationError
from adaptive_images.resolver.models import ResolverConfig, Variant, parse_int

logger = logging.getLogger(__name__)


def load_resolver_config(resolver_settings: Mapping[str, Any]) -> ResolverConfig:
    """Load the `resolver` settings table into a `ResolverConfig`.

    This should only be called at startup: any invalid value aborts it.

    Raises:
        ConfigurationError: if the breakpoints are missing, empty or not integers,
            or if any other setting is invalid.
    """
    breakpoints = _parse_breakpoints(resolver_settings.get("resolutions"))

    try:
        variant = Variant(resolver_settings.get("variant") or Variant.EXTENDED)
    except ValueError as exc:
        raise ConfigurationError(f"Invalid resolver variant: {exc}") from exc

    try:
        config = ResolverConfig(
            breakpoints=breakpoints,
            cookie_name=resolver_settings.get("cookie_name") or "",
            mobile_first=str(resolver_settings.get("mobile_first", "")).lower() == "true",
            max_width=_parse_max_width(resolver_settings.get("max_width")),
            variant=variant,
            database=resolver_settings.get("database") or None,
        )
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid resolver settings: {exc}") from exc

    logger.info(
        "Loaded resolver configuration",
        extra={
            "breakpoints": list(config.breakpoints),
            "mobile_first": config.mobile_first,
            "variant": config.variant.value,
        },
    )
    return config


def _parse_breakpoints(resolutions: Any) -> tuple[int, ...]:
    """Parse a comma-separated string or a list of breakpoints."""
    match resolutions:
        case str():
            tokens = resolutions.split(",")
        case list() | tuple():
            tokens = [str(token) for token in resolutions]
        case _:
            raise ConfigurationError("Resolver resolutions are not configured")

    breakpoints = []
    for token in tokens:
        breakpoint = parse_int(token)
        if breakpoint is None:
            raise ConfigurationError(f"Invalid resolver breakpoint: {token!r}")
        breakpoints.append(breakpoint)

    if not breakpoints:
        raise ConfigurationError("Resolver resolutions are empty")
    return tuple(breakpoints)


def _parse_max_width(max_width: Any) -> int | None:
    """Parse the optional width cap. Empty values and 0 mean uncapped."""
    match max_width:
        case None | "" | 0:
            return None
        case bool():
            raise ConfigurationError(f"Invalid resolver max_width: {max_width!r}")
        case int():
            return max_width
        case str() if (value := parse_int(max_width)) is not None:
            return value or None
        case _:
            raise ConfigurationError(f"Invalid resolver max_width: {max_width!r}")
