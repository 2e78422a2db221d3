"""Data models for the breakpoint resolver."""

import re
from enum import Enum, unique

from pydantic import BaseModel, ConfigDict, Field, field_validator

from adaptive_images.exceptions import MangledCookieError

# Substrings of a lowercased user agent that identify a desktop OS.
DESKTOP_OS_MARKERS: tuple[str, ...] = ("macintosh", "x11", "windows nt")

# An integer with an optional sign and at most 10 digits.
INTEGER_PATTERN = re.compile(r"[+-]?\d{1,10}", re.ASCII)

# Bounds of the 32-bit signed integers accepted from clients and settings.
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def parse_int(value: str) -> int | None:
    """Return `value` as an integer, or None if it isn't a 32-bit signed one."""
    value = value.strip()
    if INTEGER_PATTERN.fullmatch(value) is None:
        return None
    number = int(value)
    if not INT32_MIN <= number <= INT32_MAX:
        return None
    return number


@unique
class Variant(str, Enum):
    """Resolver behaviours.

    `extended` honours the pixel density sent by the client, the `max_width` cap
    and database gating. `legacy` ignores all three.
    """

    EXTENDED = "extended"
    LEGACY = "legacy"


class ResolverConfig(BaseModel):
    """Immutable resolver configuration, built once at startup."""

    model_config = ConfigDict(frozen=True)

    breakpoints: tuple[int, ...]
    cookie_name: str = Field(min_length=1, pattern=r"^[\w.-]+$")
    mobile_first: bool = False
    max_width: int | None = Field(default=None, gt=0, le=INT32_MAX)
    variant: Variant = Variant.EXTENDED
    database: str | None = None
    desktop_markers: tuple[str, ...] = DESKTOP_OS_MARKERS

    @field_validator("breakpoints")
    @classmethod
    def collapse_breakpoints(cls, value: tuple[int, ...]) -> tuple[int, ...]:
        """Drop duplicate breakpoints, keeping the configured order of first
        occurrences.
        """
        if not value:
            raise ValueError("at least one breakpoint is required")
        if any(breakpoint <= 0 for breakpoint in value):
            raise ValueError("breakpoints must be positive")
        if any(breakpoint > INT32_MAX for breakpoint in value):
            raise ValueError(f"breakpoints must not exceed {INT32_MAX}")
        return tuple(dict.fromkeys(value))

    @property
    def smallest_breakpoint(self) -> int:
        """Return the mobile-first breakpoint."""
        return min(self.breakpoints)

    @property
    def largest_breakpoint(self) -> int:
        """Return the largest breakpoint."""
        return max(self.breakpoints)

    @property
    def ascending_breakpoints(self) -> tuple[int, ...]:
        """Return the breakpoints sorted smallest first."""
        return tuple(sorted(self.breakpoints))

    @property
    def density_aware(self) -> bool:
        """Whether the pixel density, `max_width` and `database` settings apply."""
        return self.variant is Variant.EXTENDED


class ResolutionCookie(BaseModel):
    """The client's screen resolution as reported by the resolution cookie.

    The cookie value is `"<width>"` or `"<width>,<density>"`.
    """

    client_width: int
    pixel_density: int = 1

    @classmethod
    def parse(cls, value: str, read_density: bool = True) -> "ResolutionCookie":
        """Parse a raw cookie value.

        The density falls back to 1 when it is missing, not an integer, not
        positive, or when `read_density` is off.

        Raises:
            MangledCookieError: if the width isn't an integer.
        """
        tokens = value.split(",")
        client_width = parse_int(tokens[0])
        if client_width is None:
            raise MangledCookieError(f"Unparsable resolution cookie width: {tokens[0]!r}")

        pixel_density = 1
        if read_density and len(tokens) > 1:
            density = parse_int(tokens[1])
            if density is not None and density > 0:
                pixel_density = density

        return cls(client_width=client_width, pixel_density=pixel_density)


class WidthSelection(BaseModel):
    """Outcome of a width selection.

    `width` of 0 means "keep the caller's own width". `expire_cookie` asks the
    caller to clear the resolution cookie from its response.
    """

    model_config = ConfigDict(frozen=True)

    width: int
    expire_cookie: bool = False
