"""Select the image width to request for a client's reported screen resolution."""

import logging

from adaptive_images.exceptions import MangledCookieError
from adaptive_images.resolver.models import ResolutionCookie, ResolverConfig, WidthSelection

logger = logging.getLogger(__name__)


class BreakpointResolver:
    """Pick the breakpoint an image should be scaled to.

    The resolver holds no state besides its immutable configuration, so a single
    instance is shared by all requests.
    """

    config: ResolverConfig

    def __init__(self, config: ResolverConfig) -> None:
        self.config = config

    def select_width(
        self, cookie: str | None, user_agent: str | None, requested_max_width: int = 0
    ) -> WidthSelection:
        """Select the maximum width to request from the image pipeline.

        Args:
            cookie: Raw value of the resolution cookie, None if the request has none.
            user_agent: The `User-Agent` header, if any.
            requested_max_width: The max width the caller already asked for, 0 if unset.
                Only consulted when the cookie is present.
        Returns:
            The selected width (0 leaves the caller's width untouched) and whether
            the cookie should be expired.
        """
        if cookie is None:
            return WidthSelection(width=self.fallback_width(user_agent))

        try:
            resolution_cookie: ResolutionCookie | None = ResolutionCookie.parse(
                cookie, read_density=self.config.density_aware
            )
        except MangledCookieError as err:
            logger.warning(
                "Expiring mangled resolution cookie: %s",
                err,
                extra={"cookie_name": self.config.cookie_name},
            )
            resolution_cookie = None

        if resolution_cookie is None:
            pixel_density = 1
            resolution = 0
        else:
            pixel_density = resolution_cookie.pixel_density
            resolution = self.match_breakpoint(resolution_cookie.client_width, pixel_density)

        if requested_max_width == 0 or requested_max_width > resolution:
            width = resolution
        else:
            width = requested_max_width

        if width == 0 and self.config.density_aware and self.config.max_width is not None:
            width = self.config.max_width * pixel_density

        return WidthSelection(width=width, expire_cookie=resolution_cookie is None)

    def fallback_width(self, user_agent: str | None) -> int:
        """Return the width for requests without a resolution cookie (e.g. when
        scripting is disabled).
        """
        if not self.config.mobile_first or self.is_desktop_browser(user_agent):
            return self.config.largest_breakpoint
        return self.config.smallest_breakpoint

    def is_desktop_browser(self, user_agent: str | None) -> bool:
        """Guess whether the user agent runs on a desktop OS.

        Only used to turn mobile-first off when no cookie is available.
        """
        if user_agent is None:
            return False

        user_agent = user_agent.lower()
        return any(marker in user_agent for marker in self.config.desktop_markers)

    def match_breakpoint(self, client_width: int, pixel_density: int) -> int:
        """Return the breakpoint for the client's width, or 0 if none fits.

        With a density of 1 this is the smallest breakpoint the width fits in.
        Otherwise the breakpoints are walked in configured order and the last one
        the scaled width fits in wins; a scaled width above every breakpoint
        multiplies that result by the density.
        """
        if pixel_density == 1:
            return next(
                (
                    breakpoint
                    for breakpoint in self.config.ascending_breakpoints
                    if client_width <= breakpoint
                ),
                0,
            )

        total_width = client_width * pixel_density
        resolution = 0
        for breakpoint in self.config.breakpoints:
            if total_width <= breakpoint:
                resolution = breakpoint

        if total_width > self.config.largest_breakpoint:
            resolution *= pixel_density
        return resolution
