"""Provider rewriting image URLs to the breakpoint matching the client's screen."""

import logging

import aiodogstatsd

from adaptive_images.media.protocol import (
    MediaItem,
    MediaRequestContext,
    MediaUrl,
    MediaUrlBuilder,
    MediaUrlOptions,
    PageMode,
)
from adaptive_images.resolver import BreakpointResolver

logger = logging.getLogger(__name__)


class Provider:
    """Build media URLs, capping the width of images to the selected breakpoint.

    Everything that isn't subject to the rewrite is handed to the URL builder
    untouched.
    """

    resolver: BreakpointResolver
    url_builder: MediaUrlBuilder
    metrics_client: aiodogstatsd.Client
    name: str

    def __init__(
        self,
        resolver: BreakpointResolver,
        url_builder: MediaUrlBuilder,
        metrics_client: aiodogstatsd.Client,
        name: str = "adaptive_images",
    ) -> None:
        self.resolver = resolver
        self.url_builder = url_builder
        self.metrics_client = metrics_client
        self.name = name

    @property
    def cookie_name(self) -> str:
        """Return the name of the resolution cookie."""
        return self.resolver.config.cookie_name

    def get_media_url(
        self,
        item: MediaItem,
        options: MediaUrlOptions | None = None,
        context: MediaRequestContext | None = None,
    ) -> MediaUrl:
        """Build the URL of a media item for the current request."""
        if options is None:
            options = MediaUrlOptions()
        if context is None:
            context = MediaRequestContext()

        if (reason := self._skip_reason(item, context)) is not None:
            self.metrics_client.increment("media.url.skipped", tags={"reason": reason})
            return MediaUrl(
                url=self.url_builder.build(item, options), max_width=options.max_width
            )

        selection = self.resolver.select_width(
            context.cookie, context.user_agent, options.max_width
        )
        if selection.expire_cookie:
            self.metrics_client.increment("media.cookie.mangled")

        options = options.model_copy(update={"max_width": selection.width})
        self.metrics_client.increment(
            "media.url.rewritten",
            tags={"cookie": "absent" if context.cookie is None else "present"},
        )
        return MediaUrl(
            url=self.url_builder.build(item, options),
            max_width=selection.width,
            expire_cookie=selection.expire_cookie,
        )

    def _skip_reason(self, item: MediaItem, context: MediaRequestContext) -> str | None:
        """Return why the URL of `item` must not be rewritten, None if it should be."""
        if not item.is_image:
            return "not_image"

        config = self.resolver.config
        if not config.density_aware:
            return None
        if config.database is not None and context.database != config.database:
            return "database"
        if context.page_mode is not PageMode.NORMAL:
            return "page_mode"
        return None
