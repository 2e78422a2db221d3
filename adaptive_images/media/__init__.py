"""Initialize the adaptive media provider"""

import logging
from timeit import default_timer as timer

from adaptive_images.config import settings
from adaptive_images.media.backends.query_string import QueryStringUrlBuilder
from adaptive_images.media.provider import Provider
from adaptive_images.metrics import get_metrics_client
from adaptive_images.resolver import BreakpointResolver, load_resolver_config

logger = logging.getLogger(__name__)

provider: Provider | None = None


def init_provider() -> None:
    """Initialize the media provider.

    This should only be called once at the startup of application.

    Raises:
        ConfigurationError: if the resolver settings are invalid.
    """
    global provider
    start = timer()

    provider = Provider(
        resolver=BreakpointResolver(load_resolver_config(settings.resolver)),
        url_builder=QueryStringUrlBuilder(
            url_prefix=settings.media.url_prefix,
            extension=settings.media.extension,
        ),
        metrics_client=get_metrics_client(),
    )

    logger.info(
        "Media provider initialization completed",
        extra={"provider": provider.name, "elapsed": timer() - start},
    )


def get_provider() -> Provider:
    """Return the media provider"""
    if provider is None:
        raise ValueError("Media provider has not been initialized.")
    return provider
