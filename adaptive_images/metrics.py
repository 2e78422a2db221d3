"""StatsD client shared by the media provider and the metrics middleware."""

import logging
from functools import cache
from typing import Mapping

import aiodogstatsd

from adaptive_images.config import settings

logger = logging.getLogger(__name__)

# Type definition for tags in aiodogstatsd metrics
MetricTags = Mapping[str, float | int | str]


@cache
def get_metrics_client() -> aiodogstatsd.Client:
    """Instantiate and memoize the StatsD client.

    Every metric is tagged with the resolver variant, as extended and legacy
    deployments rewrite different widths for the same requests.
    """
    constant_tags: MetricTags = {
        "application": "adaptive-images",
        "deployment.canary": int(settings.deployment.canary),
        "resolver.variant": settings.resolver.variant,
    }

    return aiodogstatsd.Client(
        host=settings.metrics.host,
        port=settings.metrics.port,
        namespace="adaptive_images",
        constant_tags=constant_tags,
    )


async def configure_metrics() -> None:
    """Connect the StatsD client at startup, logging datagrams in development."""
    client = get_metrics_client()
    if settings.metrics.dev_logger:
        client._protocol = _LocalDatagramLogger()
    await client.connect()


class _LocalDatagramLogger(aiodogstatsd.client.DatagramProtocol):
    """Log StatsD datagrams instead of sending them."""

    def send(self, data: bytes) -> None:
        logger.debug("Sending metric", extra={"data": data.decode("utf8")})
