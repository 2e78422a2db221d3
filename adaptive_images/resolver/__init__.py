"""Breakpoint resolver"""

from adaptive_images.resolver.config import load_resolver_config
from adaptive_images.resolver.models import ResolverConfig, Variant, WidthSelection
from adaptive_images.resolver.resolver import BreakpointResolver

__all__ = [
    "BreakpointResolver",
    "ResolverConfig",
    "Variant",
    "WidthSelection",
    "load_resolver_config",
]
