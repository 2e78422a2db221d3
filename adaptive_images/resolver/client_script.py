"""The client-side script that reports the screen resolution through a cookie."""

from adaptive_images.resolver.models import ResolverConfig

SCREEN_WIDTH_EXPRESSION = "Math.max(screen.width,screen.height)"
PIXEL_DENSITY_EXPRESSION = '("devicePixelRatio" in window ? devicePixelRatio : 1)'


def render_client_script(config: ResolverConfig) -> str:
    """Render the one-line script setting the resolution cookie.

    It has to run on every page load before any other script. The cookie is a
    session cookie on path `/`.
    """
    value = SCREEN_WIDTH_EXPRESSION
    if config.density_aware:
        value = f"{value}+','+{PIXEL_DENSITY_EXPRESSION}"
    return f"document.cookie='{config.cookie_name}='+{value}+'; path=/';"
