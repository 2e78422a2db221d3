"""A utility module for user agent parsing."""

import ua_parser
from ua_parser import OS, DefaultedResult, Device


def parse(ua_str: str) -> dict[str, str]:
    """Parse the "User-Agent" string for browser, os family, and form factor.

    It returns a dict with `browser`, `os_family`, and `form_factor` keys.
    Only families are reported; versions are left out to keep log and metric
    cardinality low.
    """
    ua: DefaultedResult = ua_parser.parse(ua_str).with_defaults()
    os_family = _parse_os_family(ua.os)
    return {
        "browser": ua.user_agent.family,
        "os_family": os_family,
        "form_factor": _parse_form_factor(ua.device, os_family),
    }


def _parse_os_family(operating_system: OS) -> str:
    """Parse the OS family from the os result."""
    match operating_system.family:
        case "Windows":
            return "windows"
        case "iOS":
            return "ios"
        case "Mac OS X":
            return "macos"
        case "Android":
            return "android"
        case "Chrome OS":
            return "chromeos"
        case "Ubuntu" | "Fedora" | "Debian" | "Arch Linux" | "Linux":
            return "linux"
        case _:
            return "other"


def _parse_form_factor(device: Device, os_family: str) -> str:
    """Parse the form factor from the device result.

    The underlying parser reports no device for Windows and Linux desktops, so
    those are assumed to be desktops.
    """
    match device.family:
        case "iPhone" | "Generic Smartphone":
            return "phone"
        case "iPad" | "Generic Tablet":
            return "tablet"
        case "Mac":
            return "desktop"
        case "Other" if os_family in ["linux", "windows"]:
            return "desktop"
        case _:
            return "other"
