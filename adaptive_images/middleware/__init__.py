"""adaptive-images middlewares"""

from enum import Enum, unique


@unique
class ScopeKey(str, Enum):
    """Keys into the ASGI scope dict"""

    USER_AGENT = "adaptive_images_user_agent"
