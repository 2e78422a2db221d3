"""Response models for the v1 API"""

from pydantic import BaseModel


class MediaUrlResponse(BaseModel):
    """Model for the `media/url` API response.

    `max_width` is the width cap encoded in `url`, 0 if there is none.
    """

    url: str
    max_width: int
