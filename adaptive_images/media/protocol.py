"""Protocol and models for the media URL building extension point."""

from enum import Enum, unique
from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field


@unique
class PageMode(str, Enum):
    """How the page requesting the media URL is being rendered."""

    NORMAL = "normal"
    EDIT = "edit"
    PREVIEW = "preview"


class MediaItem(BaseModel):
    """A media library item."""

    path: str
    mime_type: str

    @property
    def is_image(self) -> bool:
        """Whether the item is an image, based on its MIME type."""
        return "image" in self.mime_type.lower()


class MediaUrlOptions(BaseModel):
    """Scaling options passed to the URL builder. 0 means unset."""

    model_config = ConfigDict(frozen=True)

    width: int = Field(default=0, ge=0)
    height: int = Field(default=0, ge=0)
    max_width: int = Field(default=0, ge=0)
    max_height: int = Field(default=0, ge=0)
    thumbnail: bool = False


class MediaRequestContext(BaseModel):
    """Per-request information the provider needs from the host.

    `cookie` is the raw resolution cookie value, None when the request has none.
    """

    cookie: str | None = None
    user_agent: str | None = None
    database: str | None = None
    page_mode: PageMode = PageMode.NORMAL


class MediaUrl(BaseModel):
    """A built media URL and the side effects the caller has to apply."""

    url: str
    max_width: int
    expire_cookie: bool = False


class MediaUrlBuilder(Protocol):
    """Protocol for the host pipeline call that turns an item and its scaling
    options into a URL.
    """

    def build(self, item: MediaItem, options: MediaUrlOptions) -> str:  # pragma: no cover
        """Build the URL for `item` scaled according to `options`."""
        ...
