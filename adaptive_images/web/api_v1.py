"""adaptive-images V1 API"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Header, Query
from fastapi.encoders import jsonable_encoder
from fastapi.responses import ORJSONResponse
from starlette.requests import Request
from starlette.responses import Response

from adaptive_images.config import settings
from adaptive_images.media import get_provider
from adaptive_images.media.protocol import (
    MediaItem,
    MediaRequestContext,
    MediaUrlOptions,
    PageMode,
)
from adaptive_images.media.provider import Provider
from adaptive_images.resolver.client_script import render_client_script
from adaptive_images.resolver.models import INT32_MAX
from adaptive_images.web.models_v1 import MediaUrlResponse

logger = logging.getLogger(__name__)
router = APIRouter()

PATH_CHARACTER_MAX = settings.web.api.v1.path_character_max
SCRIPT_CACHE_TTL_SEC = settings.web.api.v1.script_cache_ttl_sec


@router.get(
    "/media/url",
    tags=["media"],
    summary="Build a media URL sized for the client's screen",
    response_model=MediaUrlResponse,
)
async def media_url(
    request: Request,
    path: Annotated[str, Query(min_length=1, max_length=PATH_CHARACTER_MAX)],
    mime_type: Annotated[str, Query(min_length=1, max_length=255)],
    width: Annotated[int, Query(ge=0, le=INT32_MAX)] = 0,
    height: Annotated[int, Query(ge=0, le=INT32_MAX)] = 0,
    max_width: Annotated[int, Query(ge=0, le=INT32_MAX)] = 0,
    max_height: Annotated[int, Query(ge=0, le=INT32_MAX)] = 0,
    thumbnail: bool = False,
    database: Annotated[str | None, Query(max_length=255)] = None,
    mode: PageMode = PageMode.NORMAL,
    user_agent: Annotated[str | None, Header()] = None,
    provider: Provider = Depends(get_provider),
) -> Response:
    """Build the URL of a media item.

    Images get their max width capped to the breakpoint matching the screen
    resolution reported by the resolution cookie. Without the cookie the
    largest (or, mobile first, the smallest) breakpoint is used.

    **Args:**

    - `path`: Path of the media item.
    - `mime_type`: MIME type of the media item. Only images are rewritten.
    - `width`, `height`, `max_width`, `max_height`, `thumbnail`: [Optional] Scaling
      options the page already asked for. 0 means unset.
    - `database`: [Optional] The database the page is rendered from. Required for
      images to be rewritten when the service is configured with a database.
    - `mode`: [Optional] One of `normal`, `edit`, `preview`. Defaults to `normal`.

    **Headers:**

    - `User-Agent` - Used to tell desktops apart when there is no resolution cookie.

    **Returns:**

    - `url`: The media URL.
    - `max_width`: The max width encoded in the URL, 0 if there is none.

    A resolution cookie that cannot be parsed is expired in the response.
    """
    result = provider.get_media_url(
        MediaItem(path=path, mime_type=mime_type),
        MediaUrlOptions(
            width=width,
            height=height,
            max_width=max_width,
            max_height=max_height,
            thumbnail=thumbnail,
        ),
        MediaRequestContext(
            cookie=request.cookies.get(provider.cookie_name),
            user_agent=user_agent,
            database=database,
            page_mode=mode,
        ),
    )

    response = ORJSONResponse(
        content=jsonable_encoder(MediaUrlResponse(url=result.url, max_width=result.max_width))
    )
    if result.expire_cookie:
        response.delete_cookie(provider.cookie_name, path="/")
    return response


@router.get(
    "/resolution.js",
    tags=["media"],
    summary="Script reporting the client's screen resolution",
)
async def resolution_script(provider: Provider = Depends(get_provider)) -> Response:
    """Return the script setting the resolution cookie.

    It must be loaded in the page head before any other script.
    """
    return Response(
        content=render_client_script(provider.resolver.config),
        media_type="application/javascript",
        headers={"Cache-Control": f"private, max-age={SCRIPT_CACHE_TTL_SEC}"},
    )
