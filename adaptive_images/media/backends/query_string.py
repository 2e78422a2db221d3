"""A media URL builder that encodes the scaling options in the query string."""

from urllib.parse import quote, urlencode

from adaptive_images.media.protocol import MediaItem, MediaUrlOptions


class QueryStringUrlBuilder:
    """Build `<prefix>/<path>.<extension>?w=..&h=..&mw=..&mh=..&thn=1` URLs.

    Only options that differ from their defaults appear in the query string.
    """

    url_prefix: str
    extension: str

    def __init__(self, url_prefix: str, extension: str) -> None:
        self.url_prefix = url_prefix.rstrip("/")
        self.extension = extension.lstrip(".")

    def build(self, item: MediaItem, options: MediaUrlOptions) -> str:
        """Build the URL for `item` scaled according to `options`."""
        path = quote(item.path.strip("/"))
        url = f"{self.url_prefix}/{path}"
        if self.extension:
            url = f"{url}.{self.extension}"

        params = [
            (name, value)
            for name, value in (
                ("w", options.width),
                ("h", options.height),
                ("mw", options.max_width),
                ("mh", options.max_height),
                ("thn", int(options.thumbnail)),
            )
            if value
        ]
        return f"{url}?{urlencode(params)}" if params else url
