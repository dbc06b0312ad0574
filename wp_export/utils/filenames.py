from __future__ import annotations

from urllib.parse import unquote, urlparse


def filename_from_url(url: str) -> str:
    """Return the decoded last path segment of ``url``.

    Query strings and fragments are ignored, so
    ``https://ex.com/a/My%20Photo.jpg?w=300`` becomes ``My Photo.jpg``.
    """
    path = urlparse(url).path
    return unquote(path.rstrip("/").split("/")[-1])
