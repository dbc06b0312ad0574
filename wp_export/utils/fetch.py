"""
Loading the export document.

The export is usually a local ``.xml`` file, but a ``http(s)://`` location
is accepted too.  Remote exports are downloaded with ``requests`` through a
generic retry wrapper that handles transient network errors and server-side
rate limiting responses (429 or 5xx).
"""

from __future__ import annotations

import re
import time
from typing import Callable, Optional

import requests

_REMOTE_RE = re.compile(r"^https?://", re.IGNORECASE)

RETRY_STATUSES = frozenset({429, 500, 502, 503, 504})


def is_absolute_url(url: str) -> bool:
    return bool(url) and bool(_REMOTE_RE.match(url))


def _backoff(attempt: int, base_delay: float, resp: Optional[requests.Response] = None) -> float:
    retry_after = resp.headers.get("Retry-After", "") if resp is not None else ""
    if retry_after.isdigit():
        return float(retry_after)
    return base_delay * (2 ** attempt)


def with_retries(
    fn: Callable[[], requests.Response],
    *,
    max_attempts: int = 5,
    base_delay: float = 0.7,
    sleep_fn: Callable[[float], None] = time.sleep,
) -> requests.Response:
    """Call ``fn`` until it returns a successful response.

    Network errors and ``RETRY_STATUSES`` responses are retried with
    exponential backoff, or after ``Retry-After`` seconds when the server
    sends it.  The last failure is raised once ``max_attempts`` is reached;
    any other error status is raised right away as ``requests.HTTPError``.
    """
    if max_attempts < 1:
        raise ValueError("max_attempts must be at least 1")
    for attempt in range(max_attempts):
        last = attempt == max_attempts - 1
        try:
            resp = fn()
        except requests.RequestException:
            if last:
                raise
            sleep_fn(_backoff(attempt, base_delay))
            continue
        if resp.status_code in RETRY_STATUSES and not last:
            sleep_fn(_backoff(attempt, base_delay, resp))
            continue
        resp.raise_for_status()
        return resp


def read_export(location: str, *, timeout: float = 30.0, sleep_fn: Callable[[float], None] = time.sleep) -> str:
    """Return the text of the export found at ``location`` (path or URL)."""
    if is_absolute_url(location):
        resp = with_retries(lambda: requests.get(location, timeout=timeout), sleep_fn=sleep_fn)
        # WXR files are UTF-8; servers frequently omit the charset
        resp.encoding = resp.encoding or "utf-8"
        return resp.text

    with open(location, "r", encoding="utf-8") as f:
        return f.read()
