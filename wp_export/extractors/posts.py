"""
Building normalized :class:`~wp_export.models.Post` records from export items.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone, tzinfo
from email.utils import parsedate_to_datetime
from typing import Callable, Iterable, List, Optional
from urllib.parse import unquote

from wp_export.models import Post, RawNode
from wp_export.parsers.markdown import convert_html_to_markdown
from wp_export.utils.errors import ExportStructureError
from wp_export.utils.filenames import filename_from_url
from wp_export.utils.reporting import CONSOLE, Reporter

from .post_types import get_items_of_type

Translator = Callable[[str], str]

# day, month name, 2-4 digit year, time and a zone; rejects "-0001"
# placeholder years and values without a zone
_RFC2822_RE = re.compile(
    r"^(?:[A-Za-z]{3},\s*)?\d{1,2}\s+[A-Za-z]{3}\s+\d{2,4}\s+\d{1,2}:\d{2}(?::\d{2})?"
    r"\s+(?:[+-]\d{4}|UT|GMT|[ECMP][SD]T)$"
)


def parse_post_id(value: str) -> int:
    try:
        return int(value.strip())
    except ValueError as e:
        raise ExportStructureError(f"Invalid post id {value!r}.") from e


def get_post_meta_value(item: RawNode, key: str) -> Optional[str]:
    for meta in item.children("postmeta"):
        if meta.child_value("meta_key") == key:
            return meta.child_value("meta_value")
    return None


def get_post_date(item: RawNode, tz: tzinfo) -> Optional[datetime]:
    """Parse the RFC 2822 ``pubDate`` of ``item`` into ``tz``.

    Returns ``None`` when the value is missing, has no zone or cannot be
    parsed, which is common for drafts (``Mon, 30 Nov -0001 00:00:00 +0000``).
    """
    value = (item.optional_child_value("pubDate") or "").strip()
    if not _RFC2822_RE.match(value):
        return None
    try:
        parsed = parsedate_to_datetime(value)
    except (TypeError, ValueError, IndexError):
        return None
    if parsed is None:
        return None
    if parsed.tzinfo is None:
        # email.utils leaves "-0000" naive; it still means UTC
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(tz)


def find_attachment(items: Iterable[RawNode], attachment_id: str) -> Optional[RawNode]:
    for item in items:
        if item.child_value("post_type") == "attachment" and item.child_value("post_id") == attachment_id:
            return item
    return None


def _resolve_cover_image_url(item: RawNode, cover_image_id: str) -> Optional[str]:
    if item.parent is None:
        raise ExportStructureError("Item is not attached to a channel.")
    attachment = find_attachment(item.parent.children("item"), cover_image_id)
    if attachment is None:
        return None
    return attachment.optional_child_value("attachment_url") or None


def build_post(
    item: RawNode,
    *,
    tz: tzinfo,
    translate: Translator = convert_html_to_markdown,
    reporter: Reporter = CONSOLE,
) -> Post:
    """Convert one export item into a :class:`Post`.

    The cover image is resolved right away when the thumbnail attachment is
    present in the same channel.  Structural problems during that lookup are
    reported as warnings; image association may still resolve it later.
    """
    cover_image_id = get_post_meta_value(item, "_thumbnail_id")
    cover_image = None
    cover_image_url = None

    if cover_image_id:
        try:
            cover_image_url = _resolve_cover_image_url(item, cover_image_id)
        except ExportStructureError as e:
            reporter.report_warning("COVER_LOOKUP", item.optional_child_value("post_id"), e)
        if cover_image_url:
            cover_image = filename_from_url(cover_image_url)

    return Post(
        raw=item,
        id=parse_post_id(item.child_value("post_id")),
        type=item.child_value("post_type"),
        slug=unquote(item.child_value("post_name")),
        date=get_post_date(item, tz),
        is_draft=item.child_value("status") == "draft",
        content=translate(item.optional_child_value("encoded") or ""),
        cover_image_id=cover_image_id,
        cover_image=cover_image,
        cover_image_url=cover_image_url,
    )


def _should_build(item: RawNode, post_type: str) -> bool:
    if item.child_value("status") == "trash":
        return False
    # WordPress ships every site with this placeholder page
    return not (post_type == "page" and item.optional_child_value("post_name") == "sample-page")


def collect_posts(
    items: List[RawNode],
    post_types: List[str],
    *,
    tz: tzinfo,
    translate: Translator = convert_html_to_markdown,
    reporter: Reporter = CONSOLE,
) -> List[Post]:
    """Build posts for every type in ``post_types``, in that order."""
    posts: List[Post] = []
    for post_type in post_types:
        posts_for_type = [
            build_post(item, tz=tz, translate=translate, reporter=reporter)
            for item in get_items_of_type(items, post_type)
            if _should_build(item, post_type)
        ]

        if posts_for_type:
            if post_type == "post":
                reporter.log_message(f"{len(posts_for_type)} normal posts found.")
            elif post_type == "page":
                reporter.log_message(f"{len(posts_for_type)} pages found.")
            else:
                reporter.log_message(f'{len(posts_for_type)} custom "{post_type}" posts found.')

        posts.extend(posts_for_type)
    return posts
