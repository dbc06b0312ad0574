"""
Collecting image candidates and associating them with posts.

Images come from three sources that do not always agree with each other:

``attached``
    Attachment items of the export, owned through ``post_parent``.
``scraped``
    ``<img src="...">`` tags found in the raw body of each post.
cover-only fallback
    When image saving is disabled, the thumbnail attachment of every post,
    so that cover image frontmatter can still be filled in.

:func:`merge_images_into_posts` reconciles them into each post's
``image_urls`` and cover image fields.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import List, Optional
from urllib.parse import urljoin

from wp_export.models import Image, Post, RawNode
from wp_export.utils.errors import DataResolutionError
from wp_export.utils.fetch import is_absolute_url
from wp_export.utils.filenames import filename_from_url
from wp_export.utils.reporting import CONSOLE, Reporter

from .post_types import get_items_of_type
from .posts import find_attachment, get_post_meta_value, parse_post_id

_IMAGE_URL_RE = re.compile(r"\.(gif|jpe?g|png|webp)(\?|$)", re.IGNORECASE)
_IMG_TAG_RE = re.compile(r'<img(?=\s)[^>]+?(?<=\s)src="(.+?)"[^>]*>', re.IGNORECASE)


class SaveImages(str, Enum):
    NONE = "none"
    ATTACHED = "attached"
    SCRAPED = "scraped"
    ALL = "all"


def _owner_post_id(value: Optional[str]) -> Optional[int]:
    # Squarespace exports omit post_parent on attachments; anything that is
    # not a number owns nothing
    try:
        return int(value.strip()) if value else None
    except ValueError:
        return None


def collect_attached_images(items: List[RawNode], reporter: Reporter = CONSOLE) -> List[Image]:
    images: List[Image] = []
    for attachment in get_items_of_type(items, "attachment"):
        url = attachment.optional_child_value("attachment_url")
        if not url or not _IMAGE_URL_RE.search(url):
            continue
        images.append(Image(
            id=attachment.child_value("post_id"),
            post_id=_owner_post_id(attachment.optional_child_value("post_parent")),
            url=url,
        ))

    reporter.log_message(f"{len(images)} attached images found.")
    return images


def resolve_scraped_url(scraped_url: str, post_link: Optional[str]) -> str:
    """Make ``scraped_url`` absolute using the post's own permalink.

    Raises:
        DataResolutionError: If the URL is relative and the permalink is not
            absolute either.
    """
    if is_absolute_url(scraped_url):
        return scraped_url
    if post_link and is_absolute_url(post_link):
        return urljoin(post_link, scraped_url)
    raise DataResolutionError(
        f"Unable to determine absolute URL from scraped image URL '{scraped_url}' "
        f"and post link URL '{post_link}'."
    )


def collect_scraped_images(
    items: List[RawNode], post_types: List[str], reporter: Reporter = CONSOLE
) -> List[Image]:
    images: List[Image] = []
    for post_type in post_types:
        for item in get_items_of_type(items, post_type):
            post_id = parse_post_id(item.child_value("post_id"))
            body = item.optional_child_value("encoded") or ""
            for match in _IMG_TAG_RE.finditer(body):
                url = resolve_scraped_url(match.group(1), item.optional_child_value("link"))
                images.append(Image(id=None, post_id=post_id, url=url))

    reporter.log_message(f"{len(images)} images scraped from post body content.")
    return images


def collect_cover_images(items: List[RawNode]) -> List[Image]:
    """Return only the thumbnail attachment of each item that declares one."""
    images: List[Image] = []
    for item in items:
        cover_image_id = get_post_meta_value(item, "_thumbnail_id")
        if not cover_image_id:
            continue
        attachment = find_attachment(items, cover_image_id)
        if attachment is None:
            continue
        url = attachment.optional_child_value("attachment_url")
        if url:
            images.append(Image(
                id=cover_image_id,
                post_id=parse_post_id(item.child_value("post_id")),
                url=url,
                original_url=url,
            ))
    return images


def collect_images(
    items: List[RawNode],
    post_types: List[str],
    save_images: SaveImages,
    reporter: Reporter = CONSOLE,
) -> List[Image]:
    """Gather image candidates according to the ``saveImages`` mode."""
    save_images = SaveImages(save_images)
    if save_images is SaveImages.NONE:
        return collect_cover_images(items)

    images: List[Image] = []
    if save_images in (SaveImages.ATTACHED, SaveImages.ALL):
        images.extend(collect_attached_images(items, reporter))
    if save_images in (SaveImages.SCRAPED, SaveImages.ALL):
        images.extend(collect_scraped_images(items, post_types, reporter))
    return images


def merge_images_into_posts(images: List[Image], posts: List[Post]) -> None:
    """Attach images to the posts that own them or use them as cover.

    The first image matching a post's ``cover_image_id`` sets its cover
    image; later matches leave it untouched.  A URL is added to a post's
    ``image_urls`` at most once.
    """
    for image in images:
        for post in posts:
            should_attach = False

            # this image was uploaded as an attachment to this post
            if image.post_id is not None and image.post_id == post.id:
                should_attach = True

            # this image was set as the featured image for this post
            if image.id is not None and image.id == post.cover_image_id and not post.cover_image:
                should_attach = True
                post.set_cover_image(filename_from_url(image.url), image.original_url or image.url)

            if should_attach:
                post.add_image_url(image.url)
