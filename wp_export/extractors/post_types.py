from __future__ import annotations

from typing import Iterable, List

from wp_export.models import RawNode

# Internal WordPress types that never become posts
EXCLUDED_POST_TYPES = frozenset({
    "attachment",
    "revision",
    "nav_menu_item",
    "custom_css",
    "customize_changeset",
    "oembed_cache",
    "user_request",
    "wp_block",
    "wp_global_styles",
    "wp_navigation",
    "wp_template",
    "wp_template_part",
})


def _prioritize_post_type(post_types: List[str], post_type: str) -> None:
    if post_type in post_types:
        post_types.remove(post_type)
        post_types.insert(0, post_type)


def get_post_types(items: Iterable[RawNode]) -> List[str]:
    """Return the post types to process, deduplicated.

    "post" comes first and "page" second when present; custom post types
    follow in the order they are first encountered in the export.
    """
    post_types: List[str] = []
    for item in items:
        post_type = item.child_value("post_type")
        if post_type not in EXCLUDED_POST_TYPES and post_type not in post_types:
            post_types.append(post_type)

    _prioritize_post_type(post_types, "page")
    _prioritize_post_type(post_types, "post")
    return post_types


def get_items_of_type(items: Iterable[RawNode], post_type: str) -> List[RawNode]:
    return [item for item in items if item.child_value("post_type") == post_type]
