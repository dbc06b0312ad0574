"""
Extractors for WordPress WXR exports.

This subpackage turns the items of an export into normalized posts,
collects the images that belong to them and derives each post's
frontmatter.  Every function works on the :class:`~wp_export.models.RawNode`
interface only, so any reader offering it can feed the pipeline.
"""

from .authors import build_author_lookup
from .frontmatter import EXTRACTORS, FieldSpec, FrontmatterField, parse_field_spec, parse_field_specs, populate_frontmatter
from .images import (
    SaveImages,
    collect_attached_images,
    collect_cover_images,
    collect_images,
    collect_scraped_images,
    merge_images_into_posts,
)
from .post_types import EXCLUDED_POST_TYPES, get_items_of_type, get_post_types
from .posts import build_post, collect_posts, get_post_date, get_post_meta_value

__all__ = [
    "EXCLUDED_POST_TYPES",
    "EXTRACTORS",
    "FieldSpec",
    "FrontmatterField",
    "SaveImages",
    "build_author_lookup",
    "build_post",
    "collect_attached_images",
    "collect_cover_images",
    "collect_images",
    "collect_posts",
    "collect_scraped_images",
    "get_items_of_type",
    "get_post_date",
    "get_post_meta_value",
    "get_post_types",
    "merge_images_into_posts",
    "parse_field_spec",
    "parse_field_specs",
    "populate_frontmatter",
]
