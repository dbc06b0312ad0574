"""
Frontmatter extraction.

Each supported field is a member of :class:`FrontmatterField` and maps to an
extractor in :data:`EXTRACTORS`.  Field specifications come from the
configuration as ``"key"`` or ``"key:alias"``; the alias, when given, is the
name the value is stored under.  Extractors returning ``None`` leave the
field out of the post's frontmatter.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, NamedTuple, Optional, Union
from urllib.parse import unquote

from wp_export.models import AuthorLookup, Post
from wp_export.utils.errors import ConfigurationError


class FrontmatterField(str, Enum):
    AUTHOR = "author"
    CATEGORIES = "categories"
    COVER_IMAGE = "coverImage"
    DATE = "date"
    DRAFT = "draft"
    EXCERPT = "excerpt"
    ID = "id"
    SLUG = "slug"
    TAGS = "tags"
    TITLE = "title"
    TYPE = "type"


class FieldSpec(NamedTuple):
    field: FrontmatterField
    alias: str


def author(post: Post, authors: Optional[AuthorLookup] = None) -> Optional[Dict[str, str]]:
    username = post.raw.optional_child_value("creator")
    if not username:
        return None
    info = (authors or {}).get(username)
    return {
        "username": username,
        "display_name": info.display_name if info and info.display_name else username,
    }


def _terms(post: Post, domain: str) -> List[str]:
    terms = []
    for node in post.raw.children("category"):
        nicename = node.attribute("nicename")
        if node.attribute("domain") == domain and nicename is not None:
            terms.append(nicename)
    return terms


def categories(post: Post, authors: Optional[AuthorLookup] = None) -> List[str]:
    return [unquote(name) for name in _terms(post, "category") if name != "uncategorized"]


def tags(post: Post, authors: Optional[AuthorLookup] = None) -> List[str]:
    # tags are <category> nodes too, told apart by their domain
    return [unquote(name) for name in _terms(post, "post_tag")]


def cover_image(post: Post, authors: Optional[AuthorLookup] = None) -> Optional[str]:
    return post.cover_image


def date(post: Post, authors: Optional[AuthorLookup] = None) -> Optional[str]:
    if post.date is None:
        return None
    return post.date.date().isoformat()


def draft(post: Post, authors: Optional[AuthorLookup] = None) -> Optional[bool]:
    # only included when true
    return True if post.is_draft else None


def excerpt(post: Post, authors: Optional[AuthorLookup] = None) -> Optional[str]:
    # the second <encoded> node is excerpt:encoded; not decoded
    encoded = post.raw.optional_child_value("encoded", 1)
    if not encoded:
        return None
    return re.sub(r"[\r\n]+", " ", encoded)


def post_id(post: Post, authors: Optional[AuthorLookup] = None) -> int:
    return int(post.id)


def slug(post: Post, authors: Optional[AuthorLookup] = None) -> str:
    return post.slug


def title(post: Post, authors: Optional[AuthorLookup] = None) -> str:
    return post.raw.child_value("title")


def post_type(post: Post, authors: Optional[AuthorLookup] = None) -> str:
    return post.type


Extractor = Callable[[Post, Optional[AuthorLookup]], Any]

EXTRACTORS: Dict[FrontmatterField, Extractor] = {
    FrontmatterField.AUTHOR: author,
    FrontmatterField.CATEGORIES: categories,
    FrontmatterField.COVER_IMAGE: cover_image,
    FrontmatterField.DATE: date,
    FrontmatterField.DRAFT: draft,
    FrontmatterField.EXCERPT: excerpt,
    FrontmatterField.ID: post_id,
    FrontmatterField.SLUG: slug,
    FrontmatterField.TAGS: tags,
    FrontmatterField.TITLE: title,
    FrontmatterField.TYPE: post_type,
}


def parse_field_spec(spec: Union[str, FieldSpec]) -> FieldSpec:
    """Parse ``"key"`` or ``"key:alias"`` into a :class:`FieldSpec`.

    Raises:
        ConfigurationError: If ``key`` is not a supported field.
    """
    if isinstance(spec, FieldSpec):
        return spec
    parts = spec.split(":")
    key = parts[0].strip()
    alias = parts[1].strip() if len(parts) > 1 and parts[1].strip() else key
    try:
        field = FrontmatterField(key)
    except ValueError:
        raise ConfigurationError(f'Could not find a frontmatter getter named "{key}".') from None
    return FieldSpec(field, alias)


def parse_field_specs(specs: Iterable[Union[str, FieldSpec]]) -> List[FieldSpec]:
    return [parse_field_spec(spec) for spec in specs]


def populate_frontmatter(
    posts: List[Post],
    fields: Iterable[Union[str, FieldSpec]],
    authors: Optional[AuthorLookup] = None,
) -> None:
    """Fill ``post.frontmatter`` for every post, in field order.

    All field specifications are validated before any post is touched.
    """
    specs = parse_field_specs(fields)
    for post in posts:
        frontmatter: Dict[str, Any] = {}
        for spec in specs:
            value = EXTRACTORS[spec.field](post, authors)
            if value is not None:
                frontmatter[spec.alias] = value
        post.frontmatter = frontmatter
