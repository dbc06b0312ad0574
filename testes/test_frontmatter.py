import os
import sys
from datetime import timezone

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

import pytest

from wp_export.config import resolve_timezone
from wp_export.extractors import frontmatter as fm
from wp_export.extractors.posts import build_post
from wp_export.models import AuthorInfo
from wp_export.parsers.wxr_reader import load_export
from wp_export.utils.errors import ConfigurationError
from wxr_samples import build_wxr, item_xml


def make_post(tz=timezone.utc, **kwargs):
    item = load_export(build_wxr([item_xml(kwargs.pop("post_id", 5), **kwargs)])).child("channel").children("item")[0]
    return build_post(item, tz=tz, translate=lambda html: html)


def test_fields_follow_configured_order_and_aliases():
    post = make_post(title="Hello")
    fm.populate_frontmatter([post], ["title", "id:post_id"])
    assert list(post.frontmatter.items()) == [("title", "Hello"), ("post_id", 5)]


def test_unknown_field_fails_before_any_post_is_touched():
    post = make_post()
    with pytest.raises(ConfigurationError, match='named "bogus"'):
        fm.populate_frontmatter([post], ["title", "bogus"])
    assert post.frontmatter == {}


def test_parse_field_spec():
    assert fm.parse_field_spec("coverImage") == fm.FieldSpec(fm.FrontmatterField.COVER_IMAGE, "coverImage")
    assert fm.parse_field_spec("date:published") == fm.FieldSpec(fm.FrontmatterField.DATE, "published")
    assert fm.parse_field_spec("slug:") == fm.FieldSpec(fm.FrontmatterField.SLUG, "slug")
    with pytest.raises(ConfigurationError):
        fm.parse_field_spec("Title")


def test_every_field_has_an_extractor():
    assert set(fm.EXTRACTORS) == set(fm.FrontmatterField)


def test_categories_and_tags():
    post = make_post(categories=[
        ("category", "uncategorized"),
        ("category", "caf%c3%a9"),
        ("post_tag", "recipes"),
        ("post_tag", "quick%20meals"),
        ("category", "news"),
    ])
    assert fm.categories(post) == ["café", "news"]
    assert fm.tags(post) == ["recipes", "quick meals"]


def test_author_uses_lookup_and_falls_back_to_username():
    authors = {"jdoe": AuthorInfo(username="jdoe", display_name="Jane Doe")}
    assert fm.author(make_post(creator="jdoe"), authors) == {"username": "jdoe", "display_name": "Jane Doe"}
    assert fm.author(make_post(creator="ghost"), authors) == {"username": "ghost", "display_name": "ghost"}
    assert fm.author(make_post(), authors) is None


def test_absent_values_are_omitted():
    post = make_post(pub_date=None, status="publish")
    fm.populate_frontmatter([post], ["title", "date", "draft", "excerpt", "coverImage", "author", "tags"], {})
    assert post.frontmatter == {"title": "A title", "tags": []}


def test_draft_and_date():
    post = make_post(
        tz=resolve_timezone("America/Los_Angeles"),
        status="draft",
        pub_date="Tue, 02 Jan 2024 02:00:00 +0000",
    )
    assert fm.draft(post) is True
    assert fm.date(post) == "2024-01-01"


def test_excerpt_collapses_line_breaks_without_decoding():
    post = make_post(excerpt="First line\n\nsecond &amp; last\n")
    assert fm.excerpt(post) == "First line second &amp; last "
    assert fm.excerpt(make_post(excerpt="")) is None


def test_simple_fields():
    post = make_post(post_id="0031", post_type="recipe", name="my-recipe", title="Tom &amp; Jerry")
    post.cover_image = "cover.jpg"
    assert fm.post_id(post) == 31
    assert fm.post_type(post) == "recipe"
    assert fm.slug(post) == "my-recipe"
    assert fm.title(post) == "Tom & Jerry"
    assert fm.cover_image(post) == "cover.jpg"
