import os
import sys

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from wp_export.extractors.post_types import get_items_of_type, get_post_types
from wp_export.parsers.wxr_reader import load_export
from wxr_samples import build_wxr, item_xml


def items_of(*types):
    xml = build_wxr([item_xml(i, t) for i, t in enumerate(types, start=1)])
    return load_export(xml).child("channel").children("item")


def test_post_then_page_then_custom_types_in_encounter_order():
    items = items_of("post", "custom-a", "page", "custom-b")
    assert get_post_types(items) == ["post", "page", "custom-a", "custom-b"]


def test_custom_types_are_not_sorted_alphabetically():
    items = items_of("zebra", "page", "apple")
    assert get_post_types(items) == ["page", "zebra", "apple"]


def test_types_are_deduplicated_and_internal_types_excluded():
    items = items_of(
        "attachment", "recipe", "post", "revision", "nav_menu_item", "recipe",
        "wp_template_part", "post", "wp_global_styles",
    )
    assert get_post_types(items) == ["post", "recipe"]


def test_no_post_or_page():
    assert get_post_types(items_of("recipe", "event")) == ["recipe", "event"]
    assert get_post_types([]) == []


def test_get_items_of_type_keeps_export_order():
    items = items_of("post", "page", "post")
    posts = get_items_of_type(items, "post")
    assert [i.child_value("post_id") for i in posts] == ["1", "3"]
