import os
import sys

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

import pytest

from wp_export.parsers.wxr_reader import load_export
from wp_export.utils.errors import ExportStructureError
from wxr_samples import author_xml, build_wxr, item_xml


def test_namespaced_children_are_reached_by_local_name():
    rss = load_export(build_wxr([item_xml(12, content="<p>Body</p>", excerpt="Short")]))
    item = rss.child("channel").children("item")[0]
    assert item.child_value("post_id") == "12"
    assert item.child_value("post_type") == "post"
    assert item.child_value("encoded") == "<p>Body</p>"
    assert item.child_value("encoded", 1) == "Short"


def test_optional_child_value_returns_none_when_absent():
    rss = load_export(build_wxr([item_xml(1)]))
    item = rss.child("channel").children("item")[0]
    assert item.optional_child_value("encoded", 1) is None
    assert item.optional_child_value("post_parent") is None
    with pytest.raises(ExportStructureError):
        item.child_value("post_parent")


def test_children_keep_a_link_to_their_parent():
    rss = load_export(build_wxr([item_xml(1), item_xml(2)]))
    channel = rss.child("channel")
    items = channel.children("item")
    assert [i.child_value("post_id") for i in items] == ["1", "2"]
    assert items[0].parent.tag == "channel"
    assert len(items[0].parent.children("item")) == 2
    assert rss.parent is None


def test_attributes_and_authors():
    rss = load_export(build_wxr(
        [item_xml(1, categories=[("category", "news")])],
        authors=[author_xml("jdoe", "Jane Doe")],
    ))
    channel = rss.child("channel")
    author = channel.children("author")[0]
    assert author.child_value("author_login") == "jdoe"
    category = channel.children("item")[0].children("category")[0]
    assert category.attribute("domain") == "category"
    assert category.attribute("nicename") == "news"
    assert category.attribute("missing") is None


def test_missing_child_raises():
    rss = load_export(build_wxr([]))
    with pytest.raises(ExportStructureError):
        rss.child("channel").child("item")


def test_malformed_export_raises_structure_error():
    with pytest.raises(ExportStructureError):
        load_export("<rss><channel></rss>")
