import json
import os
import sys

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

import pytest

import main as cli
from wp_export.export_tool import WordPressExportTool
from wp_export.utils.errors import ConfigurationError, DataResolutionError
from wxr_samples import author_xml, build_wxr, item_xml

FIELDS = ["title", "id:post_id", "type", "author", "categories", "tags", "coverImage", "date", "draft"]


def sample_export():
    return build_wxr(
        [
            item_xml(3, "recipe", title="Soup", creator="ghost"),
            item_xml(
                2, "page", name="about", title="About",
                content='<p>Team <img src="team.jpg"></p>', link="https://blog.test/about/",
            ),
            item_xml(1, "page", name="sample-page"),
            item_xml(
                10, "post", title="Hello", creator="jdoe", thumbnail_id="20",
                content='<p>Intro</p><img class="x" src="https://cdn.test/inline.png">',
                categories=[("category", "uncategorized"), ("category", "news"), ("post_tag", "recipes")],
            ),
            item_xml(11, "post", title="Old", status="trash", content='<img src="https://cdn.test/trash.png">'),
            item_xml(12, "post", title="Draft", status="draft", pub_date="Mon, 30 Nov -0001 00:00:00 +0000"),
            item_xml(20, "attachment", parent=10, attachment_url="https://blog.test/uploads/cover.jpg"),
            item_xml(21, "attachment", parent=10, attachment_url="https://blog.test/uploads/doc.pdf"),
            item_xml(30, "nav_menu_item"),
        ],
        authors=[author_xml("jdoe", "Jane Doe")],
    )


def test_parse_runs_the_whole_pipeline():
    tool = WordPressExportTool({"saveImages": "all", "frontmatterFields": FIELDS})
    posts = tool.parse(sample_export())

    assert [(p.type, p.id) for p in posts] == [("post", 10), ("post", 12), ("page", 2), ("recipe", 3)]
    hello, draft, about, soup = posts

    assert hello.content == "Intro\n\n![](https://cdn.test/inline.png)"
    assert hello.cover_image == "cover.jpg"
    assert hello.cover_image_url == "https://blog.test/uploads/cover.jpg"
    assert hello.image_urls == ["https://blog.test/uploads/cover.jpg", "https://cdn.test/inline.png"]
    assert hello.frontmatter == {
        "title": "Hello",
        "post_id": 10,
        "type": "post",
        "author": {"username": "jdoe", "display_name": "Jane Doe"},
        "categories": ["news"],
        "tags": ["recipes"],
        "coverImage": "cover.jpg",
        "date": "2024-01-02",
    }
    assert list(hello.frontmatter) == [f.split(":")[-1] for f in FIELDS if f not in ("draft",)]

    assert draft.frontmatter["draft"] is True
    assert "date" not in draft.frontmatter

    assert about.image_urls == ["https://blog.test/about/team.jpg"]
    assert soup.frontmatter["author"] == {"username": "ghost", "display_name": "ghost"}

    assert set(tool.authors) == {"jdoe"}


def test_cover_images_are_kept_when_image_saving_is_off():
    tool = WordPressExportTool({"saveImages": "none", "frontmatterFields": ["coverImage"]})
    posts = tool.parse(sample_export())
    hello = posts[0]
    assert hello.frontmatter == {"coverImage": "cover.jpg"}
    assert hello.image_urls == ["https://blog.test/uploads/cover.jpg"]
    assert all(p.image_urls == [] for p in posts[1:])


def test_unknown_frontmatter_field_fails_at_startup():
    with pytest.raises(ConfigurationError):
        WordPressExportTool({"frontmatterFields": ["title", "bogus"]})


def test_relative_image_on_relative_permalink_aborts_the_run():
    export = build_wxr([item_xml(1, link="?p=1", content='<img src="a.png">')])
    tool = WordPressExportTool({"saveImages": "scraped"})
    with pytest.raises(DataResolutionError):
        tool.parse(export)


def test_parse_reads_configured_input(tmp_path):
    path = tmp_path / "export.xml"
    path.write_text(sample_export(), encoding="utf-8")
    tool = WordPressExportTool({"input": str(path), "frontmatterFields": ["slug"]})
    posts = tool.parse()
    assert [p.frontmatter["slug"] for p in posts] == ["post-10", "post-12", "about", "post-3"]


def test_report_dir_receives_log_and_warnings(tmp_path, capsys):
    report_dir = tmp_path / "reports"
    # an attachment without post_id breaks the cover lookup only
    export = build_wxr([item_xml(1, thumbnail_id="5"), "<item><wp:post_type>attachment</wp:post_type></item>"])
    tool = WordPressExportTool({"reportDir": str(report_dir), "saveImages": "attached"})
    posts = tool.parse(export)
    assert posts[0].cover_image is None
    assert "[WARNING]" in capsys.readouterr().out
    warnings = [json.loads(line) for line in (report_dir / "warnings.jsonl").read_text(encoding="utf-8").splitlines()]
    assert warnings[0]["code"] == "COVER_LOOKUP"
    assert warnings[0]["post_id"] == "1"
    assert "WARNING:" in (report_dir / "parsing.log").read_text(encoding="utf-8")


def test_each_tool_keeps_its_own_report_dir(tmp_path):
    first_dir = tmp_path / "first"
    first = WordPressExportTool({"reportDir": str(first_dir)})
    second = WordPressExportTool({"frontmatterFields": ["slug"]})

    second.parse(sample_export())
    assert not first_dir.exists()

    first.parse(sample_export())
    assert "posts parsed." in (first_dir / "parsing.log").read_text(encoding="utf-8")
    assert second.reporter.report_dir is None


def test_main_success_and_failure(tmp_path, capsys):
    path = tmp_path / "export.xml"
    path.write_text(sample_export(), encoding="utf-8")
    missing_config = str(tmp_path / "none.json")

    assert cli.main(["--config", missing_config, "--input", str(path), "--save-images", "attached"]) == 0
    assert "4 posts ready, 1 images, 1 cover images." in capsys.readouterr().out

    code = cli.main(["--config", missing_config, "--input", str(path), "--frontmatter-fields", "title,bogus"])
    assert code == 1
    assert "bogus" in capsys.readouterr().err
