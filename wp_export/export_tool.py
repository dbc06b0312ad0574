"""
High-level orchestration of the export parsing pipeline.

This module defines a :class:`WordPressExportTool` class that ties together
the reader, extractors and utilities: it loads the configuration, reads the
export, builds the author lookup, classifies post types, builds posts,
collects and associates images and finally computes every post's
frontmatter.  The finished posts are handed to whatever writes them out.

:func:`process_export` runs the same steps on an export that has already
been parsed into a node tree.
"""

from __future__ import annotations

from datetime import tzinfo
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from wp_export.config import ExportConfig, load_config
from wp_export.extractors.authors import build_author_lookup
from wp_export.extractors.frontmatter import FieldSpec, parse_field_specs, populate_frontmatter
from wp_export.extractors.images import SaveImages, collect_images, merge_images_into_posts
from wp_export.extractors.post_types import get_post_types
from wp_export.extractors.posts import Translator, collect_posts
from wp_export.models import AuthorLookup, Post, RawNode
from wp_export.parsers.markdown import convert_html_to_markdown
from wp_export.parsers.wxr_reader import load_export
from wp_export.utils.fetch import read_export
from wp_export.utils.reporting import CONSOLE, Reporter


def process_export(
    rss: RawNode,
    *,
    save_images: Union[SaveImages, str],
    tz: tzinfo,
    frontmatter_fields: Iterable[Union[str, FieldSpec]],
    translate: Translator = convert_html_to_markdown,
    reporter: Reporter = CONSOLE,
) -> Tuple[List[Post], AuthorLookup]:
    """Run the pipeline on the root node of an export.

    :return: The finished posts, in post type order then export order, and
        the author lookup that was used for their frontmatter.
    """
    specs = parse_field_specs(frontmatter_fields)

    channel = rss.child("channel")
    authors = build_author_lookup(channel, reporter)

    items = channel.children("item")
    post_types = get_post_types(items)
    posts = collect_posts(items, post_types, tz=tz, translate=translate, reporter=reporter)

    images = collect_images(items, post_types, SaveImages(save_images), reporter)
    merge_images_into_posts(images, posts)
    populate_frontmatter(posts, specs, authors)
    return posts, authors


class WordPressExportTool:
    """
    Encapsulates the state required to turn a WordPress export into
    normalized posts.  Configuration problems surface when the tool is
    created; data problems surface from :meth:`parse`.
    """

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        *,
        config_file: Optional[str] = None,
        translate: Translator = convert_html_to_markdown,
    ) -> None:
        self.config: ExportConfig = load_config(config, config_file=config_file)
        self.translate = translate
        self.authors: AuthorLookup = {}
        self.reporter = Reporter(self.config.report_dir)

    def log_message(self, message: str, level: str = "INFO") -> None:
        self.reporter.log_message(message, level)

    def load(self) -> str:
        self.log_message(f"Reading export {self.config.input}")
        return read_export(self.config.input, timeout=self.config.request_timeout)

    def parse(self, content: Optional[str] = None) -> List[Post]:
        """
        Parse the export into finished posts.  When ``content`` is not
        given the export is read from the configured ``input``.

        :param content: Raw export text.
        :return: The list of posts with content, image URLs and frontmatter.
        """
        if content is None:
            content = self.load()

        posts, self.authors = process_export(
            load_export(content),
            save_images=self.config.save_images,
            tz=self.config.tz,
            frontmatter_fields=self.config.frontmatter_fields,
            translate=self.translate,
            reporter=self.reporter,
        )
        self.log_message(f"{len(posts)} posts parsed.")
        return posts
