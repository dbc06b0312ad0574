"""
Top-level package for the WordPress export parser.

This package reads a WordPress WXR export and produces normalized posts
with their content converted to Markdown, the images that belong to them
and a frontmatter block derived from configurable fields.  Modules are
split into subpackages:

* :mod:`wp_export.parsers` – the WXR reader and the HTML to Markdown converter
* :mod:`wp_export.extractors` – post types, posts, images and frontmatter
* :mod:`wp_export.models` – normalized records and the node interface
* :mod:`wp_export.utils` – errors, reporting, export loading and filenames

Orchestration is handled in :mod:`wp_export.export_tool`.
"""

from .export_tool import WordPressExportTool, process_export

__all__ = ["WordPressExportTool", "process_export"]
