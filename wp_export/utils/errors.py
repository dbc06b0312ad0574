"""
Exception types raised while parsing a WordPress export.

Only the cover image lookup performed while building a post is guarded
locally; every other error below propagates to the caller and aborts the
run.
"""

from __future__ import annotations


class ExportError(Exception):
    """Base class for all errors raised by :mod:`wp_export`."""
    pass


class ConfigurationError(ExportError):
    """Invalid configuration, e.g. an unknown frontmatter field key."""
    pass


class DataResolutionError(ExportError):
    """A scraped image URL cannot be turned into an absolute URL."""
    pass


class ExportStructureError(ExportError):
    """The export is missing a node or value that is required."""
    pass
