from __future__ import annotations

from wp_export.models import AuthorInfo, AuthorLookup, RawNode
from wp_export.utils.reporting import CONSOLE, Reporter


def build_author_lookup(channel: RawNode, reporter: Reporter = CONSOLE) -> AuthorLookup:
    """Map author logins to their display names from ``<wp:author>`` nodes.

    An author without a display name is listed under its login.
    """
    authors: AuthorLookup = {}
    for node in channel.children("author"):
        login = node.optional_child_value("author_login")
        if not login:
            continue
        display_name = node.optional_child_value("author_display_name") or login
        authors[login] = AuthorInfo(username=login, display_name=display_name)

    reporter.log_message(f"{len(authors)} authors found.")
    return authors
