"""Helpers building small WXR documents for the tests."""

from typing import Dict, Iterable, Optional, Sequence, Tuple

WXR_HEAD = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0"
    xmlns:excerpt="http://wordpress.org/export/1.2/excerpt/"
    xmlns:content="http://purl.org/rss/1.0/modules/content/"
    xmlns:dc="http://purl.org/dc/elements/1.1/"
    xmlns:wp="http://wordpress.org/export/1.2/">
<channel>
<title>Test site</title>
<link>https://blog.test</link>
"""

WXR_TAIL = """</channel>
</rss>
"""


def author_xml(login: str, display_name: Optional[str] = None) -> str:
    name = f"<wp:author_display_name><![CDATA[{display_name}]]></wp:author_display_name>" if display_name else ""
    return f"<wp:author><wp:author_login><![CDATA[{login}]]></wp:author_login>{name}</wp:author>\n"


def item_xml(
    post_id,
    post_type: str = "post",
    *,
    title: str = "A title",
    name: Optional[str] = None,
    status: str = "publish",
    link: Optional[str] = None,
    pub_date: Optional[str] = "Tue, 02 Jan 2024 10:30:00 +0000",
    creator: Optional[str] = None,
    content: str = "",
    excerpt: Optional[str] = None,
    parent: Optional[int] = None,
    attachment_url: Optional[str] = None,
    thumbnail_id: Optional[str] = None,
    categories: Sequence[Tuple[str, str]] = (),
    meta: Optional[Dict[str, str]] = None,
) -> str:
    parts = [
        "<item>",
        f"<title>{title}</title>",
        f"<link>{link if link is not None else f'https://blog.test/{post_id}/'}</link>",
    ]
    if pub_date is not None:
        parts.append(f"<pubDate>{pub_date}</pubDate>")
    if creator is not None:
        parts.append(f"<dc:creator><![CDATA[{creator}]]></dc:creator>")
    parts.append(f"<content:encoded><![CDATA[{content}]]></content:encoded>")
    if excerpt is not None:
        parts.append(f"<excerpt:encoded><![CDATA[{excerpt}]]></excerpt:encoded>")
    parts.append(f"<wp:post_id>{post_id}</wp:post_id>")
    parts.append(f"<wp:post_name><![CDATA[{name if name is not None else f'post-{post_id}'}]]></wp:post_name>")
    parts.append(f"<wp:status><![CDATA[{status}]]></wp:status>")
    if parent is not None:
        parts.append(f"<wp:post_parent>{parent}</wp:post_parent>")
    parts.append(f"<wp:post_type><![CDATA[{post_type}]]></wp:post_type>")
    if attachment_url is not None:
        parts.append(f"<wp:attachment_url><![CDATA[{attachment_url}]]></wp:attachment_url>")
    for domain, nicename in categories:
        parts.append(f'<category domain="{domain}" nicename="{nicename}"><![CDATA[{nicename}]]></category>')
    metas = dict(meta or {})
    if thumbnail_id is not None:
        metas["_thumbnail_id"] = thumbnail_id
    for key, value in metas.items():
        parts.append(
            f"<wp:postmeta><wp:meta_key><![CDATA[{key}]]></wp:meta_key>"
            f"<wp:meta_value><![CDATA[{value}]]></wp:meta_value></wp:postmeta>"
        )
    parts.append("</item>")
    return "\n".join(parts) + "\n"


def build_wxr(items: Iterable[str], authors: Iterable[str] = ()) -> str:
    return WXR_HEAD + "".join(authors) + "".join(items) + WXR_TAIL
