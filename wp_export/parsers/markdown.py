from __future__ import annotations

import re
from typing import List, Optional

from bs4 import BeautifulSoup, Comment, NavigableString, Tag

_BLOCK_TAGS = {
    "p", "div", "section", "article", "h1", "h2", "h3", "h4", "h5", "h6",
    "ul", "ol", "blockquote", "hr", "pre", "figure", "table", "iframe",
}


def _normalize_ws(text: str) -> str:
    return (text or "").replace("\xa0", " ")


def _attr(el: Tag, name: str) -> str:
    value = el.get(name)
    if isinstance(value, list):
        return value[0] if value else ""
    return value or ""


def convert_html_to_markdown(html: str) -> str:
    """
    Convert the body of a WordPress post to Markdown.

    Covered:
    - Headings, paragraphs, links, inline emphasis, lists (nested),
      blockquotes, horizontal rules, inline code and code blocks, images.
    - Figures keep their image and caption; tables and iframes are kept
      as raw HTML.
    - Bodies without <p> markup keep their blank-line paragraph breaks.
    """
    # Pre-process to remove WordPress shortcodes like [caption]
    cleaned_html = re.sub(r"\[/?caption[^\]]*\]", "", html or "", flags=re.IGNORECASE)
    if not cleaned_html.strip():
        return ""

    soup = BeautifulSoup(cleaned_html, "html.parser")

    # Remove scripts/styles
    for bad in soup.find_all(["script", "style"]):
        bad.decompose()

    def inline(children_iter) -> str:
        parts: List[str] = []
        for child in children_iter:
            if isinstance(child, Comment):
                continue
            if isinstance(child, NavigableString):
                parts.append(_normalize_ws(str(child)))
                continue
            if not isinstance(child, Tag):
                continue
            name = (child.name or "").lower()

            if name == "br":
                parts.append("  \n")
            elif name in ("strong", "b"):
                parts.append(wrap(inline(child.children), "**"))
            elif name in ("em", "i"):
                parts.append(wrap(inline(child.children), "_"))
            elif name in ("s", "strike", "del"):
                parts.append(wrap(inline(child.children), "~~"))
            elif name == "code":
                parts.append(f"`{child.get_text()}`")
            elif name == "a":
                text = inline(child.children).strip()
                href = _attr(child, "href")
                parts.append(f"[{text}]({href})" if href else text)
            elif name == "img":
                parts.append(image(child))
            elif name in _BLOCK_TAGS:
                # Block nested inside inline content, e.g. <a><figure>
                parts.append("\n\n" + blocks(child.children) + "\n\n")
            else:
                parts.append(inline(child.children))
        return "".join(parts)

    def wrap(text: str, marker: str) -> str:
        stripped = text.strip()
        if not stripped:
            return text
        lead = text[: len(text) - len(text.lstrip())]
        trail = text[len(text.rstrip()):]
        return f"{lead}{marker}{stripped}{marker}{trail}"

    def image(el: Tag) -> str:
        src = _attr(el, "src")
        if not src:
            return ""
        return f"![{_attr(el, 'alt')}]({src})"

    def list_block(el: Tag, depth: int) -> str:
        ordered = (el.name or "").lower() == "ol"
        lines: List[str] = []
        for number, li in enumerate(el.find_all("li", recursive=False), start=1):
            nested = [c for c in li.children if isinstance(c, Tag) and c.name in ("ul", "ol")]
            nested_ids = {id(n) for n in nested}
            text = inline(c for c in li.children if id(c) not in nested_ids).strip()
            marker = f"{number}." if ordered else "-"
            lines.append(f"{'   ' * depth}{marker} {text}")
            for sub in nested:
                lines.append(list_block(sub, depth + 1))
        return "\n".join(lines)

    def handle_block(el: Tag) -> Optional[str]:
        name = (el.name or "").lower()
        if name in {"h1", "h2", "h3", "h4", "h5", "h6"}:
            return f"{'#' * int(name[1])} {inline(el.children).strip()}"
        if name in {"ul", "ol"}:
            return list_block(el, 0)
        if name == "blockquote":
            inner = blocks(el.children)
            return "\n".join(f"> {line}" if line else ">" for line in inner.split("\n"))
        if name == "hr":
            return "---"
        if name == "pre":
            # preformatted text, try to extract code text
            code_child = el.find("code")
            text = code_child.get_text() if code_child else el.get_text()
            return f"```\n{_normalize_ws(text).strip(chr(10))}\n```"
        if name == "figure":
            img = el.find("img")
            caption = el.find("figcaption")
            out = image(img) if isinstance(img, Tag) else ""
            if isinstance(caption, Tag):
                out = f"{out}\n\n{inline(caption.children).strip()}".strip()
            return out
        if name in {"table", "iframe"}:
            return str(el)
        if name in {"div", "section", "article"}:
            return blocks(el.children)
        # Paragraph-ish: collapse inline content
        return inline(el.children).strip()

    def paragraphs_from_text(text: str) -> List[str]:
        # Bodies without <p> markup separate paragraphs with blank lines
        return [p.strip() for p in re.split(r"\n\s*\n", text) if p.strip()]

    def blocks(children_iter) -> str:
        out: List[str] = []
        inline_run: List[object] = []

        def flush_inline_run() -> None:
            if inline_run:
                out.extend(paragraphs_from_text(inline(inline_run)))
                inline_run.clear()

        for child in children_iter:
            if isinstance(child, Tag) and (child.name or "").lower() in _BLOCK_TAGS:
                flush_inline_run()
                text = handle_block(child)
                if text and text.strip():
                    out.append(text)
                continue
            inline_run.append(child)
        flush_inline_run()
        return "\n\n".join(out)

    container = soup.body if soup.body else soup
    markdown = blocks(container.children)
    return re.sub(r"\n{3,}", "\n\n", markdown).strip()
