"""
Readers and converters used by the export pipeline.

* :func:`load_export` – WXR text to a navigable node tree
* :func:`convert_html_to_markdown` – post body HTML to Markdown
"""

from .markdown import convert_html_to_markdown
from .wxr_reader import XmlNode, load_export

__all__ = ["XmlNode", "convert_html_to_markdown", "load_export"]
