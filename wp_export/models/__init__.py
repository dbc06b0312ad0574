"""
Data model shared by the extractors.

* :class:`RawNode` – the capability set an export tree node must offer
* :class:`Post`, :class:`Image`, :class:`AuthorInfo` – normalized records
"""

from .post import AuthorInfo, AuthorLookup, Image, Post
from .raw_node import RawNode

__all__ = ["AuthorInfo", "AuthorLookup", "Image", "Post", "RawNode"]
