from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class AuthorInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    username: str
    display_name: str


AuthorLookup = Dict[str, AuthorInfo]


class Image(BaseModel):
    """An image candidate found in the export.

    ``id`` is ``None`` for images scraped from post bodies and ``post_id`` is
    ``None`` when the source does not name an owning post.  ``original_url``
    is only set by the cover-only fallback.
    """

    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    post_id: Optional[int] = None
    url: str
    original_url: Optional[str] = None


class Post(BaseModel):
    """A normalized post, page or custom post type item."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    raw: Any = Field(default=None, exclude=True, repr=False)
    id: int
    type: str
    slug: str
    date: Optional[datetime] = None
    is_draft: bool = False
    content: str = ""
    cover_image_id: Optional[str] = None
    cover_image: Optional[str] = None
    cover_image_url: Optional[str] = None
    image_urls: List[str] = Field(default_factory=list)
    frontmatter: Dict[str, Any] = Field(default_factory=dict)

    def add_image_url(self, url: str) -> bool:
        if url in self.image_urls:
            return False
        self.image_urls.append(url)
        return True

    def set_cover_image(self, filename: str, url: str) -> bool:
        """Set the cover image unless one was already resolved."""
        if self.cover_image:
            return False
        self.cover_image = filename
        self.cover_image_url = url
        return True
