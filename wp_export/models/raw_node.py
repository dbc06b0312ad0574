from __future__ import annotations

from typing import List, Optional, Protocol


class RawNode(Protocol):
    """Minimal read-only view of an export tree node.

    Tags are matched by local name, so namespaced elements such as
    ``wp:post_id`` or ``content:encoded`` are addressed as ``post_id`` and
    ``encoded``.
    """

    @property
    def parent(self) -> Optional["RawNode"]: ...

    def child(self, tag: str) -> "RawNode": ...

    def children(self, tag: str) -> List["RawNode"]: ...

    def child_value(self, tag: str, index: int = 0) -> str: ...

    def optional_child_value(self, tag: str, index: int = 0) -> Optional[str]: ...

    def attribute(self, name: str) -> Optional[str]: ...
