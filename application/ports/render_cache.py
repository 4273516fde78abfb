from typing import Protocol
from uuid import UUID


class RenderCache(Protocol):
    """Port for the cache holding rendered page output."""

    def invalidate(self, page_id: UUID) -> None:
        """Forget everything rendered for the page. Must be idempotent."""
        ...
