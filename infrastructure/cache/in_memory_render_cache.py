from uuid import UUID

import structlog

logger = structlog.get_logger()


class InMemoryRenderCache:
    """Rendered page output held in process memory, keyed by page and fragment."""

    def __init__(self) -> None:
        self._entries: dict[UUID, dict[str, str]] = {}

    def put(self, page_id: UUID, key: str, rendered: str) -> None:
        self._entries.setdefault(page_id, {})[key] = rendered

    def get(self, page_id: UUID, key: str) -> str | None:
        return self._entries.get(page_id, {}).get(key)

    def __contains__(self, page_id: object) -> bool:
        return page_id in self._entries

    def invalidate(self, page_id: UUID) -> None:
        if self._entries.pop(page_id, None) is not None:
            logger.info("render_cache_invalidated", page_id=str(page_id), backend="memory")
