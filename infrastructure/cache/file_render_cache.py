import shutil
from pathlib import Path
from uuid import UUID

import structlog

from domain.exceptions import InfrastructureError

logger = structlog.get_logger()


class FileRenderCache:
    """Rendered page output kept on disk, one directory per page."""

    def __init__(self, cache_dir: Path) -> None:
        self.cache_dir = cache_dir

    def path_for(self, page_id: UUID) -> Path:
        return self.cache_dir / str(page_id)

    def invalidate(self, page_id: UUID) -> None:
        path = self.path_for(page_id)
        if not path.exists():
            return
        try:
            shutil.rmtree(path)
        except OSError as e:
            raise InfrastructureError(f"Failed to clear render cache for page {page_id}: {e!s}") from e
        logger.info("render_cache_invalidated", page_id=str(page_id))
