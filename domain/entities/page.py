from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any
from uuid import UUID

from pydantic import BaseModel, Field, PrivateAttr, field_validator

if TYPE_CHECKING:
    from application.ports.render_cache import RenderCache


class Page(BaseModel):
    """A page as handed out by a page store.

    The store assigns ``id`` and binds the render cache; everything the
    builder produces lives in ``data`` as an already serialized blob.
    """

    id: UUID
    name: str
    layout: str
    data: str | None = None
    translations: dict[str, dict[Any, Any]] = Field(default_factory=dict)
    """Locale -> raw translation record (``title``, ``route``, ...)."""

    _cache: RenderCache | None = PrivateAttr(default=None)

    @field_validator("name", "layout")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            msg = "name and layout cannot be blank"
            raise ValueError(msg)
        return v

    def __hash__(self) -> int:
        return hash(self.id)

    def bind_cache(self, cache: RenderCache | None) -> Page:
        self._cache = cache
        return self

    def invalidate_cache(self) -> None:
        """Drop any rendered output of this page. Safe to call repeatedly."""
        if self._cache is not None:
            self._cache.invalidate(self.id)

    def get_builder_data(self) -> Any:  # noqa: ANN401
        if not self.data:
            return None
        return json.loads(self.data)

    def get_translation(self, locale: str) -> dict[Any, Any] | None:
        return self.translations.get(locale)
