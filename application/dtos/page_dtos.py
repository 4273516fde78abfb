from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field


class CreatePageRequest(BaseModel):
    name: str
    layout: str
    data: Any = None
    title: dict[str, str] = Field(default_factory=dict)
    route: dict[str, str] = Field(default_factory=dict)


class UpdatePageRequest(BaseModel):
    page_id: UUID
    name: str
    layout: str
    title: dict[str, str] = Field(default_factory=dict)
    route: dict[str, str] = Field(default_factory=dict)


class TranslationResponse(BaseModel):
    locale: str
    title: str
    route: str


class PageResponse(BaseModel):
    page_id: UUID
    name: str
    layout: str
    builder_data: Any = None
    translations: list[TranslationResponse] = Field(default_factory=list)
