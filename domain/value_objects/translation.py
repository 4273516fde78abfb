from uuid import UUID

from pydantic import BaseModel


class Translation(BaseModel):
    """Title and route of a page in one locale.

    A page has at most one translation per locale; the whole set is
    replaced on every write, never patched field by field.
    """

    page_id: UUID
    locale: str
    title: str
    route: str
    """URL path segment, unique only within the route column."""

    def to_record(self) -> dict[str, str]:
        return {"locale": self.locale, "title": self.title, "route": self.route}
