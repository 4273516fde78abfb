import json
from collections.abc import Mapping
from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import selectinload

from application.ports.render_cache import RenderCache
from application.ports.stores.page_store import PageStore
from domain.entities.page import Page
from domain.exceptions import AggregateNotFoundError, InfrastructureError
from infrastructure.sql.database import Database
from infrastructure.sql.models import PageRow

WRITABLE_COLUMNS = frozenset({"name", "layout", "data"})


def _serialize(data: Any) -> str | None:  # noqa: ANN401
    if data is None or isinstance(data, str):
        return data
    return json.dumps(data)


class SqlPageStore(PageStore):
    """SQLAlchemy implementation of the PageStore."""

    def __init__(self, database: Database, render_cache: RenderCache | None = None) -> None:
        self.database = database
        self.render_cache = render_cache

    def _to_page(self, row: PageRow) -> Page:
        page = Page(
            id=row.id,
            name=row.name,
            layout=row.layout,
            data=row.data,
            translations={
                t.locale: {"locale": t.locale, "title": t.title, "route": t.route}
                for t in row.translations
            },
        )
        return page.bind_cache(self.render_cache)

    def create(self, fields: Mapping[str, Any]) -> Page:
        try:
            with self.database.session() as s:
                row = PageRow(
                    name=fields["name"],
                    layout=fields["layout"],
                    data=_serialize(fields.get("data")),
                    translations=[],
                )
                s.add(row)
                s.flush()
                return self._to_page(row)
        except SQLAlchemyError as e:
            raise InfrastructureError(f"Failed to create page: {e!s}") from e

    def update(self, page: Page, fields: Mapping[str, Any]) -> Page:
        unknown = set(fields) - WRITABLE_COLUMNS
        if unknown:
            msg = f"Cannot update page columns: {sorted(unknown)}"
            raise ValueError(msg)

        try:
            with self.database.session() as s:
                row = s.get(PageRow, page.id, options=[selectinload(PageRow.translations)])
                if row is None:
                    raise AggregateNotFoundError(f"Page {page.id} not found")
                for column, value in fields.items():
                    setattr(row, column, _serialize(value) if column == "data" else value)
                s.flush()
                return self._to_page(row)
        except SQLAlchemyError as e:
            raise InfrastructureError(f"Failed to update page {page.id}: {e!s}") from e

    def destroy(self, page_id: UUID) -> bool:
        try:
            with self.database.session() as s:
                row = s.get(PageRow, page_id)
                if row is None:
                    return False
                # translations go with the row (ORM cascade + ON DELETE CASCADE)
                s.delete(row)
                return True
        except SQLAlchemyError as e:
            raise InfrastructureError(f"Failed to delete page {page_id}: {e!s}") from e

    def find_by_id(self, page_id: UUID) -> Page:
        try:
            with self.database.session() as s:
                stmt = (
                    select(PageRow)
                    .where(PageRow.id == page_id)
                    .options(selectinload(PageRow.translations))
                )
                row = s.execute(stmt).scalar_one_or_none()
                if row is None:
                    raise AggregateNotFoundError(f"Page {page_id} not found")
                return self._to_page(row)
        except SQLAlchemyError as e:
            raise InfrastructureError(f"Failed to retrieve page {page_id}: {e!s}") from e
