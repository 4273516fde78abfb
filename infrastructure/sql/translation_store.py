from collections.abc import Mapping
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import InstrumentedAttribute

from application.ports.stores.translation_store import TranslationStore
from domain.exceptions import InfrastructureError
from domain.value_objects.translation import Translation
from infrastructure.sql.database import Database
from infrastructure.sql.models import PageTranslationRow


class SqlTranslationStore(TranslationStore):
    """SQLAlchemy implementation of the TranslationStore."""

    def __init__(self, database: Database, foreign_key: str = "page_id") -> None:
        self.database = database
        self.foreign_key = foreign_key
        self._columns: dict[str, InstrumentedAttribute[Any]] = {
            foreign_key: PageTranslationRow.page_id,
            "locale": PageTranslationRow.locale,
            "title": PageTranslationRow.title,
            "route": PageTranslationRow.route,
        }

    def _column(self, name: str) -> InstrumentedAttribute[Any]:
        try:
            return self._columns[name]
        except KeyError:
            msg = f"Unknown translation column: {name!r}"
            raise ValueError(msg) from None

    def _to_translation(self, row: PageTranslationRow) -> Translation:
        return Translation(page_id=row.page_id, locale=row.locale, title=row.title, route=row.route)

    def create(self, fields: Mapping[str, Any]) -> Translation:
        try:
            with self.database.session() as s:
                row = PageTranslationRow(
                    page_id=fields[self.foreign_key],
                    locale=fields["locale"],
                    title=fields["title"],
                    route=fields["route"],
                )
                s.add(row)
                s.flush()
                return self._to_translation(row)
        except SQLAlchemyError as e:
            raise InfrastructureError(f"Failed to create translation: {e!s}") from e

    def destroy_where(self, column: str, value: Any) -> int:  # noqa: ANN401
        attribute = self._column(column)
        try:
            with self.database.session() as s:
                result = s.execute(delete(PageTranslationRow).where(attribute == value))
                return int(result.rowcount or 0)
        except SQLAlchemyError as e:
            raise InfrastructureError(f"Failed to delete translations: {e!s}") from e

    def find_first_where(self, column: str, value: Any) -> Translation | None:  # noqa: ANN401
        attribute = self._column(column)
        try:
            with self.database.session() as s:
                stmt = (
                    select(PageTranslationRow)
                    .where(attribute == value)
                    .order_by(PageTranslationRow.id.asc())
                    .limit(1)
                )
                row = s.execute(stmt).scalar_one_or_none()
                return self._to_translation(row) if row is not None else None
        except SQLAlchemyError as e:
            raise InfrastructureError(f"Failed to query translations: {e!s}") from e

    def find_all_where(self, column: str, value: Any) -> list[Translation]:  # noqa: ANN401
        attribute = self._column(column)
        try:
            with self.database.session() as s:
                stmt = (
                    select(PageTranslationRow)
                    .where(attribute == value)
                    .order_by(PageTranslationRow.id.asc())
                )
                rows = s.execute(stmt).scalars().all()
                return [self._to_translation(r) for r in rows]
        except SQLAlchemyError as e:
            raise InfrastructureError(f"Failed to query translations: {e!s}") from e
