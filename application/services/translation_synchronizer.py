from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from application.ports.stores.translation_store import TranslationStore
    from application.ports.unit_of_work import UnitOfWork
    from domain.entities.page import Page

logger = structlog.get_logger()

TRANSLATED_FIELDS = ("title", "route")


class TranslationSynchronizer:
    """Replaces the full translation set of a page in one unit of work.

    A page ends up with exactly one row per active locale. Rows are never
    patched: the existing set is deleted and the new one inserted.
    """

    def __init__(
        self,
        translation_store: TranslationStore,
        unit_of_work: UnitOfWork,
        active_languages: Mapping[str, str],
        foreign_key: str = "page_id",
    ) -> None:
        self.translation_store = translation_store
        self.unit_of_work = unit_of_work
        self.active_languages = active_languages
        self.foreign_key = foreign_key

    def missing_entry(self, data: Mapping[str, Any]) -> tuple[str, str] | None:
        """Return the first (field, locale) pair absent from ``data``."""
        for field in TRANSLATED_FIELDS:
            values = data.get(field)
            for locale in self.active_languages:
                if not isinstance(values, Mapping) or values.get(locale) is None:
                    return field, locale
        return None

    def replace_translations(self, page: Page, data: Mapping[str, Any]) -> bool:
        missing = self.missing_entry(data)
        if missing is not None:
            field, locale = missing
            logger.info(
                "translations_incomplete",
                page_id=str(page.id),
                field=field,
                locale=locale,
            )
            return False

        with self.unit_of_work.transaction():
            removed = self.translation_store.destroy_where(self.foreign_key, page.id)
            created = [
                self.translation_store.create(
                    {
                        self.foreign_key: page.id,
                        "locale": locale,
                        "title": data["title"][locale],
                        "route": data["route"][locale],
                    },
                )
                for locale in self.active_languages
            ]

        page.translations = {translation.locale: translation.to_record() for translation in created}
        logger.info(
            "translations_replaced",
            page_id=str(page.id),
            removed=removed,
            created=len(created),
        )
        return True
