"""Page lifecycle: create, update, destroy and duplicate pages with their translations."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Literal

import structlog

from application.services.translation_synchronizer import TranslationSynchronizer
from domain.entities.page import Page
from domain.exceptions import InvariantViolationError, PageNotCreatedError
from domain.services.unique_label_generator import UniqueLabelGenerator

if TYPE_CHECKING:
    from uuid import UUID

    from application.ports.stores.page_store import PageStore
    from application.ports.stores.translation_store import TranslationStore
    from application.ports.unit_of_work import UnitOfWork

logger = structlog.get_logger()

REQUIRED_FIELDS = ("name", "layout")
PAGE_NOT_CREATED_MESSAGE = "Something went wrong, failed to create page"


class PageRepository:
    """Orchestrates the page store, the translation store and the label generator.

    Validation failures are reported as ``False``; nothing is written in that
    case. Not-found and infrastructure problems propagate as domain
    exceptions from the stores.
    """

    def __init__(
        self,
        page_store: PageStore,
        translation_store: TranslationStore,
        unit_of_work: UnitOfWork,
        active_languages: Mapping[str, str],
        label_generator: UniqueLabelGenerator | None = None,
        synchronizer: TranslationSynchronizer | None = None,
    ) -> None:
        self.page_store = page_store
        self.translation_store = translation_store
        self.unit_of_work = unit_of_work
        self.active_languages = active_languages
        self.label_generator = label_generator or UniqueLabelGenerator(translation_store)
        self.synchronizer = synchronizer or TranslationSynchronizer(
            translation_store,
            unit_of_work,
            active_languages,
        )

    @staticmethod
    def _has_required_fields(data: Mapping[str, Any]) -> bool:
        return all(
            isinstance(value, str) and value.strip()
            for value in (data.get(field) for field in REQUIRED_FIELDS)
        )

    def find(self, page_id: UUID) -> Page:
        return self.page_store.find_by_id(page_id)

    def create(self, data: Mapping[str, Any]) -> Page | Literal[False]:
        if not self._has_required_fields(data):
            logger.info("page_create_rejected", reason="name_or_layout_invalid")
            return False

        page = self.page_store.create(
            {
                "name": data["name"],
                "layout": data["layout"],
                "data": data.get("data"),
            },
        )
        if not isinstance(page, Page):
            msg = f"Page store returned {type(page).__name__}, expected Page"
            raise InvariantViolationError(msg)
        logger.info("page_created", page_id=str(page.id), layout=page.layout)

        if not self.synchronizer.replace_translations(page, data):
            # The page row stays behind without translations.
            logger.warning("page_created_without_translations", page_id=str(page.id))
            return False
        return page

    def update(self, page: Page, data: Mapping[str, Any]) -> Page | Literal[False]:
        """Write name, layout and translations of ``page``.

        Returns ``False`` only when name or layout is missing or blank. An
        incomplete translation bundle leaves the stored translations as they
        are, and name and layout are still written.
        """
        if not self._has_required_fields(data):
            logger.info(
                "page_update_rejected",
                page_id=str(page.id),
                reason="name_or_layout_invalid",
            )
            return False

        page.invalidate_cache()
        self.synchronizer.replace_translations(page, data)

        updated = self.page_store.update(
            page,
            {
                "name": data["name"],
                "layout": data["layout"],
            },
        )
        logger.info("page_updated", page_id=str(page.id))
        return updated

    def update_page_data(self, page: Page, data: Any) -> Page:  # noqa: ANN401
        page.invalidate_cache()
        updated = self.page_store.update(page, {"data": json.dumps(data)})
        logger.info("page_builder_data_updated", page_id=str(page.id))
        return updated

    def destroy(self, page_id: UUID) -> bool:
        self.page_store.find_by_id(page_id).invalidate_cache()
        deleted = self.page_store.destroy(page_id)
        logger.info("page_destroyed", page_id=str(page_id), deleted=deleted)
        return deleted

    def duplicate(self, page: Page) -> Literal[True]:
        bundle: dict[str, Any] = {
            "layout": page.layout,
            "title": {},
            "route": {},
            "data": json.dumps(page.get_builder_data()),
        }
        for locale, record in page.translations.items():
            translation = {key: value for key, value in record.items() if isinstance(key, str)}
            title = self.label_generator.generate_unique_title(translation["title"])
            bundle.setdefault("name", title)
            bundle["title"][locale] = title
            bundle["route"][locale] = self.label_generator.generate_unique_route(translation["route"])

        copy = self.create(bundle)
        if not copy:
            logger.error("page_duplicate_failed", source_page_id=str(page.id))
            raise PageNotCreatedError(PAGE_NOT_CREATED_MESSAGE)

        logger.info("page_duplicated", source_page_id=str(page.id), page_id=str(copy.id))
        return True
