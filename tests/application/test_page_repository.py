"""Tests for the page lifecycle repository."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any
from uuid import uuid4

import pytest

from application.repositories.page_repository import PageRepository
from domain.entities.page import Page
from domain.exceptions import (
    AggregateNotFoundError,
    InvariantViolationError,
    LabelAllocationError,
    PageNotCreatedError,
)
from domain.services.unique_label_generator import UniqueLabelGenerator
from tests.mocks import MockPageStore, MockRenderCache, MockTranslationStore


class BrokenPageStore(MockPageStore):
    """Page store whose create hands back something that is not a Page."""

    def create(self, fields: Mapping[str, Any]) -> Page:
        super().create(fields)
        return {"id": uuid4(), **fields}  # type: ignore[return-value]


class TestCreate:
    """Test PageRepository.create."""

    def test_create_success(
        self,
        page_repository: PageRepository,
        translation_store: MockTranslationStore,
        active_languages: dict[str, str],
        page_data: dict,
    ) -> None:
        page = page_repository.create(page_data)

        assert isinstance(page, Page)
        assert page.id is not None
        assert page.name == "About"
        assert page.layout == "master"
        assert set(page.translations) == set(active_languages)
        assert {t.locale for t in translation_store.for_page(page.id)} == set(active_languages)

    def test_create_passes_builder_data_through(
        self,
        page_repository: PageRepository,
        page_store: MockPageStore,
        page_data: dict,
    ) -> None:
        page = page_repository.create(page_data)

        assert page.get_builder_data() == {"html": ["<p>About us</p>"]}
        assert page_store.rows[page.id]["data"] == json.dumps(page_data["data"])

    def test_create_without_builder_data(
        self,
        page_repository: PageRepository,
        page_data: dict,
    ) -> None:
        del page_data["data"]

        page = page_repository.create(page_data)

        assert page.data is None

    @pytest.mark.parametrize(
        "overrides",
        [
            {"name": None},
            {"layout": None},
            {"name": 42},
            {"layout": ["master"]},
            {"name": ""},
            {"name": "   "},
            {"layout": ""},
            {"layout": " \t"},
        ],
    )
    def test_create_rejects_bad_name_or_layout(
        self,
        page_repository: PageRepository,
        page_store: MockPageStore,
        translation_store: MockTranslationStore,
        page_data: dict,
        overrides: dict,
    ) -> None:
        page_data.update(overrides)

        assert page_repository.create(page_data) is False
        assert page_store.rows == {}
        assert translation_store.rows == []

    def test_create_rejects_missing_name(
        self,
        page_repository: PageRepository,
        page_store: MockPageStore,
        page_data: dict,
    ) -> None:
        del page_data["name"]

        assert page_repository.create(page_data) is False
        assert page_store.create_called is False

    def test_create_with_incomplete_translations_leaves_orphan_row(
        self,
        page_repository: PageRepository,
        page_store: MockPageStore,
        translation_store: MockTranslationStore,
        page_data: dict,
    ) -> None:
        del page_data["route"]["fr"]

        assert page_repository.create(page_data) is False
        assert len(page_store.rows) == 1
        assert translation_store.rows == []

    def test_create_with_non_page_result_fails_loudly(
        self,
        translation_store: MockTranslationStore,
        unit_of_work,
        active_languages: dict[str, str],
        page_data: dict,
    ) -> None:
        repository = PageRepository(
            page_store=BrokenPageStore(translation_store),
            translation_store=translation_store,
            unit_of_work=unit_of_work,
            active_languages=active_languages,
        )

        with pytest.raises(InvariantViolationError):
            repository.create(page_data)
        assert translation_store.rows == []


class TestUpdate:
    """Test PageRepository.update."""

    def test_update_success(
        self,
        page_repository: PageRepository,
        translation_store: MockTranslationStore,
        render_cache: MockRenderCache,
        sample_page: Page,
    ) -> None:
        data = {
            "name": "About us",
            "layout": "wide",
            "title": {"en": "About us", "fr": "Qui sommes-nous"},
            "route": {"en": "about-us", "fr": "qui-sommes-nous"},
        }

        updated = page_repository.update(sample_page, data)

        assert updated.name == "About us"
        assert updated.layout == "wide"
        assert updated.translations["fr"]["route"] == "qui-sommes-nous"
        assert render_cache.invalidated == [sample_page.id]
        assert len(translation_store.for_page(sample_page.id)) == 2

    def test_update_order(
        self,
        page_repository: PageRepository,
        journal: list[str],
        sample_page: Page,
        page_data: dict,
    ) -> None:
        journal.clear()

        page_repository.update(sample_page, page_data)

        assert journal == [
            f"invalidate:{sample_page.id}",
            f"translation_destroy:{sample_page.id}",
            "translation_create:en",
            "translation_create:fr",
            "page_update:layout,name",
        ]

    def test_update_ignores_builder_data(
        self,
        page_repository: PageRepository,
        page_store: MockPageStore,
        sample_page: Page,
        page_data: dict,
    ) -> None:
        page_data["data"] = {"html": ["changed"]}

        page_repository.update(sample_page, page_data)

        assert page_store.update_calls == [{"name": "About", "layout": "master"}]
        assert sample_page.data == page_store.rows[sample_page.id]["data"]

    @pytest.mark.parametrize(
        "overrides",
        [{"name": None}, {"layout": 3}, {"name": ""}, {"name": "  "}, {"layout": "   "}],
    )
    def test_update_rejects_bad_name_or_layout(
        self,
        page_repository: PageRepository,
        page_store: MockPageStore,
        translation_store: MockTranslationStore,
        render_cache: MockRenderCache,
        sample_page: Page,
        page_data: dict,
        overrides: dict,
    ) -> None:
        page_data.update(overrides)
        before = list(translation_store.rows)

        assert page_repository.update(sample_page, page_data) is False
        assert page_store.update_calls == []
        assert translation_store.rows == before
        assert render_cache.invalidated == []

    def test_update_with_incomplete_translations_keeps_existing_rows(
        self,
        page_repository: PageRepository,
        page_store: MockPageStore,
        translation_store: MockTranslationStore,
        sample_page: Page,
        page_data: dict,
    ) -> None:
        del page_data["title"]["en"]
        page_data["name"] = "Renamed"
        before = list(translation_store.rows)

        updated = page_repository.update(sample_page, page_data)

        assert translation_store.rows == before
        assert updated.name == "Renamed"
        assert len(page_store.update_calls) == 1

    def test_update_twice_is_idempotent(
        self,
        page_repository: PageRepository,
        translation_store: MockTranslationStore,
        sample_page: Page,
        page_data: dict,
    ) -> None:
        first = page_repository.update(sample_page, page_data)
        first_rows = translation_store.for_page(sample_page.id)
        second = page_repository.update(first, page_data)

        assert (first.name, first.layout) == (second.name, second.layout)
        assert translation_store.for_page(sample_page.id) == first_rows
        assert len(first_rows) == 2

    def test_update_missing_page(
        self,
        page_repository: PageRepository,
        page_data: dict,
    ) -> None:
        ghost = Page(id=uuid4(), name="Ghost", layout="master")

        with pytest.raises(AggregateNotFoundError):
            page_repository.update(ghost, page_data)


class TestUpdatePageData:
    """Test PageRepository.update_page_data."""

    def test_update_page_data(
        self,
        page_repository: PageRepository,
        page_store: MockPageStore,
        journal: list[str],
        sample_page: Page,
    ) -> None:
        journal.clear()
        payload = {"html": ["<h1>New</h1>"], "css": "h1 {}"}

        updated = page_repository.update_page_data(sample_page, payload)

        assert updated.get_builder_data() == payload
        assert page_store.update_calls == [{"data": json.dumps(payload)}]
        assert journal == [f"invalidate:{sample_page.id}", "page_update:data"]
        assert updated.name == sample_page.name
        assert updated.translations == sample_page.translations


class TestDestroy:
    """Test PageRepository.destroy."""

    def test_destroy_invalidates_before_delete(
        self,
        page_repository: PageRepository,
        page_store: MockPageStore,
        journal: list[str],
        sample_page: Page,
    ) -> None:
        journal.clear()

        assert page_repository.destroy(sample_page.id) is True

        assert journal == [f"invalidate:{sample_page.id}", f"page_destroy:{sample_page.id}"]
        with pytest.raises(AggregateNotFoundError):
            page_store.find_by_id(sample_page.id)

    def test_destroy_unknown_page(
        self,
        page_repository: PageRepository,
        render_cache: MockRenderCache,
    ) -> None:
        with pytest.raises(AggregateNotFoundError):
            page_repository.destroy(uuid4())
        assert render_cache.invalidated == []


class TestDuplicate:
    """Test PageRepository.duplicate."""

    def test_duplicate_creates_copy(
        self,
        page_repository: PageRepository,
        page_store: MockPageStore,
        sample_page: Page,
    ) -> None:
        assert page_repository.duplicate(sample_page) is True

        copy_id = next(pid for pid in page_store.rows if pid != sample_page.id)
        copy = page_store.find_by_id(copy_id)
        assert copy.name == "About - 2"
        assert copy.layout == sample_page.layout
        assert copy.translations["en"]["title"] == "About - 2"
        assert copy.translations["en"]["route"] == "about-2"
        assert copy.translations["fr"]["title"] == "À propos - 2"
        assert copy.translations["fr"]["route"] == "a-propos-2"
        assert copy.get_builder_data() == sample_page.get_builder_data()

    def test_duplicate_twice_counts_up(
        self,
        page_repository: PageRepository,
        page_store: MockPageStore,
        sample_page: Page,
    ) -> None:
        page_repository.duplicate(sample_page)
        page_repository.duplicate(sample_page)

        names = sorted(row["name"] for row in page_store.rows.values())
        assert names == ["About", "About - 2", "About - 3"]

    def test_duplicate_of_copy_uses_base_label(
        self,
        page_repository: PageRepository,
        page_store: MockPageStore,
        sample_page: Page,
    ) -> None:
        page_repository.duplicate(sample_page)
        copy_id = next(pid for pid in page_store.rows if pid != sample_page.id)

        page_repository.duplicate(page_store.find_by_id(copy_id))

        routes = {page_store.find_by_id(pid).translations["en"]["route"] for pid in page_store.rows}
        assert routes == {"about", "about-2", "about-3"}

    def test_duplicate_strips_non_string_keys(
        self,
        page_repository: PageRepository,
        page_store: MockPageStore,
    ) -> None:
        source = Page(
            id=uuid4(),
            name="Blog",
            layout="master",
            translations={
                "en": {0: "x", 1: "Blog", "title": "Blog", "route": "blog"},
                "fr": {0: "y", "title": "Blogue", "route": "blogue"},
            },
        )

        assert page_repository.duplicate(source) is True
        copy = page_store.find_by_id(next(iter(page_store.rows)))
        assert copy.name == "Blog - 2"
        assert copy.translations["fr"]["route"] == "blogue-2"

    def test_duplicate_without_builder_data(
        self,
        page_repository: PageRepository,
        page_store: MockPageStore,
        translation_store: MockTranslationStore,
    ) -> None:
        page = page_store.add("Empty", "master")
        translation_store.add(page.id, "en", "Empty", "empty")
        translation_store.add(page.id, "fr", "Vide", "vide")

        page_repository.duplicate(page_store.find_by_id(page.id))

        copy_id = next(pid for pid in page_store.rows if pid != page.id)
        assert page_store.rows[copy_id]["data"] == "null"

    def test_duplicate_failure_raises(
        self,
        page_repository: PageRepository,
        page_store: MockPageStore,
        translation_store: MockTranslationStore,
    ) -> None:
        # only one of the two active locales present, so create reports failure
        page = page_store.add("Partial", "master")
        translation_store.add(page.id, "en", "Partial", "partial")

        with pytest.raises(PageNotCreatedError, match="failed to create page"):
            page_repository.duplicate(page_store.find_by_id(page.id))

    def test_duplicate_without_free_label(
        self,
        page_store: MockPageStore,
        translation_store: MockTranslationStore,
        unit_of_work,
        active_languages: dict[str, str],
        sample_page: Page,
    ) -> None:
        translation_store.add(uuid4(), "en", "About - 2", "x")
        repository = PageRepository(
            page_store=page_store,
            translation_store=translation_store,
            unit_of_work=unit_of_work,
            active_languages=active_languages,
            label_generator=UniqueLabelGenerator(translation_store, max_attempts=1),
        )

        with pytest.raises(LabelAllocationError):
            repository.duplicate(sample_page)
        assert len(page_store.rows) == 1
