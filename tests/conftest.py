"""Shared test fixtures and configuration."""

from __future__ import annotations

import pytest

from application.repositories.page_repository import PageRepository
from application.services.translation_synchronizer import TranslationSynchronizer
from domain.entities.page import Page
from domain.services.unique_label_generator import UniqueLabelGenerator
from tests.mocks import MockPageStore, MockRenderCache, MockTranslationStore, MockUnitOfWork


@pytest.fixture
def active_languages() -> dict[str, str]:
    """Return the active locales, in display order."""
    return {"en": "English", "fr": "Français"}


@pytest.fixture
def journal() -> list[str]:
    """Ordered record of store and cache calls."""
    return []


@pytest.fixture
def render_cache(journal: list[str]) -> MockRenderCache:
    return MockRenderCache(journal)


@pytest.fixture
def translation_store(journal: list[str]) -> MockTranslationStore:
    return MockTranslationStore(journal)


@pytest.fixture
def page_store(
    translation_store: MockTranslationStore,
    render_cache: MockRenderCache,
    journal: list[str],
) -> MockPageStore:
    return MockPageStore(translation_store, render_cache, journal)


@pytest.fixture
def unit_of_work(translation_store: MockTranslationStore) -> MockUnitOfWork:
    return MockUnitOfWork(translation_store)


@pytest.fixture
def synchronizer(
    translation_store: MockTranslationStore,
    unit_of_work: MockUnitOfWork,
    active_languages: dict[str, str],
) -> TranslationSynchronizer:
    return TranslationSynchronizer(translation_store, unit_of_work, active_languages)


@pytest.fixture
def label_generator(translation_store: MockTranslationStore) -> UniqueLabelGenerator:
    return UniqueLabelGenerator(translation_store, max_attempts=50)


@pytest.fixture
def page_repository(
    page_store: MockPageStore,
    translation_store: MockTranslationStore,
    unit_of_work: MockUnitOfWork,
    active_languages: dict[str, str],
    label_generator: UniqueLabelGenerator,
    synchronizer: TranslationSynchronizer,
) -> PageRepository:
    return PageRepository(
        page_store=page_store,
        translation_store=translation_store,
        unit_of_work=unit_of_work,
        active_languages=active_languages,
        label_generator=label_generator,
        synchronizer=synchronizer,
    )


@pytest.fixture
def page_data() -> dict:
    """A complete create bundle for the active locales."""
    return {
        "name": "About",
        "layout": "master",
        "data": {"html": ["<p>About us</p>"]},
        "title": {"en": "About", "fr": "À propos"},
        "route": {"en": "about", "fr": "a-propos"},
    }


@pytest.fixture
def sample_page(
    page_store: MockPageStore,
    translation_store: MockTranslationStore,
) -> Page:
    """A stored page with en/fr translations."""
    page = page_store.add("About", "master", '{"html": ["<p>About us</p>"]}')
    translation_store.add(page.id, "en", "About", "about")
    translation_store.add(page.id, "fr", "À propos", "a-propos")
    return page_store.find_by_id(page.id)
