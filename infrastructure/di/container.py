from __future__ import annotations

from lagom import Container

from application.ports.render_cache import RenderCache
from application.ports.stores.page_store import PageStore
from application.ports.stores.translation_store import TranslationStore
from application.ports.unit_of_work import UnitOfWork
from application.repositories.page_repository import PageRepository
from application.services.translation_synchronizer import TranslationSynchronizer
from application.use_cases.page_use_cases import (
    CreatePageUseCase,
    DeletePageUseCase,
    DuplicatePageUseCase,
    UpdatePageDataUseCase,
    UpdatePageUseCase,
)
from domain.services.unique_label_generator import UniqueLabelGenerator
from infrastructure.cache.file_render_cache import FileRenderCache
from infrastructure.cache.in_memory_render_cache import InMemoryRenderCache
from infrastructure.config import Settings, settings
from infrastructure.logging import setup_logging
from infrastructure.sql.database import Database
from infrastructure.sql.models import check_schema_names
from infrastructure.sql.page_store import SqlPageStore
from infrastructure.sql.translation_store import SqlTranslationStore
from infrastructure.sql.unit_of_work import SqlUnitOfWork


def create_container(app_settings: Settings | None = None) -> Container:
    app_settings = app_settings or settings
    check_schema_names(app_settings)
    setup_logging(app_settings)
    container = Container()

    container[Settings] = app_settings

    # Register Database
    database = Database(app_settings.database_url, echo=app_settings.database_echo)
    container[Database] = database

    # Register Render Cache
    if app_settings.render_cache_backend == "memory":
        container[RenderCache] = InMemoryRenderCache()
    else:
        container[RenderCache] = FileRenderCache(app_settings.render_cache_dir)

    # Register Stores
    container[PageStore] = lambda c: SqlPageStore(
        database=c[Database],
        render_cache=c[RenderCache],
    )
    container[TranslationStore] = lambda c: SqlTranslationStore(
        database=c[Database],
        foreign_key=app_settings.page_translation_foreign_key,
    )
    container[UnitOfWork] = lambda c: SqlUnitOfWork(database=c[Database])

    # Register Page Services
    container[UniqueLabelGenerator] = lambda c: UniqueLabelGenerator(
        translation_store=c[TranslationStore],
        max_attempts=app_settings.max_label_attempts,
    )
    container[TranslationSynchronizer] = lambda c: TranslationSynchronizer(
        translation_store=c[TranslationStore],
        unit_of_work=c[UnitOfWork],
        active_languages=app_settings.active_languages,
        foreign_key=app_settings.page_translation_foreign_key,
    )
    container[PageRepository] = lambda c: PageRepository(
        page_store=c[PageStore],
        translation_store=c[TranslationStore],
        unit_of_work=c[UnitOfWork],
        active_languages=app_settings.active_languages,
        label_generator=c[UniqueLabelGenerator],
        synchronizer=c[TranslationSynchronizer],
    )

    # Register Use Cases
    container[CreatePageUseCase] = lambda c: CreatePageUseCase(page_repository=c[PageRepository])
    container[UpdatePageUseCase] = lambda c: UpdatePageUseCase(page_repository=c[PageRepository])
    container[UpdatePageDataUseCase] = lambda c: UpdatePageDataUseCase(
        page_repository=c[PageRepository],
    )
    container[DeletePageUseCase] = lambda c: DeletePageUseCase(page_repository=c[PageRepository])
    container[DuplicatePageUseCase] = lambda c: DuplicatePageUseCase(
        page_repository=c[PageRepository],
    )

    return container
