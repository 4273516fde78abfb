from typing import Any
from uuid import UUID

import structlog
from returns.result import Failure, Result, Success

from application.dtos.errors import AppError
from application.dtos.page_dtos import CreatePageRequest, PageResponse, UpdatePageRequest
from application.mappers.page_mappers import PageMapper
from application.repositories.page_repository import PageRepository
from domain.exceptions import (
    AggregateNotFoundError,
    InfrastructureError,
    InvariantViolationError,
    LabelAllocationError,
    PageNotCreatedError,
)

logger = structlog.get_logger()


class CreatePageUseCase:
    def __init__(self, page_repository: PageRepository) -> None:
        self.page_repository = page_repository

    async def execute(self, request: CreatePageRequest) -> Result[PageResponse, AppError]:
        try:
            logger.info("create_page_use_case_start", page_name=request.name, layout=request.layout)
            page = self.page_repository.create(request.model_dump())
            if page is False:
                # The page row may exist without translations at this point.
                return Failure(
                    AppError("validation", "Page requires name, layout and a title and route per language"),
                )

            logger.info("create_page_use_case_success", page_id=str(page.id))
            return Success(PageMapper.to_page_response(page))
        except InfrastructureError as e:
            logger.warning("infrastructure_error", error=str(e))
            return Failure(AppError("infrastructure", f"Storage failure: {e!s}"))
        except InvariantViolationError as e:
            logger.error("page_store_contract_broken", error=str(e))
            return Failure(AppError("internal_error", str(e)))
        except Exception as e:
            logger.error(
                "unexpected_error_in_create_page_use_case",
                error=str(e),
                error_type=type(e).__name__,
                exc_info=True,
            )
            return Failure(AppError("internal_error", f"Unexpected error: {e!s}"))


class UpdatePageUseCase:
    """Update name, layout and translations of a page."""

    def __init__(self, page_repository: PageRepository) -> None:
        self.page_repository = page_repository

    async def execute(self, request: UpdatePageRequest) -> Result[PageResponse, AppError]:
        try:
            page = self.page_repository.find(request.page_id)

            updated = self.page_repository.update(page, request.model_dump(exclude={"page_id"}))
            if updated is False:
                return Failure(AppError("validation", "Page requires a name and a layout"))

            return Success(PageMapper.to_page_response(updated))
        except AggregateNotFoundError as e:
            return Failure(AppError("not_found", f"Page not found: {e!s}"))
        except InfrastructureError as e:
            return Failure(AppError("infrastructure", f"Storage failure: {e!s}"))
        except Exception as e:
            logger.error(
                "unexpected_error_in_update_page_use_case",
                page_id=str(request.page_id),
                error=str(e),
                error_type=type(e).__name__,
                exc_info=True,
            )
            return Failure(AppError("internal_error", f"Unexpected error: {e!s}"))


class UpdatePageDataUseCase:
    """Store new builder data for a page."""

    def __init__(self, page_repository: PageRepository) -> None:
        self.page_repository = page_repository

    async def execute(self, page_id: UUID, data: Any) -> Result[PageResponse, AppError]:  # noqa: ANN401
        try:
            page = self.page_repository.find(page_id)
            updated = self.page_repository.update_page_data(page, data)
            return Success(PageMapper.to_page_response(updated))
        except AggregateNotFoundError as e:
            return Failure(AppError("not_found", f"Page not found: {e!s}"))
        except InfrastructureError as e:
            return Failure(AppError("infrastructure", f"Storage failure: {e!s}"))
        except TypeError as e:
            # builder data that json cannot encode
            return Failure(AppError("validation", f"Builder data is not serializable: {e!s}"))
        except Exception as e:
            logger.error(
                "unexpected_error_in_update_page_data_use_case",
                page_id=str(page_id),
                error=str(e),
                error_type=type(e).__name__,
                exc_info=True,
            )
            return Failure(AppError("internal_error", f"Unexpected error: {e!s}"))


class DeletePageUseCase:
    """Delete a page."""

    def __init__(self, page_repository: PageRepository) -> None:
        self.page_repository = page_repository

    async def execute(self, page_id: UUID) -> Result[None, AppError]:
        try:
            logger.info("delete_page_use_case_start", page_id=str(page_id))
            self.page_repository.destroy(page_id)
            logger.info("delete_page_use_case_success", page_id=str(page_id))
            return Success(None)
        except AggregateNotFoundError as e:
            logger.warning("page_not_found", page_id=str(page_id), error=str(e))
            return Failure(AppError("not_found", f"Page not found: {e!s}"))
        except InfrastructureError as e:
            logger.warning("infrastructure_error", page_id=str(page_id), error=str(e))
            return Failure(AppError("infrastructure", f"Storage failure: {e!s}"))
        except Exception as e:
            logger.error(
                "unexpected_error_in_delete_page_use_case",
                page_id=str(page_id),
                error=str(e),
                error_type=type(e).__name__,
                exc_info=True,
            )
            return Failure(AppError("internal_error", f"Unexpected error: {e!s}"))


class DuplicatePageUseCase:
    """Create a copy of a page with fresh, collision-free titles and routes."""

    def __init__(self, page_repository: PageRepository) -> None:
        self.page_repository = page_repository

    async def execute(self, page_id: UUID) -> Result[None, AppError]:
        try:
            logger.info("duplicate_page_use_case_start", page_id=str(page_id))
            page = self.page_repository.find(page_id)
            self.page_repository.duplicate(page)
            logger.info("duplicate_page_use_case_success", page_id=str(page_id))
            return Success(None)
        except AggregateNotFoundError as e:
            return Failure(AppError("not_found", f"Page not found: {e!s}"))
        except (PageNotCreatedError, LabelAllocationError) as e:
            logger.warning("duplicate_page_failed", page_id=str(page_id), error=str(e))
            return Failure(AppError("duplication_failed", str(e)))
        except InfrastructureError as e:
            return Failure(AppError("infrastructure", f"Storage failure: {e!s}"))
        except Exception as e:
            logger.error(
                "unexpected_error_in_duplicate_page_use_case",
                page_id=str(page_id),
                error=str(e),
                error_type=type(e).__name__,
                exc_info=True,
            )
            return Failure(AppError("internal_error", f"Unexpected error: {e!s}"))
