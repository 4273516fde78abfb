from application.dtos.page_dtos import PageResponse, TranslationResponse
from domain.entities.page import Page


class PageMapper:
    """Mapper for converting Page domain objects to DTOs."""

    @staticmethod
    def to_page_response(page: Page) -> PageResponse:
        """Map a Page entity to a PageResponse DTO.

        Args:
            page: The Page entity to map

        Returns:
            PageResponse: The mapped response DTO

        """
        return PageResponse(
            page_id=page.id,
            name=page.name,
            layout=page.layout,
            builder_data=page.get_builder_data(),
            translations=[
                TranslationResponse(
                    locale=locale,
                    title=record["title"],
                    route=record["route"],
                )
                for locale, record in page.translations.items()
            ],
        )
