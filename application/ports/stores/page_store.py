"""Store interfaces (ports) for the application layer."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any
from uuid import UUID

from domain.entities.page import Page


class PageStore(ABC):
    """Interface for the page row store.

    The store raises domain exceptions to allow proper error handling
    at the application and interface layers:
    - AggregateNotFoundError: When a page is not found
    - InfrastructureError: When infrastructure operations fail (DB, network, etc.)
    """

    @abstractmethod
    def create(self, fields: Mapping[str, Any]) -> Page:
        """Insert a page row from ``name``, ``layout`` and ``data``.

        Raises:
            InfrastructureError: If the insert fails.

        """

    @abstractmethod
    def update(self, page: Page, fields: Mapping[str, Any]) -> Page:
        """Write the given columns of an existing page and return the fresh page.

        Raises:
            AggregateNotFoundError: If the page no longer exists.
            InfrastructureError: If the update fails.

        """

    @abstractmethod
    def destroy(self, page_id: UUID) -> bool:
        """Delete a page row by id.

        Raises:
            InfrastructureError: If the delete fails.

        """

    @abstractmethod
    def find_by_id(self, page_id: UUID) -> Page:
        """Retrieve a page, translations included, by its id.

        Raises:
            AggregateNotFoundError: If the page does not exist.
            InfrastructureError: If the retrieval fails.

        """
