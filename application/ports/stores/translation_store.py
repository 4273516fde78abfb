from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from domain.value_objects.translation import Translation


class TranslationStore(ABC):
    """Interface for per-locale page translation rows."""

    @abstractmethod
    def create(self, fields: Mapping[str, Any]) -> Translation:
        """Insert one translation row (foreign key, ``locale``, ``title``, ``route``)."""

    @abstractmethod
    def destroy_where(self, column: str, value: Any) -> int:  # noqa: ANN401
        """Delete every row whose ``column`` equals ``value``; return the count."""

    @abstractmethod
    def find_first_where(self, column: str, value: Any) -> Translation | None:  # noqa: ANN401
        """Return the first row whose ``column`` equals ``value``, if any."""

    @abstractmethod
    def find_all_where(self, column: str, value: Any) -> list[Translation]:  # noqa: ANN401
        """Return all rows whose ``column`` equals ``value``."""
