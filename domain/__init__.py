"""Domain layer exports."""

from domain.entities import Page
from domain.exceptions import (
    AggregateNotFoundError,
    DomainError,
    InfrastructureError,
    InvariantViolationError,
    LabelAllocationError,
    PageNotCreatedError,
)
from domain.value_objects import LabelStyle, Translation

__all__ = [
    "AggregateNotFoundError",
    "DomainError",
    "InfrastructureError",
    "InvariantViolationError",
    "LabelAllocationError",
    "LabelStyle",
    "Page",
    "PageNotCreatedError",
    "Translation",
]
