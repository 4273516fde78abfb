"""Domain exceptions for business rule violations."""


class DomainError(Exception):
    """Base exception for domain layer."""


class AggregateNotFoundError(DomainError):
    """Raised when a page is not found in the store."""


class InfrastructureError(DomainError):
    """Raised when infrastructure operations fail (DB, filesystem, etc.)."""


class InvariantViolationError(DomainError):
    """Raised when a collaborator hands back an object that breaks the Page contract."""


class PageNotCreatedError(DomainError):
    """Raised when duplicating a page could not create the copy."""


class LabelAllocationError(DomainError):
    """Raised when no free copy label was found within the attempt limit."""
