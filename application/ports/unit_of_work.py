from abc import ABC, abstractmethod
from contextlib import AbstractContextManager


class UnitOfWork(ABC):
    """Port grouping several store calls into one atomic unit.

    Entering ``transaction()`` while one is already open joins the outer
    transaction; only the outermost block commits or rolls back.
    """

    @abstractmethod
    def transaction(self) -> AbstractContextManager[None]:
        """Commit on normal exit, roll back and re-raise on error."""
