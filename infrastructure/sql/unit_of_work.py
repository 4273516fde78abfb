from collections.abc import Iterator
from contextlib import contextmanager

from application.ports.unit_of_work import UnitOfWork
from infrastructure.sql.database import Database


class SqlUnitOfWork(UnitOfWork):
    """Runs store calls inside one database session and transaction."""

    def __init__(self, database: Database) -> None:
        self.database = database

    @contextmanager
    def transaction(self) -> Iterator[None]:
        with self.database.session():
            yield
