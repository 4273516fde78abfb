from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

import structlog
from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from infrastructure.sql.models import Base

logger = structlog.get_logger()


class Database:
    """Sync SQLAlchemy engine plus a session scope shared by nested callers.

    Usage:
        db = Database(url)
        with db.session() as s:
            ...

    A ``session()`` opened while another one is active in the same context
    reuses it, so several store calls can run in a single transaction.
    """

    def __init__(self, url: str, echo: bool = False, **engine_kwargs: Any) -> None:
        self._engine: Engine = create_engine(url, echo=echo, pool_pre_ping=True, **engine_kwargs)
        self._sessionmaker: sessionmaker[Session] = sessionmaker(
            bind=self._engine,
            expire_on_commit=False,
            autoflush=False,
        )
        self._current: ContextVar[Session | None] = ContextVar(f"db_session_{id(self)}", default=None)

    @property
    def engine(self) -> Engine:
        return self._engine

    @contextmanager
    def session(self) -> Iterator[Session]:
        """
        Provides a Session with safe commit/rollback semantics.
        """
        current = self._current.get()
        if current is not None:
            yield current
            return

        session: Session = self._sessionmaker()
        token = self._current.set(session)
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            logger.warning("database_transaction_rolled_back")
            raise
        finally:
            self._current.reset(token)
            session.close()

    # --- schema management helpers ---

    def create_all(self) -> None:
        """
        Create tables based on Base metadata. Use only in dev/tests.
        """
        Base.metadata.create_all(self._engine)

    def drop_all(self) -> None:
        Base.metadata.drop_all(self._engine)
