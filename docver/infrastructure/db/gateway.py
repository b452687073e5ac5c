"""Scoped access to the relational store."""

import logging
from contextlib import contextmanager
from typing import Any, Iterator, Mapping, Optional
from sqlalchemy.engine import Engine, Result
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.sql import Executable

from docver.application.services.exceptions import StoreError


class StoreScope:
    """A connection borrowed from the pool for one repository call.

    Statements run strictly in order inside the scope's transaction. Once the
    owning ``StoreGateway.scope`` block exits the scope is released and any
    further statement raises ``StoreError``.
    """

    def __init__(self, session: Session):
        self._session = session
        self._released = False

    @property
    def released(self) -> bool:
        return self._released

    def execute(
        self, statement: Executable, params: Optional[Mapping[str, Any]] = None
    ) -> Result:
        """Execute a parameterized statement and return its result rows."""
        if self._released:
            raise StoreError("Store connection already released")
        return self._session.execute(statement, params)

    def insert(
        self, statement: Executable, params: Optional[Mapping[str, Any]] = None
    ) -> int:
        """Execute an INSERT and return the generated primary key."""
        result = self.execute(statement, params)
        return result.inserted_primary_key[0]

    def release(self) -> None:
        self._released = True


class StoreGateway:
    """Hands out transactional ``StoreScope`` objects over a shared engine.

    The engine (and its pool) outlives the gateway; the gateway never disposes it.
    """

    def __init__(self, engine: Engine):
        """Initialize the gateway.

        Args:
            engine: Process-lifetime engine providing pooled connections
        """
        self.engine = engine
        self._session_factory = sessionmaker(bind=engine, expire_on_commit=False)
        self.logger = logging.getLogger(__name__)

    @contextmanager
    def scope(self, failure_message: str) -> Iterator[StoreScope]:
        """Open a scope whose statements commit together or not at all.

        Any exception raised inside the block rolls the transaction back.
        Driver errors are logged with their traceback and re-raised as
        ``StoreError(failure_message)``; every other exception propagates
        unchanged. The connection goes back to the pool on every exit path.

        Args:
            failure_message: Caller-facing message used if a statement fails
        """
        session = self._session_factory()
        store_scope = StoreScope(session)
        try:
            with session.begin():
                yield store_scope
        except SQLAlchemyError as exc:
            self.logger.exception(f"{failure_message}: {exc}")
            raise StoreError(failure_message) from exc
        finally:
            store_scope.release()
            session.close()
