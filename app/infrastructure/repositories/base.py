"""Shared persistence helpers for the SQLAlchemy repositories."""

from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.infrastructure.database import Base


class SqlAlchemyRepository:
    """Hold the session and decide who owns the commit.

    With ``auto_commit`` enabled every write is committed immediately. When it is
    disabled writes are only flushed so an enclosing
    :func:`app.infrastructure.database.transaction` can commit or roll back
    several repository calls together.
    """

    def __init__(self, session: Session, *, auto_commit: bool = True) -> None:
        self.session = session
        self.auto_commit = auto_commit

    def _save(self, model: Base) -> None:
        self.session.add(model)
        self._flush()
        self.session.refresh(model)

    def _remove(self, model: Base) -> None:
        self.session.delete(model)
        self._flush()

    def _flush(self) -> None:
        try:
            self.session.flush()
            if self.auto_commit:
                self.session.commit()
        except SQLAlchemyError:
            if self.auto_commit:
                self.session.rollback()
            raise


__all__ = ["SqlAlchemyRepository"]
