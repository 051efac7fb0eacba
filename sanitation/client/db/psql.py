import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from sanitation.db.session import SessionLocal
from sanitation.errors import BackendError

logger = logging.getLogger(__name__)


@contextmanager
def session_scope() -> Iterator[Session]:
    """One transaction per domain operation.

    Commits when the block finishes. Any failure rolls back; a raw SQLAlchemy
    error that got past the repository is re-raised as ``BackendError`` with the
    backend message, tagged failures pass through as they are.
    """
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("transaction rolled back")
        raise BackendError(str(getattr(exc, "orig", None) or exc)) from exc
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
