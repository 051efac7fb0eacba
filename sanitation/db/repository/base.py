import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from sanitation.errors import BackendError, ConflictError

logger = logging.getLogger(__name__)

PG_UNIQUE_VIOLATION = "23505"


def is_unique_violation(exc: IntegrityError) -> bool:
    orig = getattr(exc, "orig", None)
    if getattr(orig, "pgcode", None) == PG_UNIQUE_VIOLATION:
        return True
    text = str(orig if orig is not None else exc).lower()
    return "unique constraint" in text or "duplicate key" in text


def flush_or_raise(db: Session, conflict: type[ConflictError] = ConflictError) -> None:
    """Flush pending writes, turning backend failures into tagged errors.

    A unique violation becomes ``conflict``; anything else the backend rejects
    becomes a ``BackendError`` carrying the backend message.
    """
    try:
        db.flush()
    except IntegrityError as exc:
        if is_unique_violation(exc):
            logger.warning("unique violation conflict=%s", conflict.error_code)
            raise conflict() from exc
        logger.warning("integrity error: %s", exc.orig)
        raise BackendError(str(exc.orig)) from exc
    except SQLAlchemyError as exc:
        logger.exception("backend write failed")
        raise BackendError(str(getattr(exc, "orig", None) or exc)) from exc
