import logging
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from cafechronicles.services.stamp_errors import StoreUnavailable

logger = logging.getLogger(__name__)


@contextmanager
def store_guard(db: Session, action: str):
    """Roll back and raise StoreUnavailable on any database error inside the block."""
    try:
        yield
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Database error while %s", action)
        raise StoreUnavailable("Database temporarily unavailable. Please try again in a few seconds.") from exc
