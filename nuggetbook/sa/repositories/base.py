# nuggetbook/sa/repositories/base.py
from contextlib import contextmanager
from typing import Any, Dict, Iterable, Iterator
import logging
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from nuggetbook.errors import DataAccessError

logger = logging.getLogger(__name__)

def store_message(error: SQLAlchemyError) -> str:
    """The message reported by the store itself, without SQLAlchemy's wrapping"""
    orig = getattr(error, 'orig', None)
    return str(orig) if orig is not None else str(error)

@contextmanager
def store_errors(session: Session) -> Iterator[None]:
    """Roll back and surface any store failure as DataAccessError"""
    try:
        yield
    except SQLAlchemyError as e:
        session.rollback()
        logger.debug("Store rejected query: %s", e)
        raise DataAccessError(store_message(e)) from e

def check_fields(data: Dict[str, Any], allowed: Iterable[str], entity: str) -> None:
    unknown = sorted(set(data) - set(allowed))
    if unknown:
        raise ValueError(f"Unknown {entity} field(s): {', '.join(unknown)}")

def finish(session: Session, commit: bool) -> None:
    """Commit, or only flush when the caller owns the transaction"""
    if commit:
        session.commit()
    else:
        session.flush()

def check_not_null(data: Dict[str, Any], required: Iterable[str], entity: str) -> None:
    """Reject explicit None for columns the store declares NOT NULL"""
    nulls = sorted(field for field in required if field in data and data[field] is None)
    if nulls:
        raise ValueError(f"{entity.capitalize()} field(s) cannot be null: {', '.join(nulls)}")
