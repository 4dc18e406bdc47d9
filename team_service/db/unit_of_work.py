# team_service/db/unit_of_work.py
from __future__ import annotations

import enum
from contextlib import contextmanager
from typing import Iterator

from loguru import logger
from sqlalchemy.exc import OperationalError, ProgrammingError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from team_service.core.errors import StoreUnavailableError


class SaveResult(enum.Enum):
    OK = "ok"
    CONFLICT = "conflict"


def save_changes(db: Session) -> SaveResult:
    """
    Commits all pending changes atomically.
    A version mismatch (row updated or deleted by someone else) is rolled back and
    reported as CONFLICT; every other database error propagates.
    """
    try:
        db.commit()
    except StaleDataError as e:
        db.rollback()
        logger.warning("Concurrency conflict on save: {}", e)
        return SaveResult.CONFLICT
    except Exception:
        db.rollback()
        raise
    return SaveResult.OK


@contextmanager
def store_guard(record_set: str) -> Iterator[None]:
    """Turns 'table missing' / 'database gone' into StoreUnavailableError."""
    try:
        yield
    except (OperationalError, ProgrammingError) as e:
        logger.error("Record set '{}' is unavailable: {}", record_set, e.orig)
        raise StoreUnavailableError(f"Entity set '{record_set}' is unavailable.") from e
