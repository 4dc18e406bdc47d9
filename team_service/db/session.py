# team_service/db/session.py
from typing import Iterator

from loguru import logger
from sqlalchemy import inspect
from sqlalchemy.engine import Engine
from sqlalchemy.exc import OperationalError, SQLAlchemyError
from sqlalchemy.orm import Session

from team_service.db.engine import SessionLocal, engine
from team_service.db.models import Base

REQUIRED_TABLES = ("teams", "players")


def get_db() -> Iterator[Session]:
    db = SessionLocal()
    try:
        yield db
        # services commit through save_changes; drop whatever is left open
        if db.in_transaction():
            db.rollback()
    finally:
        try:
            db.close()
        except OperationalError:
            # underlying socket already dead; dispose pool to force fresh conns next time
            logger.warning("Session close failed on a dead connection, disposing pool")
            engine.dispose()


def init_store(bind: Engine, create_tables: bool = True) -> None:
    """
    Creates the schema (when asked) and checks once that both record sets exist.
    Raises RuntimeError so startup fails instead of every request.
    """
    try:
        if create_tables:
            Base.metadata.create_all(bind=bind)
        present = set(inspect(bind).get_table_names())
    except SQLAlchemyError as e:
        raise RuntimeError(f"Database is unreachable: {e}") from e

    missing = [t for t in REQUIRED_TABLES if t not in present]
    if missing:
        raise RuntimeError("Missing tables: " + ", ".join(missing))
    logger.info("Record store ready ({})", ", ".join(REQUIRED_TABLES))
