from dotenv import load_dotenv
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from team_service.core.config import settings

# Load .env for local dev
load_dotenv()


def build_engine(url: str, **kwargs) -> Engine:
    """Creates an engine; pool and keepalive tuning only applies to Postgres."""
    connect_args = kwargs.pop("connect_args", {})
    options = {"echo": settings.SQL_ECHO, "future": True}

    if url.startswith("postgresql"):
        connect_args = {
            "keepalives": 1,
            "keepalives_idle": 30,     # seconds before starting keepalives
            "keepalives_interval": 10, # seconds between keepalives
            "keepalives_count": 5,     # number of failed keepalives before drop
            **connect_args,
        }
        options.update(
            pool_pre_ping=True,     # automatically tests and replaces stale conns
            pool_recycle=300,
            pool_size=10,
            max_overflow=10,
            pool_timeout=10,
        )
    elif url.startswith("sqlite"):
        # FastAPI runs sync routes in a threadpool
        connect_args = {"check_same_thread": False, **connect_args}

    options.update(kwargs)
    eng = create_engine(url, connect_args=connect_args, **options)

    if url.startswith("sqlite"):
        # SQLite ignores ON DELETE rules unless asked per connection
        @event.listens_for(eng, "connect")
        def _sqlite_fk_pragma(dbapi_conn, _record):
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return eng


def build_sessionmaker(bind: Engine) -> sessionmaker:
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=bind,
        expire_on_commit=False,
        future=True,
    )


engine = build_engine(settings.database_url)

SessionLocal = build_sessionmaker(engine)
