import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from team_service.db.engine import build_engine, build_sessionmaker
from team_service.db.models import Base
from team_service.db.session import get_db
from team_service.main import create_app


# ------------------------
# In-memory SQLite shared by every session of one test
# ------------------------
@pytest.fixture
def engine():
    eng = build_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return build_sessionmaker(engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


# ------------------------
# FastAPI app wired to the test database
# ------------------------
@pytest.fixture
def app(session_factory):
    fastapi_app = create_app(use_lifespan=False)

    def _get_test_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    fastapi_app.dependency_overrides[get_db] = _get_test_db
    return fastapi_app


@pytest.fixture
def client(app):
    return TestClient(app)
