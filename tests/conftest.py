import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from api_main import app
from habitdesk.api.deps import get_db
from habitdesk.crud import create_habit, create_workspace
from habitdesk.models import Base
from habitdesk.schemas import HabitIn

OWNER = "owner-a"
OTHER = "owner-b"


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, future=True)


@pytest.fixture
def db(session_factory):
    with session_factory() as session:
        yield session


@pytest.fixture
def workspace(db):
    return create_workspace(db, OWNER, "Growth")


@pytest.fixture
def other_workspace(db):
    return create_workspace(db, OTHER, "Rival HQ")


@pytest.fixture
def make_habit(db, workspace):
    def _make(title="Review KPIs", frequency="Daily", target_count=1, is_active=True, owner_id=OWNER, workspace_id=None, **extra):
        data = HabitIn(
            title=title,
            frequency=frequency,
            target_count=target_count,
            is_active=is_active,
            workspace_id=workspace_id or workspace.id,
            **extra,
        )
        return create_habit(db, owner_id, data)

    return _make


@pytest.fixture
def client(session_factory):
    def _get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
