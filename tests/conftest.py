"""Shared fixtures for the file store tests."""

import os
import tempfile

# Keep the default database out of the source tree
os.environ.setdefault("DATA_DIR", tempfile.mkdtemp(prefix="drive-tests-"))

import pytest  # noqa: E402
from fastapi import FastAPI  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

import orm  # noqa: E402,F401
from database import Base, create_db_engine  # noqa: E402
from api.files.controllers.files_controller import router as files_router  # noqa: E402
from api.files.repositories.files_repository import (  # noqa: E402
    FilesRepository,
    get_files_repository,
)


@pytest.fixture
def engine():
    """In-memory SQLite engine with the schema created.

    Yields:
        Engine shared by every session of the test.
    """
    engine = create_db_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def repo(session_factory):
    """Repository bound to the in-memory database."""
    return FilesRepository(session_factory)


@pytest.fixture
def broken_repo():
    """Repository whose database has no tables, so every query fails."""
    engine = create_db_engine("sqlite://", poolclass=StaticPool)
    yield FilesRepository(sessionmaker(bind=engine))
    engine.dispose()


@pytest.fixture
def untouchable_repo():
    """Repository that fails the test if it ever opens a session."""

    def _session_factory():
        pytest.fail("the store must not be touched")

    return FilesRepository(_session_factory)


def _client_for(repository):
    app = FastAPI()
    app.include_router(files_router)
    app.dependency_overrides[get_files_repository] = lambda: repository
    return TestClient(app)


@pytest.fixture
def client(repo):
    """Test client for the /file routes backed by ``repo``."""
    return _client_for(repo)


@pytest.fixture
def broken_client(broken_repo):
    return _client_for(broken_repo)
