# /tests/conftest.py

import io

import pytest
from fastapi.testclient import TestClient
from PIL import Image
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.config import Settings, get_settings
from app.db import base  # noqa: F401  registers every model on Base.metadata
from app.db.base_class import Base
from app.db.database import get_db
from app.main import app
from app.services.database_service import DatabaseService


@pytest.fixture
def db_session():
    """
    A fresh in-memory SQLite database for EACH test. StaticPool keeps the single
    connection alive so the TestClient's worker threads see the same data.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    yield session
    session.close()
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_service(db_session):
    return DatabaseService(db_session=db_session)


@pytest.fixture
def test_settings(tmp_path):
    """Settings with uploads redirected to a temporary directory."""
    return Settings(UPLOAD_DIR=str(tmp_path / "uploads"), DEFAULT_PAGE_SIZE=10, MAX_PAGE_SIZE=100)


@pytest.fixture
def client(db_session, test_settings):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: test_settings
    # No `with` block: the startup hook (which creates the real database file) is skipped.
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def png_bytes():
    buffer = io.BytesIO()
    Image.new("RGB", (4, 4), color=(200, 30, 30)).save(buffer, format="PNG")
    return buffer.getvalue()


# --- Seed helpers (through the API, the way a client would build data) ---

@pytest.fixture
def subject(client):
    response = client.post("/api/subjects", json={"name": "Mathematics", "teacherName": "A. Karimov"})
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def group(client, subject):
    response = client.post("/api/groups", json={"name": "Math-1", "teacherName": "A. Karimov", "subject": subject["id"]})
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def make_student(client, group):
    def _make(first_name="Ali", last_name="Valiyev", group_id=None):
        response = client.post(
            "/api/students",
            data={
                "firstName": first_name,
                "lastName": last_name,
                "school": "School 21",
                "grade": "9",
                "group": group_id or group["id"],
            },
        )
        assert response.status_code == 201, response.text
        return response.json()
    return _make
