import json
import os

os.environ.setdefault("DATABASE_URL", "sqlite:///./test_portfolio.db")
os.environ.setdefault("JWT_SECRET", "test-signing-secret")
os.environ.setdefault("ENVIRONMENT", "test")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from portfolio.database import Base, get_db
from portfolio.main import app
from portfolio.services import auth_service
from portfolio.services.cache_service import response_cache
from portfolio.services.image_storage import StoredImage, get_image_storage
from portfolio.utils.errors import StorageError

TEST_DB_URL = os.environ["DATABASE_URL"]

engine = create_engine(TEST_DB_URL, connect_args={"check_same_thread": False})
TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "secret123"


def override_get_db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


class FakeImageStorage:
    """Records uploads and deletes instead of calling the hosted image service."""

    def __init__(self):
        self.uploaded = []
        self.deleted = []
        self.fail_upload_on = None
        self.fail_delete = False

    def upload(self, image, folder="projects"):
        if image.filename == self.fail_upload_on:
            raise StorageError(f"upload of {image.filename} failed")
        storage_id = f"portfolio/{folder}/{image.filename.rsplit('.', 1)[0]}-{len(self.uploaded)}"
        self.uploaded.append(storage_id)
        return StoredImage(url=f"https://images.example.com/{storage_id}.png", storage_id=storage_id)

    def delete(self, storage_id):
        self.deleted.append(storage_id)
        if self.fail_delete:
            raise StorageError(f"delete of {storage_id} failed")


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.create_all(bind=engine)
    response_cache.clear()
    yield
    Base.metadata.drop_all(bind=engine)
    response_cache.clear()


@pytest.fixture
def db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def image_storage():
    storage = FakeImageStorage()
    app.dependency_overrides[get_image_storage] = lambda: storage
    yield storage
    app.dependency_overrides.pop(get_image_storage, None)


@pytest.fixture
def admin_user(db):
    return auth_service.create_admin(db, ADMIN_EMAIL, ADMIN_PASSWORD)


@pytest.fixture
def admin_client(client, admin_user):
    resp = client.post("/api/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert resp.status_code == 200, resp.text
    return client


@pytest.fixture
def project_form():
    def build(**overrides):
        form = {
            "title": "My Project",
            "description": "<p>A portfolio project</p>",
            "features": json.dumps(["Responsive layout", "Admin panel"]),
            "shortDescription": "A short description",
            "category": "Web Application",
            "framework": "FastAPI",
            "duration": "2 weeks",
            "createdDate": "2024-05-01",
            "responsive": "true",
            "browserCompatible": "true",
            "documentation": "false",
            "tags": json.dumps(["python", "fastapi"]),
            "liveUrl": "https://example.com",
            "featured": "false",
            "order": "0",
        }
        form.update(overrides)
        return form

    return build


def png(name: str):
    return (name, b"\x89PNG\r\n\x1a\n" + name.encode(), "image/png")


@pytest.fixture
def png_file():
    return png
