"""
Test configuration and fixtures for the storefront API
"""

import os
import shutil
import tempfile

import pytest

# Settings are read once at import time, so the environment must be in place first
_TMP_ROOT = tempfile.mkdtemp(prefix="storefront-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP_ROOT, 'storefront.db')}"
os.environ["ADMIN_PASSWORD"] = "s3cret-admin"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["UPLOAD_DIR"] = os.path.join(_TMP_ROOT, "uploads")
os.environ["SETTINGS_REQUIRE_ADMIN"] = "1"
os.environ["LOG_LEVEL"] = "DEBUG"
os.environ.pop("ADMIN_PASSWORD_HASH", None)

from fastapi.testclient import TestClient  # noqa: E402

from app.main import app  # noqa: E402
from app.models.user import Base, SessionLocal, engine  # noqa: E402
from app.storage import DatabaseStorage  # noqa: E402
from app.utils.media import upload_root  # noqa: E402
from app.utils.translation import translation_memo  # noqa: E402

ADMIN_PASSWORD = "s3cret-admin"


@pytest.fixture(autouse=True)
def fresh_database():
    """Every test starts from empty tables"""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    translation_memo.clear()
    yield


@pytest.fixture
def upload_dir():
    """The configured upload directory, emptied before and after the test"""
    root = upload_root()
    shutil.rmtree(root, ignore_errors=True)
    root.mkdir(parents=True, exist_ok=True)
    yield root
    shutil.rmtree(root, ignore_errors=True)
    root.mkdir(parents=True, exist_ok=True)


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def admin_client():
    """Client holding a live admin session cookie"""
    c = TestClient(app)
    resp = c.post("/api/admin/login", json={"password": ADMIN_PASSWORD})
    assert resp.status_code == 200, resp.text
    return c


@pytest.fixture
def storage():
    db = SessionLocal()
    try:
        yield DatabaseStorage(db)
    finally:
        db.close()
