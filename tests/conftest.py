import pytest
from fastapi.testclient import TestClient

from config.settings import settings
from storage.json_store import get_json_store


@pytest.fixture(autouse=True)
def tmp_dirs(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setattr(settings, "UPLOAD_DIR", str(tmp_path / "uploads"))
    monkeypatch.setattr(settings, "PASSWORD_PEPPER", "")
    return tmp_path


@pytest.fixture
def store():
    return get_json_store()


@pytest.fixture
def client():
    from app.api_service import app
    return TestClient(app)
