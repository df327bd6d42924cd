import pytest

from polegrid_api.configs import load_config
from WebAPI import create_app


@pytest.fixture
def cfg(tmp_path, monkeypatch):
    monkeypatch.setenv("STORAGE_DIR", str(tmp_path))
    for var in ("DB_PATH", "UPLOAD_DIR", "LANDLORD_REQUIRED_FIELDS",
                "ORGANIZATION_REQUIRED_FIELDS", "CONTACT_REQUIRED_FIELDS"):
        monkeypatch.delenv(var, raising=False)
    return load_config()


@pytest.fixture
def app(cfg):
    app = create_app(cfg)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
