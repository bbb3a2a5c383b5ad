import pytest
from fakes import RULES_PATH
from fastapi.testclient import TestClient

from storefront.api.deps import Settings, get_settings, init_storage
from storefront.api.main import app


# --- Fixtures ---
@pytest.fixture
def api_settings(tmp_path, monkeypatch):
    monkeypatch.delenv("STOREFRONT_ADMIN_PASSWORD", raising=False)
    settings = Settings(data_dir=tmp_path / "data", rules_path=RULES_PATH)
    init_storage(settings)

    app.dependency_overrides[get_settings] = lambda: settings
    yield settings
    app.dependency_overrides.clear()


@pytest.fixture
def client(api_settings):
    return TestClient(app)


@pytest.fixture
def admin_headers(client):
    resp = client.post("/api/auth/login", json={"username": "admin", "password": "admin"})
    assert resp.status_code == 200
    return {"Authorization": f"Bearer {resp.json()['accessToken']}"}


@pytest.fixture
def staff_headers(client, admin_headers):
    resp = client.post(
        "/api/users",
        json={"username": "clerk", "password": "clerk-pw", "role": "staff", "permissions": ["orders"]},
        headers=admin_headers,
    )
    assert resp.status_code == 201
    resp = client.post("/api/auth/login", json={"username": "clerk", "password": "clerk-pw"})
    return {"Authorization": f"Bearer {resp.json()['accessToken']}"}
