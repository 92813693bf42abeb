"""
Pytest fixtures for Chirpy API tests.

Every test gets its own application built by ``create_app`` with an isolated
SQLite database, hit counter and static directory.
"""

import pytest
from fastapi.testclient import TestClient

from backend.chirpy.api.main import create_app
from backend.chirpy.api.services.metrics import HitCounter
from backend.chirpy.core.data.database import ChirpyDatabase
from backend.chirpy.core.utils.config import ChirpyConfig

CONFIG_TEMPLATE = """
[app]
platform = "{platform}"
filepath_root = "{static_dir}"
static_prefix = "/app"

[database]
url = "sqlite:///{db_path}"

[api]
log_level = "info"
"""


@pytest.fixture
def static_dir(tmp_path):
    """Directory served under /app with an index page and a logo."""
    directory = tmp_path / "static"
    directory.mkdir()
    (directory / "index.html").write_text("<html><body>Welcome to Chirpy</body></html>")
    (directory / "logo.txt").write_text("chirp chirp")
    return directory


@pytest.fixture
def gateway(tmp_path):
    """Fresh SQLite-backed gateway."""
    return ChirpyDatabase(tmp_path / "chirpy.db")


@pytest.fixture
def hit_counter():
    return HitCounter()


@pytest.fixture
def make_config(tmp_path, static_dir, monkeypatch):
    """
    Build a ChirpyConfig for a given platform.

    PLATFORM and DB_URL are removed from the environment so the TOML file
    is the only source of truth.
    """
    monkeypatch.delenv("PLATFORM", raising=False)
    monkeypatch.delenv("DB_URL", raising=False)

    def _make(platform: str = "production") -> ChirpyConfig:
        config_path = tmp_path / f"config-{platform}.toml"
        config_path.write_text(CONFIG_TEMPLATE.format(
            platform=platform,
            static_dir=static_dir.as_posix(),
            db_path=(tmp_path / "unused.db").as_posix(),
        ))
        return ChirpyConfig(config_path)

    return _make


@pytest.fixture
def make_client(make_config, gateway, hit_counter):
    """
    Factory creating a TestClient for an app on the given platform.

    Example:
        def test_reset(make_client):
            with make_client("dev") as client:
                client.post("/admin/reset")
    """
    def _make(platform: str = "production", app_gateway=None) -> TestClient:
        app = create_app(
            config=make_config(platform),
            gateway=app_gateway or gateway,
            counter=hit_counter,
        )
        return TestClient(app)

    return _make


@pytest.fixture
def client(make_client):
    """TestClient for a production app backed by the ``gateway`` fixture."""
    with make_client() as test_client:
        yield test_client


@pytest.fixture
def user(client):
    """A user created through the API."""
    response = client.post("/api/users", json={"email": "saul@bettercall.com"})
    assert response.status_code == 201
    return response.json()
