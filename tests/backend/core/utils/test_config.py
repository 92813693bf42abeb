"""Tests for the chirpy settings reader."""
import pytest

from backend.chirpy.core.utils.config import ChirpyConfig, find_config_file


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    monkeypatch.delenv("DB_URL", raising=False)
    monkeypatch.delenv("PLATFORM", raising=False)
    path = tmp_path / "config.toml"
    path.write_text("""
[app]
platform = "production"

[database]
url = "sqlite:///data/test.db"

[api]
port = 9090

[api.cors]
allowed_origins = ["http://localhost:5173"]
""")
    return path


class TestChirpyConfig:

    def test_dotted_keys(self, config_file):
        config = ChirpyConfig(config_file)

        assert config.get("database.url") == "sqlite:///data/test.db"
        assert config.get("api.port") == 9090
        assert config.get("api.cors.allowed_origins") == ["http://localhost:5173"]

    def test_missing_key_uses_caller_default_then_builtin(self, config_file):
        config = ChirpyConfig(config_file)

        assert config.get("api.host", "127.0.0.1") == "127.0.0.1"
        assert config.get("api.host") == "0.0.0.0"
        assert config.get("app.static_prefix") == "/app"
        assert config.get("nope.deeper.still") is None

    def test_file_values_without_environment(self, config_file):
        config = ChirpyConfig(config_file)

        assert config.db_url == "sqlite:///data/test.db"
        assert config.platform == "production"

    def test_db_url_and_platform_from_environment(self, config_file, monkeypatch):
        monkeypatch.setenv("DB_URL", "sqlite:///elsewhere.db")
        monkeypatch.setenv("PLATFORM", "dev")
        config = ChirpyConfig(config_file)

        assert config.db_url == "sqlite:///elsewhere.db"
        assert config.platform == "dev"
        assert config.get("database.url") == "sqlite:///elsewhere.db"

    def test_empty_environment_value_is_ignored(self, config_file, monkeypatch):
        monkeypatch.setenv("PLATFORM", "")

        assert ChirpyConfig(config_file).platform == "production"

    def test_other_keys_ignore_environment(self, config_file, monkeypatch):
        monkeypatch.setenv("PORT", "1234")

        assert ChirpyConfig(config_file).get("api.port") == 9090

    def test_platform_defaults_to_production(self, tmp_path, monkeypatch):
        monkeypatch.delenv("PLATFORM", raising=False)
        path = tmp_path / "bare.toml"
        path.write_text("[api]\nport = 8080\n")

        assert ChirpyConfig(path).platform == "production"

    def test_missing_file(self):
        with pytest.raises(FileNotFoundError):
            ChirpyConfig("/nonexistent/config.toml")

    def test_invalid_toml(self, tmp_path):
        path = tmp_path / "broken.toml"
        path.write_text("[api\nport = ")

        with pytest.raises(ValueError, match="Invalid TOML"):
            ChirpyConfig(path)

    def test_repository_config_is_found(self):
        assert find_config_file().name == "config.toml"
        assert ChirpyConfig().get("app.static_prefix") == "/app"
