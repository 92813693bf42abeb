"""
Unit tests for CLI database commands.
"""

import pytest
from click.testing import CliRunner

from backend.chirpy.cli.main import cli
from backend.chirpy.core.data.database import ChirpyDatabase


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "cli.db"


@pytest.fixture
def config_path(tmp_path, db_path, monkeypatch):
    monkeypatch.delenv("DB_URL", raising=False)
    path = tmp_path / "config.toml"
    path.write_text(f'[database]\nurl = "sqlite:///{db_path.as_posix()}"\n')
    return path


class TestDbCommands:
    """Test db init and stats."""

    def test_init_creates_database(self, config_path, db_path):
        runner = CliRunner()

        result = runner.invoke(cli, ["--config", str(config_path), "db", "init"])

        assert result.exit_code == 0
        assert "Database ready" in result.output
        assert db_path.exists()

    def test_stats(self, config_path, db_path):
        database = ChirpyDatabase(db_path)
        user = database.create_user("gus@lospolloshermanos.com")
        database.create_chirp("chicken", user.id)
        runner = CliRunner()

        result = runner.invoke(cli, ["--config", str(config_path), "stats"])

        assert result.exit_code == 0
        assert "Users" in result.output
        assert "Chirps" in result.output

    def test_unsupported_database_url(self, tmp_path, monkeypatch):
        monkeypatch.setenv("DB_URL", "postgres://localhost/chirpy")
        path = tmp_path / "config.toml"
        path.write_text("[database]\n")
        runner = CliRunner()

        result = runner.invoke(cli, ["--config", str(path), "db", "init"])

        assert result.exit_code != 0
        assert "Unsupported database scheme" in result.output
