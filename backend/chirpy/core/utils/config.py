"""Chirpy settings.

Settings live in a TOML file (``config/config.toml``). The two deployment
knobs, ``DB_URL`` and ``PLATFORM``, may also come from the environment and
then win over the file.
"""
import os
from pathlib import Path
from typing import Any, Optional, Union

import toml

PROJECT_ROOT = Path(__file__).resolve().parents[4]

CONFIG_LOCATIONS = (
    Path("config") / "config.toml",
    PROJECT_ROOT / "config" / "config.toml",
)

# Dotted key -> environment variable overriding it
ENV_OVERRIDES = {
    "database.url": "DB_URL",
    "app.platform": "PLATFORM",
}

DEFAULTS = {
    "database.url": "sqlite:///data/chirpy.db",
    "app.platform": "production",
    "app.filepath_root": ".",
    "app.static_prefix": "/app",
    "api.host": "0.0.0.0",
    "api.port": 8080,
    "api.log_level": "info",
}


def find_config_file(config_path: Optional[Union[str, Path]] = None) -> Path:
    """Locate the settings file.

    Args:
        config_path: Explicit file; must exist when given.

    Raises:
        FileNotFoundError: If no settings file can be found.
    """
    if config_path:
        candidates = (Path(config_path),)
    else:
        candidates = CONFIG_LOCATIONS
    for candidate in candidates:
        if candidate.is_file():
            return candidate
    raise FileNotFoundError(
        f"No chirpy config file at {', '.join(str(c) for c in candidates)}"
    )


class ChirpyConfig:
    """Read-only view of the chirpy settings file plus environment overrides.

    Example:
        >>> config = ChirpyConfig("config/config.toml")
        >>> config.get("api.port")
        8080
        >>> config.platform
        'production'
    """

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        self.path = find_config_file(config_path)
        try:
            with open(self.path, encoding="utf-8") as f:
                self._data = toml.load(f)
        except toml.TomlDecodeError as e:
            raise ValueError(f"Invalid TOML in {self.path}: {e}")

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a dotted key such as ``"api.cors.allowed_origins"``.

        ``DB_URL``/``PLATFORM`` take precedence for their keys. A key missing
        from the file falls back to ``default``, then to the built-in default.
        """
        env_var = ENV_OVERRIDES.get(key)
        if env_var and os.environ.get(env_var):
            return os.environ[env_var]

        node = self._data
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return default if default is not None else DEFAULTS.get(key)
            node = node[part]
        return node

    @property
    def db_url(self) -> str:
        return self.get("database.url")

    @property
    def platform(self) -> str:
        return self.get("app.platform")
