"""
CLI utility functions.

This module provides helper functions for console output, config loading and
database access.

Example:
    >>> from backend.chirpy.cli.utils import get_console, print_success
    >>> print_success("Database initialized")
"""

from pathlib import Path
from typing import Optional

import rich_click as click
from rich.console import Console

from backend.chirpy.core.utils.config import ChirpyConfig

_console: Optional[Console] = None


def get_console() -> Console:
    """
    Get the singleton Rich Console instance.

    Returns:
        Console: Rich Console instance for styled output
    """
    global _console
    if _console is None:
        _console = Console()
    return _console


def print_success(message: str) -> None:
    """Print a success message in green."""
    get_console().print(f"[bold green]✓[/bold green] {message}", style="green")


def print_error(message: str) -> None:
    """Print an error message in red."""
    get_console().print(f"[bold red]✗[/bold red] {message}", style="red")


def print_info(message: str) -> None:
    """Print an info message in blue."""
    get_console().print(f"[bold cyan]ℹ[/bold cyan] {message}", style="cyan")


def load_config(config_path: Optional[str] = None) -> ChirpyConfig:
    """
    Load configuration with error handling.

    Args:
        config_path: Optional path to config file (uses default search if not provided)

    Returns:
        ChirpyConfig: Loaded configuration manager

    Raises:
        click.ClickException: If config loading fails
    """
    try:
        if config_path:
            return ChirpyConfig(config_path=Path(config_path))
        return ChirpyConfig()
    except (FileNotFoundError, ValueError) as e:
        raise click.ClickException(f"Failed to load config: {e}")


def get_database_url(config: ChirpyConfig) -> str:
    """Get the database connection string, preferring the DB_URL environment variable."""
    return config.db_url


def get_database(config: ChirpyConfig):
    """
    Get ChirpyDatabase instance from config.

    Args:
        config: Configuration manager

    Returns:
        ChirpyDatabase: Database instance

    Example:
        >>> db = get_database(load_config())
        >>> db.count_chirps()
        0
    """
    from backend.chirpy.core.data.database import ChirpyDatabase

    return ChirpyDatabase(get_database_url(config))


def get_platform(config: ChirpyConfig) -> str:
    """Get the platform name, preferring the PLATFORM environment variable."""
    return config.platform
