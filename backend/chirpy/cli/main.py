"""
``chirpy`` command group.

Subcommands: ``serve``, ``db init``, ``db stats`` (also ``stats``) and ``info``.
"""

import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Optional

import rich_click as click
from dotenv import load_dotenv
from rich.table import Table

from backend.chirpy.cli.utils import get_console

__version__ = "0.1.0"

PROJECT_ROOT = Path(__file__).resolve().parents[3]


def load_env_file() -> Optional[Path]:
    """Load DB_URL/PLATFORM from the first .env found; the process environment wins."""
    for env_path in (Path.cwd() / 'config' / '.env', Path.cwd() / '.env', PROJECT_ROOT / 'config' / '.env'):
        if env_path.is_file():
            load_dotenv(env_path, override=False)
            return env_path.resolve()
    return None


ENV_FILE = load_env_file()

click.rich_click.COMMAND_GROUPS = {
    "chirpy": [
        {"name": "Server", "commands": ["serve"]},
        {"name": "Database", "commands": ["db", "stats"]},
        {"name": "About", "commands": ["info"]},
    ]
}


@click.group()
@click.option('--config', type=click.Path(exists=True), help='Settings file (default: config/config.toml)')
@click.option('--verbose', is_flag=True, help='Print tracebacks on failure')
@click.version_option(version=__version__, prog_name='chirpy')
@click.pass_context
def cli(ctx, config, verbose):
    """Chirpy - short posts, a static fileserver and its hit counter."""
    ctx.ensure_object(dict)
    ctx.obj['config'] = config
    ctx.obj['verbose'] = verbose


def _installed(package: str) -> str:
    try:
        return version(package)
    except PackageNotFoundError:
        return "[dim]-[/dim]"


@cli.command()
def info():
    """ℹ️  Versions of chirpy and the libraries serving it."""
    table = Table(title="chirpy", show_header=False, box=None, padding=(0, 2))
    table.add_column(style="bold cyan", no_wrap=True)
    table.add_column(style="green")

    table.add_row("chirpy", __version__)
    table.add_row("python", sys.version.split()[0])
    for package in ("fastapi", "pydantic", "uvicorn"):
        table.add_row(package, _installed(package))
    table.add_row(".env", str(ENV_FILE) if ENV_FILE else "[dim]none[/dim]")

    get_console().print(table)


from backend.chirpy.cli import serve, db

cli.add_command(serve.serve)
cli.add_command(db.db)
cli.add_command(db.stats, name='stats')


if __name__ == '__main__':
    cli()
