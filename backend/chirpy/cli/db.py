"""
Database commands for the Chirpy CLI.

Example:
    $ chirpy db init
    $ chirpy db stats
"""

import rich_click as click
from rich.table import Table

from backend.chirpy.cli.utils import (
    get_console,
    get_database,
    get_database_url,
    load_config,
    print_error,
    print_success,
)
from backend.chirpy.core.exceptions import PersistenceError


@click.group()
def db():
    """💾 Database operations."""
    pass


@db.command()
@click.pass_context
def init(ctx):
    """🛠️  Create the database and its tables."""
    config = load_config(ctx.obj.get('config'))
    try:
        database = get_database(config)
    except (PersistenceError, ValueError) as e:
        print_error(f"Failed to initialize database: {e}")
        raise click.Abort()
    print_success(f"Database ready at {database.db_path}")


@db.command()
@click.pass_context
def stats(ctx):
    """📊 Show user and chirp counts."""
    console = get_console()
    config = load_config(ctx.obj.get('config'))

    try:
        database = get_database(config)
        users = database.count_users()
        chirps = database.count_chirps()
    except (PersistenceError, ValueError) as e:
        print_error(f"Failed to read database: {e}")
        raise click.Abort()

    table = Table(title="[bold cyan]Chirpy Database[/bold cyan]", show_header=True)
    table.add_column("Metric", style="bold cyan")
    table.add_column("Value", style="green", justify="right")
    table.add_row("Database", get_database_url(config))
    table.add_row("Users", f"{users:,}")
    table.add_row("Chirps", f"{chirps:,}")

    console.print()
    console.print(table)
    console.print()
