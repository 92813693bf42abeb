"""
``chirpy serve``: run the API under uvicorn.

Command line options win over the ``[api]`` section of the config file.
"""

import rich_click as click
from rich.panel import Panel

from backend.chirpy.cli.utils import (
    get_console,
    get_platform,
    load_config,
    print_error,
    print_info,
)

APP_PATH = "backend.chirpy.api.main:app"


def server_settings(config, host=None, port=None, reload=False, workers=None, log_level=None) -> dict:
    """Merge command line overrides with ``[api]`` settings into uvicorn kwargs.

    Auto-reload runs a single worker.
    """
    reload = reload or config.get("api.reload", False)
    return {
        "host": host or config.get("api.host", "0.0.0.0"),
        "port": port or config.get("api.port", 8080),
        "reload": reload,
        "workers": 1 if reload else (workers or config.get("api.workers", 1)),
        "log_level": log_level or config.get("api.log_level", "info"),
    }


def startup_banner(settings: dict, platform: str) -> Panel:
    base_url = f"http://{settings['host']}:{settings['port']}"
    lines = [
        "[bold cyan]Chirpy[/bold cyan]",
        "",
        f"[bold]Fileserver:[/bold] {base_url}/app/",
        f"[bold]Metrics:[/bold]    {base_url}/admin/metrics",
        f"[bold]Docs:[/bold]       {base_url}/docs",
        "",
        f"platform={platform} workers={settings['workers']} "
        f"reload={'on' if settings['reload'] else 'off'} log={settings['log_level']}",
        "",
        "[yellow]Ctrl+C stops the server[/yellow]",
    ]
    return Panel("\n".join(lines), border_style="green")


@click.command()
@click.option('--host', help='Interface to listen on')
@click.option('--port', type=int, help='Port to listen on')
@click.option('--reload', is_flag=True, help='Restart on code changes (single worker)')
@click.option('--workers', type=int, help='Worker processes')
@click.option(
    '--log-level',
    type=click.Choice(['debug', 'info', 'warning', 'error']),
    help='Uvicorn and request log level',
)
@click.pass_context
def serve(ctx, host, port, reload, workers, log_level):
    """🚀 Serve the fileserver, admin pages and JSON API.

    Examples:
        chirpy serve

        chirpy serve --port 9000 --reload
    """
    config = load_config(ctx.obj.get('config'))
    settings = server_settings(config, host, port, reload, workers, log_level)
    get_console().print(startup_banner(settings, get_platform(config)))

    import uvicorn

    try:
        uvicorn.run(APP_PATH, **settings)
    except KeyboardInterrupt:
        print_info("Server stopped by user")
    except Exception as e:
        print_error(f"Failed to start server: {e}")
        if ctx.obj.get('verbose'):
            get_console().print_exception()
        raise click.Abort()
