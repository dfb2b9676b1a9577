"""HTTP server command."""

import click
import uvicorn

from careconnect.api.app import create_app
from careconnect.config import get_settings
from careconnect.logging_setup import configure_logging


@click.command("serve")
@click.option("--host", default=None, help="Interface to bind (default from CARECONNECT_HOST)")
@click.option("--port", type=int, default=None, help="Port to listen on (default from CARECONNECT_PORT)")
@click.pass_context
def serve(ctx, host: str | None, port: int | None):
    """Serve the HTTP API."""
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_format)

    app = create_app(db=ctx.obj["db"], settings=settings)
    uvicorn.run(
        app,
        host=host or settings.host,
        port=port or settings.port,
        log_level=settings.log_level.lower(),
    )


def register_commands(cli):
    """Register serve command with main CLI."""
    cli.add_command(serve)
