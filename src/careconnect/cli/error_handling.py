"""CLI error handling helpers."""

import click
import structlog

from careconnect.domain.errors import DomainError, StorageError

logger = structlog.get_logger()


def handle_domain_error(ctx: click.Context, error: DomainError) -> None:
    """Print ``Error: <message>`` to stderr and exit with status 1.

    Storage failures print a generic message; the driver error goes to the log.
    """
    message = str(error)
    if isinstance(error, StorageError):
        logger.error("command_failed", command=ctx.command_path, error=message)
        message = "Storage failure"
    click.echo(f"Error: {message}", err=True)
    ctx.exit(1)
