"""Main CLI entry point."""

import click
from careconnect.database.factories import create_sqlite_database
from careconnect.logging_setup import configure_logging

# Import and register all commands at module level
from careconnect.cli.commands import (
    account,
    donation,
    serve,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides CARECONNECT_DB_PATH environment variable)",
    envvar="CARECONNECT_DB_PATH",
)
@click.pass_context
def cli(ctx, db_path: str | None):
    """CareConnect - Medicine donation tracking.

    Register donor accounts, record medicine donations and list what is
    available. Deleting an account keeps its donations as anonymous entries.
    """
    ctx.ensure_object(dict)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        # serve reconfigures with the settings' level
        configure_logging("WARNING", "text")
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
account.register_commands(cli)
donation.register_commands(cli)
serve.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
