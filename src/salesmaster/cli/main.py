"""Main CLI entry point."""

import logging

import click

from salesmaster.cli.error_handling import handle_fatal_error
from salesmaster.clients.identity import AnonymousIdentityProvider
from salesmaster.config import load_settings
from salesmaster.database.factories import create_sqlite_store, create_store
from salesmaster.domain.errors import FatalError
from salesmaster.domain.session import SessionService

# Import and register all commands at module level
from salesmaster.cli.commands import admin, vendor


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to the store file (overrides SALESMASTER_DB_PATH environment variable)",
    envvar="SALESMASTER_DB_PATH",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    envvar="SALESMASTER_LOG_LEVEL",
    help="Logging verbosity",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str):
    """SalesMaster - Collections tracking for sales teams.

    Administrators import account spreadsheets into a shared store; vendors
    see the accounts assigned to them and message clients on WhatsApp.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(
        level=log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    # Open the store and sign in only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is None:
        return

    try:
        settings = load_settings(database_path=db_path)
        if settings.database_url:
            store = create_store(settings.database_url)
        else:
            store = create_sqlite_store(database_path=settings.database_path)
        store.connect()
        store.initialize_schema()
        identity = AnonymousIdentityProvider(enabled=settings.anonymous_auth)
        identity.sign_in_anonymously()
    except FatalError as e:
        handle_fatal_error(ctx, e)

    ctx.obj["settings"] = settings
    ctx.obj["store"] = store
    ctx.obj["identity"] = identity
    ctx.obj["sessions"] = SessionService(identity, settings.admin_passwords)
    ctx.call_on_close(store.disconnect)


# Register all commands
admin.register_commands(cli)
vendor.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
