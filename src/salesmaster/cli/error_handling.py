"""CLI error handling helpers."""

import click

from salesmaster.domain.errors import DomainError, FatalError


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


def handle_fatal_error(ctx: click.Context, error: FatalError) -> None:
    """Render a blocking diagnostic with remediation text and exit."""
    click.echo(f"Error: {error}", err=True)
    if error.remediation:
        click.echo(f"How to fix: {error.remediation}", err=True)
    ctx.exit(1)
