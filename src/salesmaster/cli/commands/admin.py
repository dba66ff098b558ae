"""Administrator commands: import, view and analyze accounts."""

import click

from salesmaster.cli.error_handling import handle_domain_error
from salesmaster.clients.gemini import GeminiClient
from salesmaster.domain.account_import import AccountImportService, ImportDraft
from salesmaster.domain.column_mapping import parse_override
from salesmaster.domain.drafting import DraftingService
from salesmaster.domain.entities import Field
from salesmaster.domain.errors import SyncError, ValidationError
from salesmaster.domain.overview import AdminOverviewService, display_columns

FIELD_NAMES = [f.value for f in Field]


@click.group("admin")
@click.option(
    "--password",
    prompt=True,
    hide_input=True,
    envvar="SALESMASTER_PASSWORD",
    help="Administrator password",
)
@click.pass_context
def admin_group(ctx, password: str):
    """Administrator tools (shared password required)."""
    try:
        ctx.obj["session"] = ctx.obj["sessions"].login_admin(password)
    except ValidationError as e:
        handle_domain_error(ctx, e)


def _echo_mapping(draft: ImportDraft) -> None:
    click.echo(f"\nColumns in {draft.file_name}:")
    click.echo("-" * 60)
    click.echo(f"{'#':<4} {'Header':<30} {'Field':<10}")
    click.echo("-" * 60)
    for index, header in enumerate(draft.header):
        click.echo(f"{index:<4} {header[:30]:<30} {draft.mapping.field_for(index).value:<10}")

    preview = draft.preview()
    if preview:
        click.echo(f"\nFirst {len(preview)} row(s):")
        for row in preview:
            click.echo("  " + " | ".join(cell[:20] for cell in row))


@admin_group.command("import")
@click.argument("csv_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--map",
    "overrides",
    multiple=True,
    metavar="COLUMN=FIELD",
    help=f"Override a column mapping (COLUMN is a 0-based index or header). Fields: {', '.join(FIELD_NAMES)}",
)
@click.option("--interactive", "-i", is_flag=True, help="Review the field of every column")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def import_accounts(ctx, csv_file: str, overrides: tuple[str, ...], interactive: bool, yes: bool):
    """Replace all stored accounts with the contents of CSV_FILE."""
    service = AccountImportService(ctx.obj["store"], ctx.obj["settings"].collection)

    try:
        draft = service.load_file(csv_file)
        for entry in overrides:
            column, field_name = parse_override(entry)
            service.override(draft, column, field_name)
    except (ValidationError, FileNotFoundError) as e:
        handle_domain_error(ctx, e)

    if interactive:
        for index, header in enumerate(draft.header):
            choice = click.prompt(
                f"Field for column {index} '{header}'",
                type=click.Choice(FIELD_NAMES, case_sensitive=False),
                default=draft.mapping.field_for(index).value,
            )
            service.override(draft, index, choice)

    _echo_mapping(draft)

    if not yes:
        click.confirm("\nReplace all stored accounts with this file?", abort=True)

    click.echo("Replacing stored accounts...")
    try:
        result = service.commit(
            ctx.obj["session"],
            draft,
            progress=lambda inserted: click.echo(f"  Uploading: {inserted}..."),
        )
    except SyncError as e:
        click.echo(f"Error: {e}", err=True)
        if e.inserted:
            click.echo(f"  {e.inserted} accounts were stored before the failure.", err=True)
        click.echo("Fix the problem and run the import again.", err=True)
        ctx.exit(1)

    click.echo("\nImport complete:")
    click.echo(f"  Deleted: {result.deleted} previous accounts")
    click.echo(f"  Inserted: {result.inserted} accounts")


@admin_group.command("view")
@click.option("--limit", type=int, default=50, show_default=True, help="Accounts to show")
@click.pass_context
def view_accounts(ctx, limit: int):
    """Show the total count and the first stored accounts."""
    service = AdminOverviewService(ctx.obj["store"], ctx.obj["settings"].collection)
    session = ctx.obj["session"]

    total = service.count(session)
    click.echo(f"Total: {total}")
    records = service.preview(session, limit=limit)
    if not records:
        click.echo("No accounts found.")
        return

    columns = display_columns(records)
    click.echo("-" * (18 * len(columns)))
    click.echo(" ".join(f"{name:<17}" for name in columns))
    click.echo("-" * (18 * len(columns)))
    for record in records:
        click.echo(" ".join(f"{(record.get(Field(name)) or '')[:17]:<17}" for name in columns))


@admin_group.command("analyze")
@click.pass_context
def analyze_accounts(ctx):
    """Ask the AI for a short executive report on stored accounts."""
    settings = ctx.obj["settings"]
    overview = AdminOverviewService(ctx.obj["store"], settings.collection)
    drafting = DraftingService(
        GeminiClient(settings.gemini_api_key, model=settings.gemini_model, timeout=settings.http_timeout)
    )

    try:
        report = drafting.analyze_accounts(overview.preview(ctx.obj["session"]))
    except ValidationError as e:
        handle_domain_error(ctx, e)

    click.echo(report)


def register_commands(cli):
    """Register admin commands with main CLI."""
    cli.add_command(admin_group)
