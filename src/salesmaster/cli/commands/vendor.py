"""Vendor commands: see assigned accounts and message clients."""

import time

import click

from salesmaster.cli.error_handling import handle_domain_error
from salesmaster.clients.gemini import GeminiClient
from salesmaster.domain.drafting import DraftingService
from salesmaster.domain.entities import AccountRecord, Field
from salesmaster.domain.errors import (
    MissingDataError,
    NotFoundError,
    ValidationError,
    record_position_not_found,
)
from salesmaster.domain.messaging import DEFAULT_TEMPLATE, DEFAULT_VIDEO_LINK, message_link, render_template
from salesmaster.domain.vendor_view import VendorViewPipeline


@click.group("vendor")
@click.argument("name")
@click.pass_context
def vendor_group(ctx, name: str):
    """Tools for the vendor NAME (matches part of the assigned vendor)."""
    try:
        ctx.obj["session"] = ctx.obj["sessions"].login_vendor(name)
    except ValidationError as e:
        handle_domain_error(ctx, e)


def _load_view(ctx, search: str) -> list[AccountRecord]:
    pipeline = VendorViewPipeline(ctx.obj["session"], search=search)
    unsubscribe = pipeline.attach(ctx.obj["store"], ctx.obj["settings"].collection)
    unsubscribe()
    return pipeline.visible


def _echo_accounts(name: str, records: list[AccountRecord]) -> None:
    if not records:
        click.echo(f"No accounts found for {name}.")
        return

    click.echo(f"\nHello, {name}: {len(records)} account(s)")
    click.echo("-" * 80)
    click.echo(f"{'#':<4} {'Client':<28} {'Amount':<12} {'Status':<16} {'Phone':<16}")
    click.echo("-" * 80)
    for position, record in enumerate(records, start=1):
        amount = f"${record.get(Field.AMOUNT, '')}"
        click.echo(
            f"{position:<4} {(record.get(Field.CLIENT) or '')[:28]:<28} {amount[:12]:<12} "
            f"{(record.get(Field.STATUS) or '')[:16]:<16} {(record.get(Field.PHONE) or '')[:16]:<16}"
        )


@vendor_group.command("list")
@click.option("--search", default="", help="Only show accounts containing this text")
@click.pass_context
def list_accounts(ctx, search: str):
    """List the accounts assigned to this vendor."""
    _echo_accounts(ctx.obj["session"].name, _load_view(ctx, search))


@vendor_group.command("watch")
@click.option("--search", default="", help="Only show accounts containing this text")
@click.option("--interval", type=float, default=2.0, show_default=True, help="Seconds between checks")
@click.option("--max-updates", type=int, default=None, help="Stop after this many updates")
@click.pass_context
def watch_accounts(ctx, search: str, interval: float, max_updates: int | None):
    """Keep the account list on screen and redraw it when the data changes."""
    session = ctx.obj["session"]
    store = ctx.obj["store"]
    updates = 0

    def render(records: list[AccountRecord]) -> None:
        nonlocal updates
        updates += 1
        click.clear()
        _echo_accounts(session.name, records)

    pipeline = VendorViewPipeline(session, search=search)
    pipeline.add_consumer(render)
    unsubscribe = pipeline.attach(store, ctx.obj["settings"].collection)
    try:
        while max_updates is None or updates < max_updates:
            time.sleep(interval)
            store.refresh()
    except KeyboardInterrupt:
        pass
    finally:
        unsubscribe()


@vendor_group.command("message")
@click.argument("position", type=int)
@click.option("--search", default="", help="Search used when listing, if any")
@click.option("--template", default=DEFAULT_TEMPLATE, show_default=True, help="Message template")
@click.option("--video", default=DEFAULT_VIDEO_LINK, show_default=True, help="Video link for {Video}")
@click.option("--ai", "use_ai", is_flag=True, help="Draft the message with AI")
@click.option("--edit", is_flag=True, help="Edit the message before building the link")
@click.option("--open", "open_link", is_flag=True, help="Open the WhatsApp link in the browser")
@click.pass_context
def message_client(
    ctx,
    position: int,
    search: str,
    template: str,
    video: str,
    use_ai: bool,
    edit: bool,
    open_link: bool,
):
    """Build a WhatsApp link for the account at POSITION in the list."""
    session = ctx.obj["session"]
    records = _load_view(ctx, search)

    if position < 1 or position > len(records):
        handle_domain_error(ctx, NotFoundError(record_position_not_found(position, len(records))))
    record = records[position - 1]

    if use_ai:
        settings = ctx.obj["settings"]
        drafting = DraftingService(
            GeminiClient(settings.gemini_api_key, model=settings.gemini_model, timeout=settings.http_timeout)
        )
        text = drafting.draft_reminder(record, session.name, video)
    else:
        text = render_template(template, record, video)

    if edit:
        edited = click.edit(text)
        if edited is not None:
            text = edited.rstrip("\n")

    try:
        link = message_link(record, text)
    except MissingDataError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Message:\n{text}\n")
    click.echo(link)
    if open_link:
        click.launch(link)


def register_commands(cli):
    """Register vendor commands with main CLI."""
    cli.add_command(vendor_group)
