"""Extrol CLI - expense tracking from the terminal."""

import asyncio
import logging
import sys

import click

from .adapters.console_view import ConsoleView
from .config import load_config
from .controller import ExtrolController
from .core.entries import EntryDraft
from .core.projection import SORT_KEYS
from .core.session import User


def _open(view: ConsoleView) -> ExtrolController:
    return ExtrolController.from_config(view, load_config())


def _require_session(signed_in: bool) -> None:
    if not signed_in:
        click.echo("Error: Not logged in. Run 'extrol login' first.", err=True)
        sys.exit(1)


def _finish(controller: ExtrolController, view: ConsoleView) -> None:
    """Keep the entries for the next run, then exit non-zero if anything failed."""
    controller.remember_entries()
    if view.errors:
        sys.exit(1)


@click.group()
@click.version_option(package_name="extrol")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """Extrol - track your expenses."""
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.DEBUG if debug else logging.WARNING,
    )


@main.command()
@click.option("--token", required=True, help="Bearer token issued by the Extrol API")
@click.option("--email", required=True, help="Account email")
@click.option("--name", default="", help="Display name")
@click.option("--user-id", default="", help="Account id")
def login(token: str, email: str, name: str, user_id: str):
    """Store a session and load its entries."""
    view = ConsoleView(muted=True)
    controller = _open(view)
    user = User(id=user_id, name=name, email=email)
    asyncio.run(controller.login(token, user))
    if controller.session.is_authenticated:
        click.echo(f"Signed in as {user.display_name} ({len(controller.store.entries)} entries)")
    _finish(controller, view)


@main.command()
def logout():
    """Forget the stored session."""
    view = ConsoleView(muted=True)
    controller = _open(view)
    controller.session.restore()
    controller.logout()


@main.command()
def whoami():
    """Show the signed-in user."""
    view = ConsoleView(muted=True)
    controller = _open(view)
    if not controller.session.restore():
        click.echo("Not logged in.")
        return
    user = controller.session.user
    click.echo(user.display_name)


@main.command("list")
@click.option("--search", "-s", default="", help="Filter by note or date")
@click.option("--sort", "sort_key", type=click.Choice(SORT_KEYS), default=None, help="Sort order")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def list_entries(search: str, sort_key: str | None, as_json: bool):
    """List entries with totals."""
    config = load_config()
    view = ConsoleView(currency_symbol=config.currency_symbol, as_json=as_json, muted=True)
    controller = ExtrolController.from_config(view, config)
    _require_session(asyncio.run(controller.start()))

    view.muted = False
    controller.search = search
    controller.set_sort(sort_key or controller.sort_key)
    _finish(controller, view)


@main.command()
def stats():
    """Show total, average and last refill date."""
    config = load_config()
    view = ConsoleView(currency_symbol=config.currency_symbol, muted=True)
    controller = ExtrolController.from_config(view, config)
    _require_session(asyncio.run(controller.start()))

    projection = controller.render()
    view.render_stats(projection.stats)
    _finish(controller, view)


@main.command()
@click.option("--price", "-p", type=float, required=True, help="Amount spent")
@click.option("--date", "-d", "entry_date", default="", help="YYYY-MM-DD (default: today)")
@click.option("--note", "-n", default="", help="Free-text note")
def add(price: float, entry_date: str, note: str):
    """Add an entry."""
    view = ConsoleView(muted=True)
    controller = _open(view)

    async def run() -> bool:
        if not await controller.start():
            return False
        await controller.submit_create(EntryDraft(date=entry_date, price=price, note=note))
        return True

    _require_session(asyncio.run(run()))
    _finish(controller, view)


@main.command()
@click.argument("entry_id")
@click.option("--price", "-p", type=float, default=None, help="Amount spent")
@click.option("--date", "-d", "entry_date", default=None, help="YYYY-MM-DD")
@click.option("--note", "-n", default=None, help="Free-text note")
def edit(entry_id: str, price: float | None, entry_date: str | None, note: str | None):
    """Edit an entry. Omitted fields keep their current value."""
    view = ConsoleView(muted=True)
    controller = _open(view)

    async def run() -> bool:
        if not await controller.start():
            return False
        current = controller.store.get(entry_id)
        if current is None and (price is None or entry_date is None or note is None):
            view.show_error(f"Entry {entry_id} not found")
            return True
        draft = EntryDraft(
            date=entry_date if entry_date is not None else current.date,
            price=price if price is not None else current.price,
            note=note if note is not None else current.note,
        )
        await controller.submit_update(entry_id, draft)
        return True

    _require_session(asyncio.run(run()))
    _finish(controller, view)


@main.command()
@click.argument("entry_id")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
def delete(entry_id: str, yes: bool):
    """Delete an entry."""
    view = ConsoleView(muted=True)
    controller = _open(view)
    _require_session(asyncio.run(controller.start()))

    if not yes and not click.confirm("Delete this entry?"):
        _finish(controller, view)
        return
    asyncio.run(controller.submit_delete(entry_id))
    _finish(controller, view)


if __name__ == "__main__":
    main()
