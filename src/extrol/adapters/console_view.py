"""Console view adapter - renders the projection with click."""

import json

import click

from extrol.core.entries import Entry
from extrol.core.projection import Stats, format_currency


class ConsoleView:
    """
    Terminal view.

    Implements View protocol. Errors go to stderr; list output is either a
    table or JSON. A muted view skips list rendering so intermediate
    refreshes stay quiet.
    """

    def __init__(
        self,
        currency_symbol: str = "₹",
        as_json: bool = False,
        show_stats: bool = True,
        muted: bool = False,
    ):
        self.currency_symbol = currency_symbol
        self.as_json = as_json
        self.show_stats = show_stats
        self.muted = muted
        self.errors: list[str] = []

    def show_error(self, message: str) -> None:
        self.errors.append(message)
        click.echo(f"Error: {message}", err=True)

    def show_message(self, message: str) -> None:
        click.echo(message)

    def navigate_to_auth(self) -> None:
        click.echo("Logged out. Run 'extrol login' to sign in.")

    def navigate_to_dashboard(self) -> None:
        pass

    def render_list(self, entries: list[Entry], stats: Stats) -> None:
        if self.muted:
            return
        if self.as_json:
            click.echo(
                json.dumps(
                    {
                        "entries": [e.to_dict() for e in entries],
                        "stats": {
                            "total": stats.total,
                            "count": stats.count,
                            "average": stats.average,
                            "last_refill_date": stats.last_refill_date,
                        },
                    },
                    indent=2,
                )
            )
            return

        if not entries:
            click.echo("No entries.")
        for entry in entries:
            price = format_currency(entry.price, self.currency_symbol)
            note = entry.note.strip()
            click.echo(f"{entry.date}  {price:>12}  {note}  [{entry.id}]".rstrip())

        if self.show_stats:
            self.render_stats(stats)

    def render_stats(self, stats: Stats) -> None:
        shown = stats.format(self.currency_symbol)
        click.echo()
        click.echo(f"Total spent:  {shown['total']}")
        click.echo(f"Entries:      {shown['count']}")
        click.echo(f"Avg price:    {shown['average']}")
        click.echo(f"Last refill:  {shown['last_refill_date']}")
