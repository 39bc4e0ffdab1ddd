"""Pure view projection - filtering, sorting and aggregate stats."""

from dataclasses import dataclass

from .entries import Entry

NO_DATA = "—"

DATE_DESC = "date_desc"
DATE_ASC = "date_asc"
PRICE_DESC = "price_desc"
PRICE_ASC = "price_asc"

SORT_KEYS = (DATE_DESC, DATE_ASC, PRICE_DESC, PRICE_ASC)
DEFAULT_SORT = DATE_DESC


@dataclass
class Stats:
    """Aggregates over the full store. None means no data."""

    total: float
    count: int
    average: float | None
    last_refill_date: str | None

    def format(self, symbol: str = "₹") -> dict[str, str]:
        """Display strings for each stat."""
        return {
            "total": format_currency(self.total, symbol),
            "count": str(self.count),
            "average": format_currency(self.average, symbol) if self.average is not None else NO_DATA,
            "last_refill_date": self.last_refill_date or NO_DATA,
        }


@dataclass
class Projection:
    """What the view should display."""

    entries: list[Entry]
    stats: Stats


def format_currency(value: float | None, symbol: str = "₹") -> str:
    """Two decimal places with thousands separators."""
    return f"{symbol}{float(value or 0):,.2f}"


def matches_search(entry: Entry, query: str) -> bool:
    """Case-insensitive substring match against note, plain match against date."""
    q = (query or "").strip().lower()
    if not q:
        return True
    return q in (entry.note or "").lower() or q in entry.date


def filter_entries(entries: list[Entry], query: str) -> list[Entry]:
    """
    Keep entries whose note or date contains the query.

    Pure function - no I/O.
    """
    return [e for e in entries if matches_search(e, query)]


def sort_entries(entries: list[Entry], sort_key: str) -> list[Entry]:
    """
    Order entries by one of SORT_KEYS.

    Dates compare as strings (ISO dates sort lexically), prices numerically.
    An unrecognized key leaves the order unchanged.
    """
    match sort_key:
        case "date_desc":
            return sorted(entries, key=lambda e: e.date, reverse=True)
        case "date_asc":
            return sorted(entries, key=lambda e: e.date)
        case "price_desc":
            return sorted(entries, key=lambda e: e.price, reverse=True)
        case "price_asc":
            return sorted(entries, key=lambda e: e.price)
        case _:
            return list(entries)


def compute_stats(entries: list[Entry]) -> Stats:
    """Total, count, average price and most recent date."""
    total = sum(e.price or 0 for e in entries)
    count = len(entries)
    return Stats(
        total=total,
        count=count,
        average=total / count if count else None,
        last_refill_date=max(e.date for e in entries) if entries else None,
    )


def project(entries: list[Entry], query: str = "", sort_key: str = DEFAULT_SORT) -> Projection:
    """
    Derive the displayed list and stats from a store snapshot.

    Stats always cover the unfiltered entries; the query only narrows the list.
    """
    visible = sort_entries(filter_entries(entries, query), sort_key)
    return Projection(entries=visible, stats=compute_stats(entries))
