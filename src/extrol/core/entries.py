"""Pure entry domain logic - no I/O dependencies."""

import math
from dataclasses import dataclass
from datetime import date


class ValidationError(Exception):
    """Raised when a draft is rejected before it reaches the server."""

    pass


@dataclass
class Entry:
    """A single dated expense record."""

    id: str
    date: str
    price: float
    note: str = ""

    @classmethod
    def from_api(cls, data: dict) -> "Entry":
        """Create Entry from an API response object."""
        entry_id = data.get("_id") or data.get("id")
        if entry_id is None or entry_id == "":
            raise ValueError("entry has no id")
        return cls(
            id=str(entry_id),
            date=data.get("date", ""),
            price=float(data.get("price") or 0),
            note=data.get("note") or "",
        )

    def to_dict(self) -> dict:
        return {"id": self.id, "date": self.date, "price": self.price, "note": self.note}


@dataclass
class EntryDraft:
    """The user-editable fields of an entry, before the server assigns an id."""

    date: str
    price: float
    note: str = ""

    def to_payload(self) -> dict:
        """Request body for create and update."""
        return {"date": self.date, "price": self.price, "note": self.note}


def validate_draft(draft: EntryDraft, today: date | None = None) -> EntryDraft:
    """
    Check a draft and fill in defaults.

    An empty date becomes today's date. Price must be a finite number > 0.
    Returns a new draft; raises ValidationError otherwise.
    """
    try:
        price = float(draft.price)
    except (TypeError, ValueError):
        raise ValidationError("Enter a valid price")
    if not math.isfinite(price) or price <= 0:
        raise ValidationError("Enter a valid price")

    entry_date = (draft.date or "").strip()
    if not entry_date:
        entry_date = (today or date.today()).isoformat()
    try:
        entry_date = date.fromisoformat(entry_date).isoformat()
    except ValueError:
        raise ValidationError("Enter a valid date (YYYY-MM-DD)")

    return EntryDraft(date=entry_date, price=price, note=draft.note or "")


def find_entry(entries: list[Entry], entry_id: str) -> Entry | None:
    """Look up an entry by id."""
    return next((e for e in entries if e.id == entry_id), None)
