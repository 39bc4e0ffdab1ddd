"""Tests for entry domain logic."""

from datetime import date

import pytest

from extrol.core.entries import Entry, EntryDraft, ValidationError, find_entry, validate_draft


class TestEntryFromApi:
    def test_uses_underscore_id(self):
        entry = Entry.from_api({"_id": "abc", "date": "2024-01-01", "price": 12.5, "note": "x"})
        assert entry.id == "abc"
        assert entry.price == 12.5

    def test_falls_back_to_id(self):
        entry = Entry.from_api({"id": 7, "date": "2024-01-01", "price": 3})
        assert entry.id == "7"
        assert entry.price == 3.0

    def test_missing_note_is_empty(self):
        entry = Entry.from_api({"id": "1", "date": "2024-01-01", "price": 1, "note": None})
        assert entry.note == ""


    @pytest.mark.parametrize("data", [{"date": "2024-01-01", "price": 1}, {"_id": "", "price": 1}])
    def test_missing_id_is_rejected(self, data):
        with pytest.raises(ValueError, match="no id"):
            Entry.from_api(data)

    def test_non_numeric_price_is_rejected(self):
        with pytest.raises(ValueError):
            Entry.from_api({"_id": "a", "date": "2024-01-01", "price": "n/a"})


class TestValidateDraft:
    def test_accepts_positive_price(self):
        draft = validate_draft(EntryDraft(date="2024-03-01", price=42.0, note="fuel"))
        assert draft == EntryDraft(date="2024-03-01", price=42.0, note="fuel")

    @pytest.mark.parametrize("price", [0, -5, float("nan"), "abc", None])
    def test_rejects_invalid_price(self, price):
        with pytest.raises(ValidationError, match="valid price"):
            validate_draft(EntryDraft(date="2024-03-01", price=price, note="x"))

    def test_coerces_numeric_string_price(self):
        draft = validate_draft(EntryDraft(date="2024-03-01", price="9.99"))
        assert draft.price == 9.99

    def test_empty_date_defaults_to_today(self):
        draft = validate_draft(EntryDraft(date="", price=1.0), today=date(2025, 1, 15))
        assert draft.date == "2025-01-15"

    def test_basic_format_date_is_normalized(self):
        draft = validate_draft(EntryDraft(date="20240301", price=1.0))
        assert draft.date == "2024-03-01"

    def test_rejects_malformed_date(self):
        with pytest.raises(ValidationError, match="valid date"):
            validate_draft(EntryDraft(date="15/01/2025", price=1.0))

    def test_none_note_becomes_empty(self):
        draft = validate_draft(EntryDraft(date="2024-03-01", price=1.0, note=None))
        assert draft.note == ""


def test_find_entry(sample_entries):
    assert find_entry(sample_entries, "2").note == "Oil change"
    assert find_entry(sample_entries, "missing") is None
