"""Tests for entry-store operations."""

from factories import make_entry

from lexica.core.result import Failure
from lexica.core.types import Meaning, Term
from lexica.core.vocabulary import delete_entry, find_entry, replace_entry, upsert_entry


def test_upsert_creates_entry_at_end():
    entries = (make_entry("物", ["object"]),)
    result = upsert_entry(entries, Term("目的"), Meaning("purpose"))
    assert [e.term for e in result.value.entries] == ["物", "目的"]
    assert result.value.entry.meanings == ("purpose",)
    assert result.value.entry.score == 0


def test_upsert_appends_meaning_in_place():
    entries = (make_entry("物", ["object"], score=2), make_entry("目的", ["purpose"]))
    result = upsert_entry(entries, Term("物"), Meaning("thing"))
    assert [e.term for e in result.value.entries] == ["物", "目的"]
    assert result.value.entries[0].meanings == ("object", "thing")
    assert result.value.entries[0].score == 2


def test_upsert_keeps_duplicate_meanings():
    entries = (make_entry("物", ["object"]),)
    result = upsert_entry(entries, Term("物"), Meaning("object"))
    assert result.value.entry.meanings == ("object", "object")


def test_upsert_does_not_touch_input():
    entries = (make_entry("物", ["object"]),)
    upsert_entry(entries, Term("物"), Meaning("thing"))
    assert entries[0].meanings == ("object",)


def test_find_entry_not_found():
    result = find_entry((), Term("物"))
    assert isinstance(result, Failure)
    assert result.kind == "not-found"


def test_replace_entry_requires_existing():
    result = replace_entry((), make_entry("物", ["object"]))
    assert result.kind == "not-found"


def test_replace_entry_keeps_position():
    entries = (make_entry("a", ["1"]), make_entry("b", ["2"]), make_entry("c", ["3"]))
    result = replace_entry(entries, make_entry("b", ["two"]))
    assert [e.term for e in result.value.entries] == ["a", "b", "c"]
    assert result.value.entries[1].meanings == ("two",)


def test_delete_entry():
    entries = (make_entry("a", ["1"]), make_entry("b", ["2"]))
    assert [e.term for e in delete_entry(entries, Term("a")).value.entries] == ["b"]
    assert delete_entry(entries, Term("z")).kind == "not-found"
