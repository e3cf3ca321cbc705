"""Entry-store operations over an ordered, term-unique collection of entries.

The collection behaves like a map keyed by Term but keeps insertion order.
Every function returns a new tuple; the caller's collection is never changed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from lexica.core.entry import create_entry
from lexica.core.result import Result, fail_not_found, succeed
from lexica.core.types import Entry, Meaning, Term


@dataclass(frozen=True)
class EntriesUpdate:
    """Updated collection plus the entry that changed."""

    entries: tuple[Entry, ...]
    entry: Entry


@dataclass(frozen=True)
class EntriesDeletion:
    entries: tuple[Entry, ...]


def _find_index(entries: Sequence[Entry], term: Term) -> int:
    for index, entry in enumerate(entries):
        if entry.term == term:
            return index
    return -1


def upsert_entry(entries: Sequence[Entry], term: Term, meaning: Meaning) -> Result[EntriesUpdate]:
    """Create the entry for ``term`` or append ``meaning`` to it.

    Duplicate meanings are accepted as-is; registering a term twice is not a
    conflict.
    """
    index = _find_index(entries, term)
    if index == -1:
        entry = create_entry(term, [meaning])
        return succeed(EntriesUpdate(entries=(*entries, entry), entry=entry))

    existing = entries[index]
    updated = existing.with_changes(meanings=(*existing.meanings, meaning))
    next_entries = tuple(entries)
    next_entries = next_entries[:index] + (updated,) + next_entries[index + 1 :]
    return succeed(EntriesUpdate(entries=next_entries, entry=updated))


def find_entry(entries: Sequence[Entry], term: Term) -> Result[Entry]:
    index = _find_index(entries, term)
    if index == -1:
        return fail_not_found("Entry not found")
    return succeed(entries[index])


def list_entries(entries: Sequence[Entry]) -> Result[tuple[Entry, ...]]:
    return succeed(tuple(entries))


def replace_entry(entries: Sequence[Entry], entry: Entry) -> Result[EntriesUpdate]:
    """Replace the entry sharing ``entry.term``. Not an upsert."""
    index = _find_index(entries, entry.term)
    if index == -1:
        return fail_not_found("Entry not found")
    next_entries = tuple(entries)
    next_entries = next_entries[:index] + (entry,) + next_entries[index + 1 :]
    return succeed(EntriesUpdate(entries=next_entries, entry=entry))


def delete_entry(entries: Sequence[Entry], term: Term) -> Result[EntriesDeletion]:
    if _find_index(entries, term) == -1:
        return fail_not_found("Entry not found")
    return succeed(EntriesDeletion(entries=tuple(e for e in entries if e.term != term)))
