"""Command orchestration: the application's use-cases over an AppState.

Each command takes an immutable AppState plus already-parsed inputs and
returns a Result holding the new state. A failing command never returns a
partially updated state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Sequence

from lexica.core import vocabulary
from lexica.core.entry import (
    append_example,
    create_entry,
    overwrite_examples,
    overwrite_score,
)
from lexica.core.example import ExampleGenerator, ExampleRequest
from lexica.core.result import Failure, Result, fail_invalid_input, fail_not_found, succeed
from lexica.core.score import decrement_score, increment_score
from lexica.core.selection import (
    TestSelection,
    select_example_test_entry,
    select_meaning_test_entry,
)
from lexica.core.types import (
    AppState,
    Dictionary,
    DictionaryName,
    Entry,
    ExampleCount,
    Language,
    Meaning,
    Score,
    Term,
)

__all__ = [
    "CommandResult",
    "DictionaryCreated",
    "EntryExamples",
    "EntryListing",
    "EntryMeanings",
    "TestSelection",
    "add_entry",
    "add_entry_example",
    "add_entry_meanings",
    "clear_dictionary",
    "create_dictionary",
    "create_state",
    "forget_entry",
    "generate_examples",
    "list_entries",
    "list_entry",
    "list_entry_examples",
    "list_entry_meanings",
    "remember_entry",
    "remove_entry",
    "replace_entry",
    "select_example_test_entry",
    "select_meaning_test_entry",
]


@dataclass(frozen=True)
class CommandResult:
    """New state after a command, and the entry it touched (if any survives)."""

    state: AppState
    dictionary_name: DictionaryName
    entry: Entry | None = None


@dataclass(frozen=True)
class DictionaryCreated:
    dictionary: Dictionary


@dataclass(frozen=True)
class EntryListing:
    dictionary_name: DictionaryName
    entries: tuple[Entry, ...]


@dataclass(frozen=True)
class EntryMeanings:
    dictionary_name: DictionaryName
    term: Term
    meanings: tuple[Meaning, ...]


@dataclass(frozen=True)
class EntryExamples:
    dictionary_name: DictionaryName
    term: Term
    examples: tuple[str, ...]


def create_state(dictionary: Dictionary, entries: Iterable[Entry] = ()) -> AppState:
    return AppState(dictionary=dictionary, entries=tuple(entries))


def _result(
    state: AppState, entries: tuple[Entry, ...], entry: Entry | None = None
) -> Result[CommandResult]:
    return succeed(
        CommandResult(
            state=state.with_entries(entries),
            dictionary_name=state.dictionary.name,
            entry=entry,
        )
    )


# ── Dictionary ────────────────────────────────────────────────


def create_dictionary(name: DictionaryName, language: Language) -> Result[DictionaryCreated]:
    """Register a new dictionary value. Uniqueness is the storage layer's concern."""
    return succeed(DictionaryCreated(dictionary=Dictionary(name=name, language=language)))


def clear_dictionary(state: AppState, dictionary_name: DictionaryName) -> Result[CommandResult]:
    """Remove every entry of the dictionary carried by ``state``."""
    if state.dictionary.name != dictionary_name:
        return fail_not_found("Dictionary not found")
    return _result(state, ())


# ── Entries ───────────────────────────────────────────────────


def add_entry(state: AppState, term: Term, meaning: Meaning) -> Result[CommandResult]:
    return add_entry_meanings(state, term, [meaning])


def add_entry_meanings(
    state: AppState, term: Term, meanings: Sequence[Meaning]
) -> Result[CommandResult]:
    """Add one or more meanings to ``term``, creating the entry if needed.

    Folds ``upsert_entry`` once per meaning. Intermediate collections are
    local, so a failure leaves the caller's state untouched.
    """
    if not meanings:
        return fail_invalid_input("Meanings must not be empty")

    entries = state.entries
    entry: Entry | None = None
    for meaning in meanings:
        updated = vocabulary.upsert_entry(entries, term, meaning)
        if isinstance(updated, Failure):
            return updated
        entries = updated.value.entries
        entry = updated.value.entry
    return _result(state, entries, entry)


def add_entry_example(state: AppState, term: Term, example: str) -> Result[CommandResult]:
    """Append a manually written example to ``term``."""
    current = vocabulary.find_entry(state.entries, term)
    if isinstance(current, Failure):
        return current
    replaced = vocabulary.replace_entry(state.entries, append_example(current.value, example))
    if isinstance(replaced, Failure):
        return replaced
    return _result(state, replaced.value.entries, replaced.value.entry)


def list_entries(state: AppState) -> Result[EntryListing]:
    entries = vocabulary.list_entries(state.entries)
    if isinstance(entries, Failure):
        return entries
    return succeed(EntryListing(dictionary_name=state.dictionary.name, entries=entries.value))


def list_entry(state: AppState, term: Term) -> Result[CommandResult]:
    found = vocabulary.find_entry(state.entries, term)
    if isinstance(found, Failure):
        return found
    return succeed(
        CommandResult(state=state, dictionary_name=state.dictionary.name, entry=found.value)
    )


def list_entry_meanings(state: AppState, term: Term) -> Result[EntryMeanings]:
    found = vocabulary.find_entry(state.entries, term)
    if isinstance(found, Failure):
        return found
    return succeed(
        EntryMeanings(
            dictionary_name=state.dictionary.name,
            term=term,
            meanings=found.value.meanings,
        )
    )


def list_entry_examples(state: AppState, term: Term) -> Result[EntryExamples]:
    found = vocabulary.find_entry(state.entries, term)
    if isinstance(found, Failure):
        return found
    return succeed(
        EntryExamples(
            dictionary_name=state.dictionary.name,
            term=term,
            examples=found.value.examples or (),
        )
    )


def remove_entry(
    state: AppState, term: Term, meaning: Meaning | None = None
) -> Result[CommandResult]:
    """Remove a whole entry, or a single meaning of it.

    Removing the last remaining meaning deletes the entry instead of leaving
    it without meanings.
    """
    if meaning is None:
        deleted = vocabulary.delete_entry(state.entries, term)
        if isinstance(deleted, Failure):
            return deleted
        return _result(state, deleted.value.entries)

    current = vocabulary.find_entry(state.entries, term)
    if isinstance(current, Failure):
        return current

    remaining = tuple(item for item in current.value.meanings if item != meaning)
    if len(remaining) == len(current.value.meanings):
        return fail_not_found("Meaning not found")

    if not remaining:
        deleted = vocabulary.delete_entry(state.entries, term)
        if isinstance(deleted, Failure):
            return deleted
        return _result(state, deleted.value.entries)

    replaced = vocabulary.replace_entry(
        state.entries, current.value.with_changes(meanings=remaining)
    )
    if isinstance(replaced, Failure):
        return replaced
    return _result(state, replaced.value.entries, replaced.value.entry)


def replace_entry(
    state: AppState,
    term: Term,
    meanings: Sequence[Meaning],
    examples: Sequence[str] | None = None,
) -> Result[CommandResult]:
    """Replace meanings (and optionally examples) of an existing entry, keeping its score."""
    if not meanings:
        return fail_invalid_input("Meanings must not be empty")
    current = vocabulary.find_entry(state.entries, term)
    if isinstance(current, Failure):
        return current
    entry = create_entry(term, meanings, examples, current.value.score)
    replaced = vocabulary.replace_entry(state.entries, entry)
    if isinstance(replaced, Failure):
        return replaced
    return _result(state, replaced.value.entries, replaced.value.entry)


async def generate_examples(
    state: AppState,
    term: Term,
    meaning: Meaning,
    generator: ExampleGenerator,
    count: ExampleCount,
) -> Result[CommandResult]:
    """Ask ``generator`` for examples and overwrite the entry's examples with them.

    The entry must exist before the generator is called. A generator failure
    is returned verbatim and the state is left unchanged.
    """
    current = vocabulary.find_entry(state.entries, term)
    if isinstance(current, Failure):
        return current

    generated = await generator(
        ExampleRequest(
            dictionary_name=state.dictionary.name,
            language=state.dictionary.language,
            term=term,
            meaning=meaning,
            count=count,
        )
    )
    if isinstance(generated, Failure):
        return generated

    replaced = vocabulary.replace_entry(
        state.entries, overwrite_examples(current.value, generated.value)
    )
    if isinstance(replaced, Failure):
        return replaced
    return _result(state, replaced.value.entries, replaced.value.entry)


# ── Quiz scoring ──────────────────────────────────────────────


def _update_score(
    state: AppState, term: Term, next_score: Callable[[Score], Score]
) -> Result[CommandResult]:
    current = vocabulary.find_entry(state.entries, term)
    if isinstance(current, Failure):
        return current
    updated = overwrite_score(current.value, next_score(current.value.score))
    replaced = vocabulary.replace_entry(state.entries, updated)
    if isinstance(replaced, Failure):
        return replaced
    return _result(state, replaced.value.entries, replaced.value.entry)


def remember_entry(state: AppState, term: Term) -> Result[CommandResult]:
    """The user remembered ``term``: raise its score, so it is asked less often."""
    return _update_score(state, term, increment_score)


def forget_entry(state: AppState, term: Term) -> Result[CommandResult]:
    return _update_score(state, term, decrement_score)
