"""Parsing of raw entry input and pure Entry helpers."""

from __future__ import annotations

from typing import Iterable, Sequence

from lexica.core.result import Failure, Result, fail_invalid_input, succeed
from lexica.core.score import default_score
from lexica.core.types import Entry, Meaning, Score, Term


def parse_non_empty(value: object, reason: str = "Value must not be empty") -> Result[str]:
    """Trim a raw string and reject it if nothing is left."""
    if not isinstance(value, str):
        return fail_invalid_input(reason)
    trimmed = value.strip()
    if not trimmed:
        return fail_invalid_input(reason)
    return succeed(trimmed)


def parse_term(value: object) -> Result[Term]:
    parsed = parse_non_empty(value, "Term must not be empty")
    if isinstance(parsed, Failure):
        return parsed
    return succeed(Term(parsed.value))


def parse_meaning(value: object) -> Result[Meaning]:
    parsed = parse_non_empty(value, "Meaning must not be empty")
    if isinstance(parsed, Failure):
        return parsed
    return succeed(Meaning(parsed.value))


def parse_example(value: object) -> Result[str]:
    return parse_non_empty(value, "Example must not be empty")


def parse_meanings(values: Sequence[object]) -> Result[tuple[Meaning, ...]]:
    """Parse a non-empty list of meanings; any bad element fails the whole list."""
    if isinstance(values, str) or len(values) == 0:
        return fail_invalid_input("Meanings must not be empty")
    meanings: list[Meaning] = []
    for value in values:
        parsed = parse_meaning(value)
        if isinstance(parsed, Failure):
            return fail_invalid_input("Meanings must not be empty")
        meanings.append(parsed.value)
    return succeed(tuple(meanings))


def parse_examples(values: Sequence[object]) -> Result[tuple[str, ...]]:
    """Parse a list of examples. An empty list is allowed."""
    if isinstance(values, str):
        return fail_invalid_input("Examples must be a list")
    examples: list[str] = []
    for value in values:
        parsed = parse_example(value)
        if isinstance(parsed, Failure):
            return parsed
        examples.append(parsed.value)
    return succeed(tuple(examples))


def create_entry(
    term: Term,
    meanings: Iterable[Meaning],
    examples: Iterable[str] | None = None,
    score: Score | None = None,
) -> Entry:
    """Create an Entry; score falls back to the default when not given."""
    return Entry(
        term=term,
        meanings=tuple(meanings),
        examples=tuple(examples) if examples is not None else None,
        score=score if score is not None else default_score(),
    )


def overwrite_examples(entry: Entry, examples: Iterable[str]) -> Entry:
    return entry.with_changes(examples=tuple(examples))


def append_example(entry: Entry, example: str) -> Entry:
    return entry.with_changes(examples=(*(entry.examples or ()), example))


def overwrite_score(entry: Entry, score: Score) -> Entry:
    return entry.with_changes(score=score)
