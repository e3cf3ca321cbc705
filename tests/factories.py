"""Builders for domain values used across tests."""

from __future__ import annotations

from lexica.core.dictionary import parse_dictionary
from lexica.core.entry import create_entry
from lexica.core.result import unwrap
from lexica.core.types import Dictionary, Entry, Meaning, Score, Term


def make_dictionary(name: str = "ja-en", source: str = "ja", target: str = "en") -> Dictionary:
    return unwrap(parse_dictionary(name, source, target))


def make_entry(
    term: str, meanings: list[str], examples: list[str] | None = None, score: int = 0
) -> Entry:
    return create_entry(Term(term), [Meaning(m) for m in meanings], examples, Score(score))
