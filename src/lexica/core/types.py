"""Domain types.

Branded primitives are ``NewType`` wrappers: values must come from the parse
functions in ``lexica.core.entry``, ``lexica.core.dictionary``,
``lexica.core.score`` and friends, never from raw input.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, NewType

DictionaryName = NewType("DictionaryName", str)
SourceLanguage = NewType("SourceLanguage", str)
TargetLanguage = NewType("TargetLanguage", str)
Term = NewType("Term", str)
Meaning = NewType("Meaning", str)
Score = NewType("Score", int)
ExampleCount = NewType("ExampleCount", int)
TestCount = NewType("TestCount", int)


@dataclass(frozen=True)
class Language:
    """Source/target pair of free-form language labels."""

    source: SourceLanguage
    target: TargetLanguage

    def to_dict(self) -> dict[str, str]:
        return {"source": self.source, "target": self.target}


@dataclass(frozen=True)
class Dictionary:
    """A named dictionary. Created once and never mutated."""

    name: DictionaryName
    language: Language

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "language": self.language.to_dict()}


@dataclass(frozen=True)
class Entry:
    """One term with its meanings, optional examples and recall score.

    Attributes:
        term: Lookup key, unique within a dictionary.
        meanings: At least one meaning while the entry exists.
        examples: Example sentences, or None if never set.
        score: Non-negative recall strength.
    """

    term: Term
    meanings: tuple[Meaning, ...]
    examples: tuple[str, ...] | None = None
    score: Score = Score(0)

    def with_changes(self, **changes: Any) -> Entry:
        return replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"term": self.term, "meanings": list(self.meanings)}
        if self.examples is not None:
            d["examples"] = list(self.examples)
        d["score"] = int(self.score)
        return d


@dataclass(frozen=True)
class AppState:
    """Unit of mutation for every command: one dictionary and its entries."""

    dictionary: Dictionary
    entries: tuple[Entry, ...] = field(default_factory=tuple)

    def with_entries(self, entries: tuple[Entry, ...]) -> AppState:
        return replace(self, entries=entries)

    def to_dict(self) -> dict[str, Any]:
        return {
            "dictionary": self.dictionary.to_dict(),
            "entries": [entry.to_dict() for entry in self.entries],
        }
