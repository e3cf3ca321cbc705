"""Storage backends for dictionaries."""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from lexica.constants import DICTIONARY_FILE_SUFFIX, ENCODING_UTF8, get_dictionary_path
from lexica.core.dictionary import parse_dictionary, parse_dictionary_name
from lexica.core.entry import create_entry, parse_examples, parse_meanings, parse_term
from lexica.core.result import Failure, Result, fail_file_io, fail_not_found, succeed
from lexica.core.score import default_score, parse_score
from lexica.core.types import AppState, DictionaryName, Entry

logger = logging.getLogger(__name__)


class DictionaryStorage(ABC):
    """Abstract base class for dictionary storage backends.

    A backend persists one ``AppState`` snapshot (dictionary metadata plus its
    entries) per dictionary name. All failures come back as ``file-io``
    Results; backends never raise for I/O problems.

    **Core Methods (Required):**
        - `load(name)`: Load the snapshot of a dictionary
        - `save(state)`: Save/replace the snapshot of ``state.dictionary``
        - `exists(name)`: Check whether a dictionary is registered
        - `list_names()`: List registered dictionary names
    """

    @abstractmethod
    def load(self, name: DictionaryName) -> Result[AppState]:
        """Load a dictionary snapshot.

        Returns:
            ``not-found`` if the dictionary is not registered, ``file-io`` if it
            cannot be read or decoded.
        """

    @abstractmethod
    def save(self, state: AppState) -> Result[None]:
        """Save a dictionary snapshot, replacing any previous one."""

    @abstractmethod
    def exists(self, name: DictionaryName) -> bool:
        """Check whether a dictionary with this name is registered."""

    @abstractmethod
    def list_names(self) -> Result[list[DictionaryName]]:
        """List registered dictionary names in alphabetical order."""


def entry_from_dict(data: Any) -> Entry | None:
    """Decode a stored entry; returns None if the record is malformed.

    A missing or invalid ``score`` falls back to the default score, so files
    written before scores existed still load.
    """
    if not isinstance(data, dict):
        return None
    term = parse_term(data.get("term"))
    meanings = parse_meanings(data.get("meanings") or [])
    if isinstance(term, Failure) or isinstance(meanings, Failure):
        return None
    examples = None
    if data.get("examples") is not None:
        parsed_examples = parse_examples(data["examples"])
        if isinstance(parsed_examples, Failure):
            return None
        examples = parsed_examples.value
    score = parse_score(data.get("score"))
    return create_entry(
        term.value,
        meanings.value,
        examples,
        score.value if not isinstance(score, Failure) else default_score(),
    )


def state_from_dict(data: Any) -> Result[AppState]:
    """Decode a stored ``{"dictionary": ..., "entries": [...]}`` document."""
    if not isinstance(data, dict) or not isinstance(data.get("dictionary"), dict):
        return fail_file_io("Invalid dictionary data format")
    meta = data["dictionary"]
    language = meta.get("language") or {}
    if not isinstance(language, dict):
        return fail_file_io("Invalid dictionary data format")
    dictionary = parse_dictionary(meta.get("name"), language.get("source"), language.get("target"))
    if isinstance(dictionary, Failure):
        return fail_file_io("Invalid dictionary data format")

    raw_entries = data.get("entries") or []
    if not isinstance(raw_entries, list):
        return fail_file_io("Invalid dictionary data format")
    entries: list[Entry] = []
    seen: set[str] = set()
    for raw in raw_entries:
        entry = entry_from_dict(raw)
        if entry is None or entry.term in seen:
            return fail_file_io("Invalid entry data format")
        seen.add(entry.term)
        entries.append(entry)
    return succeed(AppState(dictionary=dictionary.value, entries=tuple(entries)))


class JSONFileStorage(DictionaryStorage):
    """File-backed storage: one ``<name>.json`` per dictionary in ``directory``.

    Args:
        directory: Directory holding the dictionary files. Created on save.
    """

    def __init__(self, directory: Path | str):
        self.directory = Path(directory)

    def path_for(self, name: DictionaryName) -> Path:
        return get_dictionary_path(self.directory, name)

    def load(self, name: DictionaryName) -> Result[AppState]:
        path = self.path_for(name)
        if not path.exists():
            return fail_not_found("Dictionary not found")
        try:
            content = json.loads(path.read_text(encoding=ENCODING_UTF8))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.warning(f"Failed to read dictionary {path}: {e}")
            return fail_file_io(str(e) or "Failed to read file")
        logger.debug(f"Loaded dictionary {name} from {path}")
        return state_from_dict(content)

    def save(self, state: AppState) -> Result[None]:
        path = self.path_for(state.dictionary.name)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(
                json.dumps(state.to_dict(), ensure_ascii=False, indent=2) + "\n",
                encoding=ENCODING_UTF8,
            )
        except OSError as e:
            logger.warning(f"Failed to write dictionary {path}: {e}")
            return fail_file_io(str(e) or "Failed to write file")
        logger.debug(f"Saved {len(state.entries)} entries to {path}")
        return succeed(None)

    def exists(self, name: DictionaryName) -> bool:
        return self.path_for(name).is_file()

    def list_names(self) -> Result[list[DictionaryName]]:
        if not self.directory.exists():
            return succeed([])
        try:
            files = sorted(self.directory.glob(f"*{DICTIONARY_FILE_SUFFIX}"))
        except OSError as e:
            return fail_file_io(str(e) or "Failed to read dictionaries")
        names: list[DictionaryName] = []
        for file in files:
            parsed = parse_dictionary_name(file.stem)
            if isinstance(parsed, Failure):
                logger.warning(f"Skipping dictionary file with invalid name: {file}")
                continue
            names.append(parsed.value)
        return succeed(names)


class MemoryStorage(DictionaryStorage):
    """In-memory storage for tests."""

    def __init__(self, states: list[AppState] | None = None):
        self.store: dict[str, AppState] = {}
        for state in states or []:
            self.store[state.dictionary.name] = state

    def load(self, name: DictionaryName) -> Result[AppState]:
        if name not in self.store:
            return fail_not_found("Dictionary not found")
        return succeed(self.store[name])

    def save(self, state: AppState) -> Result[None]:
        self.store[state.dictionary.name] = state
        return succeed(None)

    def exists(self, name: DictionaryName) -> bool:
        return name in self.store

    def list_names(self) -> Result[list[DictionaryName]]:
        return succeed(sorted(DictionaryName(name) for name in self.store))
