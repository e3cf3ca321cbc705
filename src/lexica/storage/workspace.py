"""Workspace state: which dictionary is current, and first-run initialization."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from lexica.config import default_config_dict
from lexica.constants import ENCODING_UTF8
from lexica.core.dictionary import parse_dictionary_name
from lexica.core.result import (
    Failure,
    Result,
    fail_file_io,
    fail_invalid_input,
    fail_not_found,
    succeed,
)
from lexica.core.types import AppState, DictionaryName
from lexica.storage.backends import DictionaryStorage

logger = logging.getLogger(__name__)

STATE_KEY = "dictionaryName"


def _first_registered(storage: DictionaryStorage) -> Result[DictionaryName]:
    names = storage.list_names()
    if isinstance(names, Failure):
        return names
    if not names.value:
        return fail_not_found("No dictionaries registered")
    logger.debug(f"No current dictionary set, using {names.value[0]}")
    return succeed(names.value[0])


def load_current_dictionary(
    storage: DictionaryStorage, state_path: Path
) -> Result[DictionaryName]:
    """Resolve the current dictionary name.

    Reads ``{"dictionaryName": "..."}`` from ``state_path``. A missing state
    file, or one with an empty name (as written by ``init_workspace``), falls
    back to the first registered dictionary.

    Returns:
        ``not-found`` if nothing is registered or the named dictionary is gone,
        ``invalid-input`` for a malformed state file, ``file-io`` if it cannot
        be read.
    """
    state_path = Path(state_path)
    if not state_path.exists():
        return _first_registered(storage)

    try:
        content = json.loads(state_path.read_text(encoding=ENCODING_UTF8))
    except json.JSONDecodeError:
        return fail_invalid_input("Invalid state format")
    except (OSError, UnicodeDecodeError) as e:
        return fail_file_io(str(e) or "Failed to read state")

    name = content.get(STATE_KEY) if isinstance(content, dict) else None
    if not isinstance(name, str):
        return fail_invalid_input("Invalid state format")
    if not name.strip():
        return _first_registered(storage)

    parsed = parse_dictionary_name(name)
    if isinstance(parsed, Failure):
        return parsed
    if not storage.exists(parsed.value):
        return fail_not_found("Dictionary not found")
    return parsed


def save_current_dictionary(state_path: Path, name: DictionaryName) -> Result[None]:
    state_path = Path(state_path)
    try:
        state_path.parent.mkdir(parents=True, exist_ok=True)
        state_path.write_text(
            json.dumps({STATE_KEY: name}, ensure_ascii=False, indent=2) + "\n",
            encoding=ENCODING_UTF8,
        )
    except OSError as e:
        return fail_file_io(str(e) or "Failed to write state")
    logger.info(f"Current dictionary set to {name}")
    return succeed(None)


def load_current_state(
    storage: DictionaryStorage, state_path: Path
) -> Result[AppState]:
    """Load the AppState of the current dictionary."""
    name = load_current_dictionary(storage, state_path)
    if isinstance(name, Failure):
        return name
    return storage.load(name.value)


def init_workspace(dictionary_dir: Path, config_path: Path, state_path: Path) -> Result[None]:
    """Create the workspace directories, default config and empty state.

    Existing config and state files are left untouched.
    """
    dictionary_dir, config_path, state_path = (
        Path(dictionary_dir),
        Path(config_path),
        Path(state_path),
    )
    try:
        dictionary_dir.mkdir(parents=True, exist_ok=True)
        state_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.parent.mkdir(parents=True, exist_ok=True)
        if not config_path.exists():
            config_path.write_text(
                json.dumps(default_config_dict(), indent=2) + "\n", encoding=ENCODING_UTF8
            )
            logger.info(f"Wrote default config to {config_path}")
        if not state_path.exists():
            state_path.write_text(
                json.dumps({STATE_KEY: ""}, indent=2) + "\n", encoding=ENCODING_UTF8
            )
    except OSError as e:
        return fail_file_io(str(e) or "Failed to initialize workspace")
    return succeed(None)
