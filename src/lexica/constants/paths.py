"""Workspace paths.

All default paths live under LEXICA_HOME (``~/.lexica`` unless overridden).
"""

import os
from pathlib import Path

ENV_LEXICA_HOME = "LEXICA_HOME"

DICTIONARIES_DIRNAME = "dictionaries"
STATE_FILENAME = "state.json"
CONFIG_FILENAME = "config.json"
DICTIONARY_FILE_SUFFIX = ".json"

ENCODING_UTF8 = "utf-8"


def get_lexica_home() -> Path:
    """Get the workspace root directory."""
    home = os.environ.get(ENV_LEXICA_HOME)
    if home:
        return Path(home).expanduser()
    return Path.home() / ".lexica"


def get_dictionaries_dir() -> Path:
    """Get directory holding one JSON file per dictionary."""
    return get_lexica_home() / DICTIONARIES_DIRNAME


def get_state_path() -> Path:
    """Get path to the current-dictionary state file."""
    return get_lexica_home() / STATE_FILENAME


def get_config_path() -> Path:
    """Get path to the CLI config file."""
    return get_lexica_home() / CONFIG_FILENAME


def get_dictionary_path(directory: Path, name: str) -> Path:
    """Get path to a dictionary file inside ``directory``."""
    return directory / f"{name}{DICTIONARY_FILE_SUFFIX}"
