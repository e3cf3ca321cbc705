"""Dictionary persistence and workspace state."""

from lexica.storage.backends import (
    DictionaryStorage,
    JSONFileStorage,
    MemoryStorage,
    entry_from_dict,
    state_from_dict,
)
from lexica.storage.workspace import (
    init_workspace,
    load_current_dictionary,
    load_current_state,
    save_current_dictionary,
)

__all__ = [
    "DictionaryStorage",
    "JSONFileStorage",
    "MemoryStorage",
    "entry_from_dict",
    "init_workspace",
    "load_current_dictionary",
    "load_current_state",
    "save_current_dictionary",
    "state_from_dict",
]
