"""Domain core: entity model, entry store, score engine, selection, commands.

Pure and synchronous apart from ``generate_examples``; performs no I/O.
"""

from lexica.core.commands import (
    CommandResult,
    add_entry,
    add_entry_example,
    add_entry_meanings,
    clear_dictionary,
    create_dictionary,
    create_state,
    forget_entry,
    generate_examples,
    list_entries,
    list_entry,
    remember_entry,
    remove_entry,
    replace_entry,
)
from lexica.core.result import (
    ErrorKind,
    Failure,
    LexicaError,
    Result,
    Success,
    is_failure,
    is_success,
    succeed,
    unwrap,
)
from lexica.core.selection import (
    TestSelection,
    select_example_test_entry,
    select_meaning_test_entry,
)
from lexica.core.types import AppState, Dictionary, Entry, Language

__all__ = [
    "AppState",
    "CommandResult",
    "Dictionary",
    "Entry",
    "ErrorKind",
    "Failure",
    "Language",
    "LexicaError",
    "Result",
    "Success",
    "TestSelection",
    "add_entry",
    "add_entry_example",
    "add_entry_meanings",
    "clear_dictionary",
    "create_dictionary",
    "create_state",
    "forget_entry",
    "generate_examples",
    "is_failure",
    "is_success",
    "list_entries",
    "list_entry",
    "remember_entry",
    "remove_entry",
    "replace_entry",
    "select_example_test_entry",
    "select_meaning_test_entry",
    "succeed",
    "unwrap",
]
