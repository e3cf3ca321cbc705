"""Raw-input boundary: parse untyped CLI strings, then dispatch to commands.

These are the only functions the CLI layer calls with plain strings. Every
input is parsed before the state is touched, so a parse failure aborts the
command with nothing applied.
"""

from __future__ import annotations

from typing import Sequence

from lexica.core import commands
from lexica.core.commands import CommandResult, DictionaryCreated
from lexica.core.dictionary import parse_dictionary, parse_dictionary_name
from lexica.core.entry import (
    parse_example,
    parse_examples,
    parse_meaning,
    parse_meanings,
    parse_term,
)
from lexica.core.example import ExampleGenerator, parse_example_count
from lexica.core.result import Failure, Result
from lexica.core.types import AppState


def create_dictionary_raw(name: str, source: str, target: str) -> Result[DictionaryCreated]:
    parsed = parse_dictionary(name, source, target)
    if isinstance(parsed, Failure):
        return parsed
    return commands.create_dictionary(parsed.value.name, parsed.value.language)


def clear_dictionary_raw(state: AppState, dictionary_name: str) -> Result[CommandResult]:
    name = parse_dictionary_name(dictionary_name)
    if isinstance(name, Failure):
        return name
    return commands.clear_dictionary(state, name.value)


def add_entry_raw(state: AppState, term: str, meanings: Sequence[str]) -> Result[CommandResult]:
    parsed_term = parse_term(term)
    if isinstance(parsed_term, Failure):
        return parsed_term
    parsed_meanings = parse_meanings(meanings)
    if isinstance(parsed_meanings, Failure):
        return parsed_meanings
    return commands.add_entry_meanings(state, parsed_term.value, parsed_meanings.value)


def add_entry_example_raw(state: AppState, term: str, example: str) -> Result[CommandResult]:
    parsed_term = parse_term(term)
    if isinstance(parsed_term, Failure):
        return parsed_term
    parsed_example = parse_example(example)
    if isinstance(parsed_example, Failure):
        return parsed_example
    return commands.add_entry_example(state, parsed_term.value, parsed_example.value)


def list_entry_raw(state: AppState, term: str) -> Result[CommandResult]:
    parsed_term = parse_term(term)
    if isinstance(parsed_term, Failure):
        return parsed_term
    return commands.list_entry(state, parsed_term.value)


def list_entry_meanings_raw(state: AppState, term: str) -> Result[commands.EntryMeanings]:
    parsed_term = parse_term(term)
    if isinstance(parsed_term, Failure):
        return parsed_term
    return commands.list_entry_meanings(state, parsed_term.value)


def list_entry_examples_raw(state: AppState, term: str) -> Result[commands.EntryExamples]:
    parsed_term = parse_term(term)
    if isinstance(parsed_term, Failure):
        return parsed_term
    return commands.list_entry_examples(state, parsed_term.value)


def remove_entry_raw(
    state: AppState, term: str, meaning: str | None = None
) -> Result[CommandResult]:
    parsed_term = parse_term(term)
    if isinstance(parsed_term, Failure):
        return parsed_term
    if meaning is None:
        return commands.remove_entry(state, parsed_term.value)
    parsed_meaning = parse_meaning(meaning)
    if isinstance(parsed_meaning, Failure):
        return parsed_meaning
    return commands.remove_entry(state, parsed_term.value, parsed_meaning.value)


def replace_entry_raw(
    state: AppState,
    term: str,
    meanings: Sequence[str],
    examples: Sequence[str] | None = None,
) -> Result[CommandResult]:
    parsed_term = parse_term(term)
    if isinstance(parsed_term, Failure):
        return parsed_term
    parsed_meanings = parse_meanings(meanings)
    if isinstance(parsed_meanings, Failure):
        return parsed_meanings
    parsed_examples = None
    if examples is not None:
        parsed = parse_examples(examples)
        if isinstance(parsed, Failure):
            return parsed
        parsed_examples = parsed.value
    return commands.replace_entry(
        state, parsed_term.value, parsed_meanings.value, parsed_examples
    )


async def generate_examples_raw(
    state: AppState,
    term: str,
    meaning: str,
    generator: ExampleGenerator,
    count: int | str,
) -> Result[CommandResult]:
    parsed_term = parse_term(term)
    if isinstance(parsed_term, Failure):
        return parsed_term
    parsed_meaning = parse_meaning(meaning)
    if isinstance(parsed_meaning, Failure):
        return parsed_meaning
    parsed_count = parse_example_count(count)
    if isinstance(parsed_count, Failure):
        return parsed_count
    return await commands.generate_examples(
        state, parsed_term.value, parsed_meaning.value, generator, parsed_count.value
    )
