"""Example count parsing and the example-generator contract."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from lexica.constants.defaults import DEFAULT_EXAMPLE_COUNT, MIN_EXAMPLE_COUNT
from lexica.core.result import Result, fail_invalid_input, succeed
from lexica.core.types import DictionaryName, ExampleCount, Language, Meaning, Term


def parse_positive_int(value: object, minimum: int) -> int | None:
    """Coerce an int or numeric string to an int >= minimum, else None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            return None
    if not isinstance(value, int) or value < minimum:
        return None
    return value


def parse_example_count(value: object) -> Result[ExampleCount]:
    parsed = parse_positive_int(value, MIN_EXAMPLE_COUNT)
    if parsed is None:
        return fail_invalid_input("Invalid example count")
    return succeed(ExampleCount(parsed))


def default_example_count() -> ExampleCount:
    return ExampleCount(DEFAULT_EXAMPLE_COUNT)


@dataclass(frozen=True)
class ExampleRequest:
    """Input handed to an example generator."""

    dictionary_name: DictionaryName
    language: Language
    term: Term
    meaning: Meaning
    count: ExampleCount


class ExampleGenerator(Protocol):
    """Async capability producing example sentences for a term/meaning pair."""

    async def __call__(self, request: ExampleRequest) -> Result[list[str]]: ...
