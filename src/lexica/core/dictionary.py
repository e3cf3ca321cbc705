"""Dictionary name and language parsing."""

from __future__ import annotations

from lexica.core.entry import parse_non_empty
from lexica.core.result import Failure, Result, fail_invalid_input, succeed
from lexica.core.types import (
    Dictionary,
    DictionaryName,
    Language,
    SourceLanguage,
    TargetLanguage,
)


def parse_dictionary_name(value: object) -> Result[DictionaryName]:
    """Trimmed, non-empty, and usable as a file name."""
    parsed = parse_non_empty(value, "Invalid dictionary name")
    if isinstance(parsed, Failure):
        return parsed
    if any(sep in parsed.value for sep in ("/", "\\")) or parsed.value in (".", ".."):
        return fail_invalid_input("Invalid dictionary name")
    return succeed(DictionaryName(parsed.value))


def parse_source_language(value: object) -> Result[SourceLanguage]:
    parsed = parse_non_empty(value, "Invalid source language")
    if isinstance(parsed, Failure):
        return parsed
    return succeed(SourceLanguage(parsed.value))


def parse_target_language(value: object) -> Result[TargetLanguage]:
    parsed = parse_non_empty(value, "Invalid target language")
    if isinstance(parsed, Failure):
        return parsed
    return succeed(TargetLanguage(parsed.value))


def parse_language(source: object, target: object) -> Result[Language]:
    parsed_source = parse_source_language(source)
    if isinstance(parsed_source, Failure):
        return parsed_source
    parsed_target = parse_target_language(target)
    if isinstance(parsed_target, Failure):
        return parsed_target
    return succeed(Language(source=parsed_source.value, target=parsed_target.value))


def parse_dictionary(name: object, source: object, target: object) -> Result[Dictionary]:
    """Parse dictionary metadata from raw name/source/target; first failure wins."""
    parsed_name = parse_dictionary_name(name)
    if isinstance(parsed_name, Failure):
        return parsed_name
    language = parse_language(source, target)
    if isinstance(language, Failure):
        return language
    return succeed(Dictionary(name=parsed_name.value, language=language.value))
