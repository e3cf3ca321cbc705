"""Command handlers behind the CLI.

Each handler does one load-mutate-save cycle and returns ``Result[dict]``: the
JSON payload the CLI prints on success. Handlers take raw strings; parsing
happens in ``lexica.core.raw`` and the core parsers.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Sequence

from lexica.anki_export import export_to_anki_csv, prepare_anki_export
from lexica.config import LexicaConfig, read_config
from lexica.constants import get_config_path, get_dictionaries_dir, get_state_path
from lexica.core import commands, raw
from lexica.core.dictionary import parse_dictionary_name
from lexica.core.example import ExampleGenerator, default_example_count
from lexica.core.quiz import default_test_count, parse_test_count, parse_test_mode
from lexica.core.result import (
    Failure,
    Result,
    fail_conflict,
    fail_file_io,
    fail_invalid_input,
    fail_not_found,
    succeed,
)
from lexica.core.types import AppState, DictionaryName
from lexica.llm.example_generator import create_example_generator
from lexica.session import ConsoleTestSession, TestSession, run_test_session
from lexica.storage import (
    DictionaryStorage,
    JSONFileStorage,
    init_workspace,
    load_current_dictionary,
    save_current_dictionary,
)

logger = logging.getLogger(__name__)

Payload = dict[str, Any]


@dataclass(frozen=True)
class WorkspacePaths:
    dictionary_dir: Path
    state_path: Path
    config_path: Path

    @classmethod
    def defaults(cls) -> WorkspacePaths:
        return cls(
            dictionary_dir=get_dictionaries_dir(),
            state_path=get_state_path(),
            config_path=get_config_path(),
        )


@dataclass
class HandlerContext:
    """Everything a handler touches outside the pure core.

    Tests swap in ``MemoryStorage``, a fake generator factory, a scripted
    test session and a no-op sleep.
    """

    paths: WorkspacePaths
    storage: DictionaryStorage
    read_config: Callable[[Path], Result[LexicaConfig]] = read_config
    create_example_generator: Callable[[LexicaConfig], ExampleGenerator] = (
        create_example_generator
    )
    create_test_session: Callable[[], TestSession] = ConsoleTestSession
    log: Callable[[str], None] = print
    sleep: Callable[[float], None] = field(default=time.sleep)

    @classmethod
    def from_paths(cls, paths: WorkspacePaths, **overrides: Any) -> HandlerContext:
        return cls(paths=paths, storage=JSONFileStorage(paths.dictionary_dir), **overrides)


@dataclass(frozen=True)
class _Loaded:
    current: DictionaryName
    state: AppState


def _load_current(ctx: HandlerContext) -> Result[_Loaded]:
    name = load_current_dictionary(ctx.storage, ctx.paths.state_path)
    if isinstance(name, Failure):
        return name
    state = ctx.storage.load(name.value)
    if isinstance(state, Failure):
        return state
    return succeed(_Loaded(current=name.value, state=state.value))


def _load_target(ctx: HandlerContext, dictionary: str) -> Result[AppState]:
    """Load the dictionary named by ``-d`` for a destructive command."""
    name = parse_dictionary_name(dictionary)
    if isinstance(name, Failure):
        return name
    if not ctx.storage.exists(name.value):
        return fail_not_found("Dictionary not found")
    return ctx.storage.load(name.value)


def _save(ctx: HandlerContext, state: AppState, payload: Payload) -> Result[Payload]:
    saved = ctx.storage.save(state)
    if isinstance(saved, Failure):
        return saved
    return succeed(payload)


# ── Workspace & dictionaries ──────────────────────────────────


def handle_init(ctx: HandlerContext) -> Result[Payload]:
    paths = ctx.paths
    initialized = init_workspace(paths.dictionary_dir, paths.config_path, paths.state_path)
    if isinstance(initialized, Failure):
        return initialized
    return succeed(
        {
            "directory": str(paths.dictionary_dir),
            "config": str(paths.config_path),
            "state": str(paths.state_path),
            "status": "initialized",
        }
    )


def handle_dictionary_new(
    ctx: HandlerContext, name: str, source: str, target: str
) -> Result[Payload]:
    created = raw.create_dictionary_raw(name, source, target)
    if isinstance(created, Failure):
        return created
    dictionary = created.value.dictionary
    if ctx.storage.exists(dictionary.name):
        return fail_conflict("Dictionary already exists")
    logger.info(f"Creating dictionary {dictionary.name}")
    return _save(
        ctx,
        commands.create_state(dictionary),
        {
            "dictionary": dictionary.name,
            "source": dictionary.language.source,
            "target": dictionary.language.target,
            "status": "created",
        },
    )


def handle_dictionary_switch(ctx: HandlerContext, name: str) -> Result[Payload]:
    parsed = parse_dictionary_name(name)
    if isinstance(parsed, Failure):
        return parsed
    if not ctx.storage.exists(parsed.value):
        return fail_not_found("Dictionary not found")
    saved = save_current_dictionary(ctx.paths.state_path, parsed.value)
    if isinstance(saved, Failure):
        return saved
    return succeed({"dictionary": parsed.value, "status": "switched"})


def handle_dictionary_list(ctx: HandlerContext) -> Result[Payload]:
    names = ctx.storage.list_names()
    if isinstance(names, Failure):
        return names
    current = load_current_dictionary(ctx.storage, ctx.paths.state_path)
    return succeed(
        {
            "dictionaries": list(names.value),
            "current": current.value if not isinstance(current, Failure) else None,
        }
    )


def handle_dictionary_clear(ctx: HandlerContext, dictionary: str) -> Result[Payload]:
    loaded = _load_current(ctx)
    if isinstance(loaded, Failure):
        return loaded
    target = _load_target(ctx, dictionary)
    if isinstance(target, Failure):
        return target
    result = raw.clear_dictionary_raw(target.value, dictionary)
    if isinstance(result, Failure):
        return result
    return _save(
        ctx,
        result.value.state,
        {
            "dictionary": loaded.value.current,
            "targetDictionary": result.value.dictionary_name,
            "status": "cleared",
        },
    )


# ── Entries ───────────────────────────────────────────────────


def handle_add(ctx: HandlerContext, term: str, meanings: Sequence[str]) -> Result[Payload]:
    loaded = _load_current(ctx)
    if isinstance(loaded, Failure):
        return loaded
    result = raw.add_entry_raw(loaded.value.state, term, meanings)
    if isinstance(result, Failure):
        return result
    return _save(
        ctx,
        result.value.state,
        {"dictionary": loaded.value.current, "entry": result.value.entry.to_dict()},
    )


def handle_remove(
    ctx: HandlerContext, dictionary: str, term: str, meaning: str | None = None
) -> Result[Payload]:
    loaded = _load_current(ctx)
    if isinstance(loaded, Failure):
        return loaded
    target = _load_target(ctx, dictionary)
    if isinstance(target, Failure):
        return target
    result = raw.remove_entry_raw(target.value, term, meaning)
    if isinstance(result, Failure):
        return result
    return _save(
        ctx,
        result.value.state,
        {
            "dictionary": loaded.value.current,
            "targetDictionary": result.value.dictionary_name,
            "status": "removed",
        },
    )


def handle_replace(
    ctx: HandlerContext, dictionary: str, term: str, meanings: Sequence[str]
) -> Result[Payload]:
    loaded = _load_current(ctx)
    if isinstance(loaded, Failure):
        return loaded
    target = _load_target(ctx, dictionary)
    if isinstance(target, Failure):
        return target
    result = raw.replace_entry_raw(target.value, term, meanings)
    if isinstance(result, Failure):
        return result
    return _save(
        ctx,
        result.value.state,
        {
            "dictionary": loaded.value.current,
            "targetDictionary": result.value.dictionary_name,
            "entry": result.value.entry.to_dict(),
        },
    )


def handle_list(
    ctx: HandlerContext, term: str | None = None, section: str | None = None
) -> Result[Payload]:
    """``ls``, ``ls <term>``, ``ls <term> meanings`` and ``ls <term> examples``."""
    loaded = _load_current(ctx)
    if isinstance(loaded, Failure):
        return loaded
    state = loaded.value.state
    current = loaded.value.current

    if term is None:
        if section is not None:
            return fail_invalid_input("Term is required")
        listing = commands.list_entries(state)
        if isinstance(listing, Failure):
            return listing
        return succeed(
            {"dictionary": current, "entries": [entry.to_dict() for entry in listing.value.entries]}
        )

    if section is None:
        found = raw.list_entry_raw(state, term)
        if isinstance(found, Failure):
            return found
        return succeed({"dictionary": current, "entry": found.value.entry.to_dict()})

    if section == "meanings":
        meanings = raw.list_entry_meanings_raw(state, term)
        if isinstance(meanings, Failure):
            return meanings
        return succeed(
            {
                "dictionary": current,
                "term": meanings.value.term,
                "meanings": list(meanings.value.meanings),
            }
        )

    if section == "examples":
        examples = raw.list_entry_examples_raw(state, term)
        if isinstance(examples, Failure):
            return examples
        return succeed(
            {
                "dictionary": current,
                "term": examples.value.term,
                "examples": list(examples.value.examples),
            }
        )

    return fail_invalid_input(f"Unknown list section: {section}")


# ── Examples ──────────────────────────────────────────────────


def handle_examples_add(ctx: HandlerContext, term: str, example: str) -> Result[Payload]:
    loaded = _load_current(ctx)
    if isinstance(loaded, Failure):
        return loaded
    result = raw.add_entry_example_raw(loaded.value.state, term, example)
    if isinstance(result, Failure):
        return result
    return _save(
        ctx,
        result.value.state,
        {"dictionary": loaded.value.current, "entry": result.value.entry.to_dict()},
    )


async def handle_examples_generate(
    ctx: HandlerContext, term: str, count: str | int | None = None
) -> Result[Payload]:
    """Generate examples for the entry's first meaning and overwrite its examples."""
    loaded = _load_current(ctx)
    if isinstance(loaded, Failure):
        return loaded
    state = loaded.value.state

    found = raw.list_entry_raw(state, term)
    if isinstance(found, Failure):
        return found
    entry = found.value.entry

    config = ctx.read_config(ctx.paths.config_path)
    if isinstance(config, Failure):
        return config
    generator = ctx.create_example_generator(config.value)

    result = await raw.generate_examples_raw(
        state,
        term,
        entry.meanings[0],
        generator,
        count if count is not None else default_example_count(),
    )
    if isinstance(result, Failure):
        return result
    return _save(
        ctx,
        result.value.state,
        {"dictionary": loaded.value.current, "entry": result.value.entry.to_dict()},
    )


# ── Quiz & export ─────────────────────────────────────────────


def handle_test(
    ctx: HandlerContext, mode: str, count: str | int | None = None
) -> Result[Payload]:
    loaded = _load_current(ctx)
    if isinstance(loaded, Failure):
        return loaded
    parsed_mode = parse_test_mode(mode)
    if isinstance(parsed_mode, Failure):
        return parsed_mode
    parsed_count = parse_test_count(count) if count is not None else succeed(default_test_count())
    if isinstance(parsed_count, Failure):
        return parsed_count

    run = run_test_session(
        loaded.value.state,
        parsed_mode.value,
        parsed_count.value,
        ctx.log,
        ctx.create_test_session(),
        ctx.sleep,
    )
    if isinstance(run, Failure):
        return run
    return _save(
        ctx,
        run.value.state,
        {
            "dictionary": run.value.state.dictionary.name,
            "mode": parsed_mode.value.value,
            "asked": run.value.asked,
            "status": "tested",
        },
    )


def handle_export(
    ctx: HandlerContext, output_path: Path, dictionary: str | None = None
) -> Result[Payload]:
    """Write an Anki CSV of the current (or ``-d``) dictionary."""
    if dictionary is None:
        loaded = _load_current(ctx)
        if isinstance(loaded, Failure):
            return loaded
        state = loaded.value.state
    else:
        target = _load_target(ctx, dictionary)
        if isinstance(target, Failure):
            return target
        state = target.value

    anki_df = prepare_anki_export(state)
    try:
        export_to_anki_csv(anki_df, Path(output_path))
    except OSError as e:
        return fail_file_io(str(e) or "Failed to write export")
    logger.info(f"Exported {len(anki_df)} cards to {output_path}")
    return succeed(
        {
            "dictionary": state.dictionary.name,
            "path": str(output_path),
            "entries": len(anki_df),
            "status": "exported",
        }
    )
