"""lexica command-line interface.

Usage:
    lexica init
    lexica dictionary new <name> --source <source> --target <target>
    lexica dictionary switch <name>
    lexica dictionary list
    lexica dictionary clear -d <name>
    lexica add <term> <meaning[,meaning]>
    lexica remove <term> [meaning] -d <name>
    lexica replace <term> <meaning...> -d <name>
    lexica ls [term] [meanings|examples]
    lexica examples <term> add <example>
    lexica examples <term> generate [--count N]
    lexica test <meanings|examples> [count]
    lexica export <path> [-d <name>]

Every command prints a JSON payload. Failures print
``{"error": {"kind": ..., "reason": ...}}`` and exit with code 1.
"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, List, Optional

import typer

from lexica import handlers
from lexica.config import load_env
from lexica.constants import MEANING_SEPARATOR
from lexica.core.result import Failure, Result, fail_invalid_input
from lexica.handlers import HandlerContext, WorkspacePaths

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Vocabulary notebook with AI-generated examples and recall quizzes",
    no_args_is_help=True,
)
dictionary_app = typer.Typer(help="Create, switch, list and clear dictionaries", no_args_is_help=True)
app.add_typer(dictionary_app, name="dictionary")

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def _configure_logging(verbose: int) -> None:
    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format=LOG_FORMAT)


def _print_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))


def _emit(result: Result[dict]) -> None:
    if isinstance(result, Failure):
        _print_json({"error": result.error.to_dict()})
        raise typer.Exit(1)
    _print_json(result.value)


def _context(ctx: typer.Context) -> HandlerContext:
    return ctx.obj


@app.callback()
def main_callback(
    ctx: typer.Context,
    dictionary_dir: Optional[Path] = typer.Option(
        None,
        "--dictionary-dir",
        "--dictionary",
        "-p",
        "--path",
        help="Dictionary data directory (default: $LEXICA_HOME/dictionaries)",
    ),
    state_path: Optional[Path] = typer.Option(
        None,
        "--state",
        help="State file path (default: $LEXICA_HOME/state.json)",
    ),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Config file path (default: $LEXICA_HOME/config.json)",
    ),
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Log progress to stderr (-v info, -vv debug)",
    ),
) -> None:
    """Vocabulary notebook with AI-generated examples and recall quizzes."""
    load_env()
    _configure_logging(verbose)

    if ctx.obj is None:
        defaults = WorkspacePaths.defaults()
        paths = WorkspacePaths(
            dictionary_dir=dictionary_dir or defaults.dictionary_dir,
            state_path=state_path or defaults.state_path,
            config_path=config_path or defaults.config_path,
        )
        ctx.obj = HandlerContext.from_paths(paths, log=typer.echo)
    logger.debug(f"Workspace: {ctx.obj.paths}")


@app.command()
def init(ctx: typer.Context) -> None:
    """Create the workspace directories, default config and state files."""
    _emit(handlers.handle_init(_context(ctx)))


# ── dictionary ────────────────────────────────────────────────


@dictionary_app.command("new")
def dictionary_new(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Dictionary name"),
    source: str = typer.Option(..., "--source", help="Language of the terms"),
    target: str = typer.Option(..., "--target", help="Language of the meanings"),
) -> None:
    """Create a new, empty dictionary."""
    _emit(handlers.handle_dictionary_new(_context(ctx), name, source, target))


@dictionary_app.command("switch")
def dictionary_switch(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Dictionary name"),
) -> None:
    """Make a dictionary the current one."""
    _emit(handlers.handle_dictionary_switch(_context(ctx), name))


@dictionary_app.command("list")
def dictionary_list(ctx: typer.Context) -> None:
    """List registered dictionaries and the current one."""
    _emit(handlers.handle_dictionary_list(_context(ctx)))


@dictionary_app.command("clear")
def dictionary_clear(
    ctx: typer.Context,
    dictionary: str = typer.Option(..., "--dictionary", "-d", help="Dictionary to clear"),
) -> None:
    """Remove every entry of a dictionary."""
    _emit(handlers.handle_dictionary_clear(_context(ctx), dictionary))


# ── entries ───────────────────────────────────────────────────


@app.command()
def add(
    ctx: typer.Context,
    term: str = typer.Argument(..., help="Term to add"),
    meanings: List[str] = typer.Argument(..., help="Meanings, comma separated"),
) -> None:
    """Add meanings to a term in the current dictionary."""
    split = [part for value in meanings for part in value.split(MEANING_SEPARATOR)]
    _emit(handlers.handle_add(_context(ctx), term, split))


@app.command()
def remove(
    ctx: typer.Context,
    term: str = typer.Argument(..., help="Term to remove"),
    meaning: Optional[str] = typer.Argument(None, help="Remove only this meaning"),
    dictionary: str = typer.Option(..., "--dictionary", "-d", help="Target dictionary"),
) -> None:
    """Remove a term, or one of its meanings."""
    _emit(handlers.handle_remove(_context(ctx), dictionary, term, meaning))


@app.command()
def replace(
    ctx: typer.Context,
    term: str = typer.Argument(..., help="Term to replace"),
    meanings: List[str] = typer.Argument(..., help="New meanings"),
    dictionary: str = typer.Option(..., "--dictionary", "-d", help="Target dictionary"),
) -> None:
    """Replace the meanings of a term, keeping its score."""
    _emit(handlers.handle_replace(_context(ctx), dictionary, term, meanings))


@app.command("ls")
def list_entries(
    ctx: typer.Context,
    term: Optional[str] = typer.Argument(None, help="Show a single term"),
    section: Optional[str] = typer.Argument(None, help="meanings or examples"),
) -> None:
    """List entries of the current dictionary."""
    _emit(handlers.handle_list(_context(ctx), term, section))


# ── examples ──────────────────────────────────────────────────


@app.command()
def examples(
    ctx: typer.Context,
    term: str = typer.Argument(..., help="Term the examples belong to"),
    action: str = typer.Argument(..., help="add or generate"),
    text: Optional[List[str]] = typer.Argument(None, help="Example sentence (for add)"),
    count: Optional[str] = typer.Option(
        None, "--count", "-c", help="Number of examples to generate (default: 3)"
    ),
) -> None:
    """Add an example by hand, or generate examples with the configured AI."""
    context = _context(ctx)
    if action == "add":
        if not text:
            _emit(fail_invalid_input("Example must not be empty"))
        _emit(handlers.handle_examples_add(context, term, " ".join(text)))
    elif action == "generate":
        _emit(asyncio.run(handlers.handle_examples_generate(context, term, count)))
    else:
        _emit(fail_invalid_input(f"Unknown examples action: {action}"))


# ── quiz & export ─────────────────────────────────────────────


@app.command("test")
def run_test(
    ctx: typer.Context,
    mode: str = typer.Argument(..., help="meanings or examples"),
    count: Optional[str] = typer.Argument(None, help="Number of questions (default: 10)"),
) -> None:
    """Run an interactive recall quiz."""
    _emit(handlers.handle_test(_context(ctx), mode, count))


@app.command()
def export(
    ctx: typer.Context,
    output_path: Path = typer.Argument(..., help="CSV file to write"),
    dictionary: Optional[str] = typer.Option(
        None, "--dictionary", "-d", help="Dictionary to export (default: current)"
    ),
) -> None:
    """Export a dictionary as an Anki-importable CSV."""
    _emit(handlers.handle_export(_context(ctx), output_path, dictionary))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
