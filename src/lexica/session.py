"""Interactive quiz session.

The loop picks entries with the score-weighted selection engine, asks the
user whether they remembered, and feeds the answer back into the score. Input
and output go through small injectable seams so the loop runs headless in tests.
"""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from typing import Callable, Protocol

import typer

from lexica.constants import TEST_REVEAL_DELAY_SECONDS
from lexica.core.commands import forget_entry, remember_entry
from lexica.core.quiz import TestMode
from lexica.core.result import Failure, Result, fail_invalid_input, succeed
from lexica.core.selection import (
    Rng,
    TestSelection,
    select_example_test_entry,
    select_meaning_test_entry,
)
from lexica.core.types import AppState, Term, TestCount

logger = logging.getLogger(__name__)

SEPARATOR = "----------"
YES = "y"
NO = "n"


class TestSession(Protocol):
    """Where quiz questions are asked."""

    __test__ = False  # not a pytest test class

    def ask(self, message: str) -> str: ...

    def close(self) -> None: ...


class ConsoleTestSession:
    """TestSession reading answers from the terminal."""

    __test__ = False

    def ask(self, message: str) -> str:
        return typer.prompt(message, default="", show_default=False, prompt_suffix="")

    def close(self) -> None:
        pass


@dataclass(frozen=True)
class SessionOutcome:
    state: AppState
    asked: int


@dataclass(frozen=True)
class _ModeStrategy:
    select: Callable[[AppState], Result[TestSelection | None]]
    reveal_prompt: str
    reveal: Callable[[TestSelection], bool]
    remember_prompt: str
    track: Callable[[TestSelection], None]


def _mode_strategy(mode: TestMode, log: Callable[[str], None], rng: Rng) -> _ModeStrategy:
    used_terms: set[Term] = set()
    used_examples: set[str] = set()

    if mode == TestMode.MEANINGS:

        def reveal_meanings(selection: TestSelection) -> bool:
            log(", ".join(selection.entry.meanings))
            return True

        return _ModeStrategy(
            select=lambda state: select_meaning_test_entry(state, used_terms, rng),
            reveal_prompt="enter to show meanings",
            reveal=reveal_meanings,
            remember_prompt="Do you remember?(y/n) ",
            track=lambda selection: used_terms.add(selection.entry.term),
        )

    def reveal_example(selection: TestSelection) -> bool:
        if not selection.example:
            return False
        log(f"{selection.example}\n")
        return True

    def track_example(selection: TestSelection) -> None:
        if selection.example:
            used_examples.add(selection.example)

    return _ModeStrategy(
        select=lambda state: select_example_test_entry(state, used_examples, rng),
        reveal_prompt="",
        reveal=reveal_example,
        remember_prompt="Could you read it?(y/n) ",
        track=track_example,
    )


def _ask_yes_no(session: TestSession, prompt: str) -> str:
    answer = session.ask(prompt).strip().lower()
    while answer not in (YES, NO):
        answer = session.ask(prompt).strip().lower()
    return answer


def run_test_session(
    state: AppState,
    mode: TestMode,
    count: TestCount,
    log: Callable[[str], None],
    session: TestSession,
    sleep: Callable[[float], None] = time.sleep,
    rng: Rng = random.random,
) -> Result[SessionOutcome]:
    """Ask up to ``count`` questions and return the re-scored state.

    Stops early when no eligible entry is left. The session is closed on
    every exit path.
    """
    if not isinstance(mode, TestMode):
        session.close()
        return fail_invalid_input("Invalid test mode")

    strategy = _mode_strategy(mode, log, rng)
    current = state
    asked = 0
    try:
        while asked < count:
            selection = strategy.select(current)
            if isinstance(selection, Failure):
                return selection
            if selection.value is None:
                logger.debug(f"No eligible entries left after {asked} questions")
                break

            entry = selection.value.entry
            log(f"{SEPARATOR}\n{entry.term}\n{SEPARATOR}\n")
            if strategy.reveal_prompt:
                session.ask(strategy.reveal_prompt)
            if not strategy.reveal(selection.value):
                break
            sleep(TEST_REVEAL_DELAY_SECONDS)

            answer = _ask_yes_no(session, strategy.remember_prompt)
            log("")
            if answer == YES:
                updated = remember_entry(current, entry.term)
            else:
                updated = forget_entry(current, entry.term)
            if isinstance(updated, Failure):
                return updated
            current = updated.value.state
            asked += 1
            strategy.track(selection.value)
    finally:
        session.close()

    return succeed(SessionOutcome(state=current, asked=asked))
