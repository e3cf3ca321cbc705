"""Score engine: recall strength of an entry and its selection weight."""

from __future__ import annotations

from lexica.constants.defaults import DEFAULT_SCORE
from lexica.core.result import Result, fail_invalid_input, succeed
from lexica.core.types import Score


def parse_score(value: object) -> Result[Score]:
    """Parse a non-negative integer into a Score."""
    # bool is an int subclass; True is not a score
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return fail_invalid_input("Score must be a non-negative integer")
    return succeed(Score(value))


def default_score() -> Score:
    return Score(DEFAULT_SCORE)


def increment_score(score: Score) -> Score:
    return Score(score + 1)


def decrement_score(score: Score) -> Score:
    """Decrement by one, never below zero."""
    return Score(max(0, score - 1))


def score_to_number(score: Score) -> int:
    return int(score)


def score_weight(score: Score) -> float:
    """Selection weight in (0, 1]: lower score, higher weight."""
    return 1 / (score_to_number(score) + 1)
