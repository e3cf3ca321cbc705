"""Tests for the score engine."""

import pytest

from lexica.core.result import Failure
from lexica.core.score import (
    decrement_score,
    default_score,
    increment_score,
    parse_score,
    score_weight,
)
from lexica.core.types import Score


def test_default_score_is_zero():
    assert default_score() == 0


@pytest.mark.parametrize("value", [0, 1, 25])
def test_parse_score_accepts_non_negative_int(value):
    assert parse_score(value).value == value


@pytest.mark.parametrize("value", [-1, 1.5, "3", None, True])
def test_parse_score_rejects_invalid(value):
    result = parse_score(value)
    assert isinstance(result, Failure)
    assert result.kind == "invalid-input"


def test_increment_and_decrement():
    assert increment_score(Score(2)) == 3
    assert decrement_score(Score(2)) == 1


def test_decrement_never_below_zero():
    assert decrement_score(Score(0)) == 0


def test_score_weight_decreases_with_score():
    assert score_weight(Score(0)) == 1.0
    assert score_weight(Score(1)) == 0.5
    assert score_weight(Score(3)) == 0.25
