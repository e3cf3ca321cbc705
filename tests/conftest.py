"""Shared fixtures."""

from __future__ import annotations

import pytest
from factories import make_dictionary, make_entry

from lexica.core.types import AppState, Dictionary


@pytest.fixture
def dictionary() -> Dictionary:
    return make_dictionary()


@pytest.fixture
def empty_state(dictionary: Dictionary) -> AppState:
    return AppState(dictionary=dictionary)


@pytest.fixture
def state(dictionary: Dictionary) -> AppState:
    return AppState(
        dictionary=dictionary,
        entries=(
            make_entry("物", ["object", "thing"], ["物を置く。"]),
            make_entry("目的", ["purpose"], score=3),
        ),
    )
