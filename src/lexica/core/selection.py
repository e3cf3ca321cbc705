"""Score-weighted selection of the next quiz question.

Two strategies share one weighted-sampling core:

- meanings: any entry whose term has not been asked yet in the session.
- examples: any entry that still has an unused example; the example itself is
  then chosen uniformly among the unused ones.

Weights are ``1 / (score + 1)`` so poorly remembered entries come up more
often. ``rng`` is injectable and must return floats in ``[0, 1)``.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import AbstractSet, Callable, NamedTuple, Sequence

from lexica.core.result import Failure, Result, succeed
from lexica.core.score import score_weight
from lexica.core.types import AppState, Entry, Term
from lexica.core.vocabulary import list_entries

Rng = Callable[[], float]


@dataclass(frozen=True)
class TestSelection:
    """Entry picked for the next question, plus the example in examples mode."""

    __test__ = False  # not a pytest test class

    entry: Entry
    example: str | None = None


class SelectionStrategy(NamedTuple):
    is_eligible: Callable[[Entry], bool]
    create_selection: Callable[[Entry], TestSelection | None]


def meanings_strategy(used_terms: AbstractSet[Term]) -> SelectionStrategy:
    return SelectionStrategy(
        is_eligible=lambda entry: entry.term not in used_terms,
        create_selection=lambda entry: TestSelection(entry=entry),
    )


def examples_strategy(used_examples: AbstractSet[str], rng: Rng) -> SelectionStrategy:
    def unused_examples(entry: Entry) -> list[str]:
        return [example for example in entry.examples or () if example not in used_examples]

    def create_selection(entry: Entry) -> TestSelection | None:
        examples = unused_examples(entry)
        if not examples:
            return None
        index = min(math.floor(rng() * len(examples)), len(examples) - 1)
        return TestSelection(entry=entry, example=examples[index])

    return SelectionStrategy(
        is_eligible=lambda entry: bool(unused_examples(entry)),
        create_selection=create_selection,
    )


def choose_weighted_entry(entries: Sequence[Entry], rng: Rng) -> Entry | None:
    """Inverse-CDF sampling over ``score_weight``; ties go to the earlier entry."""
    if not entries:
        return None
    total = sum(score_weight(entry.score) for entry in entries)
    pick = rng() * total
    cursor = 0.0
    for entry in entries:
        cursor += score_weight(entry.score)
        if cursor >= pick:
            return entry
    # float drift on the last step
    return entries[-1]


def select_test_entry(
    state: AppState, strategy: SelectionStrategy, rng: Rng
) -> Result[TestSelection | None]:
    entries = list_entries(state.entries)
    if isinstance(entries, Failure):
        return entries
    eligible = [entry for entry in entries.value if strategy.is_eligible(entry)]
    chosen = choose_weighted_entry(eligible, rng)
    if chosen is None:
        return succeed(None)
    return succeed(strategy.create_selection(chosen))


def select_meaning_test_entry(
    state: AppState,
    used_terms: AbstractSet[Term],
    rng: Rng = random.random,
) -> Result[TestSelection | None]:
    """Pick an entry not yet asked in this session. ``Success(None)`` when exhausted."""
    return select_test_entry(state, meanings_strategy(used_terms), rng)


def select_example_test_entry(
    state: AppState,
    used_examples: AbstractSet[str],
    rng: Rng = random.random,
) -> Result[TestSelection | None]:
    """Pick an entry with an unused example and one of those examples."""
    return select_test_entry(state, examples_strategy(used_examples, rng), rng)
