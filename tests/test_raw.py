"""Tests for the raw-string command boundary."""

import asyncio

from lexica.core.raw import (
    add_entry_example_raw,
    add_entry_raw,
    clear_dictionary_raw,
    create_dictionary_raw,
    generate_examples_raw,
    list_entry_examples_raw,
    list_entry_meanings_raw,
    list_entry_raw,
    remove_entry_raw,
    replace_entry_raw,
)
from lexica.core.result import succeed


async def never_called(request):
    raise AssertionError("generator must not run")


def test_add_entry_raw_trims_inputs(empty_state):
    result = add_entry_raw(empty_state, "  物 ", [" object", "thing "])
    assert result.value.entry.term == "物"
    assert result.value.entry.meanings == ("object", "thing")


def test_add_entry_raw_bad_meaning_applies_nothing(state):
    result = add_entry_raw(state, "物", ["new", ""])
    assert result.kind == "invalid-input"


def test_add_entry_raw_empty_term(state):
    assert add_entry_raw(state, " ", ["x"]).reason == "Term must not be empty"


def test_create_dictionary_raw():
    result = create_dictionary_raw("en-ja", "english", "japanese")
    assert result.value.dictionary.name == "en-ja"
    assert create_dictionary_raw("en-ja", "", "japanese").kind == "invalid-input"


def test_clear_dictionary_raw(state):
    assert clear_dictionary_raw(state, " ja-en ").value.state.entries == ()
    assert clear_dictionary_raw(state, "").kind == "invalid-input"


def test_remove_entry_raw(state):
    assert remove_entry_raw(state, "物", "thing").value.entry.meanings == ("object",)
    assert remove_entry_raw(state, "物", " ").kind == "invalid-input"
    assert [e.term for e in remove_entry_raw(state, "物").value.state.entries] == ["目的"]


def test_replace_entry_raw(state):
    result = replace_entry_raw(state, "目的", ["goal", "aim"])
    assert result.value.entry.meanings == ("goal", "aim")
    assert result.value.entry.score == 3
    assert replace_entry_raw(state, "目的", []).kind == "invalid-input"
    assert replace_entry_raw(state, "目的", ["goal"], ["  "]).kind == "invalid-input"


def test_list_raw(state):
    assert list_entry_raw(state, "物").value.entry.term == "物"
    assert list_entry_meanings_raw(state, "目的").value.meanings == ("purpose",)
    assert list_entry_examples_raw(state, "物").value.examples == ("物を置く。",)
    assert list_entry_raw(state, "無").kind == "not-found"


def test_add_entry_example_raw(state):
    assert add_entry_example_raw(state, "目的", " 目的は何？ ").value.entry.examples == (
        "目的は何？",
    )
    assert add_entry_example_raw(state, "目的", "").kind == "invalid-input"


def test_generate_examples_raw_rejects_bad_count(state):
    result = asyncio.run(generate_examples_raw(state, "物", "object", never_called, "0"))
    assert result.kind == "invalid-input"
    assert result.reason == "Invalid example count"


def test_generate_examples_raw_parses_count(state):
    seen = []

    async def generator(request):
        seen.append(request.count)
        return succeed(["a", "b"])

    result = asyncio.run(generate_examples_raw(state, "物", "object", generator, "2"))
    assert seen == [2]
    assert result.value.entry.examples == ("a", "b")
