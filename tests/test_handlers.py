"""Tests for CLI command handlers over in-memory storage."""

import asyncio
from pathlib import Path

import pandas as pd
import pytest
from factories import make_dictionary, make_entry

from lexica.config import LexicaConfig
from lexica.core.result import fail_ai, fail_file_io, succeed
from lexica.core.types import AppState
from lexica.handlers import (
    HandlerContext,
    WorkspacePaths,
    handle_add,
    handle_dictionary_clear,
    handle_dictionary_list,
    handle_dictionary_new,
    handle_dictionary_switch,
    handle_examples_add,
    handle_examples_generate,
    handle_export,
    handle_init,
    handle_list,
    handle_remove,
    handle_replace,
    handle_test,
)
from lexica.storage import MemoryStorage, save_current_dictionary


class ScriptedSession:
    def __init__(self, answers):
        self.answers = list(answers)
        self.closed = False

    def ask(self, message):
        return self.answers.pop(0)

    def close(self):
        self.closed = True


@pytest.fixture
def paths(tmp_path: Path) -> WorkspacePaths:
    return WorkspacePaths(
        dictionary_dir=tmp_path / "dictionaries",
        state_path=tmp_path / "state.json",
        config_path=tmp_path / "config.json",
    )


@pytest.fixture
def storage(state: AppState) -> MemoryStorage:
    other = AppState(
        dictionary=make_dictionary("zh-en", "zh", "en"),
        entries=(make_entry("东西", ["thing"]),),
    )
    return MemoryStorage([state, other])


@pytest.fixture
def ctx(paths: WorkspacePaths, storage: MemoryStorage) -> HandlerContext:
    return HandlerContext(
        paths=paths,
        storage=storage,
        read_config=lambda path: succeed(LexicaConfig()),
        log=lambda message: None,
        sleep=lambda seconds: None,
    )


class TestDictionaryHandlers:
    def test_new(self, ctx, storage):
        result = handle_dictionary_new(ctx, "de-en", "German", "English")
        assert result.value == {
            "dictionary": "de-en",
            "source": "German",
            "target": "English",
            "status": "created",
        }
        assert storage.load("de-en").value.entries == ()

    def test_new_conflict(self, ctx):
        result = handle_dictionary_new(ctx, "ja-en", "ja", "en")
        assert result.kind == "conflict"
        assert result.reason == "Dictionary already exists"

    def test_new_invalid_language(self, ctx):
        assert handle_dictionary_new(ctx, "x", " ", "en").kind == "invalid-input"

    def test_switch(self, ctx, paths):
        assert handle_dictionary_switch(ctx, "zh-en").value["status"] == "switched"
        assert handle_add(ctx, "人", ["person"]).value["dictionary"] == "zh-en"

    def test_switch_missing(self, ctx):
        assert handle_dictionary_switch(ctx, "fr-en").kind == "not-found"

    def test_list(self, ctx):
        assert handle_dictionary_list(ctx).value == {
            "dictionaries": ["ja-en", "zh-en"],
            "current": "ja-en",
        }

    def test_clear_target(self, ctx, storage):
        result = handle_dictionary_clear(ctx, "zh-en")
        assert result.value == {
            "dictionary": "ja-en",
            "targetDictionary": "zh-en",
            "status": "cleared",
        }
        assert storage.load("zh-en").value.entries == ()
        assert len(storage.load("ja-en").value.entries) == 2

    def test_clear_missing_target(self, ctx):
        assert handle_dictionary_clear(ctx, "fr-en").kind == "not-found"


class TestEntryHandlers:
    def test_add_uses_current_dictionary(self, ctx, storage):
        result = handle_add(ctx, "物", ["item"])
        assert result.value["dictionary"] == "ja-en"
        assert result.value["entry"]["meanings"] == ["object", "thing", "item"]
        assert storage.load("ja-en").value.entries[0].meanings[-1] == "item"

    def test_add_without_dictionaries(self, paths):
        ctx = HandlerContext(paths=paths, storage=MemoryStorage())
        assert handle_add(ctx, "物", ["object"]).kind == "not-found"

    def test_add_invalid_input_saves_nothing(self, ctx, storage):
        before = storage.load("ja-en").value
        assert handle_add(ctx, "物", ["ok", " "]).kind == "invalid-input"
        assert storage.load("ja-en").value is before

    def test_remove_meaning_in_target(self, ctx, storage):
        result = handle_remove(ctx, "ja-en", "物", "thing")
        assert result.value["status"] == "removed"
        assert storage.load("ja-en").value.entries[0].meanings == ("object",)

    def test_remove_term_in_other_dictionary(self, ctx, storage):
        result = handle_remove(ctx, "zh-en", "东西")
        assert result.value["targetDictionary"] == "zh-en"
        assert storage.load("zh-en").value.entries == ()

    def test_replace(self, ctx):
        result = handle_replace(ctx, "ja-en", "目的", ["goal"])
        assert result.value["entry"] == {"term": "目的", "meanings": ["goal"], "score": 3}

    def test_save_failure_is_reported(self, ctx, storage, monkeypatch):
        monkeypatch.setattr(storage, "save", lambda state: fail_file_io("disk full"))
        result = handle_add(ctx, "物", ["item"])
        assert result.kind == "file-io"
        assert result.reason == "disk full"


class TestListHandler:
    def test_all_entries(self, ctx):
        result = handle_list(ctx)
        assert [e["term"] for e in result.value["entries"]] == ["物", "目的"]

    def test_single_entry(self, ctx):
        assert handle_list(ctx, "目的").value["entry"]["score"] == 3

    def test_meanings(self, ctx):
        assert handle_list(ctx, "物", "meanings").value == {
            "dictionary": "ja-en",
            "term": "物",
            "meanings": ["object", "thing"],
        }

    def test_examples(self, ctx):
        assert handle_list(ctx, "目的", "examples").value["examples"] == []

    def test_unknown_section(self, ctx):
        assert handle_list(ctx, "物", "scores").kind == "invalid-input"

    def test_missing_term(self, ctx):
        assert handle_list(ctx, "無").kind == "not-found"


class TestExampleHandlers:
    def test_add_example(self, ctx):
        result = handle_examples_add(ctx, "目的", "目的は何ですか。")
        assert result.value["entry"]["examples"] == ["目的は何ですか。"]

    def test_generate_uses_first_meaning(self, ctx, storage):
        requests = []

        async def generator(request):
            requests.append(request)
            return succeed(["一。", "二。", "三。"])

        ctx.create_example_generator = lambda config: generator
        result = asyncio.run(handle_examples_generate(ctx, "物"))

        assert result.value["entry"]["examples"] == ["一。", "二。", "三。"]
        assert requests[0].meaning == "object"
        assert requests[0].count == 3
        assert storage.load("ja-en").value.entries[0].examples == ("一。", "二。", "三。")

    def test_generate_failure_keeps_examples(self, ctx, storage):
        async def generator(request):
            return fail_ai("quota exceeded")

        ctx.create_example_generator = lambda config: generator
        result = asyncio.run(handle_examples_generate(ctx, "物", "2"))

        assert result.kind == "ai-failed"
        assert storage.load("ja-en").value.entries[0].examples == ("物を置く。",)

    def test_generate_config_error(self, ctx):
        ctx.read_config = lambda path: fail_file_io("Config file not found")
        result = asyncio.run(handle_examples_generate(ctx, "物"))
        assert result.reason == "Config file not found"

    def test_generate_bad_count(self, ctx):
        async def generator(request):
            raise AssertionError("not called")

        ctx.create_example_generator = lambda config: generator
        assert asyncio.run(handle_examples_generate(ctx, "物", "zero")).kind == "invalid-input"


class TestQuizAndExport:
    def test_test_session(self, ctx, storage):
        ctx.create_test_session = lambda: ScriptedSession(["", "y"])
        result = handle_test(ctx, "meanings", "1")
        assert result.value == {
            "dictionary": "ja-en",
            "mode": "meanings",
            "asked": 1,
            "status": "tested",
        }
        assert sum(e.score for e in storage.load("ja-en").value.entries) == 4

    def test_test_invalid_mode(self, ctx):
        assert handle_test(ctx, "spelling").kind == "invalid-input"

    def test_test_invalid_count(self, ctx):
        assert handle_test(ctx, "meanings", "-1").kind == "invalid-input"

    def test_export_current(self, ctx, tmp_path):
        output = tmp_path / "anki.csv"
        result = handle_export(ctx, output)
        assert result.value["entries"] == 2
        assert list(pd.read_csv(output)["front"]) == ["物", "目的"]

    def test_export_named(self, ctx, tmp_path):
        result = handle_export(ctx, tmp_path / "zh.csv", "zh-en")
        assert result.value["dictionary"] == "zh-en"


def test_init(ctx, paths):
    result = handle_init(ctx)
    assert result.value["status"] == "initialized"
    assert paths.config_path.exists()
    assert paths.dictionary_dir.is_dir()


def test_state_file_selects_dictionary(ctx, paths):
    save_current_dictionary(paths.state_path, "zh-en")
    assert handle_list(ctx).value["dictionary"] == "zh-en"
