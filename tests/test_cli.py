"""End-to-end tests for the typer CLI over a temporary workspace."""

import json
import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from lexica.cli import app

runner = CliRunner()


def payload(output: str) -> dict:
    """Extract the JSON document printed after any interactive output."""
    lines = output.splitlines()
    start = lines.index("{")
    end = lines.index("}", start)
    return json.loads("\n".join(lines[start : end + 1]))


@pytest.fixture
def workspace(tmp_path: Path):
    options = [
        "--dictionary-dir",
        str(tmp_path / "dictionaries"),
        "--state",
        str(tmp_path / "state.json"),
        "--config",
        str(tmp_path / "config.json"),
    ]

    def invoke(*args: str, input: str | None = None):
        return runner.invoke(app, [*options, *args], input=input)

    assert invoke("init").exit_code == 0
    assert invoke("dictionary", "new", "ja-en", "--source", "ja", "--target", "en").exit_code == 0
    return invoke


def test_init_creates_workspace(tmp_path: Path, workspace):
    assert (tmp_path / "dictionaries" / "ja-en.json").exists()
    config = json.loads((tmp_path / "config.json").read_text())
    assert config["ai"]["provider"] == "codex"


def test_add_and_list(workspace):
    result = workspace("add", "物", "object,thing")
    assert result.exit_code == 0
    assert payload(result.output)["entry"] == {
        "term": "物",
        "meanings": ["object", "thing"],
        "score": 0,
    }

    result = workspace("ls")
    assert payload(result.output)["entries"][0]["term"] == "物"
    assert "物" in result.output  # not ascii-escaped

    result = workspace("ls", "物", "meanings")
    assert payload(result.output)["meanings"] == ["object", "thing"]


def test_error_payload_and_exit_code(workspace):
    result = workspace("ls", "無")
    assert result.exit_code == 1
    assert payload(result.output) == {"error": {"kind": "not-found", "reason": "Entry not found"}}


def test_duplicate_dictionary_is_conflict(workspace):
    result = workspace("dictionary", "new", "ja-en", "--source", "ja", "--target", "en")
    assert result.exit_code == 1
    assert payload(result.output)["error"]["kind"] == "conflict"


def test_destructive_commands_require_dictionary(workspace):
    workspace("add", "物", "object")
    assert workspace("remove", "物").exit_code != 0
    assert workspace("replace", "物", "thing").exit_code != 0
    assert workspace("dictionary", "clear").exit_code != 0


def test_remove_and_replace(workspace):
    workspace("add", "物", "object,thing")

    result = workspace("remove", "物", "thing", "-d", "ja-en")
    assert payload(result.output)["status"] == "removed"

    result = workspace("replace", "物", "item", "article", "-d", "ja-en")
    assert payload(result.output)["entry"]["meanings"] == ["item", "article"]


def test_switch_and_list_dictionaries(workspace):
    workspace("dictionary", "new", "zh-en", "--source", "zh", "--target", "en")
    assert workspace("dictionary", "switch", "zh-en").exit_code == 0

    result = workspace("dictionary", "list")
    assert payload(result.output) == {"dictionaries": ["ja-en", "zh-en"], "current": "zh-en"}


def test_examples_add(workspace):
    workspace("add", "物", "object")
    result = workspace("examples", "物", "add", "物を置く。")
    assert payload(result.output)["entry"]["examples"] == ["物を置く。"]


def test_examples_generate_with_codex(workspace):
    workspace("add", "物", "object")
    completed = subprocess.CompletedProcess(["codex"], 0, stdout="一。\n二。\n", stderr="")

    with patch("lexica.llm.providers.cli.subprocess.run", return_value=completed) as run:
        result = workspace("examples", "物", "generate", "--count", "2")

    assert result.exit_code == 0
    assert payload(result.output)["entry"]["examples"] == ["一。", "二。"]
    assert run.call_args.args[0][:2] == ["codex", "exec"]


def test_examples_generate_failure(workspace):
    workspace("add", "物", "object")
    completed = subprocess.CompletedProcess(["codex"], 1, stdout="", stderr="not logged in")

    with patch("lexica.llm.providers.cli.subprocess.run", return_value=completed), patch(
        "lexica.llm.retry.time.sleep"
    ):
        result = workspace("examples", "物", "generate")

    assert result.exit_code == 1
    assert payload(result.output)["error"] == {"kind": "ai-failed", "reason": "not logged in"}


def test_unknown_examples_action(workspace):
    workspace("add", "物", "object")
    result = workspace("examples", "物", "delete")
    assert payload(result.output)["error"]["kind"] == "invalid-input"


def test_quiz(workspace):
    workspace("add", "物", "object")
    result = workspace("test", "meanings", "3", input="\ny\n")

    assert result.exit_code == 0
    assert payload(result.output)["asked"] == 1
    entries = payload(workspace("ls").output)["entries"]
    assert entries[0]["score"] == 1


def test_export(tmp_path: Path, workspace):
    workspace("add", "物", "object,thing")
    output = tmp_path / "anki.csv"
    result = workspace("export", str(output))
    assert payload(result.output)["entries"] == 1
    assert output.exists()
