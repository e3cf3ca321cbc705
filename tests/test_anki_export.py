from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest
from factories import make_entry

from lexica.anki_export import export_to_anki_csv, prepare_anki_export
from lexica.core.types import AppState


def test_prepare_anki_export_basic(state: AppState):
    anki_df = prepare_anki_export(state)

    assert list(anki_df.columns) == ["front", "back", "examples", "tags"]
    assert list(anki_df["front"]) == ["物", "目的"]
    assert list(anki_df["back"]) == ["object; thing", "purpose"]
    assert list(anki_df["examples"]) == ["物を置く。", ""]
    assert all(tag == "ja-en" for tag in anki_df["tags"])


def test_prepare_anki_export_joins_examples(dictionary):
    state = AppState(dictionary=dictionary, entries=(make_entry("a", ["1"], ["x", "y"]),))
    assert prepare_anki_export(state)["examples"].iloc[0] == "x<br>y"


def test_prepare_anki_export_empty(empty_state: AppState):
    anki_df = prepare_anki_export(empty_state)
    assert anki_df.empty
    assert list(anki_df.columns) == ["front", "back", "examples", "tags"]


def test_export_to_anki_csv(tmp_path: Path, state: AppState):
    anki_df = prepare_anki_export(state)
    output_file = tmp_path / "out" / "anki.csv"

    export_to_anki_csv(anki_df, output_file)

    loaded = pd.read_csv(output_file, keep_default_na=False)
    pd.testing.assert_frame_equal(anki_df, loaded)


def test_export_to_anki_csv_requires_columns(tmp_path: Path):
    with pytest.raises(ValueError, match="missing required columns"):
        export_to_anki_csv(pd.DataFrame({"front": ["x"]}), tmp_path / "anki.csv")
