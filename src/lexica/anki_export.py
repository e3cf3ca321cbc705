"""Utilities for preparing Anki exports."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

import pandas as pd

from lexica.constants import (
    ANKI_COLUMNS,
    ANKI_EXAMPLE_SEPARATOR,
    ANKI_MEANING_SEPARATOR,
    BACK,
    EXAMPLES,
    FRONT,
    TAGS,
)
from lexica.core.types import AppState


def _validate_columns(df: pd.DataFrame, required: Iterable[str], name: str) -> None:
    if df is None:
        raise ValueError(f"{name} must be provided")
    missing = set(required) - set(df.columns)
    if missing:
        raise ValueError(f"{name} is missing required columns: {missing}")


def prepare_anki_export(state: AppState) -> pd.DataFrame:
    """Convert a dictionary's entries to an Anki-friendly dataframe.

    One row per entry, in entry order: the term on the front, meanings on the
    back, examples as an HTML line-broken field, and the dictionary name as tag.
    """
    if not state.entries:
        return pd.DataFrame(columns=ANKI_COLUMNS)

    rows = [
        {
            FRONT: entry.term,
            BACK: ANKI_MEANING_SEPARATOR.join(entry.meanings),
            EXAMPLES: ANKI_EXAMPLE_SEPARATOR.join(entry.examples or ()),
            TAGS: state.dictionary.name,
        }
        for entry in state.entries
    ]
    return pd.DataFrame(rows, columns=ANKI_COLUMNS)


def export_to_anki_csv(anki_df: pd.DataFrame, output_path: Path) -> None:
    """Export Anki dataframe to CSV."""

    _validate_columns(anki_df, ANKI_COLUMNS, "anki_df")

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    anki_df.to_csv(output_path, index=False)
