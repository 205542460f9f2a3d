from __future__ import annotations

from typing import Any, Sequence

import pandas as pd

from .models import CARBS, MAIN_GENRES, MenuRecord

FRAME_COLUMNS: list[str] = ["id", "name", "main_genre", "carb"]


def to_dataframe(records: Sequence[MenuRecord]) -> pd.DataFrame:
    """Return the catalog as a DataFrame, one row per record in source order."""
    rows = [
        {
            "id": r.id,
            "name": r.name,
            "main_genre": r.main_genre.value,
            "carb": r.carb.value,
        }
        for r in records
    ]
    return pd.DataFrame(rows, columns=FRAME_COLUMNS)


def summarize(records: Sequence[MenuRecord]) -> dict[str, Any]:
    """Count records per genre and per carb.

    Every vocabulary value is present in the result, with 0 where the
    catalog has no matching record.
    """
    df = to_dataframe(records)
    by_genre = df["main_genre"].value_counts().reindex(MAIN_GENRES, fill_value=0)
    by_carb = df["carb"].value_counts().reindex(CARBS, fill_value=0)
    return {
        "total": len(df),
        "by_genre": {k: int(v) for k, v in by_genre.items()},
        "by_carb": {k: int(v) for k, v in by_carb.items()},
    }
