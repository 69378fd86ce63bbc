import logging
from pathlib import Path
from typing import List

import pandas as pd
import yaml

from movie_pipeline.transform.deduplicate import DEDUP_KEY

logger = logging.getLogger(__name__)

TEXT_COLUMNS: List[str] = ["title", "genre", "description", "stars"]


def _count_untrimmed(series: pd.Series) -> int:
    text = series.astype("string")
    return int((text != text.str.strip()).fillna(False).sum())


def _is_blank(series: pd.Series) -> pd.Series:
    return series.astype("string").str.strip().fillna("") == ""


def profile_movies(df: pd.DataFrame) -> dict[str, int | dict[str, int]]:
    """
    Kennzahlen über die Rohdaten vor der Bereinigung.

    • rows, distinct_titles, distinct_title_year
    • duplicate_rows       Zeilen, die der Deduplizierer entfernen würde
    • distinct_year_values
    • untrimmed            Werte mit Rand-Whitespace je Textspalte
    • gross_present / gross_missing
    """
    profile: dict[str, int | dict[str, int]] = {"rows": int(len(df))}

    if "title" in df.columns:
        profile["distinct_titles"] = int(df["title"].nunique())
    if {"title", "year"}.issubset(df.columns):
        profile["distinct_title_year"] = int(len(df[["title", "year"]].drop_duplicates()))
    if "year" in df.columns:
        profile["distinct_year_values"] = int(df["year"].nunique())
    if set(DEDUP_KEY).issubset(df.columns):
        profile["duplicate_rows"] = int(df.duplicated(subset=DEDUP_KEY, keep="first").sum())

    profile["untrimmed"] = {
        col: _count_untrimmed(df[col]) for col in TEXT_COLUMNS if col in df.columns
    }

    if "gross" in df.columns:
        blank = _is_blank(df["gross"])
        profile["gross_missing"] = int(blank.sum())
        profile["gross_present"] = int((~blank).sum())

    return profile


def log_profile(profile: dict, name: str = "Rohdaten") -> None:
    for key, value in profile.items():
        logger.info(f"{name} – {key}: {value}")


def save_profile(profile: dict, path: str | Path) -> Path:
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(
        yaml.safe_dump(profile, sort_keys=False, allow_unicode=True), encoding="utf-8")
    logger.info(f"Datenprofil gespeichert unter {out_path}")
    return out_path
