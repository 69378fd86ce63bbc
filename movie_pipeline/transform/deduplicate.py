# movie_pipeline/transform/deduplicate.py
import logging
from typing import List, Tuple

import pandas as pd

logger = logging.getLogger(__name__)

# Zusammengesetzter Identitätsschlüssel auf den Rohtexten
DEDUP_KEY: List[str] = ["title", "year", "description", "runtime"]


def split_duplicates(
    df: pd.DataFrame,
    key: List[str] | None = None,
    id_col: str = "id",
) -> Tuple[pd.DataFrame, pd.DataFrame]:
    """
    Trennt redundante Zeilen ab.

    Pro Schlüsselgruppe bleibt genau die Zeile mit der kleinsten ID erhalten.

    Returns:
        (behaltene Zeilen, entfernte Duplikate), beide nach ID sortiert.
    """
    key = key or DEDUP_KEY
    if df.empty:
        return df.copy(), df.head(0).copy()

    ordered = df.sort_values(id_col, kind="stable")
    dupes_mask = ordered.duplicated(subset=key, keep="first")
    kept = ordered.loc[~dupes_mask].copy()
    dropped = ordered.loc[dupes_mask].copy()

    if not dropped.empty:
        logger.info(
            f"{len(dropped)} Duplikate ({', '.join(key)}) entfernt, "
            f"{len(kept)} Zeilen verbleiben.")
    return kept, dropped


def remove_duplicates(df: pd.DataFrame, key: List[str] | None = None) -> pd.DataFrame:
    kept, _ = split_duplicates(df, key=key)
    return kept
