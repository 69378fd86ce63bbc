# movie_pipeline/transform/clean_movies.py

import logging

import pandas as pd

from movie_pipeline.transform.normalize import normalize_fields
from movie_pipeline.transform.titles import annotate_titles, classify_types
from movie_pipeline.transform.year_tokens import parse_year_column

logger = logging.getLogger(__name__)

OUTPUT_COLUMNS: list[str] = [
    "id", "title", "start_year", "end_year", "type", "genre", "rating",
    "description", "stars", "votes", "runtime", "gross_million_dollars",
]


def clean_movies(df_input: pd.DataFrame) -> pd.DataFrame:
    """
    Bereinigt das (bereits deduplizierte) Staging-DataFrame.

    Reihenfolge: Jahresfeld parsen → römische Ziffer an Titel hängen →
    type ableiten → Felder trimmen und casten. Die Rohspalte 'year' entfällt.

    Args:
        df_input: Staging-DataFrame mit Rohtexten und 'id'.

    Returns:
        DataFrame mit den Spalten aus OUTPUT_COLUMNS.
    """
    df = df_input.copy()
    logger.info(f"Clean_movies: {len(df)} Datensätze werden bereinigt.")

    # 1. Jahresfeld → start_year, end_year, roman_suffix
    years = parse_year_column(df["year"])
    df["start_year"] = years["start_year"]
    df["end_year"] = years["end_year"]

    # 2. Titel um römische Ziffer ergänzen (vor dem Trimmen)
    df["title"] = annotate_titles(df["title"], years["roman_suffix"])
    n_annotated = int(years["roman_suffix"].notna().sum())
    if n_annotated:
        logger.info(f"Clean_movies: {n_annotated} Titel um römische Ziffer ergänzt.")

    # 3. Movie/Series
    df["type"] = classify_types(df["start_year"], df["end_year"])

    # 4. Trimmen + Casts
    df = normalize_fields(df)

    df = df.drop(columns=["year"])
    missing = [col for col in OUTPUT_COLUMNS if col not in df.columns]
    for col in missing:
        logger.warning(f"Clean_movies: Spalte '{col}' fehlt, wird mit NA ergänzt.")
        df[col] = pd.NA
    return df[OUTPUT_COLUMNS].reset_index(drop=True)
