# movie_pipeline/transform/titles.py
import pandas as pd

MOVIE: str = "Movie"
SERIES: str = "Series"


def annotate_title(title: object, roman_suffix: object) -> object:
    """Hängt " <Suffix>" an den Titel, falls eine römische Ziffer vorliegt.

    Nicht idempotent: zweimal angewendet wird der Suffix doppelt angehängt.
    """
    if not isinstance(roman_suffix, str) or not roman_suffix:
        return title
    base = title if isinstance(title, str) else ""
    return f"{base} {roman_suffix}"


def annotate_titles(titles: pd.Series, roman_suffixes: pd.Series) -> pd.Series:
    annotated = [
        annotate_title(title, suffix if pd.notna(suffix) else None)
        for title, suffix in zip(titles, roman_suffixes)
    ]
    return pd.Series(annotated, index=titles.index, dtype="string")


def classify_type(start_year: object, end_year: object) -> str:
    # Laufende Serien ohne Endjahr werden als "Movie" eingestuft
    if pd.notna(start_year) and pd.notna(end_year):
        return SERIES
    return MOVIE


def classify_types(start_years: pd.Series, end_years: pd.Series) -> pd.Series:
    types = [classify_type(s, e) for s, e in zip(start_years, end_years)]
    return pd.Series(types, index=start_years.index, dtype="string")
