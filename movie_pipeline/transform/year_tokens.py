# movie_pipeline/transform/year_tokens.py
"""
Zerlegt das freie Jahresfeld des Movies-Datensatzes in Tokens.

Das Feld mischt mehrere Formate in einer Zelle:
  • "(2019)"              einzelnes Jahr
  • "(2019–2021)"         Zeitraum (Halbgeviertstrich U+2013)
  • "(2019– )"            laufende Serie, Endjahr fehlt
  • "(2019) (I)"          Jahr + römische Ziffer zur Unterscheidung gleicher Titel
  • "(I)", "" , Müll      → alles unbekannt

Jede Gruppe wird als eigenes Token klassifiziert (YearToken | RomanToken |
UnknownToken). Das Parsen wirft nie eine Exception, sondern liefert NA.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass

import pandas as pd

logger = logging.getLogger(__name__)

RANGE_SEPARATOR: str = "–"
TOKEN_DELIMITER: str = "|"

# Höchster beobachteter Wert im Datensatz ist (XLI)
ROMAN_TOKENS: frozenset[str] = frozenset(
    f"({numeral})" for numeral in (
        "I", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX", "X",
        "XI", "XII", "XIII", "XIV", "XV", "XVI", "XVII", "XVIII", "XIX",
        "XX", "XXI", "XXII", "XXIII", "XLI",
    ))

_ADJACENT_GROUPS = re.compile(r"\)\s*\(")
_INT_PATTERN = re.compile(r"[+-]?\d+")


@dataclass(frozen=True)
class YearToken:
    text: str


@dataclass(frozen=True)
class RomanToken:
    text: str


@dataclass(frozen=True)
class UnknownToken:
    text: str


Token = YearToken | RomanToken | UnknownToken


@dataclass(frozen=True)
class YearInfo:
    """Ergebnis des Parsens: (start_year, end_year, roman_suffix), je optional."""

    start_year: int | None = None
    end_year: int | None = None
    roman_suffix: str | None = None
    ambiguous: bool = False


def _strip_parens(token: str) -> str:
    inner = token[1:] if token.startswith("(") else token
    return inner[:-1] if inner.endswith(")") else inner


def _to_int(text: str) -> int | None:
    text = text.strip()
    if not _INT_PATTERN.fullmatch(text):
        return None
    return int(text)


def split_year_field(raw: object) -> list[str]:
    """Trennt aneinanderhängende Klammergruppen in einzelne, getrimmte Strings."""
    if not isinstance(raw, str):
        return []
    delimited = _ADJACENT_GROUPS.sub(f"){TOKEN_DELIMITER}(", raw)
    parts = (part.strip() for part in delimited.split(TOKEN_DELIMITER))
    return [part for part in parts if part]


def classify_token(token: str) -> Token:
    if token in ROMAN_TOKENS:
        return RomanToken(token)
    inner = _strip_parens(token)
    if inner[:1].isdigit():
        return YearToken(token)
    return UnknownToken(token)


def tokenize_year_field(raw: object) -> list[Token]:
    return [classify_token(part) for part in split_year_field(raw)]


def parse_year_token(token: YearToken) -> tuple[int | None, int | None]:
    """Start-/Endjahr aus einem Jahr-Token; leeres oder ungültiges Endjahr → None."""
    inner = _strip_parens(token.text)
    if RANGE_SEPARATOR in inner:
        start_text, end_text = inner.split(RANGE_SEPARATOR, 1)
        return _to_int(start_text), _to_int(end_text)
    return _to_int(inner), None


def parse_year_field(raw: object) -> YearInfo:
    """
    Parst ein rohes Jahresfeld.

    Mehrere Jahr- oder Roman-Tokens pro Feld werden deterministisch über das
    lexikografisch kleinste Token aufgelöst (entspricht MIN() über die Tokens).
    """
    tokens = tokenize_year_field(raw)
    year_texts = [t.text for t in tokens if isinstance(t, YearToken)]
    roman_texts = [t.text for t in tokens if isinstance(t, RomanToken)]

    start_year = end_year = None
    if year_texts:
        start_year, end_year = parse_year_token(YearToken(min(year_texts)))

    return YearInfo(
        start_year=start_year,
        end_year=end_year,
        roman_suffix=min(roman_texts) if roman_texts else None,
        ambiguous=len(year_texts) > 1 or len(roman_texts) > 1,
    )


def parse_year_column(years: pd.Series) -> pd.DataFrame:
    """
    Wendet parse_year_field auf eine ganze Spalte an.

    Returns:
        DataFrame mit gleichem Index und den Spalten
        start_year (Int64), end_year (Int64), roman_suffix (string).
    """
    parsed = [parse_year_field(value) for value in years]

    n_ambiguous = sum(info.ambiguous for info in parsed)
    if n_ambiguous:
        logger.info(
            f"{n_ambiguous} Jahresfelder mit mehreren Jahr- oder Roman-Tokens; "
            f"kleinstes Token gewählt.")
    n_unparsed = sum(info.start_year is None for info in parsed)
    if n_unparsed:
        logger.info(f"{n_unparsed} Jahresfelder ohne verwertbares Startjahr → NA.")

    return pd.DataFrame(
        {
            "start_year": pd.array([i.start_year for i in parsed], dtype="Int64"),
            "end_year": pd.array([i.end_year for i in parsed], dtype="Int64"),
            "roman_suffix": pd.array([i.roman_suffix for i in parsed], dtype="string"),
        },
        index=years.index,
    )
