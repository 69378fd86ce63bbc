# movie_pipeline/transform/normalize.py
import logging
import re
from dataclasses import dataclass

import pandas as pd

logger = logging.getLogger(__name__)

_INT_RE = re.compile(r"[+-]?\d+")
_DECIMAL_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")

TEXT_FIELDS: list[str] = ["title", "genre", "description", "stars"]


@dataclass(frozen=True)
class FieldRule:
    """Deklarative Umwandlung einer Rohspalte."""

    target: str
    kind: str  # "int" | "decimal"
    remove: tuple[str, ...] = ()
    prefix: str = ""
    suffix: str = ""


# Rohspalte → Zielspalte + Cast
FIELD_RULES: dict[str, FieldRule] = {
    "rating": FieldRule(target="rating", kind="decimal"),
    "votes": FieldRule(target="votes", kind="int", remove=(",",)),
    "runtime": FieldRule(target="runtime", kind="int"),
    "gross": FieldRule(target="gross_million_dollars", kind="decimal",
                       prefix="$", suffix="M"),
}

_DTYPES = {"int": "Int64", "decimal": "Float64"}


def parse_int(value: object) -> int | None:
    if not isinstance(value, str):
        return None
    text = value.strip()
    return int(text) if _INT_RE.fullmatch(text) else None


def parse_decimal(value: object) -> float | None:
    if not isinstance(value, str):
        return None
    text = value.strip()
    return float(text) if _DECIMAL_RE.fullmatch(text) else None


_PARSERS = {"int": parse_int, "decimal": parse_decimal}


def apply_rule(value: object, rule: FieldRule) -> int | float | None:
    """Wendet eine FieldRule auf einen Einzelwert an; Fehler → None."""
    if not isinstance(value, str):
        return None
    text = value.strip()
    for token in rule.remove:
        text = text.replace(token, "")
    if rule.prefix:
        text = text.removeprefix(rule.prefix)
    if rule.suffix:
        text = text.removesuffix(rule.suffix)
    return _PARSERS[rule.kind](text)


def strip_text(series: pd.Series) -> pd.Series:
    # nur Rand-Whitespace, innere Leerzeichen bleiben
    return series.astype("string").str.strip()


def normalize_fields(
    df: pd.DataFrame,
    rules: dict[str, FieldRule] | None = None,
    text_fields: list[str] | None = None,
) -> pd.DataFrame:
    """
    Trimmt Textspalten und castet numerische Rohspalten gemäß FIELD_RULES.

    Jede Umwandlung ist pro Feld unabhängig; nicht konvertierbare Werte
    werden zu NA und nur als Info geloggt.

    Args:
        df: Staging-DataFrame mit Rohtexten.
        rules: Optionale Überschreibung von FIELD_RULES.
        text_fields: Optionale Überschreibung von TEXT_FIELDS.

    Returns:
        Neues DataFrame; umbenannte Rohspalten werden ersetzt.
    """
    rules = FIELD_RULES if rules is None else rules
    text_fields = TEXT_FIELDS if text_fields is None else text_fields
    out = df.copy()

    for col in text_fields:
        if col in out.columns:
            out[col] = strip_text(out[col])

    for source_col, rule in rules.items():
        if source_col not in out.columns:
            logger.warning(f"Spalte '{source_col}' fehlt – Umwandlung übersprungen.")
            continue
        raw = out[source_col]
        converted = pd.array([apply_rule(v, rule) for v in raw], dtype=_DTYPES[rule.kind])

        present = raw.astype("string").str.strip().fillna("") != ""
        n_failed = int((present & pd.Series(converted, index=raw.index).isna()).sum())
        if n_failed:
            logger.info(f"{source_col}: {n_failed} Werte nicht konvertierbar → NA.")

        if rule.target != source_col:
            out = out.drop(columns=[source_col])
        out[rule.target] = pd.Series(converted, index=raw.index)

    return out
