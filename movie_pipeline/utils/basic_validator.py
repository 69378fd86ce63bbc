import logging
from typing import List, Tuple
from datetime import datetime
import pandas as pd
from pathlib import Path

logger = logging.getLogger(__name__)

CURRENT_YEAR: int = datetime.now().year
YEAR_MIN: int = 1888
YEAR_MAX: int = CURRENT_YEAR + 1
REQUIRED_BASE_COLS: List[str] = ["id", "title", "start_year", "end_year", "type"]
YEAR_COLUMNS: List[str] = ["start_year", "end_year"]
RATING_RANGE: Tuple[float, float] = (0, 10)


def validate_dataframe(
    df: pd.DataFrame,
    *,
    required_cols: List[str] | None = None,
    allow_empty: bool = True,
    df_name: str | None = None,
    log_level: int = logging.WARNING,
    error_report_path: str | None = None,
    save_invalid_rows: bool = False,
    invalid_rows_output_path: str = "invalid_rows_found.csv",
    unique_key_cols: List[str] | None = None,
) -> Tuple[bool, List[str]]:
    """
    Plausibilitätsprüfung des bereinigten Movies-DataFrames.

    Probleme werden gesammelt und geloggt, aber nie als Exception geworfen.
    Eine Eindeutigkeitsprüfung läuft nur, wenn unique_key_cols übergeben wird.

    Returns:
        (ok, Fehlermeldungen)
    """
    name = df_name or "DataFrame"
    errors: List[str] = []
    invalid_rows_parts: List[pd.DataFrame] = []

    # 0) Leerer DataFrame
    if df.empty and not allow_empty:
        errors.append(f"{name} ist leer.")

    # 1) Pflichtspalten prüfen
    req_cols = set(REQUIRED_BASE_COLS + (required_cols or []))
    missing = req_cols.difference(df.columns)
    if missing:
        errors.append(f"{name}: fehlende Spalten: {', '.join(sorted(missing))}")

    # 2) ID eindeutig
    if "id" in df.columns and df["id"].duplicated().any():
        errors.append(f"{name}: {int(df['id'].duplicated().sum())} doppelte IDs.")

    # 3) Jahre: NA erlaubt, sonst im plausiblen Bereich
    for year_col in YEAR_COLUMNS:
        if year_col not in df.columns:
            continue
        invalid_year_mask = (
            df[year_col].notna() & ~df[year_col].between(YEAR_MIN, YEAR_MAX)
        ).fillna(False).astype(bool)
        if invalid_year_mask.any():
            errors.append(
                f"{name}: {int(invalid_year_mask.sum())} Zeilen mit ungültigem Jahr "
                f"(<{YEAR_MIN} oder >{YEAR_MAX}) in Spalte '{year_col}'.")
            if save_invalid_rows:
                invalid_rows_parts.append(df[invalid_year_mask])

    if all(col in df.columns for col in YEAR_COLUMNS):
        reversed_mask = (df["end_year"] < df["start_year"]).fillna(False).astype(bool)
        if reversed_mask.any():
            errors.append(
                f"{name}: {int(reversed_mask.sum())} Zeilen mit end_year < start_year.")
            if save_invalid_rows:
                invalid_rows_parts.append(df[reversed_mask])

        # 4) type konsistent mit den Jahresfeldern
        if "type" in df.columns:
            expected = (df["start_year"].notna() & df["end_year"].notna()).map(
                {True: "Series", False: "Movie"})
            type_mask = (df["type"].astype("string") != expected).fillna(True).astype(bool)
            if type_mask.any():
                errors.append(
                    f"{name}: {int(type_mask.sum())} Zeilen mit inkonsistentem type.")
                if save_invalid_rows:
                    invalid_rows_parts.append(df[type_mask])

    # 5) Rating-Bereich
    if "rating" in df.columns:
        if not pd.api.types.is_numeric_dtype(df["rating"]):
            errors.append(
                f"{name}: Spalte rating ist nicht numerisch (dtype={df['rating'].dtype}).")
        else:
            low, high = RATING_RANGE
            bad_mask = (
                df["rating"].notna() & ~df["rating"].between(low, high)
            ).fillna(False).astype(bool)
            if bad_mask.any():
                errors.append(
                    f"{name}: {int(bad_mask.sum())} Werte außerhalb {low}–{high} in rating.")
                if save_invalid_rows:
                    invalid_rows_parts.append(df[bad_mask])

    # 6) Optional: Eindeutigkeit über die übergebenen Schlüsselspalten
    if unique_key_cols:
        missing_keys = [col for col in unique_key_cols if col not in df.columns]
        if missing_keys:
            errors.append(
                f"{name}: Schlüsselspalten fehlen: {', '.join(missing_keys)}")
        else:
            dupes = df.duplicated(subset=unique_key_cols, keep=False)
            if dupes.any():
                errors.append(
                    f"{name}: {int(dupes.sum())} Zeilen sind doppelt hinsichtlich "
                    f"({', '.join(unique_key_cols)}).")

    for msg in errors:
        logger.log(log_level, msg)

    # --- Fehlerhafte Zeilen speichern ---
    if save_invalid_rows:
        try:
            if invalid_rows_parts:
                invalid_df = pd.concat(invalid_rows_parts)
                invalid_df = invalid_df[~invalid_df.index.duplicated()]
            else:
                # Leere CSV mit Spaltenkopf erstellen
                invalid_df = df.head(0).copy()
            out_path = Path(invalid_rows_output_path)
            out_path.parent.mkdir(parents=True, exist_ok=True)
            invalid_df.to_csv(out_path, index=False)
            logger.info(
                f"{name}: Fehlerhafte Zeilen gespeichert unter {out_path} (Anzahl: {len(invalid_df)})"
            )
        except OSError as e:
            logger.error(
                f"{name}: Fehler beim Speichern fehlerhafter Zeilen: {e}")

    # --- Fehlerreport speichern ---
    if error_report_path and errors:
        try:
            rep_path = Path(error_report_path)
            rep_path.parent.mkdir(parents=True, exist_ok=True)
            rep_path.write_text("\n".join(errors), encoding="utf-8")
            logger.info(f"{name}: Fehlerreport gespeichert unter {rep_path}")
        except OSError as e:
            logger.error(
                f"{name}: Fehler beim Speichern des Fehlerreports: {e}")

    return len(errors) == 0, errors
