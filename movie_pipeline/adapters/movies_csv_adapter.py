# movie_pipeline/adapters/movies_csv_adapter.py
import logging
from typing import List

import pandas as pd

from movie_pipeline.adapters.base_adapter import BaseAdapter, MissingColumnsError

logger = logging.getLogger(__name__)

RAW_FIELDS: List[str] = [
    "title", "year", "genre", "rating", "description",
    "stars", "votes", "runtime", "gross",
]

# Kaggle "movies.csv" Header → Standardnamen
DEFAULT_COLUMN_MAPPING: dict[str, str] = {
    "MOVIES": "title",
    "YEAR": "year",
    "GENRE": "genre",
    "RATING": "rating",
    "ONE-LINE": "description",
    "STARS": "stars",
    "VOTES": "votes",
    "RunTime": "runtime",
    "Gross": "gross",
}


class MoviesCsvAdapter(BaseAdapter):
    """Movies-Rohdaten als Staging-DataFrame.

    • id        Int64, fortlaufend ab 1 in Dateireihenfolge, stabil bis zum Output
    • übrige    Rohtext (str), leere Zellen als "" statt NaN
    """

    # ------------------------------------------------------------ #
    # 1) Extract                                                   #
    # ------------------------------------------------------------ #
    def extract(self) -> pd.DataFrame:  # type: ignore[override]
        path = self.config["file_path"]
        logger.info(f"Lese Rohdaten aus {path}")
        return pd.read_csv(
            path,
            dtype=str,
            na_filter=False,
            encoding=self.config.get("encoding", "utf-8"),
        )

    # ------------------------------------------------------------ #
    # 2) Transform                                                 #
    # ------------------------------------------------------------ #
    def transform(self, df: pd.DataFrame) -> pd.DataFrame:  # type: ignore[override]
        mapping = self.config.get("column_mapping") or DEFAULT_COLUMN_MAPPING
        df = df.rename(columns=mapping)

        missing = [col for col in RAW_FIELDS if col not in df.columns]
        if missing:
            raise MissingColumnsError(
                f"Quelle {self.config.get('file_path')}: fehlende Spalten: {', '.join(missing)}")

        result = df[RAW_FIELDS].copy()
        # Stabile zeilenbasierte ID, die von Anfang an gilt und nicht neu nummeriert wird
        result.insert(0, "id", pd.array(range(1, len(result) + 1), dtype="Int64"))
        result = result.reset_index(drop=True)
        logger.info(f"{len(result)} Rohdatensätze geladen.")
        return result
