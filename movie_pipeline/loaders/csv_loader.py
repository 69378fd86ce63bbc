import logging
import os
import tempfile
from pathlib import Path

import pandas as pd

logger = logging.getLogger(__name__)


class CsvLoader:
    def __init__(self, path: str | Path):
        self.path = Path(path)

    def load(self, df: pd.DataFrame) -> Path:
        """Schreibt das DataFrame komplett oder gar nicht (temp-Datei + replace)."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.stem}_", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
                df.to_csv(f, index=False)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.info(f"{len(df)} bereinigte Datensätze gespeichert unter: {self.path}")
        return self.path
