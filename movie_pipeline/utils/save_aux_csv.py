import logging
from pathlib import Path

import pandas as pd

logger = logging.getLogger(__name__)


def _get_target_dir(kind: str, base_dir: Path) -> Path:
    """Liefert das Zielverzeichnis für eine CSV-Art (z. B. duplicates)."""
    return Path(base_dir) / kind


def save_aux_csv(kind: str, source_name: str, df: pd.DataFrame, base_dir: Path) -> Path:
    """Speichert DataFrame unter <base_dir>/<kind>/<source_name>_<kind>.csv."""
    target_dir = _get_target_dir(kind, base_dir)
    target_dir.mkdir(parents=True, exist_ok=True)
    out_path = target_dir / f"{source_name}_{kind}.csv"
    df.to_csv(out_path, index=False)
    logger.info(f"{len(df)} Zeilen ({kind}) gespeichert unter: {out_path}")
    return out_path
