import yaml
import logging
from pathlib import Path
import pandas as pd

# Adapter-Importe
from movie_pipeline.adapters.movies_csv_adapter import MoviesCsvAdapter

# Transformations-Importe
from movie_pipeline.transform.deduplicate import split_duplicates
from movie_pipeline.transform.clean_movies import clean_movies

# Loader-Importe
from movie_pipeline.loaders.csv_loader import CsvLoader
from movie_pipeline.utils.basic_validator import validate_dataframe
from movie_pipeline.utils.data_profile import log_profile, profile_movies, save_profile
from movie_pipeline.utils.save_aux_csv import save_aux_csv

SOURCE_NAME = "movies"

logger = logging.getLogger(__name__)


class MovieCleaningPipeline:
    """
    Bereinigt den Movies-Rohdatensatz in einem einzigen Batch-Durchlauf:
    Laden → Deduplizieren → Jahresfeld parsen → Titel/Typ → Felder casten → Schreiben.
    """

    def __init__(self, config_filename: str | Path = 'config.yaml'):
        """
        Initialisiert die Pipeline.

        Liest die Konfigurationsdatei ein und initialisiert das Logging.

        Args:
            config_filename: Der Dateiname der YAML-Konfigurationsdatei,
                             relativ zum Speicherort dieses Skripts oder absolut.

        Raises:
            FileNotFoundError: Wenn die Konfigurationsdatei nicht gefunden wird.
            yaml.YAMLError: Wenn die Konfigurationsdatei nicht gültig ist.
        """
        self.script_dir: Path = Path(__file__).resolve().parent
        config_path: Path = self.script_dir / config_filename

        if not config_path.exists():
            raise FileNotFoundError(
                f"Konfigurationsdatei nicht gefunden: {config_path}")

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                self.config: dict = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error(
                f"Fehler beim Parsen der Konfigurationsdatei {config_path}: {e}"
            )
            raise  # Ohne Config kann die Pipeline nicht arbeiten

        if self.config is None:  # yaml.safe_load kann None zurückgeben bei leerer Datei
            self.config = {}
            logger.warning(
                f"Konfigurationsdatei {config_path} ist leer oder enthält keine gültige YAML-Struktur."
            )

        log_config: dict = self.config.get('logging', {})
        level_name = log_config.get('level', 'INFO').upper()
        level_value = getattr(logging, level_name, logging.INFO)
        logging.basicConfig(
            level=level_value,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S')
        logging.getLogger().setLevel(level_value)
        self.logger = logger

        output_cfg: dict = self.config.get('output', {})
        self.validation_reports_dir: Path = self._resolve_path(
            output_cfg.get('validation_reports_path', 'data/validation_reports'))
        self.aux_output_dir: Path = self._resolve_path(
            output_cfg.get('aux_output_path', 'data/intermediate_outputs'))

    def _resolve_path(self, path_value: str | Path) -> Path:
        """
        Konvertiert einen Pfadwert aus der Konfiguration in ein absolutes Path-Objekt.

        Relative Pfade werden relativ zum Verzeichnis dieses Skripts aufgelöst.

        Raises:
            ValueError: Wenn der path_value weder ein String noch ein Path-Objekt ist.
        """
        if isinstance(path_value, Path):
            path_obj = path_value
        elif isinstance(path_value, str):
            path_obj = Path(path_value)
        else:
            self.logger.error(
                f"Ungültiger Pfadwert in Config: {path_value} (Typ: {type(path_value)})"
            )
            raise ValueError(
                f"Pfadwert muss ein String oder Path-Objekt sein: {path_value}")

        if path_obj.is_absolute():
            return path_obj
        return (self.script_dir / path_obj).resolve()

    def _extract_source(self) -> pd.DataFrame:
        source_config = dict(self.config.get("source", {}))
        if "file_path" not in source_config:
            raise ValueError("Kein 'source.file_path' in der Konfiguration definiert.")
        source_config["file_path"] = self._resolve_path(source_config["file_path"])

        adapter = MoviesCsvAdapter(source_config)
        try:
            raw_data = adapter.extract()
            return adapter.transform(raw_data)
        except Exception as e:
            # Strukturfehler: Quelle nicht lesbar oder Spalten fehlen
            self.logger.error(
                f"Fehler beim Laden der Quelle '{source_config['file_path']}': {e}")
            raise

    def _save_profile(self, profile: dict) -> None:
        if self.config.get("output", {}).get("save_profile", True):
            save_profile(profile, self.validation_reports_dir / "raw_profile.yaml")

    def _save_duplicates(self, dropped: pd.DataFrame) -> None:
        if not dropped.empty and self.config.get("output", {}).get("save_duplicates", True):
            save_aux_csv("duplicates", SOURCE_NAME, dropped, self.aux_output_dir)

    def _validate_final(self, cleaned_df: pd.DataFrame) -> None:
        report_path = self.validation_reports_dir / "Cleaned-DF_report.txt"
        invalid_path = self.validation_reports_dir / "Cleaned-DF_invalid_rows.csv"
        ok, errs = validate_dataframe(
            cleaned_df,
            df_name="Cleaned-DF",
            error_report_path=str(report_path),
            save_invalid_rows=True,
            invalid_rows_output_path=str(invalid_path))
        if not ok:
            self.logger.warning(f"Validation-Probleme im bereinigten DF: {errs}")

    def _save_final(self, cleaned_df: pd.DataFrame) -> Path:
        output_path_str = self.config.get("output", {}).get("csv_path")
        if not output_path_str:
            raise ValueError("Kein 'output.csv_path' in der Konfiguration definiert.")
        output_path = self._resolve_path(output_path_str)
        try:
            return CsvLoader(output_path).load(cleaned_df)
        except OSError as e:
            self.logger.error(
                f"Fehler beim Speichern des bereinigten DataFrames nach {output_path}: {e}",
                exc_info=True)
            raise

    def transform(self, raw_df: pd.DataFrame) -> tuple[pd.DataFrame, pd.DataFrame]:
        """
        Alle In-Memory-Schritte zwischen Laden und Schreiben, ohne Dateizugriff.

        Returns:
            (bereinigtes DataFrame, entfernte Duplikate)
        """
        kept, dropped = split_duplicates(raw_df)
        return clean_movies(kept), dropped

    def run(self) -> pd.DataFrame:
        """
        Führt die gesamte Pipeline aus und gibt das bereinigte DataFrame zurück.

        Diagnosedateien (Profil, Duplikate, Validierungsreport) werden erst nach
        dem erfolgreichen Schreiben des Outputs abgelegt.
        """
        self.logger.info("Starte Movie-Cleaning-Pipeline...")

        raw_df = self._extract_source()
        profile = profile_movies(raw_df)
        log_profile(profile)

        cleaned_df, dropped = self.transform(raw_df)
        self._save_final(cleaned_df)

        self._save_profile(profile)
        self._save_duplicates(dropped)
        self._validate_final(cleaned_df)

        self.logger.info(
            f"Pipeline abgeschlossen. {len(cleaned_df)} von {len(raw_df)} Datensätzen gespeichert.")
        return cleaned_df


if __name__ == '__main__':
    pipeline = MovieCleaningPipeline(config_filename='config.yaml')
    pipeline.run()
