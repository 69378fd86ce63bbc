from abc import ABC, abstractmethod

import pandas as pd


class MissingColumnsError(ValueError):
    """Quelle liefert nicht alle Pflichtspalten."""


class BaseAdapter(ABC):
    def __init__(self, source_config: dict):
        self.config = source_config

    @abstractmethod
    def extract(self) -> pd.DataFrame:
        """Lädt Rohdaten als DataFrame"""
        pass

    @abstractmethod
    def transform(self, data: pd.DataFrame) -> pd.DataFrame:
        """Bringt die Rohdaten in die einheitliche Record-Form"""
        pass
