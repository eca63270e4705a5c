"""CSV files implementation of CatalogSource."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO

from gourmand.domain.errors import DataLoadError
from gourmand.ports.catalog_source import CatalogSource

logger = logging.getLogger(__name__)

RESTAURANTS_FILENAME = "restaurants.csv"
CUISINES_FILENAME = "cuisines.csv"

# Dataset shipped with the package (src/gourmand/data)
PACKAGED_DATA_DIRECTORY = Path(__file__).resolve().parent.parent / "data"


class CsvDataSource(CatalogSource):
    """
    Serves restaurants.csv and cuisines.csv from a directory.

    Both files are opened once at construction so a missing or unreadable
    file fails fast, before any query runs.
    """

    def __init__(self, data_directory: Path, packaged: bool = False) -> None:
        """
        Initialize and validate the data source.

        Prefer the from_resources() / from_directory() factories.

        Args:
            data_directory: Directory holding both CSV files
            packaged: Whether the directory is the bundled dataset (affects error messages)

        Raises:
            DataLoadError: If either file cannot be opened
        """
        self._data_directory = Path(data_directory)
        self._packaged = packaged
        self.validate()

    @classmethod
    def from_resources(cls) -> CsvDataSource:
        """Data source backed by the dataset bundled with the package."""
        return cls(PACKAGED_DATA_DIRECTORY, packaged=True)

    @classmethod
    def from_directory(cls, directory: str | Path) -> CsvDataSource:
        """Data source backed by a user-supplied directory."""
        return cls(Path(directory))

    @property
    def data_directory(self) -> Path:
        return self._data_directory

    def open_restaurants(self) -> BinaryIO:
        return self._open(RESTAURANTS_FILENAME)

    def open_cuisines(self) -> BinaryIO:
        return self._open(CUISINES_FILENAME)

    def validate(self) -> None:
        """Open (and close) both files to make sure they are available."""
        with self.open_restaurants(), self.open_cuisines():
            pass
        logger.debug("Using catalog data from %s", self.data_directory)

    def _open(self, filename: str) -> BinaryIO:
        path = self._data_directory / filename

        if not path.is_file():
            if self._packaged:
                raise DataLoadError(f"Resource not found: {filename}", resource=filename)
            raise DataLoadError(f"File not found: {path}", path=str(path))

        try:
            return path.open("rb")
        except OSError as exc:
            raise DataLoadError(f"Failed to open file: {path}", path=str(path)) from exc
