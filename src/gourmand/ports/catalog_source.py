from __future__ import annotations

from abc import ABC, abstractmethod
from typing import BinaryIO


class CatalogSource(ABC):
    """
    Port for the raw catalog tables.

    Provides the restaurants and cuisines tables as freshly opened byte
    streams. Callers own the returned streams and must close them.
    Implementations raise DataLoadError when a stream cannot be opened.
    """

    @abstractmethod
    def open_restaurants(self) -> BinaryIO: ...

    @abstractmethod
    def open_cuisines(self) -> BinaryIO: ...
