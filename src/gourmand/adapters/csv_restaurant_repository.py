"""CSV implementation of RestaurantRepository."""

from __future__ import annotations

import logging

from gourmand.adapters.csv_reader import read_csv
from gourmand.domain.errors import DataLoadError, DomainError
from gourmand.domain.restaurant import Cuisine, Restaurant
from gourmand.domain.values import Distance, Price, Rating
from gourmand.ports.catalog_source import CatalogSource
from gourmand.ports.restaurant_repository import RestaurantRepository

logger = logging.getLogger(__name__)

# Errors a single malformed row can raise while being mapped
ROW_ERRORS = (DomainError, ValueError, IndexError)


class CsvRestaurantRepository(RestaurantRepository):
    """
    Eagerly loaded, immutable restaurant catalog.

    - Loads cuisines first (id, name), then restaurants
      (name, customer_rating, distance, price, cuisine_id)
    - Header rows are skipped, blank lines ignored
    - A single bad row fails the whole load (no partial catalog)
    - Restaurants reference the Cuisine instances from the cuisines table
    """

    def __init__(self, source: CatalogSource) -> None:
        """
        Load the catalog from a data source.

        Args:
            source: Provider of the restaurants and cuisines tables

        Raises:
            DataLoadError: If any table is missing, empty, unreadable or invalid
        """
        self._source = source

        try:
            cuisines = self._load_cuisines()
            restaurants = self._load_restaurants(cuisines)
        except DataLoadError:
            raise
        except Exception as exc:
            raise DataLoadError("Failed to load data files") from exc

        self._cuisines = cuisines
        self._restaurants = tuple(restaurants)

    def find_all(self) -> tuple[Restaurant, ...]:
        return self._restaurants

    def find_all_cuisines(self) -> tuple[Cuisine, ...]:
        return tuple(self._cuisines.values())

    def _load_cuisines(self) -> dict[int, Cuisine]:
        logger.debug("Loading cuisines from data source")

        with self._source.open_cuisines() as stream:
            entries = read_csv(stream, self._to_cuisine_entry)

        cuisines: dict[int, Cuisine] = {}
        for cuisine_id, cuisine in entries:
            if cuisine_id in cuisines:
                raise DataLoadError(
                    f"Duplicate cuisine id: {cuisine_id}", cuisine_id=cuisine_id
                )
            cuisines[cuisine_id] = cuisine

        logger.info("Loaded %d cuisines", len(cuisines))
        return cuisines

    def _load_restaurants(self, cuisines: dict[int, Cuisine]) -> list[Restaurant]:
        logger.debug("Loading restaurants from data source")

        with self._source.open_restaurants() as stream:
            restaurants = read_csv(
                stream, lambda columns: self._to_restaurant(columns, cuisines)
            )

        logger.info("Loaded %d restaurants", len(restaurants))
        return restaurants

    @staticmethod
    def _to_cuisine_entry(columns: list[str]) -> tuple[int, Cuisine]:
        try:
            return int(columns[0]), Cuisine(columns[1])
        except ROW_ERRORS as exc:
            raise DataLoadError(
                f"Invalid cuisine data: {', '.join(columns)}", row=columns
            ) from exc

    @staticmethod
    def _to_restaurant(columns: list[str], cuisines: dict[int, Cuisine]) -> Restaurant:
        try:
            # An unknown cuisine_id yields None, which Restaurant rejects
            return Restaurant(
                name=columns[0],
                rating=Rating(int(columns[1])),
                distance=Distance(float(columns[2])),
                price=Price(float(columns[3])),
                cuisine=cuisines.get(int(columns[4])),
            )
        except ROW_ERRORS as exc:
            raise DataLoadError(
                f"Invalid restaurant data: {', '.join(columns)}", row=columns
            ) from exc
