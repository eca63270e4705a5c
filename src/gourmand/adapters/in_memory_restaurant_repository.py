from __future__ import annotations

from typing import Iterable

from gourmand.domain.restaurant import Cuisine, Restaurant
from gourmand.ports.restaurant_repository import RestaurantRepository


class InMemoryRestaurantRepository(RestaurantRepository):
    """
    Canonical contract implementation for tests.

    - Stores restaurants and cuisines in insertion order
    - Snapshots the inputs into tuples (callers cannot mutate the catalog)
    - Cuisines default to the distinct cuisines of the restaurants
    """

    def __init__(
        self,
        restaurants: Iterable[Restaurant],
        cuisines: Iterable[Cuisine] | None = None,
    ) -> None:
        self._restaurants = tuple(restaurants)

        if cuisines is None:
            cuisines = dict.fromkeys(restaurant.cuisine for restaurant in self._restaurants)
        self._cuisines = tuple(cuisines)

    def find_all(self) -> tuple[Restaurant, ...]:
        return self._restaurants

    def find_all_cuisines(self) -> tuple[Cuisine, ...]:
        return self._cuisines
