"""List cuisines use case."""

from __future__ import annotations

from dataclasses import dataclass

from gourmand.domain.restaurant import Cuisine
from gourmand.ports.restaurant_repository import RestaurantRepository


@dataclass(frozen=True, slots=True)
class ListCuisinesResponse:
    """Cuisines known to the catalog, in source order."""

    cuisines: list[Cuisine]


class ListCuisines:
    """Use case for showing which cuisine names a search can filter on."""

    def __init__(self, restaurant_repository: RestaurantRepository) -> None:
        self._repository = restaurant_repository

    def execute(self) -> ListCuisinesResponse:
        return ListCuisinesResponse(cuisines=list(self._repository.find_all_cuisines()))
