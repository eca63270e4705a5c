from __future__ import annotations

from dataclasses import dataclass

from gourmand.domain.restaurant import Restaurant, SearchCriteria
from gourmand.domain.search import filter_restaurants, rank_restaurants
from gourmand.ports.restaurant_repository import RestaurantRepository

MAX_RESULTS = 5


@dataclass(frozen=True, slots=True)
class SearchResult:
    """Display-ready projection of a matched restaurant."""

    name: str
    rating: int
    distance: float
    price: float
    cuisine: str

    @classmethod
    def from_domain(cls, restaurant: Restaurant) -> SearchResult:
        return cls(
            name=restaurant.name,
            rating=restaurant.rating.value,
            distance=restaurant.distance.miles,
            price=restaurant.price.amount,
            cuisine=restaurant.cuisine.name,
        )


@dataclass(frozen=True, slots=True)
class SearchRestaurantsRequest:
    criteria: SearchCriteria


@dataclass(frozen=True, slots=True)
class SearchRestaurantsResponse:
    results: list[SearchResult]
    total_count: int  # Matching restaurants before the MAX_RESULTS cap


class SearchRestaurants:
    """
    Restaurant search: filter, rank, keep the best MAX_RESULTS.

    Criteria arrive already validated (value types cannot hold illegal
    values), so this use case only composes the repository with the
    domain search service.
    """

    def __init__(self, restaurant_repository: RestaurantRepository) -> None:
        self._repository = restaurant_repository

    def execute(self, request: SearchRestaurantsRequest) -> SearchRestaurantsResponse:
        """
        Execute a restaurant search.

        Args:
            request: Search criteria

        Returns:
            Up to MAX_RESULTS results in relevance order (empty if nothing matches)
        """
        matches = filter_restaurants(self._repository.find_all(), request.criteria)
        ranked = rank_restaurants(matches)

        return SearchRestaurantsResponse(
            results=[SearchResult.from_domain(restaurant) for restaurant in ranked[:MAX_RESULTS]],
            total_count=len(matches),
        )
