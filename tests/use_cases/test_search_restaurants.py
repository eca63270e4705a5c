"""
Test suite for the SearchRestaurants use case.

Verifies the orchestration: filter, rank, cap at MAX_RESULTS, and map to
SearchResult, without touching the repository's catalog.
"""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from gourmand.adapters.in_memory_restaurant_repository import InMemoryRestaurantRepository
from gourmand.domain.restaurant import Cuisine, Restaurant, SearchCriteria
from gourmand.domain.values import Distance, Price, Rating
from gourmand.ports.restaurant_repository import RestaurantRepository
from gourmand.use_cases.search_restaurants import (
    MAX_RESULTS,
    SearchRestaurants,
    SearchRestaurantsRequest,
    SearchRestaurantsResponse,
    SearchResult,
)


def make_restaurant(
    name: str,
    rating: int = 3,
    distance: float = 2.0,
    price: float = 20.0,
    cuisine: str = "Italian",
) -> Restaurant:
    return Restaurant(name, Rating(rating), Distance(distance), Price(price), Cuisine(cuisine))


@pytest.fixture()
def mock_repository() -> Mock:
    """Mock repository for testing the use case in isolation."""
    return Mock(spec=RestaurantRepository)


def search(repository: RestaurantRepository, **criteria: object) -> SearchRestaurantsResponse:
    use_case = SearchRestaurants(repository)
    return use_case.execute(SearchRestaurantsRequest(criteria=SearchCriteria(**criteria)))


# ==============================================================================
# Happy Path
# ==============================================================================


def test_execute_returns_ranked_results(mock_repository: Mock) -> None:
    mock_repository.find_all.return_value = (
        make_restaurant("Far", rating=5, distance=8.0, price=20.0),
        make_restaurant("Closest", rating=5, distance=1.0, price=45.0),
        make_restaurant("Close", rating=2, distance=1.5, price=15.0),
    )

    response = search(mock_repository)

    mock_repository.find_all.assert_called_once_with()
    assert isinstance(response, SearchRestaurantsResponse)
    assert [result.name for result in response.results] == ["Closest", "Close", "Far"]
    assert response.total_count == 3


def test_execute_filters_before_ranking(mock_repository: Mock) -> None:
    mock_repository.find_all.return_value = (
        make_restaurant("Pizza Place", distance=3.0),
        make_restaurant("Burger Joint", distance=1.0, cuisine="American"),
        make_restaurant("Pizza Express", distance=2.0),
    )

    response = search(mock_repository, name="pizza")

    assert [result.name for result in response.results] == ["Pizza Express", "Pizza Place"]
    assert response.total_count == 2


def test_execute_maps_restaurants_to_flat_results(mock_repository: Mock) -> None:
    mock_repository.find_all.return_value = (
        make_restaurant("Pizza Place", rating=4, distance=1.5, price=22.5, cuisine="italian"),
    )

    response = search(mock_repository)

    assert response.results == [
        SearchResult(name="Pizza Place", rating=4, distance=1.5, price=22.5, cuisine="Italian")
    ]


def test_execute_returns_empty_results_when_nothing_matches(mock_repository: Mock) -> None:
    mock_repository.find_all.return_value = (make_restaurant("Pizza Place"),)

    response = search(mock_repository, name="sushi")

    assert response.results == []
    assert response.total_count == 0


def test_execute_with_empty_catalog(mock_repository: Mock) -> None:
    mock_repository.find_all.return_value = ()

    assert search(mock_repository).results == []


# ==============================================================================
# Result Cap
# ==============================================================================


def test_execute_returns_first_five_of_equally_scored_in_catalog_order() -> None:
    repository = InMemoryRestaurantRepository(
        [make_restaurant(f"Restaurant {index}") for index in range(6)]
    )

    response = search(repository)

    assert [result.name for result in response.results] == [
        f"Restaurant {index}" for index in range(5)
    ]
    assert response.total_count == 6


@pytest.mark.parametrize("size", [0, 1, 5, 6, 20])
def test_execute_never_returns_more_than_max_results(size: int) -> None:
    repository = InMemoryRestaurantRepository(
        [make_restaurant(f"Restaurant {index}", distance=1.0 + index % 9) for index in range(size)]
    )

    response = search(repository)

    assert len(response.results) == min(size, MAX_RESULTS)
    assert response.total_count == size


def test_execute_keeps_best_ranked_when_capping() -> None:
    repository = InMemoryRestaurantRepository(
        [make_restaurant(f"{distance:.0f} miles", distance=distance) for distance in range(10, 0, -1)]
    )

    response = search(repository)

    assert [result.distance for result in response.results] == [1.0, 2.0, 3.0, 4.0, 5.0]


# ==============================================================================
# Catalog Integrity
# ==============================================================================


def test_execute_does_not_mutate_catalog() -> None:
    catalog = [
        make_restaurant("B", distance=5.0),
        make_restaurant("A", distance=1.0),
    ]
    repository = InMemoryRestaurantRepository(catalog)

    search(repository)

    assert [restaurant.name for restaurant in repository.find_all()] == ["B", "A"]
