"""Restaurant search domain service.

Pure functions over in-memory restaurants: AND-semantics filtering and
relevance ranking. Both preserve the relative input order where the result
does not otherwise decide it.
"""

from __future__ import annotations

from typing import Iterable

from gourmand.domain.restaurant import Restaurant, SearchCriteria


def filter_restaurants(
    restaurants: Iterable[Restaurant], criteria: SearchCriteria
) -> list[Restaurant]:
    """
    Keep the restaurants that satisfy every specified criterion.

    Args:
        restaurants: Catalog to filter (not modified)
        criteria: Search criteria; absent fields always match

    Returns:
        Matching restaurants in input order
    """
    return [restaurant for restaurant in restaurants if _matches(restaurant, criteria)]


def rank_restaurants(matches: Iterable[Restaurant]) -> list[Restaurant]:
    """
    Sort restaurants by relevance.

    Closest first; ties go to the higher rating, then to the lower price.
    The sort is stable, so fully tied restaurants keep their input order.
    """
    return sorted(
        matches,
        key=lambda restaurant: (
            restaurant.distance.miles,
            -restaurant.rating.value,
            restaurant.price.amount,
        ),
    )


def _matches(restaurant: Restaurant, criteria: SearchCriteria) -> bool:
    if criteria.name and criteria.name.lower() not in restaurant.name.lower():
        return False
    if criteria.min_rating is not None and restaurant.rating < criteria.min_rating:
        return False
    if criteria.max_distance is not None and restaurant.distance > criteria.max_distance:
        return False
    if criteria.max_price is not None and restaurant.price > criteria.max_price:
        return False
    if (
        criteria.cuisine is not None
        and criteria.cuisine.name.lower() not in restaurant.cuisine.name.lower()
    ):
        return False
    return True
