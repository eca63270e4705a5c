from __future__ import annotations

from gourmand.domain.restaurant import SearchCriteria
from gourmand.entrypoints.cli.converters import (
    parse_cuisine,
    parse_distance,
    parse_price,
    parse_rating,
)
from gourmand.entrypoints.cli.dtos.search import SearchQueryDTO
from gourmand.use_cases.search_restaurants import SearchRestaurantsRequest


class SearchMapper:
    """Maps command-line DTOs to domain search requests."""

    @staticmethod
    def to_domain_criteria(dto: SearchQueryDTO) -> SearchCriteria:
        """
        Converts raw option strings to validated domain criteria.

        Args:
            dto: Raw search options

        Returns:
            SearchCriteria with value types for every given option

        Raises:
            ValidationError: If any option is malformed or out of range
        """
        return SearchCriteria(
            name=dto.name,
            min_rating=parse_rating(dto.rating) if dto.rating is not None else None,
            max_distance=parse_distance(dto.distance) if dto.distance is not None else None,
            max_price=parse_price(dto.price) if dto.price is not None else None,
            cuisine=parse_cuisine(dto.cuisine) if dto.cuisine is not None else None,
        )

    @staticmethod
    def to_domain_request(dto: SearchQueryDTO) -> SearchRestaurantsRequest:
        return SearchRestaurantsRequest(criteria=SearchMapper.to_domain_criteria(dto))
