"""Converters from raw command-line strings to domain value types.

Each converter raises ValidationError, either for text that is not a number
or for a number outside the value type's range.
"""

from __future__ import annotations

from gourmand.domain.errors import ValidationError
from gourmand.domain.restaurant import Cuisine
from gourmand.domain.values import Distance, Price, Rating


def parse_rating(value: str) -> Rating:
    try:
        stars = int(value)
    except ValueError:
        raise ValidationError(
            f"Invalid rating '{value}': must be a whole number", field="rating", value=value
        ) from None
    return Rating(stars)


def parse_distance(value: str) -> Distance:
    return Distance(_parse_number(value, "distance"))


def parse_price(value: str) -> Price:
    return Price(_parse_number(value, "price"))


def parse_cuisine(value: str) -> Cuisine:
    return Cuisine(value)


def _parse_number(value: str, field: str) -> float:
    try:
        return float(value)
    except ValueError:
        raise ValidationError(
            f"Invalid {field} '{value}': must be a number", field=field, value=value
        ) from None
