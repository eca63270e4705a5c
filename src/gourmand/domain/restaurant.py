from __future__ import annotations

import re
from dataclasses import dataclass

from gourmand.domain.errors import ValidationError
from gourmand.domain.values import Distance, Price, Rating


VALID_CUISINE_PATTERN = re.compile(r"[A-Za-z\s-]+")


@dataclass(frozen=True, slots=True)
class Cuisine:
    """
    Cuisine type, normalized on construction.

    Only the first character of the whole name is upper-cased and the rest is
    lower-cased, so "asian fusion" becomes "Asian fusion". Equality and hashing
    use the normalized name.
    """

    name: str

    def __post_init__(self) -> None:
        if self.name is None or not self.name.strip():
            raise ValidationError("Cuisine name cannot be empty", field="cuisine")
        if not VALID_CUISINE_PATTERN.fullmatch(self.name):
            raise ValidationError(
                "Cuisine name must contain only letters, spaces, and hyphens",
                field="cuisine",
                value=self.name,
            )

        trimmed = self.name.strip()
        object.__setattr__(self, "name", trimmed[:1].upper() + trimmed[1:].lower())

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Restaurant:
    name: str
    rating: Rating
    distance: Distance
    price: Price
    cuisine: Cuisine

    def __post_init__(self) -> None:
        if self.name is None or not self.name.strip():
            raise ValidationError("Restaurant name cannot be empty", field="name")
        if self.rating is None:
            raise ValidationError("Rating cannot be null", field="rating")
        if self.distance is None:
            raise ValidationError("Distance cannot be null", field="distance")
        if self.price is None:
            raise ValidationError("Price cannot be null", field="price")
        if self.cuisine is None:
            raise ValidationError("Cuisine cannot be null", field="cuisine")


@dataclass(frozen=True, slots=True)
class SearchCriteria:
    """What the user is looking for. Every field is optional (None = no constraint)."""

    name: str | None = None
    min_rating: Rating | None = None
    max_distance: Distance | None = None
    max_price: Price | None = None
    cuisine: Cuisine | None = None

    def __post_init__(self) -> None:
        if self.name is not None:
            object.__setattr__(self, "name", self.name.strip() or None)

    def describe(self) -> str:
        """
        Human-readable summary of the specified criteria, one per line.

        Returns:
            Lines of the form "- Label: value", or "No criteria specified"
        """
        lines = []
        if self.name is not None:
            lines.append(f"- Name: {self.name}")
        if self.min_rating is not None:
            lines.append(f"- Minimum rating: {self.min_rating}")
        if self.max_distance is not None:
            lines.append(f"- Maximum distance: {self.max_distance}")
        if self.max_price is not None:
            lines.append(f"- Maximum price: {self.max_price}")
        if self.cuisine is not None:
            lines.append(f"- Cuisine: {self.cuisine}")

        if not lines:
            return "No criteria specified"
        return "\n".join(lines)
