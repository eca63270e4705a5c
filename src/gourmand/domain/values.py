from __future__ import annotations

from dataclasses import dataclass

from gourmand.domain.errors import ValidationError


MIN_RATING = 1
MAX_RATING = 5
MIN_DISTANCE = 1.0
MAX_DISTANCE = 10.0
MIN_PRICE = 10.0
MAX_PRICE = 50.0


@dataclass(frozen=True, slots=True, order=True)
class Rating:
    """Customer rating in whole stars. Higher is better."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                "Rating must be a whole number of stars", field="rating", value=self.value
            )
        if not MIN_RATING <= self.value <= MAX_RATING:
            raise ValidationError(
                f"Rating must be between {MIN_RATING} and {MAX_RATING} stars",
                field="rating",
                value=self.value,
            )

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True, order=True)
class Distance:
    """Distance to the restaurant in miles. Lower is better."""

    miles: float

    def __post_init__(self) -> None:
        if isinstance(self.miles, bool) or not isinstance(self.miles, (int, float)):
            raise ValidationError(
                "Distance must be a number of miles", field="distance", value=self.miles
            )
        # NaN fails this check
        if not MIN_DISTANCE <= self.miles <= MAX_DISTANCE:
            raise ValidationError(
                f"Distance must be between {MIN_DISTANCE:.1f} and {MAX_DISTANCE:.1f} miles",
                field="distance",
                value=self.miles,
            )

    def __str__(self) -> str:
        return f"{self.miles:.1f} mi"


@dataclass(frozen=True, slots=True, order=True)
class Price:
    """Average price per person in dollars. Lower is better."""

    amount: float

    def __post_init__(self) -> None:
        if isinstance(self.amount, bool) or not isinstance(self.amount, (int, float)):
            raise ValidationError(
                "Price must be a number of dollars", field="price", value=self.amount
            )
        if not MIN_PRICE <= self.amount <= MAX_PRICE:
            raise ValidationError(
                f"Price must be between ${MIN_PRICE:.2f} and ${MAX_PRICE:.2f}",
                field="price",
                value=self.amount,
            )

    def __str__(self) -> str:
        return f"${self.amount:.2f}"
