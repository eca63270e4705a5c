from pathlib import Path

from pydantic import BaseModel, Field


class CatalogQueryDTO(BaseModel):
    """Options shared by every command that reads the catalog."""

    data_dir: Path | None = Field(
        default=None,
        description="Directory containing restaurants.csv and cuisines.csv",
        examples=["./data"],
    )


class SearchQueryDTO(CatalogQueryDTO):
    """Raw search options as typed on the command line (not yet validated)."""

    name: str | None = Field(
        default=None,
        description="Restaurant name (case-insensitive partial match)",
        examples=["Delicious"],
    )
    rating: str | None = Field(
        default=None,
        description="Minimum customer rating (1-5 stars)",
        examples=["4"],
    )
    distance: str | None = Field(
        default=None,
        description="Maximum distance in miles (1-10)",
        examples=["2.5"],
    )
    price: str | None = Field(
        default=None,
        description="Maximum price per person in dollars (10-50)",
        examples=["25"],
    )
    cuisine: str | None = Field(
        default=None,
        description="Cuisine type (case-insensitive partial match)",
        examples=["Italian"],
    )
