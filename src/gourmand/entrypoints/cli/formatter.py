"""Plain-text rendering of command output."""

from __future__ import annotations

from typing import Sequence

from gourmand.domain.restaurant import Cuisine
from gourmand.use_cases.search_restaurants import SearchRestaurantsResponse, SearchResult

MIN_NAME_WIDTH = 20
NO_RESULTS_MESSAGE = "No restaurants found matching your criteria."


def format_search_response(response: SearchRestaurantsResponse) -> str:
    if not response.results:
        return NO_RESULTS_MESSAGE

    shown = len(response.results)
    if response.total_count > shown:
        summary = f"Found {response.total_count} matching restaurants, showing the top {shown}:"
    else:
        summary = f"Found {shown} matching restaurants:"

    return f"{summary}\n\n{format_results_table(response.results)}"


def format_results_table(results: Sequence[SearchResult]) -> str:
    """
    Render results as a fixed-width table.

    Columns: NAME, RATING, DISTANCE, PRICE, CUISINE. The name column grows to
    fit the longest name (at least MIN_NAME_WIDTH characters).
    """
    width = max([MIN_NAME_WIDTH, *(len(result.name) for result in results)])

    lines = [
        f"{'NAME':<{width}}  {'RATING':<7}  {'DISTANCE':<8}  {'PRICE':<6}  CUISINE",
        "-" * (width + 45),
    ]
    for result in results:
        lines.append(
            f"{result.name:<{width}}  {result.rating:d}        "
            f"{result.distance:.1f} mi    ${result.price:<5.2f}  {result.cuisine}"
        )

    return "\n".join(lines)


def format_cuisines(cuisines: Sequence[Cuisine]) -> str:
    if not cuisines:
        return "No cuisines available."

    return "Available cuisines:\n\n" + "\n".join(f"- {cuisine}" for cuisine in cuisines)
