"""Tests for command output formatting."""

from __future__ import annotations

from gourmand.domain.restaurant import Cuisine
from gourmand.entrypoints.cli.formatter import (
    NO_RESULTS_MESSAGE,
    format_cuisines,
    format_results_table,
    format_search_response,
)
from gourmand.use_cases.search_restaurants import SearchRestaurantsResponse, SearchResult


def make_result(name: str = "Pizza Place") -> SearchResult:
    return SearchResult(name=name, rating=4, distance=1.5, price=20.0, cuisine="Italian")


def test_table_header_column_order() -> None:
    header = format_results_table([make_result()]).splitlines()[0]

    assert header.split() == ["NAME", "RATING", "DISTANCE", "PRICE", "CUISINE"]


def test_table_row_formatting() -> None:
    lines = format_results_table([make_result()]).splitlines()

    assert lines[1] == "-" * 65
    assert lines[2] == "Pizza Place           4        1.5 mi    $20.00  Italian"


def test_table_name_column_grows_for_long_names() -> None:
    long_name = "The Extraordinarily Long Restaurant Name"

    lines = format_results_table([make_result(long_name), make_result("Short")]).splitlines()

    assert lines[1] == "-" * (len(long_name) + 45)
    assert lines[2].startswith(long_name + "  4")
    assert lines[3].startswith("Short" + " " * (len(long_name) - 5) + "  4")


def test_search_response_without_results() -> None:
    response = SearchRestaurantsResponse(results=[], total_count=0)

    assert format_search_response(response) == NO_RESULTS_MESSAGE


def test_search_response_with_all_matches_shown() -> None:
    response = SearchRestaurantsResponse(results=[make_result(), make_result("B")], total_count=2)

    assert format_search_response(response).startswith("Found 2 matching restaurants:\n\n")


def test_search_response_mentions_capped_matches() -> None:
    response = SearchRestaurantsResponse(results=[make_result()] * 5, total_count=12)

    assert format_search_response(response).startswith(
        "Found 12 matching restaurants, showing the top 5:"
    )


def test_format_cuisines() -> None:
    assert format_cuisines([Cuisine("Thai"), Cuisine("italian")]) == (
        "Available cuisines:\n\n- Thai\n- Italian"
    )


def test_format_cuisines_empty() -> None:
    assert format_cuisines([]) == "No cuisines available."
