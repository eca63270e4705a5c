"""Command-line entrypoint.

Follows a parse -> map -> execute -> format pattern per command and
translates domain errors into messages on stderr and exit codes.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from gourmand.adapters.csv_data_source import CsvDataSource
from gourmand.adapters.csv_restaurant_repository import CsvRestaurantRepository
from gourmand.domain.errors import DataLoadError, ValidationError
from gourmand.entrypoints.cli.dtos.search import CatalogQueryDTO, SearchQueryDTO
from gourmand.entrypoints.cli.formatter import format_cuisines, format_search_response
from gourmand.entrypoints.cli.mappers.search_mapper import SearchMapper
from gourmand.infra import config
from gourmand.infra.logging_config import configure_logging
from gourmand.ports.restaurant_repository import RestaurantRepository
from gourmand.use_cases.list_cuisines import ListCuisines
from gourmand.use_cases.search_restaurants import SearchRestaurants

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INVALID_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gourmand",
        description="Find the perfect restaurant for your next meal",
    )
    parser.add_argument("--version", action="version", version="%(prog)s 1.0")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--data-dir",
        type=Path,
        help="Directory containing restaurants.csv and cuisines.csv "
        "(default: $GOURMAND_DATA_DIR, then the bundled dataset)",
    )
    common.add_argument(
        "-v", "--verbose", action="store_true", help="Print additional information"
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    search = subparsers.add_parser(
        "search",
        parents=[common],
        help="Search for local restaurants",
        description="Searches for local restaurants based on given criteria",
    )
    search.add_argument(
        "-n", "--name", metavar="NAME", help="Restaurant name (partial match is supported)"
    )
    search.add_argument(
        "-r", "--rating", metavar="RATING", help="Minimum customer rating (1-5 stars)"
    )
    search.add_argument(
        "-d", "--distance", metavar="DISTANCE", help="Maximum distance in miles (1-10)"
    )
    search.add_argument(
        "-p", "--price", metavar="PRICE", help="Maximum price per person in dollars (10-50)"
    )
    search.add_argument(
        "-c", "--cuisine", metavar="CUISINE", help="Cuisine type (e.g., Chinese, Italian)"
    )
    search.set_defaults(handler=run_search)

    cuisines = subparsers.add_parser(
        "cuisines",
        parents=[common],
        help="List the available cuisines",
        description="Lists the cuisines known to the restaurant catalog",
    )
    cuisines.set_defaults(handler=run_cuisines)

    return parser


def build_repository(data_dir: Path | None) -> RestaurantRepository:
    """
    Build the CSV repository for the requested catalog location.

    Resolution order: --data-dir, then GOURMAND_DATA_DIR, then the bundled dataset.

    Raises:
        DataLoadError: If the catalog cannot be loaded
    """
    directory = data_dir or config.data_directory()

    if directory is not None:
        source = CsvDataSource.from_directory(directory)
    else:
        source = CsvDataSource.from_resources()

    return CsvRestaurantRepository(source)


def run_search(args: argparse.Namespace) -> int:
    query = SearchQueryDTO.model_validate(vars(args))

    # Validate the criteria before touching the data files
    request = SearchMapper.to_domain_request(query)

    use_case = SearchRestaurants(build_repository(query.data_dir))
    logger.info("Executing search with criteria: %s", request.criteria)

    print("Searching for restaurants with criteria:\n")
    print(request.criteria.describe())

    response = use_case.execute(request)

    print()
    print(format_search_response(response))
    return EXIT_OK


def run_cuisines(args: argparse.Namespace) -> int:
    query = CatalogQueryDTO.model_validate(vars(args))

    response = ListCuisines(build_repository(query.data_dir)).execute()

    print(format_cuisines(response.cuisines))
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        configure_logging(verbose=getattr(args, "verbose", False))
    except RuntimeError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    if args.command is None:
        parser.print_help()
        return EXIT_OK

    try:
        return args.handler(args)
    except ValidationError as exc:
        logger.info("Invalid input", extra={"error": exc.to_dict()})
        print(f"Error: {exc.message}", file=sys.stderr)
        return EXIT_INVALID_INPUT
    except DataLoadError as exc:
        logger.error("Failed to load restaurant data", exc_info=True)
        print(f"Error: {describe_error(exc)}", file=sys.stderr)
        return EXIT_FAILURE
    except Exception as exc:
        logger.exception("Command execution failed")
        print(f"Unexpected error: {exc}", file=sys.stderr)
        return EXIT_FAILURE


def describe_error(exc: BaseException) -> str:
    """Join an error's message with the messages of its chained causes."""
    messages = [str(exc)]

    cause = exc.__cause__
    while cause is not None:
        messages.append(str(cause))
        cause = cause.__cause__

    return ": ".join(message for message in messages if message)


def run() -> None:
    """Console script entrypoint."""
    sys.exit(main())
