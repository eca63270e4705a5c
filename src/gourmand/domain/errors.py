"""Domain error classes.

Interface-agnostic errors that represent failures of the search pipeline.
The CLI entrypoint translates them into user-facing messages and exit codes.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain errors.

    Carries a human-readable message plus optional context (field names,
    offending values) that callers can use for diagnostics.
    """

    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message
            **context: Additional context for the error (e.g., field, value)
        """
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format for diagnostics."""
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class ValidationError(DomainError):
    """A value violates a range or format rule.

    Raised by value types, Cuisine and Restaurant construction. Never retried;
    the caller must supply a corrected value.

    Examples:
        - Rating(6)
        - Cuisine("Thai!")
        - Restaurant with no cuisine
    """

    error_code: str = "VALIDATION_ERROR"


class DataLoadError(DomainError):
    """The restaurant catalog could not be loaded.

    Raised when a data file is missing, empty or unreadable, or when any row
    fails to parse, validate or resolve. The originating exception is chained
    as ``__cause__``. Terminal for the repository instance: fix the data and
    construct a new one.
    """

    error_code: str = "DATA_LOAD_ERROR"
