"""Logging bootstrap for the CLI.

Logging stays silent unless verbose output is requested, so normal runs only
print the search results.
"""

from __future__ import annotations

import logging
import sys

from gourmand.infra.config import log_level

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(verbose: bool = False) -> None:
    """
    Configure the root logger.

    Args:
        verbose: Emit records to stderr at the GOURMAND_LOG_LEVEL level;
                 otherwise discard all records
    """
    handler: logging.Handler
    if verbose:
        handler = logging.StreamHandler(sys.stderr)
        level = log_level()
    else:
        handler = logging.NullHandler()
        level = logging.CRITICAL

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[handler],
        force=True,  # Reconfigure even if logging was set up before
    )
