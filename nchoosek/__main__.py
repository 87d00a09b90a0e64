"""Demonstration entry point: ``python -m nchoosek``."""
from __future__ import annotations

import logging

from .table import build_table, destroy_table

DEFAULT_ORDER = 20
DEFAULT_QUERY = (20, 7)

logger = logging.getLogger("nchoosek")


def configure_logging() -> logging.Handler:
    """Send the package's diagnostics to stderr as bare message lines."""

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    return handler


def main() -> int:
    handler = configure_logging()
    try:
        table = build_table(DEFAULT_ORDER)
        n, k = DEFAULT_QUERY
        result = table.lookup(n, k)
        print(f"Result for {n} choose {k} is: {result.value}")
        destroy_table(table)
    finally:
        logger.removeHandler(handler)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
