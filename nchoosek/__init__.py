"""Public API for nchoosek."""
from .binom import choose, pascal_row, reference_coefficient
from .model import LookupResult
from .table import BinomialTable, TableReleasedError, build_table, destroy_table

__all__ = [
    "choose",
    "pascal_row",
    "reference_coefficient",
    "build_table",
    "destroy_table",
    "BinomialTable",
    "LookupResult",
    "TableReleasedError",
]
