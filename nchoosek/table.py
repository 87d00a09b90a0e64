"""Precomputed binomial coefficient table with constant-time lookups."""
from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple

from .binom import choose, reference_coefficient
from .model import LookupResult

logger = logging.getLogger(__name__)

Layout = str
_LAYOUTS = ("triangular", "square")


class TableReleasedError(RuntimeError):
    """Raised when a table is used or released after it has been released."""


class BinomialTable:
    """Owned table of C(i, j) for ``0 <= j <= i <= max_order``.

    Rows are tuples and no mutation API is exposed, so the table is read-only
    once built. Use :func:`build_table` to construct one.
    """

    def __init__(self, max_order: int, layout: Layout, rows: List[Tuple[int, ...]], max_bits: Optional[int] = None):
        self.max_order = max_order
        self.layout = layout
        self.max_bits = max_bits
        self._rows: Optional[List[Tuple[int, ...]]] = rows

    @property
    def released(self) -> bool:
        return self._rows is None

    def __len__(self) -> int:
        return 0 if self._rows is None else len(self._rows)

    def _live_rows(self) -> List[Tuple[int, ...]]:
        if self._rows is None:
            raise TableReleasedError("table has already been released")
        return self._rows

    def _check_index(self, n: int, k: int) -> None:
        if n < 0 or k < 0:
            raise ValueError("n and k must be non-negative")
        if n > self.max_order:
            raise IndexError(f"n = {n} exceeds the table's maximum order {self.max_order}")

    def lookup(self, n: int, k: int) -> LookupResult:
        """Return C(n, k) wrapped in a :class:`LookupResult`.

        ``k > n`` is reported as a failed result (and a logged warning), but a
        value is still supplied: the stored cell when the layout has one,
        otherwise the formula output for ``k > n`` (0).
        """

        rows = self._live_rows()
        self._check_index(n, k)
        row = rows[n]
        if k > n:
            logger.warning("Invalid k = %d; enter k so that k <= n", k)
            value = row[k] if k < len(row) else choose(n, k)
            return LookupResult(
                n, k, False, value,
                reason="k_exceeds_n",
                details={"layout": self.layout, "stored": k < len(row)},
            )
        return LookupResult(n, k, True, row[k])

    def entry(self, n: int, k: int) -> int:
        rows = self._live_rows()
        self._check_index(n, k)
        if k > n:
            raise IndexError(f"({n}, {k}) lies outside the triangular region")
        return rows[n][k]

    def rows(self) -> List[Tuple[int, ...]]:
        """Return the triangular rows, ``rows()[i]`` holding ``i + 1`` entries."""

        return [row[: i + 1] for i, row in enumerate(self._live_rows())]

    def verify(self, reference: Optional[Callable[[int, int], int]] = None) -> Tuple[bool, Optional[Tuple[int, int, int, int]]]:
        """Check every triangular entry against ``reference`` (exact C(n, k) by default)."""

        reference = reference or reference_coefficient
        for n, row in enumerate(self.rows()):
            for k, stored in enumerate(row):
                expected = reference(n, k)
                if stored != expected:
                    return False, (n, k, expected, stored)
        return True, None

    def release(self) -> int:
        """Drop every row, then the row container. Returns the number of rows released."""

        rows = self._live_rows()
        released = 0
        while rows:
            rows.pop()
            released += 1
        self._rows = None
        logger.debug("released %d rows (max_order=%d)", released, self.max_order)
        return released

    def __enter__(self) -> "BinomialTable":
        return self

    def __exit__(self, *exc_info) -> None:
        if not self.released:
            self.release()

    def __str__(self) -> str:
        if self._rows is None:
            return f"BinomialTable (max_order={self.max_order}, released)"
        lines = [f"BinomialTable (max_order={self.max_order}, layout={self.layout})"]
        for row in self.rows():
            lines.append("  " + " ".join(str(v) for v in row))
        return "\n".join(lines)

    __repr__ = __str__


def build_table(max_order: int, *, layout: Layout = "triangular", max_bits: Optional[int] = None) -> BinomialTable:
    """Eagerly compute C(i, j) for every row ``i`` up to ``max_order``.

    ``layout="triangular"`` stores ``i + 1`` entries in row ``i``.
    ``layout="square"`` stores ``max_order + 1`` entries in every row; cells
    with ``j > i`` hold the formula's output for that pair.
    """

    if max_order < 0:
        raise ValueError("max_order must be non-negative")
    if layout not in _LAYOUTS:
        raise ValueError(f"Unknown layout: {layout}")

    rows: List[Tuple[int, ...]] = []
    for i in range(max_order + 1):
        width = i + 1 if layout == "triangular" else max_order + 1
        rows.append(tuple(choose(i, j, max_bits=max_bits) for j in range(width)))
    logger.debug("built %s table with %d rows", layout, len(rows))
    return BinomialTable(max_order, layout, rows, max_bits=max_bits)


def destroy_table(table: Optional[BinomialTable]) -> int:
    """Release ``table``; a missing table is a successful no-op returning 0."""

    if table is None:
        return 0
    return table.release()
