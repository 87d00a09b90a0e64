"""Binomial coefficient utilities for non-negative integer arguments."""
from __future__ import annotations

from math import comb
from typing import List, Optional

# flint is optional; detect lazily so a runtime install (e.g., in a notebook) is picked up
_FLINT_AVAILABLE = False

def _ensure_flint_available() -> bool:
    """Try importing flint on demand and cache the result."""

    global _FLINT_AVAILABLE, fmpz  # type: ignore[name-defined]
    if _FLINT_AVAILABLE:
        return True
    try:
        from flint import fmpz as _fmpz
    except Exception:
        return False
    fmpz = _fmpz  # type: ignore[assignment]
    _FLINT_AVAILABLE = True
    return True


def _check_args(n: int, k: int) -> None:
    if n < 0:
        raise ValueError("n must be non-negative")
    if k < 0:
        raise ValueError("k must be non-negative")


def choose(n: int, k: int, *, max_bits: Optional[int] = None) -> int:
    """Compute C(n, k) with the recurrence ``C(n, k) = n * C(n-1, k-1) / k``.

    The chain is unrolled from the base case ``C(n-k, 0) = 1`` upward. Each
    step multiplies before it divides, so the division is always exact.

    For ``k > n`` the recurrence has no combinatorial meaning. Its chain
    always passes through the zero factor ``C(0, k-n)``, so the result is 0
    and is returned without running the chain.

    ``max_bits`` bounds every intermediate product to an unsigned word of
    that width (64 matches an ``unsigned long``). Exceeding it raises
    ``OverflowError`` instead of wrapping. ``None`` means unbounded.
    """

    _check_args(n, k)
    if k > n:
        return 0
    limit = None if max_bits is None else (1 << max_bits) - 1
    result = 1
    for i in range(1, k + 1):
        product = (n - k + i) * result
        if limit is not None and abs(product) > limit:
            raise OverflowError(
                f"C({n}, {k}) overflows {max_bits} bits at C({n - k + i}, {i})"
            )
        result = product // i
    return result


def reference_coefficient(n: int, k: int) -> int:
    """Known-correct C(n, k) (0 when ``k > n``), independent of :func:`choose`."""

    _check_args(n, k)
    if k > n:
        return 0
    if _ensure_flint_available():
        return int(fmpz.bin_uiui(n, k))
    return comb(n, k)


def pascal_row(n: int) -> List[int]:
    """Return ``[C(n,0), ..., C(n,n)]`` built additively by Pascal's rule."""

    if n < 0:
        raise ValueError("n must be non-negative")
    row = [1]
    for _ in range(n):
        row = [1] + [a + b for a, b in zip(row, row[1:])] + [1]
    return row
