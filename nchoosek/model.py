"""Result types returned by table lookups."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class LookupResult:
    """Outcome of a single ``(n, k)`` lookup.

    Attributes
    ----------
    n, k: int
        The queried pair.
    success: bool
        False when the pair lies outside the triangular region (``k > n``).
    value: int
        The stored (or formula) value. Still populated on failure, where it has
        no combinatorial meaning.
    reason: Optional[str]
        Failure reason when ``success`` is False.
    details: Optional[dict]
        Optional auxiliary information.
    """

    n: int
    k: int
    success: bool
    value: int
    reason: Optional[str] = None
    details: Optional[dict] = None

    def __str__(self) -> str:  # pragma: no cover - trivial wrapper
        return self._format()

    __repr__ = __str__

    def _format(self) -> str:
        if not self.success:
            base = (
                f"LookupResult: FAILED (n={self.n}, k={self.k}, reason={self.reason}, "
                f"value={self.value})"
            )
            if self.details:
                base += f" details={self.details}"
            return base
        return f"LookupResult: SUCCESS (n={self.n}, k={self.k}, value={self.value})"
