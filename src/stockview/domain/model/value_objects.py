"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StockFigures:
    """Reconciled stock numbers for one ledger entry.

    ``reserved`` is the value actually subtracted from ``accumulation``,
    so ``available == max(0, accumulation - reserved)`` always holds.
    """

    accumulation: int
    reserved: int
    available: int


@dataclass(frozen=True)
class ModelAttributes:
    """Display attributes of a model variant.

    Any field the name resolver could not supply is None.
    """

    model_number: str | None = None
    size: str | None = None
    color: str | None = None
    rgb: int | None = None

    def missing(self) -> list[str]:
        """Names of the attributes that were not resolved."""
        missing = []
        if not self.model_number:
            missing.append("model_number")
        if not self.size:
            missing.append("size")
        if not self.color:
            missing.append("color")
        if self.rgb is None:
            missing.append("rgb")
        return missing
