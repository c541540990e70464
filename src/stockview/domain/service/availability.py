"""Domain service: Stock Availability.

Turns a raw ledger entry into the numbers shown to buyers and sellers.
The stored reserved counter and the per-order reservations are written
by different paths and can drift apart; the larger of the two is always
used so availability is under- rather than over-stated.
"""

from __future__ import annotations

import structlog

from stockview.domain.model.inventory import StockLedgerEntry
from stockview.domain.model.value_objects import StockFigures

logger = structlog.get_logger(__name__)


def compute_availability(
    entry: StockLedgerEntry, model_id: str | None = None
) -> StockFigures:
    """Reconcile one ledger entry into ``(accumulation, reserved, available)``.

    Steps:
    1. ``accumulation`` falls back to the legacy product list when zero.
    2. ``reserved`` is the max of the stored counter and the per-order sum.
    3. ``available`` is ``accumulation - reserved``, clamped at zero.

    Drift and clamping are logged, never raised.
    """
    accumulation = entry.accumulation
    if accumulation == 0 and entry.products:
        accumulation = len(entry.products)

    stored = entry.reserved_count
    sum_by_order = sum(entry.reserved_by_order.values())
    reserved = max(stored, sum_by_order)

    if stored != sum_by_order:
        logger.warning(
            "reserved_count_drift",
            model_id=model_id,
            stored=stored,
            sum_by_order=sum_by_order,
            orders=len(entry.reserved_by_order),
            accumulation=accumulation,
            reserved=reserved,
        )

    available = accumulation - reserved
    if available < 0:
        logger.warning(
            "negative_availability_clamped",
            model_id=model_id,
            accumulation=accumulation,
            reserved=reserved,
            stored=stored,
            sum_by_order=sum_by_order,
        )
        available = 0

    return StockFigures(
        accumulation=accumulation,
        reserved=reserved,
        available=available,
    )
