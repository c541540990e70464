"""Unit tests for the stock availability calculator."""

import pytest
from structlog.testing import capture_logs

from stockview.domain.model.inventory import StockLedgerEntry
from stockview.domain.service.availability import compute_availability


class TestReconciliation:

    def test_per_order_sum_wins_when_larger(self):
        entry = StockLedgerEntry(
            accumulation=10, reserved_count=3,
            reserved_by_order={"o1": 2, "o2": 4},
        )
        figures = compute_availability(entry)
        assert figures.accumulation == 10
        assert figures.reserved == 6
        assert figures.available == 4

    def test_stored_counter_wins_when_larger(self):
        entry = StockLedgerEntry(
            accumulation=10, reserved_count=5, reserved_by_order={"o1": 1},
        )
        figures = compute_availability(entry)
        assert figures.reserved == 5
        assert figures.available == 5

    def test_consistent_counters(self):
        entry = StockLedgerEntry(
            accumulation=8, reserved_count=3, reserved_by_order={"o1": 1, "o2": 2},
        )
        figures = compute_availability(entry)
        assert figures.reserved == 3
        assert figures.available == 5

    def test_empty_entry_is_all_zero(self):
        figures = compute_availability(StockLedgerEntry())
        assert (figures.accumulation, figures.reserved, figures.available) == (0, 0, 0)


class TestClamping:

    def test_negative_availability_clamped_to_zero(self):
        entry = StockLedgerEntry(accumulation=5, reserved_count=7)
        with capture_logs() as logs:
            figures = compute_availability(entry, "m1")

        assert figures.reserved == 7
        assert figures.available == 0
        events = [log["event"] for log in logs]
        assert "reserved_count_drift" in events
        assert "negative_availability_clamped" in events

    @pytest.mark.parametrize("accumulation", [0, 1, 3, 10])
    @pytest.mark.parametrize("stored", [0, 2, 5, 12])
    @pytest.mark.parametrize("orders", [{}, {"o1": 1}, {"o1": 4, "o2": 4}])
    def test_reconciliation_invariant(self, accumulation, stored, orders):
        entry = StockLedgerEntry(
            accumulation=accumulation, reserved_count=stored, reserved_by_order=orders,
        )
        figures = compute_availability(entry)
        expected_reserved = max(stored, sum(orders.values()))
        assert figures.reserved == expected_reserved
        assert figures.available == max(0, accumulation - expected_reserved)
        assert figures.available >= 0


class TestLegacyAccumulation:

    def test_falls_back_to_product_list_when_accumulation_zero(self):
        entry = StockLedgerEntry(accumulation=0, products=("p1", "p2", "p3"))
        assert compute_availability(entry).accumulation == 3
        assert compute_availability(entry).available == 3

    def test_accumulation_preferred_over_product_list(self):
        entry = StockLedgerEntry(accumulation=5, products=("p1",))
        assert compute_availability(entry).accumulation == 5


class TestDriftLogging:

    def test_drift_logged_with_context(self):
        entry = StockLedgerEntry(accumulation=10, reserved_count=3, reserved_by_order={"o1": 6})
        with capture_logs() as logs:
            compute_availability(entry, "model-a")

        assert len(logs) == 1
        log = logs[0]
        assert log["event"] == "reserved_count_drift"
        assert log["log_level"] == "warning"
        assert log["model_id"] == "model-a"
        assert log["stored"] == 3
        assert log["sum_by_order"] == 6
        assert log["reserved"] == 6

    def test_no_log_when_counters_agree(self):
        entry = StockLedgerEntry(accumulation=10, reserved_count=2, reserved_by_order={"o1": 2})
        with capture_logs() as logs:
            compute_availability(entry)
        assert logs == []
