"""Tests for historical position resolution."""

from datetime import date, datetime
from decimal import Decimal

from portfolio_tracker.domain.models import Asset
from portfolio_tracker.domain.services.positions import quantity_at_date


def _lot(asset_id: str, ticker: str, quantity: str, bought: date) -> Asset:
    return Asset(
        id=asset_id,
        ticker=ticker,
        class_id="1",
        quantity=Decimal(quantity),
        purchase_date=bought,
        purchase_price=Decimal("10"),
        current_price=Decimal("10"),
    )


LOTS = [
    _lot("a1", "XYZ", "10", date(2024, 1, 1)),
    _lot("a2", "XYZ", "5", date(2024, 2, 1)),
    _lot("a3", "XYZ", "3", date(2024, 2, 1)),
    _lot("b1", "ABC", "7", date(2024, 1, 1)),
]


def test_sums_lots_purchased_on_or_before_date() -> None:
    """Only lots bought on or before the date should be counted."""
    assert quantity_at_date("XYZ", date(2024, 1, 15), LOTS) == Decimal("10")


def test_includes_every_lot_on_the_same_day() -> None:
    """Several lots bought on the query date should all count."""
    assert quantity_at_date("XYZ", date(2024, 2, 1), LOTS) == Decimal("18")


def test_ignores_time_of_day() -> None:
    """Datetimes should compare by calendar date."""
    as_of = datetime(2024, 2, 1, 0, 0, 1)

    assert quantity_at_date("XYZ", as_of, LOTS) == Decimal("18")


def test_returns_zero_without_match_or_inputs() -> None:
    """Unknown tickers, early dates and empty inputs yield zero."""
    assert quantity_at_date("XYZ", date(2023, 12, 31), LOTS) == Decimal("0")
    assert quantity_at_date("NOPE", date(2024, 6, 1), LOTS) == Decimal("0")
    assert quantity_at_date("", date(2024, 6, 1), LOTS) == Decimal("0")
    assert quantity_at_date(None, date(2024, 6, 1), LOTS) == Decimal("0")
    assert quantity_at_date("XYZ", None, LOTS) == Decimal("0")
    assert quantity_at_date("XYZ", date(2024, 6, 1), []) == Decimal("0")


def test_quantity_never_decreases_as_date_advances() -> None:
    """Resolved quantity should be monotonic in the query date."""
    dates = [
        date(2023, 12, 1),
        date(2024, 1, 1),
        date(2024, 1, 31),
        date(2024, 2, 1),
        date(2025, 1, 1),
    ]

    quantities = [quantity_at_date("XYZ", day, LOTS) for day in dates]

    assert quantities == sorted(quantities)
