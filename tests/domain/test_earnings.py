"""Tests for income ledger services."""

from datetime import date
from decimal import Decimal

import pytest

from portfolio_tracker.domain.models import Asset, Earning, EarningDraft
from portfolio_tracker.domain.services.earnings import (
    build_auto_earnings,
    build_manual_earning,
    compute_earnings_series,
    compute_earnings_statistics,
    is_duplicate,
)
from portfolio_tracker.domain.services.validation import ValidationError


def _earning(
    earning_id: str,
    ticker: str,
    day: date,
    unit: str | None,
    received: str = "10",
    earning_type: str = "Dividend",
) -> Earning:
    return Earning(
        id=earning_id,
        asset_ticker=ticker,
        date=day,
        type=earning_type,
        received_amount=Decimal(received),
        reinvested_amount=Decimal("0"),
        withdrawn_amount=Decimal(received),
        unit_amount=Decimal(unit) if unit is not None else None,
        quantity_at_date=Decimal("10"),
    )


ASSETS = [
    Asset(
        id="a1",
        ticker="XYZ",
        class_id="1",
        quantity=Decimal("100"),
        purchase_date=date(2024, 1, 5),
        purchase_price=Decimal("10"),
        current_price=Decimal("12"),
    ),
    Asset(
        id="a2",
        ticker="XYZ",
        class_id="1",
        quantity=Decimal("50"),
        purchase_date=date(2024, 3, 1),
        purchase_price=Decimal("11"),
        current_price=Decimal("12"),
    ),
]


def test_is_duplicate_within_tolerance() -> None:
    """Unit values closer than the tolerance should match."""
    existing = [_earning("e1", "XYZ", date(2024, 1, 10), "1.23005")]
    candidate = EarningDraft(
        asset_ticker="XYZ",
        date=date(2024, 1, 10),
        unit_amount=Decimal("1.2300"),
    )

    assert is_duplicate(candidate, existing) is True


def test_is_duplicate_rejects_other_date_or_ticker() -> None:
    """A different date or ticker is never a duplicate."""
    existing = [_earning("e1", "XYZ", date(2024, 1, 11), "1.23005")]
    candidate = EarningDraft(
        asset_ticker="XYZ",
        date=date(2024, 1, 10),
        unit_amount=Decimal("1.2300"),
    )
    other_ticker = EarningDraft(
        asset_ticker="ABC",
        date=date(2024, 1, 11),
        unit_amount=Decimal("1.2300"),
    )

    assert is_duplicate(candidate, existing) is False
    assert is_duplicate(other_ticker, existing) is False


def test_is_duplicate_ignores_type_and_received_amount() -> None:
    """Only ticker, date and unit value form the key."""
    existing = [
        _earning(
            "e1",
            "XYZ",
            date(2024, 1, 10),
            "0.50",
            received="999",
            earning_type="Interest",
        )
    ]
    candidate = EarningDraft(
        asset_ticker="XYZ",
        date=date(2024, 1, 10),
        unit_amount=Decimal("0.50"),
        type="Dividend",
    )

    assert is_duplicate(candidate, existing) is True


def test_is_duplicate_outside_tolerance() -> None:
    """Unit values further apart than the tolerance should not match."""
    existing = [_earning("e1", "XYZ", date(2024, 1, 10), "1.2302")]
    candidate = EarningDraft(
        asset_ticker="XYZ",
        date=date(2024, 1, 10),
        unit_amount=Decimal("1.2300"),
    )

    assert is_duplicate(candidate, existing) is False


def test_build_auto_earnings_skips_duplicates_and_empty_positions() -> None:
    """Auto ingestion should only add new events with units held."""
    existing = [_earning("e1", "XYZ", date(2024, 2, 10), "0.40")]
    proposals = [
        EarningDraft("XYZ", date(2024, 1, 1), Decimal("0.30")),
        EarningDraft("XYZ", date(2024, 2, 10), Decimal("0.40")),
        EarningDraft("XYZ", date(2024, 3, 10), Decimal("0.50"), "Interest"),
        EarningDraft("XYZ", date(2024, 3, 10), Decimal("0.50")),
    ]

    result = build_auto_earnings(
        "XYZ",
        proposals,
        ASSETS,
        existing,
        id_factory=lambda draft: f"auto-{draft.date.isoformat()}",
    )

    assert len(result) == 1
    earning = result[0]
    assert earning.id == "auto-2024-03-10"
    assert earning.type == "Interest"
    assert earning.quantity_at_date == Decimal("150")
    assert earning.received_amount == Decimal("75.00")
    assert earning.withdrawn_amount == earning.received_amount
    assert earning.reinvested_amount == Decimal("0")
    assert earning.unit_amount == Decimal("0.50")
    assert earning.is_auto_generated is True


def test_build_auto_earnings_is_idempotent_across_syncs() -> None:
    """Feeding the same proposals twice should add nothing the second time."""
    proposals = [EarningDraft("XYZ", date(2024, 2, 10), Decimal("0.40"))]

    first = build_auto_earnings(
        "XYZ", proposals, ASSETS, [], id_factory=lambda draft: "auto-1"
    )
    second = build_auto_earnings(
        "XYZ", proposals, ASSETS, first, id_factory=lambda draft: "auto-2"
    )

    assert [item.id for item in first] == ["auto-1"]
    assert second == []


def test_build_manual_earning_uses_units_held() -> None:
    """Manual entries multiply the unit value by units held at the date."""
    draft = EarningDraft("XYZ", date(2024, 2, 15), Decimal("0.25"), "JCP")

    earning = build_manual_earning(
        draft,
        ASSETS,
        earning_id="m1",
        reinvested_amount=Decimal("5"),
    )

    assert earning.quantity_at_date == Decimal("100")
    assert earning.received_amount == Decimal("25.00")
    assert earning.reinvested_amount == Decimal("5")
    assert earning.withdrawn_amount == Decimal("20.00")
    assert earning.type == "JCP"
    assert earning.is_auto_generated is False


def test_build_manual_earning_with_raw_total_has_no_unit_value() -> None:
    """A raw total replaces the per-unit computation."""
    draft = EarningDraft("XYZ", date(2024, 2, 15), None)

    earning = build_manual_earning(
        draft,
        ASSETS,
        earning_id="m2",
        received_total=Decimal("42"),
    )

    assert earning.unit_amount is None
    assert earning.received_amount == Decimal("42")
    assert earning.withdrawn_amount == Decimal("42")


def test_build_manual_earning_rejects_excess_reinvestment() -> None:
    """Reinvesting more than received should be rejected."""
    draft = EarningDraft("XYZ", date(2024, 2, 15), Decimal("0.10"))

    with pytest.raises(ValidationError):
        build_manual_earning(
            draft,
            ASSETS,
            earning_id="m3",
            reinvested_amount=Decimal("11"),
        )


LEDGER = [
    _earning("e1", "XYZ", date(2023, 12, 5), None, received="10"),
    _earning("e2", "XYZ", date(2024, 1, 5), None, received="5"),
    _earning("e3", "ABC", date(2024, 1, 20), None, received="5"),
    _earning("e4", "XYZ", date(2024, 3, 5), None, received="20"),
]


def test_compute_earnings_statistics() -> None:
    """Totals and the monthly average over months with income."""
    stats = compute_earnings_statistics(LEDGER, 2024)

    assert stats.total == Decimal("40")
    assert stats.total_for_year == Decimal("30")
    assert stats.monthly_average == Decimal("40") / 3
    assert stats.year == 2024


def test_compute_earnings_statistics_empty_ledger() -> None:
    """An empty ledger reports zeros."""
    stats = compute_earnings_statistics([], 2024)

    assert stats.total == Decimal("0")
    assert stats.monthly_average == Decimal("0")


def test_compute_earnings_series_views() -> None:
    """Monthly, annual and cumulative views group by period in order."""
    monthly = compute_earnings_series(reversed(LEDGER), "monthly")
    annual = compute_earnings_series(LEDGER, "annual")
    cumulative = compute_earnings_series(LEDGER, "cumulative")

    assert [(p.label, p.total) for p in monthly] == [
        ("2023-12", Decimal("10")),
        ("2024-01", Decimal("10")),
        ("2024-03", Decimal("20")),
    ]
    assert [(p.label, p.total) for p in annual] == [
        ("2023", Decimal("10")),
        ("2024", Decimal("30")),
    ]
    assert [p.total for p in cumulative] == [
        Decimal("10"),
        Decimal("20"),
        Decimal("40"),
    ]


def test_compute_earnings_series_rejects_unknown_view() -> None:
    """Unknown views should raise a validation error."""
    with pytest.raises(ValidationError):
        compute_earnings_series(LEDGER, "weekly")


def test_is_duplicate_treats_missing_unit_values_as_zero() -> None:
    """Raw-total entries without a unit value match each other on the same day."""
    existing = [_earning("e1", "XYZ", date(2024, 1, 10), None, received="30")]
    candidate = EarningDraft(
        asset_ticker="XYZ",
        date=date(2024, 1, 10),
        unit_amount=None,
    )
    priced = EarningDraft(
        asset_ticker="XYZ",
        date=date(2024, 1, 10),
        unit_amount=Decimal("0.5"),
    )

    assert is_duplicate(candidate, existing) is True
    assert is_duplicate(priced, existing) is False


def test_build_manual_earning_without_units_counts_one_unit() -> None:
    """A per-unit entry before any purchase records a single unit's worth."""
    draft = EarningDraft("XYZ", date(2023, 12, 1), Decimal("1.5"))

    earning = build_manual_earning(draft, ASSETS, earning_id="m4")

    assert earning.quantity_at_date == Decimal("0")
    assert earning.received_amount == Decimal("1.5")
    assert earning.withdrawn_amount == Decimal("1.5")
    assert earning.unit_amount == Decimal("1.5")


def test_build_manual_earning_requires_an_amount() -> None:
    """Without a unit value or a raw total nothing is recorded."""
    draft = EarningDraft("XYZ", date(2024, 2, 15), None)

    with pytest.raises(ValidationError, match="unit_amount or received_total"):
        build_manual_earning(draft, ASSETS, earning_id="m5")
