"""Historical position resolution."""

from collections.abc import Iterable
from datetime import date, datetime
from decimal import Decimal

from portfolio_tracker.domain.models import Asset


def quantity_at_date(
    ticker: str | None,
    as_of_date: date | None,
    assets: Iterable[Asset],
) -> Decimal:
    """Return the units of ``ticker`` held on ``as_of_date``.

    Every lot purchased on or before the date is counted, including several
    lots bought the same day. Comparison is by calendar date only.

    Args:
        ticker: Ticker to resolve.
        as_of_date: Date of interest (datetimes are truncated).
        assets: Lot records to scan.

    Returns:
        Decimal: Cumulative quantity, zero when nothing matches.
    """
    if not ticker or as_of_date is None:
        return Decimal("0")
    limit = _as_date(as_of_date)
    return sum(
        (
            asset.quantity
            for asset in assets
            if asset.ticker == ticker
            and _as_date(asset.purchase_date) <= limit
        ),
        Decimal("0"),
    )


def _as_date(value: date) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


__all__ = ["quantity_at_date"]
