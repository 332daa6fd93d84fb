"""Domain services for the income ledger."""

from collections.abc import Callable, Iterable
from decimal import Decimal
from logging import Logger

from portfolio_tracker.domain.constants import (
    DEFAULT_EARNING_TYPE,
    UNIT_AMOUNT_TOLERANCE,
)
from portfolio_tracker.domain.models import (
    Asset,
    Earning,
    EarningDraft,
    EarningsPoint,
    EarningsStatistics,
)
from portfolio_tracker.domain.services.positions import quantity_at_date
from portfolio_tracker.domain.services.validation import ValidationError

EARNINGS_VIEWS = ("monthly", "annual", "cumulative")


def is_duplicate(candidate: EarningDraft, existing: Iterable[Earning]) -> bool:
    """Return True when ``candidate`` is already represented in the ledger.

    Two records match on ticker, exact date, and a per-unit value within
    ``UNIT_AMOUNT_TOLERANCE``. Received totals and income type are not part
    of the key.

    Args:
        candidate: Proposed income record.
        existing: Recorded income events.

    Returns:
        bool: True if an equivalent record already exists.
    """
    candidate_unit = candidate.unit_amount or Decimal("0")
    for earning in existing:
        if earning.asset_ticker != candidate.asset_ticker:
            continue
        if earning.date != candidate.date:
            continue
        existing_unit = earning.unit_amount or Decimal("0")
        if abs(existing_unit - candidate_unit) < UNIT_AMOUNT_TOLERANCE:
            return True
    return False


def build_auto_earnings(
    ticker: str,
    proposals: Iterable[EarningDraft],
    assets: list[Asset],
    existing: Iterable[Earning],
    id_factory: Callable[[EarningDraft], str],
    logger: Logger | None = None,
) -> list[Earning]:
    """Turn externally sourced income proposals into new ledger records.

    Proposals already in the ledger (or earlier in the same batch) and
    proposals dated before any units were held are skipped. Accepted
    records are fully withdrawn.

    Args:
        ticker: Ticker the proposals belong to.
        proposals: Income events suggested by an external source.
        assets: Lot snapshot used to resolve units held.
        existing: Current income ledger.
        id_factory: Produces a unique identifier for each accepted draft.
        logger: Optional logger for skipped proposals.

    Returns:
        list[Earning]: Records to add, in proposal order.
    """
    known = list(existing)
    accepted: list[Earning] = []
    for proposal in proposals:
        draft = EarningDraft(
            asset_ticker=ticker,
            date=proposal.date,
            unit_amount=proposal.unit_amount,
            type=proposal.type or DEFAULT_EARNING_TYPE,
        )
        if is_duplicate(draft, known):
            if logger:
                logger.debug(
                    f"Skipping duplicate earning for {ticker} on {draft.date}"
                )
            continue
        quantity = quantity_at_date(ticker, draft.date, assets)
        if quantity <= 0:
            if logger:
                logger.debug(
                    f"Skipping earning for {ticker} on {draft.date}: "
                    "no units held"
                )
            continue
        unit_amount = draft.unit_amount or Decimal("0")
        received = unit_amount * quantity
        earning = Earning(
            id=id_factory(draft),
            asset_ticker=ticker,
            date=draft.date,
            type=draft.type,
            received_amount=received,
            reinvested_amount=Decimal("0"),
            withdrawn_amount=received,
            unit_amount=draft.unit_amount,
            quantity_at_date=quantity,
            is_auto_generated=True,
        )
        accepted.append(earning)
        known.append(earning)
    return accepted


def build_manual_earning(
    draft: EarningDraft,
    assets: list[Asset],
    *,
    earning_id: str,
    received_total: Decimal | None = None,
    reinvested_amount: Decimal = Decimal("0"),
) -> Earning:
    """Build a user-entered income record.

    Manual entries are trusted and bypass duplicate detection. When a raw
    ``received_total`` is given, the per-unit value is left empty. A per-unit
    entry dated before any units were held counts as a single unit.

    Raises:
        ValidationError: If neither a unit value nor a total is given, or
            the reinvested part exceeds the amount received.
    """
    quantity = quantity_at_date(draft.asset_ticker, draft.date, assets)
    if received_total is not None:
        received = received_total
        unit_amount = None
    elif draft.unit_amount is not None:
        unit_amount = draft.unit_amount
        received = unit_amount * (quantity or Decimal("1"))
    else:
        raise ValidationError(
            "Missing required field: unit_amount or received_total"
        )
    if reinvested_amount > received:
        raise ValidationError(
            f"Reinvested amount {reinvested_amount} exceeds received "
            f"amount {received}"
        )
    return Earning(
        id=earning_id,
        asset_ticker=draft.asset_ticker,
        date=draft.date,
        type=draft.type or DEFAULT_EARNING_TYPE,
        received_amount=received,
        reinvested_amount=reinvested_amount,
        withdrawn_amount=received - reinvested_amount,
        unit_amount=unit_amount,
        quantity_at_date=quantity,
        is_auto_generated=False,
    )


def compute_earnings_statistics(
    earnings: Iterable[Earning],
    year: int,
) -> EarningsStatistics:
    """Return total income, income for ``year`` and the monthly average.

    The average is taken over months that recorded any income.
    """
    total = Decimal("0")
    total_for_year = Decimal("0")
    months: set[tuple[int, int]] = set()
    for earning in earnings:
        total += earning.received_amount
        months.add((earning.date.year, earning.date.month))
        if earning.date.year == year:
            total_for_year += earning.received_amount
    monthly_average = total / len(months) if months else Decimal("0")
    return EarningsStatistics(
        total=total,
        total_for_year=total_for_year,
        monthly_average=monthly_average,
        year=year,
    )


def compute_earnings_series(
    earnings: Iterable[Earning],
    view: str = "monthly",
) -> list[EarningsPoint]:
    """Group income by period in chronological order.

    Args:
        earnings: Income events.
        view: ``monthly`` (YYYY-MM), ``annual`` (YYYY) or ``cumulative``
            (running monthly total).

    Returns:
        list[EarningsPoint]: One point per period with income.

    Raises:
        ValidationError: If ``view`` is not a known view.
    """
    if view not in EARNINGS_VIEWS:
        raise ValidationError(f"Unknown earnings view: {view}")
    totals: dict[str, Decimal] = {}
    for earning in sorted(earnings, key=lambda item: item.date):
        if view == "annual":
            label = f"{earning.date.year:04d}"
        else:
            label = f"{earning.date.year:04d}-{earning.date.month:02d}"
        totals[label] = totals.get(label, Decimal("0")) + earning.received_amount

    if view != "cumulative":
        return [
            EarningsPoint(label=label, total=value)
            for label, value in totals.items()
        ]

    running = Decimal("0")
    points: list[EarningsPoint] = []
    for label, value in totals.items():
        running += value
        points.append(EarningsPoint(label=label, total=running))
    return points


__all__ = [
    "EARNINGS_VIEWS",
    "is_duplicate",
    "build_auto_earnings",
    "build_manual_earning",
    "compute_earnings_statistics",
    "compute_earnings_series",
]
