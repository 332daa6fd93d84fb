"""Domain services for contribution records."""

from datetime import date
from decimal import Decimal

from portfolio_tracker.domain.models import (
    AllocationResult,
    Contribution,
    ContributionDetail,
    ContributionSplit,
)
from portfolio_tracker.domain.services.validation import ValidationError


def resolve_contribution_split(
    total_amount: Decimal,
    out_of_pocket_amount: Decimal | None = None,
    reinvested_amount: Decimal | None = None,
) -> ContributionSplit:
    """Resolve how much of a contribution is new cash versus reinvested income.

    Without a manual split the whole amount is out-of-pocket. When only one
    side is given the other is derived from the total.

    Raises:
        ValidationError: If a side is negative, exceeds the total, or both
            sides do not add up to the total.
    """
    if out_of_pocket_amount is None and reinvested_amount is None:
        return ContributionSplit(
            total_amount=total_amount,
            out_of_pocket_amount=total_amount,
            reinvested_amount=Decimal("0"),
        )
    if out_of_pocket_amount is None:
        out_of_pocket_amount = total_amount - reinvested_amount
    elif reinvested_amount is None:
        reinvested_amount = total_amount - out_of_pocket_amount

    if out_of_pocket_amount < 0 or reinvested_amount < 0:
        raise ValidationError(
            "Contribution split exceeds the total amount: "
            f"total={total_amount}, out_of_pocket={out_of_pocket_amount}, "
            f"reinvested={reinvested_amount}"
        )
    if out_of_pocket_amount + reinvested_amount != total_amount:
        raise ValidationError(
            "Contribution split does not add up to the total amount: "
            f"total={total_amount}, out_of_pocket={out_of_pocket_amount}, "
            f"reinvested={reinvested_amount}"
        )
    return ContributionSplit(
        total_amount=total_amount,
        out_of_pocket_amount=out_of_pocket_amount,
        reinvested_amount=reinvested_amount,
    )


def build_allocation_contribution(
    allocation: AllocationResult,
    split: ContributionSplit,
    *,
    contribution_id: str,
    contribution_date: date,
) -> Contribution:
    """Turn an accepted allocation suggestion into a contribution record.

    Asset allocations without a suggested quantity (no usable quote) are
    not deployed.
    """
    details = tuple(
        ContributionDetail(
            asset_id=item.asset_id,
            ticker=item.ticker or "",
            quantity=item.suggested_quantity,
            price=item.price,
        )
        for item in allocation.asset_allocations
        if item.suggested_quantity is not None
    )
    return Contribution(
        id=contribution_id,
        date=contribution_date,
        total_amount=split.total_amount,
        out_of_pocket_amount=split.out_of_pocket_amount,
        reinvested_amount=split.reinvested_amount,
        details=details,
    )


__all__ = ["resolve_contribution_split", "build_allocation_contribution"]
