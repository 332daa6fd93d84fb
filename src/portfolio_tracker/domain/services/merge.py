"""Domain services for recording lots into positions."""

from dataclasses import replace
from datetime import date
from decimal import Decimal

from portfolio_tracker.domain.models import (
    Asset,
    AssetDraft,
    Contribution,
    ContributionDetail,
    MergeResult,
)


def merge_position(
    existing: Asset,
    incoming: AssetDraft,
    *,
    contribution_id: str,
    contribution_date: date,
    reinvested_amount: Decimal = Decimal("0"),
) -> MergeResult:
    """Merge an incoming lot into an existing position.

    The merged purchase price is the quantity-weighted average of both
    lots. When the merged quantity is zero the prior price is kept. The
    incoming quote replaces the current price only when one was supplied.

    Args:
        existing: Position already held for the ticker.
        incoming: New lot for the same ticker.
        contribution_id: Identifier for the generated contribution.
        contribution_date: Date of the generated contribution.
        reinvested_amount: Part of the lot cost funded by reinvested income.

    Returns:
        MergeResult: Updated asset and the contribution that funded the lot.
    """
    quantity = existing.quantity + incoming.quantity
    purchase_price = _weighted_price(
        existing.quantity,
        existing.purchase_price,
        incoming.quantity,
        incoming.purchase_price,
        fallback=existing.purchase_price,
    )
    merged = replace(
        existing,
        quantity=quantity,
        purchase_price=purchase_price,
        current_price=incoming.current_price or existing.current_price,
    )
    contribution = build_lot_contribution(
        asset_id=existing.id,
        incoming=incoming,
        contribution_id=contribution_id,
        contribution_date=contribution_date,
        reinvested_amount=reinvested_amount,
    )
    return MergeResult(asset=merged, contribution=contribution)


def record_lot(
    assets: list[Asset],
    incoming: AssetDraft,
    *,
    contribution_id: str,
    contribution_date: date,
    reinvested_amount: Decimal = Decimal("0"),
) -> MergeResult:
    """Record a lot, merging it into the position holding the same ticker.

    A ticker with no position yet becomes a new asset built from the draft.
    Either way a contribution is produced.
    """
    existing = next(
        (asset for asset in assets if asset.ticker == incoming.ticker),
        None,
    )
    if existing is not None:
        return merge_position(
            existing,
            incoming,
            contribution_id=contribution_id,
            contribution_date=contribution_date,
            reinvested_amount=reinvested_amount,
        )
    asset = Asset(
        id=incoming.id,
        ticker=incoming.ticker,
        class_id=incoming.class_id,
        quantity=incoming.quantity,
        purchase_date=incoming.purchase_date,
        purchase_price=incoming.purchase_price,
        current_price=incoming.current_price or incoming.purchase_price,
        is_manual_price=incoming.is_manual_price,
        target_percent=incoming.target_percent,
    )
    contribution = build_lot_contribution(
        asset_id=asset.id,
        incoming=incoming,
        contribution_id=contribution_id,
        contribution_date=contribution_date,
        reinvested_amount=reinvested_amount,
    )
    return MergeResult(asset=asset, contribution=contribution)


def build_lot_contribution(
    *,
    asset_id: str,
    incoming: AssetDraft,
    contribution_id: str,
    contribution_date: date,
    reinvested_amount: Decimal,
) -> Contribution:
    """Return the contribution that funded a single lot.

    The out-of-pocket part is the lot cost minus reinvested income, never
    below zero.
    """
    total_amount = incoming.quantity * incoming.purchase_price
    return Contribution(
        id=contribution_id,
        date=contribution_date,
        total_amount=total_amount,
        out_of_pocket_amount=max(Decimal("0"), total_amount - reinvested_amount),
        reinvested_amount=reinvested_amount,
        details=(
            ContributionDetail(
                asset_id=asset_id,
                ticker=incoming.ticker or "",
                quantity=incoming.quantity,
                price=incoming.purchase_price,
            ),
        ),
    )


def apply_contribution(
    assets: list[Asset],
    contribution: Contribution,
) -> list[Asset]:
    """Return the snapshot with every contribution detail merged in.

    Detail lines are matched by asset id; the detail price becomes the lot
    price and quotes are left untouched. Assets without a detail line are
    returned unchanged.
    """
    by_asset: dict[str, list[ContributionDetail]] = {}
    for detail in contribution.details:
        by_asset.setdefault(detail.asset_id, []).append(detail)

    updated: list[Asset] = []
    for asset in assets:
        merged = asset
        for detail in by_asset.get(asset.id, []):
            merged = replace(
                merged,
                quantity=merged.quantity + detail.quantity,
                purchase_price=_weighted_price(
                    merged.quantity,
                    merged.purchase_price,
                    detail.quantity,
                    detail.price,
                    fallback=merged.purchase_price,
                ),
            )
        updated.append(merged)
    return updated


def _weighted_price(
    quantity_a: Decimal,
    price_a: Decimal,
    quantity_b: Decimal,
    price_b: Decimal,
    *,
    fallback: Decimal,
) -> Decimal:
    quantity = quantity_a + quantity_b
    if quantity <= 0:
        return fallback
    return (quantity_a * price_a + quantity_b * price_b) / quantity


__all__ = [
    "merge_position",
    "record_lot",
    "build_lot_contribution",
    "apply_contribution",
]
