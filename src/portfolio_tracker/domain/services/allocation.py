"""Deficit-proportional contribution allocation.

A single corrective pass: new money goes to the classes furthest below
their target value after the contribution, proportionally to each class's
shortfall. When no class is short, the money follows the target weights.
Inside a class, the amount is split by the assets' relative weights.
"""

from collections.abc import Iterable, Mapping
from decimal import Decimal

from portfolio_tracker.domain.constants import (
    MIN_ALLOCATION_AMOUNT,
    PERCENT_BASE,
)
from portfolio_tracker.domain.models import (
    AllocationResult,
    Asset,
    AssetAllocation,
    AssetClass,
    ClassAllocation,
)

_ZERO = Decimal("0")


def allocate(
    amount: Decimal,
    classes: list[AssetClass],
    class_values: Mapping[str, Decimal],
    assets: list[Asset],
    portfolio_value: Decimal,
) -> AllocationResult:
    """Suggest how to split ``amount`` across classes and assets.

    Args:
        amount: Cash to deploy.
        classes: Asset classes with their target weights.
        class_values: Current value held per class id.
        assets: Current holdings with their within-class weights.
        portfolio_value: Current value of the whole portfolio.

    Returns:
        AllocationResult: Per-class amounts (every class, in input order)
        and per-asset amounts of at least ``MIN_ALLOCATION_AMOUNT``, largest
        first.
    """
    class_allocations = allocate_classes(
        amount,
        classes,
        class_values,
        portfolio_value,
    )
    asset_allocations = allocate_assets(class_allocations, assets)
    return AllocationResult(
        amount=amount,
        class_allocations=class_allocations,
        asset_allocations=asset_allocations,
    )


def allocate_classes(
    amount: Decimal,
    classes: list[AssetClass],
    class_values: Mapping[str, Decimal],
    portfolio_value: Decimal,
) -> list[ClassAllocation]:
    """Return the class-level split of ``amount``."""
    weights = _effective_weights(classes)
    target_value = portfolio_value + amount
    deficits: dict[str, Decimal] = {}
    for asset_class in classes:
        ideal_value = target_value * weights[asset_class.id]
        current_value = class_values.get(asset_class.id, _ZERO)
        deficits[asset_class.id] = max(_ZERO, ideal_value - current_value)

    total_deficit = sum(deficits.values(), _ZERO)
    allocations: list[ClassAllocation] = []
    for asset_class in classes:
        deficit = deficits[asset_class.id]
        if total_deficit > 0:
            share = amount * deficit / total_deficit
        else:
            share = amount * weights[asset_class.id]
        allocations.append(
            ClassAllocation(
                class_id=asset_class.id,
                class_name=asset_class.name,
                amount=share,
                deficit=deficit,
            )
        )
    return allocations


def allocate_assets(
    class_allocations: Iterable[ClassAllocation],
    assets: list[Asset],
) -> list[AssetAllocation]:
    """Split each class amount across its assets by relative weight."""
    class_amounts = {item.class_id: item.amount for item in class_allocations}
    weight_totals: dict[str, Decimal] = {}
    for asset in assets:
        weight_totals[asset.class_id] = (
            weight_totals.get(asset.class_id, _ZERO) + asset.target_percent
        )

    allocations: list[AssetAllocation] = []
    for asset in assets:
        if asset.class_id not in class_amounts:
            continue
        weight_total = weight_totals[asset.class_id]
        if weight_total <= 0:
            continue
        value = class_amounts[asset.class_id] * asset.target_percent / weight_total
        if value < MIN_ALLOCATION_AMOUNT:
            continue
        allocations.append(
            AssetAllocation(
                asset_id=asset.id,
                ticker=asset.ticker,
                class_id=asset.class_id,
                amount=value,
                price=asset.current_price,
                suggested_quantity=(
                    value / asset.current_price
                    if asset.current_price > 0
                    else None
                ),
            )
        )
    return sorted(allocations, key=lambda item: item.amount, reverse=True)


def _effective_weights(classes: Iterable[AssetClass]) -> dict[str, Decimal]:
    classes = list(classes)
    total = sum((c.target_percent for c in classes), _ZERO)
    divisor = total or PERCENT_BASE
    return {c.id: c.target_percent / divisor for c in classes}


__all__ = ["allocate", "allocate_classes", "allocate_assets"]
