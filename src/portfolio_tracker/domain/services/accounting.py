"""Domain services for portfolio accounting."""

from collections.abc import Iterable
from decimal import Decimal

from portfolio_tracker.domain.constants import PERCENT_BASE
from portfolio_tracker.domain.models import (
    Asset,
    AssetClass,
    AssetPerformance,
    ClassBreakdown,
    Contribution,
    Earning,
    PortfolioSummary,
)

_ZERO = Decimal("0")


def summarize(
    assets: Iterable[Asset],
    earnings: Iterable[Earning],
    contributions: Iterable[Contribution],
) -> PortfolioSummary:
    """Compute profitability figures for a portfolio snapshot.

    Real profit is measured against out-of-pocket cash so reinvested income
    does not inflate the denominator. Percentages default to zero when
    their denominator is zero.

    Args:
        assets: Current holdings.
        earnings: Income ledger.
        contributions: Contribution history.

    Returns:
        PortfolioSummary: Wealth, profit and yield figures.
    """
    current_wealth = _ZERO
    total_cost_basis = _ZERO
    for asset in assets:
        current_wealth += asset.current_value
        total_cost_basis += asset.cost_basis

    total_earnings = sum((e.received_amount for e in earnings), _ZERO)
    total_reinvested = _ZERO
    total_out_of_pocket = _ZERO
    for contribution in contributions:
        total_reinvested += contribution.reinvested_amount
        total_out_of_pocket += contribution.out_of_pocket_amount

    withdrawn_earnings = total_earnings - total_reinvested
    real_profit_value = (
        current_wealth + withdrawn_earnings
    ) - total_out_of_pocket

    return PortfolioSummary(
        current_wealth=current_wealth,
        total_cost_basis=total_cost_basis,
        total_earnings=total_earnings,
        total_reinvested=total_reinvested,
        total_out_of_pocket=total_out_of_pocket,
        withdrawn_earnings=withdrawn_earnings,
        real_profit_value=real_profit_value,
        real_profit_percent=_percent(real_profit_value, total_out_of_pocket),
        capital_gain_percent=_percent(
            current_wealth - total_cost_basis,
            total_cost_basis,
        ),
        earnings_yield_percent=_percent(total_earnings, total_cost_basis),
    )


def compute_portfolio_value(assets: Iterable[Asset]) -> Decimal:
    """Return the current value of every asset, orphans included."""
    return sum((asset.current_value for asset in assets), _ZERO)


def compute_class_values(
    assets: Iterable[Asset],
    classes: Iterable[AssetClass],
) -> dict[str, Decimal]:
    """Return the current value held in each class.

    Assets pointing at an unknown class are left out.
    """
    values = {asset_class.id: _ZERO for asset_class in classes}
    for asset in assets:
        if asset.class_id in values:
            values[asset.class_id] += asset.current_value
    return values


def compute_class_breakdown(
    assets: list[Asset],
    classes: list[AssetClass],
) -> list[ClassBreakdown]:
    """Compare each class's current weight with its normalized target.

    Args:
        assets: Current holdings.
        classes: Configured asset classes.

    Returns:
        list[ClassBreakdown]: One entry per class, in class order.
    """
    portfolio_value = compute_portfolio_value(assets)
    class_values = compute_class_values(assets, classes)
    target_total = sum((c.target_percent for c in classes), _ZERO)

    breakdown: list[ClassBreakdown] = []
    for asset_class in classes:
        current_value = class_values[asset_class.id]
        current_percent = _percent(current_value, portfolio_value)
        target_percent = (
            asset_class.target_percent / (target_total or PERCENT_BASE)
        ) * PERCENT_BASE
        breakdown.append(
            ClassBreakdown(
                class_id=asset_class.id,
                class_name=asset_class.name,
                current_value=current_value,
                current_percent=current_percent,
                target_percent=target_percent,
                gap_percent=target_percent - current_percent,
                assets=[
                    _asset_performance(asset)
                    for asset in assets
                    if asset.class_id == asset_class.id
                ],
            )
        )
    return breakdown


def _asset_performance(asset: Asset) -> AssetPerformance:
    invested = asset.cost_basis
    current_value = asset.current_value
    return AssetPerformance(
        asset_id=asset.id,
        ticker=asset.ticker,
        invested=invested,
        current_value=current_value,
        profit_percent=_percent(current_value - invested, invested),
    )


def _percent(numerator: Decimal, denominator: Decimal) -> Decimal:
    if denominator > 0:
        return numerator / denominator * PERCENT_BASE
    return _ZERO


__all__ = [
    "summarize",
    "compute_portfolio_value",
    "compute_class_values",
    "compute_class_breakdown",
]
