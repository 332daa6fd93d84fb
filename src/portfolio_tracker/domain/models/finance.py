"""Domain models for computed portfolio projections."""

from dataclasses import dataclass
from decimal import Decimal

from portfolio_tracker.domain.models.portfolio import Asset, Contribution


@dataclass(frozen=True)
class PortfolioSummary:
    """Profitability figures derived from holdings, income and contributions.

    Attributes:
        current_wealth: Sum of quantity times current price.
        total_cost_basis: Sum of quantity times purchase price.
        total_earnings: Sum of received income.
        total_reinvested: Income put back into the portfolio.
        total_out_of_pocket: New external cash contributed.
        withdrawn_earnings: Income not reinvested.
        real_profit_value: Wealth plus withdrawn income minus cash in.
        real_profit_percent: Real profit over out-of-pocket cash.
        capital_gain_percent: Price appreciation over cost basis.
        earnings_yield_percent: Income over cost basis (yield on cost).
    """

    current_wealth: Decimal
    total_cost_basis: Decimal
    total_earnings: Decimal
    total_reinvested: Decimal
    total_out_of_pocket: Decimal
    withdrawn_earnings: Decimal
    real_profit_value: Decimal
    real_profit_percent: Decimal
    capital_gain_percent: Decimal
    earnings_yield_percent: Decimal


@dataclass(frozen=True)
class ClassAllocation:
    """Share of a contribution directed at one asset class."""

    class_id: str
    class_name: str
    amount: Decimal
    deficit: Decimal


@dataclass(frozen=True)
class AssetAllocation:
    """Share of a contribution directed at one asset."""

    asset_id: str
    ticker: str | None
    class_id: str
    amount: Decimal
    price: Decimal
    suggested_quantity: Decimal | None


@dataclass(frozen=True)
class AllocationResult:
    """Suggested split of a contribution."""

    amount: Decimal
    class_allocations: list[ClassAllocation]
    asset_allocations: list[AssetAllocation]

    @property
    def allocated_to_assets(self) -> Decimal:
        """Return the sum of retained asset allocations."""
        return sum(
            (item.amount for item in self.asset_allocations),
            Decimal("0"),
        )


@dataclass(frozen=True)
class MergeResult:
    """Position after a lot was recorded, and the contribution it produced."""

    asset: Asset
    contribution: Contribution


@dataclass(frozen=True)
class ContributionSplit:
    """Origin of the cash behind a contribution."""

    total_amount: Decimal
    out_of_pocket_amount: Decimal
    reinvested_amount: Decimal


@dataclass(frozen=True)
class AssetPerformance:
    """Invested amount versus current value for one asset."""

    asset_id: str
    ticker: str | None
    invested: Decimal
    current_value: Decimal
    profit_percent: Decimal


@dataclass(frozen=True)
class ClassBreakdown:
    """Current position of an asset class relative to its target."""

    class_id: str
    class_name: str
    current_value: Decimal
    current_percent: Decimal
    target_percent: Decimal
    gap_percent: Decimal
    assets: list[AssetPerformance]


@dataclass(frozen=True)
class EarningsStatistics:
    """Headline income figures."""

    total: Decimal
    total_for_year: Decimal
    monthly_average: Decimal
    year: int


@dataclass(frozen=True)
class EarningsPoint:
    """Income total for one period label."""

    label: str
    total: Decimal


__all__ = [
    "PortfolioSummary",
    "ClassAllocation",
    "AssetAllocation",
    "AllocationResult",
    "MergeResult",
    "ContributionSplit",
    "AssetPerformance",
    "ClassBreakdown",
    "EarningsStatistics",
    "EarningsPoint",
]
