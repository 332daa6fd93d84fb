"""Domain models package."""

from .finance import (
    AllocationResult,
    AssetAllocation,
    AssetPerformance,
    ClassAllocation,
    ClassBreakdown,
    ContributionSplit,
    EarningsPoint,
    EarningsStatistics,
    MergeResult,
    PortfolioSummary,
)
from .portfolio import (
    Asset,
    AssetClass,
    AssetDraft,
    Contribution,
    ContributionDetail,
    Earning,
    EarningDraft,
)

__all__ = [
    "Asset",
    "AssetClass",
    "AssetDraft",
    "Contribution",
    "ContributionDetail",
    "Earning",
    "EarningDraft",
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
