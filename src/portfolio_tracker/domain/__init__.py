"""Domain package for portfolio records and the allocation engine."""

from .constants import DEFAULT_ASSET_CLASSES
from .models import (
    AllocationResult,
    Asset,
    AssetClass,
    AssetDraft,
    Contribution,
    ContributionDetail,
    Earning,
    EarningDraft,
    MergeResult,
    PortfolioSummary,
)
from .services import (
    ValidationError,
    allocate,
    is_duplicate,
    merge_position,
    quantity_at_date,
    summarize,
)

__all__ = [
    "AllocationResult",
    "Asset",
    "AssetClass",
    "AssetDraft",
    "Contribution",
    "ContributionDetail",
    "Earning",
    "EarningDraft",
    "MergeResult",
    "PortfolioSummary",
    "DEFAULT_ASSET_CLASSES",
    "ValidationError",
    "allocate",
    "is_duplicate",
    "merge_position",
    "quantity_at_date",
    "summarize",
]
