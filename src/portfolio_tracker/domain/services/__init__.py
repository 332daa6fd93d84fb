"""Domain services package."""

from .accounting import (
    compute_class_breakdown,
    compute_class_values,
    compute_portfolio_value,
    summarize,
)
from .allocation import allocate
from .contributions import (
    build_allocation_contribution,
    resolve_contribution_split,
)
from .earnings import (
    build_auto_earnings,
    build_manual_earning,
    compute_earnings_series,
    compute_earnings_statistics,
    is_duplicate,
)
from .merge import apply_contribution, merge_position, record_lot
from .positions import quantity_at_date
from .validation import ValidationError

__all__ = [
    "allocate",
    "apply_contribution",
    "build_allocation_contribution",
    "build_auto_earnings",
    "build_manual_earning",
    "compute_class_breakdown",
    "compute_class_values",
    "compute_earnings_series",
    "compute_earnings_statistics",
    "compute_portfolio_value",
    "is_duplicate",
    "merge_position",
    "quantity_at_date",
    "record_lot",
    "resolve_contribution_split",
    "summarize",
    "ValidationError",
]
