"""Application use cases package."""

from .apply_contribution import AppliedContribution, ApplyContributionUseCase
from .get_class_breakdown import GetClassBreakdownUseCase
from .get_earnings_statistics import (
    EarningsReport,
    GetEarningsStatisticsUseCase,
)
from .get_portfolio_summary import GetPortfolioSummaryUseCase
from .ingest_earnings import IngestEarningsUseCase
from .record_earning import RecordEarningUseCase
from .record_lot import RecordLotUseCase
from .suggest_contribution import SuggestContributionUseCase

__all__ = [
    "AppliedContribution",
    "ApplyContributionUseCase",
    "EarningsReport",
    "GetClassBreakdownUseCase",
    "GetEarningsStatisticsUseCase",
    "GetPortfolioSummaryUseCase",
    "IngestEarningsUseCase",
    "RecordEarningUseCase",
    "RecordLotUseCase",
    "SuggestContributionUseCase",
]
