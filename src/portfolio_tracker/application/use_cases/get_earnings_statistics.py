"""Use case to summarize the income ledger."""

from dataclasses import dataclass
from datetime import date
from typing import Callable

from portfolio_tracker.application.ports.portfolio_repository import (
    PortfolioRepositoryPort,
)
from portfolio_tracker.domain.models import EarningsPoint, EarningsStatistics
from portfolio_tracker.domain.services.earnings import (
    compute_earnings_series,
    compute_earnings_statistics,
)
from portfolio_tracker.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class EarningsReport:
    """Headline income figures and a period series."""

    statistics: EarningsStatistics
    series: list[EarningsPoint]


class GetEarningsStatisticsUseCase:
    """Compute income totals and a monthly, annual or cumulative series."""

    def __init__(
        self,
        repository: PortfolioRepositoryPort,
        logger=None,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._today = today

    def execute(
        self,
        year: int | None = None,
        view: str = "monthly",
    ) -> EarningsReport:
        """Return the earnings report.

        Args:
            year: Year for the yearly total, defaults to the current year.
            view: Series grouping (monthly, annual or cumulative).
        """
        earnings = self._repository.fetch_earnings()
        resolved_year = year or self._today().year
        statistics = compute_earnings_statistics(earnings, resolved_year)
        series = compute_earnings_series(earnings, view)
        self._logger.info(
            f"Earnings report built: total={statistics.total}, "
            f"year={resolved_year}, view={view}, points={len(series)}"
        )
        return EarningsReport(statistics=statistics, series=series)


__all__ = ["GetEarningsStatisticsUseCase", "EarningsReport"]
