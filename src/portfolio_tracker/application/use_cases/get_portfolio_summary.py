"""Use case to compute portfolio profitability figures."""

from portfolio_tracker.application.ports.portfolio_repository import (
    PortfolioRepositoryPort,
)
from portfolio_tracker.domain.models import PortfolioSummary
from portfolio_tracker.domain.services.accounting import summarize
from portfolio_tracker.domain.services.validation import (
    warn_on_invalid_positions,
)
from portfolio_tracker.infrastructure.logging.logger import get_app_logger


class GetPortfolioSummaryUseCase:
    """Compute wealth, real profit and yield from the current snapshot."""

    def __init__(
        self,
        repository: PortfolioRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing portfolio snapshots.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self) -> PortfolioSummary:
        """Return the portfolio summary.

        Returns:
            PortfolioSummary: Figures computed from holdings, income and
            contributions.
        """
        assets = self._repository.fetch_assets()
        earnings = self._repository.fetch_earnings()
        contributions = self._repository.fetch_contributions()
        warn_on_invalid_positions(assets, self._logger)

        summary = summarize(assets, earnings, contributions)

        self._logger.info(
            f"Portfolio summary computed: wealth={summary.current_wealth}, "
            f"out_of_pocket={summary.total_out_of_pocket}, "
            f"real_profit={summary.real_profit_value}"
        )
        return summary


__all__ = ["GetPortfolioSummaryUseCase"]
