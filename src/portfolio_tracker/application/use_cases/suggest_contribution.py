"""Use case to suggest how a contribution should be split."""

from decimal import Decimal

from portfolio_tracker.application.ports.portfolio_repository import (
    PortfolioRepositoryPort,
)
from portfolio_tracker.domain.models import AllocationResult
from portfolio_tracker.domain.services.accounting import (
    compute_class_values,
    compute_portfolio_value,
)
from portfolio_tracker.domain.services.allocation import allocate
from portfolio_tracker.domain.services.validation import require_non_negative
from portfolio_tracker.infrastructure.logging.logger import get_app_logger


class SuggestContributionUseCase:
    """Suggest a per-class and per-asset split for new money.

    The amount is validated here so the allocation engine only ever sees a
    non-negative Decimal.
    """

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

    def execute(self, amount: Decimal | str | int) -> AllocationResult:
        """Return the suggested allocation for ``amount``.

        Args:
            amount: Contribution amount.

        Returns:
            AllocationResult: Class and asset split.

        Raises:
            ValidationError: If the amount is missing, non-numeric or
                negative.
        """
        resolved_amount = require_non_negative(amount, "amount")
        classes = self._repository.fetch_classes()
        assets = self._repository.fetch_assets()

        result = allocate(
            resolved_amount,
            classes,
            compute_class_values(assets, classes),
            assets,
            compute_portfolio_value(assets),
        )

        self._logger.info(
            f"Contribution of {resolved_amount} allocated across "
            f"{len(result.asset_allocations)} assets"
        )
        return result


__all__ = ["SuggestContributionUseCase"]
