"""Use case to turn an accepted allocation into a contribution."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Callable

from portfolio_tracker.application.ports.portfolio_repository import (
    PortfolioRepositoryPort,
)
from portfolio_tracker.application.use_cases.identifiers import new_record_id
from portfolio_tracker.domain.models import (
    AllocationResult,
    Asset,
    Contribution,
)
from portfolio_tracker.domain.services.contributions import (
    build_allocation_contribution,
    resolve_contribution_split,
)
from portfolio_tracker.domain.services.merge import apply_contribution
from portfolio_tracker.domain.services.validation import require_non_negative
from portfolio_tracker.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class AppliedContribution:
    """Records a caller should persist after accepting a suggestion.

    Attributes:
        contribution: New contribution record.
        assets: Asset snapshot with the contribution merged in.
    """

    contribution: Contribution
    assets: list[Asset]


class ApplyContributionUseCase:
    """Record an accepted allocation as a contribution and updated assets."""

    def __init__(
        self,
        repository: PortfolioRepositoryPort,
        logger=None,
        id_factory: Callable[[], str] | None = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing portfolio snapshots.
            logger: Optional logger compatible with logging.Logger-like API.
            id_factory: Optional factory for contribution identifiers.
            today: Clock used when no contribution date is given.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._id_factory = id_factory or (lambda: new_record_id("cont"))
        self._today = today

    def execute(
        self,
        allocation: AllocationResult,
        out_of_pocket_amount: Decimal | None = None,
        reinvested_amount: Decimal | None = None,
        contribution_date: date | None = None,
    ) -> AppliedContribution:
        """Build the contribution and the merged asset snapshot.

        Args:
            allocation: Suggestion accepted by the user.
            out_of_pocket_amount: Optional new-cash part of the amount.
            reinvested_amount: Optional reinvested-income part of the amount.
            contribution_date: Optional date, defaults to today.

        Returns:
            AppliedContribution: Contribution and updated assets.

        Raises:
            ValidationError: If an amount is negative or the split does not
                add up to the allocated amount.
        """
        total = require_non_negative(allocation.amount, "amount")
        split = resolve_contribution_split(
            total,
            _optional_amount(out_of_pocket_amount, "out_of_pocket_amount"),
            _optional_amount(reinvested_amount, "reinvested_amount"),
        )
        contribution = build_allocation_contribution(
            allocation,
            split,
            contribution_id=self._id_factory(),
            contribution_date=contribution_date or self._today(),
        )
        assets = apply_contribution(
            self._repository.fetch_assets(),
            contribution,
        )

        self._logger.info(
            f"Contribution {contribution.id} applied: total={split.total_amount}, "
            f"out_of_pocket={split.out_of_pocket_amount}, "
            f"reinvested={split.reinvested_amount}, "
            f"lines={len(contribution.details)}"
        )
        return AppliedContribution(contribution=contribution, assets=assets)


def _optional_amount(value, field_name: str) -> Decimal | None:
    if value is None:
        return None
    return require_non_negative(value, field_name)


__all__ = ["ApplyContributionUseCase", "AppliedContribution"]
