"""Use case to record a user-entered income event."""

from decimal import Decimal
from typing import Callable

from portfolio_tracker.application.ports.portfolio_repository import (
    PortfolioRepositoryPort,
)
from portfolio_tracker.application.use_cases.identifiers import new_record_id
from portfolio_tracker.domain.models import Earning, EarningDraft
from portfolio_tracker.domain.services.earnings import build_manual_earning
from portfolio_tracker.domain.services.validation import require_non_negative
from portfolio_tracker.infrastructure.logging.logger import get_app_logger


class RecordEarningUseCase:
    """Record a manual income entry.

    Manual entries are trusted and skip duplicate detection.
    """

    def __init__(
        self,
        repository: PortfolioRepositoryPort,
        logger=None,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._id_factory = id_factory or (lambda: new_record_id("earn"))

    def execute(
        self,
        draft: EarningDraft,
        received_total: Decimal | None = None,
        reinvested_amount: Decimal = Decimal("0"),
    ) -> Earning:
        """Return the new income record.

        Args:
            draft: Ticker, date, per-unit value and type.
            received_total: Optional raw total replacing unit times units.
            reinvested_amount: Part of the income put back into the
                portfolio.

        Raises:
            ValidationError: If no amount is given or an amount is invalid.
        """
        if draft.unit_amount is not None:
            require_non_negative(draft.unit_amount, "unit_amount")
        if received_total is not None:
            received_total = require_non_negative(
                received_total,
                "received_total",
            )
        reinvested = require_non_negative(reinvested_amount, "reinvested_amount")
        earning = build_manual_earning(
            draft,
            self._repository.fetch_assets(),
            earning_id=self._id_factory(),
            received_total=received_total,
            reinvested_amount=reinvested,
        )
        if earning.quantity_at_date == 0:
            self._logger.warning(
                f"No units of {draft.asset_ticker} held on {draft.date}"
            )
        return earning


__all__ = ["RecordEarningUseCase"]
