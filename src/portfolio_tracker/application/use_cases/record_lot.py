"""Use case to record a new lot for a ticker."""

from datetime import date
from decimal import Decimal
from typing import Callable

from portfolio_tracker.application.ports.portfolio_repository import (
    PortfolioRepositoryPort,
)
from portfolio_tracker.application.use_cases.identifiers import new_record_id
from portfolio_tracker.domain.models import AssetDraft, MergeResult
from portfolio_tracker.domain.services.merge import record_lot
from portfolio_tracker.domain.services.validation import require_non_negative
from portfolio_tracker.infrastructure.logging.logger import get_app_logger


class RecordLotUseCase:
    """Merge an incoming lot into its position and produce a contribution."""

    def __init__(
        self,
        repository: PortfolioRepositoryPort,
        logger=None,
        id_factory: Callable[[], str] | None = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._id_factory = id_factory or (lambda: new_record_id("cont"))
        self._today = today

    def execute(
        self,
        draft: AssetDraft,
        reinvested_amount: Decimal | str | int = Decimal("0"),
        contribution_date: date | None = None,
    ) -> MergeResult:
        """Return the merged position and its funding contribution.

        Raises:
            ValidationError: If the lot quantity, price or reinvested amount
                is negative.
        """
        require_non_negative(draft.quantity, "quantity")
        require_non_negative(draft.purchase_price, "purchase_price")
        reinvested = require_non_negative(reinvested_amount, "reinvested_amount")

        result = record_lot(
            self._repository.fetch_assets(),
            draft,
            contribution_id=self._id_factory(),
            contribution_date=contribution_date or self._today(),
            reinvested_amount=reinvested,
        )

        self._logger.info(
            f"Lot recorded for {draft.ticker}: quantity={result.asset.quantity}, "
            f"average_price={result.asset.purchase_price}"
        )
        return result


__all__ = ["RecordLotUseCase"]
