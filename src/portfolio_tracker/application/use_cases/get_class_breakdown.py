"""Use case to compare asset class weights with their targets."""

from portfolio_tracker.application.ports.portfolio_repository import (
    PortfolioRepositoryPort,
)
from portfolio_tracker.domain.models import ClassBreakdown
from portfolio_tracker.domain.services.accounting import (
    compute_class_breakdown,
)
from portfolio_tracker.infrastructure.logging.logger import get_app_logger


class GetClassBreakdownUseCase:
    """Compute current versus target weight for each asset class."""

    def __init__(
        self,
        repository: PortfolioRepositoryPort,
        logger=None,
    ) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self) -> list[ClassBreakdown]:
        """Return one breakdown entry per configured class."""
        classes = self._repository.fetch_classes()
        assets = self._repository.fetch_assets()
        known = {asset_class.id for asset_class in classes}
        orphans = [asset.id for asset in assets if asset.class_id not in known]
        if orphans:
            self._logger.warning(
                f"Assets without a known class are excluded: {orphans}"
            )
        return compute_class_breakdown(assets, classes)


__all__ = ["GetClassBreakdownUseCase"]
