"""In-memory repository holding a fixed portfolio snapshot."""

from collections.abc import Iterable

from portfolio_tracker.application.ports.portfolio_repository import (
    PortfolioRepositoryPort,
)
from portfolio_tracker.domain.constants import DEFAULT_ASSET_CLASSES
from portfolio_tracker.domain.models import (
    Asset,
    AssetClass,
    Contribution,
    Earning,
)


class InMemoryPortfolioRepository(PortfolioRepositoryPort):
    """Repository serving records supplied by the caller.

    Starts with the default asset classes when none are given. Each fetch
    returns a new list so callers cannot alter the stored snapshot.
    """

    def __init__(
        self,
        classes: Iterable[AssetClass] | None = None,
        assets: Iterable[Asset] = (),
        earnings: Iterable[Earning] = (),
        contributions: Iterable[Contribution] = (),
    ) -> None:
        self._classes = tuple(
            DEFAULT_ASSET_CLASSES if classes is None else classes
        )
        self._assets = tuple(assets)
        self._earnings = tuple(earnings)
        self._contributions = tuple(contributions)

    def fetch_classes(self) -> list[AssetClass]:
        return list(self._classes)

    def fetch_assets(self) -> list[Asset]:
        return list(self._assets)

    def fetch_earnings(self) -> list[Earning]:
        return list(self._earnings)

    def fetch_contributions(self) -> list[Contribution]:
        return list(self._contributions)


__all__ = ["InMemoryPortfolioRepository"]
