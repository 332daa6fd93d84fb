"""Port for reading portfolio snapshots."""

from typing import Protocol

from portfolio_tracker.domain.models import (
    Asset,
    AssetClass,
    Contribution,
    Earning,
)


class PortfolioRepositoryPort(Protocol):
    """Port exposing the current state of the portfolio records.

    Every call returns a fresh snapshot; use cases never mutate it.
    """

    def fetch_classes(self) -> list[AssetClass]:
        """Return configured asset classes."""

    def fetch_assets(self) -> list[Asset]:
        """Return current holdings."""

    def fetch_earnings(self) -> list[Earning]:
        """Return the income ledger."""

    def fetch_contributions(self) -> list[Contribution]:
        """Return the contribution history with detail lines."""


__all__ = ["PortfolioRepositoryPort"]
