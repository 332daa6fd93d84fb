"""Domain models for portfolio records."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class AssetClass:
    """Named grouping of assets with a portfolio-level target weight.

    Attributes:
        id: Unique class identifier.
        name: Display name (e.g. "Fixed Income").
        target_percent: Desired share of the portfolio. Targets across
            classes are normalized at use time and need not sum to 100.
    """

    id: str
    name: str
    target_percent: Decimal


@dataclass(frozen=True)
class Asset:
    """Held position for a ticker.

    Attributes:
        id: Unique asset identifier.
        ticker: Optional display key, not enforced as unique.
        class_id: Reference to an AssetClass.
        quantity: Units held (non-negative).
        purchase_date: Date of the lot.
        purchase_price: Weighted-average unit cost across merged lots.
        current_price: Latest unit quote.
        is_manual_price: True when the quote was typed by the user.
        target_percent: Relative weight within the class.
    """

    id: str
    ticker: str | None
    class_id: str
    quantity: Decimal
    purchase_date: date
    purchase_price: Decimal
    current_price: Decimal
    is_manual_price: bool = False
    target_percent: Decimal = Decimal("0")

    @property
    def current_value(self) -> Decimal:
        """Return quantity times current price."""
        return self.quantity * self.current_price

    @property
    def cost_basis(self) -> Decimal:
        """Return quantity times weighted-average purchase price."""
        return self.quantity * self.purchase_price


@dataclass(frozen=True)
class AssetDraft:
    """Incoming lot that has not been merged into a position yet."""

    id: str
    ticker: str
    class_id: str
    quantity: Decimal
    purchase_date: date
    purchase_price: Decimal
    current_price: Decimal | None = None
    is_manual_price: bool = False
    target_percent: Decimal = Decimal("0")


@dataclass(frozen=True)
class Earning:
    """Income event received for a ticker.

    ``received_amount`` equals ``reinvested_amount + withdrawn_amount`` at
    creation time. ``quantity_at_date`` is captured once and never
    recomputed.
    """

    id: str
    asset_ticker: str
    date: date
    type: str
    received_amount: Decimal
    reinvested_amount: Decimal
    withdrawn_amount: Decimal
    unit_amount: Decimal | None
    quantity_at_date: Decimal
    is_auto_generated: bool = False


@dataclass(frozen=True)
class EarningDraft:
    """Proposed income event, before quantities and amounts are resolved."""

    asset_ticker: str
    date: date
    unit_amount: Decimal | None
    type: str = "Dividend"


@dataclass(frozen=True)
class ContributionDetail:
    """How part of a contribution was deployed into one asset."""

    asset_id: str
    ticker: str
    quantity: Decimal
    price: Decimal

    @property
    def amount(self) -> Decimal:
        """Return quantity times price."""
        return self.quantity * self.price


@dataclass(frozen=True)
class Contribution:
    """Capital added to the portfolio.

    ``out_of_pocket_amount + reinvested_amount`` equals ``total_amount``.
    """

    id: str
    date: date
    total_amount: Decimal
    out_of_pocket_amount: Decimal
    reinvested_amount: Decimal
    details: tuple[ContributionDetail, ...] = field(default_factory=tuple)


__all__ = [
    "AssetClass",
    "Asset",
    "AssetDraft",
    "Earning",
    "EarningDraft",
    "ContributionDetail",
    "Contribution",
]
