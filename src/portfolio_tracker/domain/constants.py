"""Domain constants for portfolio accounting and allocation."""

from decimal import Decimal

from portfolio_tracker.domain.models.portfolio import AssetClass

UNIT_AMOUNT_TOLERANCE = Decimal("0.0001")
MIN_ALLOCATION_AMOUNT = Decimal("0.01")
PERCENT_BASE = Decimal("100")
DEFAULT_EARNING_TYPE = "Dividend"

DEFAULT_ASSET_CLASSES = (
    AssetClass(id="1", name="Domestic Equities", target_percent=Decimal("30")),
    AssetClass(id="2", name="International Equities", target_percent=Decimal("20")),
    AssetClass(id="3", name="Real Estate Funds", target_percent=Decimal("20")),
    AssetClass(id="4", name="Fixed Income", target_percent=Decimal("20")),
    AssetClass(id="5", name="Crypto", target_percent=Decimal("10")),
)


__all__ = [
    "UNIT_AMOUNT_TOLERANCE",
    "MIN_ALLOCATION_AMOUNT",
    "PERCENT_BASE",
    "DEFAULT_EARNING_TYPE",
    "DEFAULT_ASSET_CLASSES",
]
