"""Builders that turn raw mappings into validated domain records.

Raw payloads (JSON documents, SQL rows, form data) are duck-typed; these
builders reject missing required fields before records reach the engine.
"""

from collections.abc import Iterable, Mapping
from datetime import date, datetime
from typing import Any

from portfolio_tracker.domain.constants import DEFAULT_EARNING_TYPE
from portfolio_tracker.domain.models import (
    Asset,
    AssetClass,
    AssetDraft,
    Contribution,
    ContributionDetail,
    Earning,
    EarningDraft,
)
from portfolio_tracker.domain.services.validation import (
    ValidationError,
    require_non_negative,
    require_text,
)


def parse_date(value, field_name: str = "date") -> date:
    """Parse a calendar date from a date, datetime, or ISO string.

    Raises:
        ValidationError: If the value is missing or not a valid date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raw = require_text(value, field_name)
    try:
        return date.fromisoformat(raw[:10])
    except ValueError as exc:
        raise ValidationError(
            f"{field_name} must be an ISO date (YYYY-MM-DD), got {value!r}"
        ) from exc


def build_asset_class(raw: Mapping[str, Any]) -> AssetClass:
    """Build an AssetClass from a raw mapping."""
    return AssetClass(
        id=require_text(raw.get("id"), "id"),
        name=require_text(raw.get("name"), "name"),
        target_percent=require_non_negative(
            raw.get("target_percent") or 0,
            "target_percent",
        ),
    )


def build_asset(raw: Mapping[str, Any]) -> Asset:
    """Build an Asset from a raw mapping.

    A missing quote falls back to the purchase price.
    """
    ticker = raw.get("ticker")
    purchase_price = require_non_negative(
        raw.get("purchase_price"),
        "purchase_price",
    )
    current_price = raw.get("current_price")
    if current_price is None or (
        isinstance(current_price, str) and not current_price.strip()
    ):
        current_price = purchase_price
    return Asset(
        id=require_text(raw.get("id"), "id"),
        ticker=ticker.strip() if isinstance(ticker, str) and ticker.strip() else None,
        class_id=require_text(raw.get("class_id"), "class_id"),
        quantity=require_non_negative(raw.get("quantity"), "quantity"),
        purchase_date=parse_date(raw.get("purchase_date"), "purchase_date"),
        purchase_price=purchase_price,
        current_price=require_non_negative(current_price, "current_price"),
        is_manual_price=bool(raw.get("is_manual_price") or False),
        target_percent=require_non_negative(
            raw.get("target_percent") or 0,
            "target_percent",
        ),
    )


def build_asset_draft(raw: Mapping[str, Any]) -> AssetDraft:
    """Build an incoming lot from a raw mapping; ticker is required."""
    current_price = raw.get("current_price")
    return AssetDraft(
        id=require_text(raw.get("id"), "id"),
        ticker=require_text(raw.get("ticker"), "ticker"),
        class_id=require_text(raw.get("class_id"), "class_id"),
        quantity=require_non_negative(raw.get("quantity"), "quantity"),
        purchase_date=parse_date(raw.get("purchase_date"), "purchase_date"),
        purchase_price=require_non_negative(
            raw.get("purchase_price"),
            "purchase_price",
        ),
        current_price=(
            require_non_negative(current_price, "current_price")
            if current_price is not None
            else None
        ),
        is_manual_price=bool(raw.get("is_manual_price") or False),
        target_percent=require_non_negative(
            raw.get("target_percent") or 0,
            "target_percent",
        ),
    )


def build_earning_draft(
    raw: Mapping[str, Any],
    ticker: str | None = None,
) -> EarningDraft:
    """Build an income proposal; ticker, date and unit amount are required."""
    return EarningDraft(
        asset_ticker=require_text(
            ticker if ticker is not None else raw.get("asset_ticker"),
            "asset_ticker",
        ),
        date=parse_date(raw.get("date")),
        unit_amount=require_non_negative(raw.get("unit_amount"), "unit_amount"),
        type=str(raw.get("type") or DEFAULT_EARNING_TYPE),
    )


def build_earning(raw: Mapping[str, Any]) -> Earning:
    """Build a recorded income event from a raw mapping.

    ``withdrawn_amount`` defaults to received minus reinvested and
    ``unit_amount`` may be absent for raw-total entries.
    """
    unit_amount = raw.get("unit_amount")
    withdrawn = raw.get("withdrawn_amount")
    received = require_non_negative(raw.get("received_amount"), "received_amount")
    reinvested = require_non_negative(
        raw.get("reinvested_amount"),
        "reinvested_amount",
    )
    return Earning(
        id=require_text(raw.get("id"), "id"),
        asset_ticker=require_text(raw.get("asset_ticker"), "asset_ticker"),
        date=parse_date(raw.get("date")),
        type=str(raw.get("type") or DEFAULT_EARNING_TYPE),
        received_amount=received,
        reinvested_amount=reinvested,
        withdrawn_amount=(
            require_non_negative(withdrawn, "withdrawn_amount")
            if withdrawn is not None
            else received - reinvested
        ),
        unit_amount=(
            require_non_negative(unit_amount, "unit_amount")
            if unit_amount is not None
            else None
        ),
        quantity_at_date=require_non_negative(
            raw.get("quantity_at_date"),
            "quantity_at_date",
        ),
        is_auto_generated=bool(raw.get("is_auto_generated") or False),
    )


def build_contribution(
    raw: Mapping[str, Any],
    details: Iterable[Mapping[str, Any]] = (),
) -> Contribution:
    """Build a contribution and its ordered detail lines from raw mappings."""
    return Contribution(
        id=require_text(raw.get("id"), "id"),
        date=parse_date(raw.get("date")),
        total_amount=require_non_negative(raw.get("total_amount"), "total_amount"),
        out_of_pocket_amount=require_non_negative(
            raw.get("out_of_pocket_amount"),
            "out_of_pocket_amount",
        ),
        reinvested_amount=require_non_negative(
            raw.get("reinvested_amount"),
            "reinvested_amount",
        ),
        details=tuple(
            ContributionDetail(
                asset_id=require_text(detail.get("asset_id"), "asset_id"),
                ticker=str(detail.get("ticker") or ""),
                quantity=require_non_negative(detail.get("quantity"), "quantity"),
                price=require_non_negative(detail.get("price"), "price"),
            )
            for detail in details
        ),
    )



__all__ = [
    "parse_date",
    "build_asset_class",
    "build_asset",
    "build_asset_draft",
    "build_earning_draft",
    "build_earning",
    "build_contribution",
]
