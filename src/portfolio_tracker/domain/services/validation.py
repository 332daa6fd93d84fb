"""Domain validation helpers."""

from collections.abc import Iterable
from decimal import Decimal, InvalidOperation
from logging import Logger

from portfolio_tracker.domain.models import Asset
from portfolio_tracker.utils.decimal_utils import coerce_decimal


class ValidationError(ValueError):
    """Raised when caller input cannot reach the engine."""


def require_decimal(value, field_name: str) -> Decimal:
    """Return ``value`` as a Decimal or raise when it is missing or invalid.

    Args:
        value: Raw numeric value.
        field_name: Name used in the error message.

    Returns:
        Decimal: Parsed value.

    Raises:
        ValidationError: If the value is missing, not numeric, or not finite.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(f"Missing required field: {field_name}")
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be numeric, got {value!r}")
    try:
        parsed = coerce_decimal(value)
    except (InvalidOperation, ValueError, TypeError) as exc:
        raise ValidationError(
            f"{field_name} must be numeric, got {value!r}"
        ) from exc
    if not parsed.is_finite():
        raise ValidationError(f"{field_name} must be finite, got {value!r}")
    return parsed


def require_non_negative(value, field_name: str) -> Decimal:
    """Return ``value`` as a non-negative Decimal.

    Raises:
        ValidationError: If the value is missing, invalid, or negative.
    """
    parsed = require_decimal(value, field_name)
    if parsed < 0:
        raise ValidationError(f"{field_name} must not be negative: {parsed}")
    return parsed


def require_text(value, field_name: str) -> str:
    """Return a stripped, non-empty string.

    Raises:
        ValidationError: If the value is missing or blank.
    """
    if value is None:
        raise ValidationError(f"Missing required field: {field_name}")
    cleaned = str(value).strip()
    if not cleaned:
        raise ValidationError(f"Missing required field: {field_name}")
    return cleaned


def warn_on_invalid_positions(assets: Iterable[Asset], logger: Logger) -> None:
    """Warn when stored positions violate sign conventions.

    Args:
        assets: Asset snapshot to inspect.
        logger: Logger used for warnings.
    """
    for asset in assets:
        if asset.quantity < 0:
            logger.warning(
                f"Asset quantity is negative for asset_id={asset.id}: "
                f"{asset.quantity}"
            )
        if asset.current_price < 0 or asset.purchase_price < 0:
            logger.warning(
                f"Asset price is negative for asset_id={asset.id}: "
                f"current={asset.current_price}, "
                f"purchase={asset.purchase_price}"
            )


__all__ = [
    "ValidationError",
    "require_decimal",
    "require_non_negative",
    "require_text",
    "warn_on_invalid_positions",
]
