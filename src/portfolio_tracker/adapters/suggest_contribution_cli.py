"""CLI adapter suggesting how to split a contribution.

Usage: ``suggest-contribution 1000`` or ``CONTRIBUTION_AMOUNT=1000
suggest-contribution``.
"""

import os
import sys

from portfolio_tracker.application.use_cases.suggest_contribution import (
    SuggestContributionUseCase,
)
from portfolio_tracker.domain.services.validation import ValidationError
from portfolio_tracker.infrastructure.container import (
    build_portfolio_repository,
)
from portfolio_tracker.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)
from portfolio_tracker.infrastructure.settings import PortfolioSettings


def main(argv: list[str] | None = None) -> int:
    """Print the suggested allocation for the requested amount.

    Returns:
        int: Process exit code.
    """
    args = sys.argv[1:] if argv is None else argv
    raw_amount = args[0] if args else os.getenv("CONTRIBUTION_AMOUNT")
    logger = get_app_logger()
    settings = PortfolioSettings.from_env()
    get_usage_logger().info(f"suggest-contribution amount={raw_amount}")
    repository = build_portfolio_repository(settings=settings)

    use_case = SuggestContributionUseCase(repository, logger=logger)
    try:
        result = use_case.execute(raw_amount)
    except ValidationError as exc:
        logger.error(str(exc))
        print(f"Invalid contribution amount: {exc}", file=sys.stderr)
        return 2

    currency = settings.currency_code
    print(f"Suggested contribution of {result.amount:.2f} {currency}")
    for item in result.class_allocations:
        print(f"{item.class_name}: {item.amount:.2f}")
    for item in result.asset_allocations:
        quantity = (
            f"{item.suggested_quantity:.4f}"
            if item.suggested_quantity is not None
            else "n/a"
        )
        print(
            f"  {item.ticker or item.asset_id}: {item.amount:.2f} "
            f"(~{quantity} units at {item.price:.2f})"
        )
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
