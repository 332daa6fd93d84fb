"""CLI adapter printing the portfolio summary and class breakdown."""

from portfolio_tracker.application.use_cases.get_class_breakdown import (
    GetClassBreakdownUseCase,
)
from portfolio_tracker.application.use_cases.get_portfolio_summary import (
    GetPortfolioSummaryUseCase,
)
from portfolio_tracker.infrastructure.container import (
    build_portfolio_repository,
)
from portfolio_tracker.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)
from portfolio_tracker.infrastructure.settings import PortfolioSettings


def main() -> None:
    """Print profitability figures and class weights."""
    logger = get_app_logger()
    settings = PortfolioSettings.from_env()
    get_usage_logger().info(f"portfolio-summary backend={settings.backend}")
    repository = build_portfolio_repository(settings=settings)

    summary = GetPortfolioSummaryUseCase(repository, logger=logger).execute()
    breakdown = GetClassBreakdownUseCase(repository, logger=logger).execute()

    currency = settings.currency_code
    print(f"Portfolio summary ({currency})")
    print(
        f"wealth={summary.current_wealth:.2f}, "
        f"cost_basis={summary.total_cost_basis:.2f}, "
        f"out_of_pocket={summary.total_out_of_pocket:.2f}"
    )
    print(
        f"earnings={summary.total_earnings:.2f}, "
        f"reinvested={summary.total_reinvested:.2f}, "
        f"withdrawn={summary.withdrawn_earnings:.2f}"
    )
    print(
        f"real_profit={summary.real_profit_value:.2f} "
        f"({summary.real_profit_percent:.2f}%), "
        f"capital_gain={summary.capital_gain_percent:.2f}%, "
        f"yield_on_cost={summary.earnings_yield_percent:.2f}%"
    )
    for item in breakdown:
        print(
            f"{item.class_name}: value={item.current_value:.2f}, "
            f"current={item.current_percent:.2f}%, "
            f"target={item.target_percent:.2f}%"
        )


if __name__ == "__main__":  # pragma: no cover
    main()
