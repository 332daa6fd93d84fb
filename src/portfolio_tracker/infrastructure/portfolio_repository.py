"""SQLAlchemy-backed repository for portfolio snapshots."""

from sqlalchemy import text

from portfolio_tracker.application.ports.database import DatabaseEnginePort
from portfolio_tracker.application.ports.portfolio_repository import (
    PortfolioRepositoryPort,
)
from portfolio_tracker.domain.models import (
    Asset,
    AssetClass,
    Contribution,
    Earning,
)
from portfolio_tracker.domain.services.records import (
    build_asset,
    build_asset_class,
    build_contribution,
    build_earning,
)

SELECT_CLASSES_SQL = text(
    """
    SELECT id, name, target_percent
    FROM asset_classes
    ORDER BY id
    """
)

SELECT_ASSETS_SQL = text(
    """
    SELECT id, ticker, class_id, quantity, purchase_date, purchase_price,
           current_price, is_manual_price, target_percent
    FROM assets
    ORDER BY id
    """
)

SELECT_EARNINGS_SQL = text(
    """
    SELECT id, asset_ticker, date, type, received_amount, reinvested_amount,
           withdrawn_amount, unit_amount, quantity_at_date, is_auto_generated
    FROM earnings
    ORDER BY date, id
    """
)

SELECT_CONTRIBUTIONS_SQL = text(
    """
    SELECT id, date, total_amount, out_of_pocket_amount, reinvested_amount
    FROM contributions
    ORDER BY date, id
    """
)

SELECT_CONTRIBUTION_DETAILS_SQL = text(
    """
    SELECT contribution_id, position, asset_id, ticker, quantity, price
    FROM contribution_details
    ORDER BY contribution_id, position
    """
)


class SqlAlchemyPortfolioRepository(PortfolioRepositoryPort):
    """Repository reading portfolio records through SQLAlchemy.

    Rows are validated through the domain record builders, so malformed
    stored data raises ``ValidationError`` instead of reaching the engine.
    """

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the portfolio engine.
        """
        self._db_port = db_port

    def fetch_classes(self) -> list[AssetClass]:
        rows = self._all(SELECT_CLASSES_SQL)
        return [build_asset_class(row._mapping) for row in rows]

    def fetch_assets(self) -> list[Asset]:
        rows = self._all(SELECT_ASSETS_SQL)
        return [build_asset(row._mapping) for row in rows]

    def fetch_earnings(self) -> list[Earning]:
        rows = self._all(SELECT_EARNINGS_SQL)
        return [build_earning(row._mapping) for row in rows]

    def fetch_contributions(self) -> list[Contribution]:
        engine = self._db_port.get_portfolio_engine()
        with engine.connect() as conn:
            rows = conn.execute(SELECT_CONTRIBUTIONS_SQL).all()
            detail_rows = conn.execute(SELECT_CONTRIBUTION_DETAILS_SQL).all()

        details: dict[str, list[dict]] = {}
        for row in detail_rows:
            mapping = dict(row._mapping)
            details.setdefault(str(mapping["contribution_id"]), []).append(mapping)

        return [
            build_contribution(row._mapping, details.get(str(row.id), []))
            for row in rows
        ]

    def _all(self, query) -> list:
        engine = self._db_port.get_portfolio_engine()
        with engine.connect() as conn:
            return conn.execute(query).all()


__all__ = ["SqlAlchemyPortfolioRepository"]
