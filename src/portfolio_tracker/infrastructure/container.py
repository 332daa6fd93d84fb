"""Composition root for wiring infrastructure adapters."""

from portfolio_tracker.application.ports.database import DatabaseEnginePort
from portfolio_tracker.application.ports.portfolio_repository import (
    PortfolioRepositoryPort,
)
from portfolio_tracker.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from portfolio_tracker.infrastructure.memory_repository import (
    InMemoryPortfolioRepository,
)
from portfolio_tracker.infrastructure.portfolio_repository import (
    SqlAlchemyPortfolioRepository,
)
from portfolio_tracker.infrastructure.settings import PortfolioSettings


def build_database_adapter(db_url: str | None = None) -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter(db_url)


def build_portfolio_repository(
    db_port: DatabaseEnginePort | None = None,
    settings: PortfolioSettings | None = None,
) -> PortfolioRepositoryPort:
    """Return the configured portfolio snapshot repository."""
    resolved_settings = settings or PortfolioSettings.from_env()
    if resolved_settings.backend == "memory":
        return InMemoryPortfolioRepository()
    resolved_db = db_port or build_database_adapter(resolved_settings.db_url)
    return SqlAlchemyPortfolioRepository(resolved_db)


__all__ = [
    "build_database_adapter",
    "build_portfolio_repository",
]
