"""Database infrastructure for the portfolio tracker.

This module exposes helpers to create and reuse the SQLAlchemy engine
connected to the portfolio database. It belongs to the infrastructure layer
because it deals with external systems.
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from portfolio_tracker.application.ports.database import DatabaseEnginePort


def _get_env_var(name: str) -> str:
    """Read an environment variable or raise a descriptive error.

    Args:
        name: Name of the environment variable to read.

    Returns:
        str: The raw value of the environment variable.

    Raises:
        RuntimeError: If the environment variable is missing or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    Args:
        db_url: Fully qualified database URL (including driver and credentials)

    Returns:
        Engine: A SQLAlchemy engine instance with a small connection pool and
        health checks enabled.
    """
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_portfolio_engine: Optional[Engine] = None


def get_portfolio_engine(db_url: Optional[str] = None) -> Engine:
    """Get a singleton SQLAlchemy engine for the portfolio database.

    Args:
        db_url: Database URL; ``PORTFOLIO_DB_URL`` is read when omitted.

    Returns:
        Engine: Lazily initialized engine connected to the portfolio store.
    """
    global _portfolio_engine
    if _portfolio_engine is None:
        _portfolio_engine = _create_engine(
            db_url or _get_env_var("PORTFOLIO_DB_URL")
        )
    return _portfolio_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by a SQLAlchemy engine.

    The adapter hides configuration details (environment variables, pooling)
    behind the port so repositories can depend only on the protocol.
    """

    def __init__(self, db_url: Optional[str] = None) -> None:
        self._db_url = db_url

    def get_portfolio_engine(self) -> Engine:
        """Get the engine for the portfolio database.

        Returns:
            Engine: SQLAlchemy engine connected to the portfolio store.
        """
        return get_portfolio_engine(self._db_url)


__all__ = [
    "get_portfolio_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
