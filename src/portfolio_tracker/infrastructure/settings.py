"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

from portfolio_tracker.infrastructure.logging.logger import get_app_logger

SUPPORTED_BACKENDS = ("sqlalchemy", "memory")


@dataclass(frozen=True)
class PortfolioSettings:
    """Settings for selecting the portfolio snapshot backend.

    Attributes:
        backend: Backend identifier (sqlalchemy or memory).
        currency_code: Currency used when printing amounts.
        db_url: Optional database URL for the sqlalchemy backend.
    """

    backend: str = "sqlalchemy"
    currency_code: str = "BRL"
    db_url: str | None = None

    @classmethod
    def from_env(cls) -> "PortfolioSettings":
        """Build settings from environment variables.

        Returns:
            PortfolioSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        backend = os.getenv("PORTFOLIO_BACKEND", "sqlalchemy").strip().lower()
        if backend not in SUPPORTED_BACKENDS:
            logger.warning(
                f"Unknown PORTFOLIO_BACKEND '{backend}', "
                "falling back to sqlalchemy."
            )
            backend = "sqlalchemy"
        currency_code = (
            os.getenv("PORTFOLIO_CURRENCY", "BRL").strip().upper() or "BRL"
        )
        db_url = os.getenv("PORTFOLIO_DB_URL") or None
        return cls(backend=backend, currency_code=currency_code, db_url=db_url)


__all__ = ["PortfolioSettings", "SUPPORTED_BACKENDS"]
