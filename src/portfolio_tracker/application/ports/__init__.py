"""Application ports package."""

from .database import DatabaseEnginePort
from .portfolio_repository import PortfolioRepositoryPort

__all__ = [
    "DatabaseEnginePort",
    "PortfolioRepositoryPort",
]
