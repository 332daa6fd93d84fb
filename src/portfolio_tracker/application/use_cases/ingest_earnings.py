"""Use case to ingest externally sourced income events.

Proposals arrive as loosely shaped mappings (e.g. parsed JSON) or as
EarningDraft records. Invalid proposals are skipped with a warning; valid
ones go through duplicate detection so repeated syncs do not create
duplicate records.
"""

from collections.abc import Iterable, Mapping
from typing import Any, Callable

from portfolio_tracker.application.ports.portfolio_repository import (
    PortfolioRepositoryPort,
)
from portfolio_tracker.application.use_cases.identifiers import new_record_id
from portfolio_tracker.domain.models import Earning, EarningDraft
from portfolio_tracker.domain.services.earnings import build_auto_earnings
from portfolio_tracker.domain.services.records import build_earning_draft
from portfolio_tracker.domain.services.validation import (
    ValidationError,
    require_text,
)
from portfolio_tracker.infrastructure.logging.logger import get_app_logger


class IngestEarningsUseCase:
    """Build new auto-generated income records for one ticker."""

    def __init__(
        self,
        repository: PortfolioRepositoryPort,
        logger=None,
        id_factory: Callable[[EarningDraft], str] | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing portfolio snapshots.
            logger: Optional logger compatible with logging.Logger-like API.
            id_factory: Optional factory for earning identifiers.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._id_factory = id_factory or (
            lambda draft: new_record_id(f"auto-{draft.asset_ticker}")
        )

    def execute(
        self,
        ticker: str,
        proposals: Iterable[EarningDraft | Mapping[str, Any]],
    ) -> list[Earning]:
        """Return the income records to add for ``ticker``.

        Args:
            ticker: Ticker the proposals belong to.
            proposals: Income events from an external source.

        Returns:
            list[Earning]: New records, excluding duplicates and events
            dated before any units were held.
        """
        resolved_ticker = require_text(ticker, "ticker")
        drafts = self._parse_proposals(resolved_ticker, proposals)
        new_earnings = build_auto_earnings(
            resolved_ticker,
            drafts,
            self._repository.fetch_assets(),
            self._repository.fetch_earnings(),
            self._id_factory,
            logger=self._logger,
        )
        self._logger.info(
            f"Ingested {len(new_earnings)} of {len(drafts)} earnings "
            f"for {resolved_ticker}"
        )
        return new_earnings

    def _parse_proposals(
        self,
        ticker: str,
        proposals: Iterable[EarningDraft | Mapping[str, Any]],
    ) -> list[EarningDraft]:
        drafts: list[EarningDraft] = []
        for proposal in proposals:
            if isinstance(proposal, EarningDraft):
                drafts.append(proposal)
                continue
            try:
                drafts.append(build_earning_draft(proposal, ticker=ticker))
            except ValidationError as exc:
                self._logger.warning(
                    f"Skipping invalid earning proposal for {ticker}: {exc}"
                )
        return drafts


__all__ = ["IngestEarningsUseCase"]
