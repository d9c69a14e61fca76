"""Issuance Handlers — administrator-gated minting of single books and batches.

Invariants:
    - Order: gate → plan (encode every pair) → ledger credit (staged) → store.record (commit) → apply
    - Any failure before the commit leaves ledger, resolver and event log untouched
    - Credits and the event commit together: a failed credit or record stores neither
    - Issued tokens resolve to the default URI unless an override was set

Design Decisions:
    - Lazy default-on-read: issuance does NOT write an override entry
      (ADR: base URI changes reach issued tokens; override map holds only explicit URIs)
    - Ledger and store injected per call: both bound to the request's DB session
"""

import logging
from collections.abc import Sequence

from folio.core.catalogue_events import BookMinted, BookBatchMinted
from folio.core.errors import UnauthorizedError
from folio.core.issuance import IssuancePlan, plan_issue, plan_issue_batch
from folio.core.repository_protocols import CatalogueStore, LedgerRepository
from folio.services.catalogue_state import CatalogueState

logger = logging.getLogger(__name__)


class IssuanceHandlers:
    """Mint books into a holder's balance through the ledger."""

    def __init__(
        self, state: CatalogueState, ledger: LedgerRepository, store: CatalogueStore,
    ):
        self._state = state
        self._ledger = ledger
        self._store = store

    async def issue(
        self, caller: str | None, recipient: str, edition: int, item: int,
    ) -> BookMinted:
        async with self._state.lock:
            self._require_administrator(caller)
            plan = plan_issue(recipient, edition, item)
            await self._ledger.credit_unit(plan.token_ids[0], plan.recipient)
            await self._store.record(self._state.next_offset(), plan.event)
            self._state.apply(plan.event)
        logger.info(
            f"Book minted: edition {edition} item {item}",
            extra={
                "caller": caller, "recipient": recipient,
                "edition": edition, "item": item,
                "token_id": str(plan.token_ids[0]), "event": plan.event.kind.value,
            },
        )
        return plan.event

    async def issue_batch(
        self,
        caller: str | None,
        recipient: str,
        editions: Sequence[int],
        items: Sequence[int],
    ) -> BookBatchMinted:
        async with self._state.lock:
            self._require_administrator(caller)
            plan: IssuancePlan = plan_issue_batch(recipient, editions, items)
            await self._ledger.credit_batch(list(plan.token_ids), plan.recipient)
            await self._store.record(self._state.next_offset(), plan.event)
            self._state.apply(plan.event)
        logger.info(
            f"Book batch minted: {len(plan.token_ids)} book(s)",
            extra={
                "caller": caller, "recipient": recipient,
                "batch_size": len(plan.token_ids), "event": plan.event.kind.value,
            },
        )
        return plan.event

    def _require_administrator(self, caller: str | None) -> None:
        try:
            self._state.administrators.require_administrator(caller)
        except UnauthorizedError:
            logger.warning(
                "Rejected issuance from non-administrator",
                extra={"caller": caller, "error_code": "UNAUTHORIZED"},
            )
            raise
