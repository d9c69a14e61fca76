"""Metadata Handlers — administrator-gated base URI and per-token URI overrides.

Invariants:
    - require_administrator runs before any validation or mutation
    - Pair-keyed setter normalizes through encode_token_id, then follows the id-keyed path
    - Order: gate → validate → store.record (commit) → state.apply
    - A failed record leaves resolver and event log untouched

Design Decisions:
    - Resolver itself stays authorization-free; gating lives here with the lock
      (ADR: core state holder testable without an administrator)
"""

import logging

from folio.core.catalogue_events import BaseURISet, TokenURISet
from folio.core.domain_types import TokenId
from folio.core.errors import UnauthorizedError
from folio.core.repository_protocols import CatalogueStore
from folio.core.token_codec import check_token_id, encode_token_id
from folio.services.catalogue_state import CatalogueState

logger = logging.getLogger(__name__)


class MetadataHandlers:
    """Mutating metadata operations for one catalogue."""

    def __init__(self, state: CatalogueState, store: CatalogueStore):
        self._state = state
        self._store = store

    async def set_base_uri(self, caller: str | None, new_base: str) -> BaseURISet:
        async with self._state.lock:
            self._require_administrator(caller)
            event = BaseURISet(base_uri=new_base)
            await self._store.record(self._state.next_offset(), event)
            self._state.apply(event)
        logger.info(
            f"Base URI set to {new_base!r}",
            extra={"caller": caller, "event": event.kind.value},
        )
        return event

    async def set_uri_by_token_id(
        self, caller: str | None, token_id: int, uri: str,
    ) -> TokenURISet:
        async with self._state.lock:
            self._require_administrator(caller)
            check_token_id(token_id)
            return await self._apply_uri(caller, TokenId(token_id), uri)

    async def set_uri_by_pair(
        self, caller: str | None, edition: int, item: int, uri: str,
    ) -> TokenURISet:
        async with self._state.lock:
            self._require_administrator(caller)
            token_id = encode_token_id(edition, item)
            return await self._apply_uri(caller, token_id, uri)

    async def _apply_uri(
        self, caller: str | None, token_id: TokenId, uri: str,
    ) -> TokenURISet:
        event = TokenURISet(token_id=token_id, uri=uri)
        await self._store.record(self._state.next_offset(), event)
        self._state.apply(event)
        logger.info(
            f"Token URI override set for {token_id}",
            extra={"caller": caller, "token_id": str(token_id), "event": event.kind.value},
        )
        return event

    def _require_administrator(self, caller: str | None) -> None:
        try:
            self._state.administrators.require_administrator(caller)
        except UnauthorizedError:
            logger.warning(
                "Rejected metadata change from non-administrator",
                extra={"caller": caller, "error_code": "UNAUTHORIZED"},
            )
            raise
