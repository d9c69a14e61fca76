"""Boundary Protocols — contracts between the catalogue core and the storage shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Balance storage is accessed only through LedgerRepository
    - Ledger credits are staged; CatalogueStore.record commits them together with the event
    - credit_batch + record is all-or-nothing: every id is credited and the event stored, or neither

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: boundary methods are async because implementations do IO,
      but core functions that feed these protocols are never async themselves —
      the shell orchestrates the async calls around the pure logic
    - One commit per mutation, owned by record() (ADR: ledger and event log share a transaction)
"""

from collections.abc import Sequence
from typing import Protocol

from folio.core.catalogue_events import CatalogueEvent
from folio.core.catalogue_snapshot import CatalogueSnapshot
from folio.core.domain_types import Address, TokenId


class LedgerRepository(Protocol):
    """Contract for per-holder balance bookkeeping — implemented by shell."""
    async def credit_unit(self, token_id: TokenId, recipient: Address) -> None: ...
    async def credit_batch(
        self, token_ids: Sequence[TokenId], recipient: Address,
    ) -> None: ...
    async def balance_of(self, holder: Address, token_id: TokenId) -> int: ...


class CatalogueStore(Protocol):
    """Contract for durable catalogue state — base URI, administrator, overrides, events."""
    async def load(self) -> CatalogueSnapshot | None: ...
    async def seed(self, base_uri: str, administrator: Address | None) -> None: ...
    async def record(self, offset: int, event: CatalogueEvent) -> None: ...
