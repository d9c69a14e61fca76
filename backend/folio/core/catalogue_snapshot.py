"""Catalogue Snapshot — the durable part of the catalogue, as loaded from storage.

Invariants:
    - events are in offset order: events[i] was appended at offset i
    - administrator None means renounced, not "unset": no default is applied on load
    - overrides hold explicit URIs only (issuance never writes here)

Design Decisions:
    - Plain frozen dataclass, no IO: the store builds it, services turn it into CatalogueState
      (ADR: same split as ForgeState snapshot / restore)
"""

from dataclasses import dataclass, field

from folio.core.catalogue_events import CatalogueEvent
from folio.core.domain_types import Address, TokenId


@dataclass(frozen=True)
class CatalogueSnapshot:
    base_uri: str
    administrator: Address | None
    overrides: dict[TokenId, str] = field(default_factory=dict)
    events: list[CatalogueEvent] = field(default_factory=list)
