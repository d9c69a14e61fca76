"""Catalogue Events — ordered notifications for holders and indexers.

Invariants:
    - Events are immutable once created (frozen dataclasses)
    - EventLog is append-only; offsets are stable positions in total order
    - One event per logical mutation — a batch issuance emits one BookBatchMinted, not one per book
    - Shell appends an event only after the mutation it describes has been applied
    - event_from_payload(e.kind, e.to_payload()) == e: the payload is the stored form

Design Decisions:
    - Dataclasses over pydantic models: events are internal values, schemas live at the API boundary
    - to_payload() renders token ids as decimal strings (JSON numbers lose precision past 2**53)
"""

from dataclasses import dataclass, field

from folio.core.domain_types import Address, EventKind, TokenId


@dataclass(frozen=True)
class TokenURISet:
    token_id: TokenId
    uri: str
    kind: EventKind = field(default=EventKind.TOKEN_URI_SET, init=False)

    def to_payload(self) -> dict:
        return {"token_id": str(self.token_id), "uri": self.uri}


@dataclass(frozen=True)
class BaseURISet:
    base_uri: str
    kind: EventKind = field(default=EventKind.BASE_URI_SET, init=False)

    def to_payload(self) -> dict:
        return {"base_uri": self.base_uri}


@dataclass(frozen=True)
class BookMinted:
    recipient: Address
    edition: int
    item: int
    kind: EventKind = field(default=EventKind.BOOK_MINTED, init=False)

    def to_payload(self) -> dict:
        return {
            "recipient": self.recipient,
            "edition": self.edition,
            "item": self.item,
        }


@dataclass(frozen=True)
class BookBatchMinted:
    recipient: Address
    editions: tuple[int, ...]
    items: tuple[int, ...]
    kind: EventKind = field(default=EventKind.BOOK_BATCH_MINTED, init=False)

    def to_payload(self) -> dict:
        return {
            "recipient": self.recipient,
            "editions": list(self.editions),
            "items": list(self.items),
        }


@dataclass(frozen=True)
class AdministratorTransferred:
    previous: Address | None
    new: Address | None
    kind: EventKind = field(default=EventKind.ADMINISTRATOR_TRANSFERRED, init=False)

    def to_payload(self) -> dict:
        return {"previous": self.previous, "new": self.new}


CatalogueEvent = (
    TokenURISet | BaseURISet | BookMinted | BookBatchMinted | AdministratorTransferred
)


@dataclass
class EventLog:
    """Append-only, totally ordered event sequence."""

    events: list[CatalogueEvent] = field(default_factory=list)

    def append(self, event: CatalogueEvent) -> int:
        """Append event and return its offset."""
        self.events.append(event)
        return len(self.events) - 1

    def since(self, offset: int = 0, limit: int | None = None) -> list[CatalogueEvent]:
        """Events at positions >= offset, oldest first."""
        page = self.events[max(offset, 0):]
        return page if limit is None else page[:limit]

    def __len__(self) -> int:
        return len(self.events)


def event_from_payload(kind: str, payload: dict) -> CatalogueEvent:
    """Rebuild an event from its kind and to_payload() dict. Inverse of to_payload()."""
    match EventKind(kind):
        case EventKind.TOKEN_URI_SET:
            return TokenURISet(token_id=TokenId(int(payload["token_id"])), uri=payload["uri"])
        case EventKind.BASE_URI_SET:
            return BaseURISet(base_uri=payload["base_uri"])
        case EventKind.BOOK_MINTED:
            return BookMinted(
                recipient=Address(payload["recipient"]),
                edition=payload["edition"],
                item=payload["item"],
            )
        case EventKind.BOOK_BATCH_MINTED:
            return BookBatchMinted(
                recipient=Address(payload["recipient"]),
                editions=tuple(payload["editions"]),
                items=tuple(payload["items"]),
            )
        case EventKind.ADMINISTRATOR_TRANSFERRED:
            return AdministratorTransferred(
                previous=payload["previous"], new=payload["new"],
            )
