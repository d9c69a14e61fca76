"""Catalogue Events — verifies event kinds, payloads and the append-only log."""

import pytest

from folio.core.catalogue_events import (
    AdministratorTransferred, BaseURISet, BookBatchMinted, BookMinted, EventLog,
    TokenURISet, event_from_payload,
)
from folio.core.domain_types import Address, EventKind, TokenId


def test_event_kinds_match_notification_names():
    assert TokenURISet(TokenId(1), "u").kind.value == "TokenURISet"
    assert BookMinted("a", 1, 1).kind.value == "BookMinted"
    assert BookBatchMinted("a", (1,), (1,)).kind.value == "BookBatchMinted"
    assert BaseURISet("b").kind == EventKind.BASE_URI_SET


def test_token_id_payload_is_decimal_string():
    big = TokenId(2**255)
    assert TokenURISet(big, "u").to_payload() == {"token_id": str(2**255), "uri": "u"}


def test_batch_payload_lists():
    payload = BookBatchMinted("alice", (1, 2), (3, 4)).to_payload()
    assert payload == {"recipient": "alice", "editions": [1, 2], "items": [3, 4]}


def test_event_log_offsets_and_paging():
    log = EventLog()
    assert log.append(BaseURISet("a")) == 0
    assert log.append(BaseURISet("b")) == 1
    assert log.append(BaseURISet("c")) == 2
    assert len(log) == 3
    assert [e.base_uri for e in log.since(1)] == ["b", "c"]
    assert [e.base_uri for e in log.since(0, limit=2)] == ["a", "b"]
    assert log.since(5) == []


@pytest.mark.parametrize("event", [
    TokenURISet(token_id=TokenId(2**255), uri="ipfs://big"),
    BaseURISet(base_uri="https://b/"),
    BookMinted(recipient=Address("alice"), edition=0, item=999_999),
    BookBatchMinted(recipient=Address("alice"), editions=(1, 2), items=(3, 4)),
    AdministratorTransferred(previous=Address("admin"), new=None),
])
def test_stored_payload_rebuilds_event(event):
    assert event_from_payload(event.kind.value, event.to_payload()) == event
