"""Issuance Handlers — verifies gated, all-or-nothing minting through the ledger.

Invariants:
    - Issued books resolve to the default URI right after issuance
    - Overrides survive further unrelated issuances
    - Mismatched or partially invalid batches credit nothing and emit nothing
    - Non-administrators change nothing
    - A failing ledger leaves the event log untouched
    - A failing event commit rolls back the credits staged before it
"""

from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import OperationalError

from folio.core.catalogue_events import BookBatchMinted, BookMinted
from folio.core.domain_types import TokenId
from folio.core.errors import (
    DatabaseError, InvalidItemError, LengthMismatchError, UnauthorizedError,
)
from folio.services.handle_issuance import IssuanceHandlers
from folio.services.handle_metadata import MetadataHandlers

from tests.services.fake_ledger import ADMIN, RecordingLedger


async def test_issue_credits_one_unit_and_emits_book_minted(catalogue, store, ledger):
    event = await IssuanceHandlers(catalogue, ledger, store).issue(ADMIN, "alice", 1, 1)

    assert event == BookMinted(recipient="alice", edition=1, item=1)
    assert catalogue.events.events == [event]
    assert await ledger.balance_of("alice", TokenId(1_000_001)) == 1


async def test_issue_then_resolve_returns_default_uri(catalogue, store, ledger):
    await IssuanceHandlers(catalogue, ledger, store).issue(ADMIN, "alice", 1, 1)
    assert catalogue.resolver.resolve_pair(1, 1) == "https://x/1000001.json"


async def test_override_persists_across_later_issuances(catalogue, store, ledger):
    issuance = IssuanceHandlers(catalogue, ledger, store)
    await issuance.issue(ADMIN, "alice", 1, 1)
    await MetadataHandlers(catalogue, store).set_uri_by_pair(ADMIN, 1, 1, "ipfs://custom")

    await issuance.issue(ADMIN, "bob", 1, 2)
    await issuance.issue_batch(ADMIN, "carol", [2, 3], [1, 1])

    assert catalogue.resolver.resolve_pair(1, 1) == "ipfs://custom"
    assert catalogue.resolver.resolve_pair(1, 2) == "https://x/1000002.json"


async def test_issue_twice_accumulates_balance(catalogue, store, ledger):
    issuance = IssuanceHandlers(catalogue, ledger, store)
    await issuance.issue(ADMIN, "alice", 4, 4)
    await issuance.issue(ADMIN, "alice", 4, 4)
    assert await ledger.balance_of("alice", TokenId(4_000_004)) == 2


async def test_issue_invalid_item_changes_nothing(catalogue, store, ledger):
    with pytest.raises(InvalidItemError):
        await IssuanceHandlers(catalogue, ledger, store).issue(ADMIN, "alice", 1, 1_000_000)
    assert len(catalogue.events) == 0


async def test_issue_by_non_administrator_changes_nothing(catalogue, store, ledger):
    with pytest.raises(UnauthorizedError) as exc:
        await IssuanceHandlers(catalogue, ledger, store).issue("mallory", "mallory", 1, 1)
    assert exc.value.caller == "mallory"
    assert len(catalogue.events) == 0
    assert await ledger.balance_of("mallory", TokenId(1_000_001)) == 0


async def test_issue_batch_credits_every_pair_and_emits_one_event(
    catalogue, store, ledger,
):
    event = await IssuanceHandlers(catalogue, ledger, store).issue_batch(
        ADMIN, "alice", [1, 1, 2], [1, 2, 1],
    )

    assert isinstance(event, BookBatchMinted)
    assert event.editions == (1, 1, 2)
    assert event.items == (1, 2, 1)
    assert catalogue.events.events == [event]
    for token_id in (1_000_001, 1_000_002, 2_000_001):
        assert await ledger.balance_of("alice", TokenId(token_id)) == 1


async def test_issue_batch_duplicate_pairs_credit_each_occurrence(
    catalogue, store, ledger,
):
    await IssuanceHandlers(catalogue, ledger, store).issue_batch(
        ADMIN, "alice", [7, 7], [3, 3],
    )
    assert await ledger.balance_of("alice", TokenId(7_000_003)) == 2


async def test_issue_batch_length_mismatch_changes_nothing(catalogue, store, ledger):
    with pytest.raises(LengthMismatchError):
        await IssuanceHandlers(catalogue, ledger, store).issue_batch(
            ADMIN, "alice", [1, 2], [1],
        )
    assert len(catalogue.events) == 0
    assert await ledger.balance_of("alice", TokenId(1_000_001)) == 0


async def test_issue_batch_with_one_invalid_item_credits_nothing(catalogue, store, ledger):
    with pytest.raises(InvalidItemError):
        await IssuanceHandlers(catalogue, ledger, store).issue_batch(
            ADMIN, "alice", [1, 1, 1], [1, 1_000_000, 2],
        )
    assert len(catalogue.events) == 0
    assert await ledger.balance_of("alice", TokenId(1_000_001)) == 0
    assert await ledger.balance_of("alice", TokenId(1_000_002)) == 0


async def test_issue_batch_by_non_administrator_changes_nothing(
    catalogue, store, recording_ledger,
):
    with pytest.raises(UnauthorizedError):
        await IssuanceHandlers(catalogue, recording_ledger, store).issue_batch(
            "mallory", "mallory", [1], [1],
        )
    assert recording_ledger.credits == []
    assert await recording_ledger.balance_of("mallory", 1_000_001) == 0
    assert len(catalogue.events) == 0


async def test_failed_ledger_credit_emits_no_event(catalogue, store):
    failing = RecordingLedger(fail=True)
    with pytest.raises(DatabaseError):
        await IssuanceHandlers(catalogue, failing, store).issue_batch(
            ADMIN, "alice", [1, 2], [1, 1],
        )
    assert len(catalogue.events) == 0


async def test_batch_uses_single_ledger_call(catalogue, store, recording_ledger):
    await IssuanceHandlers(catalogue, recording_ledger, store).issue_batch(
        ADMIN, "alice", [1, 2, 3], [0, 0, 0],
    )
    assert recording_ledger.credits == [((1_000_000, 2_000_000, 3_000_000), "alice")]
    assert await recording_ledger.balance_of("alice", 2_000_000) == 1
    assert await recording_ledger.balance_of("bob", 2_000_000) == 0


async def test_failed_event_commit_rolls_back_credits(catalogue, store, ledger, test_db):
    test_db.commit = AsyncMock(
        side_effect=OperationalError("COMMIT", {}, Exception("disk full")),
    )
    with pytest.raises(DatabaseError):
        await IssuanceHandlers(catalogue, ledger, store).issue_batch(
            ADMIN, "alice", [1, 2], [1, 1],
        )

    assert len(catalogue.events) == 0
    assert await ledger.balance_of("alice", TokenId(1_000_001)) == 0
    assert await ledger.balance_of("alice", TokenId(2_000_001)) == 0
