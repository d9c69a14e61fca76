"""SQL Ledger — verifies balance bookkeeping on the balances table.

Invariants:
    - Uncredited holdings read 0
    - credits are staged on the session; the event commit persists every id or none
    - uint256 token ids round-trip exactly through the string column
"""

from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import OperationalError

from folio.core.catalogue_events import BookBatchMinted
from folio.core.domain_types import Address, MAX_TOKEN_ID, TokenId
from folio.core.errors import DatabaseError
from folio.infrastructure.catalogue_repository import SqlCatalogueStore
from folio.infrastructure.ledger_repository import SqlLedgerRepository


async def test_uncredited_balance_is_zero(ledger):
    assert await ledger.balance_of(Address("alice"), TokenId(1)) == 0


async def test_credit_unit_increments(ledger):
    await ledger.credit_unit(TokenId(1_000_001), Address("alice"))
    await ledger.credit_unit(TokenId(1_000_001), Address("alice"))
    assert await ledger.balance_of(Address("alice"), TokenId(1_000_001)) == 2
    assert await ledger.balance_of(Address("bob"), TokenId(1_000_001)) == 0


async def test_credit_batch_counts_duplicates(ledger):
    await ledger.credit_batch(
        [TokenId(1), TokenId(2), TokenId(1)], Address("alice"),
    )
    assert await ledger.balance_of(Address("alice"), TokenId(1)) == 2
    assert await ledger.balance_of(Address("alice"), TokenId(2)) == 1


async def test_max_token_id_round_trips(ledger):
    await ledger.credit_unit(TokenId(MAX_TOKEN_ID), Address("alice"))
    assert await ledger.balance_of(Address("alice"), TokenId(MAX_TOKEN_ID)) == 1
    assert await ledger.balance_of(Address("alice"), TokenId(MAX_TOKEN_ID - 1)) == 0


async def test_balance_of_batch(ledger):
    await ledger.credit_batch([TokenId(5)], Address("alice"))
    balances = await ledger.balance_of_batch(
        [Address("alice"), Address("bob")], [TokenId(5), TokenId(5)],
    )
    assert balances == [1, 0]


async def test_commit_failure_rolls_back_whole_batch(test_db):
    ledger = SqlLedgerRepository(test_db)
    store = SqlCatalogueStore(test_db)
    test_db.commit = AsyncMock(
        side_effect=OperationalError("COMMIT", {}, Exception("disk full")),
    )

    await ledger.credit_batch([TokenId(1), TokenId(2)], Address("alice"))
    with pytest.raises(DatabaseError):
        await store.record(0, BookBatchMinted(Address("alice"), (0, 0), (1, 2)))

    assert await ledger.balance_of(Address("alice"), TokenId(1)) == 0
    assert await ledger.balance_of(Address("alice"), TokenId(2)) == 0
