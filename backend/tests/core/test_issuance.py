"""Issuance Planning — verifies pure validation/encoding of mint requests.

Tests cover:
    - Single plan: one id, BookMinted with the request pair
    - Batch plan: ids in request order, one BookBatchMinted
    - Length mismatch raised before any encoding
    - One invalid item fails the whole batch plan
"""

import pytest

from folio.core.catalogue_events import BookBatchMinted, BookMinted
from folio.core.errors import InvalidItemError, LengthMismatchError
from folio.core.issuance import plan_issue, plan_issue_batch


def test_plan_issue_single_book():
    plan = plan_issue("alice", 1, 1)
    assert plan.recipient == "alice"
    assert plan.token_ids == (1_000_001,)
    assert plan.event == BookMinted(recipient="alice", edition=1, item=1)


def test_plan_issue_rejects_invalid_item():
    with pytest.raises(InvalidItemError):
        plan_issue("alice", 1, 1_000_000)


def test_plan_batch_preserves_order():
    plan = plan_issue_batch("alice", [2, 1, 0], [5, 1, 9])
    assert plan.token_ids == (2_000_005, 1_000_001, 9)
    assert isinstance(plan.event, BookBatchMinted)
    assert plan.event.editions == (2, 1, 0)
    assert plan.event.items == (5, 1, 9)


def test_plan_batch_length_mismatch():
    with pytest.raises(LengthMismatchError) as exc:
        plan_issue_batch("alice", [1, 2], [1])
    assert exc.value.code == "LENGTH_MISMATCH"
    assert (exc.value.left, exc.value.right) == (2, 1)


def test_plan_batch_mismatch_checked_before_encoding():
    # invalid item would raise INVALID_ITEM if encoding ran first
    with pytest.raises(LengthMismatchError):
        plan_issue_batch("alice", [1], [1_000_000, 1])


def test_plan_batch_single_invalid_item_fails_whole_batch():
    with pytest.raises(InvalidItemError):
        plan_issue_batch("alice", [1, 1, 1], [1, 1_000_000, 2])


def test_plan_batch_empty_is_allowed():
    plan = plan_issue_batch("alice", [], [])
    assert plan.token_ids == ()
    assert plan.event.editions == ()
