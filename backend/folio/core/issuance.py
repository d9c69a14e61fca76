"""Issuance Planning — validates and encodes a mint request before anything is credited.

Invariants:
    - plan_* is PURE: returns a plan descriptor, does NOT touch the ledger or the resolver
    - Every pair is encoded before the plan exists, so one bad pair fails the whole batch
    - LengthMismatchError is raised before any pair is encoded
    - Batch plans carry exactly one BookBatchMinted event

Design Decisions:
    - Plan/apply split: shell credits the ledger from plan.token_ids and appends plan.event
      only after the credit succeeded (ADR: all-or-nothing without compensation logic)
"""

from dataclasses import dataclass
from collections.abc import Sequence

from folio.core.catalogue_events import BookMinted, BookBatchMinted
from folio.core.domain_types import Address, TokenId
from folio.core.errors import LengthMismatchError
from folio.core.token_codec import encode_token_id


@dataclass(frozen=True)
class IssuancePlan:
    """What to credit and what to announce for one issuance request."""
    recipient: Address
    token_ids: tuple[TokenId, ...]
    event: BookMinted | BookBatchMinted


def plan_issue(recipient: str, edition: int, item: int) -> IssuancePlan:
    """Single book: one token id, one BookMinted."""
    token_id = encode_token_id(edition, item)
    return IssuancePlan(
        recipient=Address(recipient),
        token_ids=(token_id,),
        event=BookMinted(recipient=Address(recipient), edition=edition, item=item),
    )


def plan_issue_batch(
    recipient: str, editions: Sequence[int], items: Sequence[int],
) -> IssuancePlan:
    """Batch: token ids in request order, one aggregate BookBatchMinted."""
    if len(editions) != len(items):
        raise LengthMismatchError(len(editions), len(items))
    token_ids = tuple(
        encode_token_id(edition, item) for edition, item in zip(editions, items)
    )
    return IssuancePlan(
        recipient=Address(recipient),
        token_ids=token_ids,
        event=BookBatchMinted(
            recipient=Address(recipient),
            editions=tuple(editions),
            items=tuple(items),
        ),
    )
