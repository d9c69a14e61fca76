"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - Edition, ItemNumber, TokenId wrap int — never use a bare int for an identifier in domain logic
    - Address wraps str — holders and callers are opaque strings, compared verbatim
    - All event kinds encoded as an Enum — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders (ADR: events are served as JSON)
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

Edition = NewType("Edition", int)        # >= 0
ItemNumber = NewType("ItemNumber", int)  # 0 <= item < ITEM_MULTIPLIER
TokenId = NewType("TokenId", int)        # edition * ITEM_MULTIPLIER + item
Address = NewType("Address", str)


# ─── Constants ───────────────────────────────────────────────────

ITEM_MULTIPLIER: int = 1_000_000
MAX_TOKEN_ID: int = 2**256 - 1  # ledger token ids are uint256


# ─── Enums ───────────────────────────────────────────────────────

class EventKind(str, Enum):
    """Catalogue notifications observed by holders and indexers."""
    TOKEN_URI_SET = "TokenURISet"
    BASE_URI_SET = "BaseURISet"
    BOOK_MINTED = "BookMinted"
    BOOK_BATCH_MINTED = "BookBatchMinted"
    ADMINISTRATOR_TRANSFERRED = "AdministratorTransferred"
