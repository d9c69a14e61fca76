"""Catalogue Schemas — Pydantic models for codec, metadata, issuance and balance endpoints.

Invariants:
    - edition/item are ints >= 0 at the boundary; item upper bound reported as INVALID_ITEM by the codec
    - Token ids travel as decimal strings in responses (uint256 exceeds JSON number precision)
    - Addresses are stripped and non-empty

Design Decisions:
    - Token ids accepted as int in request bodies: pydantic parses arbitrary-size JSON integers
    - Batch arrays validated for equal length in the core, not here, so clients
      see LENGTH_MISMATCH rather than a generic validation error
"""

from pydantic import BaseModel, Field, field_validator


def _strip_address(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("address cannot be empty or whitespace")
    return v


class TokenIdResponse(BaseModel):
    token_id: str
    edition: int
    item: int


class TokenURIResponse(BaseModel):
    token_id: str
    uri: str


class BaseURIUpdate(BaseModel):
    base_uri: str = Field(max_length=2048)


class TokenURIUpdate(BaseModel):
    uri: str = Field(max_length=2048)


class IssueRequest(BaseModel):
    recipient: str = Field(min_length=1, max_length=255)
    edition: int = Field(ge=0)
    item: int = Field(ge=0)

    @field_validator("recipient")
    @classmethod
    def strip_recipient(cls, v: str) -> str:
        return _strip_address(v)


class IssueBatchRequest(BaseModel):
    recipient: str = Field(min_length=1, max_length=255)
    editions: list[int] = Field(max_length=10_000)
    items: list[int] = Field(max_length=10_000)

    @field_validator("recipient")
    @classmethod
    def strip_recipient(cls, v: str) -> str:
        return _strip_address(v)

    @field_validator("editions", "items")
    @classmethod
    def non_negative(cls, v: list[int]) -> list[int]:
        if any(n < 0 for n in v):
            raise ValueError("values must be non-negative")
        return v


class BalanceBatchRequest(BaseModel):
    holders: list[str] = Field(max_length=10_000)
    token_ids: list[int] = Field(max_length=10_000)


class AdministratorTransferRequest(BaseModel):
    new_administrator: str = Field(min_length=1, max_length=255)

    @field_validator("new_administrator")
    @classmethod
    def strip_new_administrator(cls, v: str) -> str:
        return _strip_address(v)


class EventResponse(BaseModel):
    offset: int
    kind: str
    payload: dict
