"""Metadata Resolver — per-token URI lookup with explicit overrides over a default formula.

Invariants:
    - resolve() returns the override verbatim when one is set, else {base_uri}{token_id}.json
    - Default URI is a pure function of state: never-minted ids resolve too
    - Overrides are only inserted or replaced, never removed
    - A missing key means "no override"; an empty string is a legitimate override

Design Decisions:
    - Lazy default-on-read instead of eager population at issuance: base URI changes
      reach every non-overridden token, and storage holds only real overrides
      (ADR: observable contract identical either way)
    - Authorization is NOT checked here — the shell gates callers before mutating
      (ADR: resolver stays a plain state holder, testable without an administrator)
"""

from dataclasses import dataclass, field

from folio.core.domain_types import TokenId
from folio.core.token_codec import encode_token_id


def default_token_uri(base_uri: str, token_id: int) -> str:
    """Synthesize {base_uri}{decimal(token_id)}.json — no padding, no separators."""
    return f"{base_uri}{token_id:d}.json"


@dataclass
class MetadataResolver:
    """Process-wide base URI plus sparse per-token overrides — pure dataclass, no IO."""

    base_uri: str = ""
    overrides: dict[TokenId, str] = field(default_factory=dict)

    def set_base_uri(self, new_base: str) -> None:
        self.base_uri = new_base

    def set_uri(self, token_id: TokenId, uri: str) -> None:
        self.overrides[token_id] = uri

    def set_uri_for_pair(self, edition: int, item: int, uri: str) -> TokenId:
        token_id = encode_token_id(edition, item)
        self.set_uri(token_id, uri)
        return token_id

    def has_override(self, token_id: TokenId) -> bool:
        return token_id in self.overrides

    def resolve(self, token_id: TokenId) -> str:
        if token_id in self.overrides:
            return self.overrides[token_id]
        return default_token_uri(self.base_uri, token_id)

    def resolve_pair(self, edition: int, item: int) -> str:
        return self.resolve(encode_token_id(edition, item))
