"""Administrator Registry — single-administrator capability check with transfer/renounce lifecycle.

Invariants:
    - is_administrator(caller) is a pure predicate over current state
    - require_administrator(caller) raises UnauthorizedError naming the caller, mutates nothing
    - plan_transfer / plan_renounce validate and describe the change, mutate nothing
    - After renounce, administrator is None and every gated call is rejected forever
    - transfer/renounce are themselves gated

Design Decisions:
    - Capability check evaluated at the top of each mutating entry point,
      not inheritance from an access-control base class (ADR: composition over mixins)
    - plan_* returns the AdministratorTransferred event instead of applying it:
      shell persists the event first, then applies it
"""

from dataclasses import dataclass

from folio.core.catalogue_events import AdministratorTransferred
from folio.core.domain_types import Address
from folio.core.errors import UnauthorizedError, InvalidAdministratorError


@dataclass
class AdministratorRegistry:
    """Process-wide administrator state — pure dataclass, no IO."""

    administrator: Address | None = None

    def is_administrator(self, caller: str | None) -> bool:
        return (
            self.administrator is not None
            and caller is not None
            and caller == self.administrator
        )

    def require_administrator(self, caller: str | None) -> None:
        if not self.is_administrator(caller):
            raise UnauthorizedError(caller)

    def plan_transfer(
        self, caller: str | None, new_administrator: str,
    ) -> AdministratorTransferred:
        self.require_administrator(caller)
        if not new_administrator:
            raise InvalidAdministratorError()
        return AdministratorTransferred(
            previous=self.administrator, new=Address(new_administrator),
        )

    def plan_renounce(self, caller: str | None) -> AdministratorTransferred:
        self.require_administrator(caller)
        return AdministratorTransferred(previous=self.administrator, new=None)

    def apply(self, event: AdministratorTransferred) -> None:
        self.administrator = event.new
