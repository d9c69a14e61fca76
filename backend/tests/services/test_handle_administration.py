"""Administration Handlers — verifies transfer/renounce through the catalogue lock."""

import pytest

from folio.core.domain_types import EventKind
from folio.core.errors import UnauthorizedError
from folio.services.handle_administration import AdministrationHandlers
from folio.services.handle_metadata import MetadataHandlers

from tests.services.fake_ledger import ADMIN


async def test_transfer_hands_over_gated_operations(catalogue, store):
    await AdministrationHandlers(catalogue, store).transfer(ADMIN, "bob")

    assert catalogue.administrators.administrator == "bob"
    await MetadataHandlers(catalogue, store).set_base_uri("bob", "https://bob/")
    with pytest.raises(UnauthorizedError):
        await MetadataHandlers(catalogue, store).set_base_uri(ADMIN, "https://admin/")
    assert catalogue.resolver.base_uri == "https://bob/"


async def test_transfer_emits_event(catalogue, store):
    event = await AdministrationHandlers(catalogue, store).transfer(ADMIN, "bob")
    assert catalogue.events.events == [event]
    assert event.kind == EventKind.ADMINISTRATOR_TRANSFERRED


async def test_transfer_by_non_administrator_rejected(catalogue, store):
    with pytest.raises(UnauthorizedError):
        await AdministrationHandlers(catalogue, store).transfer("mallory", "mallory")
    assert catalogue.administrators.administrator == ADMIN
    assert len(catalogue.events) == 0


async def test_renounce_locks_out_everyone(catalogue, store):
    await AdministrationHandlers(catalogue, store).renounce(ADMIN)
    assert catalogue.administrators.administrator is None
    with pytest.raises(UnauthorizedError):
        await MetadataHandlers(catalogue, store).set_base_uri(ADMIN, "https://y/")
