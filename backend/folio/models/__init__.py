"""ORM Models — SQLAlchemy declarative models for ledger and catalogue entities.

Invariants:
    - All models inherit from Base (db/base.py)

Design Decisions:
    - All models imported here so Base.metadata is complete before create_all/autogenerate
"""

from folio.models.balance import Balance  # noqa: F401
from folio.models.catalogue import (  # noqa: F401
    CatalogueEventRecord, CatalogueSettings, TokenUriOverride,
)
