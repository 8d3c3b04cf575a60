"""
Catalog Error Taxonomy

- NotFoundError: requested id has no matching record (rendered as 404)
- IntegrityBlockedError: delete refused because dependents exist
- StoreError: any SQLAlchemy failure, propagated unchanged

Field-level validation problems are not exceptions; see
catalog.services.validation.
"""

from typing import Any

from sqlalchemy.exc import SQLAlchemyError

# Store failures are SQLAlchemy's own exceptions; nothing wraps them.
StoreError = SQLAlchemyError


class CatalogError(Exception):
    """Base class for catalog errors."""


class NotFoundError(CatalogError):
    """Raised when a record id does not resolve."""

    def __init__(self, kind: str, record_id: Any) -> None:
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"{kind} not found")


class IntegrityBlockedError(CatalogError):
    """Raised when a record cannot be deleted while others reference it."""

    def __init__(self, kind: str, record_id: Any, blocking_records: list[Any]) -> None:
        self.kind = kind
        self.record_id = record_id
        self.blocking_records = blocking_records
        super().__init__(
            f"{kind} {record_id} is referenced by {len(blocking_records)} record(s)"
        )
