"""
Record Lifecycle Controller

Shared create/read/update/delete flow for every catalog entity.
Subclasses (AuthorLifecycle, GenreLifecycle, BookLifecycle,
BookInstanceLifecycle) pick the model, the validation rules and the
form helpers; this module owns the sequencing:

- validation runs before anything is written
- auxiliary lists (e.g. the books to choose from) are fetched for forms
  and again on every failed submission, never reused
- a record and its dependents are fetched concurrently
- delete runs the integrity check and the delete in one transaction

Outcomes
========
Operations return tagged results instead of HTTP responses:
- Persisted(record, created): the write succeeded
- RevalidationNeeded(record, errors, context): show the form again
- Deleted(record_id) / Blocked(record, blocking_records)
Unknown ids raise NotFoundError; store errors propagate unchanged.
"""

import asyncio
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, ClassVar, Generic, TypeVar

from catalog.database import Base
from catalog.exceptions import NotFoundError
from catalog.services.integrity import IntegrityGuard
from catalog.services.store import EntityStore
from catalog.services.validation import FieldError, Invalid, RuleSet

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


# =============================================================================
# Outcomes
# =============================================================================
@dataclass
class Persisted(Generic[ModelT]):
    """A create or update that reached the store (or an existing match)."""

    record: ModelT
    created: bool = True


@dataclass
class RevalidationNeeded:
    """
    A submission that must be corrected.

    record holds the sanitized values (plus "id" on update) so the form
    can be filled in again; context holds freshly fetched lists.
    """

    record: dict[str, Any]
    errors: list[FieldError]
    context: dict[str, Any] = field(default_factory=dict)


@dataclass
class Deleted:
    record_id: int


@dataclass
class Blocked(Generic[ModelT]):
    """A refused delete, with the records that still reference it."""

    record: ModelT
    blocking_records: list[Any]


@dataclass
class RecordDetail(Generic[ModelT]):
    record: ModelT
    dependents: list[Any] = field(default_factory=list)


@dataclass
class FormContext(Generic[ModelT]):
    record: ModelT | None
    context: dict[str, Any] = field(default_factory=dict)


# =============================================================================
# Controller
# =============================================================================
class RecordLifecycle(Generic[ModelT]):
    """
    Base controller for one entity type.

    Subclasses set:
        model: the SQLAlchemy model class
        rules: the RuleSet for its form
        order_by: list of columns to sort by (None = insertion order);
                  a bare column would bind as a descriptor on the instance

    and may override:
        to_record_fields(): map form field names to model attributes
        check_consistency(): checks that need the store (references,
                             uniqueness)
        auxiliary(): lists a form needs
    """

    model: ClassVar[type]
    rules: ClassVar[RuleSet]
    order_by: ClassVar[list[Any] | None] = None

    def __init__(self, store: EntityStore) -> None:
        self.store = store
        self.guard = IntegrityGuard(store)

    @property
    def kind(self) -> str:
        return self.model.__name__

    # -------------------------------------------------------------------------
    # Hooks
    # -------------------------------------------------------------------------
    def to_record_fields(self, fields: Mapping[str, Any]) -> dict[str, Any]:
        return dict(fields)

    async def check_consistency(
        self,
        fields: Mapping[str, Any],
        record_id: int | None = None,
    ) -> list[FieldError]:
        return []

    async def auxiliary(self) -> dict[str, Any]:
        return {}

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------
    async def get(self, record_id: int) -> ModelT:
        """
        Fetch one record.

        Raises:
            NotFoundError: if the id does not resolve
        """
        record = await self.store.find_by_id(self.model, record_id)
        if record is None:
            raise NotFoundError(self.kind, record_id)
        return record

    async def detail(self, record_id: int) -> RecordDetail[ModelT]:
        """
        Fetch a record together with the records that reference it.

        Raises:
            NotFoundError: if the id does not resolve
        """
        record, dependents = await asyncio.gather(
            self.store.find_by_id(self.model, record_id),
            self.guard.dependents_of(self.model, record_id),
        )
        if record is None:
            raise NotFoundError(self.kind, record_id)
        return RecordDetail(record=record, dependents=dependents)

    # -------------------------------------------------------------------------
    # Create
    # -------------------------------------------------------------------------
    async def create_form(self) -> FormContext[ModelT]:
        return FormContext(record=None, context=await self.auxiliary())

    async def create(self, raw: Mapping[str, Any]) -> Persisted[ModelT] | RevalidationNeeded:
        """Validate a submitted form and insert a new record."""
        result = self.rules.validate(raw)
        if isinstance(result, Invalid):
            return await self._revalidate(result.fields, result.errors)

        errors = await self.check_consistency(result.fields)
        if errors:
            return await self._revalidate(result.fields, errors)

        return await self._insert(result.fields)

    async def _insert(self, fields: Mapping[str, Any]) -> Persisted[ModelT]:
        record = await self.store.insert(self.model, self.to_record_fields(fields))
        logger.info(f"Created {record!r}")
        return Persisted(record=record)

    # -------------------------------------------------------------------------
    # Update
    # -------------------------------------------------------------------------
    async def update_form(self, record_id: int) -> FormContext[ModelT]:
        """
        Fetch a record and the lists its form needs.

        Raises:
            NotFoundError: if the id does not resolve
        """
        record, context = await asyncio.gather(
            self.store.find_by_id(self.model, record_id),
            self.auxiliary(),
        )
        if record is None:
            raise NotFoundError(self.kind, record_id)
        return FormContext(record=record, context=context)

    async def update(
        self,
        record_id: int,
        raw: Mapping[str, Any],
    ) -> Persisted[ModelT] | RevalidationNeeded:
        """
        Validate a submitted form and replace the record's editable fields.

        The id never changes. Every editable field takes the submitted
        value; omitted optional fields are cleared.

        Raises:
            NotFoundError: if the id does not resolve
        """
        await self.get(record_id)

        result = self.rules.validate(raw)
        if isinstance(result, Invalid):
            return await self._revalidate(result.fields, result.errors, record_id)

        errors = await self.check_consistency(result.fields, record_id)
        if errors:
            return await self._revalidate(result.fields, errors, record_id)

        record = await self.store.update(
            self.model, record_id, self.to_record_fields(result.fields)
        )
        if record is None:
            # Deleted between the existence check and the write
            raise NotFoundError(self.kind, record_id)

        logger.info(f"Updated {record!r}")
        return Persisted(record=record, created=False)

    async def _revalidate(
        self,
        fields: Mapping[str, Any],
        errors: list[FieldError],
        record_id: int | None = None,
    ) -> RevalidationNeeded:
        record = dict(fields)
        if record_id is not None:
            record["id"] = record_id
        logger.debug(f"{self.kind} submission rejected: {errors}")
        return RevalidationNeeded(
            record=record,
            errors=errors,
            context=await self.auxiliary(),
        )

    # -------------------------------------------------------------------------
    # Delete
    # -------------------------------------------------------------------------
    async def delete_form(self, record_id: int) -> RecordDetail[ModelT]:
        """
        Fetch a record and everything that would block its deletion.

        Raises:
            NotFoundError: if the id does not resolve
        """
        return await self.detail(record_id)

    async def delete(self, record_id: int) -> Deleted | Blocked[ModelT]:
        """
        Delete a record unless other records reference it.

        The dependency check and the delete share one transaction.
        An id that no longer exists counts as deleted.
        """
        async with self.store.transaction() as tx:
            record = await tx.find_by_id(self.model, record_id)
            if record is None:
                return Deleted(record_id=record_id)

            check = await IntegrityGuard(tx).can_delete(self.model, record_id)
            if not check.allowed:
                logger.warning(
                    f"Refused to delete {record!r}: "
                    f"{len(check.blocking_records)} dependent record(s)"
                )
                return Blocked(record=record, blocking_records=check.blocking_records)

            await tx.remove(self.model, record_id)

        logger.info(f"Deleted {self.kind} {record_id}")
        return Deleted(record_id=record_id)

    # Defined last: inside this class body the name `list` refers to
    # this method from here on.
    async def list(self) -> list[ModelT]:
        return await self.store.find_all(self.model, order_by=self.order_by)
