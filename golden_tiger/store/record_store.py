"""
Record Store

DESIGN DECISION: One generic engine manages all four collections.
For every mutation it:
1. Validates raw input (per-collection strategy)
2. Derives computed fields (projected returns)
3. Applies the change to the in-memory list
4. Writes the COMPLETE list back to the collection's slot

GUARANTEES:
- New records go to the head of the list
- Update and delete never reorder the remaining records
- Unknown ids on update/delete are silent no-ops
- Input whose derived projection overflows is rejected like invalid input
- Storage failures never raise out of the store; they come back as
  persisted=False and are logged. The in-memory list is NOT rolled back.
"""

import random
from datetime import datetime
from typing import Any, Callable, Mapping, Optional
from uuid import uuid4

from pydantic import ValidationError

from golden_tiger.audit import AuditLogger
from golden_tiger.catalog import FALLBACK_RANDOM
from golden_tiger.models.records import RecordModel
from golden_tiger.models.results import MutationResult, ValidationResult
from golden_tiger.projection import ProjectionRangeError
from golden_tiger.services.storage import KeyValueStoreInterface, StorageError
from golden_tiger.store.collections import (
    CollectionDefinition,
    DerivationContext,
    default_collections,
)


class UnknownCollectionError(KeyError):
    """No collection is registered under this key."""
    pass


def new_record_id() -> str:
    """128-bit random id, hex encoded."""
    return uuid4().hex


class RecordStore:
    """
    Lifecycle manager for the persisted collections.

    Holds one cached list per collection for the session. Screens read
    with records() and mutate with create/update/delete; each call
    returns a MutationResult carrying the updated list.
    """

    def __init__(
        self,
        storage: KeyValueStoreInterface,
        audit_logger: Optional[AuditLogger] = None,
        id_factory: Callable[[], str] = new_record_id,
        rng: Optional[random.Random] = None,
        clock: Callable[[], datetime] = datetime.now,
        scenario_fallback: str = FALLBACK_RANDOM,
        collections: Optional[dict[str, CollectionDefinition]] = None,
    ):
        self._storage = storage
        self._audit_logger = audit_logger or AuditLogger()
        self._id_factory = id_factory
        self._context = DerivationContext(
            rng=rng or random.Random(),
            clock=clock,
            scenario_fallback=scenario_fallback,
        )
        self._collections = collections or default_collections()
        self._cache: dict[str, list[RecordModel]] = {}

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _definition(self, collection_key: str) -> CollectionDefinition:
        try:
            return self._collections[collection_key]
        except KeyError:
            raise UnknownCollectionError(f"Unknown collection: {collection_key!r}")

    def _new_id(self, current: list[RecordModel]) -> str:
        """Fresh id that no record in current already uses."""
        taken = {record.id for record in current}
        record_id = self._id_factory()
        while record_id in taken:
            record_id = self._id_factory()
        return record_id

    async def _resolve(
        self,
        collection_key: str,
        current: Optional[list[RecordModel]],
    ) -> list[RecordModel]:
        if current is not None:
            return list(current)
        return list(await self.records(collection_key))

    async def _persist(self, collection_key: str, records: list[RecordModel]) -> tuple[bool, Optional[str]]:
        """
        Write the full list to the collection's slot.

        Returns (persisted, error_message). Never raises on storage failure.
        """
        self._cache[collection_key] = list(records)
        try:
            await self._storage.set(
                collection_key,
                [record.to_storage() for record in records],
            )
        except StorageError as e:
            self._audit_logger.log_persist_failed(
                collection=collection_key,
                error_message=str(e),
                record_count=len(records),
            )
            return False, str(e)
        return True, None

    def _rejected(
        self,
        collection_key: str,
        operation: str,
        current: list[RecordModel],
        validation: ValidationResult,
        record_id: Optional[str] = None,
    ) -> MutationResult:
        self._audit_logger.log_validation_failed(
            collection=collection_key,
            issues=[issue.model_dump() for issue in validation.issues],
            record_id=record_id,
        )
        return MutationResult(
            collection=collection_key,
            operation=operation,
            records=current,
            applied=False,
            validation=validation,
        )

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    async def load(self, collection_key: str) -> list[RecordModel]:
        """
        Read a collection from storage and cache it.

        A missing slot, a slot that is not a list, or any record failing
        schema validation all yield an empty list. Failures are logged,
        never raised.
        """
        definition = self._definition(collection_key)
        records: list[RecordModel] = []

        try:
            stored = await self._storage.get(collection_key)
            if stored is None:
                records = []
            elif not isinstance(stored, list):
                raise TypeError(f"expected a list, found {type(stored).__name__}")
            else:
                records = [definition.record_model.model_validate(item) for item in stored]
        except (StorageError, ValidationError, TypeError) as e:
            self._audit_logger.log_load_failed(collection_key, str(e))
            records = []
        else:
            self._audit_logger.log_collection_loaded(collection_key, len(records))

        self._cache[collection_key] = list(records)
        return list(records)

    async def records(self, collection_key: str) -> list[RecordModel]:
        """Cached list for the session, loaded from storage on first access."""
        self._definition(collection_key)
        if collection_key not in self._cache:
            return await self.load(collection_key)
        return list(self._cache[collection_key])

    def invalidate(self, collection_key: Optional[str] = None) -> None:
        """Forget cached lists so the next read goes to storage."""
        if collection_key is None:
            self._cache.clear()
        else:
            self._cache.pop(collection_key, None)

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    async def create(
        self,
        collection_key: str,
        current: Optional[list[RecordModel]],
        raw_fields: Mapping[str, Any],
    ) -> MutationResult:
        """
        Validate, derive, prepend and persist a new record.

        current defaults to the cached list when None.
        """
        definition = self._definition(collection_key)
        current = await self._resolve(collection_key, current)

        validation = definition.validate(raw_fields)
        if not validation.is_valid:
            return self._rejected(collection_key, "create", current, validation)

        try:
            fields = definition.derive(validation.fields, self._context)
        except ProjectionRangeError:
            return self._rejected(collection_key, "create", current, definition.projection_rejected())
        record = definition.build(self._new_id(current), fields)
        updated = [record, *current]

        persisted, error = await self._persist(collection_key, updated)
        self._audit_logger.log_record_created(collection_key, record.id)

        return MutationResult(
            collection=collection_key,
            operation="create",
            records=updated,
            record=record,
            applied=True,
            persisted=persisted,
            validation=validation,
            error_message=error,
        )

    async def update(
        self,
        collection_key: str,
        current: Optional[list[RecordModel]],
        record_id: str,
        raw_fields: Mapping[str, Any],
    ) -> MutationResult:
        """
        Replace a record in place with re-validated, re-derived fields.

        The record keeps its id and its position. An unknown id leaves
        the list unchanged and writes nothing.
        """
        definition = self._definition(collection_key)
        current = await self._resolve(collection_key, current)

        validation = definition.validate(raw_fields)
        if not validation.is_valid:
            return self._rejected(collection_key, "update", current, validation, record_id)

        index = next(
            (i for i, record in enumerate(current) if record.id == record_id),
            None,
        )
        if index is None:
            self._audit_logger.log_record_not_found(collection_key, record_id, "update")
            return MutationResult(
                collection=collection_key,
                operation="update",
                records=current,
                applied=False,
                validation=validation,
            )

        try:
            fields = definition.derive(validation.fields, self._context)
        except ProjectionRangeError:
            return self._rejected(
                collection_key, "update", current, definition.projection_rejected(), record_id,
            )
        record = definition.build(record_id, fields)
        updated = list(current)
        updated[index] = record

        persisted, error = await self._persist(collection_key, updated)
        self._audit_logger.log_record_updated(collection_key, record_id)

        return MutationResult(
            collection=collection_key,
            operation="update",
            records=updated,
            record=record,
            applied=True,
            persisted=persisted,
            validation=validation,
            error_message=error,
        )

    async def delete(
        self,
        collection_key: str,
        current: Optional[list[RecordModel]],
        record_id: str,
    ) -> MutationResult:
        """
        Remove the first record with record_id and persist the full list.

        An unknown id leaves the list unchanged; the list is still written.
        """
        self._definition(collection_key)
        current = await self._resolve(collection_key, current)

        index = next(
            (i for i, record in enumerate(current) if record.id == record_id),
            None,
        )
        updated = list(current)
        if index is not None:
            del updated[index]
            self._audit_logger.log_record_deleted(collection_key, record_id)
        else:
            self._audit_logger.log_record_not_found(collection_key, record_id, "delete")

        persisted, error = await self._persist(collection_key, updated)

        return MutationResult(
            collection=collection_key,
            operation="delete",
            records=updated,
            applied=index is not None,
            persisted=persisted,
            error_message=error,
        )
