"""
Generic CRUD service shared by every entity kind.

Each kind is described once by an ``EntityKind``: its display name,
the table (and store) it lives in, its payload and record models, and
a predicate telling whether all required payload fields are filled in.
``RecordService`` implements the add / get / update / delete pattern
on top of that description and is instantiated once per kind in the
``<kind>_service`` modules.

The services are stateless.  Every operation receives the
``AppState`` and runs inside one ``Database.transaction``, which holds
the state lock for the whole operation and makes an id allocation and
the insert that consumes it commit together.  Validation always runs
first, so a rejected payload never consumes an id or touches a store.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Generic, Type, TypeVar

from pydantic import BaseModel

from epl_backend.app.core.errors import EmptyFieldsError, NotFoundError
from epl_backend.app.core.state import AppState
from epl_backend.app.services.entity_store import EntityStore

P = TypeVar("P", bound=BaseModel)
R = TypeVar("R", bound=BaseModel)


@dataclass(frozen=True)
class EntityKind(Generic[P, R]):
    """Static description of one entity kind."""

    name: str
    table: str
    payload_model: Type[P]
    record_model: Type[R]
    is_complete: Callable[[P], bool]
    add_message: str
    update_message: str


class RecordService(Generic[P, R]):
    """Validate-then-mutate handler for one entity kind."""

    def __init__(self, kind: EntityKind[P, R]) -> None:
        self.kind = kind
        self.logger = logging.getLogger(f"{__name__}.{kind.table}")

    def add(self, state: AppState, payload: P) -> R:
        """Validate ``payload``, allocate an id and store the new record."""
        self._require_fields(payload, self.kind.add_message)
        store = self._store(state)
        with state.db.transaction():
            record_id = state.allocator.next_id()
            record = self.kind.record_model(id=record_id, **payload.model_dump())
            store.insert(record_id, record)
        self.logger.info("Created %s %s", self.kind.name, record_id)
        return record

    def get(self, state: AppState, record_id: int) -> R:
        record = self._store(state).get(record_id)
        if record is None:
            self.logger.warning("%s %s not found", self.kind.name, record_id)
            raise NotFoundError(self.kind.name, record_id)
        return record

    def update(self, state: AppState, record_id: int, payload: P) -> R:
        """Replace every field of an existing record except its id.

        The payload is validated before the lookup, so an invalid payload
        is reported as ``EmptyFieldsError`` even for an unknown id.
        """
        self._require_fields(payload, self.kind.update_message)
        store = self._store(state)
        with state.db.transaction():
            existing = store.get(record_id)
            if existing is None:
                self.logger.warning("Cannot update %s %s: not found", self.kind.name, record_id)
                raise NotFoundError(self.kind.name, record_id)
            updated = self.kind.record_model(id=record_id, **payload.model_dump())
            store.insert(record_id, updated)
        self.logger.info("Updated %s %s", self.kind.name, record_id)
        return updated

    def delete(self, state: AppState, record_id: int) -> None:
        store = self._store(state)
        with state.db.transaction():
            if store.remove(record_id) is None:
                self.logger.warning("Cannot delete %s %s: not found", self.kind.name, record_id)
                raise NotFoundError(self.kind.name, record_id)
        self.logger.info("Deleted %s %s", self.kind.name, record_id)

    def _store(self, state: AppState) -> EntityStore[R]:
        return state.stores[self.kind.table]

    def _require_fields(self, payload: P, message: str) -> None:
        if not self.kind.is_complete(payload):
            self.logger.warning("Rejected %s payload: %s", self.kind.name, message)
            raise EmptyFieldsError(message)
