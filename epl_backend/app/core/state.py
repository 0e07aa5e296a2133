"""
Application state shared by the record services.

``AppState`` owns the database, the id allocator and one entity store
per kind.  Services receive it as an explicit argument instead of
reaching for module globals, so each test can open a fresh state on
its own database.  The FastAPI app keeps one instance on
``app.state.records``.
"""

import logging
from dataclasses import dataclass
from typing import Dict

from epl_backend.app.core.db import Database, get_database_path, init_db
from epl_backend.app.schemas.coach import Coach
from epl_backend.app.schemas.match import Match
from epl_backend.app.schemas.stadium import Stadium
from epl_backend.app.schemas.team import Team
from epl_backend.app.services.entity_store import EntityStore
from epl_backend.app.services.id_allocator import IdAllocator

# Table name -> record model.  Table names double as store keys.
RECORD_TABLES = {
    "teams": Team,
    "coaches": Coach,
    "stadiums": Stadium,
    "matches": Match,
}


@dataclass
class AppState:
    db: Database
    allocator: IdAllocator
    stores: Dict[str, EntityStore]

    @classmethod
    def open(cls, database_url: str) -> "AppState":
        """Open (creating if needed) the database and build the stores."""
        db = Database(get_database_path(database_url))
        version = init_db(db)
        logging.getLogger(__name__).info("Opened %s at schema version %s", db.path, version)
        return cls(
            db=db,
            allocator=IdAllocator(db),
            stores={table: EntityStore(db, table, model) for table, model in RECORD_TABLES.items()},
        )

    @property
    def teams(self) -> EntityStore[Team]:
        return self.stores["teams"]

    @property
    def coaches(self) -> EntityStore[Coach]:
        return self.stores["coaches"]

    @property
    def stadiums(self) -> EntityStore[Stadium]:
        return self.stores["stadiums"]

    @property
    def matches(self) -> EntityStore[Match]:
        return self.stores["matches"]

    def close(self) -> None:
        self.db.close()
