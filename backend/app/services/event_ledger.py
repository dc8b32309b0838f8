"""
Event ledger: one row per (action_type, page_url), repeats increment counter and refresh timestamp.

Writes are a single INSERT .. ON CONFLICT DO UPDATE on SQLite and PostgreSQL so concurrent
identical events never lose an increment. Other dialects fall back to a row-locked update.
"""
from datetime import datetime
from typing import Any, Callable

from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from backend.app.core.exceptions import ValidationError
from backend.app.core.logging_config import get_logger
from backend.app.models.action import Action
from backend.app.utils.clock import utcnow

logger = get_logger("services.event_ledger")

_UPSERT_INSERTS = {
    "sqlite": sqlite.insert,
    "postgresql": postgresql.insert,
}



def _default_metadata(metadata: Any) -> Any:
    """Missing metadata becomes {}; any other JSON value (list, string, number, false) is kept."""
    return {} if metadata is None else metadata

class EventLedger:
    def __init__(self, db: Session, clock: Callable[[], datetime] = utcnow):
        self.db = db
        self.clock = clock

    def record(
        self,
        action_type: str | None,
        page_url: str | None,
        metadata: Any = None,
    ) -> tuple[Action, bool]:
        """
        Record one occurrence. Returns (action, created).

        Metadata is stored on first occurrence only; later metadata for the same key is dropped.
        """
        if not action_type:
            raise ValidationError("actionType is required")
        if not page_url:
            raise ValidationError("pageUrl is required")

        now = self.clock()
        dialect = self.db.get_bind().dialect.name
        if dialect in _UPSERT_INSERTS:
            action_id, counter = self._upsert(dialect, action_type, page_url, _default_metadata(metadata), now)
            action = self.db.get(Action, action_id)
            created = counter == 1
        else:
            action, created = self._locked_update(action_type, page_url, _default_metadata(metadata), now)

        logger.debug(
            "Recorded action id=%s type=%s counter=%s created=%s",
            action.id, action_type, action.counter, created,
        )
        return action, created

    def _upsert(self, dialect: str, action_type: str, page_url: str, metadata: Any, now: datetime):
        table = Action.__table__
        stmt = _UPSERT_INSERTS[dialect](table).values(
            action_type=action_type,
            page_url=page_url,
            metadata=metadata,
            counter=1,
            timestamp=now,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=["action_type", "page_url"],
            set_={"counter": table.c.counter + 1, "timestamp": now},
        ).returning(table.c.id, table.c.counter)
        try:
            row = self.db.execute(stmt).one()
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        return row.id, row.counter

    def _locked_update(self, action_type: str, page_url: str, metadata: Any, now: datetime, retry: bool = True):
        existing = (
            self.db.query(Action)
            .filter(Action.action_type == action_type, Action.page_url == page_url)
            .with_for_update()
            .first()
        )
        if existing:
            existing.counter += 1
            existing.timestamp = now
            self.db.commit()
            self.db.refresh(existing)
            return existing, False

        action = Action(
            action_type=action_type,
            page_url=page_url,
            meta=metadata,
            counter=1,
            timestamp=now,
        )
        self.db.add(action)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            if not retry:
                raise
            # a concurrent request inserted the same key first
            return self._locked_update(action_type, page_url, metadata, now, retry=False)
        self.db.refresh(action)
        return action, True
