"""
Analytics over the action ledger - counts by type, by day and by page.
Counts are ledger entries (distinct type+page keys), not summed counters.
"""
from datetime import date, datetime

from sqlalchemy import func
from sqlalchemy.orm import Session

from backend.app.models.action import Action


def _day_str(value) -> str:
    """SQLite returns date() as 'YYYY-MM-DD' text, PostgreSQL as a date."""
    if isinstance(value, (date, datetime)):
        return value.strftime("%Y-%m-%d")
    return str(value)[:10]


def actions_by_type(db: Session) -> dict[str, int]:
    rows = (
        db.query(Action.action_type, func.count(Action.id))
        .group_by(Action.action_type)
        .order_by(Action.action_type)
        .all()
    )
    return {action_type: count for action_type, count in rows}


def actions_over_time(db: Session) -> list[dict]:
    day = func.date(Action.timestamp)
    rows = (
        db.query(day.label("d"), func.count(Action.id).label("c"))
        .group_by(day)
        .order_by(day)
        .all()
    )
    return [{"date": _day_str(row.d), "count": row.c} for row in rows]


def most_active_pages(db: Session) -> list[dict]:
    count = func.count(Action.id)
    rows = (
        db.query(Action.page_url, count.label("c"))
        .group_by(Action.page_url)
        .order_by(count.desc(), Action.page_url)
        .all()
    )
    return [{"pageUrl": row.page_url, "count": row.c} for row in rows]


def build_report(db: Session) -> dict:
    """All three groupings; any query failure propagates (no partial report)."""
    return {
        "actionsByType": actions_by_type(db),
        "actionsOverTime": actions_over_time(db),
        "mostActivePages": most_active_pages(db),
    }
