"""
Action - one ledger entry per (action_type, page_url); repeats bump counter/timestamp
"""
from sqlalchemy import JSON, Column, DateTime, Integer, String, UniqueConstraint

from backend.app.db.base import Base
from backend.app.utils.clock import utcnow


class Action(Base):
    __tablename__ = "actions"
    __table_args__ = (
        UniqueConstraint("action_type", "page_url", name="uq_actions_type_page"),
    )

    id = Column(Integer, primary_key=True, index=True)
    action_type = Column(String(100), nullable=False, index=True)
    page_url = Column(String(2048), nullable=False)
    # "metadata" is reserved on declarative classes
    meta = Column("metadata", JSON, nullable=True)
    counter = Column(Integer, nullable=False, default=1)
    # naive UTC
    timestamp = Column(DateTime, nullable=False, default=utcnow, index=True)
