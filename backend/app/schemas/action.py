"""
Action tracking and analytics schemas. Wire names are camelCase (actionType, pageUrl).
"""
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ActionTrackIn(CamelModel):
    action_type: Optional[str] = None
    page_url: Optional[str] = None
    # free-form: any JSON value
    metadata: Any = None


class ActionOut(CamelModel):
    id: int
    action_type: str
    page_url: str
    metadata: Any = None
    counter: int
    timestamp: datetime

    @classmethod
    def from_model(cls, action) -> "ActionOut":
        return cls(
            id=action.id,
            action_type=action.action_type,
            page_url=action.page_url,
            metadata=action.meta,
            counter=action.counter,
            timestamp=action.timestamp,
        )


class ActionTrackResponse(CamelModel):
    message: str
    action: ActionOut


class DayCount(CamelModel):
    date: str
    count: int


class PageCount(CamelModel):
    page_url: str
    count: int


class AnalyticsReport(CamelModel):
    actions_by_type: dict[str, int]
    actions_over_time: list[DayCount]
    most_active_pages: list[PageCount]
