"""
Activity tracking API - records actions into the ledger.
"""
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from backend.app.core.dependencies import get_db
from backend.app.core.exceptions import AppError, InternalError
from backend.app.core.logging_config import get_logger
from backend.app.schemas.action import ActionOut, ActionTrackIn, ActionTrackResponse
from backend.app.services.event_ledger import EventLedger
from backend.app.utils import cache

logger = get_logger("api.activity")
router = APIRouter(tags=["activity"])


def get_event_ledger(db: Session = Depends(get_db)) -> EventLedger:
    return EventLedger(db)


@router.post("/", response_model=ActionTrackResponse, responses={201: {"model": ActionTrackResponse}})
async def track_action(
    payload: ActionTrackIn,
    ledger: EventLedger = Depends(get_event_ledger),
):
    """Record an action. 201 on the first occurrence of (actionType, pageUrl), 200 on repeats."""
    try:
        action, created = ledger.record(payload.action_type, payload.page_url, payload.metadata)
    except AppError as e:
        logger.warning("Action rejected: %s", e.message)
        raise
    except Exception as e:
        logger.exception("Error tracking action: %s", str(e))
        raise InternalError("Internal Server Error")

    await cache.invalidate_report()

    logger.info(
        "Action tracked type=%s page_url=%s counter=%s",
        action.action_type,
        action.page_url[:80],
        action.counter,
    )
    body = ActionTrackResponse(
        message="Action created successfully" if created else "Action updated successfully",
        action=ActionOut.from_model(action),
    )
    return JSONResponse(
        status_code=201 if created else 200,
        content=body.model_dump(mode="json", by_alias=True),
    )
