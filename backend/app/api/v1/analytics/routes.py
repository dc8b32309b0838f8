"""
Analytics API - grouped counts over the action ledger
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from backend.app.core.dependencies import get_current_account, get_db
from backend.app.core.exceptions import InternalError
from backend.app.core.logging_config import get_logger
from backend.app.models.account import Account
from backend.app.schemas.action import AnalyticsReport
from backend.app.services.analytics_service import build_report
from backend.app.utils import cache

logger = get_logger("api.analytics")
router = APIRouter(prefix="/analytics", tags=["analytics"])


@router.get("", response_model=AnalyticsReport)
async def get_analytics(
    db: Session = Depends(get_db),
    current_account: Account = Depends(get_current_account),
) -> dict:
    """
    Actions by type, actions per day (ascending) and most active pages (descending).
    Cached per report generation (ttl from config); recording an action starts a new generation.
    """
    generation = await cache.report_generation()
    cached = await cache.get_report(generation)
    if cached is not None:
        return cached

    try:
        result = build_report(db)
    except Exception as e:
        logger.exception("Error fetching analytics account_id=%s: %s", current_account.id, str(e))
        raise InternalError("Error fetching analytics")

    # stored under the generation read above, never under a newer one
    await cache.store_report(generation, result)
    return result
