"""
Log endpoint.

``GET /api/users/{user_id}/logs`` returns the user's exercises,
optionally restricted to an inclusive ``from``/``to`` date range and
capped by ``limit``.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from ...core.db import Database, get_db
from ...schemas.log import LogRead
from ...services.log_service import LogService


router = APIRouter()


@router.get("/{user_id}/logs", response_model=LogRead)
async def get_log(
    user_id: str,
    date_from: Optional[str] = Query(None, alias="from"),
    date_to: Optional[str] = Query(None, alias="to"),
    limit: Optional[str] = Query(None),
    db: Database = Depends(get_db),
) -> LogRead:
    """Return ``{username, count, _id, log}`` for the user.

    - **from**, **to**: inclusive date bounds, each optional.
    - **limit**: maximum number of entries; missing, ``0`` or
      non-numeric means no limit.
    """
    return await LogService.get_log(db, user_id, date_from, date_to, limit)
