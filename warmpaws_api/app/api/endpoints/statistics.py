"""
Administrator dashboard endpoints.

``/admin/counts`` returns the size of every collection and
``/admin/bookings/recent`` the latest bookings with their service.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query

from warmpaws_api.app.core.db import Storage, get_storage, serialize
from warmpaws_api.app.services.booking_service import BookingService, parse_limit
from warmpaws_api.app.services.statistics_service import StatisticsService

router = APIRouter()


@router.get("/admin/counts", response_model=Dict[str, int], summary="Collection totals")
async def get_counts(storage: Storage = Depends(get_storage)) -> Dict[str, int]:
    return await StatisticsService.counts(storage)


@router.get("/admin/bookings/recent", summary="Most recent bookings")
async def get_recent_bookings(
    limit: Optional[str] = Query(None, description="Number of bookings to return (default 5)"),
    storage: Storage = Depends(get_storage),
) -> Any:
    """Return the newest bookings enriched with their ``service``.

    ``limit`` is parsed leniently: an absent or invalid value means 5.
    """
    return serialize(await BookingService.recent_bookings(storage, parse_limit(limit)))
