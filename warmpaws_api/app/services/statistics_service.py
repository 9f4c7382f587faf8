"""
Service layer for dashboard statistics.

Provides the collection totals shown on the administrator dashboard.
The four counts are independent, so they are requested concurrently.
"""

from __future__ import annotations

import asyncio
from typing import Dict

from ..core.db import Storage


class StatisticsService:
    """Aggregated, read‑only metrics for administrators."""

    @classmethod
    async def counts(cls, storage: Storage) -> Dict[str, int]:
        """Return the number of documents in each collection."""
        users, bookings, reviews, services = await asyncio.gather(
            storage.users.count_documents({}),
            storage.bookings.count_documents({}),
            storage.reviews.count_documents({}),
            storage.services.count_documents({}),
        )
        return {
            "users": users,
            "bookings": bookings,
            "reviews": reviews,
            "services": services,
        }
