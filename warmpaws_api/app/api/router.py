"""
Top‑level API router.

Aggregates the domain routers.  Paths are declared in full inside each
endpoint module (``/services``, ``/bookings/user/{user_id}``,
``/admin/counts`` ...) so no prefixes are added here.
"""

from fastapi import APIRouter

from .endpoints import bookings, reviews, services, statistics, users

router = APIRouter()

router.include_router(services.router, tags=["services"])
router.include_router(statistics.router, tags=["statistics"])
router.include_router(bookings.router, tags=["bookings"])
router.include_router(reviews.router, tags=["reviews"])
router.include_router(users.router, tags=["users"])
