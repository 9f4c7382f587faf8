"""
Booking endpoints.

Clients create bookings and list their own; administrators list every
booking (with service and user attached), change booking status and
delete bookings.  Listings are sorted newest first.
"""

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Path, status

from warmpaws_api.app.core.db import Storage, get_storage, serialize
from warmpaws_api.app.core.ids import InvalidIdentifierError
from warmpaws_api.app.schemas.ack import DeleteAck, InsertAck, UpdateAck
from warmpaws_api.app.schemas.booking import BookingCreate, BookingStatusUpdate
from warmpaws_api.app.services.booking_service import BookingService

router = APIRouter()


@router.post("/bookings", response_model=InsertAck, summary="Create a booking")
async def create_booking(
    booking: BookingCreate,
    storage: Storage = Depends(get_storage),
) -> InsertAck:
    """Create a booking.

    The server sets ``createdAt`` and ``status='pending'`` regardless
    of what the request contains.
    """
    return await BookingService.create_booking(storage, booking)


@router.get("/bookings/user/{user_id}", summary="List bookings of a user")
async def list_user_bookings(
    user_id: str = Path(..., description="Identifier of the user"),
    storage: Storage = Depends(get_storage),
) -> Any:
    """Return the user's bookings, newest first, each with its ``service``."""
    return serialize(await BookingService.list_user_bookings(storage, user_id))


@router.get("/bookings/{booking_id}", summary="Get a single booking")
async def get_booking(booking_id: str, storage: Storage = Depends(get_storage)) -> Any:
    try:
        booking = await BookingService.get_booking(storage, booking_id)
    except InvalidIdentifierError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return serialize(booking)


@router.patch("/bookings/{booking_id}", response_model=UpdateAck, summary="Update booking status")
async def update_booking_status(
    booking_id: str,
    update: BookingStatusUpdate,
    storage: Storage = Depends(get_storage),
) -> UpdateAck:
    try:
        return await BookingService.update_status(storage, booking_id, update)
    except InvalidIdentifierError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get("/admin/bookings", summary="List all bookings (admin)")
async def list_all_bookings(storage: Storage = Depends(get_storage)) -> Any:
    """Return every booking, newest first, with ``service`` and ``user``."""
    return serialize(await BookingService.list_all_bookings(storage))


@router.delete("/admin/bookings/{booking_id}", response_model=DeleteAck, summary="Delete a booking (admin)")
async def delete_booking(booking_id: str, storage: Storage = Depends(get_storage)) -> DeleteAck:
    try:
        return await BookingService.delete_booking(storage, booking_id)
    except InvalidIdentifierError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
