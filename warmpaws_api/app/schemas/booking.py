"""
Pydantic models for bookings.

A booking links a user to a pet‑care service by identifier strings.
The references are weak: they are stored as given, may be missing or
malformed, and are resolved only when bookings are listed (see
``services.enrichment``).  Other fields are accepted and stored as‑is.
"""

from typing import Any

from pydantic import BaseModel, Field


class BookingCreate(BaseModel):
    """Schema for creating a booking.

    ``createdAt`` and ``status`` are assigned by the server; values
    sent by the client are overwritten.
    """

    userId: Any = Field(None, examples=["665f1c2e8a1b2c3d4e5f6a7b"])
    serviceId: Any = Field(None, examples=["665f1c2e8a1b2c3d4e5f6a7c"])

    model_config = {
        "extra": "allow",
    }


class BookingStatusUpdate(BaseModel):
    """Schema for changing the status of a booking."""

    status: str = Field(..., min_length=1, examples=["confirmed"])
