"""
Pydantic schemas for service reviews.

Review content is free‑form.  Only the two references used for
filtering are declared; everything else passes through untouched.
Fields the client did not send are not stored.
"""

from typing import Any

from pydantic import BaseModel, Field


class ReviewCreate(BaseModel):
    """Schema for submitting a review."""

    userId: Any = Field(None, description="Identifier of the reviewing user")
    serviceId: Any = Field(None, description="Identifier of the reviewed service")

    model_config = {
        "extra": "allow",
    }
