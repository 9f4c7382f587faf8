"""
API endpoints for reviews.

Users submit reviews of services; anyone can list the reviews of a
service or of a user.  Administrators see every review, newest first,
and may delete reviews.
"""

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status

from warmpaws_api.app.core.db import Storage, get_storage, serialize
from warmpaws_api.app.core.ids import InvalidIdentifierError
from warmpaws_api.app.schemas.ack import DeleteAck, InsertAck
from warmpaws_api.app.schemas.review import ReviewCreate
from warmpaws_api.app.services.review_service import ReviewService

router = APIRouter()


@router.post("/reviews", response_model=InsertAck, summary="Submit a review")
async def create_review(data: ReviewCreate, storage: Storage = Depends(get_storage)) -> InsertAck:
    return await ReviewService.create_review(storage, data)


@router.get("/reviews/service/{service_id}", summary="List reviews of a service")
async def list_service_reviews(service_id: str, storage: Storage = Depends(get_storage)) -> Any:
    return serialize(await ReviewService.list_service_reviews(storage, service_id))


@router.get("/reviews/user/{user_id}", summary="List reviews by a user")
async def list_user_reviews(user_id: str, storage: Storage = Depends(get_storage)) -> Any:
    return serialize(await ReviewService.list_user_reviews(storage, user_id))


@router.get("/reviews/{review_id}", summary="Get a single review")
async def get_review(review_id: str, storage: Storage = Depends(get_storage)) -> Any:
    try:
        review = await ReviewService.get_review(storage, review_id)
    except InvalidIdentifierError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return serialize(review)


@router.get("/admin/reviews", summary="List all reviews (admin)")
async def list_all_reviews(storage: Storage = Depends(get_storage)) -> Any:
    return serialize(await ReviewService.list_all_reviews(storage))


@router.delete("/admin/reviews/{review_id}", response_model=DeleteAck, summary="Delete a review (admin)")
async def delete_review(review_id: str, storage: Storage = Depends(get_storage)) -> DeleteAck:
    try:
        return await ReviewService.delete_review(storage, review_id)
    except InvalidIdentifierError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
