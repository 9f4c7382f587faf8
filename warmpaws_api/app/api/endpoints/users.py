"""
User management endpoints.

CRUD over the ``users`` collection.  Profiles are opaque JSON objects.
"""

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, HTTPException, status

from warmpaws_api.app.core.db import Storage, get_storage, serialize
from warmpaws_api.app.core.ids import InvalidIdentifierError
from warmpaws_api.app.schemas.ack import DeleteAck, InsertAck, UpdateAck
from warmpaws_api.app.services.user_service import UserService

router = APIRouter()


@router.get("/users", summary="List users")
async def list_users(storage: Storage = Depends(get_storage)) -> Any:
    return serialize(await UserService.list_users(storage))


@router.get("/users/{user_id}", summary="Get a single user")
async def get_user(user_id: str, storage: Storage = Depends(get_storage)) -> Any:
    try:
        user = await UserService.get_user(storage, user_id)
    except InvalidIdentifierError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return serialize(user)


@router.post("/users", response_model=InsertAck, summary="Register a user")
async def create_user(
    payload: Dict[str, Any] = Body(...),
    storage: Storage = Depends(get_storage),
) -> InsertAck:
    return await UserService.create_user(storage, payload)


@router.put("/users/{user_id}", response_model=UpdateAck, summary="Update a user")
async def update_user(
    user_id: str,
    payload: Dict[str, Any] = Body(...),
    storage: Storage = Depends(get_storage),
) -> UpdateAck:
    try:
        return await UserService.update_user(storage, user_id, payload)
    except InvalidIdentifierError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.delete("/users/{user_id}", response_model=DeleteAck, summary="Delete a user")
async def delete_user(user_id: str, storage: Storage = Depends(get_storage)) -> DeleteAck:
    try:
        return await UserService.delete_user(storage, user_id)
    except InvalidIdentifierError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
