"""
Service catalogue endpoints.

Plain CRUD over the ``services`` collection.  Bodies are arbitrary JSON
objects.  A path identifier that is not a valid ObjectId yields 404;
a well‑formed identifier with no matching document yields ``null`` on
read and a zero‑count acknowledgement on update/delete.
"""

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, HTTPException, status

from warmpaws_api.app.core.db import Storage, get_storage, serialize
from warmpaws_api.app.core.ids import InvalidIdentifierError
from warmpaws_api.app.schemas.ack import DeleteAck, InsertAck, UpdateAck
from warmpaws_api.app.services.catalog_service import CatalogService

router = APIRouter()


@router.get("/services", summary="List services")
async def list_services(storage: Storage = Depends(get_storage)) -> Any:
    return serialize(await CatalogService.list_services(storage))


@router.get("/services/{service_id}", summary="Get a single service")
async def get_service(service_id: str, storage: Storage = Depends(get_storage)) -> Any:
    try:
        service = await CatalogService.get_service(storage, service_id)
    except InvalidIdentifierError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return serialize(service)


@router.post("/services", response_model=InsertAck, summary="Add a service")
async def create_service(
    payload: Dict[str, Any] = Body(...),
    storage: Storage = Depends(get_storage),
) -> InsertAck:
    return await CatalogService.create_service(storage, payload)


@router.put("/services/{service_id}", response_model=UpdateAck, summary="Update a service")
async def update_service(
    service_id: str,
    payload: Dict[str, Any] = Body(...),
    storage: Storage = Depends(get_storage),
) -> UpdateAck:
    """Partially update a service.  Only the supplied fields change."""
    try:
        return await CatalogService.update_service(storage, service_id, payload)
    except InvalidIdentifierError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.delete("/services/{service_id}", response_model=DeleteAck, summary="Delete a service")
async def delete_service(service_id: str, storage: Storage = Depends(get_storage)) -> DeleteAck:
    try:
        return await CatalogService.delete_service(storage, service_id)
    except InvalidIdentifierError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
