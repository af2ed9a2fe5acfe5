"""
Institutes router for nested array data (courses, batches, teachers, ...).

The plain institute CRUD routes come from the generic resource router.
"""
from typing import Any

from fastapi import APIRouter, Body, Depends, status

from app.core.identifiers import serialize_document
from app.dependencies.collections import get_institute_array_service
from app.routers.resources import ERROR_RESPONSES
from app.schemas.responses import SuccessResponse
from app.services.nested_array_service import NestedArrayService

router = APIRouter(prefix="/institutes", tags=["Institute data"], responses=ERROR_RESPONSES)


@router.get(
    "/{institute_id}/{array_name}",
    response_model=SuccessResponse,
    summary="List nested institute data",
)
async def list_institute_data(
    institute_id: str,
    array_name: str,
    service: NestedArrayService = Depends(get_institute_array_service),
):
    """Return the elements of an institute's array field (empty if absent)."""
    elements = await service.get_elements(institute_id, array_name)
    return SuccessResponse(
        success=f"{array_name} sent successfully",
        result=serialize_document(elements),
    )


@router.post(
    "/{institute_id}/{array_name}",
    response_model=SuccessResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add nested institute data",
)
async def add_institute_data(
    institute_id: str,
    array_name: str,
    body: dict[str, Any] = Body(...),
    service: NestedArrayService = Depends(get_institute_array_service),
):
    """
    Append the body to an institute's array field.

    The array is created when missing; the stored element gets its own `_id`.
    """
    element = await service.append_element(institute_id, array_name, body)
    return SuccessResponse(
        success=f"Added to {array_name} successfully",
        result=serialize_document(element),
    )


@router.put(
    "/{institute_id}/{array_name}/{data_id}",
    response_model=SuccessResponse,
    summary="Replace nested institute data",
)
async def update_institute_data(
    institute_id: str,
    array_name: str,
    data_id: str,
    body: dict[str, Any] = Body(...),
    service: NestedArrayService = Depends(get_institute_array_service),
):
    element = await service.replace_element(institute_id, array_name, data_id, body)
    return SuccessResponse(
        success=f"{array_name} entry updated successfully",
        result=serialize_document(element),
    )


@router.delete(
    "/{institute_id}/{array_name}/{data_id}",
    response_model=SuccessResponse,
    summary="Remove nested institute data",
)
async def delete_institute_data(
    institute_id: str,
    array_name: str,
    data_id: str,
    service: NestedArrayService = Depends(get_institute_array_service),
):
    await service.remove_element(institute_id, array_name, data_id)
    return SuccessResponse(
        success=f"{array_name} entry deleted successfully",
        result={"_id": data_id},
    )
