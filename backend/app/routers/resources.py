"""
Generic CRUD router, instantiated once per resource.
"""
from typing import Any

from fastapi import APIRouter, Body, Depends, status

from app.core.identifiers import serialize_document
from app.dependencies.collections import resource_service_for
from app.models.resource import ALL_RESOURCES, ResourceDefinition
from app.schemas.responses import FailureResponse, SuccessResponse
from app.services.resource_service import ResourceService

ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": FailureResponse},
    status.HTTP_404_NOT_FOUND: {"model": FailureResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": FailureResponse},
}


def build_resource_router(definition: ResourceDefinition) -> APIRouter:
    """
    Create ``GET/POST /{name}`` and ``GET/PUT/DELETE /{name}/{document_id}``
    routes for one resource.
    """
    router = APIRouter(
        prefix=f"/{definition.name}",
        tags=[definition.plural],
        responses=ERROR_RESPONSES,
    )
    get_service = resource_service_for(definition)

    @router.get(
        "",
        response_model=SuccessResponse,
        summary=f"List {definition.plural.lower()}",
        name=f"list_{definition.name}",
    )
    async def list_documents(service: ResourceService = Depends(get_service)):
        docs = await service.list_documents()
        return SuccessResponse(
            success=f"{definition.plural} sent successfully",
            result=serialize_document(docs),
        )

    @router.post(
        "",
        response_model=SuccessResponse,
        status_code=status.HTTP_201_CREATED,
        summary=f"Create {definition.label.lower()}",
        name=f"create_{definition.name}",
    )
    async def create_document(
        body: dict[str, Any] = Body(...),
        service: ResourceService = Depends(get_service),
    ):
        doc = await service.create_document(body)
        return SuccessResponse(
            success=f"{definition.label} added successfully",
            result=serialize_document(doc),
        )

    @router.get(
        "/{document_id}",
        response_model=SuccessResponse,
        summary=f"Get {definition.label.lower()}",
        name=f"get_{definition.name}",
    )
    async def get_document(document_id: str, service: ResourceService = Depends(get_service)):
        doc = await service.get_document(document_id)
        return SuccessResponse(
            success=f"{definition.label} sent successfully",
            result=serialize_document(doc),
        )

    @router.put(
        "/{document_id}",
        response_model=SuccessResponse,
        summary=f"Update {definition.label.lower()} fields",
        name=f"update_{definition.name}",
    )
    async def update_document(
        document_id: str,
        body: dict[str, Any] = Body(...),
        service: ResourceService = Depends(get_service),
    ):
        """
        Merge the body into the stored document. Fields not present in the
        body keep their current value.
        """
        counts = await service.update_document(document_id, body)
        return SuccessResponse(
            success=f"{definition.label} updated successfully",
            result=counts,
        )

    @router.delete(
        "/{document_id}",
        response_model=SuccessResponse,
        summary=f"Delete {definition.label.lower()}",
        name=f"delete_{definition.name}",
    )
    async def delete_document(document_id: str, service: ResourceService = Depends(get_service)):
        await service.delete_document(document_id)
        return SuccessResponse(
            success=f"{definition.label} deleted successfully",
            result={"_id": document_id},
        )

    return router


routers = [build_resource_router(definition) for definition in ALL_RESOURCES]
