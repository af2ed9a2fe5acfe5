"""
Upload router forwarding a single file to object storage.
"""
from fastapi import APIRouter, Depends, File, UploadFile, status

from app.dependencies.collections import get_upload_service
from app.routers.resources import ERROR_RESPONSES
from app.schemas.responses import SuccessResponse
from app.services.upload_service import UploadService

router = APIRouter(tags=["Upload"], responses=ERROR_RESPONSES)


@router.post(
    "/upload",
    response_model=SuccessResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Upload a file",
)
async def upload_file(
    file: UploadFile = File(..., description="File to store"),
    upload_service: UploadService = Depends(get_upload_service),
):
    """
    Store a file under a random key that keeps the original extension.

    - **file**: multipart form field with the file content
    """
    content = await file.read()
    result = await upload_service.upload(file.filename, content, file.content_type)
    return SuccessResponse(success="File uploaded successfully", result=result.model_dump())
