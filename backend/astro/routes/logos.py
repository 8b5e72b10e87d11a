"""
Logo upload and serving routes.

Request Flow (POST /api/logo):
    1. Client sends multipart/form-data with a 'file' field
    2. LogoService validates extension → size → MIME, then stores the bytes
    3. 201 with {"path": "2024/01/15/<uuid>.png", "url": "/api/logos/2024/..."}

The returned `url` is what a service's `logo` field should hold.
"""

import logging

from fastapi import APIRouter, File, UploadFile
from fastapi.responses import FileResponse

from astro.schemas.common import ErrorResponse, LogoUploadResponse
from astro.services.logo_service import logo_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Logos"])


@router.post(
    "/logo",
    status_code=201,
    response_model=LogoUploadResponse,
    responses={400: {"description": "Invalid file type or size", "model": ErrorResponse}},
    summary="Upload a service logo",
)
async def upload_logo(
    file: UploadFile = File(..., description="PNG, JPEG, SVG or WebP image"),
) -> LogoUploadResponse:
    try:
        content = await file.read()
        logger.info(
            "Received logo upload: filename=%s, size=%d bytes",
            file.filename or "unknown",
            len(content),
        )
        _, relative_path = await logo_service.validate_and_store(
            filename=file.filename or "logo.png",
            content=content,
            content_length=file.size,
        )
    finally:
        await file.close()

    return LogoUploadResponse(path=relative_path, url=logo_service.public_url(relative_path))


@router.get(
    "/logos/{file_path:path}",
    summary="Serve a stored logo",
    responses={
        200: {"description": "Logo image"},
        400: {"description": "Path escapes the storage root", "model": ErrorResponse},
        404: {"description": "Logo not found", "model": ErrorResponse},
    },
)
async def serve_logo(file_path: str) -> FileResponse:
    full_path = logo_service.resolve(file_path)
    return FileResponse(
        path=str(full_path),
        media_type=logo_service.media_type_for(full_path),
        # Stored names are UUIDs, so content under a path never changes
        headers={"Cache-Control": "public, max-age=86400"},
    )
