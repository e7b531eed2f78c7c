"""
Restaurant Finder - Upload Route Handlers
==========================================

What:  POST /upload (store one image) and GET /uploads/{path} (serve it back).
How:   Reads the single `image` file part, delegates validation and storage
       to UploadService, returns the public URL for use in a later
       create/update call.

Request Flow (POST /upload):
    1. Client sends multipart/form-data with one file in field 'image'
    2. Any file part under another field name, or a second 'image' part,
       is rejected as an upload error
    3. UploadService applies the type filter and size cap, then stores
    4. 200 with {"message", "data": {"image_url"}}

Uploading and creating a restaurant are separate calls; the client passes
the returned image_url in the restaurant body.
"""

import logging
from typing import Optional

from fastapi import APIRouter, File, Request, UploadFile
from fastapi.responses import FileResponse
from starlette.datastructures import UploadFile as StarletteUploadFile

from restaurant_finder.exceptions import UploadError, ValidationError
from restaurant_finder.schemas.restaurant import ErrorResponse, UploadData, UploadResponse
from restaurant_finder.services.upload_service import upload_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Uploads"])

UPLOAD_FIELD = "image"


@router.post(
    "/upload",
    response_model=UploadResponse,
    responses={
        200: {"description": "Image stored", "model": UploadResponse},
        400: {"description": "Missing, disallowed or oversized file", "model": ErrorResponse},
    },
    summary="Upload a restaurant image",
    description=(
        "Upload one JPEG, JPG, PNG or GIF image (max 2 MiB) in the multipart "
        "field 'image'. Returns the public URL of the stored file."
    ),
)
async def upload_image(
    request: Request,
    image: Optional[UploadFile] = File(
        default=None,
        description="Image file (JPEG, JPG, PNG or GIF, max 2 MiB)",
    ),
) -> UploadResponse:
    """
    Store one uploaded image.

    Error responses (handled by global exception handlers):
        HTTP 400: no file, unexpected file field, disallowed type, too large
        HTTP 500: the file could not be written
    """
    # Form is already parsed and cached by FastAPI; this re-reads it
    form = await request.form()
    file_fields = [
        key for key, value in form.multi_items() if isinstance(value, StarletteUploadFile)
    ]
    unexpected = [key for key in file_fields if key != UPLOAD_FIELD]
    if unexpected or file_fields.count(UPLOAD_FIELD) > 1:
        raise UploadError(
            "Unexpected field",
            field=unexpected[0] if unexpected else UPLOAD_FIELD,
        )

    if image is None:
        raise ValidationError(message="No file uploaded or invalid file type.", field=UPLOAD_FIELD)

    try:
        # Read one byte past the cap; enough to detect an oversized file
        content = await image.read(upload_service.max_upload_size + 1)
        logger.info(
            "Received upload: filename=%s, content_type=%s, size=%s",
            image.filename or "unknown",
            image.content_type,
            image.size,
        )
        image_url = await upload_service.validate_and_store(
            filename=image.filename or "",
            content_type=image.content_type,
            content=content,
            declared_size=image.size,
        )
    finally:
        await image.close()

    logger.info("Image URL: %s", image_url)
    return UploadResponse(data=UploadData(image_url=image_url))


@router.get(
    "/uploads/{file_path:path}",
    summary="Serve uploaded image files",
    responses={
        200: {"description": "Image file"},
        404: {"description": "File not found", "model": ErrorResponse},
    },
)
async def serve_upload(file_path: str) -> FileResponse:
    """
    Serve a previously uploaded file, e.g. /uploads/Images/<name>.

    Paths resolving outside the uploads root are rejected with 400.
    Media type is guessed from the filename.
    """
    full_path = upload_service.resolve_public_file(file_path)
    return FileResponse(
        path=str(full_path),
        headers={"Cache-Control": "public, max-age=86400"},
    )
