"""Image upload endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, UploadFile

from propconnect.api.dependencies import get_image_store
from propconnect.errors import ValidationError
from propconnect.schemas.upload import UploadResponse
from propconnect.services.storage import LocalImageStore

router = APIRouter(prefix="/api/upload", tags=["upload"])


@router.post("", response_model=UploadResponse)
async def upload_image(
    store: Annotated[LocalImageStore, Depends(get_image_store)],
    image: Annotated[UploadFile | None, File()] = None,
):
    """Store an uploaded image and return its URL."""
    if image is None or not image.filename:
        raise ValidationError("No file uploaded")

    stored = await store.store(image)
    return UploadResponse(
        image_url=stored.url,
        filename=stored.filename,
        original_name=stored.original_name,
        size=stored.size,
        mimetype=stored.mimetype,
    )
