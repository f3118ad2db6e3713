"""Upload schemas."""

from propconnect.schemas.base import ApiModel


class UploadResponse(ApiModel):
    """Where an uploaded image can be fetched from."""

    image_url: str
    filename: str
    original_name: str
    size: int
    mimetype: str
