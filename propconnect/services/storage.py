"""Image storage for uploaded property photos."""

import logging
import secrets
import time
from dataclasses import dataclass
from pathlib import Path

from fastapi import UploadFile
from starlette.concurrency import run_in_threadpool

from propconnect.errors import ValidationError

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024


@dataclass
class StoredImage:
    """Where an uploaded image ended up."""

    url: str
    filename: str
    original_name: str
    size: int
    mimetype: str


class LocalImageStore:
    """Writes images to a local directory served under ``/uploads``."""

    def __init__(self, directory: str | Path, base_url: str, max_bytes: int):
        self.directory = Path(directory)
        self.base_url = base_url.rstrip("/")
        self.max_bytes = max_bytes

    def ensure_directory(self) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)

    def _unique_name(self, original_name: str) -> str:
        suffix = Path(original_name).suffix.lower()
        return f"{int(time.time() * 1000)}-{secrets.randbelow(10**9)}{suffix}"

    async def store(self, file: UploadFile) -> StoredImage:
        """Save an uploaded image and return its public URL."""
        content_type = file.content_type or ""
        if not content_type.startswith("image/"):
            raise ValidationError("Only image files are allowed!")

        self.ensure_directory()
        original_name = file.filename or "upload"
        filename = self._unique_name(original_name)
        path = self.directory / filename

        # Disk I/O stays off the event loop
        size = 0
        too_large = False
        out = await run_in_threadpool(path.open, "wb")
        try:
            while chunk := await file.read(CHUNK_SIZE):
                size += len(chunk)
                if size > self.max_bytes:
                    too_large = True
                    break
                await run_in_threadpool(out.write, chunk)
        finally:
            await run_in_threadpool(out.close)
        if too_large:
            await run_in_threadpool(path.unlink, missing_ok=True)
            raise ValidationError(f"File too large (limit {self.max_bytes} bytes)")

        logger.info(f"Stored upload {filename} ({size} bytes)")
        return StoredImage(
            url=f"{self.base_url}/uploads/{filename}",
            filename=filename,
            original_name=original_name,
            size=size,
            mimetype=content_type,
        )
