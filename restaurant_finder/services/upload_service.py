"""
Restaurant Finder - Image Upload Service
=========================================

What:  Validates uploaded images and stores them in the public uploads tree.
How:   Checks extension and declared MIME type against the allow-list,
       enforces the size cap, then writes the bytes under a generated
       unique filename and returns the public /uploads/Images/... path.
Who:   Called by the POST /upload route; the /uploads route uses
       resolve_public_file() to serve stored images back.

Validation order:
    1. Type filter:  extension AND declared content type must be allowed
    2. Size check:   declared size, then actual byte count
    3. Store:        exclusive-create write, new name on collision

Nothing is written unless all checks pass.

Directory Structure:
    public/
    └── uploads/
        └── Images/
            ├── 1700000000123482913.jpg
            └── 1700000004567004211.png
"""

import logging
import secrets
import time
from pathlib import Path
from typing import Optional

import aiofiles

from restaurant_finder.config import settings
from restaurant_finder.exceptions import (
    FileStorageError,
    NotFoundError,
    UploadError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# ── Allowed File Types ────────────────────────────────────────────────────
ALLOWED_EXTENSIONS = {".jpeg", ".jpg", ".png", ".gif"}

ALLOWED_MIME_TYPES = {"image/jpeg", "image/jpg", "image/png", "image/gif"}

TYPE_REJECTED_MESSAGE = "Only JPEG, JPG, PNG, and GIF images are allowed!"

IMAGES_SUBDIR = "Images"

# Attempts at finding a free filename before giving up
_MAX_NAME_ATTEMPTS = 5


class UploadService:
    """
    Manages validation and storage of uploaded restaurant images.

    Filenames are <millisecond epoch><6 random digits><extension>. The file
    is opened in exclusive-create mode, so two uploads that draw the same
    name never overwrite each other; the loser draws a new name.
    """

    def __init__(
        self,
        uploads_root: Optional[str] = None,
        max_upload_size: Optional[int] = None,
    ):
        """
        Args:
            uploads_root: Override the directory served under /uploads (tests).
            max_upload_size: Override the size cap in bytes (tests).
        """
        self.uploads_root = Path(uploads_root or settings.uploads_root).resolve()
        self.images_dir = self.uploads_root / IMAGES_SUBDIR
        self.max_upload_size = max_upload_size or settings.max_upload_size

    def ensure_directories(self) -> None:
        """Creates the images directory if absent. Safe to call repeatedly."""
        self.images_dir.mkdir(parents=True, exist_ok=True)

    def validate_type(self, filename: str, content_type: Optional[str]) -> str:
        """
        Apply the type filter.

        Returns:
            Normalized extension (lowercase with dot).

        Raises:
            ValidationError: extension or declared MIME type not allowed
        """
        ext = Path(filename).suffix.lower()
        mime = (content_type or "").split(";")[0].strip().lower()

        if ext not in ALLOWED_EXTENSIONS or mime not in ALLOWED_MIME_TYPES:
            raise ValidationError(
                message=TYPE_REJECTED_MESSAGE,
                field="image",
                context={"extension": ext, "content_type": mime},
            )
        return ext

    def validate_size(self, declared_size: Optional[int], actual_size: int) -> None:
        """
        Enforce the upload cap.

        Raises:
            UploadError: declared or actual size exceeds max_upload_size
        """
        if declared_size and declared_size > self.max_upload_size:
            raise UploadError(
                "File too large",
                field="image",
                context={"max_size": self.max_upload_size, "reported_size": declared_size},
            )
        if actual_size > self.max_upload_size:
            raise UploadError(
                "File too large",
                field="image",
                context={"max_size": self.max_upload_size, "actual_size": actual_size},
            )

    def _generate_filename(self, extension: str) -> str:
        millis = int(time.time() * 1000)
        return f"{millis}{secrets.randbelow(1_000_000):06d}{extension}"

    def public_url(self, filename: str) -> str:
        return f"/uploads/{IMAGES_SUBDIR}/{filename}"

    async def store_file(self, content: bytes, extension: str) -> str:
        """
        Write validated bytes to the images directory.

        Returns:
            The generated filename.

        Raises:
            FileStorageError: directory creation or write failed
        """
        try:
            self.ensure_directories()
            for _ in range(_MAX_NAME_ATTEMPTS):
                filename = self._generate_filename(extension)
                path = self.images_dir / filename
                try:
                    # "xb": fails instead of overwriting an existing file
                    async with aiofiles.open(path, "xb") as f:
                        await f.write(content)
                except FileExistsError:
                    logger.debug("Filename collision on %s, drawing a new name", filename)
                    continue
                logger.info("Image stored: %s (%d bytes)", filename, len(content))
                return filename
        except OSError as e:
            logger.error("Failed to store image in %s: %s", self.images_dir, str(e))
            raise FileStorageError(
                message="Failed to save uploaded image. Please try again.",
                context={"directory": str(self.images_dir), "os_error": str(e)},
            )

        raise FileStorageError(
            message="Failed to save uploaded image. Please try again.",
            context={"directory": str(self.images_dir), "reason": "no free filename"},
        )

    async def validate_and_store(
        self,
        filename: str,
        content_type: Optional[str],
        content: bytes,
        declared_size: Optional[int] = None,
    ) -> str:
        """
        Full pipeline: type filter, size check, store.

        Returns:
            Public URL path of the stored image, e.g. /uploads/Images/<name>.
        """
        ext = self.validate_type(filename, content_type)
        self.validate_size(declared_size, len(content))
        stored_name = await self.store_file(content, ext)
        return self.public_url(stored_name)

    def resolve_public_file(self, relative_path: str) -> Path:
        """
        Map a path under /uploads to a stored file.

        Raises:
            ValidationError: path escapes the uploads root
            NotFoundError: no such file
        """
        full_path = (self.uploads_root / relative_path).resolve()
        if not full_path.is_relative_to(self.uploads_root):
            raise ValidationError(message="Invalid file path", field="path")
        if not full_path.is_file():
            raise NotFoundError(resource="file", resource_id=relative_path)
        return full_path


# ── Singleton Instance ────────────────────────────────────────────────────
upload_service = UploadService()
