import logging
import os
import uuid
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from fastapi import UploadFile

from .errors import InvalidInput

load_dotenv()

logger = logging.getLogger(__name__)

UPLOADS_BASE_DIR = Path(os.getenv("UPLOAD_DIR", "uploads"))
MAX_FILE_SIZE = int(os.getenv("MAX_FILE_SIZE", "5242880"))  # 5MB
READ_CHUNK_SIZE = 64 * 1024

ALLOWED_IMAGE_TYPES = {
    "image/jpeg": ".jpg",
    "image/jpg": ".jpg",
    "image/png": ".png",
    "image/webp": ".webp",
}

UNBOXING_FOLDER = "unboxing"
PRODUCT_FOLDER = "products"


def ensure_upload_dirs():
    for folder in (UNBOXING_FOLDER, PRODUCT_FOLDER):
        (UPLOADS_BASE_DIR / folder).mkdir(parents=True, exist_ok=True)


async def _read_capped(image: UploadFile) -> bytes:
    chunks = []
    size = 0
    while True:
        chunk = await image.read(READ_CHUNK_SIZE)
        if not chunk:
            break
        size += len(chunk)
        if size > MAX_FILE_SIZE:
            raise InvalidInput("File too large")
        chunks.append(chunk)
    return b"".join(chunks)


async def save_image(image: Optional[UploadFile], folder: str) -> str:
    """Validate and store an uploaded image, returning its public /uploads URL."""
    if image is None or not image.filename:
        raise InvalidInput("Image file is required")

    if image.content_type not in ALLOWED_IMAGE_TYPES:
        raise InvalidInput("Only image files (JPEG, PNG, WebP) are allowed")

    contents = await _read_capped(image)

    # Extension follows the checked content type, never the client's filename
    file_ext = ALLOWED_IMAGE_TYPES[image.content_type]
    unique_filename = f"{uuid.uuid4()}{file_ext}"

    target_dir = UPLOADS_BASE_DIR / folder
    target_dir.mkdir(parents=True, exist_ok=True)
    with open(target_dir / unique_filename, "wb") as buffer:
        buffer.write(contents)

    return f"/uploads/{folder}/{unique_filename}"


def resolve_upload_path(image_url: str) -> Optional[Path]:
    """Map an /uploads URL to its file, or None when it would land outside the upload root."""
    relative_path = image_url.replace("/uploads/", "", 1).lstrip("/")
    root = UPLOADS_BASE_DIR.resolve()
    path = (root / relative_path).resolve()
    if path == root or root not in path.parents:
        return None
    return path


def delete_image(image_url: Optional[str]) -> bool:
    """Best-effort removal of a stored upload. Returns True when a file was removed."""
    if not image_url or not image_url.startswith("/uploads/"):
        return False

    path = resolve_upload_path(image_url)
    if path is None:
        logger.warning("Refusing to delete %s: outside the upload directory", image_url)
        return False
    if not path.is_file():
        return False
    try:
        path.unlink()
        return True
    except OSError as e:
        logger.warning("Could not delete file %s: %s", path, e)
        return False
