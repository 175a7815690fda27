# backend/utils/uploads.py
import logging
import shutil
import uuid
from pathlib import Path
from typing import Optional

from fastapi import UploadFile

from services.errors import InvalidRequest, NoFileProvided, StoreError

logger = logging.getLogger(__name__)

# Accepted image types and the extension each is stored under
ALLOWED_CONTENT_TYPES = {
    "image/jpeg": ".jpg",
    "image/png": ".png",
    "image/webp": ".webp",
    "image/gif": ".gif",
}

# Public prefix the upload directory is mounted under
UPLOADS_URL = "/uploads"


def save_upload(file: Optional[UploadFile], upload_dir: Path) -> str:
    """Store an uploaded image under a unique name and return its URL path."""
    if file is None or not file.filename:
        raise NoFileProvided()
    if file.content_type not in ALLOWED_CONTENT_TYPES:
        raise InvalidRequest(f"Invalid file type: {file.content_type}")

    ext = ALLOWED_CONTENT_TYPES[file.content_type]
    unique_filename = f"{uuid.uuid4().hex}{ext}"
    upload_dir.mkdir(parents=True, exist_ok=True)
    save_path = upload_dir / unique_filename

    try:
        with open(save_path, "wb") as buffer:
            shutil.copyfileobj(file.file, buffer)
    except OSError as e:
        logger.exception("Could not write upload %s", save_path)
        raise StoreError(f"File save error: {e}") from e
    finally:
        file.file.close()

    logger.info("Stored upload %s (%s)", unique_filename, file.content_type)
    return f"{UPLOADS_URL}/{unique_filename}"
