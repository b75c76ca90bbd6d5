# /app/services/upload_service.py

"""
Stores profile and certificate images uploaded alongside students,
achievements and graduates.

Files land in `<UPLOAD_DIR>/<kind>s/` and are served back by the static
`/uploads` mount, so the stored `imageUrl` is `/uploads/<kind>s/<file>`.
"""

import io
import logging
import os
import random
import time
from typing import Optional

from fastapi import UploadFile
from PIL import Image, UnidentifiedImageError

from ..config import Settings
from ..exceptions import ValidationError

logger = logging.getLogger(__name__)

URL_PREFIX = "/uploads"


def _kind_dir(kind: str) -> str:
    return f"{kind}s"


def _unique_filename(kind: str, extension: str) -> str:
    suffix = f"{int(time.time() * 1000)}-{random.randint(0, 10**9)}"
    return f"{kind}-{suffix}{extension}"


def validate_image(filename: str, content_type: Optional[str], data: bytes, settings: Settings) -> str:
    """
    Checks extension, content type, size and the bytes themselves.
    Returns the normalized (lower-case) extension.
    """
    extension = os.path.splitext(filename or "")[1].lower()
    allowed = settings.ALLOWED_IMAGE_EXTENSIONS
    if extension not in allowed or not (content_type or "").startswith("image/"):
        raise ValidationError("Only image files are allowed")

    if len(data) > settings.max_upload_bytes:
        raise ValidationError(f"Image exceeds the {settings.MAX_UPLOAD_MB}MB limit")

    try:
        with Image.open(io.BytesIO(data)) as image:
            image.verify()
    except (UnidentifiedImageError, OSError, SyntaxError):
        raise ValidationError("Uploaded file is not a valid image")
    return extension


def save_image(file: Optional[UploadFile], kind: str, settings: Settings) -> Optional[str]:
    """
    Persists an uploaded image and returns its public URL, or None when no
    file (or an empty file field) was submitted.
    """
    if file is None or not file.filename:
        return None

    data = file.file.read()
    extension = validate_image(file.filename, file.content_type, data, settings)

    target_dir = os.path.join(settings.UPLOAD_DIR, _kind_dir(kind))
    os.makedirs(target_dir, exist_ok=True)
    filename = _unique_filename(kind, extension)
    with open(os.path.join(target_dir, filename), "wb") as out:
        out.write(data)

    logger.info("Stored %s image %s (%d bytes)", kind, filename, len(data))
    return f"{URL_PREFIX}/{_kind_dir(kind)}/{filename}"


def delete_image(image_url: Optional[str], settings: Settings) -> bool:
    """Removes a previously stored image. Unknown or foreign URLs are ignored."""
    if not image_url or not image_url.startswith(URL_PREFIX + "/"):
        return False

    relative = image_url[len(URL_PREFIX) + 1:]
    upload_root = os.path.abspath(settings.UPLOAD_DIR)
    path = os.path.abspath(os.path.join(upload_root, relative))
    if os.path.commonpath([upload_root, path]) != upload_root or not os.path.isfile(path):
        return False

    os.remove(path)
    logger.info("Removed image %s", image_url)
    return True
