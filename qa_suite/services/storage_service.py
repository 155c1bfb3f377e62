# /qa_suite/services/storage_service.py

"""
Screenshot storage for the bug reporter.

Uploads land in a single local "bucket" directory under a
timestamp-and-random-prefixed filename and are served read-only by the app at
`SCREENSHOT_URL_PREFIX`, so the public URL is known as soon as the file is
written.
"""

import io
import os
import re
import time
import uuid
from typing import Dict
from fastapi import UploadFile
from PIL import Image

from ..core.config import (
    SCREENSHOT_UPLOADS_DIR,
    SCREENSHOT_URL_PREFIX,
    PUBLIC_BASE_URL,
    MAX_SCREENSHOT_BYTES,
)

ALLOWED_SCREENSHOT_EXTENSIONS = {".png", ".jpg", ".jpeg", ".webp"}


def _safe_basename(filename: str) -> str:
    basename = os.path.basename(filename or "screenshot.png")
    return re.sub(r"[^A-Za-z0-9._-]", "_", basename)


def _verify_image(content: bytes) -> None:
    try:
        with Image.open(io.BytesIO(content)) as image:
            image.verify()
    except Exception as e:
        # verify() also raises SyntaxError, struct.error or IndexError on damaged chunks.
        raise ValueError(f"The uploaded file is not a valid image. Details: {e}")


def save_screenshot(upload: UploadFile) -> Dict[str, str]:
    """
    Validates and stores one screenshot.

    Returns:
        A dictionary with the stored `filename` and its public `url`.
    """
    basename = _safe_basename(upload.filename)
    extension = os.path.splitext(basename)[1].lower()
    if extension not in ALLOWED_SCREENSHOT_EXTENSIONS:
        allowed = ", ".join(sorted(ALLOWED_SCREENSHOT_EXTENSIONS))
        raise ValueError(f"Unsupported screenshot type '{extension or 'none'}'. Allowed: {allowed}.")

    content = upload.file.read(MAX_SCREENSHOT_BYTES + 1)
    if not content:
        raise ValueError("The uploaded screenshot is empty.")
    if len(content) > MAX_SCREENSHOT_BYTES:
        raise ValueError(f"Screenshots must be at most {MAX_SCREENSHOT_BYTES // (1024 * 1024)} MB.")
    _verify_image(content)

    os.makedirs(SCREENSHOT_UPLOADS_DIR, exist_ok=True)
    filename = f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:8]}-{basename}"
    path = os.path.join(SCREENSHOT_UPLOADS_DIR, filename)
    with open(path, "xb") as buffer:
        buffer.write(content)

    return {"filename": filename, "url": f"{PUBLIC_BASE_URL}{SCREENSHOT_URL_PREFIX}/{filename}"}
