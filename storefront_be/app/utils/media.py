from pathlib import Path
import logging
import os
import secrets
from typing import Optional

from fastapi import HTTPException, UploadFile
from fastapi.responses import JSONResponse
from starlette.datastructures import Headers

from app.config import get_settings

logger = logging.getLogger(__name__)

UPLOAD_URL_PREFIX = "/uploads"
CHUNK_SIZE = 1024 * 1024
# Multipart boundaries and part headers on top of the file bytes
UPLOAD_BODY_SLACK = 64 * 1024

ALLOWED_IMAGE_TYPES = {"image/jpeg", "image/png", "image/gif", "image/webp"}
ALLOWED_VIDEO_TYPES = {"video/mp4", "video/webm", "video/quicktime"}
ALLOWED_TYPES = ALLOWED_IMAGE_TYPES | ALLOWED_VIDEO_TYPES


class UploadRejected(Exception):
    """Upload refused by policy; ``status_code`` is the HTTP status to answer with."""

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def upload_root() -> Path:
    return Path(get_settings().UPLOAD_DIR).resolve()


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def _content_type(upload_file: UploadFile) -> str:
    return (upload_file.content_type or "").split(";")[0].strip().lower()


def save_upload_file(upload_file: UploadFile) -> dict:
    """Validate and store one upload under the upload directory.

    Returns the upload metadata (url, filename, original_name, size, mime_type).
    Raises UploadRejected with 400 for a missing file or a type outside the
    allow-list, and with 413 once the stream passes MAX_UPLOAD_BYTES. Nothing
    is left on disk when the upload is rejected.
    """
    if not upload_file or not upload_file.filename:
        raise UploadRejected("No file uploaded")
    mime_type = _content_type(upload_file)
    if mime_type not in ALLOWED_TYPES:
        raise UploadRejected(
            "Invalid file type. Only images (JPEG, PNG, GIF, WebP) and videos (MP4, WebM, MOV) are allowed."
        )

    limit = get_settings().MAX_UPLOAD_BYTES
    ext = os.path.splitext(upload_file.filename)[1]
    filename = f"{secrets.token_hex(8)}{ext}"
    dst_dir = upload_root()
    _ensure_dir(dst_dir)
    file_path = dst_dir / filename

    size = 0
    try:
        with file_path.open("wb") as buffer:
            while True:
                chunk = upload_file.file.read(CHUNK_SIZE)
                if not chunk:
                    break
                size += len(chunk)
                if size > limit:
                    raise UploadRejected(
                        too_large_message(limit), status_code=413
                    )
                buffer.write(chunk)
    except BaseException:
        file_path.unlink(missing_ok=True)
        raise

    logger.info("Stored upload %s (%s, %d bytes)", filename, mime_type, size)
    return {
        "url": f"{UPLOAD_URL_PREFIX}/{filename}",
        "filename": filename,
        "original_name": upload_file.filename,
        "size": size,
        "mime_type": mime_type,
    }


def resolve_upload_path(filename: Optional[str]) -> Optional[Path]:
    """Map a client-supplied filename to a path inside the upload directory.

    Returns None for anything that is not a plain file name: empty values,
    path separators, ``..`` sequences, or a path that resolves elsewhere.
    """
    if not filename or not isinstance(filename, str):
        return None
    if "/" in filename or "\\" in filename or ".." in filename or "\x00" in filename:
        return None
    if os.path.basename(filename) != filename:
        return None
    root = upload_root()
    target = (root / filename).resolve()
    if target.parent != root:
        return None
    return target


def delete_upload_file(filename: str) -> bool:
    """Delete a stored upload. Returns False when the file does not exist.

    Raises UploadRejected (400) for an unsafe filename, before touching the filesystem.
    """
    target = resolve_upload_path(filename)
    if target is None:
        raise UploadRejected("Invalid filename")
    if not target.is_file():
        return False
    target.unlink()
    logger.info("Deleted upload %s", filename)
    return True


def too_large_message(limit: int) -> str:
    return f"File too large. Maximum size is {limit // (1024 * 1024)}MB."


class UploadSizeLimitMiddleware:
    """Caps request bodies sent to the upload endpoint before they are parsed.

    Form parsing spools the whole body to disk ahead of any route dependency,
    the admin gate included, so the ceiling has to be enforced at the ASGI
    layer: a declared Content-Length over the limit gets 413 straight away,
    and a body without one is counted as it streams in.
    """

    def __init__(self, app, path_prefix: str = "/api/uploads"):
        self.app = app
        self.path_prefix = path_prefix

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http" or scope["method"] != "POST" or not scope["path"].startswith(self.path_prefix):
            await self.app(scope, receive, send)
            return

        max_bytes = get_settings().MAX_UPLOAD_BYTES
        limit = max_bytes + UPLOAD_BODY_SLACK
        declared = Headers(scope=scope).get("content-length")
        if declared is not None and declared.isdigit() and int(declared) > limit:
            logger.warning("Upload refused before reading: Content-Length %s over %d", declared, limit)
            response = JSONResponse(status_code=413, content={"error": too_large_message(max_bytes)})
            await response(scope, receive, send)
            return

        received = 0

        async def limited_receive():
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > limit:
                    logger.warning("Upload body passed %d bytes while streaming", limit)
                    raise HTTPException(status_code=413, detail=too_large_message(max_bytes))
            return message

        await self.app(scope, limited_receive, send)
