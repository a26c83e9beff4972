"""Type and size checks for resume uploads."""

from __future__ import annotations

import logging
import mimetypes
from pathlib import Path

from ats_tailor.errors import UploadRejectedError
from ats_tailor.models.resume import UploadedResume
from ats_tailor.parsers.resume_parser import parse_resume_bytes

logger = logging.getLogger(__name__)

MAX_UPLOAD_BYTES = 5 * 1024 * 1024

ALLOWED_CONTENT_TYPES = {
    "application/pdf": ".pdf",
    "application/msword": ".doc",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": ".docx",
    "text/plain": ".txt",
    "text/markdown": ".md",
}


def guess_content_type(file_name: str) -> str:
    if Path(file_name).suffix.lower() == ".md":
        return "text/markdown"
    content_type, _ = mimetypes.guess_type(file_name)
    return content_type or "application/octet-stream"


def check_upload(
    file_name: str,
    content_type: str,
    size: int,
    *,
    max_bytes: int = MAX_UPLOAD_BYTES,
) -> None:
    """Raise UploadRejectedError unless the file is an allowed type and size."""
    if content_type not in ALLOWED_CONTENT_TYPES:
        raise UploadRejectedError(f"Invalid file type for {file_name}: {content_type}")
    if size > max_bytes:
        raise UploadRejectedError(
            f"File too large: {file_name} is {size} bytes (limit {max_bytes})"
        )
    if size == 0:
        raise UploadRejectedError(f"File is empty: {file_name}")


def accept_upload(
    file_name: str,
    data: bytes,
    content_type: str | None = None,
    *,
    max_bytes: int = MAX_UPLOAD_BYTES,
) -> UploadedResume:
    """Check an upload and extract its text."""
    content_type = content_type or guess_content_type(file_name)
    check_upload(file_name, content_type, len(data), max_bytes=max_bytes)
    text = parse_resume_bytes(data, file_name)
    logger.info("Accepted upload %s (%s, %d bytes)", file_name, content_type, len(data))
    return UploadedResume(
        file_name=file_name,
        content_type=content_type,
        size=len(data),
        text=text,
    )
