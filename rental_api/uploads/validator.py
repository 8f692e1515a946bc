# rental_api/uploads/validator.py
import os
from typing import Optional
from fastapi import UploadFile
from starlette.datastructures import UploadFile as StarletteUploadFile
from rental_api.errors import FileTooLarge, NoFileProvided, ValidationError

# 5 MiB per file
MAX_FILE_SIZE = 5 * 1024 * 1024

ALLOWED_MEDIA_TYPES = frozenset({"image/jpeg", "image/png", "image/gif"})
ALLOWED_EXTENSIONS = frozenset({"jpg", "jpeg", "png", "gif"})

INVALID_FILE_MESSAGE = "Only image files (jpg, jpeg, png, gif) are allowed!"


def file_extension(filename: str) -> str:
    """Lower-cased extension without the dot, '' when there is none."""
    _, ext = os.path.splitext(filename or "")
    return ext.lstrip(".").lower()


def media_type(content_type: Optional[str]) -> str:
    # drop parameters such as "; charset=binary"
    return (content_type or "").split(";", 1)[0].strip().lower()


def validate_upload(content_type: Optional[str], filename: str):
    """Both the declared media type and the extension must be allowed."""
    if media_type(content_type) not in ALLOWED_MEDIA_TYPES or file_extension(filename) not in ALLOWED_EXTENSIONS:
        raise ValidationError(
            INVALID_FILE_MESSAGE,
            f"Rejected '{filename}' ({content_type or 'no content type'})",
        )


def check_size(size: int, filename: str = ""):
    if size > MAX_FILE_SIZE:
        raise FileTooLarge(
            "File too large",
            f"'{filename}' exceeds the {MAX_FILE_SIZE // (1024 * 1024)}MB limit",
        )


def has_file(file) -> bool:
    # a plain text form field under the file name counts as no file
    return isinstance(file, StarletteUploadFile) and bool(file.filename)


def require_file(file) -> UploadFile:
    if not has_file(file):
        raise NoFileProvided("No file uploaded")
    return file
