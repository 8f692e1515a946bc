# rental_api/uploads/service.py
from typing import List, Optional, Sequence, Tuple
from fastapi import UploadFile
from rental_api.errors import NoFileProvided, ValidationError
from rental_api.logger import get_logger
from .file_store import FileStore
from .filenames import generate_filename
from .validator import MAX_FILE_SIZE, check_size, has_file, require_file, validate_upload

logger = get_logger("uploads")

MAX_FILES_PER_REQUEST = 3


class UploadService:
    """validate -> name -> store, shared by the single and multi-file endpoints."""

    def __init__(self, store: FileStore):
        self.store = store

    async def _read(self, file: UploadFile) -> bytes:
        validate_upload(file.content_type, file.filename)
        # one byte past the limit is enough to know the file is too large
        data = await file.read(MAX_FILE_SIZE + 1)
        check_size(len(data), file.filename)
        return data

    async def upload_single(self, file: Optional[UploadFile]) -> str:
        file = require_file(file)
        data = await self._read(file)
        return await self.store.store(data, generate_filename(file.filename))

    async def upload_many(self, files: Optional[Sequence[UploadFile]]) -> List[str]:
        files = [file for file in files or [] if has_file(file)]
        if not files:
            raise NoFileProvided("No files uploaded")
        if len(files) > MAX_FILES_PER_REQUEST:
            raise ValidationError(
                "Too many files",
                f"At most {MAX_FILES_PER_REQUEST} images can be uploaded at once",
            )

        # every file is checked before any of them is written
        payloads: List[Tuple[UploadFile, bytes]] = [(file, await self._read(file)) for file in files]

        stored: List[str] = []
        try:
            for file, data in payloads:
                filename = generate_filename(file.filename)
                await self.store.store(data, filename)
                stored.append(filename)
        except Exception:
            logger.error(f"Upload failed after storing {len(stored)} file(s), rolling back")
            for filename in stored:
                await self.store.remove(filename)
            raise

        return [self.store.url_for(filename) for filename in stored]
