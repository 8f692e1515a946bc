# rental_api/uploads/file_store.py
import os
from pathlib import Path
from typing import Dict, Optional
from fastapi.concurrency import run_in_threadpool
from rental_api.errors import NotFound
from rental_api.logger import get_logger

logger = get_logger("file_store")

URL_PREFIX = "/uploads"

ONE_YEAR_SECONDS = 31536000


class FileStore:
    """Flat directory of uploaded files, served back under ``/uploads``."""

    def __init__(self, directory):
        self.directory = Path(directory)

    def ensure_directory(self) -> bool:
        # a missing upload directory must not stop the API from starting
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            return True
        except OSError as e:
            logger.error(f"Error creating uploads directory {self.directory}: {e}")
            return False

    def url_for(self, filename: str) -> str:
        return f"{URL_PREFIX}/{filename}"

    def _write(self, path: Path, data: bytes):
        # "xb" never overwrites an existing upload
        with open(path, "xb") as f:
            f.write(data)

    async def store(self, data: bytes, filename: str) -> str:
        path = self.directory / filename
        await run_in_threadpool(self._write, path, data)
        logger.info(f"Stored upload {filename} ({len(data)} bytes)")
        return self.url_for(filename)

    async def remove(self, filename: str):
        try:
            await run_in_threadpool(os.remove, self.directory / filename)
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.error(f"Error removing upload {filename}: {e}")

    def path_for(self, filename: str) -> Path:
        if not filename or os.path.basename(filename) != filename or filename in (".", ".."):
            raise NotFound("File not found", f"'{filename}' is not a stored upload")
        path = self.directory / filename
        if not path.is_file():
            raise NotFound("File not found", f"No upload named '{filename}'")
        return path

    @staticmethod
    def serving_headers(origin: Optional[str] = None) -> Dict[str, str]:
        return {
            "Access-Control-Allow-Origin": origin or "*",
            "Access-Control-Allow-Methods": "GET, HEAD, OPTIONS",
            "Access-Control-Allow-Headers": "Origin, X-Requested-With, Content-Type, Accept",
            "Cache-Control": f"public, max-age={ONE_YEAR_SECONDS}",
            "Cross-Origin-Resource-Policy": "cross-origin",
        }
