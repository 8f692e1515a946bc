# rental_api/uploads/__init__.py
from .file_store import FileStore
from .service import UploadService
