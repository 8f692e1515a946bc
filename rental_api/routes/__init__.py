#rental_api/routes/__init__.py

from .vehicle import router as vehicle_router
from .reservation import router as reservation_router
from .upload import router as upload_router, files_router
from .health import router as health_router
