# rental_api/dependencies.py
from functools import lru_cache
from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorDatabase
from rental_api.config import get_settings
from rental_api.database import get_database
from rental_api.repositories import VehicleRepository, ReservationRepository
from rental_api.uploads import FileStore, UploadService


@lru_cache()
def get_file_store() -> FileStore:
    return FileStore(get_settings().UPLOAD_DIR)


def get_upload_service(store: FileStore = Depends(get_file_store)) -> UploadService:
    return UploadService(store)


def get_vehicle_repository(db: AsyncIOMotorDatabase = Depends(get_database)) -> VehicleRepository:
    return VehicleRepository(db)


def get_reservation_repository(db: AsyncIOMotorDatabase = Depends(get_database)) -> ReservationRepository:
    return ReservationRepository(db)
