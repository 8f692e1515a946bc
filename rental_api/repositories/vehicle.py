# rental_api/repositories/vehicle.py
from rental_api.database import VEHICLES
from rental_api.schemas.vehicle import VehicleCreate, VehicleUpdate, VehicleOut
from .base import MongoRepository


class VehicleRepository(MongoRepository[VehicleOut]):
    collection_name = VEHICLES
    label = "vehicle"
    create_schema = VehicleCreate
    update_schema = VehicleUpdate
    out_schema = VehicleOut
