# rental_api/schemas/__init__.py
from .vehicle import VehicleSpecs, VehicleCreate, VehicleUpdate, VehicleOut
from .reservation import ReservationStatus, ReservationCreate, ReservationUpdate, ReservationOut
