# rental_api/repositories/__init__.py
from .vehicle import VehicleRepository
from .reservation import ReservationRepository
