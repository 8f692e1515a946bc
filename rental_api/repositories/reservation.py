# rental_api/repositories/reservation.py
from typing import Any, Dict
from bson import ObjectId
from rental_api.database import RESERVATIONS
from rental_api.schemas.reservation import ReservationCreate, ReservationUpdate, ReservationOut
from .base import MongoRepository


class ReservationRepository(MongoRepository[ReservationOut]):
    """Reservations keep a vehicleId and a copy of the vehicle name.

    Neither is checked against the vehicles collection: a reservation may
    outlive its vehicle and the name may drift from the vehicle's current one.
    """

    collection_name = RESERVATIONS
    label = "reservation"
    create_schema = ReservationCreate
    update_schema = ReservationUpdate
    out_schema = ReservationOut

    def _to_document(self, data: Dict[str, Any]) -> Dict[str, Any]:
        if data.get("vehicleId"):
            data["vehicleId"] = ObjectId(data["vehicleId"])
        return data
