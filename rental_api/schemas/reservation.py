# rental_api/schemas/reservation.py
from datetime import datetime
from enum import Enum
from typing import ClassVar, FrozenSet, Optional
from bson import ObjectId
from pydantic import BaseModel, Field, ConfigDict, field_validator
from .common import PartialUpdate

class ReservationStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"

def check_vehicle_id(value):
    # vehicleId must look like an id; whether the vehicle exists is never checked
    if value is not None and not ObjectId.is_valid(value):
        raise ValueError(f"'{value}' is not a valid vehicle id")
    return value

class ReservationBase(BaseModel):
    vehicleId: str = Field(..., description="Vehicle id, not checked against the vehicles collection")
    vehicleName: str
    startDate: datetime
    endDate: datetime
    licenseNumber: str
    pickupLocation: str
    dropoffLocation: str
    status: ReservationStatus = Field(default=ReservationStatus.PENDING, validate_default=True)

    model_config = ConfigDict(use_enum_values=True)

    @field_validator("vehicleId")
    @classmethod
    def vehicle_id_format(cls, value):
        return check_vehicle_id(value)

class ReservationCreate(ReservationBase):
    pass

class ReservationUpdate(PartialUpdate):
    non_nullable: ClassVar[FrozenSet[str]] = frozenset(
        {"vehicleId", "vehicleName", "startDate", "endDate", "licenseNumber",
         "pickupLocation", "dropoffLocation", "status"}
    )

    vehicleId: Optional[str] = None
    vehicleName: Optional[str] = None
    startDate: Optional[datetime] = None
    endDate: Optional[datetime] = None
    licenseNumber: Optional[str] = None
    pickupLocation: Optional[str] = None
    dropoffLocation: Optional[str] = None
    status: Optional[ReservationStatus] = None

    model_config = ConfigDict(use_enum_values=True)

    @field_validator("vehicleId")
    @classmethod
    def vehicle_id_format(cls, value):
        return check_vehicle_id(value)

class ReservationOut(ReservationBase):
    id: str = Field(..., alias="_id")
    createdAt: datetime

    model_config = ConfigDict(from_attributes=True, populate_by_name=True, use_enum_values=True)
