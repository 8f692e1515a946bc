# rental_api/schemas/vehicle.py
from datetime import datetime
from typing import ClassVar, FrozenSet, List, Optional
from pydantic import BaseModel, Field, ConfigDict
from .common import PartialUpdate

class VehicleSpecs(BaseModel):
    transmission: str
    fuel: str
    power: Optional[str] = None
    seats: int = 5
    consumption: str
    luggage: Optional[str] = None

class VehicleBase(BaseModel):
    name: str
    image: str = Field(..., description="Primary image URL, usually /uploads/<file>")
    gallery: List[str] = Field(default_factory=list)
    price: str = Field(..., description="Display price, kept as text")
    features: List[str] = Field(default_factory=list)
    description: str
    rating: float = 5
    isPopular: bool = False
    specs: VehicleSpecs

class VehicleCreate(VehicleBase):
    pass

class VehicleUpdate(PartialUpdate):
    non_nullable: ClassVar[FrozenSet[str]] = frozenset(
        {"name", "image", "gallery", "price", "features", "description", "rating", "isPopular", "specs"}
    )

    name: Optional[str] = None
    image: Optional[str] = None
    gallery: Optional[List[str]] = None
    price: Optional[str] = None
    features: Optional[List[str]] = None
    description: Optional[str] = None
    rating: Optional[float] = None
    isPopular: Optional[bool] = None
    specs: Optional[VehicleSpecs] = None

class VehicleOut(VehicleBase):
    id: str = Field(..., alias="_id")
    createdAt: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)
