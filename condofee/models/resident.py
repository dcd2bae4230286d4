from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class VehicleCategory(str, Enum):
    CAR = "car"
    MOTORBIKE = "motorbike"
    BICYCLE = "bicycle"
    OTHER = "other"


class Vehicle(BaseModel):
    id: int | None = None
    apartment_id: int | None = None
    plate: str = ""
    category: VehicleCategory = VehicleCategory.OTHER


class Apartment(BaseModel):
    id: int | None = None
    number: str
    floor: int = 0
    area: int = Field(gt=0)  # square metres, rounded
    vehicles: list[Vehicle] = []


class Resident(BaseModel):
    id: int | None = None
    uuid: str = ""
    name: str
    gender: str = ""
    phone: str = ""
    apartment_id: int
    apartment: Apartment | None = None
    created_at: datetime | None = None
