"""Pydantic schemas for the travel catalog (buses, hotels, trains).

Learn: Catalog rows have no required fields beyond the id the database
assigns, so every *Write schema is all-optional. The same schema is used
for create and full replace.
"""

from datetime import date, time
from typing import Optional

from pydantic import BaseModel, Field


# ─── Buses ───────────────────────────────────────────────

class BusWrite(BaseModel):
    bus_name: Optional[str] = Field(None, max_length=200)
    route: Optional[str] = Field(None, max_length=500)
    bus_type: Optional[str] = Field(None, max_length=100)
    capacity: Optional[int] = Field(None, ge=0)


class BusRead(BusWrite):
    id: int

    model_config = {"from_attributes": True}


# ─── Hotels ──────────────────────────────────────────────

class HotelWrite(BaseModel):
    name: Optional[str] = Field(None, max_length=200)
    location: Optional[str] = Field(None, max_length=200)
    price: Optional[float] = Field(None, ge=0)
    rating: Optional[float] = Field(None, ge=0, le=5)


class HotelRead(HotelWrite):
    id: int

    model_config = {"from_attributes": True}


# ─── Trains ──────────────────────────────────────────────

class TrainWrite(BaseModel):
    train_name: Optional[str] = Field(None, max_length=200)
    train_number: Optional[str] = Field(None, max_length=50)
    source_station: Optional[str] = Field(None, max_length=200)
    destination_station: Optional[str] = Field(None, max_length=200)
    departure_time: Optional[time] = None
    arrival_time: Optional[time] = None
    travel_date: Optional[date] = None
    price: Optional[float] = Field(None, ge=0)
    seats_available: Optional[int] = Field(None, ge=0)


class TrainRead(TrainWrite):
    id: int

    model_config = {"from_attributes": True}
