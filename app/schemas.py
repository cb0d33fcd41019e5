from datetime import datetime
from decimal import Decimal
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from .domain import HotelStatus, StarRating
from .repositories import DEFAULT_PAGE_SIZE


def _not_blank(value: str, label: str) -> str:
    if not value or not value.strip():
        raise ValueError(f"{label} is required")
    return value


# ----- Hotels -----
class HotelBase(BaseModel):
    name: str = Field(..., max_length=200)
    description: str = Field("", max_length=1000)
    star_rating: StarRating

    # Address
    street: str = Field("", max_length=200)
    city: str = Field(..., max_length=100)
    state: str = Field("", max_length=100)
    country: str = Field(..., max_length=100)
    zip_code: str = Field("", max_length=20)

    # Contact
    email: Union[EmailStr, Literal[""]] = ""
    phone: str = Field("", max_length=20)
    website: str = Field("", max_length=200)

    @field_validator("name")
    @classmethod
    def name_required(cls, v: str) -> str:
        return _not_blank(v, "Hotel name")

    @field_validator("city")
    @classmethod
    def city_required(cls, v: str) -> str:
        return _not_blank(v, "City")

    @field_validator("country")
    @classmethod
    def country_required(cls, v: str) -> str:
        return _not_blank(v, "Country")


class HotelCreate(HotelBase):
    pass


class HotelUpdate(HotelBase):
    id: int = Field(..., gt=0)
    status: HotelStatus


class HotelOut(BaseModel):
    id: int
    name: str
    description: str
    star_rating: StarRating
    status: HotelStatus

    street: str
    city: str
    state: str
    country: str
    zip_code: str

    email: str
    phone: str
    website: str

    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class HotelSearch(BaseModel):
    city: Optional[str] = None
    country: Optional[str] = None
    min_star_rating: Optional[StarRating] = None
    status: Optional[HotelStatus] = None
    page_number: int = 1
    page_size: int = DEFAULT_PAGE_SIZE


class HotelPage(BaseModel):
    items: List[HotelOut]
    total_count: int
    page_number: int
    page_size: int


# ----- Room types -----
class RoomTypeFeatures(BaseModel):
    bed_type: str = Field("", max_length=50)
    view_type: str = Field("", max_length=50)
    has_balcony: bool = False
    has_kitchen: bool = False
    is_smoking_allowed: bool = False


class RoomTypeCreate(RoomTypeFeatures):
    name: str = Field(..., max_length=100)
    description: str = Field("", max_length=500)
    max_occupancy: int = Field(..., gt=0)
    base_price: Decimal = Field(..., ge=0, max_digits=18, decimal_places=2)
    size: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)

    @field_validator("name")
    @classmethod
    def name_required(cls, v: str) -> str:
        return _not_blank(v, "Room type name")


class RoomTypeUpdate(RoomTypeFeatures):
    name: str = Field(..., max_length=100)
    description: str = Field("", max_length=500)
    max_occupancy: int = Field(..., gt=0)
    base_price: Decimal = Field(..., ge=0, max_digits=18, decimal_places=2)

    @field_validator("name")
    @classmethod
    def name_required(cls, v: str) -> str:
        return _not_blank(v, "Room type name")


class RoomTypePriceUpdate(BaseModel):
    base_price: Decimal = Field(..., ge=0, max_digits=18, decimal_places=2)


class RoomTypeOut(BaseModel):
    id: int
    hotel_id: int
    name: str
    description: str
    max_occupancy: int
    base_price: Decimal
    size: Decimal
    bed_type: str
    view_type: str
    has_balcony: bool
    has_kitchen: bool
    is_smoking_allowed: bool
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


# ----- Creation responses -----
class CreatedResponse(BaseModel):
    id: int
