from .entities import AuditInfo, Hotel, RoomType
from .enums import HotelStatus, StarRating
from .exceptions import (
    DomainError,
    HotelNotFoundError,
    NotFoundError,
    RoomTypeNotFoundError,
    ValidationError,
)

__all__ = [
    "AuditInfo",
    "Hotel",
    "RoomType",
    "HotelStatus",
    "StarRating",
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "HotelNotFoundError",
    "RoomTypeNotFoundError",
]
