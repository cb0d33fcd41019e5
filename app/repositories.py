"""
Repository contracts and their SQLAlchemy implementations.

Repositories translate between domain entities and ORM rows. Reads never see
soft-deleted rows; that filter is installed once on the session (see
``database.py``) rather than repeated in each query here.
"""
import logging
from abc import ABC, abstractmethod
from typing import Generic, List, Optional, Tuple, TypeVar

from sqlalchemy import func
from sqlalchemy.orm import Session

from . import models
from .domain import (
    DomainError,
    Hotel,
    HotelNotFoundError,
    HotelStatus,
    RoomType,
    RoomTypeNotFoundError,
    StarRating,
    ValidationError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


class Repository(ABC, Generic[T]):
    """Persistence contract shared by every aggregate."""

    @abstractmethod
    def get_by_id(self, id: int) -> Optional[T]:
        """Return the entity, or None if it is missing or soft-deleted."""
        raise NotImplementedError

    @abstractmethod
    def add(self, entity: T) -> T:
        """Persist a new entity and assign its identifier."""
        raise NotImplementedError

    @abstractmethod
    def update(self, entity: T) -> None:
        """Write an already-identified entity. No existence check is made."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, id: int) -> None:
        """Soft-delete the entity, raising a NotFoundError if it is not visible."""
        raise NotImplementedError


class HotelRepository(Repository[Hotel]):
    @abstractmethod
    def get_all(self) -> List[Hotel]:
        raise NotImplementedError

    @abstractmethod
    def search(
        self,
        city: Optional[str] = None,
        country: Optional[str] = None,
        min_star_rating: Optional[StarRating] = None,
        status: Optional[HotelStatus] = None,
        page_number: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> Tuple[List[Hotel], int]:
        raise NotImplementedError


class RoomTypeRepository(Repository[RoomType]):
    @abstractmethod
    def list_for_hotel(self, hotel_id: int) -> List[RoomType]:
        raise NotImplementedError


# ----- row <-> entity mapping -----

def _hotel_columns(hotel: Hotel) -> dict:
    return {
        "name": hotel.name,
        "description": hotel.description,
        "star_rating": int(hotel.star_rating),
        "status": hotel.status.code,
        "street": hotel.street,
        "city": hotel.city,
        "state": hotel.state,
        "country": hotel.country,
        "zip_code": hotel.zip_code,
        "email": hotel.email,
        "phone": hotel.phone,
        "website": hotel.website,
        "created_at": hotel.created_at,
        "updated_at": hotel.updated_at,
        "is_deleted": hotel.is_deleted,
    }


def _hotel_from_row(row: models.Hotel) -> Hotel:
    return Hotel._restore(
        id=row.id,
        name=row.name,
        description=row.description,
        star_rating=row.star_rating,
        status=HotelStatus.from_code(row.status),
        street=row.street,
        city=row.city,
        state=row.state,
        country=row.country,
        zip_code=row.zip_code,
        email=row.email,
        phone=row.phone,
        website=row.website,
        created_at=row.created_at,
        updated_at=row.updated_at,
        is_deleted=row.is_deleted,
    )


def _room_type_columns(room_type: RoomType) -> dict:
    return {
        "hotel_id": room_type.hotel_id,
        "name": room_type.name,
        "description": room_type.description,
        "max_occupancy": room_type.max_occupancy,
        "base_price": room_type.base_price,
        "size": room_type.size,
        "bed_type": room_type.bed_type,
        "view_type": room_type.view_type,
        "has_balcony": room_type.has_balcony,
        "has_kitchen": room_type.has_kitchen,
        "is_smoking_allowed": room_type.is_smoking_allowed,
        "created_at": room_type.created_at,
        "updated_at": room_type.updated_at,
        "is_deleted": room_type.is_deleted,
    }


def _room_type_from_row(row: models.RoomType) -> RoomType:
    return RoomType._restore(
        id=row.id,
        hotel_id=row.hotel_id,
        name=row.name,
        description=row.description,
        max_occupancy=row.max_occupancy,
        base_price=row.base_price,
        size=row.size,
        bed_type=row.bed_type,
        view_type=row.view_type,
        has_balcony=row.has_balcony,
        has_kitchen=row.has_kitchen,
        is_smoking_allowed=row.is_smoking_allowed,
        created_at=row.created_at,
        updated_at=row.updated_at,
        is_deleted=row.is_deleted,
    )


class _SqlAlchemyRepository:
    def __init__(self, db: Session):
        self.db = db

    def _commit(self) -> None:
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise


class SqlAlchemyHotelRepository(_SqlAlchemyRepository, HotelRepository):
    def get_by_id(self, hotel_id: int) -> Optional[Hotel]:
        row = self.db.query(models.Hotel).filter(models.Hotel.id == hotel_id).first()
        return _hotel_from_row(row) if row else None

    def get_all(self) -> List[Hotel]:
        rows = self.db.query(models.Hotel).order_by(models.Hotel.id).all()
        return [_hotel_from_row(row) for row in rows]

    def add(self, hotel: Hotel) -> Hotel:
        if hotel.id is not None:
            raise DomainError(f"Hotel {hotel.id} is already persisted")
        row = models.Hotel(**_hotel_columns(hotel))
        self.db.add(row)
        self._commit()
        self.db.refresh(row)
        hotel._assign_id(row.id)
        return hotel

    def update(self, hotel: Hotel) -> None:
        # last writer wins; a missing id affects no rows and is not reported
        self.db.query(models.Hotel).filter(models.Hotel.id == hotel.id).update(
            _hotel_columns(hotel), synchronize_session=False
        )
        self._commit()

    def delete(self, hotel_id: int) -> None:
        hotel = self.get_by_id(hotel_id)
        if hotel is None:
            raise HotelNotFoundError(hotel_id)
        hotel.mark_as_deleted()
        self.update(hotel)

    def search(
        self,
        city: Optional[str] = None,
        country: Optional[str] = None,
        min_star_rating: Optional[StarRating] = None,
        status: Optional[HotelStatus] = None,
        page_number: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> Tuple[List[Hotel], int]:
        """
        Filter non-deleted hotels and return one page plus the total match count.

        ``city`` and ``country`` match as case-insensitive substrings,
        ``min_star_rating`` as a lower bound and ``status`` exactly. Empty
        strings are treated as absent filters. ``page_size`` is clamped to
        ``MAX_PAGE_SIZE``.
        """
        if page_number < 1:
            raise ValidationError("page number must be at least 1")
        if page_size < 1:
            raise ValidationError("page size must be at least 1")
        page_size = min(page_size, MAX_PAGE_SIZE)

        query = self.db.query(models.Hotel)
        if city:
            query = query.filter(
                func.lower(models.Hotel.city).contains(city.lower(), autoescape=True)
            )
        if country:
            query = query.filter(
                func.lower(models.Hotel.country).contains(country.lower(), autoescape=True)
            )
        if min_star_rating is not None:
            query = query.filter(models.Hotel.star_rating >= int(min_star_rating))
        if status is not None:
            query = query.filter(models.Hotel.status == HotelStatus(status).code)

        total_count = query.count()
        rows = (
            query.order_by(models.Hotel.id)
            .offset((page_number - 1) * page_size)
            .limit(page_size)
            .all()
        )
        logger.debug(
            "Hotel search matched %d rows (page %d, size %d)",
            total_count, page_number, page_size,
        )
        return [_hotel_from_row(row) for row in rows], total_count


class SqlAlchemyRoomTypeRepository(_SqlAlchemyRepository, RoomTypeRepository):
    def get_by_id(self, room_type_id: int) -> Optional[RoomType]:
        row = (
            self.db.query(models.RoomType)
            .filter(models.RoomType.id == room_type_id)
            .first()
        )
        return _room_type_from_row(row) if row else None

    def list_for_hotel(self, hotel_id: int) -> List[RoomType]:
        rows = (
            self.db.query(models.RoomType)
            .filter(models.RoomType.hotel_id == hotel_id)
            .order_by(models.RoomType.id)
            .all()
        )
        return [_room_type_from_row(row) for row in rows]

    def add(self, room_type: RoomType) -> RoomType:
        if room_type.id is not None:
            raise DomainError(f"Room type {room_type.id} is already persisted")
        row = models.RoomType(**_room_type_columns(room_type))
        self.db.add(row)
        self._commit()
        self.db.refresh(row)
        room_type._assign_id(row.id)
        return room_type

    def update(self, room_type: RoomType) -> None:
        self.db.query(models.RoomType).filter(
            models.RoomType.id == room_type.id
        ).update(_room_type_columns(room_type), synchronize_session=False)
        self._commit()

    def delete(self, room_type_id: int) -> None:
        room_type = self.get_by_id(room_type_id)
        if room_type is None:
            raise RoomTypeNotFoundError(room_type_id)
        room_type.mark_as_deleted()
        self.update(room_type)
