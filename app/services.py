"""
Command and query handlers.

Each handler takes a repository plus a command/query value, drives the domain
entities and returns a plain result. Domain errors propagate to the caller.
"""
import logging
from typing import List, Tuple

from . import schemas
from .domain import Hotel, HotelNotFoundError, RoomType, RoomTypeNotFoundError
from .repositories import HotelRepository, RoomTypeRepository

logger = logging.getLogger(__name__)


# ============== Hotels ==============

def create_hotel(hotels: HotelRepository, command: schemas.HotelCreate) -> int:
    hotel = Hotel(
        name=command.name,
        description=command.description,
        star_rating=command.star_rating,
        city=command.city,
        country=command.country,
    )
    hotel.update_address(
        street=command.street,
        city=command.city,
        state=command.state,
        country=command.country,
        zip_code=command.zip_code,
    )
    hotel.update_contact_info(
        email=command.email,
        phone=command.phone,
        website=command.website,
    )
    created = hotels.add(hotel)
    logger.info("Created hotel %d (%s)", created.id, created.name)
    return created.id


def get_hotel(hotels: HotelRepository, hotel_id: int) -> Hotel:
    hotel = hotels.get_by_id(hotel_id)
    if hotel is None:
        raise HotelNotFoundError(hotel_id)
    return hotel


def list_hotels(hotels: HotelRepository) -> List[Hotel]:
    return hotels.get_all()


def search_hotels(
    hotels: HotelRepository, query: schemas.HotelSearch
) -> Tuple[List[Hotel], int]:
    return hotels.search(
        city=query.city,
        country=query.country,
        min_star_rating=query.min_star_rating,
        status=query.status,
        page_number=query.page_number,
        page_size=query.page_size,
    )


def update_hotel(hotels: HotelRepository, command: schemas.HotelUpdate) -> None:
    """
    Apply a full update to an existing hotel.

    The hotel is fetched first so a missing or soft-deleted id is reported as
    not found; the repository write itself does no existence check.
    """
    hotel = get_hotel(hotels, command.id)
    hotel.update_details(
        name=command.name,
        description=command.description,
        star_rating=command.star_rating,
    )
    hotel.update_address(
        street=command.street,
        city=command.city,
        state=command.state,
        country=command.country,
        zip_code=command.zip_code,
    )
    hotel.update_contact_info(
        email=command.email,
        phone=command.phone,
        website=command.website,
    )
    hotel.change_status(command.status)
    hotels.update(hotel)
    logger.info("Updated hotel %d", hotel.id)


def delete_hotel(hotels: HotelRepository, hotel_id: int) -> None:
    hotels.delete(hotel_id)
    logger.info("Soft-deleted hotel %d", hotel_id)


# ============== Room types ==============

def create_room_type(
    hotels: HotelRepository,
    room_types: RoomTypeRepository,
    hotel_id: int,
    command: schemas.RoomTypeCreate,
) -> int:
    # the owning hotel must exist and be visible
    get_hotel(hotels, hotel_id)

    room_type = RoomType(
        hotel_id=hotel_id,
        name=command.name,
        description=command.description,
        max_occupancy=command.max_occupancy,
        base_price=command.base_price,
        size=command.size,
        bed_type=command.bed_type,
        view_type=command.view_type,
        has_balcony=command.has_balcony,
        has_kitchen=command.has_kitchen,
        is_smoking_allowed=command.is_smoking_allowed,
    )
    created = room_types.add(room_type)
    logger.info("Created room type %d for hotel %d", created.id, hotel_id)
    return created.id


def get_room_type(room_types: RoomTypeRepository, room_type_id: int) -> RoomType:
    room_type = room_types.get_by_id(room_type_id)
    if room_type is None:
        raise RoomTypeNotFoundError(room_type_id)
    return room_type


def list_room_types(
    hotels: HotelRepository, room_types: RoomTypeRepository, hotel_id: int
) -> List[RoomType]:
    get_hotel(hotels, hotel_id)
    return room_types.list_for_hotel(hotel_id)


def update_room_type(
    room_types: RoomTypeRepository,
    room_type_id: int,
    command: schemas.RoomTypeUpdate,
) -> None:
    room_type = get_room_type(room_types, room_type_id)
    room_type.update_details(
        name=command.name,
        description=command.description,
        max_occupancy=command.max_occupancy,
        base_price=command.base_price,
    )
    room_type.update_features(
        bed_type=command.bed_type,
        view_type=command.view_type,
        has_balcony=command.has_balcony,
        has_kitchen=command.has_kitchen,
        is_smoking_allowed=command.is_smoking_allowed,
    )
    room_types.update(room_type)
    logger.info("Updated room type %d", room_type_id)


def update_room_type_price(
    room_types: RoomTypeRepository,
    room_type_id: int,
    command: schemas.RoomTypePriceUpdate,
) -> None:
    room_type = get_room_type(room_types, room_type_id)
    room_type.update_price(command.base_price)
    room_types.update(room_type)
    logger.info("Repriced room type %d to %s", room_type_id, command.base_price)


def delete_room_type(room_types: RoomTypeRepository, room_type_id: int) -> None:
    room_types.delete(room_type_id)
    logger.info("Soft-deleted room type %d", room_type_id)
