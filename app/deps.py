from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from .database import SessionLocal
from .repositories import (
    HotelRepository,
    RoomTypeRepository,
    SqlAlchemyHotelRepository,
    SqlAlchemyRoomTypeRepository,
)


# ----- DB -----
def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# ----- Repositories -----
def get_hotel_repository(db: Session = Depends(get_db)) -> HotelRepository:
    return SqlAlchemyHotelRepository(db)


def get_room_type_repository(db: Session = Depends(get_db)) -> RoomTypeRepository:
    return SqlAlchemyRoomTypeRepository(db)
