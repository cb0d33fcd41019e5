from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    false,
)

from .database import Base


class SoftDeleteMixin:
    # rows with this flag set are hidden from every ORM query, see database.py
    is_deleted = Column(Boolean, nullable=False, default=False, server_default=false(), index=True)


class Hotel(SoftDeleteMixin, Base):
    __tablename__ = "hotels"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), nullable=False, index=True)
    description = Column(String(1000), nullable=False, default="")
    star_rating = Column(Integer, nullable=False)
    status = Column(Integer, nullable=False)  # HotelStatus.code

    street = Column(String(200), nullable=False, default="")
    city = Column(String(100), nullable=False, index=True)
    state = Column(String(100), nullable=False, default="")
    country = Column(String(100), nullable=False)
    zip_code = Column(String(20), nullable=False, default="")

    email = Column(String(100), nullable=False, default="")
    phone = Column(String(20), nullable=False, default="")
    website = Column(String(200), nullable=False, default="")

    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=True)


class RoomType(SoftDeleteMixin, Base):
    __tablename__ = "room_types"

    id = Column(Integer, primary_key=True, index=True)
    # RESTRICT: a hotel row cannot be removed while room types reference it
    hotel_id = Column(
        Integer,
        ForeignKey("hotels.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    name = Column(String(100), nullable=False, index=True)
    description = Column(String(500), nullable=False, default="")
    max_occupancy = Column(Integer, nullable=False)
    base_price = Column(Numeric(18, 2, asdecimal=True), nullable=False)
    size = Column(Numeric(10, 2, asdecimal=True), nullable=False)  # square meters

    bed_type = Column(String(50), nullable=False, default="")
    view_type = Column(String(50), nullable=False, default="")
    has_balcony = Column(Boolean, nullable=False, default=False)
    has_kitchen = Column(Boolean, nullable=False, default=False)
    is_smoking_allowed = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=True)
