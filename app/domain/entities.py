"""
Domain entities for the hotel catalogue.

Entities expose their state through read-only properties and change it only
through named operations, each of which validates its input before touching
any field. Identity, timestamps and the soft-delete flag are kept in a
composed :class:`AuditInfo` rather than inherited from a base class.

Instances loaded from storage are built with ``_restore``, which trusts the
database and skips validation. Application code must use the constructors.
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Optional

from email_validator import EmailNotValidError, validate_email

from .enums import HotelStatus, StarRating
from .exceptions import DomainError, ValidationError


def utcnow() -> datetime:
    # naive UTC, which is what the database hands back on load
    return datetime.now(timezone.utc).replace(tzinfo=None)


@dataclass
class AuditInfo:
    """Identity, timestamps and soft-delete flag shared by every entity."""

    created_at: datetime = field(default_factory=utcnow)
    id: Optional[int] = None
    updated_at: Optional[datetime] = None
    is_deleted: bool = False

    def assign_id(self, id: int) -> None:
        if self.id is not None:
            raise DomainError(f"Identifier already assigned ({self.id})")
        self.id = id

    def touch(self) -> None:
        self.updated_at = utcnow()

    def mark_deleted(self) -> None:
        self.is_deleted = True
        self.touch()


# ----- validation helpers -----

def _required(value: Optional[str], message: str, max_length: int, label: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(message)
    return _bounded(value, max_length, label)


def _bounded(value: Optional[str], max_length: int, label: str) -> str:
    value = value or ""
    if not isinstance(value, str):
        raise ValidationError(f"{label} must be text")
    if len(value) > max_length:
        raise ValidationError(f"{label} must not exceed {max_length} characters")
    return value


def _star_rating(value) -> StarRating:
    if isinstance(value, bool):
        raise ValidationError("star rating must be between 1 and 5")
    try:
        return StarRating(value)
    except ValueError:
        raise ValidationError("star rating must be between 1 and 5") from None


def _status(value) -> HotelStatus:
    try:
        return HotelStatus(value)
    except ValueError:
        raise ValidationError(
            "status must be 'Active', 'Inactive', or 'UnderMaintenance'"
        ) from None


def _email(value: Optional[str]) -> str:
    value = _bounded(value, 100, "email")
    if value.strip():
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError:
            raise ValidationError("invalid email format") from None
    return value


CENT = Decimal("0.01")


def _decimal(value, label: str) -> Decimal:
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise ValidationError(f"{label} must be a number") from None
    if not amount.is_finite():
        raise ValidationError(f"{label} must be a number")
    # stored as NUMERIC(p, 2); anything finer would be rounded on write
    try:
        exact = amount == amount.quantize(CENT)
    except InvalidOperation:
        exact = False
    if not exact:
        raise ValidationError(f"{label} must have at most 2 decimal places")
    return amount


def _non_negative(value, label: str) -> Decimal:
    amount = _decimal(value, label)
    if amount < 0:
        raise ValidationError(f"{label} cannot be negative")
    return amount


def _positive_int(value, message: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValidationError(message)
    return value


class Hotel:
    """A property listing and the aggregate root for its room types."""

    def __init__(
        self,
        name: str,
        description: Optional[str],
        star_rating: StarRating,
        city: str,
        country: str,
    ) -> None:
        name = _required(name, "name required", 200, "name")
        city = _required(city, "city required", 100, "city")
        country = _required(country, "country required", 100, "country")
        description = _bounded(description, 1000, "description")
        star_rating = _star_rating(star_rating)

        self._audit = AuditInfo()
        self._name = name
        self._description = description
        self._star_rating = star_rating
        self._status = HotelStatus.ACTIVE
        self._street = ""
        self._city = city
        self._state = ""
        self._country = country
        self._zip_code = ""
        self._email = ""
        self._phone = ""
        self._website = ""

    @classmethod
    def _restore(
        cls,
        *,
        id: int,
        name: str,
        description: str,
        star_rating: int,
        status: HotelStatus,
        street: str,
        city: str,
        state: str,
        country: str,
        zip_code: str,
        email: str,
        phone: str,
        website: str,
        created_at: datetime,
        updated_at: Optional[datetime],
        is_deleted: bool,
    ) -> "Hotel":
        hotel = cls.__new__(cls)
        hotel._audit = AuditInfo(
            id=id, created_at=created_at, updated_at=updated_at, is_deleted=is_deleted
        )
        hotel._name = name
        hotel._description = description or ""
        hotel._star_rating = StarRating(star_rating)
        hotel._status = status
        hotel._street = street or ""
        hotel._city = city
        hotel._state = state or ""
        hotel._country = country
        hotel._zip_code = zip_code or ""
        hotel._email = email or ""
        hotel._phone = phone or ""
        hotel._website = website or ""
        return hotel

    def __repr__(self) -> str:
        return f"<Hotel id={self.id} name={self._name!r}>"

    # ----- identity / audit -----

    @property
    def id(self) -> Optional[int]:
        return self._audit.id

    @property
    def created_at(self) -> datetime:
        return self._audit.created_at

    @property
    def updated_at(self) -> Optional[datetime]:
        return self._audit.updated_at

    @property
    def is_deleted(self) -> bool:
        return self._audit.is_deleted

    def _assign_id(self, id: int) -> None:
        self._audit.assign_id(id)

    def mark_as_deleted(self) -> None:
        self._audit.mark_deleted()

    def update_timestamp(self) -> None:
        self._audit.touch()

    # ----- attributes -----

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @property
    def star_rating(self) -> StarRating:
        return self._star_rating

    @property
    def status(self) -> HotelStatus:
        return self._status

    @property
    def street(self) -> str:
        return self._street

    @property
    def city(self) -> str:
        return self._city

    @property
    def state(self) -> str:
        return self._state

    @property
    def country(self) -> str:
        return self._country

    @property
    def zip_code(self) -> str:
        return self._zip_code

    @property
    def email(self) -> str:
        return self._email

    @property
    def phone(self) -> str:
        return self._phone

    @property
    def website(self) -> str:
        return self._website

    # ----- mutations -----

    def update_details(
        self, name: str, description: Optional[str], star_rating: StarRating
    ) -> None:
        name = _required(name, "name required", 200, "name")
        description = _bounded(description, 1000, "description")
        star_rating = _star_rating(star_rating)

        self._name = name
        self._description = description
        self._star_rating = star_rating
        self.update_timestamp()

    def update_address(
        self,
        street: Optional[str],
        city: str,
        state: Optional[str],
        country: str,
        zip_code: Optional[str],
    ) -> None:
        city = _required(city, "city required", 100, "city")
        country = _required(country, "country required", 100, "country")
        street = _bounded(street, 200, "street")
        state = _bounded(state, 100, "state")
        zip_code = _bounded(zip_code, 20, "zip code")

        self._street = street
        self._city = city
        self._state = state
        self._country = country
        self._zip_code = zip_code
        self.update_timestamp()

    def update_contact_info(
        self, email: Optional[str], phone: Optional[str], website: Optional[str]
    ) -> None:
        email = _email(email)
        phone = _bounded(phone, 20, "phone")
        website = _bounded(website, 200, "website")

        self._email = email
        self._phone = phone
        self._website = website
        self.update_timestamp()

    def change_status(self, status: HotelStatus) -> None:
        # no transition rules: any defined status may follow any other
        self._status = _status(status)
        self.update_timestamp()


class RoomType:
    """A bookable room category belonging to exactly one hotel."""

    def __init__(
        self,
        hotel_id: int,
        name: str,
        description: Optional[str],
        max_occupancy: int,
        base_price: Decimal,
        size: Decimal,
        bed_type: Optional[str] = "",
        view_type: Optional[str] = "",
        has_balcony: bool = False,
        has_kitchen: bool = False,
        is_smoking_allowed: bool = False,
    ) -> None:
        hotel_id = _positive_int(hotel_id, "hotel id required")
        name = _required(name, "name required", 100, "name")
        max_occupancy = _positive_int(
            max_occupancy, "max occupancy must be greater than zero"
        )
        base_price = _non_negative(base_price, "base price")
        size = _non_negative(size, "size")
        description = _bounded(description, 500, "description")
        bed_type = _bounded(bed_type, 50, "bed type")
        view_type = _bounded(view_type, 50, "view type")

        self._audit = AuditInfo()
        self._hotel_id = hotel_id
        self._name = name
        self._description = description
        self._max_occupancy = max_occupancy
        self._base_price = base_price
        self._size = size
        self._bed_type = bed_type
        self._view_type = view_type
        self._has_balcony = bool(has_balcony)
        self._has_kitchen = bool(has_kitchen)
        self._is_smoking_allowed = bool(is_smoking_allowed)

    @classmethod
    def _restore(
        cls,
        *,
        id: int,
        hotel_id: int,
        name: str,
        description: str,
        max_occupancy: int,
        base_price: Decimal,
        size: Decimal,
        bed_type: str,
        view_type: str,
        has_balcony: bool,
        has_kitchen: bool,
        is_smoking_allowed: bool,
        created_at: datetime,
        updated_at: Optional[datetime],
        is_deleted: bool,
    ) -> "RoomType":
        room_type = cls.__new__(cls)
        room_type._audit = AuditInfo(
            id=id, created_at=created_at, updated_at=updated_at, is_deleted=is_deleted
        )
        room_type._hotel_id = hotel_id
        room_type._name = name
        room_type._description = description or ""
        room_type._max_occupancy = max_occupancy
        room_type._base_price = Decimal(str(base_price))
        room_type._size = Decimal(str(size))
        room_type._bed_type = bed_type or ""
        room_type._view_type = view_type or ""
        room_type._has_balcony = bool(has_balcony)
        room_type._has_kitchen = bool(has_kitchen)
        room_type._is_smoking_allowed = bool(is_smoking_allowed)
        return room_type

    def __repr__(self) -> str:
        return f"<RoomType id={self.id} hotel_id={self._hotel_id} name={self._name!r}>"

    @property
    def id(self) -> Optional[int]:
        return self._audit.id

    @property
    def created_at(self) -> datetime:
        return self._audit.created_at

    @property
    def updated_at(self) -> Optional[datetime]:
        return self._audit.updated_at

    @property
    def is_deleted(self) -> bool:
        return self._audit.is_deleted

    def _assign_id(self, id: int) -> None:
        self._audit.assign_id(id)

    def mark_as_deleted(self) -> None:
        self._audit.mark_deleted()

    def update_timestamp(self) -> None:
        self._audit.touch()

    @property
    def hotel_id(self) -> int:
        return self._hotel_id

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @property
    def max_occupancy(self) -> int:
        return self._max_occupancy

    @property
    def base_price(self) -> Decimal:
        return self._base_price

    @property
    def size(self) -> Decimal:
        """Floor area in square meters."""
        return self._size

    @property
    def bed_type(self) -> str:
        return self._bed_type

    @property
    def view_type(self) -> str:
        return self._view_type

    @property
    def has_balcony(self) -> bool:
        return self._has_balcony

    @property
    def has_kitchen(self) -> bool:
        return self._has_kitchen

    @property
    def is_smoking_allowed(self) -> bool:
        return self._is_smoking_allowed

    def update_details(
        self,
        name: str,
        description: Optional[str],
        max_occupancy: int,
        base_price: Decimal,
    ) -> None:
        name = _required(name, "name required", 100, "name")
        max_occupancy = _positive_int(
            max_occupancy, "max occupancy must be greater than zero"
        )
        base_price = _non_negative(base_price, "base price")
        description = _bounded(description, 500, "description")

        self._name = name
        self._description = description
        self._max_occupancy = max_occupancy
        self._base_price = base_price
        self.update_timestamp()

    def update_price(self, new_price: Decimal) -> None:
        self._base_price = _non_negative(new_price, "price")
        self.update_timestamp()

    def update_features(
        self,
        bed_type: Optional[str],
        view_type: Optional[str],
        has_balcony: bool,
        has_kitchen: bool,
        is_smoking_allowed: bool,
    ) -> None:
        bed_type = _bounded(bed_type, 50, "bed type")
        view_type = _bounded(view_type, 50, "view type")

        self._bed_type = bed_type
        self._view_type = view_type
        self._has_balcony = bool(has_balcony)
        self._has_kitchen = bool(has_kitchen)
        self._is_smoking_allowed = bool(is_smoking_allowed)
        self.update_timestamp()
