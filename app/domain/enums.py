from enum import Enum, IntEnum


class StarRating(IntEnum):
    """Hotel classification, persisted as its integer value."""

    ONE_STAR = 1
    TWO_STAR = 2
    THREE_STAR = 3
    FOUR_STAR = 4
    FIVE_STAR = 5


class HotelStatus(str, Enum):
    """Operational status of a hotel.

    Exposed by name on the wire, persisted as an integer code.
    """

    ACTIVE = "Active"
    INACTIVE = "Inactive"
    UNDER_MAINTENANCE = "UnderMaintenance"

    @property
    def code(self) -> int:
        return _STATUS_CODES[self]

    @classmethod
    def from_code(cls, code: int) -> "HotelStatus":
        for status, status_code in _STATUS_CODES.items():
            if status_code == code:
                return status
        raise ValueError(f"Unknown hotel status code: {code}")


_STATUS_CODES = {
    HotelStatus.ACTIVE: 1,
    HotelStatus.INACTIVE: 2,
    HotelStatus.UNDER_MAINTENANCE: 3,
}
