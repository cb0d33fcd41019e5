class DomainError(Exception):
    """Base class for errors raised by the domain layer."""

    pass


class ValidationError(DomainError):
    """An entity invariant would be violated."""

    pass


class NotFoundError(DomainError):
    """The addressed record does not exist or is soft-deleted."""

    pass


class HotelNotFoundError(NotFoundError):
    def __init__(self, hotel_id: int) -> None:
        super().__init__(f"Hotel with ID {hotel_id} was not found.")
        self.hotel_id = hotel_id


class RoomTypeNotFoundError(NotFoundError):
    def __init__(self, room_type_id: int) -> None:
        super().__init__(f"Room type with ID {room_type_id} was not found.")
        self.room_type_id = room_type_id
