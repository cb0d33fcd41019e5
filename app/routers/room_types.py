from typing import List

from fastapi import APIRouter, Depends, Request, Response, status

from .. import schemas, services
from ..deps import get_hotel_repository, get_room_type_repository
from ..repositories import HotelRepository, RoomTypeRepository

router = APIRouter(tags=["room types"])


@router.get("/hotels/{hotel_id}/room-types", response_model=List[schemas.RoomTypeOut])
def list_room_types(
    hotel_id: int,
    hotels: HotelRepository = Depends(get_hotel_repository),
    room_types: RoomTypeRepository = Depends(get_room_type_repository),
):
    """
    List the room types of a hotel. 404 if the hotel is missing or deleted.
    """
    found = services.list_room_types(hotels, room_types, hotel_id)
    return [schemas.RoomTypeOut.model_validate(rt) for rt in found]


@router.post(
    "/hotels/{hotel_id}/room-types",
    response_model=schemas.CreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_room_type(
    hotel_id: int,
    room_type_in: schemas.RoomTypeCreate,
    request: Request,
    response: Response,
    hotels: HotelRepository = Depends(get_hotel_repository),
    room_types: RoomTypeRepository = Depends(get_room_type_repository),
):
    """
    Add a room type to an existing hotel.
    """
    room_type_id = services.create_room_type(hotels, room_types, hotel_id, room_type_in)
    prefix = request.url.path.split("/hotels/")[0]
    response.headers["Location"] = f"{prefix}/room-types/{room_type_id}"
    return schemas.CreatedResponse(id=room_type_id)


@router.get("/room-types/{room_type_id}", response_model=schemas.RoomTypeOut)
def get_room_type(
    room_type_id: int,
    room_types: RoomTypeRepository = Depends(get_room_type_repository),
):
    return schemas.RoomTypeOut.model_validate(services.get_room_type(room_types, room_type_id))


@router.put(
    "/room-types/{room_type_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def update_room_type(
    room_type_id: int,
    room_type_update: schemas.RoomTypeUpdate,
    room_types: RoomTypeRepository = Depends(get_room_type_repository),
):
    """
    Update the details and features of a room type.
    """
    services.update_room_type(room_types, room_type_id, room_type_update)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch(
    "/room-types/{room_type_id}/price",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def update_room_type_price(
    room_type_id: int,
    price_update: schemas.RoomTypePriceUpdate,
    room_types: RoomTypeRepository = Depends(get_room_type_repository),
):
    services.update_room_type_price(room_types, room_type_id, price_update)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/room-types/{room_type_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def delete_room_type(
    room_type_id: int,
    room_types: RoomTypeRepository = Depends(get_room_type_repository),
):
    services.delete_room_type(room_types, room_type_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
