from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status

from .. import schemas, services
from ..deps import get_hotel_repository
from ..domain import HotelStatus
from ..repositories import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, HotelRepository

router = APIRouter(prefix="/hotels", tags=["hotels"])


@router.get("", response_model=List[schemas.HotelOut])
def list_hotels(hotels: HotelRepository = Depends(get_hotel_repository)):
    """
    List every hotel that has not been deleted.
    """
    return [schemas.HotelOut.model_validate(h) for h in services.list_hotels(hotels)]


@router.get("/search", response_model=schemas.HotelPage)
def search_hotels(
    city: Optional[str] = None,
    country: Optional[str] = None,
    min_star_rating: Optional[int] = Query(None, ge=1, le=5),
    status: Optional[HotelStatus] = None,
    page_number: int = 1,
    page_size: int = DEFAULT_PAGE_SIZE,
    hotels: HotelRepository = Depends(get_hotel_repository),
):
    """
    Search hotels with optional filters and pagination.

    Parameters
    ----------
    city : str, optional
        Case-insensitive substring of the city.
    country : str, optional
        Case-insensitive substring of the country.
    min_star_rating : int, optional
        Only hotels rated at least this many stars.
    status : HotelStatus, optional
        Exact status match.
    page_number : int
        1-based page index.
    page_size : int
        Results per page, capped at 100.
    """
    query = schemas.HotelSearch(
        city=city,
        country=country,
        min_star_rating=min_star_rating,
        status=status,
        page_number=page_number,
        page_size=page_size,
    )
    found, total_count = services.search_hotels(hotels, query)
    return schemas.HotelPage(
        items=[schemas.HotelOut.model_validate(h) for h in found],
        total_count=total_count,
        page_number=page_number,
        page_size=min(page_size, MAX_PAGE_SIZE),
    )


@router.get("/{hotel_id}", response_model=schemas.HotelOut)
def get_hotel(hotel_id: int, hotels: HotelRepository = Depends(get_hotel_repository)):
    """
    Retrieve a single hotel by its ID.

    Raises a 404 error if the hotel does not exist or has been deleted.
    """
    return schemas.HotelOut.model_validate(services.get_hotel(hotels, hotel_id))


@router.post("", response_model=schemas.CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_hotel(
    hotel_in: schemas.HotelCreate,
    request: Request,
    response: Response,
    hotels: HotelRepository = Depends(get_hotel_repository),
):
    """
    Create a new hotel.

    New hotels start in the ``Active`` status. The response carries the new
    ID and a ``Location`` header pointing at the created resource.
    """
    hotel_id = services.create_hotel(hotels, hotel_in)
    response.headers["Location"] = f"{request.url.path.rstrip('/')}/{hotel_id}"
    return schemas.CreatedResponse(id=hotel_id)


@router.put("/{hotel_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def update_hotel(
    hotel_id: int,
    hotel_update: schemas.HotelUpdate,
    hotels: HotelRepository = Depends(get_hotel_repository),
):
    """
    Replace the details, address, contact info and status of a hotel.

    The ID in the body must match the one in the path.
    """
    if hotel_update.id != hotel_id:
        raise HTTPException(status_code=400, detail="Hotel ID mismatch")
    services.update_hotel(hotels, hotel_update)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{hotel_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_hotel(hotel_id: int, hotels: HotelRepository = Depends(get_hotel_repository)):
    """
    Soft-delete a hotel. The record is kept but no longer returned by any read.
    """
    services.delete_hotel(hotels, hotel_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
