"""
Pytest configuration and shared fixtures for testing the Hotel Service API.
"""
import os

# Must be set before the app modules read their settings.
os.environ.setdefault("HOTEL_DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("HOTEL_RATE_LIMIT_ENABLED", "false")

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base
from app.main import app
from app.deps import get_db
from app.domain import Hotel, HotelStatus, RoomType, StarRating
from app.repositories import SqlAlchemyHotelRepository, SqlAlchemyRoomTypeRepository


# Use an in-memory SQLite database for testing
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """
    Create a fresh database session for each test.
    """
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """
    Create a test client with the test database.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def hotel_repo(db_session):
    return SqlAlchemyHotelRepository(db_session)


@pytest.fixture
def room_type_repo(db_session):
    return SqlAlchemyRoomTypeRepository(db_session)


def make_hotel(
    name="Hilton Paris",
    city="Paris",
    country="France",
    star_rating=StarRating.FIVE_STAR,
    status=HotelStatus.ACTIVE,
    description="",
):
    hotel = Hotel(
        name=name,
        description=description,
        star_rating=star_rating,
        city=city,
        country=country,
    )
    if status != HotelStatus.ACTIVE:
        hotel.change_status(status)
    return hotel


@pytest.fixture
def sample_hotel(hotel_repo):
    """
    Persist a single active five-star hotel.
    """
    hotel = make_hotel(description="Luxury hotel near the Eiffel Tower")
    hotel.update_address(
        street="18 Avenue de Suffren",
        city="Paris",
        state="Ile-de-France",
        country="France",
        zip_code="75015",
    )
    hotel.update_contact_info(
        email="reservations@hiltonparis.fr",
        phone="+33 1 44 38 56 00",
        website="https://www.hiltonparis.fr",
    )
    return hotel_repo.add(hotel)


@pytest.fixture
def sample_hotels(hotel_repo):
    """
    Persist several hotels spread over cities, ratings and statuses.
    """
    hotels = [
        make_hotel("Hilton Paris", "Paris", "France", StarRating.FIVE_STAR),
        make_hotel("Ibis Paris Nord", "paris", "France", StarRating.TWO_STAR),
        make_hotel(
            "Ritz London", "London", "United Kingdom", StarRating.FIVE_STAR,
            status=HotelStatus.INACTIVE,
        ),
        make_hotel(
            "Berlin Budget Inn", "Berlin", "Germany", StarRating.ONE_STAR,
            status=HotelStatus.UNDER_MAINTENANCE,
        ),
        make_hotel("Villeparisis Lodge", "Villeparisis", "France", StarRating.THREE_STAR),
    ]
    return [hotel_repo.add(hotel) for hotel in hotels]


@pytest.fixture
def sample_room_type(room_type_repo, sample_hotel):
    """
    Persist a room type belonging to ``sample_hotel``.
    """
    room_type = RoomType(
        hotel_id=sample_hotel.id,
        name="Deluxe Double",
        description="Double room with a view of the tower",
        max_occupancy=2,
        base_price=Decimal("250.00"),
        size=Decimal("32.50"),
        bed_type="King",
        view_type="City",
        has_balcony=True,
    )
    return room_type_repo.add(room_type)
