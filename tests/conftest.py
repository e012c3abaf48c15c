"""
Test configuration and fixtures for the LightBnB data-access layer.
Provides an in-memory database per test, repository fixtures and data factories.
"""

import pytest
from datetime import date, timedelta
from typing import AsyncGenerator, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.pool import StaticPool

from lightbnb.database import Database
from lightbnb.models.user import User
from lightbnb.models.property import Property
from lightbnb.models.reservation import Reservation
from lightbnb.models.review import PropertyReview
from lightbnb.repositories.user import UserRepository
from lightbnb.repositories.property import PropertyRepository
from lightbnb.repositories.reservation import ReservationRepository


TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def database() -> AsyncGenerator[Database, None]:
    """Open a fresh in-memory database with all tables created."""
    db = Database(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False}
    )
    db.open()
    await db.create_tables()
    yield db
    await db.drop_tables()
    await db.close()


@pytest.fixture
async def db_session(database: Database) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async with database.session() as session:
        yield session


# Repository fixtures
@pytest.fixture
def user_repository(db_session: AsyncSession) -> UserRepository:
    """Create a user repository instance."""
    return UserRepository(db_session)


@pytest.fixture
def property_repository(db_session: AsyncSession) -> PropertyRepository:
    """Create a property repository instance."""
    return PropertyRepository(db_session)


@pytest.fixture
def reservation_repository(db_session: AsyncSession) -> ReservationRepository:
    """Create a reservation repository instance."""
    return ReservationRepository(db_session)


# Test data factories
class UserFactory:
    """Factory for creating test users."""

    _counter = 0

    @classmethod
    def create_user_data(
        cls,
        name: str = "Test User",
        email: Optional[str] = None,
        password: str = "password"
    ) -> dict:
        """Create user data dictionary."""
        cls._counter += 1
        return {
            "name": name,
            "email": email or f"user{cls._counter}@example.com",
            "password": password
        }

    @staticmethod
    async def create_user(user_repo: UserRepository, **kwargs) -> User:
        """Create a test user in the database."""
        return await user_repo.create_user(UserFactory.create_user_data(**kwargs))


class PropertyFactory:
    """Factory for creating test properties."""

    @staticmethod
    def create_property_data(
        owner_id: Optional[int] = None,
        title: str = "Speed lamp",
        city: str = "Vancouver",
        cost_per_night: int = 150,
        **extra
    ) -> dict:
        """Create property data dictionary."""
        return {
            "owner_id": owner_id,
            "title": title,
            "description": "description",
            "thumbnail_photo_url": "https://images.example.com/thumb.jpg",
            "cover_photo_url": "https://images.example.com/cover.jpg",
            "cost_per_night": cost_per_night,
            "parking_spaces": 1,
            "number_of_bathrooms": 1,
            "number_of_bedrooms": 2,
            "country": "Canada",
            "street": "536 Namsub Highway",
            "city": city,
            "province": "British Columbia",
            "post_code": "V5K 0A1",
            **extra
        }

    @staticmethod
    async def create_property(property_repo: PropertyRepository, **kwargs) -> Property:
        """Create a test property in the database."""
        return await property_repo.create_property(PropertyFactory.create_property_data(**kwargs))


class ReservationFactory:
    """Factory for creating reservations relative to today."""

    @staticmethod
    async def create_reservation(
        session: AsyncSession,
        guest_id: int,
        property_id: int,
        start_offset_days: int = -30,
        nights: int = 3
    ) -> Reservation:
        """Create a reservation starting start_offset_days from today."""
        start = date.today() + timedelta(days=start_offset_days)
        reservation = Reservation(
            guest_id=guest_id,
            property_id=property_id,
            start_date=start,
            end_date=start + timedelta(days=nights)
        )
        session.add(reservation)
        await session.commit()
        await session.refresh(reservation)
        return reservation


class ReviewFactory:
    """Factory for creating property reviews."""

    @staticmethod
    async def create_reviews(session: AsyncSession, property_id: int, *ratings: int) -> None:
        """Add one review per rating to a property."""
        session.add_all(
            [PropertyReview(property_id=property_id, rating=rating, message="message") for rating in ratings]
        )
        await session.commit()


# Common test fixtures
@pytest.fixture
async def test_owner(user_repository: UserRepository) -> User:
    """Create a property owner."""
    return await UserFactory.create_user(
        user_repository,
        name="Eva Stanley",
        email="sebastianguerra@ymail.com"
    )


@pytest.fixture
async def test_guest(user_repository: UserRepository) -> User:
    """Create a guest."""
    return await UserFactory.create_user(
        user_repository,
        name="Dominic Parks",
        email="victoriablackwell@outlook.com"
    )


@pytest.fixture
async def listed_properties(
    db_session: AsyncSession,
    property_repository: PropertyRepository,
    test_owner: User,
    test_guest: User
) -> dict:
    """
    Create reviewed properties across two cities and two owners, plus one
    property without reviews.
    """
    cheap = await PropertyFactory.create_property(
        property_repository, owner_id=test_owner.id, city="Vancouver", cost_per_night=90
    )
    mid = await PropertyFactory.create_property(
        property_repository, owner_id=test_owner.id, city="North Vancouver", cost_per_night=150
    )
    upper = await PropertyFactory.create_property(
        property_repository, owner_id=test_guest.id, city="Calgary", cost_per_night=200
    )
    luxury = await PropertyFactory.create_property(
        property_repository, owner_id=test_guest.id, city="Vancouver", cost_per_night=450
    )
    unreviewed = await PropertyFactory.create_property(
        property_repository, owner_id=test_owner.id, city="Vancouver", cost_per_night=10
    )

    await ReviewFactory.create_reviews(db_session, cheap.id, 2, 3)
    await ReviewFactory.create_reviews(db_session, mid.id, 4, 5)
    await ReviewFactory.create_reviews(db_session, upper.id, 5)
    await ReviewFactory.create_reviews(db_session, luxury.id, 3, 4, 5)

    return {
        "cheap": cheap,
        "mid": mid,
        "upper": upper,
        "luxury": luxury,
        "unreviewed": unreviewed,
    }


# Utility functions for tests
def assert_user_equal(user1: dict, user2: dict):
    """Assert that two user records are equal."""
    assert user1["id"] == user2["id"]
    assert user1["name"] == user2["name"]
    assert user1["email"] == user2["email"]
    assert user1["password"] == user2["password"]
