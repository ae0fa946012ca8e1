"""
Pytest fixtures: a fresh in-memory store per test, seeded records,
services wired to that store, and an HTTP client over the same store.
"""

from datetime import datetime, timedelta, timezone
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from eventhub.core.config import Settings
from eventhub.main import create_app
from eventhub.models import Category, Event, User, UserRole
from eventhub.services import Services
from eventhub.stores import Collection, InMemoryDirectoryStore


@pytest.fixture
def store() -> InMemoryDirectoryStore:
    return InMemoryDirectoryStore()


@pytest.fixture
def services(store: InMemoryDirectoryStore) -> Services:
    return Services.build(store)


def _insert_user(store, name: str, email: str, role: UserRole) -> User:
    user = User(
        id=store.next_id(Collection.USERS),
        name=name,
        email=email,
        password="testpassword123",
        role=role,
        created_at=datetime.now(timezone.utc),
    )
    return store.insert(Collection.USERS, user)


@pytest.fixture
def admin(store) -> User:
    return _insert_user(store, "Admin", "admin@example.com", UserRole.ADMIN)


@pytest.fixture
def customer(store) -> User:
    return _insert_user(store, "Alice", "alice@example.com", UserRole.CUSTOMER)


@pytest.fixture
def other_customer(store) -> User:
    return _insert_user(store, "Bob", "bob@example.com", UserRole.CUSTOMER)


@pytest.fixture
def category(store) -> Category:
    return store.insert(
        Collection.CATEGORIES,
        Category(id=store.next_id(Collection.CATEGORIES), name="Concert", description="Live music"),
    )


@pytest.fixture
def make_event(store, admin, category):
    """Factory inserting an event owned by the admin."""

    def _make(**overrides) -> Event:
        now = datetime.now(timezone.utc)
        fields = dict(
            id=store.next_id(Collection.EVENTS),
            title="Test Concert",
            description="A test event",
            date=now + timedelta(days=30),
            location="Test Venue",
            image_url="",
            capacity=100,
            price=25.0,
            category_id=category.id,
            created_by=admin.id,
            created_at=now,
            updated_at=now,
        )
        fields.update(overrides)
        return store.insert(Collection.EVENTS, Event(**fields))

    return _make


@pytest.fixture
def test_event(make_event) -> Event:
    """An event with 100 tickets at 25.0."""
    return make_event()


@pytest.fixture
def small_event(make_event) -> Event:
    """An event with only 2 tickets at 50.0."""
    return make_event(title="Intimate Gig", capacity=2, price=50.0)


@pytest_asyncio.fixture
async def client(store) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client for an app built around the test store."""
    app = create_app(Settings(SEED_DEMO_DATA=False), store=store)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def admin_headers(admin) -> dict:
    return {"X-User-Id": admin.id}


@pytest.fixture
def customer_headers(customer) -> dict:
    return {"X-User-Id": customer.id}
