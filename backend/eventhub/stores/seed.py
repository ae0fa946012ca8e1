"""
Demo data loaded into a fresh store when SEED_DEMO_DATA is enabled.

Passwords are plain text: authentication is a mock and there is no real
credential storage.
"""

from datetime import datetime, timezone

from eventhub.core.logging import get_logger
from eventhub.models import Category, Event, User, UserRole
from eventhub.stores.interfaces import Collection, DirectoryStore

logger = get_logger(__name__)

ADMIN_ID = "1"
CUSTOMER_ID = "2"

CATEGORIES = [
    ("1", "Conference", "Professional gatherings and conferences"),
    ("2", "Workshop", "Hands-on learning experiences"),
    ("3", "Social", "Networking and social events"),
    ("4", "Concert", "Music and entertainment events"),
    ("5", "Festival", "Cultural and celebratory events"),
    ("6", "Exhibition", "Art and product exhibitions"),
]

# (id, title, description, date, location, image, capacity, price, category_id)
EVENTS = [
    (
        "1", "Tech Conference 2025",
        "Join us for the biggest tech conference of the year featuring the latest "
        "innovations and industry experts.",
        datetime(2025, 6, 15, tzinfo=timezone.utc), "Convention Center, New Delhi",
        "https://images.unsplash.com/photo-1505373877841-8d25f7d46678?q=80&w=1000",
        500, 12999.99, "1",
    ),
    (
        "2", "Design Workshop",
        "A hands-on workshop exploring the latest design trends and techniques with "
        "industry professionals.",
        datetime(2025, 7, 10, tzinfo=timezone.utc), "Design Hub, Mumbai",
        "https://images.unsplash.com/photo-1531482615713-2afd69097998?q=80&w=1000",
        50, 5999.99, "2",
    ),
    (
        "3", "Networking Mixer",
        "Connect with professionals in your industry in this casual networking event "
        "with drinks and appetizers.",
        datetime(2025, 8, 5, tzinfo=timezone.utc), "Skyline Lounge, Bangalore",
        "https://images.unsplash.com/photo-1511795409834-432f7b1e1760?q=80&w=1000",
        100, 2999.99, "3",
    ),
    (
        "4", "Annual Music Festival",
        "Experience three days of live music from top artists across multiple stages "
        "in a beautiful outdoor setting.",
        datetime(2025, 9, 20, tzinfo=timezone.utc), "Riverfront Park, Chennai",
        "https://images.unsplash.com/photo-1470229722913-7c0e2dbbafd3?q=80&w=1000",
        2000, 3999.99, "4",
    ),
    (
        "5", "Cultural Dance Festival",
        "Celebrate the rich cultural heritage through traditional dance performances "
        "from across India.",
        datetime(2025, 10, 12, tzinfo=timezone.utc), "Heritage Center, Jaipur",
        "https://images.unsplash.com/photo-1504609773096-104ff2c73ba4?q=80&w=1000",
        800, 1499.99, "5",
    ),
    (
        "6", "Startup Pitch Competition",
        "Watch innovative startups pitch their ideas to a panel of investors, with a "
        "chance to win funding.",
        datetime(2025, 8, 25, tzinfo=timezone.utc), "Innovation Hub, Hyderabad",
        "https://images.unsplash.com/photo-1475721027785-f74eccf877e2?q=80&w=1000",
        200, 499.99, "1",
    ),
    (
        "7", "Photography Exhibition",
        "Explore stunning photography from both established and emerging photographers "
        "from around the country.",
        datetime(2025, 11, 5, tzinfo=timezone.utc), "Art Gallery, Kolkata",
        "https://images.unsplash.com/photo-1572953900290-2e5874fc0622?q=80&w=1000",
        300, 799.99, "6",
    ),
]


def seed_demo_data(store: DirectoryStore) -> None:
    now = datetime.now(timezone.utc)

    store.insert(Collection.USERS, User(
        id=ADMIN_ID, name="Admin User", email="admin@example.com",
        password="password123", role=UserRole.ADMIN, created_at=now,
    ))
    store.insert(Collection.USERS, User(
        id=CUSTOMER_ID, name="Customer User", email="customer@example.com",
        password="password123", role=UserRole.CUSTOMER, created_at=now,
    ))

    for category_id, name, description in CATEGORIES:
        store.insert(Collection.CATEGORIES, Category(id=category_id, name=name, description=description))

    for event_id, title, description, date, location, image_url, capacity, price, category_id in EVENTS:
        store.insert(Collection.EVENTS, Event(
            id=event_id,
            title=title,
            description=description,
            date=date,
            location=location,
            image_url=image_url,
            capacity=capacity,
            price=price,
            category_id=category_id,
            created_by=ADMIN_ID,
            created_at=now,
            updated_at=now,
        ))

    logger.info("demo_data_seeded", users=2, categories=len(CATEGORIES), events=len(EVENTS))
