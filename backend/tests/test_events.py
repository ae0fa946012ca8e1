"""
Tests for event and category endpoints.
"""

from datetime import datetime, timedelta, timezone

import pytest
from httpx import AsyncClient


def _event_payload(category_id: str, **overrides) -> dict:
    payload = {
        "title": "Python Conference 2026",
        "description": "Annual Python gathering",
        "date": (datetime.now(timezone.utc) + timedelta(days=30)).isoformat(),
        "location": "Convention Center",
        "capacity": 500,
        "price": 49.99,
        "category_id": category_id,
    }
    payload.update(overrides)
    return payload


@pytest.mark.asyncio
async def test_create_event(client: AsyncClient, admin, admin_headers, category):
    """Admin can create an event."""
    response = await client.post(
        "/api/v1/events/", json=_event_payload(category.id), headers=admin_headers
    )
    assert response.status_code == 201
    data = response.json()
    assert data["title"] == "Python Conference 2026"
    assert data["capacity"] == 500
    assert data["created_by"] == admin.id


@pytest.mark.asyncio
async def test_create_event_unauthenticated(client: AsyncClient, category):
    response = await client.post("/api/v1/events/", json=_event_payload(category.id))
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_create_event_as_customer(client: AsyncClient, customer_headers, category):
    response = await client.post(
        "/api/v1/events/", json=_event_payload(category.id), headers=customer_headers
    )
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_create_event_invalid_capacity(client: AsyncClient, admin_headers, category):
    """Zero capacity returns 422."""
    response = await client.post(
        "/api/v1/events/", json=_event_payload(category.id, capacity=0), headers=admin_headers
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_create_event_unknown_category(client: AsyncClient, admin_headers):
    response = await client.post(
        "/api/v1/events/", json=_event_payload("missing"), headers=admin_headers
    )
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_list_events(client: AsyncClient, test_event):
    response = await client.get("/api/v1/events/")
    assert response.status_code == 200
    data = response.json()
    assert [e["id"] for e in data] == [test_event.id]


@pytest.mark.asyncio
async def test_list_events_filters(client: AsyncClient, make_event):
    jazz = make_event(title="Jazz Night")
    make_event(title="Book Club", category_id="other")

    response = await client.get("/api/v1/events/", params={"search": "JAZZ"})
    assert [e["id"] for e in response.json()] == [jazz.id]

    response = await client.get("/api/v1/events/", params={"category_id": "other"})
    assert [e["title"] for e in response.json()] == ["Book Club"]


@pytest.mark.asyncio
async def test_get_event(client: AsyncClient, test_event):
    response = await client.get(f"/api/v1/events/{test_event.id}")
    assert response.status_code == 200
    data = response.json()
    assert data["id"] == test_event.id
    assert data["title"] == "Test Concert"


@pytest.mark.asyncio
async def test_get_event_not_found(client: AsyncClient):
    response = await client.get("/api/v1/events/99999")
    assert response.status_code == 404
    assert response.json()["code"] == "NOT_FOUND"


@pytest.mark.asyncio
async def test_event_availability(client: AsyncClient, small_event, customer_headers):
    await client.post(
        "/api/v1/bookings/",
        json={"event_id": small_event.id, "number_of_tickets": 1},
        headers=customer_headers,
    )
    response = await client.get(f"/api/v1/events/{small_event.id}/availability")
    assert response.json() == {"event_id": small_event.id, "capacity": 2, "booked": 1, "remaining": 1}


@pytest.mark.asyncio
async def test_update_event(client: AsyncClient, test_event, admin_headers):
    response = await client.patch(
        f"/api/v1/events/{test_event.id}", json={"location": "Hall B"}, headers=admin_headers
    )
    assert response.status_code == 200
    assert response.json()["location"] == "Hall B"
    assert response.json()["title"] == test_event.title


@pytest.mark.asyncio
async def test_update_event_rejects_read_only_fields(client: AsyncClient, test_event, admin, admin_headers):
    response = await client.patch(
        f"/api/v1/events/{test_event.id}", json={"created_by": "intruder"}, headers=admin_headers
    )
    assert response.status_code == 422

    response = await client.get(f"/api/v1/events/{test_event.id}")
    assert response.json()["created_by"] == admin.id


@pytest.mark.asyncio
async def test_update_event_capacity_below_booked(client: AsyncClient, small_event, admin_headers, customer_headers):
    await client.post(
        "/api/v1/bookings/",
        json={"event_id": small_event.id, "number_of_tickets": 2},
        headers=customer_headers,
    )
    response = await client.patch(
        f"/api/v1/events/{small_event.id}", json={"capacity": 1}, headers=admin_headers
    )
    assert response.status_code == 409


@pytest.mark.asyncio
async def test_delete_event(client: AsyncClient, test_event, admin_headers):
    response = await client.delete(f"/api/v1/events/{test_event.id}", headers=admin_headers)
    assert response.status_code == 204

    response = await client.get(f"/api/v1/events/{test_event.id}")
    assert response.status_code == 404

    response = await client.delete(f"/api/v1/events/{test_event.id}", headers=admin_headers)
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_event_as_customer(client: AsyncClient, test_event, customer_headers):
    response = await client.delete(f"/api/v1/events/{test_event.id}", headers=customer_headers)
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_event_bookings_hide_passwords(
    client: AsyncClient, test_event, customer, admin_headers, customer_headers
):
    await client.post(
        "/api/v1/bookings/",
        json={"event_id": test_event.id, "number_of_tickets": 2},
        headers=customer_headers,
    )
    response = await client.get(f"/api/v1/events/{test_event.id}/bookings", headers=admin_headers)
    assert response.status_code == 200
    data = response.json()
    assert data[0]["user"]["email"] == customer.email
    assert "password" not in data[0]["user"]
    assert "testpassword123" not in response.text


@pytest.mark.asyncio
async def test_list_categories(client: AsyncClient, category):
    response = await client.get("/api/v1/categories/")
    assert response.status_code == 200
    assert response.json() == [{"id": category.id, "name": "Concert", "description": "Live music"}]


@pytest.mark.asyncio
async def test_get_category(client: AsyncClient, category):
    response = await client.get(f"/api/v1/categories/{category.id}")
    assert response.json()["name"] == "Concert"

    response = await client.get("/api/v1/categories/missing")
    assert response.status_code == 404
