"""
Locust Load Test Suite

Run against a server started with the demo seed data (admin user id "1"):
  locust -f locustfile.py --tags concurrency  # Test overbooking
  locust -f locustfile.py --tags browse       # Read-heavy browsing
  locust -f locustfile.py --tags edge         # Test bad input
  locust -f locustfile.py                     # All tests

After a concurrency run, GET /api/v1/events/{id}/availability must show
booked <= capacity.
"""

import random
from datetime import datetime, timedelta, timezone

from locust import HttpUser, between, events, tag, task

ADMIN_HEADERS = {"X-User-Id": "1"}
SEEDED_EVENT_IDS = [str(i) for i in range(1, 8)]
CONCURRENCY_EVENT_ID = None


def random_email():
    return f"load_{random.randint(100000, 999999)}@example.com"


@events.test_start.add_listener
def on_test_start(environment, **kwargs):
    print("\n" + "=" * 60)
    print("SETUP: concurrency event is created by the first ConcurrencyUser")
    print("=" * 60)


def register(client) -> dict:
    """Register a throwaway customer and return its identity headers."""
    resp = client.post("/api/v1/auth/register", json={
        "name": "Load Tester",
        "email": random_email(),
        "password": "loadtest123",
    })
    if resp.status_code == 201:
        return {"X-User-Id": resp.json()["id"]}
    return {}


class ConcurrencyUser(HttpUser):
    """
    TEST 1: Concurrency - 100 users -> 10 tickets

    Run: locust -f locustfile.py --tags concurrency -u 100 -r 50 --run-time 30s
    """
    wait_time = between(0, 0.1)

    def on_start(self):
        self.headers = register(self.client)

        if not CONCURRENCY_EVENT_ID:
            future = (datetime.now(timezone.utc) + timedelta(days=30)).isoformat()
            resp = self.client.post(
                "/api/v1/events/",
                json={
                    "title": "Concurrency Test Event",
                    "description": "10 tickets only",
                    "date": future,
                    "location": "Test",
                    "capacity": 10,
                    "price": 10.0,
                    "category_id": "1",
                },
                headers=ADMIN_HEADERS,
            )
            if resp.status_code == 201:
                globals()["CONCURRENCY_EVENT_ID"] = resp.json()["id"]
                print(f"\nCreated event {CONCURRENCY_EVENT_ID} with 10 tickets\n")

    @tag("concurrency")
    @task
    def book_limited_tickets(self):
        """All users fight for the same 10 tickets."""
        if not CONCURRENCY_EVENT_ID or not self.headers:
            return

        with self.client.post(
            "/api/v1/bookings/",
            json={"event_id": CONCURRENCY_EVENT_ID, "number_of_tickets": 1},
            headers=self.headers,
            catch_response=True,
        ) as resp:
            if resp.status_code in (201, 409):
                resp.success()  # 409 expected once sold out
            else:
                resp.failure(f"Unexpected: {resp.status_code}")


class BrowsingUser(HttpUser):
    """
    TEST 2: Read-heavy browsing

    Run: locust -f locustfile.py --tags browse -u 100 -r 20 --run-time 60s
    """
    wait_time = between(0.1, 0.5)

    @tag("browse")
    @task(10)
    def list_events(self):
        self.client.get("/api/v1/events/")

    @tag("browse")
    @task(3)
    def search_events(self):
        term = random.choice(["festival", "tech", "workshop", "music"])
        self.client.get(f"/api/v1/events/?search={term}", name="/api/v1/events/?search")

    @tag("browse")
    @task(3)
    def get_event_detail(self):
        event_id = random.choice(SEEDED_EVENT_IDS)
        self.client.get(f"/api/v1/events/{event_id}", name="/api/v1/events/{id}")

    @tag("browse")
    @task(1)
    def health_check(self):
        self.client.get("/health")


class EdgeCaseUser(HttpUser):
    """
    TEST 3: Edge cases - Bad input handling

    Run: locust -f locustfile.py --tags edge -u 20 -r 5 --run-time 30s

    System should NOT crash, return proper error codes.
    """
    wait_time = between(0.5, 1.5)

    def on_start(self):
        self.headers = register(self.client)

    def _expect(self, expected, **kwargs):
        with self.client.post("/api/v1/bookings/", catch_response=True, **kwargs) as resp:
            if resp.status_code in expected:
                resp.success()
            else:
                resp.failure(f"Expected {expected}, got {resp.status_code}")

    @tag("edge")
    @task
    def invalid_event_id(self):
        self._expect((404,), json={"event_id": "999999", "number_of_tickets": 1}, headers=self.headers)

    @tag("edge")
    @task
    def negative_tickets(self):
        self._expect((422,), json={"event_id": "1", "number_of_tickets": -5}, headers=self.headers)

    @tag("edge")
    @task
    def huge_tickets(self):
        self._expect((409,), json={"event_id": "1", "number_of_tickets": 999999}, headers=self.headers)

    @tag("edge")
    @task
    def malformed_json(self):
        self._expect((400, 422), data="not json at all", headers=self.headers)

    @tag("edge")
    @task
    def missing_identity(self):
        self._expect((401,), json={"event_id": "1", "number_of_tickets": 1})
