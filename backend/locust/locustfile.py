"""
Locust Load Test Suite

Run scenarios:
  locust -f locustfile.py --host http://localhost:8000 --tags concurrency  # Test overselling
  locust -f locustfile.py --host http://localhost:8000 --tags throughput   # Test cache
  locust -f locustfile.py --host http://localhost:8000 --tags edge         # Test bad input
  locust -f locustfile.py --host http://localhost:8000                     # All tests

A tenant, venue, act and a 100-ticket show are created once at test start;
every simulated user registers inside that tenant.
"""

import random
import string
from datetime import datetime, timezone, timedelta

import requests
from locust import HttpUser, task, between, tag, events

API = "/api/v1"
CONCURRENCY_SHOW_TICKETS = 100
PASSWORD = "loadtest-password"

# Shared state, filled by on_test_start
SETUP = {"tenant_id": None, "venue_id": None, "show_id": None}


def random_suffix(k: int = 8) -> str:
    return "".join(random.choices(string.ascii_lowercase + string.digits, k=k))


def login_headers(post, tenant_id: int) -> dict:
    """Register a fresh user in the tenant and return bearer headers ({} on failure)."""
    username = f"load_{random_suffix()}"
    post(f"{API}/auth/register", json={"tenant_id": tenant_id, "username": username, "password": PASSWORD})
    resp = post(f"{API}/auth/login", json={"username": username, "password": PASSWORD})
    if resp.status_code != 200:
        return {}
    return {"Authorization": f"Bearer {resp.json()['access_token']}"}


@events.test_start.add_listener
def on_test_start(environment, **kwargs):
    """Setup: tenant, venue, act and one show with limited tickets."""
    print("\n" + "=" * 60)
    print("SETUP: Creating load test tenant and concurrency show...")
    print("=" * 60)

    host = environment.host.rstrip("/")

    def post(path, **kw):
        return requests.post(host + path, timeout=10, **kw)

    slug = f"load-{random_suffix()}"
    resp = post(f"{API}/tenants/", json={"tenant_identifier": slug, "name": "Load Test", "slug": slug})
    resp.raise_for_status()
    SETUP["tenant_id"] = resp.json()["id"]

    headers = login_headers(post, SETUP["tenant_id"])
    venue = post(f"{API}/venues/", json={"name": "Load Arena", "seating_capacity": 5000}, headers=headers)
    venue.raise_for_status()
    SETUP["venue_id"] = venue.json()["id"]

    act = post(f"{API}/acts/", json={"name": "Load Band"}, headers=headers)
    act.raise_for_status()

    start = (datetime.now(timezone.utc) + timedelta(days=30)).isoformat()
    show = post(
        f"{API}/acts/{act.json()['id']}/shows",
        json={"venue_id": SETUP["venue_id"], "total_tickets": CONCURRENCY_SHOW_TICKETS, "start_time": start},
        headers=headers,
    )
    show.raise_for_status()
    SETUP["show_id"] = show.json()["id"]
    print(f"\n✓ Created show {SETUP['show_id']} with {CONCURRENCY_SHOW_TICKETS} tickets\n")


@events.test_stop.add_listener
def on_test_stop(environment, **kwargs):
    """Print the final allocation; it must never exceed the show's tickets."""
    if not SETUP["show_id"]:
        return
    host = environment.host.rstrip("/")
    headers = login_headers(lambda path, **kw: requests.post(host + path, timeout=10, **kw), SETUP["tenant_id"])
    resp = requests.get(f"{host}{API}/shows/{SETUP['show_id']}/capacity", headers=headers, timeout=10)
    if resp.status_code == 200:
        capacity = resp.json()
        print(f"\nFinal allocation: {capacity['allocated_tickets']} / {capacity['total_tickets']}\n")


class TenantUser(HttpUser):
    abstract = True

    def on_start(self):
        self.headers = login_headers(self.client.post, SETUP["tenant_id"]) if SETUP["tenant_id"] else {}


class ConcurrencyUser(TenantUser):
    """
    TEST 1: Concurrency - 100 users -> 100 tickets, 1-3 tickets per offer

    Run: locust -f locustfile.py --tags concurrency -u 100 -r 50 --run-time 30s

    After test, verify:
      SELECT SUM(ticket_count) FROM ticket_offers WHERE show_id = X;
    Should be <= 100
    """
    wait_time = between(0, 0.1)

    @tag("concurrency")
    @task
    def grab_tickets(self):
        """All users fight for the same 100 tickets."""
        if not SETUP["show_id"] or not self.headers:
            return

        with self.client.post(
            f"{API}/shows/{SETUP['show_id']}/ticket-offers",
            json={"name": f"Offer {random_suffix(4)}", "price": "25.00", "ticket_count": random.randint(1, 3)},
            headers=self.headers,
            name=f"{API}/shows/[id]/ticket-offers",
            catch_response=True,
        ) as resp:
            if resp.status_code == 201:
                resp.success()
            elif resp.status_code == 409:
                resp.success()  # Expected: sold out or lost a version race
            else:
                resp.failure(f"Unexpected: {resp.status_code}")


class ThroughputUser(TenantUser):
    """
    TEST 2: Throughput - Cache effectiveness

    Run twice:
      1. With Redis: locust -f locustfile.py --tags throughput -u 100 -r 20 --run-time 60s
      2. Without Redis: REDIS_ENABLED=false, run again

    Compare avg response time, requests/sec and P95/P99 latency.
    """
    wait_time = between(0.1, 0.5)

    @tag("throughput", "read")
    @task(10)
    def list_venues_cached(self):
        """Hammer the cached endpoint."""
        self.client.get(f"{API}/venues/", headers=self.headers, name=f"{API}/venues/ [cached]")

    @tag("throughput", "read")
    @task(3)
    def show_capacity(self):
        """Capacity is never cached; this is the uncached baseline."""
        if SETUP["show_id"]:
            self.client.get(
                f"{API}/shows/{SETUP['show_id']}/capacity",
                headers=self.headers,
                name=f"{API}/shows/[id]/capacity",
            )

    @tag("throughput")
    @task(1)
    def health_check(self):
        """Monitor system health."""
        self.client.get("/health")


class EdgeCaseUser(TenantUser):
    """
    TEST 3: Edge cases - Bad input handling

    Run: locust -f locustfile.py --tags edge -u 20 -r 5 --run-time 30s

    System should NOT crash, return proper error codes.
    """
    wait_time = between(0.5, 1.5)

    def _expect(self, expected, method="post", path=None, **kwargs):
        path = path or f"{API}/shows/{SETUP['show_id'] or 1}/ticket-offers"
        with self.client.request(method, path, catch_response=True, **kwargs) as resp:
            if resp.status_code in expected:
                resp.success()
            else:
                resp.failure(f"Expected {expected}, got {resp.status_code}")

    @tag("edge")
    @task
    def unknown_show(self):
        self._expect(
            [404],
            path=f"{API}/shows/999999/ticket-offers",
            json={"name": "GA", "price": "10.00", "ticket_count": 1},
            headers=self.headers,
        )

    @tag("edge")
    @task
    def negative_tickets(self):
        self._expect([400], json={"name": "GA", "price": "10.00", "ticket_count": -5}, headers=self.headers)

    @tag("edge")
    @task
    def zero_price(self):
        self._expect([400], json={"name": "GA", "price": "0", "ticket_count": 1}, headers=self.headers)

    @tag("edge")
    @task
    def huge_offer(self):
        self._expect([409], json={"name": "GA", "price": "10.00", "ticket_count": 999999}, headers=self.headers)

    @tag("edge")
    @task
    def malformed_json(self):
        self._expect([422], data="not json at all", headers=self.headers)

    @tag("edge")
    @task
    def missing_auth(self):
        self._expect([401], json={"name": "GA", "price": "10.00", "ticket_count": 1})
