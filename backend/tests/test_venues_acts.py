"""
Tests for venue and act endpoints, including tenant scoping.
"""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_create_and_list_venues(client: AsyncClient, auth_headers):
    for name, capacity in (("Stadium", 50000), ("Club", 300)):
        response = await client.post(
            "/api/v1/venues/",
            json={"name": name, "address": "Somewhere", "seating_capacity": capacity},
            headers=auth_headers,
        )
        assert response.status_code == 201

    response = await client.get("/api/v1/venues/", headers=auth_headers)
    assert response.status_code == 200
    names = [v["name"] for v in response.json()]
    assert names == ["Club", "Stadium"]


@pytest.mark.asyncio
async def test_create_venue_invalid_capacity(client: AsyncClient, auth_headers):
    response = await client.post(
        "/api/v1/venues/",
        json={"name": "Nowhere", "seating_capacity": 0},
        headers=auth_headers,
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_update_venue(client: AsyncClient, auth_headers, venue):
    response = await client.put(
        f"/api/v1/venues/{venue.id}",
        json={"name": "Main Hall (renovated)", "description": "Now with seats", "seating_capacity": 2500},
        headers=auth_headers,
    )
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Main Hall (renovated)"
    assert data["seating_capacity"] == 2500
    assert data["description"] == "Now with seats"


@pytest.mark.asyncio
async def test_venues_are_tenant_scoped(client: AsyncClient, auth_headers, other_auth_headers, venue):
    listed = await client.get("/api/v1/venues/", headers=other_auth_headers)
    assert listed.json() == []

    assert (await client.get(f"/api/v1/venues/{venue.id}", headers=other_auth_headers)).status_code == 404
    assert (await client.delete(f"/api/v1/venues/{venue.id}", headers=other_auth_headers)).status_code == 404
    assert (await client.get(f"/api/v1/venues/{venue.id}", headers=auth_headers)).status_code == 200


@pytest.mark.asyncio
async def test_delete_venue_removes_its_shows(client: AsyncClient, auth_headers, venue, show):
    response = await client.delete(f"/api/v1/venues/{venue.id}", headers=auth_headers)
    assert response.status_code == 204

    assert (await client.get(f"/api/v1/venues/{venue.id}", headers=auth_headers)).status_code == 404
    assert (await client.get(f"/api/v1/shows/{show.id}", headers=auth_headers)).status_code == 404


@pytest.mark.asyncio
async def test_act_crud(client: AsyncClient, auth_headers):
    created = await client.post("/api/v1/acts/", json={"name": "Opening Act"}, headers=auth_headers)
    assert created.status_code == 201
    act_id = created.json()["id"]

    renamed = await client.put(f"/api/v1/acts/{act_id}", json={"name": "Headliner"}, headers=auth_headers)
    assert renamed.status_code == 200
    assert renamed.json()["name"] == "Headliner"

    count = await client.get("/api/v1/acts/count", headers=auth_headers)
    assert count.json() == {"count": 1}

    deleted = await client.delete(f"/api/v1/acts/{act_id}", headers=auth_headers)
    assert deleted.status_code == 204
    assert (await client.get(f"/api/v1/acts/{act_id}", headers=auth_headers)).status_code == 404


@pytest.mark.asyncio
async def test_acts_are_tenant_scoped(client: AsyncClient, other_auth_headers, act):
    assert (await client.get(f"/api/v1/acts/{act.id}", headers=other_auth_headers)).status_code == 404
    assert (await client.get(f"/api/v1/acts/{act.id}/shows", headers=other_auth_headers)).status_code == 404
    assert (await client.get("/api/v1/acts/count", headers=other_auth_headers)).json() == {"count": 0}


@pytest.mark.asyncio
async def test_act_name_required(client: AsyncClient, auth_headers):
    response = await client.post("/api/v1/acts/", json={"name": ""}, headers=auth_headers)
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_venue_location(client: AsyncClient, auth_headers):
    response = await client.post(
        "/api/v1/venues/",
        json={"name": "Harbour Stage", "seating_capacity": 800, "latitude": 51.5072, "longitude": -0.1276},
        headers=auth_headers,
    )
    assert response.status_code == 201
    data = response.json()
    assert data["latitude"] == pytest.approx(51.5072)
    assert data["longitude"] == pytest.approx(-0.1276)

    # One coordinate alone is not a location
    updated = await client.put(
        f"/api/v1/venues/{data['id']}",
        json={"name": "Harbour Stage", "seating_capacity": 800, "latitude": 40.0},
        headers=auth_headers,
    )
    assert updated.status_code == 200
    assert updated.json()["latitude"] is None
    assert updated.json()["longitude"] is None


@pytest.mark.asyncio
@pytest.mark.parametrize("coordinates", [{"latitude": 91, "longitude": 0}, {"latitude": 0, "longitude": -181}])
async def test_venue_location_out_of_range(client: AsyncClient, auth_headers, coordinates):
    response = await client.post(
        "/api/v1/venues/",
        json={"name": "Nowhere", "seating_capacity": 10, **coordinates},
        headers=auth_headers,
    )
    assert response.status_code == 422
