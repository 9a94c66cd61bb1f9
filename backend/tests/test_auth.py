"""
Tests for tenant bootstrap, registration, login and token handling.
"""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_create_tenant(client: AsyncClient):
    response = await client.post("/api/v1/tenants/", json={
        "tenant_identifier": "initech-shows",
        "name": "Initech Shows",
        "slug": "initech",
    })
    assert response.status_code == 201
    data = response.json()
    assert data["slug"] == "initech"
    assert data["is_active"] is True


@pytest.mark.asyncio
async def test_create_tenant_duplicate_slug(client: AsyncClient, tenant):
    response = await client.post("/api/v1/tenants/", json={
        "tenant_identifier": "someone-else",
        "name": "Someone Else",
        "slug": "acme",
    })
    assert response.status_code == 409
    assert response.json()["error_code"] == "ALREADY_EXISTS"


@pytest.mark.asyncio
async def test_create_tenant_bad_slug(client: AsyncClient):
    response = await client.post("/api/v1/tenants/", json={
        "tenant_identifier": "x",
        "name": "X",
        "slug": "Not A Slug",
    })
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_register_user(client: AsyncClient, tenant):
    """Successful registration returns user data."""
    response = await client.post("/api/v1/auth/register", json={
        "tenant_id": tenant.id,
        "username": "newuser",
        "password": "securepassword123",
    })
    assert response.status_code == 201
    data = response.json()
    assert data["username"] == "newuser"
    assert data["tenant_id"] == tenant.id
    assert "hashed_password" not in data  # Never expose password hash


@pytest.mark.asyncio
async def test_register_unknown_tenant(client: AsyncClient):
    response = await client.post("/api/v1/auth/register", json={
        "tenant_id": 9999,
        "username": "orphan",
        "password": "securepassword123",
    })
    assert response.status_code == 400
    assert response.json()["field"] == "tenant_id"


@pytest.mark.asyncio
async def test_register_duplicate_username(client: AsyncClient, tenant, test_user):
    """Duplicate username returns 409."""
    response = await client.post("/api/v1/auth/register", json={
        "tenant_id": tenant.id,
        "username": "promoter",
        "password": "securepassword123",
    })
    assert response.status_code == 409


@pytest.mark.asyncio
async def test_register_weak_password(client: AsyncClient, tenant):
    """Password under 8 chars returns 422."""
    response = await client.post("/api/v1/auth/register", json={
        "tenant_id": tenant.id,
        "username": "weakuser",
        "password": "short",
    })
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_login_success(client: AsyncClient, tenant, test_user):
    """Valid credentials return a JWT scoped to the user's tenant."""
    response = await client.post("/api/v1/auth/login", json={
        "username": "promoter",
        "password": "testpassword123",
    })
    assert response.status_code == 200
    data = response.json()
    assert data["token_type"] == "bearer"

    headers = {"Authorization": f"Bearer {data['access_token']}"}
    me = await client.get("/api/v1/auth/me", headers=headers)
    assert me.status_code == 200
    assert me.json() == {"username": "promoter", "tenant_id": tenant.id, "is_authenticated": True}

    current = await client.get("/api/v1/tenants/current", headers=headers)
    assert current.json()["slug"] == "acme"


@pytest.mark.asyncio
async def test_login_wrong_password(client: AsyncClient, test_user):
    """Wrong password returns 401."""
    response = await client.post("/api/v1/auth/login", json={
        "username": "promoter",
        "password": "wrongpassword",
    })
    assert response.status_code == 401
    assert response.json()["error_code"] == "UNAUTHORIZED"


@pytest.mark.asyncio
async def test_login_unknown_user(client: AsyncClient):
    response = await client.post("/api/v1/auth/login", json={
        "username": "nobody",
        "password": "anypassword123",
    })
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_invalid_token_rejected(client: AsyncClient):
    response = await client.get("/api/v1/venues/", headers={"Authorization": "Bearer not-a-token"})
    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"
    assert response.json() == {"error_code": "UNAUTHORIZED", "message": "Invalid or expired token"}


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json()["cache"] == {"status": "disabled"}


@pytest.mark.asyncio
async def test_missing_token_error_body(client: AsyncClient):
    response = await client.get("/api/v1/venues/")

    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"
    assert response.json() == {"error_code": "UNAUTHORIZED", "message": "Not authenticated"}
