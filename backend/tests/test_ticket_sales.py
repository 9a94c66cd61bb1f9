"""
Tests for ticket sale endpoints and the ticket sale service.
"""

import pytest
from httpx import AsyncClient

from ticketing.core.errors import ShowNotFoundError, TicketSaleNotFoundError
from ticketing.schemas.ticket_sale import TicketSaleCreate, TicketSaleUpdate
from ticketing.services import ticket_sale_service


async def _post_sale(client: AsyncClient, headers, show_id: int, quantity: int):
    return await client.post(
        "/api/v1/ticket-sales/",
        json={"show_id": show_id, "quantity": quantity},
        headers=headers,
    )


@pytest.mark.asyncio
async def test_create_ticket_sale(client: AsyncClient, auth_headers, show):
    response = await _post_sale(client, auth_headers, show.id, 4)

    assert response.status_code == 201
    data = response.json()
    assert data["show_id"] == show.id
    assert data["quantity"] == 4
    assert data["venue_name"] == "Main Hall"
    assert data["act_name"] == "The Test Band"
    assert data["show_start_time"] is not None

    fetched = await client.get(f"/api/v1/ticket-sales/{data['id']}", headers=auth_headers)
    assert fetched.status_code == 200
    assert fetched.json() == data


@pytest.mark.asyncio
@pytest.mark.parametrize("quantity", [0, -2])
async def test_create_ticket_sale_invalid_quantity(client: AsyncClient, auth_headers, show, quantity):
    response = await _post_sale(client, auth_headers, show.id, quantity)
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_create_ticket_sale_unknown_show(client: AsyncClient, auth_headers):
    response = await _post_sale(client, auth_headers, 9999, 1)
    assert response.status_code == 404
    assert response.json() == {"error_code": "NOT_FOUND", "message": "Show 9999 not found"}


@pytest.mark.asyncio
async def test_list_ticket_sales(client: AsyncClient, auth_headers, show, small_show):
    await _post_sale(client, auth_headers, show.id, 2)
    await _post_sale(client, auth_headers, small_show.id, 3)
    await _post_sale(client, auth_headers, show.id, 5)

    listed = await client.get("/api/v1/ticket-sales/", headers=auth_headers)
    assert listed.status_code == 200
    assert [(s["show_id"], s["quantity"]) for s in listed.json()] == [
        (show.id, 2),
        (small_show.id, 3),
        (show.id, 5),
    ]

    by_show = await client.get(f"/api/v1/ticket-sales/by-show/{show.id}", headers=auth_headers)
    assert by_show.status_code == 200
    assert [s["quantity"] for s in by_show.json()] == [2, 5]


@pytest.mark.asyncio
async def test_by_show_unknown_show(client: AsyncClient, auth_headers):
    response = await client.get("/api/v1/ticket-sales/by-show/9999", headers=auth_headers)
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_update_ticket_sale(client: AsyncClient, auth_headers, show):
    sale_id = (await _post_sale(client, auth_headers, show.id, 2)).json()["id"]

    response = await client.put(f"/api/v1/ticket-sales/{sale_id}", json={"quantity": 6}, headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["quantity"] == 6

    rejected = await client.put(f"/api/v1/ticket-sales/{sale_id}", json={"quantity": 0}, headers=auth_headers)
    assert rejected.status_code == 422


@pytest.mark.asyncio
async def test_delete_ticket_sale(client: AsyncClient, auth_headers, show):
    sale_id = (await _post_sale(client, auth_headers, show.id, 2)).json()["id"]

    response = await client.delete(f"/api/v1/ticket-sales/{sale_id}", headers=auth_headers)
    assert response.status_code == 204

    missing = await client.get(f"/api/v1/ticket-sales/{sale_id}", headers=auth_headers)
    assert missing.status_code == 404
    assert missing.json()["message"] == f"Ticket sale {sale_id} not found"


@pytest.mark.asyncio
async def test_ticket_sales_are_tenant_scoped(client: AsyncClient, auth_headers, other_auth_headers, show):
    sale_id = (await _post_sale(client, auth_headers, show.id, 2)).json()["id"]

    assert (await client.get("/api/v1/ticket-sales/", headers=other_auth_headers)).json() == []
    assert (await _post_sale(client, other_auth_headers, show.id, 1)).status_code == 404
    assert (await client.get(f"/api/v1/ticket-sales/by-show/{show.id}", headers=other_auth_headers)).status_code == 404
    assert (await client.get(f"/api/v1/ticket-sales/{sale_id}", headers=other_auth_headers)).status_code == 404
    assert (
        await client.put(f"/api/v1/ticket-sales/{sale_id}", json={"quantity": 9}, headers=other_auth_headers)
    ).status_code == 404
    assert (await client.delete(f"/api/v1/ticket-sales/{sale_id}", headers=other_auth_headers)).status_code == 404

    stored = await client.get(f"/api/v1/ticket-sales/{sale_id}", headers=auth_headers)
    assert stored.json()["quantity"] == 2


@pytest.mark.asyncio
async def test_delete_show_removes_sales(client: AsyncClient, auth_headers, show):
    sale_id = (await _post_sale(client, auth_headers, show.id, 2)).json()["id"]

    assert (await client.delete(f"/api/v1/shows/{show.id}", headers=auth_headers)).status_code == 204
    assert (await client.get(f"/api/v1/ticket-sales/{sale_id}", headers=auth_headers)).status_code == 404


@pytest.mark.asyncio
async def test_ticket_sales_require_auth(client: AsyncClient):
    response = await client.get("/api/v1/ticket-sales/")
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_service_round_trip(uow, tenant, other_tenant, show):
    sale = await ticket_sale_service.create_ticket_sale(uow, tenant.id, TicketSaleCreate(show_id=show.id, quantity=3))
    sale_id = sale.id

    with pytest.raises(ShowNotFoundError):
        await ticket_sale_service.create_ticket_sale(
            uow, other_tenant.id, TicketSaleCreate(show_id=show.id, quantity=1)
        )
    with pytest.raises(TicketSaleNotFoundError):
        await ticket_sale_service.update_ticket_sale(uow, other_tenant.id, sale_id, TicketSaleUpdate(quantity=1))

    updated = await ticket_sale_service.update_ticket_sale(uow, tenant.id, sale_id, TicketSaleUpdate(quantity=8))
    assert updated.quantity == 8
    assert ticket_sale_service.to_response(updated).venue_name == "Main Hall"

    await ticket_sale_service.delete_ticket_sale(uow, tenant.id, sale_id)
    assert await ticket_sale_service.list_ticket_sales(uow, tenant.id) == []
