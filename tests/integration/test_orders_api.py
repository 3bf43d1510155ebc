"""Integration tests for Orders API endpoints."""

from decimal import Decimal

from fastapi.testclient import TestClient


def advance(client: TestClient, order_id: str, *statuses, **extra):
    response = None
    for status in statuses:
        response = client.patch(f"/api/v1/orders/{order_id}/status", json={"status": status, **extra})
        assert response.status_code == 200, response.text
    return response.json()


def test_create_order_success(test_client: TestClient, place_order):
    """POST /orders creates a pending order."""
    order = place_order(
        delivery_type="delivery",
        delivery_zone="Centro",
        delivery_fee="40.00",
        delivery_address="Col. Palmira",
    )

    assert order["order_number"] == "FRY-000001"
    assert order["status"] == "pending"
    assert Decimal(order["subtotal"]) == Decimal("300.00")
    assert Decimal(order["total"]) == Decimal("340.00")
    assert order["total_display"] == "L. 340.00"

    get_response = test_client.get(f"/api/v1/orders/{order['id']}")
    assert get_response.status_code == 200
    assert get_response.json()["order_number"] == "FRY-000001"


def test_checkout_validation_error(test_client: TestClient):
    response = test_client.post(
        "/api/v1/orders",
        json={"customer_id": "c-1", "branch_id": "b-1", "items": [], "payment_method": "cash"},
    )

    assert response.status_code == 400
    assert "empty" in response.json()["detail"]


def test_get_unknown_order(test_client: TestClient):
    response = test_client.get("/api/v1/orders/does-not-exist")

    assert response.status_code == 404


def test_list_orders_by_priority(test_client: TestClient, place_order):
    first = place_order()
    second = place_order()
    third = place_order(branch_id="branch-2")
    advance(test_client, first["id"], "confirmed", "preparing")

    response = test_client.get("/api/v1/orders")
    assert response.status_code == 200
    body = response.json()

    assert body["total"] == 3
    assert [o["id"] for o in body["orders"]] == [second["id"], third["id"], first["id"]]

    filtered = test_client.get("/api/v1/orders", params={"branch_id": "branch-2"}).json()
    assert [o["id"] for o in filtered["orders"]] == [third["id"]]

    preparing = test_client.get("/api/v1/orders", params={"status": "preparing"}).json()
    assert [o["id"] for o in preparing["orders"]] == [first["id"]]


def test_status_lifecycle(test_client: TestClient, place_order):
    order = place_order()

    delivered = advance(
        test_client, order["id"], "confirmed", "preparing", "ready", "dispatched", "delivered",
        delivery_id="driver-1",
    )
    assert delivered["status"] == "delivered"
    assert delivered["delivery_id"] == "driver-1"

    points = test_client.get("/api/v1/points/customer-1").json()
    assert points["available_points"] == 300

    notifications = test_client.get("/api/v1/branches/branch-1/notifications").json()
    assert [n["type"] for n in notifications["notifications"]] == ["delivery_completed"]


def test_invalid_transition_returns_conflict(test_client: TestClient, place_order):
    order = place_order()

    response = test_client.patch(f"/api/v1/orders/{order['id']}/status", json={"status": "delivered"})

    assert response.status_code == 409
    assert "pending -> delivered" in response.json()["detail"]


def test_unknown_status_value_is_unprocessable(test_client: TestClient, place_order):
    order = place_order()

    response = test_client.patch(f"/api/v1/orders/{order['id']}/status", json={"status": "teleported"})

    assert response.status_code == 422


def test_status_change_for_unknown_order(test_client: TestClient):
    response = test_client.patch("/api/v1/orders/missing/status", json={"status": "confirmed"})

    assert response.status_code == 404


def test_approve_and_authorize_transfer(test_client: TestClient, place_order):
    order = place_order(payment_method="transfer", receipt_sent=True)
    assert order["transfer_authorized"] is False

    approved = test_client.post(f"/api/v1/orders/{order['id']}/approve", json={"admin_id": "admin-1"})
    assert approved.status_code == 200
    assert approved.json()["status"] == "confirmed"
    assert approved.json()["admin_approved"] is True

    authorized = test_client.post(
        f"/api/v1/orders/{order['id']}/authorize-transfer", json={"admin_id": "admin-1"}
    )
    assert authorized.status_code == 200
    assert authorized.json()["transfer_authorized"] is True


def test_authorize_cash_order_is_bad_request(test_client: TestClient, place_order):
    order = place_order()

    response = test_client.post(
        f"/api/v1/orders/{order['id']}/authorize-transfer", json={"admin_id": "admin-1"}
    )

    assert response.status_code == 400


def test_cancel_order_notifies_branch(test_client: TestClient, place_order):
    order = place_order()

    response = test_client.post(
        f"/api/v1/orders/{order['id']}/cancel",
        json={"customer_id": "customer-1", "reason": "ordered twice"},
    )

    assert response.status_code == 200
    assert response.json()["status"] == "rejected"

    notifications = test_client.get(
        "/api/v1/branches/branch-1/notifications", params={"unread_only": True}
    ).json()
    assert notifications["unread"] == 1
    assert notifications["notifications"][0]["type"] == "order_cancelled"

    again = test_client.post(
        f"/api/v1/orders/{order['id']}/cancel",
        json={"customer_id": "customer-1", "reason": "ordered twice"},
    )
    assert again.status_code == 409


def test_report_delay_and_mark_notification_read(test_client: TestClient, place_order):
    order = place_order()
    advance(test_client, order["id"], "confirmed", "preparing", "ready", "dispatched")

    response = test_client.post(
        f"/api/v1/orders/{order['id']}/delays",
        json={"delivery_id": "driver-1", "delay_minutes": 10, "reason": "traffic"},
    )
    assert response.status_code == 200
    assert response.json()["status"] == "dispatched"

    [notification] = test_client.get("/api/v1/branches/branch-1/notifications").json()["notifications"]
    assert notification["type"] == "order_delayed"

    read = test_client.post(f"/api/v1/notifications/{notification['id']}/read")
    assert read.status_code == 200
    assert read.json()["read"] is True

    unread = test_client.get(
        "/api/v1/branches/branch-1/notifications", params={"unread_only": True}
    ).json()
    assert unread["notifications"] == []
    assert test_client.post("/api/v1/notifications/missing/read").status_code == 404


def test_prize_quote(test_client: TestClient):
    response = test_client.get("/api/v1/points/prizes/quote", params={"price": "89.50"})

    assert response.status_code == 200
    assert response.json() == {"price": "89.50", "conversion_rate": 10, "points_required": 895}


def test_health_and_root(test_client: TestClient):
    assert test_client.get("/health").json()["status"] == "healthy"
    assert test_client.get("/").json()["docs"] == "/docs"


def test_report_delay_on_rejected_order_conflicts(test_client: TestClient, place_order):
    order = place_order()
    test_client.post(
        f"/api/v1/orders/{order['id']}/cancel",
        json={"customer_id": "customer-1", "reason": "ordered twice"},
    )

    response = test_client.post(
        f"/api/v1/orders/{order['id']}/delays",
        json={"delivery_id": "driver-1", "delay_minutes": 10, "reason": "traffic"},
    )

    assert response.status_code == 409
    assert "closed" in response.json()["detail"]
