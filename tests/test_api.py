from unittest import mock

import pytest

from rest_framework.test import APIClient

from assistant.models import Recommendation


# ---------------- services ----------------

def test_service_list(api_client, catalog):
    resp = api_client.get("/api/services/")
    assert resp.status_code == 200
    assert [s["id"] for s in resp.data] == [s.id for s in catalog]


def test_service_list_filters(api_client):
    resp = api_client.get("/api/services/", {"category": "Plumbing", "q": "TAP"})
    assert resp.status_code == 200
    assert [s["id"] for s in resp.data] == ["pl-1"]


def test_service_list_unknown_category(api_client):
    resp = api_client.get("/api/services/", {"category": "Gardening"})
    assert resp.status_code == 400
    assert "category" in resp.data


def test_service_categories(api_client):
    resp = api_client.get("/api/services/categories/")
    assert resp.status_code == 200
    assert [g["name"] for g in resp.data] == [
        "AC Services", "Plumbing", "Electrical", "Appliances", "Smart Home",
    ]
    assert len(resp.data[0]["services"]) == 4


def test_service_detail(api_client):
    resp = api_client.get("/api/services/ac-2/")
    assert resp.status_code == 200
    assert resp.data["price"] == 2499

    resp = api_client.get("/api/services/nope/")
    assert resp.status_code == 404
    assert resp.data == {"error": "Service not found"}


# ---------------- cart ----------------

def test_cart_starts_empty(api_client):
    resp = api_client.get("/api/cart/")
    assert resp.data == {"items": [], "total": 0, "count": 0}


def test_add_to_cart(api_client):
    resp = api_client.post("/api/cart/items/", {"service_id": "el-2"}, format="json")
    assert resp.status_code == 200
    assert resp.data["reveal_cart"] is True
    assert resp.data["count"] == 1
    assert resp.data["items"][0]["service"]["id"] == "el-2"

    resp = api_client.post("/api/cart/items/", {"service_id": "el-2"}, format="json")
    assert resp.data["reveal_cart"] is False
    assert resp.data["items"][0]["quantity"] == 2
    assert resp.data["total"] == 298


def test_add_unknown_service(api_client):
    resp = api_client.post("/api/cart/items/", {"service_id": "zz-1"}, format="json")
    assert resp.status_code == 404

    resp = api_client.post("/api/cart/items/", {}, format="json")
    assert resp.status_code == 400


def test_quantity_delta(api_client):
    api_client.post("/api/cart/items/", {"service_id": "pl-1"}, format="json")

    resp = api_client.patch("/api/cart/items/pl-1/", {"delta": -1}, format="json")
    assert resp.data["changed"] is False
    assert resp.data["items"][0]["quantity"] == 1

    resp = api_client.patch("/api/cart/items/pl-1/", {"delta": 2}, format="json")
    assert resp.data["changed"] is True
    assert resp.data["count"] == 3

    resp = api_client.patch("/api/cart/items/pl-1/", {"delta": "lots"}, format="json")
    assert resp.status_code == 400


def test_remove_and_clear(api_client):
    api_client.post("/api/cart/items/", {"service_id": "pl-1"}, format="json")
    api_client.post("/api/cart/items/", {"service_id": "ac-1"}, format="json")

    resp = api_client.delete("/api/cart/items/pl-1/")
    assert [i["service"]["id"] for i in resp.data["items"]] == ["ac-1"]

    resp = api_client.delete("/api/cart/items/pl-1/")
    assert resp.status_code == 200

    resp = api_client.delete("/api/cart/")
    assert resp.data["count"] == 0


def test_cart_is_per_session(api_client):
    api_client.post("/api/cart/items/", {"service_id": "pl-1"}, format="json")
    other = APIClient()
    assert other.get("/api/cart/").data["count"] == 0


# ---------------- bookings ----------------

def test_booking_flow_end_to_end(api_client, schedule_data, contact_data):
    api_client.post("/api/cart/items/", {"service_id": "ac-1"}, format="json")

    resp = api_client.get("/api/bookings/")
    assert resp.data["step"] == "SCHEDULE"
    assert resp.data["total"] == 699
    assert len(resp.data["time_slots"]) == 4

    resp = api_client.post("/api/bookings/schedule/", schedule_data, format="json")
    assert resp.status_code == 200
    assert resp.data["step"] == "CONTACT"

    resp = api_client.post("/api/bookings/submit/", contact_data, format="json")
    assert resp.status_code == 201
    confirmation = resp.data["confirmation"]
    assert confirmation["date"] == "2024-01-01"
    assert confirmation["time"] == "09:00 - 11:00"
    assert confirmation["phone"] == "9876543210"
    assert resp.data["booking"]["total"] == 699
    assert resp.data["booking"]["details"]["time_label"] == "09:00 AM - 11:00 AM"

    assert api_client.get("/api/cart/").data["count"] == 0
    assert api_client.get("/api/bookings/").data["step"] == "SCHEDULE"
    assert api_client.get("/api/bookings/confirmation/").data == confirmation

    resp = api_client.post("/api/bookings/submit/", contact_data, format="json")
    assert resp.status_code == 400

    api_client.delete("/api/bookings/confirmation/")
    assert api_client.get("/api/bookings/confirmation/").status_code == 404


def test_booking_schedule_missing_address(api_client, schedule_data):
    data = dict(schedule_data, address="")
    resp = api_client.post("/api/bookings/schedule/", data, format="json")
    assert resp.status_code == 400
    assert resp.data["non_field_errors"] == ["Please fill in all fields."]
    assert api_client.get("/api/bookings/").data["step"] == "SCHEDULE"


def test_booking_back(api_client, schedule_data):
    resp = api_client.post("/api/bookings/back/")
    assert resp.status_code == 400
    assert "error" in resp.data

    api_client.post("/api/bookings/schedule/", schedule_data, format="json")
    resp = api_client.post("/api/bookings/back/")
    assert resp.data["step"] == "SCHEDULE"
    assert resp.data["data"]["address"] == "X"


def test_booking_submit_with_empty_cart(api_client, schedule_data, contact_data):
    api_client.post("/api/bookings/schedule/", schedule_data, format="json")
    resp = api_client.post("/api/bookings/submit/", contact_data, format="json")
    assert resp.status_code == 400
    assert resp.data == {"error": "Your cart is empty"}


def test_booking_submit_invalid_phone(api_client, schedule_data, contact_data):
    api_client.post("/api/cart/items/", {"service_id": "ac-1"}, format="json")
    api_client.post("/api/bookings/schedule/", schedule_data, format="json")
    resp = api_client.post("/api/bookings/submit/", dict(contact_data, phone="98765"), format="json")
    assert resp.status_code == 400
    assert "phone" in resp.data
    assert api_client.get("/api/cart/").data["count"] == 1


# ---------------- chat ----------------

@pytest.fixture
def recommend_tap():
    with mock.patch(
        "assistant.chat.recommend",
        return_value=Recommendation("pl-1", "A new spindle will stop the drip."),
    ) as patched:
        yield patched


def test_chat_history_starts_with_greeting(api_client):
    resp = api_client.get("/api/chat/")
    assert resp.status_code == 200
    assert len(resp.data["messages"]) == 1
    assert resp.data["messages"][0]["role"] == "assistant"


def test_chat_send(api_client, recommend_tap):
    resp = api_client.post("/api/chat/", {"message": "my tap drips"}, format="json")
    assert resp.status_code == 200
    recommend_tap.assert_called_once_with("my tap drips")
    assert [m["service_id"] for m in resp.data["replies"]] == [None, "pl-1"]
    assert len(api_client.get("/api/chat/").data["messages"]) == 4


def test_chat_send_blank(api_client):
    resp = api_client.post("/api/chat/", {"message": "  "}, format="json")
    assert resp.status_code == 400


def test_chat_fallback_without_api_key(api_client):
    resp = api_client.post("/api/chat/", {"message": "my fan wobbles"}, format="json")
    assert resp.status_code == 200
    assert resp.data["replies"][0]["text"].startswith("I'm having trouble connecting")


def test_chat_book_adds_recommended_service(api_client, recommend_tap):
    resp = api_client.post("/api/chat/book/", {"service_id": "pl-1"}, format="json")
    assert resp.status_code == 400

    api_client.post("/api/chat/", {"message": "my tap drips"}, format="json")
    resp = api_client.post("/api/chat/book/", {"service_id": "pl-1"}, format="json")
    assert resp.status_code == 200
    assert resp.data["reveal_cart"] is True
    assert api_client.get("/api/cart/").data["items"][0]["service"]["id"] == "pl-1"


def test_chat_reset(api_client, recommend_tap):
    api_client.post("/api/chat/", {"message": "my tap drips"}, format="json")
    resp = api_client.delete("/api/chat/")
    assert len(resp.data["messages"]) == 1
