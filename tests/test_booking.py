# tests/test_booking.py

from datetime import date, timedelta

NEXT_WEEK = date.today() + timedelta(days=7)


def booking(**overrides):
    body = {
        "service_id": 1,
        "stylist_id": 2,
        "first_name": "Lucía",
        "last_name": "Gómez",
        "email": "lucia@example.com",
        "phone": "+54 11 5555-0000",
        "date": NEXT_WEEK.isoformat(),
        "time": "11:00",
        "comments": "Primera visita",
    }
    body.update(overrides)
    return body


def test_create_appointment_starts_pending(client):
    resp = client.post("/api/appointments", json=booking())
    assert resp.status_code == 201
    data = resp.json()
    assert data["id"] >= 1
    assert data["status"] == "pending"
    assert data["date"] == NEXT_WEEK.isoformat()
    assert data["time"] == "11:00"
    assert data["stylist_id"] == 2


def test_stylist_and_comments_are_optional(client):
    body = booking()
    del body["stylist_id"]
    del body["comments"]
    resp = client.post("/api/appointments", json=body)
    assert resp.status_code == 201
    assert resp.json()["stylist_id"] is None
    assert resp.json()["comments"] is None


def test_same_slot_cannot_be_booked_twice(client):
    assert client.post("/api/appointments", json=booking()).status_code == 201
    resp = client.post("/api/appointments", json=booking(email="otra@example.com"))
    assert resp.status_code == 409
    assert resp.json()["detail"] == "Time slot already booked"


def test_same_time_on_another_day_is_fine(client):
    assert client.post("/api/appointments", json=booking()).status_code == 201
    other_day = (NEXT_WEEK + timedelta(days=1)).isoformat()
    assert client.post("/api/appointments", json=booking(date=other_day)).status_code == 201


def test_past_date_rejected(client):
    yesterday = (date.today() - timedelta(days=1)).isoformat()
    resp = client.post("/api/appointments", json=booking(date=yesterday))
    assert resp.status_code == 422
    assert "past" in resp.json()["detail"]


def test_time_outside_daily_list_rejected(client):
    resp = client.post("/api/appointments", json=booking(time="09:00"))
    assert resp.status_code == 422
    assert resp.json()["detail"] == "Time slot not offered"


def test_schema_errors_are_400(client):
    resp = client.post("/api/appointments", json=booking(email="not-an-email"))
    assert resp.status_code == 400
    assert "email" in resp.json()["detail"]

    resp = client.post("/api/appointments", json=booking(time="25:00"))
    assert resp.status_code == 400

    body = booking()
    del body["phone"]
    resp = client.post("/api/appointments", json=body)
    assert resp.status_code == 400
    assert any(e["loc"][-1] == "phone" for e in resp.json()["errors"])


def test_appointments_by_date_hide_customer_details(client):
    client.post("/api/appointments", json=booking(time="14:00"))
    client.post("/api/appointments", json=booking(time="10:00"))

    resp = client.get(f"/api/appointments/{NEXT_WEEK.isoformat()}")
    assert resp.status_code == 200
    data = resp.json()
    assert [a["time"] for a in data] == ["10:00", "14:00"]
    assert set(data[0]) == {"date", "time", "status"}


def test_availability_endpoint(client):
    client.post("/api/appointments", json=booking(time="12:00"))

    resp = client.get("/api/availability", params={"date": NEXT_WEEK.isoformat()})
    assert resp.status_code == 200
    data = resp.json()
    assert data["booked_times"] == ["12:00"]
    assert "12:00" in data["time_slots"]
    assert "12:00" not in data["available_times"]
    assert len(data["available_times"]) == len(data["time_slots"]) - 1


def test_availability_requires_a_valid_date(client):
    assert client.get("/api/availability").status_code == 400
    assert client.get("/api/availability", params={"date": "mañana"}).status_code == 400


def test_names_and_phone_need_minimum_length(client):
    assert client.post("/api/appointments", json=booking(first_name="L")).status_code == 400
    assert client.post("/api/appointments", json=booking(last_name="G")).status_code == 400
    resp = client.post("/api/appointments", json=booking(phone="555-12"))
    assert resp.status_code == 400
    assert "phone" in resp.json()["detail"]
