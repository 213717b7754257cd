"""Catalog API tests — buses, hotels, trains.

Learn: The catalog has no business rules, so these only check that the
generic repository round-trips rows and reports missing ids as 404.
"""

import pytest


# ═══════════════════════════════════════════════════════════
# Buses
# ═══════════════════════════════════════════════════════════


@pytest.mark.asyncio
async def test_bus_crud(client):
    r = await client.post(
        "/api/buses",
        json={"bus_name": "Night Rider", "route": "Pune-Goa", "bus_type": "sleeper", "capacity": 36},
    )
    assert r.status_code == 201
    bus = r.json()
    assert bus["capacity"] == 36

    r = await client.get(f"/api/buses/{bus['id']}")
    assert r.status_code == 200
    assert r.json()["bus_name"] == "Night Rider"

    r = await client.put(
        f"/api/buses/{bus['id']}",
        json={"bus_name": "Day Rider", "route": "Pune-Goa", "bus_type": "seater", "capacity": 40},
    )
    assert r.status_code == 200
    assert r.json()["bus_type"] == "seater"

    r = await client.get("/api/buses/")
    assert [b["bus_name"] for b in r.json()] == ["Day Rider"]

    r = await client.delete(f"/api/buses/{bus['id']}")
    assert r.status_code == 204
    r = await client.get(f"/api/buses/{bus['id']}")
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_bus_put_replaces_all_fields(client):
    r = await client.post("/api/buses", json={"bus_name": "B", "capacity": 10})
    bus_id = r.json()["id"]

    r = await client.put(f"/api/buses/{bus_id}", json={"bus_name": "B2"})
    assert r.json()["capacity"] is None


@pytest.mark.asyncio
async def test_bus_missing(client):
    assert (await client.put("/api/buses/77", json={"bus_name": "x"})).status_code == 404
    assert (await client.delete("/api/buses/77")).status_code == 404


@pytest.mark.asyncio
async def test_bus_list_without_trailing_slash(client):
    await client.post("/api/buses", json={"bus_name": "Only"})
    r = await client.get("/api/buses")
    assert r.status_code == 200
    assert len(r.json()) == 1


# ═══════════════════════════════════════════════════════════
# Hotels
# ═══════════════════════════════════════════════════════════


@pytest.mark.asyncio
async def test_hotel_filters(client):
    for name, location in [("Sea View", "Goa"), ("Hill Top", "Manali"), ("Palm", "Goa")]:
        r = await client.post(
            "/api/hotels",
            json={"name": name, "location": location, "price": 80.0, "rating": 4.2},
        )
        assert r.status_code == 201

    r = await client.get("/api/hotels")
    assert len(r.json()) == 3

    r = await client.get("/api/hotels", params={"location": "Goa"})
    assert [h["name"] for h in r.json()] == ["Sea View", "Palm"]

    r = await client.get("/api/hotels", params={"name": "Hill Top"})
    assert [h["location"] for h in r.json()] == ["Manali"]


@pytest.mark.asyncio
async def test_hotel_rating_out_of_range(client):
    r = await client.post("/api/hotels", json={"name": "Too Good", "rating": 6})
    assert r.status_code == 400


# ═══════════════════════════════════════════════════════════
# Trains
# ═══════════════════════════════════════════════════════════


@pytest.mark.asyncio
async def test_train_create_and_list(client):
    r = await client.post(
        "/api/trains",
        json={
            "train_name": "Rajdhani",
            "train_number": "12951",
            "source_station": "Mumbai Central",
            "destination_station": "New Delhi",
            "departure_time": "17:00:00",
            "arrival_time": "08:32:00",
            "travel_date": "2026-12-01",
            "price": 3100.5,
            "seats_available": 120,
        },
    )
    assert r.status_code == 201

    r = await client.get("/api/trains")
    assert r.status_code == 200
    trains = r.json()
    assert len(trains) == 1
    assert trains[0]["departure_time"] == "17:00:00"
    assert trains[0]["travel_date"] == "2026-12-01"
