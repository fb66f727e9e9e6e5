from __future__ import annotations

from uuid import uuid4

from sqlalchemy import select

from src.infrastructure.db.orm.delivery_record import DeliveryRecordORM


async def test_record_for_day_is_joined_with_customer(client, make_customer):
    raju = await make_customer("Raju", daily_amount=1)
    resp = await client.post(
        "/records", json={"customerId": raju["id"], "date": "2024-01-10", "morningAmount": 2}
    )
    assert resp.status_code == 201, resp.text
    created = resp.json()
    assert created["customerName"] == "Raju"
    assert created["customer"]["customerType"] == "regular"
    assert created["quantity"] == 2

    listed = await client.get("/records", params={"date": "2024-01-10"})
    assert listed.status_code == 200
    items = listed.json()
    assert len(items) == 1
    assert items[0]["id"] == created["id"]
    assert items[0]["customerName"] == "Raju"
    assert items[0]["date"] == "2024-01-10"
    assert items[0]["quantity"] == 2

    other_day = await client.get("/records", params={"date": "2024-01-11"})
    assert other_day.json() == []


async def test_inactive_customer_records_are_hidden_not_deleted(app, client, make_customer):
    raju = await make_customer("Raju")
    resp = await client.post(
        "/records", json={"customerId": raju["id"], "date": "2024-01-10", "morningAmount": 2}
    )
    record_id = resp.json()["id"]

    await client.put(f"/customers/{raju['id']}", json={"isActive": False})

    assert (await client.get("/records", params={"date": "2024-01-10"})).json() == []
    assert (await client.get("/records")).json() == []
    hidden_update = await client.put(f"/records/{record_id}", json={"morningAmount": 5})
    assert hidden_update.status_code == 404

    async with app.state.session_factory() as session:
        result = await session.execute(select(DeliveryRecordORM))
        assert len(result.scalars().all()) == 1

    await client.put(f"/customers/{raju['id']}", json={"isActive": True})
    assert len((await client.get("/records")).json()) == 1


async def test_deleted_customer_records_are_orphaned_and_hidden(app, client, make_customer):
    raju = await make_customer("Raju")
    await client.post("/records", json={"customerId": raju["id"], "date": "2024-01-10"})

    assert (await client.delete(f"/customers/{raju['id']}")).status_code == 200
    assert (await client.get("/records")).json() == []

    async with app.state.session_factory() as session:
        result = await session.execute(select(DeliveryRecordORM))
        assert len(result.scalars().all()) == 1


async def test_create_record_requires_active_customer(client, make_customer):
    raju = await make_customer("Raju")
    await client.put(f"/customers/{raju['id']}", json={"isActive": False})

    inactive = await client.post("/records", json={"customerId": raju["id"], "date": "2024-01-10"})
    assert inactive.status_code == 400
    assert inactive.json() == {"error": "Customer not found or inactive"}

    unknown = await client.post("/records", json={"customerId": str(uuid4()), "date": "2024-01-10"})
    assert unknown.status_code == 400

    malformed = await client.post("/records", json={"customerId": "abc", "date": "2024-01-10"})
    assert malformed.status_code == 400
    assert malformed.json() == {"error": "Invalid customer ID"}

    no_date = await client.post("/records", json={"customerId": raju["id"]})
    assert no_date.status_code == 400


async def test_quantities_follow_customer_type(client, make_customer):
    regular = await make_customer("Regular", daily_amount=1.5)
    milkman = await make_customer("Milkman", "milkman", 0)

    default = await client.post(
        "/records", json={"customerId": regular["id"], "date": "2024-01-10", "eveningAmount": 9}
    )
    assert default.json()["quantity"] == 1.5
    assert default.json()["morningAmount"] is None

    zero_morning = await client.post(
        "/records", json={"customerId": regular["id"], "date": "2024-01-10", "morningAmount": 0}
    )
    assert zero_morning.json()["quantity"] == 1.5

    both = await client.post(
        "/records",
        json={
            "customerId": milkman["id"],
            "date": "2024-01-10",
            "morningAmount": 2,
            "eveningAmount": 1.5,
        },
    )
    assert both.json()["quantity"] == 3.5

    empty = await client.post("/records", json={"customerId": milkman["id"], "date": "2024-01-10"})
    assert empty.status_code == 201
    assert empty.json()["quantity"] == 0

    # Same-day duplicates are allowed
    assert len((await client.get("/records", params={"date": "2024-01-10"})).json()) == 4


async def test_timestamp_dates_resolve_to_local_day(client, make_customer):
    raju = await make_customer("Raju")
    # 20:00 UTC is already the next morning in Asia/Kolkata
    resp = await client.post(
        "/records", json={"customerId": raju["id"], "date": "2024-01-10T20:00:00Z"}
    )
    assert resp.status_code == 201
    assert resp.json()["date"] == "2024-01-11"

    bad = await client.get("/records", params={"date": "10/01/2024"})
    assert bad.status_code == 400


async def test_update_record_changes_amounts_only(client, make_customer):
    raju = await make_customer("Raju", daily_amount=1)
    other = await make_customer("Other")
    created = (
        await client.post(
            "/records", json={"customerId": raju["id"], "date": "2024-01-10", "morningAmount": 2}
        )
    ).json()

    resp = await client.put(
        f"/records/{created['id']}",
        json={"morningAmount": 3, "customerId": other["id"], "date": "2024-02-01"},
    )
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["morningAmount"] == 3
    assert body["quantity"] == 3
    assert body["customerId"] == raju["id"]
    assert body["date"] == "2024-01-10"

    cleared = await client.put(f"/records/{created['id']}", json={"morningAmount": None})
    assert cleared.json()["morningAmount"] is None
    assert cleared.json()["quantity"] == 1

    missing = await client.put(f"/records/{uuid4()}", json={"morningAmount": 1})
    assert missing.status_code == 404
    assert missing.json() == {"error": "Record not found"}


async def test_delete_record_fails_when_missing(client, make_customer):
    raju = await make_customer("Raju")
    created = (
        await client.post("/records", json={"customerId": raju["id"], "date": "2024-01-10"})
    ).json()

    resp = await client.delete(f"/records/{created['id']}")
    assert resp.status_code == 200
    assert resp.json() == {"message": "Record deleted successfully"}

    again = await client.delete(f"/records/{created['id']}")
    assert again.status_code == 404

    malformed = await client.delete("/records/xyz")
    assert malformed.status_code == 400
    assert malformed.json() == {"error": "Invalid record ID"}


async def test_delete_record_of_inactive_customer_is_not_found(app, client, make_customer):
    raju = await make_customer("Raju")
    created = (
        await client.post("/records", json={"customerId": raju["id"], "date": "2024-01-10"})
    ).json()

    await client.put(f"/customers/{raju['id']}", json={"isActive": False})

    resp = await client.delete(f"/records/{created['id']}")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Record not found"}

    async with app.state.session_factory() as session:
        result = await session.execute(select(DeliveryRecordORM))
        assert len(result.scalars().all()) == 1

    await client.put(f"/customers/{raju['id']}", json={"isActive": True})
    assert (await client.delete(f"/records/{created['id']}")).status_code == 200


async def test_record_amount_precision_is_limited_to_three_places(client, make_customer):
    raju = await make_customer("Raju")
    too_precise = await client.post(
        "/records",
        json={"customerId": raju["id"], "date": "2024-01-10", "morningAmount": 1.23456},
    )
    assert too_precise.status_code == 400
    assert (await client.get("/records")).json() == []

    created = await client.post(
        "/records",
        json={"customerId": raju["id"], "date": "2024-01-10", "eveningAmount": 0.125},
    )
    assert created.status_code == 201, created.text

    bad_update = await client.put(
        f"/records/{created.json()['id']}", json={"eveningAmount": 2.0005}
    )
    assert bad_update.status_code == 400
    assert (await client.get("/records")).json()[0]["eveningAmount"] == 0.125
