"""Register routes — feed, milk rejection, record category, repair and calf registers.

Invariants:
    - Conditional fields are cleared by their guard flag on create and update
    - Register-specific filters narrow the list
    - Every register exports with its own filename stem
"""

import pytest

FEED = {
    "date": "2026-10-18", "feed_type": "Silage", "appearance": "Dark patches",
    "smell": "Sour", "moisture_level": "High", "fit_for_use": "N", "unfit_quantity_kg": 40,
}
REJECTION = {
    "date": "2026-10-18", "rejection_reason": "Antibiotic residue", "animal_or_batch": "COW-004",
    "action_taken": "Milk discarded", "responsible_person": "Ravi",
}
CATEGORY = {
    "record_category": "Milk Records", "examples": "Daily yield sheet", "frequency": "Daily",
    "retention_period": "2 years", "format": "Excel",
}
REPAIR = {
    "date": "2026-10-18", "checked_area": "Shed 2 roof", "damage_type": "Leak",
    "immediate_action": "Tarp placed", "repair_needed": "Y", "completed_on": "2026-10-20",
}
CALF = {
    "calf_id": "CALF-01", "colostrum_given": True, "milk_feeding": "2 L twice daily",
    "starter_feed_started": "2026-10-01",
}
CALF_FEED = {
    "date": "2026-10-18", "calf_id": "CALF-01", "activity": "Morning feed",
    "feed_type": "Calf Starter", "quantity_grams": 250, "frequency": "Twice daily",
    "responsible_person": "Meena",
}


async def test_fit_feed_clears_unfit_quantity(client):
    res = await client.post("/api/v1/feed-inspections", json={**FEED, "fit_for_use": "Y"})
    assert res.status_code == 201
    assert res.json()["unfit_quantity_kg"] is None


async def test_unfit_feed_keeps_quantity_and_filters(client):
    created = (await client.post("/api/v1/feed-inspections", json=FEED)).json()
    assert created["unfit_quantity_kg"] == 40
    await client.post("/api/v1/feed-inspections", json={**FEED, "feed_type": "Dry Fodder", "fit_for_use": "Y"})
    res = await client.get("/api/v1/feed-inspections", params={"fit_for_use": "N"})
    assert [r["id"] for r in res.json()] == [created["id"]]
    res = await client.get("/api/v1/feed-inspections", params={"feed_type": "Dry Fodder"})
    assert len(res.json()) == 1


async def test_feed_update_marking_fit_clears_quantity(client):
    created = (await client.post("/api/v1/feed-inspections", json=FEED)).json()
    res = await client.put(
        f"/api/v1/feed-inspections/{created['id']}", json={**FEED, "fit_for_use": "Y"},
    )
    assert res.json()["unfit_quantity_kg"] is None


async def test_repair_not_needed_clears_completion(client):
    res = await client.post("/api/v1/repair-logs", json={**REPAIR, "repair_needed": "N"})
    assert res.json()["completed_on"] is None
    res = await client.post("/api/v1/repair-logs", json=REPAIR)
    assert res.json()["completed_on"] == "2026-10-20"
    res = await client.get("/api/v1/repair-logs", params={"repair_needed": "Y"})
    assert len(res.json()) == 1


async def test_milk_rejection_crud(client):
    created = (await client.post("/api/v1/milk-rejections", json=REJECTION)).json()
    url = f"/api/v1/milk-rejections/{created['id']}"
    res = await client.put(url, json={**REJECTION, "remarks": "Vet informed"})
    assert res.json()["remarks"] == "Vet informed"
    res = await client.get("/api/v1/milk-rejections", params={"search": "antibiotic"})
    assert len(res.json()) == 1
    assert (await client.delete(url)).status_code == 204
    assert (await client.get(url)).status_code == 404


async def test_record_category_frequency_filter_and_created_range(client):
    await client.post("/api/v1/record-categories", json=CATEGORY)
    await client.post("/api/v1/record-categories", json={**CATEGORY, "frequency": "Monthly"})
    res = await client.get("/api/v1/record-categories", params={"frequency": "Monthly"})
    assert len(res.json()) == 1
    res = await client.get("/api/v1/record-categories", params={"end_date": "2000-01-01"})
    assert res.json() == []


async def test_calf_feeding_colostrum_filter(client):
    await client.post("/api/v1/calf-feeding", json=CALF)
    await client.post("/api/v1/calf-feeding", json={**CALF, "calf_id": "CALF-02", "colostrum_given": False})
    res = await client.get("/api/v1/calf-feeding", params={"colostrum_given": "false"})
    assert [r["calf_id"] for r in res.json()] == ["CALF-02"]


async def test_calf_feed_register_defaults_and_filter(client):
    res = await client.post("/api/v1/calf-feed-register", json=CALF_FEED)
    assert res.json()["time_of_day"] == "08:00"
    await client.post("/api/v1/calf-feed-register", json={**CALF_FEED, "feed_type": "Milk Replacer"})
    res = await client.get("/api/v1/calf-feed-register", params={"feed_type": "Milk Replacer"})
    assert len(res.json()) == 1


@pytest.mark.parametrize("path, payload, stem", [
    ("feed-inspections", FEED, "feed_inspections"),
    ("milk-rejections", REJECTION, "milk_rejections"),
    ("record-categories", CATEGORY, "record_categories"),
    ("repair-logs", REPAIR, "repair_logs"),
    ("calf-feeding", CALF, "calf_feeding"),
    ("calf-feed-register", CALF_FEED, "calf_feed_register"),
])
async def test_register_export(client, path, payload, stem):
    assert (await client.post(f"/api/v1/{path}", json=payload)).status_code == 201
    res = await client.get(f"/api/v1/{path}/export", params={"format": "csv"})
    assert res.status_code == 200
    assert res.headers["content-disposition"] == f'attachment; filename="{stem}_2026-10-18.csv"'
    assert len(res.content.decode("utf-8-sig").splitlines()) == 2


@pytest.mark.parametrize("path", [
    "feed-inspections", "milk-rejections", "record-categories",
    "repair-logs", "calf-feeding", "calf-feed-register",
])
async def test_register_missing_record_is_404(client, path):
    res = await client.get(f"/api/v1/{path}/9999")
    assert res.status_code == 404
