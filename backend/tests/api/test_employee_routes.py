"""Employee routes — server-assigned ids, updates, soft toggle and export."""

import csv
import io

STAFF = {"staff_name": "Ravi Kumar", "designation": "Milker", "payment_per_day": 450}


async def _hire(client, **overrides):
    res = await client.post("/api/v1/employees", json={**STAFF, **overrides})
    assert res.status_code == 201
    return res.json()


async def test_first_employee_gets_year_scoped_id(client):
    assert (await _hire(client))["employee_id"] == "NDF-2026001"


async def test_ids_continue_from_max_serial(client):
    await _hire(client, employee_id="NDF-2026005")
    assert (await _hire(client))["employee_id"] == "NDF-2026006"


async def test_next_id_preview_matches_create(client):
    await _hire(client)
    preview = (await client.get("/api/v1/employees/next-id")).json()["employee_id"]
    assert preview == "NDF-2026002"
    assert (await _hire(client))["employee_id"] == preview


async def test_caller_supplied_duplicate_is_409(client):
    await _hire(client, employee_id="NDF-2026001")
    res = await client.post("/api/v1/employees", json={**STAFF, "employee_id": "NDF-2026001"})
    assert res.status_code == 409


async def test_put_replaces_fields_but_not_id(client):
    emp = await _hire(client)
    res = await client.put(f"/api/v1/employees/{emp['employee_id']}", json={
        "staff_name": "Ravi K", "designation": "Supervisor", "payment_per_day": 600,
    })
    assert res.status_code == 200
    body = res.json()
    assert body["employee_id"] == emp["employee_id"]
    assert body["designation"] == "Supervisor"


async def test_patch_and_toggle(client):
    emp = await _hire(client)
    url = f"/api/v1/employees/{emp['employee_id']}"
    res = await client.patch(url, json={"payment_per_day": 500})
    assert res.json()["payment_per_day"] == 500
    res = await client.post(f"{url}/toggle-active")
    assert res.json()["is_active"] is False


async def test_filter_by_designation_case_insensitive(client):
    await _hire(client)
    await _hire(client, staff_name="Meena", designation="Supervisor")
    res = await client.get("/api/v1/employees", params={"designation": "supervisor"})
    assert [e["staff_name"] for e in res.json()] == ["Meena"]


async def test_search_by_name(client):
    await _hire(client)
    await _hire(client, staff_name="Meena", designation="Supervisor")
    res = await client.get("/api/v1/employees", params={"search": "ravi"})
    assert len(res.json()) == 1


async def test_delete(client):
    emp = await _hire(client)
    res = await client.delete(f"/api/v1/employees/{emp['employee_id']}")
    assert res.status_code == 204
    assert (await client.get(f"/api/v1/employees/{emp['employee_id']}")).status_code == 404


async def test_csv_export_formats_wage(client):
    await _hire(client, payment_per_day=1250)
    res = await client.get("/api/v1/employees/export", params={"format": "csv"})
    assert res.status_code == 200
    assert res.headers["content-disposition"] == 'attachment; filename="employees_2026-10-18.csv"'
    rows = list(csv.reader(io.StringIO(res.content.decode("utf-8-sig"))))
    assert rows[0][:4] == ["Employee ID", "Staff Name", "Designation", "Payment / Day"]
    assert rows[1][3] == "₹1,250.00"
    assert len(rows) == 2
