"""Purchase approval routes — pending-only edits, decisions and summary."""

REQUEST = {
    "date": "2026-10-18", "item_type": "FEED", "item_requested": "Silage bales",
    "quantity": 20, "requested_by": "Ravi", "supervisor_id": "sup-1",
}


async def _request(client, **overrides):
    res = await client.post("/api/v1/purchase-approvals", json={**REQUEST, **overrides})
    assert res.status_code == 201
    return res.json()


async def test_new_request_is_pending(client):
    body = await _request(client)
    assert body["approval_status"] == "P"
    assert body["approved_by"] is None


async def test_approve_with_adjusted_quantity(client):
    req = await _request(client)
    res = await client.patch(f"/api/v1/purchase-approvals/{req['id']}/decision", json={
        "decision": "approve", "approved_by": "Admin", "quantity": 15,
    })
    assert res.status_code == 200
    body = res.json()
    assert body["approval_status"] == "A"
    assert body["approved_by"] == "Admin"
    assert body["quantity"] == 15


async def test_reject_requires_remarks(client):
    req = await _request(client)
    res = await client.patch(f"/api/v1/purchase-approvals/{req['id']}/decision", json={
        "decision": "reject", "approved_by": "Admin",
    })
    assert res.status_code == 400


async def test_decided_request_cannot_be_decided_again(client):
    req = await _request(client)
    url = f"/api/v1/purchase-approvals/{req['id']}/decision"
    await client.patch(url, json={
        "decision": "reject", "approved_by": "Admin", "approver_remarks": "Stock enough",
    })
    res = await client.patch(url, json={"decision": "approve", "approved_by": "Admin"})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "APPROVAL_ALREADY_DECIDED"


async def test_decided_request_cannot_be_edited(client):
    req = await _request(client)
    await client.patch(f"/api/v1/purchase-approvals/{req['id']}/decision", json={
        "decision": "approve", "approved_by": "Admin",
    })
    res = await client.put(f"/api/v1/purchase-approvals/{req['id']}", json=REQUEST)
    assert res.status_code == 400


async def test_pending_request_edit_keeps_status(client):
    req = await _request(client)
    res = await client.put(
        f"/api/v1/purchase-approvals/{req['id']}", json={**REQUEST, "quantity": 25},
    )
    assert res.status_code == 200
    assert res.json()["quantity"] == 25
    assert res.json()["approval_status"] == "P"


async def test_filters_and_summary(client):
    first = await _request(client)
    await _request(client, item_type="MEDICINE", item_requested="Calcium")
    await _request(client, supervisor_id="sup-2")
    await client.patch(f"/api/v1/purchase-approvals/{first['id']}/decision", json={
        "decision": "approve", "approved_by": "Admin",
    })

    res = await client.get("/api/v1/purchase-approvals", params={"approval_status": "P"})
    assert len(res.json()) == 2
    res = await client.get("/api/v1/purchase-approvals", params={"item_type": "MEDICINE"})
    assert [r["item_requested"] for r in res.json()] == ["Calcium"]
    res = await client.get("/api/v1/purchase-approvals", params={"supervisor_id": "sup-1"})
    assert len(res.json()) == 2

    res = await client.get("/api/v1/purchase-approvals/summary")
    assert res.json() == {"total_records": 3, "pending": 2, "approved": 1, "rejected": 0}


async def test_unknown_request_is_404(client):
    res = await client.patch("/api/v1/purchase-approvals/999/decision", json={
        "decision": "approve", "approved_by": "Admin",
    })
    assert res.status_code == 404


async def test_delete_decided_request(client):
    req = await _request(client)
    await client.patch(f"/api/v1/purchase-approvals/{req['id']}/decision", json={
        "decision": "approve", "approved_by": "Admin",
    })
    res = await client.delete(f"/api/v1/purchase-approvals/{req['id']}")
    assert res.status_code == 204


async def test_export_uses_status_labels(client):
    await _request(client)
    res = await client.get("/api/v1/purchase-approvals/export", params={"format": "csv"})
    text = res.content.decode("utf-8-sig")
    assert "Pending" in text
    assert "18/10/2026" in text
