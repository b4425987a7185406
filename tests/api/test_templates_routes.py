"""Roadmap Template Routes — create/read/update/delete contract.

Invariants:
    - POST returns 201 with a fresh cuid and created_at == modified_at
    - PUT refreshes modified_at, keeps cuid and created_at
    - GET/PUT/DELETE on an unknown cuid return 404 and mutate nothing
    - List is newest first
"""

from datetime import datetime


async def test_create_template_returns_201_with_cuid(client):
    res = await client.post(
        "/api/roadmap-templates",
        json={"name": "Q1 Plan", "description": "first"},
    )
    assert res.status_code == 201
    body = res.json()
    assert body["cuid"]
    assert body["name"] == "Q1 Plan"
    assert body["description"] == "first"


async def test_create_stamps_equal_timestamps(template):
    assert template["created_at"] == template["modified_at"]


async def test_repeated_creates_get_unique_cuids(client):
    cuids = set()
    for i in range(5):
        res = await client.post("/api/roadmap-templates", json={"name": f"T{i}"})
        cuids.add(res.json()["cuid"])
    assert len(cuids) == 5


async def test_get_template_by_cuid(client, template):
    res = await client.get(f"/api/roadmap-templates/{template['cuid']}")
    assert res.status_code == 200
    assert res.json() == template


async def test_get_unknown_template_returns_404(client):
    res = await client.get("/api/roadmap-templates/does-not-exist")
    assert res.status_code == 404
    assert res.json() == {"error": "Roadmap template not found"}


async def test_list_templates_newest_first(client):
    for name in ("first", "second", "third"):
        await client.post("/api/roadmap-templates", json={"name": name})
    res = await client.get("/api/roadmap-templates")
    assert res.status_code == 200
    assert [t["name"] for t in res.json()] == ["third", "second", "first"]


async def test_list_templates_empty(client):
    res = await client.get("/api/roadmap-templates")
    assert res.status_code == 200
    assert res.json() == []


async def test_update_template_refreshes_modified_at(client, template):
    res = await client.put(
        f"/api/roadmap-templates/{template['cuid']}",
        json={"name": "Q1 Plan v2", "description": "second"},
    )
    assert res.status_code == 200
    body = res.json()
    assert body["name"] == "Q1 Plan v2"
    assert body["cuid"] == template["cuid"]
    assert body["created_at"] == template["created_at"]
    assert (
        datetime.fromisoformat(body["modified_at"])
        > datetime.fromisoformat(template["modified_at"])
    )


async def test_update_omitted_description_becomes_null(client, template):
    res = await client.put(
        f"/api/roadmap-templates/{template['cuid']}", json={"name": "Renamed"},
    )
    assert res.status_code == 200
    assert res.json()["description"] is None


async def test_update_unknown_template_returns_404(client, template):
    res = await client.put(
        "/api/roadmap-templates/does-not-exist", json={"name": "Nope"},
    )
    assert res.status_code == 404
    assert res.json() == {"error": "Roadmap template not found"}

    unchanged = await client.get(f"/api/roadmap-templates/{template['cuid']}")
    assert unchanged.json() == template


async def test_delete_template(client, template):
    res = await client.delete(f"/api/roadmap-templates/{template['cuid']}")
    assert res.status_code == 200
    assert res.json() == {"message": "Roadmap template deleted successfully"}

    gone = await client.get(f"/api/roadmap-templates/{template['cuid']}")
    assert gone.status_code == 404


async def test_delete_unknown_template_returns_404(client, template):
    res = await client.delete("/api/roadmap-templates/does-not-exist")
    assert res.status_code == 404

    listing = await client.get("/api/roadmap-templates")
    assert [t["cuid"] for t in listing.json()] == [template["cuid"]]


async def test_create_without_name_returns_400(client):
    res = await client.post("/api/roadmap-templates", json={"description": "x"})
    assert res.status_code == 400
    body = res.json()
    assert body["error"] == "Invalid request data"
    assert body["details"][0]["field"] == "body.name"

    listing = await client.get("/api/roadmap-templates")
    assert listing.json() == []


async def test_create_with_blank_name_returns_400(client):
    res = await client.post("/api/roadmap-templates", json={"name": "   "})
    assert res.status_code == 400
