"""Template Task Routes — insertion ordering and area/phase reference checks.

Invariants:
    - Tasks list in insertion order, scoped to their template
    - area_id / phase_id must belong to the task's own template (400 otherwise)
    - DELETE then GET returns 404
"""

from datetime import datetime


async def _create(client, path, payload):
    res = await client.post(path, json=payload)
    assert res.status_code == 201, res.json()
    return res.json()


async def test_create_task_with_area_and_phase(client, template):
    tid = template["cuid"]
    area = await _create(
        client, f"/api/roadmap-templates/{tid}/areas",
        {"name": "Area A", "displaySequence": 1},
    )
    phase = await _create(
        client, f"/api/roadmap-templates/{tid}/phases",
        {"name": "Phase 1", "displaySequence": 1},
    )
    task = await _create(
        client, f"/api/roadmap-templates/{tid}/tasks",
        {
            "name": "Write brief",
            "area_id": area["cuid"],
            "phase_id": phase["cuid"],
            "optional_flag": True,
            "state": "open",
            "status": "on-track",
            "pct_weight": 10,
        },
    )
    assert task["parent_key"] == tid
    assert task["area_id"] == area["cuid"]
    assert task["phase_id"] == phase["cuid"]
    assert task["optional_flag"] is True
    assert task["status"] == "on-track"


async def test_task_optional_flag_defaults_false(client, template):
    task = await _create(
        client, f"/api/roadmap-templates/{template['cuid']}/tasks", {"name": "T"},
    )
    assert task["optional_flag"] is False
    assert task["area_id"] is None


async def test_list_tasks_in_insertion_order(client, template):
    tid = template["cuid"]
    for name in ("c", "a", "b"):
        await _create(client, f"/api/roadmap-templates/{tid}/tasks", {"name": name})

    res = await client.get(f"/api/roadmap-templates/{tid}/tasks")
    assert [t["name"] for t in res.json()] == ["c", "a", "b"]


async def test_task_with_dangling_area_returns_400(client, template):
    tid = template["cuid"]
    res = await client.post(
        f"/api/roadmap-templates/{tid}/tasks",
        json={"name": "T", "area_id": "no-such-area"},
    )
    assert res.status_code == 400
    assert res.json()["details"][0]["field"] == "area_id"

    listing = await client.get(f"/api/roadmap-templates/{tid}/tasks")
    assert listing.json() == []


async def test_task_rejects_phase_from_other_template(client, template):
    other = await _create(client, "/api/roadmap-templates", {"name": "Other"})
    foreign_phase = await _create(
        client, f"/api/roadmap-templates/{other['cuid']}/phases",
        {"name": "Elsewhere", "displaySequence": 0},
    )
    res = await client.post(
        f"/api/roadmap-templates/{template['cuid']}/tasks",
        json={"name": "T", "phase_id": foreign_phase["cuid"]},
    )
    assert res.status_code == 400
    assert res.json()["details"][0]["field"] == "phase_id"


async def test_update_task_checks_references(client, template):
    task = await _create(
        client, f"/api/roadmap-templates/{template['cuid']}/tasks", {"name": "T"},
    )
    res = await client.put(
        f"/api/tasks/{task['cuid']}", json={"name": "T", "area_id": "ghost"},
    )
    assert res.status_code == 400

    unchanged = await client.get(f"/api/tasks/{task['cuid']}")
    assert unchanged.json() == task


async def test_update_unknown_task_with_references_returns_404(client):
    res = await client.put(
        "/api/tasks/missing", json={"name": "T", "area_id": "ghost"},
    )
    assert res.status_code == 404
    assert res.json() == {"error": "Task not found"}


async def test_update_task(client, template):
    task = await _create(
        client, f"/api/roadmap-templates/{template['cuid']}/tasks",
        {"name": "T", "status": "late"},
    )
    res = await client.put(
        f"/api/tasks/{task['cuid']}", json={"name": "T2", "pct_complete": 100},
    )
    assert res.status_code == 200
    body = res.json()
    assert body["name"] == "T2"
    assert body["pct_complete"] == 100
    assert body["status"] is None
    assert datetime.fromisoformat(body["modified_at"]) > datetime.fromisoformat(
        task["modified_at"],
    )


async def test_delete_task_then_get_returns_404(client, template):
    task = await _create(
        client, f"/api/roadmap-templates/{template['cuid']}/tasks", {"name": "T"},
    )
    res = await client.delete(f"/api/tasks/{task['cuid']}")
    assert res.status_code == 200
    assert res.json() == {"message": "Task deleted successfully"}

    gone = await client.get(f"/api/tasks/{task['cuid']}")
    assert gone.status_code == 404
    assert gone.json() == {"error": "Task not found"}
