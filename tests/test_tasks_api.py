import pytest


def _create(client, headers, name, description="a valid description", is_active=False):
    return client.post(
        "/task/create",
        data={"name": name, "description": description, "is_active": is_active},
        headers=headers,
    )


def test_create_requires_token(client):
    r = client.post("/task/create", data={"name": "Task", "description": "no token here"})
    assert r.status_code == 401
    assert r.json() == {"message": "No auth token provided", "status": 401, "data": None}


def test_create_validates_lengths(client, register):
    _, headers = register("alice")
    r = _create(client, headers, "x")
    assert r.status_code == 422
    assert "name" in r.json()["message"]
    r = _create(client, headers, "Valid", "shrt")
    assert r.status_code == 422
    assert "description" in r.json()["message"]


def test_create_trims_whitespace(client, register):
    _, headers = register("alice")
    r = _create(client, headers, "   Padded   ", "   padded description   ", True)
    assert r.status_code == 200
    body = r.json()
    assert body["message"] == "Task created successfully"
    assert body["data"]["name"] == "Padded"
    assert body["data"]["description"] == "padded description"
    assert body["data"]["is_active"] is True


def test_update_round_trip_keeps_owner(client, register):
    uid, headers = register("alice")
    task_id = _create(client, headers, "Draft").json()["data"]["id"]

    r = client.patch(
        f"/task/update/{task_id}",
        data={"name": "Final", "description": "final description", "is_active": "true"},
        headers=headers,
    )
    assert r.status_code == 200
    assert r.json()["message"] == "Task updated successfully"

    data = client.get(f"/task/{task_id}", headers=headers).json()["data"]
    assert data["name"] == "Final"
    assert data["description"] == "final description"
    assert data["is_active"] is True
    assert data["owner_id"] == uid


def test_update_missing_task(client, register):
    _, headers = register("alice")
    r = client.patch("/task/update/42", data={"name": "Ghost", "description": "does not exist"}, headers=headers)
    assert r.status_code == 404
    assert r.json()["message"] == "Task not found."


def test_delete_missing_task(client, register):
    _, headers = register("alice")
    assert client.delete("/task/delete/42", headers=headers).status_code == 404


def test_list_pagination(client, register):
    _, headers = register("alice")
    for i in range(25):
        assert _create(client, headers, f"Task {i}").status_code == 200

    r = client.get("/task?page=1&size=10", headers=headers)
    assert r.status_code == 200
    data = r.json()["data"]
    assert data["total_pages"] == 3
    assert data["page"] == 1
    assert data["page_size"] == 10
    assert len(data["items"]) <= 10

    r = client.get("/task?page=4&size=10", headers=headers)
    assert r.status_code == 200
    assert r.json()["data"]["items"] == []


def test_list_defaults_and_query(client, register):
    _, headers = register("alice")
    _create(client, headers, "Buy milk")
    _create(client, headers, "buy eggs")

    data = client.get("/task", headers=headers).json()["data"]
    assert (data["page"], data["page_size"], data["total_pages"]) == (1, 10, 1)
    assert len(data["items"]) == 2
    assert data["items"][0]["owner"]["username"] == "alice"

    data = client.get("/task", params={"query": "Buy"}, headers=headers).json()["data"]
    assert [t["name"] for t in data["items"]] == ["Buy milk"]


@pytest.mark.parametrize("params", [{"page": 0}, {"size": 0}, {"page": -3}])
def test_list_rejects_non_positive_paging(client, register, params):
    _, headers = register("alice")
    r = client.get("/task", params=params, headers=headers)
    assert r.status_code == 422
    assert "greater than 0" in r.json()["message"]


def test_get_task_with_non_integer_id(client, register):
    _, headers = register("alice")
    r = client.get("/task/abc", headers=headers)
    assert r.status_code == 422
    assert r.json()["status"] == 422


def test_ping(client, register):
    _, headers = register("alice")
    _create(client, headers, "Counted")

    r = client.get("/")
    assert r.status_code == 200
    body = r.json()
    assert body["message"] is None
    assert body["status"] == 200
    assert body["data"]["db_status"] is True
    assert body["data"]["tasks_total"] == 1
    assert body["data"]["memory_usage"].endswith(" Mb")


def test_unknown_route_uses_envelope(client):
    r = client.get("/nope")
    assert r.status_code == 404
    assert r.json() == {"message": "Not Found", "status": 404, "data": None}


def test_oversized_numbers_are_not_server_errors(client, register):
    _, headers = register("alice")
    _create(client, headers, "Small")

    r = client.get("/task", params={"page": 10**19}, headers=headers)
    assert r.status_code == 200
    assert r.json()["data"]["items"] == []

    r = client.get("/task", params={"size": 10**19}, headers=headers)
    assert r.status_code == 200
    assert len(r.json()["data"]["items"]) == 1

    assert client.get(f"/task/{10**19}", headers=headers).status_code == 404
    assert client.delete(f"/task/delete/{10**19}", headers=headers).status_code == 404
    r = client.patch(f"/task/update/{10**19}", data={"name": "Big", "description": "too big an id"}, headers=headers)
    assert r.status_code == 404


def test_ping_reports_current_resident_memory(client, monkeypatch):
    class _Process:
        def memory_info(self):
            return type("mem", (), {"rss": 42 * 1024 * 1024 + 123})()

    monkeypatch.setattr("tasktracker.routers.ping.psutil.Process", _Process)
    assert client.get("/").json()["data"]["memory_usage"] == "42 Mb"
