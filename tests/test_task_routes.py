"""HTTP-level tests for the ``/tasks`` routes."""

import pytest


def _seed(client, *titles):
    for title in titles:
        assert client.post("/tasks", json={"title": title}).status_code == 201


def test_list_tasks(client):
    assert client.get("/tasks").json() == []
    _seed(client, *(f"테스트_{i}" for i in range(1, 11)))
    resp = client.get("/tasks")
    assert resp.status_code == 200
    assert len(resp.json()) == 10


def test_create_task(client):
    resp = client.post("/tasks", json={"title": "테스트"})
    assert resp.status_code == 201
    assert resp.json() == {"id": 1, "title": "테스트"}


def test_create_task_with_empty_title(client):
    resp = client.post("/tasks", json={"title": ""})
    assert resp.status_code == 400
    assert client.get("/tasks").json() == []


def test_create_task_without_body(client):
    assert client.post("/tasks").status_code == 400


def test_get_task(client):
    _seed(client, "FIRST TASK")
    assert client.get("/tasks/1").json() == {"id": 1, "title": "FIRST TASK"}
    resp = client.get("/tasks/2")
    assert resp.status_code == 404
    assert resp.json() == {"detail": "Task not found: 2"}


def test_put_and_patch_task(client):
    _seed(client, "FIRST TASK")
    for method in ("PUT", "PATCH"):
        resp = client.request(method, "/tasks/1", json={"title": "SECOND TASK"})
        assert resp.status_code == 200
        assert resp.json() == {"id": 1, "title": "SECOND TASK"}


def test_put_and_patch_missing_task(client):
    for method in ("PUT", "PATCH"):
        resp = client.request(method, "/tasks/999", json={"title": "X"})
        assert resp.status_code == 404


def test_put_and_patch_with_blank_title(client):
    _seed(client, "FIRST TASK")
    for method in ("PUT", "PATCH"):
        resp = client.request(method, "/tasks/1", json={"title": " "})
        assert resp.status_code == 400
    assert client.get("/tasks/1").json()["title"] == "FIRST TASK"


def test_delete_task(client):
    _seed(client, "A", "B")
    resp = client.delete("/tasks/1")
    assert resp.status_code == 204
    assert resp.content == b""
    assert client.get("/tasks").json() == [{"id": 2, "title": "B"}]


def test_delete_missing_task(client):
    assert client.delete("/tasks/2").status_code == 404


@pytest.mark.parametrize(
    "method,path",
    [("GET", "/tasks/abc"), ("PUT", "/tasks/abc"), ("DELETE", "/tasks/1.5")],
)
def test_non_integer_id_returns_400(client, method, path):
    resp = client.request(method, path, json={"title": "X"})
    assert resp.status_code == 400
    assert resp.json()["detail"].startswith("task_id:")


@pytest.mark.parametrize("method,path", [("POST", "/tasks"), ("PUT", "/tasks/1"), ("PATCH", "/tasks/1")])
def test_malformed_json_returns_400(client, method, path):
    _seed(client, "FIRST TASK")
    resp = client.request(
        method,
        path,
        content=b'{"title": ',
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 400
    assert "detail" in resp.json()
    assert client.get("/tasks").json() == [{"id": 1, "title": "FIRST TASK"}]
