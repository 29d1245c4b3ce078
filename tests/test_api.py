from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from mixdesign.api import create_app


@pytest.fixture
def client(service):
    return TestClient(create_app(service))


def test_health(client):
    r = client.get("/api/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_create_mix_design(client):
    r = client.post(
        "/api/mix-design",
        json={"fck": 20, "exposure": "moderate", "cementGrade": "OPC 43", "projectName": "Bridge"},
    )
    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True
    data = body["data"]
    assert data["id"] == 1
    assert data["project"]["projectName"] == "Bridge"
    assert data["project"]["mixId"] == "MIX-001"
    assert data["input"] == {"fck": 20.0, "cementGrade": "OPC 43", "exposure": "moderate"}
    assert data["result"]["w_c"] == pytest.approx(0.477)
    assert data["result"]["checks"]["isGradeOk"] is False
    assert data["result"]["checks"]["limits"]["minGradeFck"] == 25


def test_fck_as_string_is_accepted(client):
    r = client.post("/api/mix-design", json={"fck": "30", "exposure": "unknownXYZ"})
    assert r.status_code == 200
    assert r.json()["data"]["input"]["exposure"] == "mild"


@pytest.mark.parametrize(
    "body, message",
    [
        ({}, "fck is required"),
        ({"fck": None}, "fck is required"),
        ({"fck": ""}, "fck is required"),
        ({"fck": 0}, "Invalid fck value"),
        ({"fck": -10}, "Invalid fck value"),
        ({"fck": "abc"}, "Invalid fck value"),
        ({"fck": True}, "Invalid fck value"),
    ],
)
def test_invalid_fck_is_rejected(client, body, message):
    r = client.post("/api/mix-design", json=body)
    assert r.status_code == 400
    assert r.json() == {"success": False, "message": message}
    assert client.get("/api/mix-design/runs").json()["count"] == 0


def test_list_runs_latest_first(client):
    for fck in (20, 25, 30):
        client.post("/api/mix-design", json={"fck": fck})
    body = client.get("/api/mix-design/runs").json()
    assert body["success"] is True
    assert body["count"] == 3
    assert [d["id"] for d in body["data"]] == [3, 2, 1]


def test_export_csv(client):
    client.post("/api/mix-design", json={"fck": 20, "projectName": "A,B"})
    r = client.get("/api/mix-design/export.csv")
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/csv")
    assert r.headers["content-disposition"] == 'attachment; filename="mix_design_runs.csv"'
    lines = r.text.split("\n")
    assert lines[0].startswith("id,timestamp,projectName")
    assert lines[1].split(",")[2] == "A B"


def test_apps_do_not_share_runs(client):
    other = TestClient(create_app())
    client.post("/api/mix-design", json={"fck": 20})
    assert other.get("/api/mix-design/runs").json()["count"] == 0


@pytest.mark.parametrize("exposure", [3, ["severe"], {"k": 1}, True, "Severe"])
def test_non_string_or_unknown_exposure_falls_back_to_mild(client, exposure):
    r = client.post("/api/mix-design", json={"fck": 30, "exposure": exposure})
    assert r.status_code == 200
    data = r.json()["data"]
    assert data["input"]["exposure"] == "mild"
    assert data["result"]["checks"]["limits"]["key"] == "mild"


def test_numeric_cement_grade_is_stored(client):
    r = client.post("/api/mix-design", json={"fck": 30, "cementGrade": 43.5})
    assert r.status_code == 200
    assert r.json()["data"]["input"]["cementGrade"] == 43.5
    row = client.get("/api/mix-design/export.csv").text.split("\n")[1].split(",")
    assert row[7] == "43.5"
