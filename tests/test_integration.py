from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from haulplan.config import settings
from haulplan.main import create_app


@pytest.fixture
def data_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setattr(settings, "data_root", tmp_path)
    return tmp_path


@pytest.fixture
def api_client(data_root: Path) -> TestClient:
    return TestClient(create_app())


def _write_roads(root: Path) -> None:
    (root / "roads_processed.csv").write_text(
        "road_id,road_type,date,average_speed_kmh,length_km,traffic_density,maintenance_urgency,road_capacity,capacity_utilization\n"
        "R1,haul,2024-05-01,30,4,0.4,0.2,180,0.6\n"
        "R2,ramp,2024-05-01,20,2,0.8,0.9,120,0.7\n"
        "R1,haul,2024-04-01,10,9,0.9,0.9,80,0.9\n",
        encoding="utf-8",
    )


def test_health(api_client: TestClient):
    response = api_client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_route_plan_endpoint(api_client: TestClient, data_root: Path):
    _write_roads(data_root)

    response = api_client.post(
        "/api/ml/route-plan",
        json={"mlPayloads": {"route_optimization": {"traffic_volume_trucks": 60}}},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "success"
    assert [route["roadId"] for route in body["routes"]] == ["R1", "R2"]
    assert sum(route["trucks"] for route in body["routes"]) == 60
    assert body["summary"]["totalTrucks"] == 60
    assert body["summary"]["maintenanceWatch"] == ["R2"]


def test_route_plan_endpoint_without_body_uses_default_fleet(api_client: TestClient, data_root: Path):
    _write_roads(data_root)

    response = api_client.post("/api/ml/route-plan")

    assert response.status_code == 200
    assert response.json()["summary"]["totalTrucks"] == 200


def test_route_plan_endpoint_hides_source_errors(api_client: TestClient, data_root: Path):
    response = api_client.post("/api/ml/route-plan", json={"mlPayloads": {}})

    assert response.status_code == 500
    detail = response.json()["detail"]
    assert detail == "Failed to compute route plan."
    assert str(data_root) not in detail


def test_route_plan_endpoint_hides_parse_errors(api_client: TestClient, data_root: Path):
    (data_root / "roads_processed.csv").write_text("road_id,length_km\nR1,2,3\n", encoding="utf-8")

    response = api_client.post("/api/ml/route-plan", json={})

    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to compute route plan."


def test_dataset_endpoints(api_client: TestClient, data_root: Path):
    _write_roads(data_root)

    listing = api_client.get("/api/ml/datasets")
    assert "roads" in listing.json()["datasets"]

    response = api_client.get("/api/ml/datasets/roads", params={"limit": 2})
    assert response.status_code == 200
    body = response.json()
    assert body["rowCount"] == 2
    assert body["columns"][0] == "road_id"
    assert body["normalized"] is False


def test_dataset_endpoint_errors(api_client: TestClient):
    assert api_client.get("/api/ml/datasets/unknown").status_code == 400
    missing = api_client.get("/api/ml/datasets/weather", params={"normalized": True})
    assert missing.status_code == 500
    assert missing.json()["detail"] == "Failed to read dataset"
