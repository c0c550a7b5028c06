"""Tests for the HTTP API."""

from datetime import UTC, date, datetime, timedelta
from uuid import UUID, uuid4

from fastapi.testclient import TestClient

from weight_trends.api.app import create_app, format_tick_date
from weight_trends.domain.weights import ProfileWeights, WeightLogEntry
from tests.conftest import InMemoryProfileRepository, InMemoryWeightLogRepository

HEADERS = {"X-Api-Token": "api-token"}


def _seed(
    weight_log_repository: InMemoryWeightLogRepository,
    profile_repository: InMemoryProfileRepository,
) -> UUID:
    user_id = uuid4()
    today = datetime.now(tz=UTC).date()
    weight_log_repository.logs[user_id] = [
        WeightLogEntry(id="1", date=today - timedelta(days=7), weight_kg=90.0),
        WeightLogEntry(id="2", date=today, weight_kg=88.0, notes="after trip"),
    ]
    profile_repository.profiles[user_id] = ProfileWeights(
        current_weight_kg=88.0, target_weight_kg=85.0
    )
    return user_id


def test_health(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_weight_trend_requires_token(container) -> None:
    client = TestClient(create_app(container))

    response = client.get(f"/users/{uuid4()}/weight-trend")

    assert response.status_code == 401


def test_weight_trend_payload(
    container, weight_log_repository, profile_repository
) -> None:
    user_id = _seed(weight_log_repository, profile_repository)
    client = TestClient(create_app(container))

    response = client.get(
        f"/users/{user_id}/weight-trend",
        params={"window": "1W", "width": 400, "height": 200},
        headers=HEADERS,
    )

    assert response.status_code == 200
    data = response.json()
    assert data["window"] == "1W"
    assert data["no_data"] is False
    assert data["insufficient_data"] is False
    assert data["statistics"]["total_change"] == -2
    assert data["statistics"]["average"] == 89
    assert len(data["series"]) == 2
    assert data["series"][1]["notes"] == "after trip"
    assert data["path"].startswith("M ")
    assert len(data["segments"]) == 2
    assert data["area"].endswith("Z")
    assert len(data["y_ticks"]) == 5
    assert len(data["x_ticks"]) == 2
    assert data["goal_line_y"] is not None
    assert data["value_range"] == {"min": 84.0, "max": 91.0}


def test_weight_trend_empty_history(container) -> None:
    client = TestClient(create_app(container))

    response = client.get(f"/users/{uuid4()}/weight-trend", headers=HEADERS)

    assert response.status_code == 200
    data = response.json()
    assert data["window"] == "1M"
    assert data["no_data"] is True
    assert data["path"] == ""
    assert data["area"] is None
    assert data["value_range"] is None


def test_weight_trend_rejects_bad_params(container) -> None:
    client = TestClient(create_app(container))
    url = f"/users/{uuid4()}/weight-trend"

    assert client.get(url, params={"width": -10}, headers=HEADERS).status_code == 422
    assert client.get(url, params={"window": "2W"}, headers=HEADERS).status_code == 422


def test_weight_trend_rejects_viewport_smaller_than_padding(container) -> None:
    client = TestClient(create_app(container))
    url = f"/users/{uuid4()}/weight-trend"

    narrow = client.get(url, params={"width": 20}, headers=HEADERS)
    short = client.get(url, params={"height": 10}, headers=HEADERS)

    assert narrow.status_code == 422
    assert short.status_code == 422


def test_recent_weight_logs(
    container, weight_log_repository, profile_repository
) -> None:
    user_id = _seed(weight_log_repository, profile_repository)
    client = TestClient(create_app(container))

    response = client.get(f"/users/{user_id}/weight-logs/recent", headers=HEADERS)

    assert response.status_code == 200
    logs = response.json()["logs"]
    assert [log["id"] for log in logs] == ["2", "1"]
    assert logs[0]["change_kg"] == -2
    assert logs[1]["change_kg"] is None


def test_format_tick_date() -> None:
    assert format_tick_date(date(2024, 3, 7)) == "Mar 7"
