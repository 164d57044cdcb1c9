from __future__ import annotations

from datetime import UTC, datetime
from types import SimpleNamespace

import pytest

from portfolio.application.services.analytics import AnalyticsService
from portfolio.domain.content import ProjectViewStat
from portfolio.shared.errors import ValidationError


class FakeProjects:
    def __init__(self, ids: set[int]) -> None:
        self._ids = ids

    def find_by_id(self, project_id: int):
        return SimpleNamespace(id=project_id) if project_id in self._ids else None

    def count(self) -> int:
        return len(self._ids)


class FakePosts:
    def count(self) -> int:
        return 3


class FakeViews:
    def __init__(self) -> None:
        self.recorded: list[int] = []

    def record(self, project_id: int) -> None:
        self.recorded.append(project_id)

    def total(self) -> int:
        return len(self.recorded)

    def ranking(self):
        return [ProjectViewStat(project_id=7, title="T", slug="t", category="c", view_count=1)]


class FakeCredentials:
    def __init__(self, last_login: datetime | None) -> None:
        self._last_login = last_login

    def find_by_id(self, user_id: int):
        if user_id != 1:
            return None
        return SimpleNamespace(id=1, last_login_at=self._last_login)


def _service(last_login: datetime | None = None) -> tuple[AnalyticsService, FakeViews]:
    views = FakeViews()
    service = AnalyticsService(
        projects=FakeProjects({7, 8}),
        posts=FakePosts(),
        views=views,
        credentials=FakeCredentials(last_login),
    )
    return service, views


@pytest.mark.parametrize("project_id", [7, "8"])
def test_track_view_accepts_int_like_ids(project_id) -> None:
    service, views = _service()

    service.track_view(project_id)

    assert views.recorded == [int(project_id)]


@pytest.mark.parametrize("project_id", [None, "abc", True, 0, -7, 99, 1.5, {"id": 7}])
def test_track_view_rejects_invalid_ids(project_id) -> None:
    service, views = _service()

    with pytest.raises(ValidationError) as excinfo:
        service.track_view(project_id)

    assert excinfo.value.message == "Invalid Project ID provided for tracking."
    assert views.recorded == []


def test_summary_uses_requesting_user_last_login() -> None:
    stamp = datetime(2025, 1, 2, 3, 4, 5, tzinfo=UTC)
    service, views = _service(stamp)
    views.record(7)

    summary = service.summary(1)

    assert summary.total_views == 1
    assert summary.project_count == 2
    assert summary.blog_count == 3
    assert summary.last_login == stamp


def test_summary_for_unknown_user_has_no_last_login() -> None:
    service, _ = _service(datetime.now(UTC))

    assert service.summary(42).last_login is None


# over HTTP


def _login_headers(client) -> dict[str, str]:
    credentials = {"username": "admin", "email": "a@x.com", "password": "secret123"}
    client.post("/api/auth/register", json=credentials)
    login = client.post(
        "/api/auth/login", json={"email": "a@x.com", "password": "secret123"}
    )
    return {"Authorization": f"Bearer {login.get_json()['token']}"}


def _create_project(client, headers, title: str) -> dict:
    response = client.post(
        "/api/projects",
        json={
            "title": title,
            "shortDescription": "short",
            "fullDescription": "full",
            "techStack": ["Python"],
            "category": "Backend",
        },
        headers=headers,
    )
    return response.get_json()


def test_track_endpoint(client) -> None:
    headers = _login_headers(client)
    project = _create_project(client, headers, "Ledger")

    tracked = client.post("/api/analytics/track", json={"projectId": project["id"]})
    rejected = client.post("/api/analytics/track", json={"projectId": "nope"})
    missing = client.post("/api/analytics/track", json={})

    assert tracked.status_code == 200
    assert tracked.get_json() == {"message": "View tracked"}
    assert rejected.status_code == 400
    assert missing.status_code == 400


@pytest.mark.parametrize("project_id", [10**30, str(2**63), -(10**30)])
def test_track_endpoint_rejects_ids_beyond_integer_range(client, project_id) -> None:
    response = client.post("/api/analytics/track", json={"projectId": project_id})

    assert response.status_code == 400
    assert response.get_json()["message"] == "Invalid Project ID provided for tracking."


def test_summary_endpoint(client) -> None:
    headers = _login_headers(client)
    project = _create_project(client, headers, "Ledger")
    client.post("/api/analytics/track", json={"projectId": project["id"]})

    response = client.get("/api/analytics", headers=headers)

    assert response.status_code == 200
    summary = response.get_json()
    assert summary["totalViews"] == 1
    assert summary["projectCount"] == 1
    assert summary["blogCount"] == 0
    assert summary["lastLogin"] is not None


def test_details_ranks_viewed_projects(client) -> None:
    headers = _login_headers(client)
    ledger = _create_project(client, headers, "Ledger")
    radar = _create_project(client, headers, "Radar")
    _create_project(client, headers, "Unseen")

    client.get("/api/projects/radar")
    client.get("/api/projects/radar")
    client.post("/api/analytics/track", json={"projectId": ledger["id"]})

    ranking = client.get("/api/analytics/details", headers=headers).get_json()

    assert [(row["id"], row["viewCount"]) for row in ranking] == [(radar["id"], 2), (ledger["id"], 1)]
    assert ranking[0]["slug"] == "radar"


@pytest.mark.parametrize("path", ["/api/analytics", "/api/analytics/details"])
def test_dashboard_requires_token(client, path) -> None:
    assert client.get(path).status_code == 401
