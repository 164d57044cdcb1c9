from __future__ import annotations

import pytest

from portfolio.domain.content import DEFAULT_PROJECT_IMAGE


def _project_body(**overrides) -> dict:
    body = {
        "title": "Sensor Mesh",
        "shortDescription": "Low power telemetry",
        "fullDescription": "A mesh of ESP32 nodes reporting over MQTT.",
        "techStack": ["C++", "MQTT"],
        "category": "IoT",
        "engineeringDecisions": [{"tool": "MQTT", "reason": "Lightweight pub/sub"}],
    }
    body.update(overrides)
    return body


@pytest.fixture()
def auth_headers(client) -> dict[str, str]:
    response = client.post(
        "/api/auth/register",
        json={"username": "admin", "email": "a@x.com", "password": "secret123"},
    )
    return {"Authorization": f"Bearer {response.get_json()['token']}"}


def _total_views(client, headers) -> int:
    return client.get("/api/analytics", headers=headers).get_json()["totalViews"]


# projects


def test_create_project_derives_slug_and_defaults(client, auth_headers) -> None:
    response = client.post("/api/projects", json=_project_body(), headers=auth_headers)

    assert response.status_code == 201
    project = response.get_json()
    assert project["slug"] == "sensor-mesh"
    assert project["imageUrl"] == DEFAULT_PROJECT_IMAGE
    assert project["isFeatured"] is False
    assert project["interactiveDemo"] == {"type": "None", "dataEndpoint": None, "githubLink": None}
    assert project["engineeringDecisions"] == [{"tool": "MQTT", "reason": "Lightweight pub/sub"}]


def test_list_projects_is_newest_first_and_omits_long_fields(client, auth_headers) -> None:
    client.post("/api/projects", json=_project_body(), headers=auth_headers)
    client.post(
        "/api/projects",
        json=_project_body(title="Chess Bot", interactiveDemo={"type": "ML_Game"}),
        headers=auth_headers,
    )

    listing = client.get("/api/projects").get_json()

    assert [item["slug"] for item in listing] == ["chess-bot", "sensor-mesh"]
    assert "fullDescription" not in listing[0]
    assert "engineeringDecisions" not in listing[0]
    assert listing[0]["interactiveDemo"]["type"] == "ML_Game"


def test_get_project_records_a_view(client, auth_headers) -> None:
    client.post("/api/projects", json=_project_body(), headers=auth_headers)

    first = client.get("/api/projects/sensor-mesh")
    client.get("/api/projects/SENSOR-MESH")

    assert first.status_code == 200
    assert first.get_json()["fullDescription"].startswith("A mesh")
    assert _total_views(client, auth_headers) == 2


def test_unknown_project_is_404(client) -> None:
    response = client.get("/api/projects/missing")

    assert response.status_code == 404
    assert response.get_json()["message"] == "Project not found"


@pytest.mark.parametrize(
    "overrides",
    [
        {"title": "Sensor Mesh", "slug": "another-slug"},
        {"title": "Different", "slug": "sensor-mesh"},
    ],
)
def test_duplicate_title_or_slug_is_400(client, auth_headers, overrides) -> None:
    client.post("/api/projects", json=_project_body(), headers=auth_headers)

    response = client.post("/api/projects", json=_project_body(**overrides), headers=auth_headers)

    assert response.status_code == 400
    assert response.get_json()["error"] == "duplicate_resource"


@pytest.mark.parametrize(
    "overrides",
    [
        {"techStack": []},
        {"shortDescription": "x" * 251},
        {"interactiveDemo": {"type": "Hologram"}},
        {"title": "   "},
    ],
)
def test_invalid_project_is_400(client, auth_headers, overrides) -> None:
    response = client.post("/api/projects", json=_project_body(**overrides), headers=auth_headers)

    assert response.status_code == 400
    assert response.get_json()["error"] == "validation_error"


def test_missing_required_project_field_is_400(client, auth_headers) -> None:
    body = _project_body()
    del body["fullDescription"]

    response = client.post("/api/projects", json=body, headers=auth_headers)

    assert response.status_code == 400
    assert "fullDescription" in response.get_json()["context"]["fields"]


def test_partial_update_keeps_other_fields(client, auth_headers) -> None:
    client.post("/api/projects", json=_project_body(), headers=auth_headers)

    response = client.put(
        "/api/projects/sensor-mesh",
        json={"shortDescription": "Now with LoRa", "isFeatured": True},
        headers=auth_headers,
    )

    assert response.status_code == 200
    project = response.get_json()
    assert project["shortDescription"] == "Now with LoRa"
    assert project["isFeatured"] is True
    assert project["techStack"] == ["C++", "MQTT"]
    assert project["title"] == "Sensor Mesh"


def test_update_can_move_slug(client, auth_headers) -> None:
    client.post("/api/projects", json=_project_body(), headers=auth_headers)

    moved = client.put(
        "/api/projects/sensor-mesh", json={"slug": "mesh-v2"}, headers=auth_headers
    )

    assert moved.status_code == 200
    assert client.get("/api/projects/mesh-v2").status_code == 200
    assert client.get("/api/projects/sensor-mesh").status_code == 404


def test_update_rejects_slug_clash(client, auth_headers) -> None:
    client.post("/api/projects", json=_project_body(), headers=auth_headers)
    client.post("/api/projects", json=_project_body(title="Chess Bot"), headers=auth_headers)

    response = client.put(
        "/api/projects/chess-bot", json={"slug": "sensor-mesh"}, headers=auth_headers
    )

    assert response.status_code == 400


@pytest.mark.parametrize(
    ("changes", "field"),
    [
        ({"isFeatured": None}, "isFeatured"),
        ({"techStack": None}, "techStack"),
        ({"title": None}, "title"),
    ],
)
def test_update_with_null_required_field_is_validation_error(
    client, auth_headers, changes, field
) -> None:
    client.post("/api/projects", json=_project_body(), headers=auth_headers)

    response = client.put("/api/projects/sensor-mesh", json=changes, headers=auth_headers)

    assert response.status_code == 400
    body = response.get_json()
    assert body["error"] == "validation_error"
    assert body["context"]["fields"] == [field]
    assert client.get("/api/projects/sensor-mesh").get_json()["isFeatured"] is False


def test_update_missing_project_is_404(client, auth_headers) -> None:
    response = client.put("/api/projects/nope", json={"title": "X"}, headers=auth_headers)

    assert response.status_code == 404


def test_delete_project_removes_its_views(client, auth_headers) -> None:
    client.post("/api/projects", json=_project_body(), headers=auth_headers)
    client.get("/api/projects/sensor-mesh")
    assert _total_views(client, auth_headers) == 1

    deleted = client.delete("/api/projects/sensor-mesh", headers=auth_headers)

    assert deleted.status_code == 200
    assert deleted.get_json() == {"message": "Project removed"}
    assert client.get("/api/projects/sensor-mesh").status_code == 404
    assert _total_views(client, auth_headers) == 0
    assert client.delete("/api/projects/sensor-mesh", headers=auth_headers).status_code == 404


# blog


def test_blog_post_lifecycle(client, auth_headers) -> None:
    created = client.post(
        "/api/blog",
        json={
            "title": "Shipping Firmware Over The Air",
            "category": "Embedded",
            "excerpt": "OTA updates without bricking devices",
            "markdownContent": "# OTA\n\nDual bank flash.",
        },
        headers=auth_headers,
    )
    assert created.status_code == 201
    slug = created.get_json()["slug"]
    assert slug == "shipping-firmware-over-the-air"

    assert [p["slug"] for p in client.get("/api/blog").get_json()] == [slug]
    assert client.get(f"/api/blog/{slug}").get_json()["markdownContent"].startswith("# OTA")

    updated = client.put(
        f"/api/blog/{slug}", json={"excerpt": "Dual bank OTA"}, headers=auth_headers
    )
    assert updated.status_code == 200
    assert updated.get_json()["excerpt"] == "Dual bank OTA"
    assert updated.get_json()["title"] == "Shipping Firmware Over The Air"

    assert client.delete(f"/api/blog/{slug}", headers=auth_headers).status_code == 200
    assert client.get(f"/api/blog/{slug}").status_code == 404


def test_blog_requires_auth_for_writes(client) -> None:
    response = client.post("/api/blog", json={"title": "x"})

    assert response.status_code == 401


def test_blog_duplicate_slug_is_400(client, auth_headers) -> None:
    body = {"title": "Post", "category": "Notes", "excerpt": "e", "markdownContent": "b"}
    client.post("/api/blog", json=body, headers=auth_headers)

    response = client.post("/api/blog", json=body, headers=auth_headers)

    assert response.status_code == 400


# skills


def test_skill_category_lifecycle(client, auth_headers) -> None:
    created = client.post(
        "/api/skills",
        json={"category": "Backend", "skills": ["Python", "Go"]},
        headers=auth_headers,
    )
    assert created.status_code == 201
    category_id = created.get_json()["id"]

    assert client.get("/api/skills").get_json()[0]["skills"] == ["Python", "Go"]
    assert client.get(f"/api/skills/{category_id}").get_json()["category"] == "Backend"

    updated = client.put(
        f"/api/skills/{category_id}", json={"skills": ["Python", "Rust"]}, headers=auth_headers
    )
    assert updated.get_json()["skills"] == ["Python", "Rust"]
    assert updated.get_json()["category"] == "Backend"

    assert client.delete(f"/api/skills/{category_id}", headers=auth_headers).status_code == 200
    assert client.get(f"/api/skills/{category_id}").status_code == 404


def test_skill_category_name_is_unique(client, auth_headers) -> None:
    body = {"category": "Backend", "skills": ["Python"]}
    client.post("/api/skills", json=body, headers=auth_headers)

    response = client.post("/api/skills", json=body, headers=auth_headers)

    assert response.status_code == 400


def test_skill_category_needs_skills(client, auth_headers) -> None:
    response = client.post(
        "/api/skills", json={"category": "Backend", "skills": []}, headers=auth_headers
    )

    assert response.status_code == 400


def test_skill_category_update_with_null_skills_is_400(client, auth_headers) -> None:
    created = client.post(
        "/api/skills", json={"category": "Backend", "skills": ["Python"]}, headers=auth_headers
    ).get_json()

    response = client.put(
        f"/api/skills/{created['id']}", json={"skills": None}, headers=auth_headers
    )

    assert response.status_code == 400
    assert response.get_json()["context"]["fields"] == ["skills"]
    assert client.get(f"/api/skills/{created['id']}").get_json()["skills"] == ["Python"]


def test_skill_category_ids_beyond_integer_range_are_404(client, auth_headers) -> None:
    huge = 10**30

    assert client.get(f"/api/skills/{huge}").status_code == 404
    assert (
        client.put(f"/api/skills/{huge}", json={"category": "X"}, headers=auth_headers).status_code
        == 404
    )
    assert client.delete(f"/api/skills/{huge}", headers=auth_headers).status_code == 404


# contact


def test_contact_submission(client) -> None:
    response = client.post(
        "/api/contact",
        json={"name": "Ada", "email": "Ada@Example.com", "message": "Hello there"},
    )

    assert response.status_code == 201
    assert response.get_json() == {"success": True, "message": "Message received successfully!"}


@pytest.mark.parametrize(
    ("body", "fragment"),
    [
        ({"name": "Ada", "email": "nope", "message": "Hi"}, "valid email"),
        ({"name": "", "email": "ada@example.com", "message": "Hi"}, "name"),
        ({"name": "Ada", "email": "ada@example.com", "message": "m" * 1001}, "1000"),
    ],
)
def test_contact_validation(client, body, fragment) -> None:
    response = client.post("/api/contact", json=body)

    assert response.status_code == 400
    assert fragment in response.get_json()["message"]


# misc


def test_index_and_health(client) -> None:
    index = client.get("/")
    health = client.get("/api/health")

    assert index.data == b"API is running..."
    report = health.get_json()
    assert health.status_code == 200
    assert report["ok"] is True
    assert report["database"] == "ok"
    assert report["ai"] == "configured"


def test_unknown_route_is_json_404(client) -> None:
    response = client.get("/api/nope")

    assert response.status_code == 404
    assert response.get_json() == {"message": "Not Found - /api/nope", "error": "not_found"}


def test_security_headers_are_set(client) -> None:
    response = client.get("/api/projects")

    assert response.headers["X-Frame-Options"] == "DENY"
    assert response.headers["X-Content-Type-Options"] == "nosniff"


def test_metrics_endpoint_exposes_request_counters(client) -> None:
    client.get("/api/projects")

    response = client.get("/api/metrics")

    assert response.status_code == 200
    assert b"portfolio_requests_total" in response.data
