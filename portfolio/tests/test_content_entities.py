from __future__ import annotations

import pytest

from portfolio.domain.content import (
    DEFAULT_PROJECT_IMAGE,
    BlogPost,
    ContactMessage,
    DemoKind,
    EngineeringDecision,
    InteractiveDemo,
    Project,
    SkillCategory,
)
from portfolio.domain.exceptions import InvariantViolation
from portfolio.shared.utils.slug import normalize_slug, slugify


def _project(**overrides) -> Project:
    values = {
        "id": 1,
        "title": "Sensor Mesh",
        "slug": "sensor-mesh",
        "category": "IoT",
        "short_description": "Low power telemetry",
        "full_description": "A mesh of ESP32 nodes.",
        "tech_stack": ("C++", "MQTT"),
    }
    values.update(overrides)
    return Project(**values)


@pytest.mark.parametrize(
    ("title", "expected"),
    [
        ("Hello World", "hello-world"),
        ("  Trim  me  ", "trim-me"),
        ("Café & Crème", "cafe-creme"),
        ("C++ / Rust!!", "c-rust"),
        ("", ""),
    ],
)
def test_slugify(title: str, expected: str) -> None:
    assert slugify(title) == expected


def test_normalize_slug_lowercases_and_trims() -> None:
    assert normalize_slug("  My-Slug ") == "my-slug"


def test_project_defaults() -> None:
    project = _project(slug=" Sensor-Mesh ")

    assert project.slug == "sensor-mesh"
    assert project.image_url == DEFAULT_PROJECT_IMAGE
    assert project.interactive_demo.kind is DemoKind.NONE
    assert project.interactive_demo.enabled is False
    assert project.is_featured is False


@pytest.mark.parametrize(
    ("overrides", "field"),
    [
        ({"title": "   "}, "title"),
        ({"category": ""}, "category"),
        ({"short_description": "x" * 251}, "shortDescription"),
        ({"full_description": ""}, "fullDescription"),
        ({"tech_stack": ()}, "techStack"),
        ({"tech_stack": ("Python", " ")}, "techStack"),
    ],
)
def test_project_invariants(overrides: dict, field: str) -> None:
    with pytest.raises(InvariantViolation) as excinfo:
        _project(**overrides)

    assert excinfo.value.field == field


def test_short_description_boundary_is_inclusive() -> None:
    assert len(_project(short_description="x" * 250).short_description) == 250


def test_with_changes_revalidates() -> None:
    project = _project()

    renamed = project.with_changes(title="Sensor Grid")
    assert renamed.title == "Sensor Grid"
    assert renamed.slug == project.slug

    with pytest.raises(InvariantViolation):
        project.with_changes(tech_stack=())


def test_interactive_demo_accepts_known_kinds() -> None:
    demo = InteractiveDemo(kind="IoT_Dashboard", data_endpoint="/api/iot")

    assert demo.kind is DemoKind.IOT_DASHBOARD
    assert demo.enabled


def test_interactive_demo_rejects_unknown_kind() -> None:
    with pytest.raises(InvariantViolation) as excinfo:
        InteractiveDemo(kind="Hologram")

    assert excinfo.value.field == "interactiveDemo.type"
    assert "IoT_Dashboard" in str(excinfo.value)


def test_engineering_decision_requires_tool_and_reason() -> None:
    with pytest.raises(InvariantViolation) as excinfo:
        EngineeringDecision(tool="Redis", reason="")

    assert excinfo.value.field == "engineeringDecisions.reason"


def test_blog_excerpt_limit() -> None:
    with pytest.raises(InvariantViolation) as excinfo:
        BlogPost(
            id=1,
            title="Post",
            slug="post",
            category="Notes",
            excerpt="e" * 201,
            markdown_content="# Body",
        )

    assert excinfo.value.field == "excerpt"


def test_skill_category_trims_and_requires_skills() -> None:
    category = SkillCategory(id=1, category=" Backend ", skills=(" Python ", "Go"))

    assert category.category == "Backend"
    assert category.skills == ("Python", "Go")

    with pytest.raises(InvariantViolation):
        SkillCategory(id=1, category="Backend", skills=())


def test_contact_message_normalizes_email() -> None:
    message = ContactMessage(id=0, name=" Ada ", email=" Ada@Example.COM ", message=" Hi ")

    assert message.name == "Ada"
    assert message.email == "ada@example.com"
    assert message.message == "Hi"
    assert message.read is False


@pytest.mark.parametrize("email", ["not-an-email", "a@b", "a@@b.com", "@example.com"])
def test_contact_message_rejects_bad_email(email: str) -> None:
    with pytest.raises(InvariantViolation) as excinfo:
        ContactMessage(id=0, name="Ada", email=email, message="Hi")

    assert excinfo.value.field == "email"


def test_contact_message_length_limit() -> None:
    with pytest.raises(InvariantViolation) as excinfo:
        ContactMessage(id=0, name="Ada", email="ada@example.com", message="m" * 1001)

    assert excinfo.value.field == "message"
