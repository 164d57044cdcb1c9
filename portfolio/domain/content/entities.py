# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Portfolio content documents and the rules each of them must satisfy."""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Any

from portfolio.domain.exceptions import InvariantViolation
from portfolio.shared.utils.slug import normalize_slug

DEFAULT_PROJECT_IMAGE = "https://placehold.co/800x600/1f2937/a7f3d0?text=Project+Placeholder"

SHORT_DESCRIPTION_MAX = 250
EXCERPT_MAX = 200
CONTACT_MESSAGE_MAX = 1000

_EMAIL_RE = re.compile(r"^[\w.+-]+@[\w-]+(\.[\w-]+)*\.[a-zA-Z]{2,}$")


def _require_text(value: str, name: str, *, max_length: int | None = None) -> None:
    if not isinstance(value, str) or not value.strip():
        raise InvariantViolation("must not be blank", field=name)
    if max_length is not None and len(value) > max_length:
        raise InvariantViolation(f"cannot exceed {max_length} characters", field=name)


def _require_sequence(values: object, name: str) -> tuple[str, ...]:
    if not isinstance(values, (list, tuple)):
        raise InvariantViolation("must contain at least one entry", field=name)
    return tuple(values)


def _require_items(values: tuple[str, ...], name: str) -> None:
    if not values:
        raise InvariantViolation("must contain at least one entry", field=name)
    for item in values:
        _require_text(item, name)


class DemoKind(str, Enum):
    """Every interactive demo a project page knows how to mount."""

    NONE = "None"
    IOT_DASHBOARD = "IoT_Dashboard"
    ML_GAME = "ML_Game"
    AI_CHATBOT = "AIChatBot"


@dataclass(slots=True, frozen=True)
class InteractiveDemo:
    kind: DemoKind = DemoKind.NONE
    data_endpoint: str | None = None
    github_link: str | None = None

    def __post_init__(self) -> None:
        try:
            object.__setattr__(self, "kind", DemoKind(self.kind))
        except ValueError as exc:
            allowed = ", ".join(k.value for k in DemoKind)
            raise InvariantViolation(
                f"unknown demo type, expected one of: {allowed}", field="interactiveDemo.type"
            ) from exc

    @property
    def enabled(self) -> bool:
        return self.kind is not DemoKind.NONE


@dataclass(slots=True, frozen=True)
class EngineeringDecision:
    tool: str
    reason: str

    def __post_init__(self) -> None:
        _require_text(self.tool, "engineeringDecisions.tool")
        _require_text(self.reason, "engineeringDecisions.reason")


@dataclass(slots=True, frozen=True)
class Project:
    id: int
    title: str
    slug: str
    category: str
    short_description: str
    full_description: str
    tech_stack: tuple[str, ...]
    image_url: str = DEFAULT_PROJECT_IMAGE
    repo_url: str | None = None
    live_url: str | None = None
    engineering_decisions: tuple[EngineeringDecision, ...] = ()
    is_featured: bool = False
    interactive_demo: InteractiveDemo = field(default_factory=InteractiveDemo)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "slug", normalize_slug(self.slug))
        object.__setattr__(self, "title", (self.title or "").strip())
        object.__setattr__(self, "tech_stack", _require_sequence(self.tech_stack, "techStack"))
        object.__setattr__(self, "engineering_decisions", tuple(self.engineering_decisions))
        _require_text(self.title, "title")
        _require_text(self.slug, "slug")
        _require_text(self.category, "category")
        _require_text(self.short_description, "shortDescription", max_length=SHORT_DESCRIPTION_MAX)
        _require_text(self.full_description, "fullDescription")
        _require_text(self.image_url, "imageUrl")
        _require_items(self.tech_stack, "techStack")
        if not isinstance(self.is_featured, bool):
            raise InvariantViolation("must be true or false", field="isFeatured")

    def with_changes(self, **changes: Any) -> Project:
        return replace(self, **changes)


@dataclass(slots=True, frozen=True)
class BlogPost:
    id: int
    title: str
    slug: str
    category: str
    excerpt: str
    markdown_content: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "slug", normalize_slug(self.slug))
        object.__setattr__(self, "title", (self.title or "").strip())
        _require_text(self.title, "title")
        _require_text(self.slug, "slug")
        _require_text(self.category, "category")
        _require_text(self.excerpt, "excerpt", max_length=EXCERPT_MAX)
        _require_text(self.markdown_content, "markdownContent")

    def with_changes(self, **changes: Any) -> BlogPost:
        return replace(self, **changes)


@dataclass(slots=True, frozen=True)
class SkillCategory:
    id: int
    category: str
    skills: tuple[str, ...]
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "category", (self.category or "").strip())
        skills = _require_sequence(self.skills, "skills")
        object.__setattr__(self, "skills", tuple(s.strip() for s in skills if isinstance(s, str)))
        _require_text(self.category, "category")
        _require_items(self.skills, "skills")


@dataclass(slots=True, frozen=True)
class ContactMessage:
    id: int
    name: str
    email: str
    message: str
    read: bool = False
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", (self.name or "").strip())
        object.__setattr__(self, "email", (self.email or "").strip().lower())
        object.__setattr__(self, "message", (self.message or "").strip())
        _require_text(self.name, "name")
        _require_text(self.email, "email")
        if not _EMAIL_RE.match(self.email):
            raise InvariantViolation("Please fill a valid email address", field="email")
        _require_text(self.message, "message", max_length=CONTACT_MESSAGE_MAX)


@dataclass(slots=True, frozen=True)
class ProjectViewStat:
    project_id: int
    title: str
    slug: str
    category: str
    view_count: int


@dataclass(slots=True, frozen=True)
class DashboardSummary:
    total_views: int
    project_count: int
    blog_count: int
    last_login: datetime | None
