# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Wire shapes for the public content collections (camelCase on the wire)."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from portfolio.domain.content import (
    BlogPost,
    DashboardSummary,
    DemoKind,
    Project,
    ProjectViewStat,
    SkillCategory,
)

_WIRE = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class _WireModel(BaseModel):
    model_config = _WIRE

    def to_wire(self, *, exclude: set[str] | None = None) -> dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json", exclude=exclude)


# requests


class EngineeringDecisionDTO(_WireModel):
    tool: str
    reason: str


class InteractiveDemoDTO(_WireModel):
    kind: DemoKind = Field(DemoKind.NONE, alias="type")
    data_endpoint: str | None = None
    github_link: str | None = None


class ProjectCreateDTO(_WireModel):
    title: str
    slug: str | None = None
    category: str
    short_description: str
    full_description: str
    tech_stack: list[str] = Field(min_length=1)
    image_url: str | None = None
    repo_url: str | None = None
    live_url: str | None = None
    engineering_decisions: list[EngineeringDecisionDTO] = Field(default_factory=list)
    is_featured: bool = False
    interactive_demo: InteractiveDemoDTO | None = None

    def to_fields(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


class ProjectUpdateDTO(_WireModel):
    title: str | None = None
    slug: str | None = None
    category: str | None = None
    short_description: str | None = None
    full_description: str | None = None
    tech_stack: list[str] | None = None
    image_url: str | None = None
    repo_url: str | None = None
    live_url: str | None = None
    engineering_decisions: list[EngineeringDecisionDTO] | None = None
    is_featured: bool | None = None
    interactive_demo: InteractiveDemoDTO | None = None

    def to_changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class BlogPostCreateDTO(_WireModel):
    title: str
    slug: str | None = None
    category: str
    excerpt: str
    markdown_content: str

    def to_fields(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


class BlogPostUpdateDTO(_WireModel):
    title: str | None = None
    slug: str | None = None
    category: str | None = None
    excerpt: str | None = None
    markdown_content: str | None = None

    def to_changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class SkillCategoryCreateDTO(_WireModel):
    category: str
    skills: list[str] = Field(min_length=1)

    def to_fields(self) -> dict[str, Any]:
        return self.model_dump()


class SkillCategoryUpdateDTO(_WireModel):
    category: str | None = None
    skills: list[str] | None = None

    def to_changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class ContactRequestDTO(_WireModel):
    name: str = ""
    email: str = ""
    message: str = ""


class TrackViewDTO(_WireModel):
    project_id: Any = None


class ChatContextDTO(_WireModel):
    title: str | None = None
    description: str | None = None


class ChatRequestDTO(_WireModel):
    query: str = ""
    context: ChatContextDTO | None = None


# responses


class ProjectDTO(_WireModel):
    id: int
    title: str
    slug: str
    category: str
    short_description: str
    full_description: str
    repo_url: str | None
    live_url: str | None
    image_url: str
    tech_stack: list[str]
    engineering_decisions: list[EngineeringDecisionDTO]
    is_featured: bool
    interactive_demo: InteractiveDemoDTO
    created_at: datetime | None
    updated_at: datetime | None

    @classmethod
    def from_entity(cls, project: Project) -> ProjectDTO:
        demo = project.interactive_demo
        return cls(
            id=project.id,
            title=project.title,
            slug=project.slug,
            category=project.category,
            short_description=project.short_description,
            full_description=project.full_description,
            repo_url=project.repo_url,
            live_url=project.live_url,
            image_url=project.image_url,
            tech_stack=list(project.tech_stack),
            engineering_decisions=[
                EngineeringDecisionDTO(tool=d.tool, reason=d.reason)
                for d in project.engineering_decisions
            ],
            is_featured=project.is_featured,
            interactive_demo=InteractiveDemoDTO(
                kind=demo.kind,
                data_endpoint=demo.data_endpoint,
                github_link=demo.github_link,
            ),
            created_at=project.created_at,
            updated_at=project.updated_at,
        )

    def to_summary(self) -> dict[str, Any]:
        return self.to_wire(exclude={"full_description", "engineering_decisions"})


class BlogPostDTO(_WireModel):
    id: int
    title: str
    slug: str
    category: str
    excerpt: str
    markdown_content: str
    created_at: datetime | None
    updated_at: datetime | None

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_entity(cls, post: BlogPost) -> BlogPostDTO:
        return cls.model_validate(post)


class SkillCategoryDTO(_WireModel):
    id: int
    category: str
    skills: list[str]
    created_at: datetime | None
    updated_at: datetime | None

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_entity(cls, category: SkillCategory) -> SkillCategoryDTO:
        return cls.model_validate(category)


class ContactReceiptDTO(_WireModel):
    success: bool = True
    message: str = "Message received successfully!"


class DashboardSummaryDTO(_WireModel):
    total_views: int
    project_count: int
    blog_count: int
    last_login: datetime | None

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_entity(cls, summary: DashboardSummary) -> DashboardSummaryDTO:
        return cls.model_validate(summary)


class ProjectViewStatDTO(_WireModel):
    id: int
    title: str
    slug: str
    category: str
    view_count: int

    @classmethod
    def from_entity(cls, stat: ProjectViewStat) -> ProjectViewStatDTO:
        return cls(
            id=stat.project_id,
            title=stat.title,
            slug=stat.slug,
            category=stat.category,
            view_count=stat.view_count,
        )
