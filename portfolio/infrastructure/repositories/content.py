# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Sequence

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from portfolio.domain.content import (
    BlogPost,
    ContactMessage,
    EngineeringDecision,
    InteractiveDemo,
    Project,
    ProjectViewStat,
    SkillCategory,
)
from portfolio.domain.content.repositories import (
    BlogPostRepository,
    ContactMessageRepository,
    ProjectRepository,
    ProjectViewRepository,
    SkillCategoryRepository,
)
from portfolio.infrastructure.db import fits_row_id, is_unique_violation, models
from portfolio.infrastructure.unit_of_work import unit_of_work_scope
from portfolio.shared.errors import DuplicateResourceError, NotFoundError


def _project_to_domain(row: models.Project) -> Project:
    return Project(
        id=row.id,
        title=row.title,
        slug=row.slug,
        category=row.category,
        short_description=row.short_description,
        full_description=row.full_description,
        tech_stack=tuple(row.tech_stack or ()),
        image_url=row.image_url,
        repo_url=row.repo_url,
        live_url=row.live_url,
        engineering_decisions=tuple(
            EngineeringDecision(tool=item["tool"], reason=item["reason"])
            for item in row.engineering_decisions or ()
        ),
        is_featured=bool(row.is_featured),
        interactive_demo=InteractiveDemo(
            kind=row.demo_type,
            data_endpoint=row.demo_data_endpoint,
            github_link=row.demo_github_link,
        ),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _apply_project(row: models.Project, project: Project) -> None:
    row.title = project.title
    row.slug = project.slug
    row.category = project.category
    row.short_description = project.short_description
    row.full_description = project.full_description
    row.tech_stack = list(project.tech_stack)
    row.image_url = project.image_url
    row.repo_url = project.repo_url
    row.live_url = project.live_url
    row.engineering_decisions = [
        {"tool": d.tool, "reason": d.reason} for d in project.engineering_decisions
    ]
    row.is_featured = project.is_featured
    row.demo_type = project.interactive_demo.kind.value
    row.demo_data_endpoint = project.interactive_demo.data_endpoint
    row.demo_github_link = project.interactive_demo.github_link


def _post_to_domain(row: models.BlogPost) -> BlogPost:
    return BlogPost(
        id=row.id,
        title=row.title,
        slug=row.slug,
        category=row.category,
        excerpt=row.excerpt,
        markdown_content=row.markdown_content,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _skill_to_domain(row: models.SkillCategory) -> SkillCategory:
    return SkillCategory(
        id=row.id,
        category=row.category,
        skills=tuple(row.skills or ()),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class SqlAlchemyProjectRepository(ProjectRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def list_all(self) -> Sequence[Project]:
        with unit_of_work_scope(self._session_factory) as session:
            rows = (
                session.query(models.Project)
                .order_by(models.Project.created_at.desc(), models.Project.id.desc())
                .all()
            )
            return [_project_to_domain(row) for row in rows]

    def find_by_slug(self, slug: str) -> Project | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.query(models.Project).filter(models.Project.slug == slug).first()
            return _project_to_domain(row) if row else None

    def find_by_id(self, project_id: int) -> Project | None:
        if not fits_row_id(project_id):
            return None
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(models.Project, project_id)
            return _project_to_domain(row) if row else None

    def find_by_title(self, title: str) -> Project | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.query(models.Project).filter(models.Project.title == title).first()
            return _project_to_domain(row) if row else None

    def add(self, project: Project) -> Project:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = models.Project()
                _apply_project(row, project)
                session.add(row)
                session.flush()
                session.refresh(row)
                return _project_to_domain(row)
        except IntegrityError as exc:
            if not is_unique_violation(exc):
                raise
            raise DuplicateResourceError("Project", "title or slug", project.title) from exc

    def update(self, slug: str, project: Project) -> Project:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = session.query(models.Project).filter(models.Project.slug == slug).first()
                if row is None:
                    raise NotFoundError("Project", slug)
                _apply_project(row, project)
                session.flush()
                session.refresh(row)
                return _project_to_domain(row)
        except IntegrityError as exc:
            if not is_unique_violation(exc):
                raise
            raise DuplicateResourceError("Project", "title or slug", project.title) from exc

    def delete(self, slug: str) -> bool:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.query(models.Project).filter(models.Project.slug == slug).first()
            if row is None:
                return False
            session.delete(row)
            return True

    def count(self) -> int:
        with unit_of_work_scope(self._session_factory) as session:
            return int(session.query(func.count(models.Project.id)).scalar() or 0)


class SqlAlchemyBlogPostRepository(BlogPostRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def list_all(self) -> Sequence[BlogPost]:
        with unit_of_work_scope(self._session_factory) as session:
            rows = (
                session.query(models.BlogPost)
                .order_by(models.BlogPost.created_at.desc(), models.BlogPost.id.desc())
                .all()
            )
            return [_post_to_domain(row) for row in rows]

    def find_by_slug(self, slug: str) -> BlogPost | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.query(models.BlogPost).filter(models.BlogPost.slug == slug).first()
            return _post_to_domain(row) if row else None

    def add(self, post: BlogPost) -> BlogPost:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = models.BlogPost(
                    title=post.title,
                    slug=post.slug,
                    category=post.category,
                    excerpt=post.excerpt,
                    markdown_content=post.markdown_content,
                )
                session.add(row)
                session.flush()
                session.refresh(row)
                return _post_to_domain(row)
        except IntegrityError as exc:
            if not is_unique_violation(exc):
                raise
            raise DuplicateResourceError("Blog post", "slug", post.slug) from exc

    def update(self, slug: str, post: BlogPost) -> BlogPost:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = session.query(models.BlogPost).filter(models.BlogPost.slug == slug).first()
                if row is None:
                    raise NotFoundError("Blog post", slug)
                row.title = post.title
                row.slug = post.slug
                row.category = post.category
                row.excerpt = post.excerpt
                row.markdown_content = post.markdown_content
                session.flush()
                session.refresh(row)
                return _post_to_domain(row)
        except IntegrityError as exc:
            if not is_unique_violation(exc):
                raise
            raise DuplicateResourceError("Blog post", "slug", post.slug) from exc

    def delete(self, slug: str) -> bool:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.query(models.BlogPost).filter(models.BlogPost.slug == slug).first()
            if row is None:
                return False
            session.delete(row)
            return True

    def count(self) -> int:
        with unit_of_work_scope(self._session_factory) as session:
            return int(session.query(func.count(models.BlogPost.id)).scalar() or 0)


class SqlAlchemySkillCategoryRepository(SkillCategoryRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def list_all(self) -> Sequence[SkillCategory]:
        with unit_of_work_scope(self._session_factory) as session:
            rows = session.query(models.SkillCategory).order_by(models.SkillCategory.id.asc()).all()
            return [_skill_to_domain(row) for row in rows]

    def find_by_id(self, category_id: int) -> SkillCategory | None:
        if not fits_row_id(category_id):
            return None
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(models.SkillCategory, category_id)
            return _skill_to_domain(row) if row else None

    def find_by_name(self, category: str) -> SkillCategory | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = (
                session.query(models.SkillCategory)
                .filter(models.SkillCategory.category == category)
                .first()
            )
            return _skill_to_domain(row) if row else None

    def add(self, category: SkillCategory) -> SkillCategory:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = models.SkillCategory(
                    category=category.category, skills=list(category.skills)
                )
                session.add(row)
                session.flush()
                session.refresh(row)
                return _skill_to_domain(row)
        except IntegrityError as exc:
            if not is_unique_violation(exc):
                raise
            raise DuplicateResourceError("Skill category", "name", category.category) from exc

    def update(self, category: SkillCategory) -> SkillCategory:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = session.get(models.SkillCategory, category.id)
                if row is None:
                    raise NotFoundError("Skill category", category.id)
                row.category = category.category
                row.skills = list(category.skills)
                session.flush()
                session.refresh(row)
                return _skill_to_domain(row)
        except IntegrityError as exc:
            if not is_unique_violation(exc):
                raise
            raise DuplicateResourceError("Skill category", "name", category.category) from exc

    def delete(self, category_id: int) -> bool:
        if not fits_row_id(category_id):
            return False
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(models.SkillCategory, category_id)
            if row is None:
                return False
            session.delete(row)
            return True


class SqlAlchemyContactMessageRepository(ContactMessageRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def add(self, message: ContactMessage) -> ContactMessage:
        with unit_of_work_scope(self._session_factory) as session:
            row = models.ContactMessage(
                name=message.name, email=message.email, message=message.message
            )
            session.add(row)
            session.flush()
            session.refresh(row)
            return ContactMessage(
                id=row.id,
                name=row.name,
                email=row.email,
                message=row.message,
                read=bool(row.read),
                created_at=row.created_at,
            )


class SqlAlchemyProjectViewRepository(ProjectViewRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def record(self, project_id: int) -> None:
        with unit_of_work_scope(self._session_factory) as session:
            session.add(models.ProjectView(project_id=project_id))

    def total(self) -> int:
        with unit_of_work_scope(self._session_factory) as session:
            return int(session.query(func.count(models.ProjectView.id)).scalar() or 0)

    def ranking(self) -> Sequence[ProjectViewStat]:
        with unit_of_work_scope(self._session_factory) as session:
            view_count = func.count(models.ProjectView.id).label("view_count")
            rows = (
                session.query(
                    models.Project.id,
                    models.Project.title,
                    models.Project.slug,
                    models.Project.category,
                    view_count,
                )
                .join(models.ProjectView, models.ProjectView.project_id == models.Project.id)
                .group_by(models.Project.id)
                .order_by(view_count.desc(), models.Project.id.asc())
                .all()
            )
            return [
                ProjectViewStat(
                    project_id=row.id,
                    title=row.title,
                    slug=row.slug,
                    category=row.category,
                    view_count=int(row.view_count),
                )
                for row in rows
            ]
