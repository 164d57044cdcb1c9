# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from portfolio.application.services.guards import invariant_guard
from portfolio.domain.content import (
    DEFAULT_PROJECT_IMAGE,
    EngineeringDecision,
    InteractiveDemo,
    Project,
)
from portfolio.domain.content.repositories import ProjectRepository, ProjectViewRepository
from portfolio.shared.errors import DuplicateResourceError, NotFoundError
from portfolio.shared.logging import logger
from portfolio.shared.utils.slug import normalize_slug, slugify


def _nested_values(fields: Mapping[str, Any]) -> dict[str, Any]:
    values = dict(fields)
    if "engineering_decisions" in values:
        values["engineering_decisions"] = tuple(
            item if isinstance(item, EngineeringDecision) else EngineeringDecision(**item)
            for item in values["engineering_decisions"] or ()
        )
    if "interactive_demo" in values:
        demo = values["interactive_demo"]
        if demo is None:
            values["interactive_demo"] = InteractiveDemo()
        elif not isinstance(demo, InteractiveDemo):
            values["interactive_demo"] = InteractiveDemo(**demo)
    if "tech_stack" in values:
        values["tech_stack"] = tuple(values["tech_stack"] or ())
    if values.get("image_url") is None and "image_url" in values:
        values["image_url"] = DEFAULT_PROJECT_IMAGE
    return values


class ProjectService:
    def __init__(self, *, projects: ProjectRepository, views: ProjectViewRepository) -> None:
        self._projects = projects
        self._views = views

    def list_projects(self) -> Sequence[Project]:
        items = self._projects.list_all()
        logger.debug(f"projects.list: ok (n={len(items)})")
        return items

    def get_project(self, slug: str, *, record_view: bool = True) -> Project:
        project = self._projects.find_by_slug(normalize_slug(slug))
        if project is None:
            raise NotFoundError("Project", slug)
        if record_view:
            try:
                self._views.record(project.id)
            except Exception:
                logger.exception(f"projects.view: failed to record (project_id={project.id})")
        return project

    def create_project(self, fields: Mapping[str, Any]) -> Project:
        values = dict(fields)
        if not values.get("slug"):
            values["slug"] = slugify(values.get("title") or "")
        with invariant_guard():
            project = Project(id=0, **_nested_values(values))

        if self._projects.find_by_slug(project.slug):
            raise DuplicateResourceError("Project", "slug", project.slug)
        if self._projects.find_by_title(project.title):
            raise DuplicateResourceError("Project", "title", project.title)

        created = self._projects.add(project)
        logger.info(f"projects.create: ok (id={created.id}, slug={created.slug})")
        return created

    def update_project(self, slug: str, changes: Mapping[str, Any]) -> Project:
        slug = normalize_slug(slug)
        current = self._projects.find_by_slug(slug)
        if current is None:
            raise NotFoundError("Project", slug)

        with invariant_guard():
            updated = current.with_changes(**_nested_values(changes))

        if updated.slug != current.slug and self._projects.find_by_slug(updated.slug):
            raise DuplicateResourceError("Project", "slug", updated.slug)
        if updated.title != current.title:
            clash = self._projects.find_by_title(updated.title)
            if clash is not None and clash.id != current.id:
                raise DuplicateResourceError("Project", "title", updated.title)

        saved = self._projects.update(slug, updated)
        logger.info(f"projects.update: ok (id={saved.id}, slug={saved.slug})")
        return saved

    def delete_project(self, slug: str) -> None:
        if not self._projects.delete(normalize_slug(slug)):
            raise NotFoundError("Project", slug)
        logger.info(f"projects.delete: ok (slug={slug})")


__all__ = ["ProjectService"]
