# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from portfolio.application.services.credentials import CredentialStore
from portfolio.domain.content import DashboardSummary, ProjectViewStat
from portfolio.domain.content.repositories import (
    BlogPostRepository,
    ProjectRepository,
    ProjectViewRepository,
)
from portfolio.shared.errors import ValidationError
from portfolio.shared.logging import logger


class AnalyticsService:
    def __init__(
        self,
        *,
        projects: ProjectRepository,
        posts: BlogPostRepository,
        views: ProjectViewRepository,
        credentials: CredentialStore,
    ) -> None:
        self._projects = projects
        self._posts = posts
        self._views = views
        self._credentials = credentials

    def track_view(self, project_id: object) -> None:
        if isinstance(project_id, bool) or not isinstance(project_id, int | str):
            raise ValidationError("Invalid Project ID provided for tracking.")
        try:
            resolved = int(project_id)
        except ValueError as exc:
            raise ValidationError("Invalid Project ID provided for tracking.") from exc

        if resolved <= 0 or self._projects.find_by_id(resolved) is None:
            raise ValidationError("Invalid Project ID provided for tracking.")
        self._views.record(resolved)
        logger.debug(f"analytics.track: ok (project_id={resolved})")

    def summary(self, user_id: int) -> DashboardSummary:
        user = self._credentials.find_by_id(user_id)
        return DashboardSummary(
            total_views=self._views.total(),
            project_count=self._projects.count(),
            blog_count=self._posts.count(),
            last_login=user.last_login_at if user else None,
        )

    def ranking(self) -> Sequence[ProjectViewStat]:
        return self._views.ranking()


__all__ = ["AnalyticsService"]
