# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import BlogPost, ContactMessage, Project, ProjectViewStat, SkillCategory


class ProjectRepository(Protocol):
    def list_all(self) -> Sequence[Project]: ...
    def find_by_slug(self, slug: str) -> Project | None: ...
    def find_by_id(self, project_id: int) -> Project | None: ...
    def find_by_title(self, title: str) -> Project | None: ...
    def add(self, project: Project) -> Project: ...
    def update(self, slug: str, project: Project) -> Project: ...
    def delete(self, slug: str) -> bool: ...
    def count(self) -> int: ...


class BlogPostRepository(Protocol):
    def list_all(self) -> Sequence[BlogPost]: ...
    def find_by_slug(self, slug: str) -> BlogPost | None: ...
    def add(self, post: BlogPost) -> BlogPost: ...
    def update(self, slug: str, post: BlogPost) -> BlogPost: ...
    def delete(self, slug: str) -> bool: ...
    def count(self) -> int: ...


class SkillCategoryRepository(Protocol):
    def list_all(self) -> Sequence[SkillCategory]: ...
    def find_by_id(self, category_id: int) -> SkillCategory | None: ...
    def find_by_name(self, category: str) -> SkillCategory | None: ...
    def add(self, category: SkillCategory) -> SkillCategory: ...
    def update(self, category: SkillCategory) -> SkillCategory: ...
    def delete(self, category_id: int) -> bool: ...


class ContactMessageRepository(Protocol):
    def add(self, message: ContactMessage) -> ContactMessage: ...


class ProjectViewRepository(Protocol):
    def record(self, project_id: int) -> None: ...
    def total(self) -> int: ...
    def ranking(self) -> Sequence[ProjectViewStat]: ...
