# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import replace
from typing import Any

from portfolio.application.services.guards import invariant_guard
from portfolio.domain.content import SkillCategory
from portfolio.domain.content.repositories import SkillCategoryRepository
from portfolio.shared.errors import DuplicateResourceError, NotFoundError
from portfolio.shared.logging import logger


class SkillService:
    def __init__(self, *, categories: SkillCategoryRepository) -> None:
        self._categories = categories

    def list_categories(self) -> Sequence[SkillCategory]:
        return self._categories.list_all()

    def get_category(self, category_id: int) -> SkillCategory:
        category = self._categories.find_by_id(category_id)
        if category is None:
            raise NotFoundError("Skill category", category_id)
        return category

    def create_category(self, fields: Mapping[str, Any]) -> SkillCategory:
        with invariant_guard():
            category = SkillCategory(id=0, **fields)

        if self._categories.find_by_name(category.category):
            raise DuplicateResourceError("Skill category", "name", category.category)

        created = self._categories.add(category)
        logger.info(f"skills.create: ok (id={created.id})")
        return created

    def update_category(self, category_id: int, changes: Mapping[str, Any]) -> SkillCategory:
        current = self.get_category(category_id)
        with invariant_guard():
            updated = replace(current, **changes)

        if updated.category != current.category:
            clash = self._categories.find_by_name(updated.category)
            if clash is not None and clash.id != current.id:
                raise DuplicateResourceError("Skill category", "name", updated.category)

        saved = self._categories.update(updated)
        logger.info(f"skills.update: ok (id={saved.id})")
        return saved

    def delete_category(self, category_id: int) -> None:
        if not self._categories.delete(category_id):
            raise NotFoundError("Skill category", category_id)
        logger.info(f"skills.delete: ok (id={category_id})")


__all__ = ["SkillService"]
