# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from portfolio.application.services.guards import invariant_guard
from portfolio.domain.content import BlogPost
from portfolio.domain.content.repositories import BlogPostRepository
from portfolio.shared.errors import DuplicateResourceError, NotFoundError
from portfolio.shared.logging import logger
from portfolio.shared.utils.slug import normalize_slug, slugify


class BlogService:
    def __init__(self, *, posts: BlogPostRepository) -> None:
        self._posts = posts

    def list_posts(self) -> Sequence[BlogPost]:
        return self._posts.list_all()

    def get_post(self, slug: str) -> BlogPost:
        post = self._posts.find_by_slug(normalize_slug(slug))
        if post is None:
            raise NotFoundError("Blog post", slug)
        return post

    def create_post(self, fields: Mapping[str, Any]) -> BlogPost:
        values = dict(fields)
        if not values.get("slug"):
            values["slug"] = slugify(values.get("title") or "")
        with invariant_guard():
            post = BlogPost(id=0, **values)

        if self._posts.find_by_slug(post.slug):
            raise DuplicateResourceError("Blog post", "slug", post.slug)

        created = self._posts.add(post)
        logger.info(f"blog.create: ok (id={created.id}, slug={created.slug})")
        return created

    def update_post(self, slug: str, changes: Mapping[str, Any]) -> BlogPost:
        current = self.get_post(slug)
        with invariant_guard():
            updated = current.with_changes(**changes)

        if updated.slug != current.slug and self._posts.find_by_slug(updated.slug):
            raise DuplicateResourceError("Blog post", "slug", updated.slug)

        saved = self._posts.update(current.slug, updated)
        logger.info(f"blog.update: ok (id={saved.id}, slug={saved.slug})")
        return saved

    def delete_post(self, slug: str) -> None:
        if not self._posts.delete(normalize_slug(slug)):
            raise NotFoundError("Blog post", slug)
        logger.info(f"blog.delete: ok (slug={slug})")


__all__ = ["BlogService"]
