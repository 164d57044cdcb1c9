# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, jsonify

from portfolio.application.services.blog import BlogService
from portfolio.infrastructure.auth.gate import auth_required
from portfolio.interfaces.http.dto.content import BlogPostCreateDTO, BlogPostDTO, BlogPostUpdateDTO
from portfolio.interfaces.http.payload import parse_json


class BlogController:
    def __init__(self, *, service: BlogService) -> None:
        self._service = service

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("blog", __name__, url_prefix="/api/blog")
        bp.add_url_rule("", view_func=self.list_posts, methods=["GET"])
        bp.add_url_rule("", view_func=self.create, methods=["POST"])
        bp.add_url_rule("/<slug>", view_func=self.get, methods=["GET"])
        bp.add_url_rule("/<slug>", view_func=self.update, methods=["PUT"])
        bp.add_url_rule("/<slug>", view_func=self.delete, methods=["DELETE"])
        return bp

    def list_posts(self):
        return jsonify([BlogPostDTO.from_entity(p).to_wire() for p in self._service.list_posts()])

    def get(self, slug: str):
        return jsonify(BlogPostDTO.from_entity(self._service.get_post(slug)).to_wire())

    @auth_required
    def create(self):
        dto = parse_json(BlogPostCreateDTO)
        post = self._service.create_post(dto.to_fields())
        return jsonify(BlogPostDTO.from_entity(post).to_wire()), 201

    @auth_required
    def update(self, slug: str):
        dto = parse_json(BlogPostUpdateDTO)
        post = self._service.update_post(slug, dto.to_changes())
        return jsonify(BlogPostDTO.from_entity(post).to_wire())

    @auth_required
    def delete(self, slug: str):
        self._service.delete_post(slug)
        return jsonify({"message": "Blog post removed"})
