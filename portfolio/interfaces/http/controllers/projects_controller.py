# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from time import perf_counter

from flask import Blueprint, jsonify

from portfolio.application.services.projects import ProjectService
from portfolio.infrastructure.auth.gate import auth_required
from portfolio.interfaces.http.dto.content import ProjectCreateDTO, ProjectDTO, ProjectUpdateDTO
from portfolio.interfaces.http.payload import parse_json
from portfolio.shared.logging import logger


class ProjectsController:
    def __init__(self, *, service: ProjectService) -> None:
        self._service = service

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("projects", __name__, url_prefix="/api/projects")
        bp.add_url_rule("", view_func=self.list_projects, methods=["GET"])
        bp.add_url_rule("", view_func=self.create, methods=["POST"])
        bp.add_url_rule("/<slug>", view_func=self.get, methods=["GET"])
        bp.add_url_rule("/<slug>", view_func=self.update, methods=["PUT"])
        bp.add_url_rule("/<slug>", view_func=self.delete, methods=["DELETE"])
        return bp

    def list_projects(self):
        t0 = perf_counter()
        items = [ProjectDTO.from_entity(p).to_summary() for p in self._service.list_projects()]
        dt = (perf_counter() - t0) * 1000
        logger.info(f"projects.list: ok (n={len(items)}, dt_ms={dt:.0f})")
        return jsonify(items)

    def get(self, slug: str):
        project = self._service.get_project(slug)
        return jsonify(ProjectDTO.from_entity(project).to_wire())

    @auth_required
    def create(self):
        dto = parse_json(ProjectCreateDTO)
        project = self._service.create_project(dto.to_fields())
        return jsonify(ProjectDTO.from_entity(project).to_wire()), 201

    @auth_required
    def update(self, slug: str):
        dto = parse_json(ProjectUpdateDTO)
        project = self._service.update_project(slug, dto.to_changes())
        return jsonify(ProjectDTO.from_entity(project).to_wire())

    @auth_required
    def delete(self, slug: str):
        self._service.delete_project(slug)
        return jsonify({"message": "Project removed"})
