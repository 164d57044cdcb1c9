# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, jsonify

from portfolio.application.services.skills import SkillService
from portfolio.infrastructure.auth.gate import auth_required
from portfolio.interfaces.http.dto.content import (
    SkillCategoryCreateDTO,
    SkillCategoryDTO,
    SkillCategoryUpdateDTO,
)
from portfolio.interfaces.http.payload import parse_json


class SkillsController:
    def __init__(self, *, service: SkillService) -> None:
        self._service = service

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("skills", __name__, url_prefix="/api/skills")
        bp.add_url_rule("", view_func=self.list_categories, methods=["GET"])
        bp.add_url_rule("", view_func=self.create, methods=["POST"])
        bp.add_url_rule("/<int:category_id>", view_func=self.get, methods=["GET"])
        bp.add_url_rule("/<int:category_id>", view_func=self.update, methods=["PUT"])
        bp.add_url_rule("/<int:category_id>", view_func=self.delete, methods=["DELETE"])
        return bp

    def list_categories(self):
        return jsonify(
            [SkillCategoryDTO.from_entity(c).to_wire() for c in self._service.list_categories()]
        )

    def get(self, category_id: int):
        category = self._service.get_category(category_id)
        return jsonify(SkillCategoryDTO.from_entity(category).to_wire())

    @auth_required
    def create(self):
        dto = parse_json(SkillCategoryCreateDTO)
        category = self._service.create_category(dto.to_fields())
        return jsonify(SkillCategoryDTO.from_entity(category).to_wire()), 201

    @auth_required
    def update(self, category_id: int):
        dto = parse_json(SkillCategoryUpdateDTO)
        category = self._service.update_category(category_id, dto.to_changes())
        return jsonify(SkillCategoryDTO.from_entity(category).to_wire())

    @auth_required
    def delete(self, category_id: int):
        self._service.delete_category(category_id)
        return jsonify({"message": "Skill category removed"})
