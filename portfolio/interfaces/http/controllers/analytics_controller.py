# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, jsonify

from portfolio.application.services.analytics import AnalyticsService
from portfolio.infrastructure.auth.gate import auth_required, current_identity
from portfolio.interfaces.http.dto.content import (
    DashboardSummaryDTO,
    ProjectViewStatDTO,
    TrackViewDTO,
)
from portfolio.interfaces.http.payload import parse_json


class AnalyticsController:
    def __init__(self, *, service: AnalyticsService) -> None:
        self._service = service

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("analytics", __name__, url_prefix="/api/analytics")
        bp.add_url_rule("", view_func=self.summary, methods=["GET"])
        bp.add_url_rule("/details", view_func=self.details, methods=["GET"])
        bp.add_url_rule("/track", view_func=self.track, methods=["POST"])
        return bp

    def track(self):
        dto = parse_json(TrackViewDTO)
        self._service.track_view(dto.project_id)
        return jsonify({"message": "View tracked"})

    @auth_required
    def summary(self):
        summary = self._service.summary(current_identity().id)
        return jsonify(DashboardSummaryDTO.from_entity(summary).to_wire())

    @auth_required
    def details(self):
        return jsonify(
            [ProjectViewStatDTO.from_entity(s).to_wire() for s in self._service.ranking()]
        )
