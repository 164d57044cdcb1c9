# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify

from portfolio.infrastructure.health import health_report
from portfolio.infrastructure.observability import render_latest


class MiscController:
    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/", view_func=self.index, methods=["GET"])
        bp.add_url_rule("/api/health", view_func=self.health, methods=["GET"])
        bp.add_url_rule("/api/metrics", view_func=self.metrics, methods=["GET"])
        return bp

    def index(self):
        return Response("API is running...", mimetype="text/plain")

    def health(self):
        report = health_report()
        return jsonify(report), 200 if report["ok"] else 503

    def metrics(self):
        body, content_type = render_latest()
        return Response(body, content_type=content_type)
