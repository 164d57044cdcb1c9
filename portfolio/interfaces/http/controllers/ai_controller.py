# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, jsonify

from portfolio.application.services.assistant import AssistantService
from portfolio.interfaces.http.dto.content import ChatRequestDTO
from portfolio.interfaces.http.payload import parse_json


class AIController:
    def __init__(self, *, service: AssistantService) -> None:
        self._service = service

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("ai", __name__, url_prefix="/api/ai")
        bp.add_url_rule("/chat", view_func=self.chat, methods=["POST"])
        return bp

    def chat(self):
        dto = parse_json(ChatRequestDTO)
        context = dto.context.model_dump() if dto.context else None
        text = self._service.answer(dto.query, context)
        return jsonify({"text": text})
