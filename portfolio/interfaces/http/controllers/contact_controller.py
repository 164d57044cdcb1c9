# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, jsonify

from portfolio.application.services.contact import ContactService
from portfolio.interfaces.http.dto.content import ContactReceiptDTO, ContactRequestDTO
from portfolio.interfaces.http.payload import parse_json


class ContactController:
    def __init__(self, *, service: ContactService) -> None:
        self._service = service

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("contact", __name__, url_prefix="/api/contact")
        bp.add_url_rule("", view_func=self.submit, methods=["POST"])
        return bp

    def submit(self):
        dto = parse_json(ContactRequestDTO)
        self._service.submit(dto.name, dto.email, dto.message)
        return jsonify(ContactReceiptDTO().to_wire()), 201
