# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from portfolio.application.services.guards import invariant_guard
from portfolio.domain.content import ContactMessage
from portfolio.domain.content.repositories import ContactMessageRepository
from portfolio.shared.logging import logger


class ContactService:
    def __init__(self, *, messages: ContactMessageRepository) -> None:
        self._messages = messages

    def submit(self, name: str, email: str, message: str) -> ContactMessage:
        with invariant_guard():
            draft = ContactMessage(id=0, name=name, email=email, message=message)
        stored = self._messages.add(draft)
        logger.info(f"contact.submit: ok (id={stored.id})")
        return stored


__all__ = ["ContactService"]
