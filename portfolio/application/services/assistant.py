# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Project-scoped question answering backed by a hosted language model."""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from typing import Any, Protocol

from portfolio.shared.errors import ValidationError
from portfolio.shared.logging import logger


class AssistantPort(Protocol):
    async def generate(self, system_prompt: str, user_prompt: str) -> str: ...


def build_system_prompt(owner: str, context: Mapping[str, Any] | None) -> str:
    context = context or {}
    title = context.get("title") or "Unknown Project"
    description = context.get("description") or "No description provided."
    return (
        f"You are a helpful assistant embedded in {owner}'s portfolio. "
        "Your goal is to answer questions about specific projects based ONLY on the provided "
        "context. Be concise, technical, and focus on explaining the engineering aspects. "
        "Do not mention information outside the context. Project Context:\n"
        f"Title: {title}\n"
        f"Description: {description}"
    )


class AssistantService:
    def __init__(self, *, port: AssistantPort, owner_name: str) -> None:
        self._port = port
        self._owner_name = owner_name

    async def answer_async(self, query: str, context: Mapping[str, Any] | None = None) -> str:
        if not query or not query.strip():
            raise ValidationError("Query is required for AI chat.", context={"fields": ["query"]})
        system_prompt = build_system_prompt(self._owner_name, context)
        text = await self._port.generate(system_prompt, f"Question about the project: {query}")
        logger.info(f"ai.chat: ok (chars={len(text)})")
        return text

    def answer(self, query: str, context: Mapping[str, Any] | None = None) -> str:
        return asyncio.run(self.answer_async(query, context))


__all__ = ["AssistantPort", "AssistantService", "build_system_prompt"]
