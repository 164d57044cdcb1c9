# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any

import httpx

from portfolio.application.services.assistant import AssistantPort
from portfolio.infrastructure.resilience import CircuitBreaker, CircuitOpenError, resilient_call
from portfolio.shared.errors import UpstreamServiceError
from portfolio.shared.logging import logger


def _extract_text(payload: Any) -> str | None:
    try:
        text = payload["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return None
    return text if isinstance(text, str) and text else None


class GeminiAssistant(AssistantPort):
    """``generateContent`` client for the Gemini REST API."""

    def __init__(
        self,
        *,
        api_key: str | None,
        model: str,
        base_url: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
        breaker: CircuitBreaker | None = None,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._breaker = breaker or CircuitBreaker.from_config("gemini")

    async def generate(self, system_prompt: str, user_prompt: str) -> str:
        if not self._api_key:
            logger.error("ai.gemini: GEMINI_API_KEY is not configured")
            raise UpstreamServiceError("AI service configuration error. API key is missing.")

        url = f"{self._base_url}/models/{self._model}:generateContent"
        payload = {
            "contents": [{"parts": [{"text": user_prompt}]}],
            "systemInstruction": {"parts": [{"text": system_prompt}]},
        }

        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as http:
            try:
                response = await resilient_call(
                    http.post,
                    url,
                    params={"key": self._api_key},
                    json=payload,
                    breaker=self._breaker,
                    timeout=self._timeout,
                    retry_on=(httpx.TransportError,),
                )
            except (httpx.HTTPError, TimeoutError, CircuitOpenError) as exc:
                logger.warning(f"ai.gemini: transport failure ({type(exc).__name__})")
                raise UpstreamServiceError("Failed to communicate with AI service.") from exc

        if response.status_code != 200:
            logger.error(
                f"ai.gemini: upstream status={response.status_code} body={response.text[:200]}"
            )
            raise UpstreamServiceError(
                f"AI service failed with status {response.status_code}. "
                "Check server logs for details.",
                context={"upstream_status": response.status_code},
            )

        try:
            text = _extract_text(response.json())
        except ValueError:
            text = None
        if text is None:
            logger.error("ai.gemini: response did not contain generated text")
            raise UpstreamServiceError("AI service returned an unexpected response format.")
        return text


__all__ = ["GeminiAssistant"]
