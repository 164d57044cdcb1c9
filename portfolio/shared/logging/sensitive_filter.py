# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Redaction applied to every log line before it reaches a sink."""

from __future__ import annotations

import re
from typing import Any

_REDACTED = "***REDACTED***"


def _rule(pattern: str, replacement: str, flags: int = 0) -> tuple[re.Pattern[str], str]:
    return re.compile(pattern, flags), replacement


# applied in order; earlier rules see the raw text
_RULES: list[tuple[re.Pattern[str], str]] = [
    # Gemini passes its API key as a query parameter
    _rule(r"([?&]key=)[\w\-]{20,}", rf"\1{_REDACTED}"),
    _rule(r"(api[_-]?key\s*[:=]\s*['\"]?)[\w\-]{20,}", rf"\1{_REDACTED}", re.IGNORECASE),
    _rule(r"((?:jwt|secret)[_-]?(?:secret|key)\s*[:=]\s*['\"]?)[^'\"\s]{6,}", rf"\1{_REDACTED}", re.IGNORECASE),
    # bearer tokens and bare JWTs
    _rule(r"(bearer\s+)[\w\-.]{20,}", rf"\1{_REDACTED}", re.IGNORECASE),
    _rule(r"(authorization\s*:\s*['\"]?)[^'\"]{10,}", rf"\1{_REDACTED}", re.IGNORECASE),
    _rule(r"(token\s*[:=]\s*['\"]?)[\w\-.]{20,}", rf"\1{_REDACTED}"),
    _rule(r"\beyJ[\w\-]+\.[\w\-]+\.[\w\-]+", "***JWT***"),
    # passwords
    _rule(r"((?:password|passwd|pwd)\s*[:=]\s*['\"]?)[^'\"]{6,}", rf"\1{_REDACTED}", re.IGNORECASE),
    # credentials embedded in database URLs
    _rule(r"((?:postgres(?:ql)?|mysql|mongodb)(?:\+\w+)?://[^:/\s]+:)[^@\s]+@", rf"\1{_REDACTED}@"),
    # e-mail local parts
    _rule(r"[\w.%+-]+@([\w-]+(?:\.[\w-]+)*\.[a-zA-Z]{2,})", r"***@\1"),
]


def sanitize_message(message: str) -> str:
    for pattern, replacement in _RULES:
        message = pattern.sub(replacement, message)
    return message


def sanitize_record(record: dict[str, Any]) -> bool:
    """Loguru filter: rewrites ``record["message"]`` in place and never drops the record."""

    if "message" in record:
        record["message"] = sanitize_message(record["message"])
    return True


__all__ = ["sanitize_message", "sanitize_record"]
