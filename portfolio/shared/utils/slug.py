# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import re
import unicodedata

_NON_WORD = re.compile(r"[^a-z0-9]+")


def slugify(value: str) -> str:
    """Lower-case, ASCII-only, hyphen-separated form of ``value``."""

    normalized = unicodedata.normalize("NFKD", value or "").encode("ascii", "ignore").decode()
    return _NON_WORD.sub("-", normalized.lower()).strip("-")


def normalize_slug(value: str) -> str:
    return (value or "").strip().lower()


__all__ = ["normalize_slug", "slugify"]
