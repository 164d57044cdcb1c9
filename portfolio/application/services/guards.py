# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from portfolio.domain.exceptions import InvariantViolation
from portfolio.shared.errors import ValidationError


@contextmanager
def invariant_guard() -> Iterator[None]:
    """Re-raise entity invariant failures as a 400 ``ValidationError``."""

    try:
        yield
    except InvariantViolation as exc:
        field = exc.field or "unknown"
        raise ValidationError(
            str(exc),
            context={"fields": [field]},
        ) from exc


__all__ = ["invariant_guard"]
