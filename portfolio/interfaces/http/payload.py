# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import TypeVar

from flask import request
from pydantic import BaseModel, ValidationError

from portfolio.shared.errors.validation import raise_validation_error

M = TypeVar("M", bound=BaseModel)


def parse_json(model: type[M]) -> M:
    """Validate the request JSON body against ``model`` or raise a 400."""

    try:
        return model.model_validate(request.get_json(silent=True) or {})
    except ValidationError as exc:
        raise_validation_error(exc)
