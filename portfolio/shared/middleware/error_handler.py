# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask

from portfolio.domain.exceptions import InvariantViolation
from portfolio.shared.errors import ValidationError, handle_app_error, register_error_handler
from portfolio.shared.logging import logger


def configure_error_handling(app: Flask) -> None:
    register_error_handler(app)

    @app.errorhandler(InvariantViolation)
    def _handle_invariant(exc: InvariantViolation):
        # entity rules that were not wrapped by a service guard
        logger.info(f"http.error: invariant {exc.field or 'unknown'} violated")
        return handle_app_error(
            ValidationError(str(exc), context={"fields": [exc.field or "unknown"]})
        )
