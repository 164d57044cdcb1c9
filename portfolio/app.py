# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask
from flask_cors import CORS

from portfolio.infrastructure.container import Container
from portfolio.infrastructure.container import container as default_container
from portfolio.infrastructure.db import init_db
from portfolio.shared.config import load_config
from portfolio.shared.logging import logger, setup_logging
from portfolio.shared.middleware.error_handler import configure_error_handling
from portfolio.shared.middleware.request_logger import configure_request_logging


def _add_security_headers(app: Flask) -> None:
    enable_hsts = load_config().security.enable_hsts

    @app.after_request
    def _security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Cross-Origin-Opener-Policy", "same-origin")
        resp.headers.setdefault(
            "Permissions-Policy",
            "geolocation=(), microphone=(), camera=(), payment=(), usb=()",
        )
        resp.headers.setdefault("X-Permitted-Cross-Domain-Policies", "none")

        if enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains; preload",
            )
        return resp


def create_app(container: Container | None = None) -> Flask:
    container = container or default_container
    config = container.config

    setup_logging(debug_mode=config.debug_logging)
    init_db()

    app = Flask(__name__)
    app.config.update(SECRET_KEY=config.secret_key)
    app.json.sort_keys = False

    configure_error_handling(app)
    configure_request_logging(app)
    _add_security_headers(app)

    CORS(
        app,
        resources={r"/api/*": {"origins": config.security.allowed_origins}},
        allow_headers=["Authorization", "Content-Type", "X-Request-ID"],
        expose_headers=["X-Request-ID"],
    )

    container.request_gate.init_app(app)

    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.projects_controller.as_blueprint())
    app.register_blueprint(container.blog_controller.as_blueprint())
    app.register_blueprint(container.skills_controller.as_blueprint())
    app.register_blueprint(container.contact_controller.as_blueprint())
    app.register_blueprint(container.analytics_controller.as_blueprint())
    app.register_blueprint(container.ai_controller.as_blueprint())

    logger.info(f"Flask app initialized (env={config.app_env})")
    return app


def run() -> None:
    config = load_config()
    app = create_app()
    app.run(host="0.0.0.0", port=config.port, debug=config.debug_logging)


if __name__ == "__main__":
    run()
