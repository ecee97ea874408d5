# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask
from flask_cors import CORS
from werkzeug.middleware.proxy_fix import ProxyFix

from bookshelf.infrastructure.container import Container
from bookshelf.shared.config import AppConfig, load_config
from bookshelf.shared.logging import logger, setup_logging
from bookshelf.shared.middleware.error_handler import configure_error_handling
from bookshelf.shared.middleware.request_logger import configure_request_logging


def create_app(config: AppConfig | None = None) -> Flask:
    config = config or load_config()
    setup_logging("DEBUG" if config.debug_logging else None, config.log_file)

    container = Container(config)

    app = Flask(__name__)
    app.config.update(SECRET_KEY=config.secret_key)
    if config.trust_proxy:
        # One reverse proxy in front; remote_addr becomes its X-Forwarded-For client.
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1)  # type: ignore[method-assign]
    app.extensions["bookshelf.container"] = container

    configure_error_handling(app, debug_mode=config.debug_logging)
    configure_request_logging(app, debug_mode=config.debug_logging)

    cors_kwargs: dict[str, object] = {
        "resources": {r"/api/*": {"origins": config.allowed_origins}}
    }
    CORS(app, **cors_kwargs)

    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.books_controller.as_blueprint())
    app.register_blueprint(container.favorites_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        return resp

    logger.info(
        f"Flask app initialized (users_file={config.users_file}, books_file={config.books_file}, "
        f"rate_limit={'off' if config.skip_rate_limit else 'on'}, trust_proxy={config.trust_proxy})"
    )
    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=5000, debug=True)
