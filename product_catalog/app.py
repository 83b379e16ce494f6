# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import socket

from flask import Flask
from flask_cors import CORS
from werkzeug.serving import make_server

from product_catalog.container import Container
from product_catalog.shared.config import AppConfig, load_config
from product_catalog.shared.logging import logger, setup_logging
from product_catalog.shared.middleware import (
    configure_error_handling,
    configure_request_logging,
)


def create_app(config: AppConfig | None = None) -> Flask:
    config = config or load_config()
    setup_logging(config.log_level, config.log_file)

    container = Container(config)

    app = Flask(__name__)
    app.config.update(SECRET_KEY=config.secret_key)
    app.extensions["container"] = container

    configure_error_handling(app, debug_mode=config.debug_logging)
    configure_request_logging(app, debug_mode=config.debug_logging)

    CORS(app, origins=config.security.allowed_origins)

    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.product_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")

        if config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains; preload",
            )

        return resp

    logger.info(f"Flask app initialized data_dir={config.data_dir}")
    return app


def _port_available(host: str, port: int) -> bool:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        try:
            sock.bind((host, port))
        except OSError:
            return False
    return True


def find_free_port(host: str, port: int, retries: int = 0) -> int:
    for candidate in range(port, port + retries + 1):
        if _port_available(host, candidate):
            return candidate
        logger.warning(f"Port {candidate} is in use, trying port {candidate + 1}...")
    raise OSError(f"no free port in {port}..{port + retries} on {host}")


def serve(app: Flask, host: str, port: int, retries: int = 0) -> None:
    """Serve ``app`` on the first free port starting at ``port``."""

    bound = find_free_port(host, port, retries)
    server = make_server(host, bound, app, threaded=True)
    logger.info(f"Server is running on http://{host}:{bound}")
    server.serve_forever()


def main() -> None:
    config = load_config()
    serve(create_app(config), config.host, config.port, config.port_retries)


if __name__ == "__main__":
    main()
