"""Storefront Flask application."""

from __future__ import annotations

import logging
import time
from typing import Optional

from flask import Flask, g, jsonify, request
from werkzeug.exceptions import HTTPException

from .common.db import session as db
from .common.errors import StoreError
from .common.services import (
    AttributeService,
    CartService,
    CatalogService,
    CustomerService,
    OrderService,
    ShippingService,
    TaxService,
    TokenService,
)
from .config import AppConfig, load_env
from .routes import BLUEPRINTS
from .routes.converters import IdConverter
from .routes.responses import error_body, error_response, status_for


logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(StoreError)
    def handle_store_error(exc: StoreError):
        if status_for(exc) >= 500:
            logger.error("%s %s failed: %s", request.method, request.path, exc, exc_info=exc.__cause__ or exc)
        return error_response(exc)

    @app.errorhandler(HTTPException)
    def handle_http_error(exc: HTTPException):
        message = "Resource does not exist" if exc.code == 404 else exc.description
        return jsonify(error_body(f"HTTP_{exc.code}", message, exc.code)), exc.code

    @app.errorhandler(Exception)
    def handle_unexpected(exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        message = str(exc) if app.debug else "Internal server error"
        return jsonify(error_body("SRV_01", message, 500)), 500


def _register_request_logging(app: Flask) -> None:
    @app.before_request
    def start_timer():
        g.request_started = time.perf_counter()

    @app.after_request
    def log_request(response):
        started = g.pop("request_started", None)
        elapsed_ms = (time.perf_counter() - started) * 1000 if started is not None else 0.0
        logger.info("%s %s %s %.1fms", request.method, request.path, response.status_code, elapsed_ms)
        return response


def create_app(config: Optional[AppConfig] = None) -> Flask:
    config = config or load_env()
    _configure_logging(config.log_level)

    db.configure_engine(config.database_url)
    db.init_db()

    app = Flask(__name__)
    app.config["DEBUG"] = config.debug
    app.config["STOREFRONT_CONFIG"] = config

    components = {
        "token_service": TokenService(config.jwt_key, config.token_ttl_seconds, expires_in=config.token_expiry),
        "customer_service": CustomerService(),
        "catalog_service": CatalogService(
            page_size=config.page_size,
            max_page_size=config.max_page_size,
            description_length=config.description_length,
        ),
        "attribute_service": AttributeService(),
        "shipping_service": ShippingService(),
        "tax_service": TaxService(),
        "cart_service": CartService(),
        "order_service": OrderService(),
    }
    app.extensions["storefront_components"] = components

    app.url_map.converters["id"] = IdConverter
    for bp in BLUEPRINTS:
        app.register_blueprint(bp)

    _register_error_handlers(app)
    _register_request_logging(app)
    return app


def main() -> None:
    config = load_env()
    app = create_app(config)
    app.run(host=config.host, port=config.port, debug=config.debug)


if __name__ == "__main__":
    main()
