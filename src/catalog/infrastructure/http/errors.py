"""Translate domain and HTTP errors into ``{"message": ...}`` responses."""

from __future__ import annotations

import logging

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from catalog.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    StoreError,
    ValidationError,
)

logger = logging.getLogger(__name__)

STATUS_BY_EXCEPTION: dict[type[DomainException], int] = {
    ValidationError: 400,
    EntityNotFoundError: 404,
    StoreError: 500,
}


def _error(message: str, status: int):
    return jsonify({"message": message}), status


def register_error_handlers(app: Flask) -> None:

    @app.errorhandler(DomainException)
    def handle_domain_error(exc: DomainException):
        status = 500
        for exc_type, code in STATUS_BY_EXCEPTION.items():
            if isinstance(exc, exc_type):
                status = code
                break
        if status >= 500:
            logger.error("Request failed: %s", exc)
        return _error(str(exc), status)

    @app.errorhandler(HTTPException)
    def handle_http_error(exc: HTTPException):
        return _error(exc.description or exc.name, exc.code or 500)
