"""HTTP endpoints for pack calculation and pack-size management."""

from __future__ import annotations

import json
import os
from typing import Any

from flask import Flask, Response, jsonify, request, send_from_directory

from packcalc.logger import Logger
from packcalc.service import CalculatePacksService

__all__ = ["PackController", "create_app"]

ALLOWED_ORIGINS = frozenset({"http://localhost:3000", "http://localhost:63342"})
ALLOWED_METHODS = "GET,POST,OPTIONS"
ALLOWED_HEADERS = "Content-Type"
PREFLIGHT_MAX_AGE = 86400

_INVALID_REQUEST = "Invalid request"


class _BadRequest(ValueError):
    """The request body cannot be read."""


def _json_body() -> dict[str, Any]:
    if not request.mimetype.endswith("json"):
        raise _BadRequest(f"unsupported content type {request.mimetype!r}")
    try:
        payload = json.loads(request.get_data(as_text=True))
    except ValueError as exc:
        raise _BadRequest(str(exc)) from exc
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise _BadRequest("request body is not a JSON object")
    return payload


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _order_amount(payload: dict[str, Any]) -> int:
    value = payload.get("orderAmount")
    if value is None:
        return 0
    if not _is_int(value):
        raise _BadRequest("orderAmount must be an integer")
    return value


def _pack_sizes(payload: dict[str, Any]) -> list[int]:
    value = payload.get("packSizes")
    if value is None:
        return []
    if not isinstance(value, list) or not all(_is_int(item) for item in value):
        raise _BadRequest("packSizes must be a list of integers")
    return value


def _error(message: str, status: int) -> tuple[Response, int]:
    return jsonify({"error": message}), status


class PackController:
    """Request handlers that delegate to the pack service."""

    def __init__(self, service: CalculatePacksService, logger: Logger) -> None:
        self._service = service
        self._logger = logger

    def calculate_packs(self) -> tuple[Response, int]:
        """Handle POST /api/calculate."""
        self._logger.info("Received request to calculate packs")
        try:
            order_amount = _order_amount(_json_body())
        except _BadRequest as exc:
            self._logger.error("Failed to parse request body", exc)
            return _error(_INVALID_REQUEST, 400)

        try:
            packs, total = self._service.execute(order_amount)
        except Exception as exc:  # any service failure becomes a 500
            self._logger.error("Failed to calculate packs", exc)
            return _error(str(exc), 500)

        self._logger.info("Successfully calculated packs")
        body = {"packs": {str(size): count for size, count in packs.items()}, "totalItems": total}
        return jsonify(body), 200

    def update_pack_sizes(self) -> tuple[Response, int]:
        """Handle POST /api/pack-sizes."""
        self._logger.info("Received request to update pack sizes")
        try:
            sizes = _pack_sizes(_json_body())
        except _BadRequest as exc:
            self._logger.error("Failed to parse request body", exc)
            return _error(_INVALID_REQUEST, 400)

        try:
            self._service.update_pack_sizes(sizes)
        except Exception as exc:  # any service failure becomes a 500
            self._logger.error("Failed to update pack sizes", exc)
            return _error(str(exc), 500)

        self._logger.info("Successfully updated pack sizes")
        return jsonify({"message": "Pack sizes updated successfully"}), 200

    def get_pack_sizes(self) -> tuple[Response, int]:
        """Handle GET /api/pack-sizes."""
        self._logger.info("Received request to get pack sizes")
        try:
            sizes = self._service.get_pack_sizes()
        except Exception as exc:  # any service failure becomes a 500
            self._logger.error("Failed to get pack sizes", exc)
            return _error(str(exc), 500)

        self._logger.info("Successfully retrieved pack sizes")
        return jsonify({"packSizes": list(sizes)}), 200


def _is_preflight() -> bool:
    return request.method == "OPTIONS" and bool(request.headers.get("Access-Control-Request-Method"))


def _install_cors(app: Flask) -> None:
    @app.before_request
    def _preflight() -> Response | None:
        if _is_preflight():
            return Response(status=204)
        return None

    @app.after_request
    def _cors_headers(response: Response) -> Response:
        response.vary.add("Origin")
        origin = request.headers.get("Origin")
        if origin in ALLOWED_ORIGINS:
            response.headers["Access-Control-Allow-Origin"] = origin
        if _is_preflight():
            response.vary.add("Access-Control-Request-Method")
            response.vary.add("Access-Control-Request-Headers")
            response.headers["Access-Control-Allow-Methods"] = ALLOWED_METHODS
            response.headers["Access-Control-Allow-Headers"] = ALLOWED_HEADERS
            response.headers["Access-Control-Max-Age"] = str(PREFLIGHT_MAX_AGE)
        return response


def create_app(
    service: CalculatePacksService,
    logger: Logger,
    static_folder: str | os.PathLike[str] | None = None,
) -> Flask:
    """Build the web application with its API routes, CORS and optional static files."""
    folder = os.path.abspath(static_folder) if static_folder is not None else None
    app = Flask(__name__, static_folder=folder, static_url_path="" if folder else None)
    _install_cors(app)

    controller = PackController(service, logger)
    app.add_url_rule("/api/calculate", "calculate_packs", controller.calculate_packs, methods=["POST"])
    app.add_url_rule("/api/pack-sizes", "update_pack_sizes", controller.update_pack_sizes, methods=["POST"])
    app.add_url_rule("/api/pack-sizes", "get_pack_sizes", controller.get_pack_sizes, methods=["GET"])

    if folder is not None:
        def index() -> Response:
            return send_from_directory(folder, "index.html")

        app.add_url_rule("/", "index", index, methods=["GET"])

    return app