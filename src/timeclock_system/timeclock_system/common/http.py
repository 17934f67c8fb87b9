"""JSON helpers shared by the Flask controllers."""

from __future__ import annotations

import logging
from datetime import date, datetime, time
from enum import Enum
from typing import Any, Optional, Type, TypeVar

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from ..core.exceptions import (
    BlockingInconsistencyError,
    ConfigurationError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from .datetime_utils import parse_iso_date, parse_iso_datetime

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)


def json_body() -> dict:
    body = request.get_json(silent=True)
    if body is None:
        return {}
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    return body


def date_value(value: Any, field_name: str, *, default: Optional[date] = None) -> date:
    if value in (None, ""):
        if default is not None:
            return default
        raise ValidationError(f"{field_name} is required")
    try:
        return parse_iso_date(str(value))
    except ValueError as e:
        raise ValidationError(f"{field_name} must be YYYY-MM-DD") from e


def datetime_value(value: Any, field_name: str) -> datetime:
    if value in (None, ""):
        raise ValidationError(f"{field_name} is required")
    try:
        return parse_iso_datetime(str(value))
    except ValueError as e:
        raise ValidationError(f"{field_name} must be an ISO datetime") from e


def time_value(value: Any, field_name: str) -> Optional[time]:
    if value in (None, ""):
        return None
    try:
        return time.fromisoformat(str(value))
    except ValueError as e:
        raise ValidationError(f"{field_name} must be HH:MM") from e


def enum_value(enum_cls: Type[E], value: Any, field_name: str, *, required: bool = True) -> Optional[E]:
    if value in (None, ""):
        if required:
            raise ValidationError(f"{field_name} is required")
        return None
    try:
        return enum_cls(str(value).upper())
    except ValueError as e:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValidationError(f"{field_name} must be one of: {allowed}") from e


def int_value(value: Any, field_name: str, *, default: Optional[int] = None) -> int:
    if value in (None, ""):
        if default is not None:
            return default
        raise ValidationError(f"{field_name} is required")
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{field_name} must be an integer") from e


def to_json(value: Any) -> Any:
    """Dates, times and enums as strings; dataclass dicts pass through."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, dict):
        return {k: to_json(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json(v) for v in value]
    return value


def register_error_handlers(app: Flask) -> None:
    def _error(message: str, status: int, **extra):
        return jsonify({"success": False, "message": message, **extra}), status

    @app.errorhandler(ValidationError)
    def _validation(e: ValidationError):
        return _error(str(e), 400)

    @app.errorhandler(NotFoundError)
    def _not_found(e: NotFoundError):
        return _error(str(e), 404)

    @app.errorhandler(BlockingInconsistencyError)
    def _blocking(e: BlockingInconsistencyError):
        return _error(str(e), 409, inconsistencies=[i.to_dict() for i in e.inconsistencies])

    @app.errorhandler(ConfigurationError)
    def _configuration(e: ConfigurationError):
        return _error(str(e), 409)

    @app.errorhandler(DomainError)
    def _domain(e: DomainError):
        return _error(str(e), 400)

    @app.errorhandler(Exception)
    def _unexpected(e: Exception):
        if isinstance(e, HTTPException):
            return _error(e.description or e.name, e.code or 500)
        logger.exception("unhandled error")
        return _error("Internal server error", 500)
