from __future__ import annotations

from userdesk.error_mapper import map_error
from userdesk.exceptions import (
    ApiError,
    ConflictError,
    NotFoundError,
    RateLimitError,
    ServerError,
    ValidationError,
)


def test_error_mapper_classes() -> None:
    assert isinstance(map_error(404, {"message": "missing"}), NotFoundError)
    assert isinstance(map_error(400, {"code": "BAD"}), ValidationError)
    assert isinstance(map_error(422, None), ValidationError)
    assert isinstance(map_error(409, {}), ConflictError)
    assert isinstance(map_error(429, {}), RateLimitError)
    assert isinstance(map_error(503, {}), ServerError)
    unknown = map_error(418, {})
    assert type(unknown) is ApiError


def test_error_mapper_defaults_and_str() -> None:
    err = map_error(500, None)

    assert err.code == "HTTP_ERROR"
    assert err.message == "Request failed"
    assert str(err) == "[500] HTTP_ERROR: Request failed"
