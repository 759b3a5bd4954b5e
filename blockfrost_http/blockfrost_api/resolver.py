"""
Turn raw response bodies into typed results or ``BlockfrostError``.

The success shape is tried first and the API's error envelope second. The
HTTP status code is not consulted: the two shapes have disjoint required
fields, so the body alone decides.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Type, TypeVar

from pydantic import TypeAdapter, ValidationError

from blockfrost_http.errors import SerializationError, ServiceError
from blockfrost_http.blockfrost_api.models import ServiceErrorPayload

T = TypeVar("T")


@lru_cache(maxsize=None)
def _adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def resolve_response(payload: bytes, target: Type[T]) -> T:
    """
    Deserialize ``payload`` as ``target``.

    Raises:
        ServiceError: the body is the API's ``{status_code, error, message}`` envelope.
        SerializationError: the body matches neither shape.
    """
    try:
        return _adapter(target).validate_json(payload)
    except ValidationError:
        pass

    try:
        envelope = _adapter(ServiceErrorPayload).validate_json(payload)
    except ValidationError as exc:
        raise SerializationError(str(exc)) from exc
    raise ServiceError(envelope.status_code, envelope.error, envelope.message)
